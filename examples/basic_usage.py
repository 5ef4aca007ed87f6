"""Basic usage examples for the SkySync client."""

from skysync import NominatimClient, OpenMeteoClient


def main() -> None:
    with NominatimClient() as geo:
        # Forward geocoding: free text to coordinates
        print("=== Search: Lisbon ===")
        matches = geo.search("Lisbon")
        if not matches:
            print("  No match found.")
            return
        place = matches[0]
        print(f"  {place.short_name} ({place.lat:.4f}, {place.lon:.4f})")

        # Reverse geocoding: coordinates to an address breakdown
        print("\n=== Reverse ===")
        reverse = geo.reverse(place.lat, place.lon)
        print(f"  {reverse.address.place_name()}, {reverse.address.country}")

    with OpenMeteoClient() as om:
        print("\n=== Current conditions ===")
        forecast = om.forecast(place.lat, place.lon)
        current = forecast.current
        if current is not None:
            print(f"  {current.temperature_2m}°C, {current.relative_humidity_2m}% humidity")
            print(f"  {current.surface_pressure} hPa, wind {current.wind_speed_10m} km/h")

        if forecast.hourly is not None and forecast.hourly.temperature_2m:
            print(f"\n=== Next {len(forecast.hourly)} hours ===")
            for time, temp in list(zip(forecast.hourly.time, forecast.hourly.temperature_2m))[:6]:
                print(f"  {time}: {temp}°C")


if __name__ == "__main__":
    main()
