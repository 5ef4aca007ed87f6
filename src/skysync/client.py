"""Public client classes for the Open-Meteo and Nominatim APIs."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from pydantic import TypeAdapter

from skysync._http import DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from skysync._params import Coordinates, build_query_params
from skysync.exceptions import SkySyncValidationError
from skysync.models.forecast import Forecast
from skysync.models.place import Place, ReversePlace

OPEN_METEO_BASE_URL = "https://api.open-meteo.com/v1"
NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org"
DEFAULT_USER_AGENT = "SkySync-AI-Weather-App"

T = TypeVar("T")

WEATHER_FIELDS: tuple[str, ...] = (
    "temperature_2m",
    "relative_humidity_2m",
    "surface_pressure",
    "wind_speed_10m",
    "precipitation",
    "weather_code",
)


def _validate(model_type: type[T], data: Any) -> T:
    """Validate a JSON payload against a Pydantic model or container type."""
    try:
        adapter = TypeAdapter(model_type)
        return adapter.validate_python(data)
    except Exception as exc:
        name = getattr(model_type, "__name__", str(model_type))
        raise SkySyncValidationError(
            f"Failed to validate {name} response: {exc}"
        ) from exc


def _forecast_params(
    latitude: float,
    longitude: float,
    current: Sequence[str],
    hourly: Sequence[str],
    forecast_days: int,
    timezone: str,
) -> list[tuple[str, str]]:
    return build_query_params(
        location=Coordinates(latitude, longitude),
        current=tuple(current),
        hourly=tuple(hourly),
        forecast_days=forecast_days,
        timezone=timezone,
    )


def _search_params(query: str, limit: int) -> list[tuple[str, str]]:
    return build_query_params(format="json", q=query, limit=limit)


def _reverse_params(lat: float, lon: float, zoom: int) -> list[tuple[str, str]]:
    return (
        build_query_params(format="json")
        + Coordinates(lat, lon).to_params("lat", "lon")
        + build_query_params(zoom=zoom, addressdetails=True)
    )


def _nominatim_headers(user_agent: str, language: str) -> dict[str, str]:
    return {"User-Agent": user_agent, "Accept-Language": language}


class OpenMeteoClient:
    """Synchronous client for the Open-Meteo forecast API.

    Usage:
        with OpenMeteoClient() as om:
            forecast = om.forecast(51.51, -0.13)
            print(forecast.current.temperature_2m)
    """

    def __init__(
        self,
        base_url: str = OPEN_METEO_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> OpenMeteoClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def forecast(
        self,
        latitude: float,
        longitude: float,
        *,
        current: Sequence[str] = WEATHER_FIELDS,
        hourly: Sequence[str] = WEATHER_FIELDS,
        forecast_days: int = 1,
        timezone: str = "auto",
    ) -> Forecast:
        """Get current conditions and the hourly forecast for a coordinate."""
        params = _forecast_params(latitude, longitude, current, hourly, forecast_days, timezone)
        data = self._transport.get("/forecast", params)
        return _validate(Forecast, data)


class AsyncOpenMeteoClient:
    """Asynchronous client for the Open-Meteo forecast API.

    Usage:
        async with AsyncOpenMeteoClient() as om:
            forecast = await om.forecast(51.51, -0.13)
    """

    def __init__(
        self,
        base_url: str = OPEN_METEO_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncOpenMeteoClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def forecast(
        self,
        latitude: float,
        longitude: float,
        *,
        current: Sequence[str] = WEATHER_FIELDS,
        hourly: Sequence[str] = WEATHER_FIELDS,
        forecast_days: int = 1,
        timezone: str = "auto",
    ) -> Forecast:
        """Get current conditions and the hourly forecast for a coordinate."""
        params = _forecast_params(latitude, longitude, current, hourly, forecast_days, timezone)
        data = await self._transport.get("/forecast", params)
        return _validate(Forecast, data)


class NominatimClient:
    """Synchronous client for the Nominatim geocoding API.

    Nominatim's usage policy requires an identifying User-Agent.

    Usage:
        with NominatimClient() as geo:
            matches = geo.search("Lisbon")
            place = geo.reverse(38.72, -9.14)
    """

    def __init__(
        self,
        base_url: str = NOMINATIM_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        language: str = "en",
    ) -> None:
        self._transport = SyncTransport(
            base_url=base_url,
            timeout=timeout,
            headers=_nominatim_headers(user_agent, language),
        )

    def __enter__(self) -> NominatimClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def search(self, query: str, limit: int = 1) -> list[Place]:
        """Forward-geocode a free-text query. No match is an empty list."""
        data = self._transport.get("/search", _search_params(query, limit))
        return _validate(list[Place], data)

    def reverse(self, lat: float, lon: float, zoom: int = 10) -> ReversePlace:
        """Reverse-geocode a coordinate into an address breakdown."""
        data = self._transport.get("/reverse", _reverse_params(lat, lon, zoom))
        return _validate(ReversePlace, data)


class AsyncNominatimClient:
    """Asynchronous client for the Nominatim geocoding API.

    Usage:
        async with AsyncNominatimClient() as geo:
            place = await geo.reverse(38.72, -9.14)
    """

    def __init__(
        self,
        base_url: str = NOMINATIM_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        language: str = "en",
    ) -> None:
        self._transport = AsyncTransport(
            base_url=base_url,
            timeout=timeout,
            headers=_nominatim_headers(user_agent, language),
        )

    async def __aenter__(self) -> AsyncNominatimClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def search(self, query: str, limit: int = 1) -> list[Place]:
        """Forward-geocode a free-text query. No match is an empty list."""
        data = await self._transport.get("/search", _search_params(query, limit))
        return _validate(list[Place], data)

    async def reverse(self, lat: float, lon: float, zoom: int = 10) -> ReversePlace:
        """Reverse-geocode a coordinate into an address breakdown."""
        data = await self._transport.get("/reverse", _reverse_params(lat, lon, zoom))
        return _validate(ReversePlace, data)
