"""Open-Meteo + Nominatim repository implementation."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Callable

from skysync import AsyncNominatimClient, AsyncOpenMeteoClient, SkySyncError
from skysync.models import Forecast, Place, ReversePlace

from ..api_logging import log_api_call
from ..config import DashboardSettings, get_settings
from ..formatters import format_coordinates
from .base import WeatherRepository
from .errors import WeatherDataError
from .types import Condition, Location, WeatherPoint, WeatherSnapshot

logger = logging.getLogger(__name__)


# ── Mapping helpers ──────────────────────────────────────────────────────────


def _hour_label(iso_time: str) -> str:
    """Convert an ISO local time such as '2024-05-01T13:00' to '13:00'."""
    try:
        return datetime.fromisoformat(iso_time).strftime("%H:%M")
    except ValueError:
        return iso_time


def _value_at(values: list | None, index: int) -> float:
    if values is None or values[index] is None:
        return 0.0
    return float(values[index])


def snapshot_from_forecast(
    forecast: Forecast, location_label: str, fetched_at: datetime,
) -> WeatherSnapshot:
    """Zip an Open-Meteo forecast into a snapshot with one point per hourly sample."""
    current = forecast.current
    if current is None or current.temperature_2m is None:
        raise WeatherDataError("Forecast response has no current conditions")

    hourly_forecast: list[WeatherPoint] = []
    hourly = forecast.hourly
    if hourly is not None:
        for i, time in enumerate(hourly.time):
            code = hourly.weather_code[i] if hourly.weather_code is not None else None
            hourly_forecast.append(WeatherPoint(
                timestamp=_hour_label(time),
                temperature=_value_at(hourly.temperature_2m, i),
                humidity=_value_at(hourly.relative_humidity_2m, i),
                pressure=_value_at(hourly.surface_pressure, i),
                wind_speed=_value_at(hourly.wind_speed_10m, i),
                rainfall=_value_at(hourly.precipitation, i),
                condition=Condition.from_wmo_code(code),
            ))

    return WeatherSnapshot(
        temperature=current.temperature_2m,
        humidity=current.relative_humidity_2m or 0.0,
        pressure=current.surface_pressure or 0.0,
        wind_speed=current.wind_speed_10m or 0.0,
        precipitation=current.precipitation or 0.0,
        condition=Condition.from_wmo_code(current.weather_code),
        location_label=location_label,
        timestamp=fetched_at.strftime("%H:%M"),
        hourly_forecast=tuple(hourly_forecast),
    )


def location_from_place(place: Place) -> Location:
    """Turn a forward geocoding match into a Location with a short label."""
    return Location(lat=place.lat, lon=place.lon, label=place.short_name)


def label_from_reverse(place: ReversePlace, lat: float, lon: float) -> str:
    """Derive a short place label, falling back to formatted coordinates."""
    name = place.address.place_name()
    country = place.address.country
    if name and country:
        return f"{name}, {country}"
    if name:
        return name
    if place.display_name:
        return ",".join(place.display_name.split(",")[:2])
    return format_coordinates(lat, lon)


# ── Repository class ─────────────────────────────────────────────────────────


class OpenMeteoRepository(WeatherRepository):
    """Live weather from Open-Meteo, place names from Nominatim."""

    def __init__(
        self,
        settings: DashboardSettings | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._settings = settings or get_settings()
        self._clock = clock

    def _weather_client(self) -> AsyncOpenMeteoClient:
        return AsyncOpenMeteoClient(
            base_url=self._settings.open_meteo_base_url,
            timeout=self._settings.http_timeout_seconds,
        )

    def _geocoder(self) -> AsyncNominatimClient:
        return AsyncNominatimClient(
            base_url=self._settings.nominatim_base_url,
            timeout=self._settings.http_timeout_seconds,
            user_agent=self._settings.user_agent,
            language=self._settings.language,
        )

    async def _fetch_forecast(self, lat: float, lon: float) -> Forecast:
        async with self._weather_client() as om:
            return await om.forecast(lat, lon)

    async def _resolve_label(self, lat: float, lon: float, label: str | None) -> str:
        if label:
            return label
        return await self.reverse_label(lat, lon)

    @log_api_call
    async def fetch_live_weather(
        self, lat: float, lon: float, label: str | None = None,
    ) -> WeatherSnapshot:
        try:
            forecast, location_label = await asyncio.gather(
                self._fetch_forecast(lat, lon),
                self._resolve_label(lat, lon, label),
            )
        except SkySyncError as exc:
            raise WeatherDataError(
                f"Failed to fetch weather for {format_coordinates(lat, lon)}: {exc}",
            ) from exc
        return snapshot_from_forecast(forecast, location_label, self._clock())

    @log_api_call
    async def geocode(self, query: str) -> Location | None:
        query = query.strip()
        if not query:
            return None
        try:
            async with self._geocoder() as geo:
                matches = await geo.search(query, limit=1)
        except SkySyncError as exc:
            logger.warning("Geocoding failed for %r: %s", query, exc)
            return None
        if not matches:
            return None
        return location_from_place(matches[0])

    @log_api_call
    async def reverse_label(self, lat: float, lon: float) -> str:
        try:
            async with self._geocoder() as geo:
                place = await geo.reverse(lat, lon)
        except SkySyncError as exc:
            logger.warning("Reverse geocoding failed for (%s, %s): %s", lat, lon, exc)
            return format_coordinates(lat, lon)
        return label_from_reverse(place, lat, lon)
