"""Abstract base repository for weather data access."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .types import Location, WeatherSnapshot


class WeatherRepository(ABC):
    """Source-agnostic interface for live weather and geocoding."""

    @abstractmethod
    async def fetch_live_weather(
        self, lat: float, lon: float, label: str | None = None,
    ) -> WeatherSnapshot: ...

    @abstractmethod
    async def geocode(self, query: str) -> Location | None: ...

    @abstractmethod
    async def reverse_label(self, lat: float, lon: float) -> str: ...
