"""Data layer — repository factory and re-exports."""

from __future__ import annotations

from .base import WeatherRepository
from .errors import (
    GeolocationDeniedError,
    GeolocationError,
    GeolocationUnsupportedError,
    WeatherDataError,
)
from .geolocation import GeolocationProvider, get_geolocation_provider
from .types import Condition, Location, PredictionResult, Season, WeatherPoint, WeatherSnapshot


def get_repository() -> WeatherRepository:
    """Return the live weather repository."""
    from .openmeteo_repo import OpenMeteoRepository

    return OpenMeteoRepository()


__all__ = [
    "Condition",
    "GeolocationDeniedError",
    "GeolocationError",
    "GeolocationProvider",
    "GeolocationUnsupportedError",
    "Location",
    "PredictionResult",
    "Season",
    "WeatherDataError",
    "WeatherPoint",
    "WeatherRepository",
    "WeatherSnapshot",
    "get_geolocation_provider",
    "get_repository",
]
