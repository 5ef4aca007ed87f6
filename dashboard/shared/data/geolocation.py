"""Host geolocation capabilities.

A server-side dashboard has no browser position API, so the "current
position" comes from configuration: a configured home coordinate acts as the
device position, no coordinate means the capability is unsupported, and
``SKYSYNC_GEOLOCATION_ALLOWED=false`` behaves like a refused permission.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import DashboardSettings, get_settings
from .errors import GeolocationDeniedError, GeolocationUnsupportedError
from .types import Location


class GeolocationProvider(ABC):
    """Resolves the caller's current position."""

    @abstractmethod
    async def locate(self) -> Location: ...


class FixedGeolocation(GeolocationProvider):
    """Always reports the same coordinates."""

    def __init__(self, lat: float, lon: float, label: str | None = None) -> None:
        self._location = Location(lat, lon, label)

    async def locate(self) -> Location:
        return self._location


class UnsupportedGeolocation(GeolocationProvider):
    async def locate(self) -> Location:
        raise GeolocationUnsupportedError("No geolocation source is configured")


class DeniedGeolocation(GeolocationProvider):
    async def locate(self) -> Location:
        raise GeolocationDeniedError("Geolocation is disabled by configuration")


def get_geolocation_provider(settings: DashboardSettings | None = None) -> GeolocationProvider:
    """Return the geolocation provider described by the settings."""
    settings = settings or get_settings()
    if settings.home_latitude is None or settings.home_longitude is None:
        return UnsupportedGeolocation()
    if not settings.geolocation_allowed:
        return DeniedGeolocation()
    return FixedGeolocation(settings.home_latitude, settings.home_longitude, settings.home_label)
