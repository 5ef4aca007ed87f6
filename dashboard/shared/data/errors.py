"""Source-agnostic data layer errors."""

from __future__ import annotations


class WeatherDataError(Exception):
    """Weather fetch failed. The refresh controller catches only this and the geolocation errors."""


class GeolocationError(Exception):
    """The caller's position could not be resolved."""


class GeolocationUnsupportedError(GeolocationError):
    """No geolocation capability is available on this host."""


class GeolocationDeniedError(GeolocationError):
    """Geolocation was refused or timed out."""
