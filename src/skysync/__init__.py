"""SkySync — Typed Python client for the Open-Meteo and Nominatim APIs."""

from skysync._params import Coordinates
from skysync.client import (
    AsyncNominatimClient,
    AsyncOpenMeteoClient,
    NominatimClient,
    OpenMeteoClient,
)
from skysync.exceptions import (
    SkySyncAPIError,
    SkySyncConnectionError,
    SkySyncDecodeError,
    SkySyncError,
    SkySyncTimeoutError,
    SkySyncValidationError,
)

__all__ = [
    "AsyncNominatimClient",
    "AsyncOpenMeteoClient",
    "Coordinates",
    "NominatimClient",
    "OpenMeteoClient",
    "SkySyncAPIError",
    "SkySyncConnectionError",
    "SkySyncDecodeError",
    "SkySyncError",
    "SkySyncTimeoutError",
    "SkySyncValidationError",
]

__version__ = "0.1.0"
