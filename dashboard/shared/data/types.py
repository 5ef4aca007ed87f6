"""Data contracts for the SkySync dashboard data layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Condition(str, Enum):
    """Coarse categorical weather state."""

    SUNNY = "Sunny"
    CLOUDY = "Cloudy"
    RAINY = "Rainy"
    STORM = "Storm"

    @classmethod
    def from_wmo_code(cls, code: int | None) -> Condition:
        """Map a WMO weather code onto a condition. Unknown codes are Cloudy."""
        if code is None:
            return cls.CLOUDY
        if code == 0:
            return cls.SUNNY
        if 1 <= code <= 3:
            return cls.CLOUDY
        if code >= 95:
            return cls.STORM
        if code >= 51:
            return cls.RAINY
        return cls.CLOUDY


class Season(str, Enum):
    """Seasonal context offered by the inference form."""

    SUMMER = "Summer"
    WINTER = "Winter"
    MONSOON = "Monsoon"
    SPRING_AUTUMN = "Spring/Autumn"


@dataclass(frozen=True)
class Location:
    lat: float
    lon: float
    label: str | None = None


@dataclass(frozen=True)
class WeatherPoint:
    timestamp: str  # local hour, HH:MM
    temperature: float
    humidity: float
    pressure: float
    wind_speed: float
    rainfall: float
    condition: Condition


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current readings plus the hourly forecast for one day.

    Replaced wholesale on every successful fetch, never mutated.
    """

    temperature: float
    humidity: float
    pressure: float
    wind_speed: float
    precipitation: float
    condition: Condition
    location_label: str
    timestamp: str  # local fetch time, HH:MM
    hourly_forecast: tuple[WeatherPoint, ...]


@dataclass(frozen=True)
class PredictionResult:
    temperature: float
    humidity: float
    rainfall: float
    wind_speed: float
    condition: Condition
    confidence: float  # probability in [0, 1]
    reasoning: str
