"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import pytest

OPEN_METEO_URL = "https://api.open-meteo.com/v1"
NOMINATIM_URL = "https://nominatim.openstreetmap.org"


def _hourly_times() -> list[str]:
    return [f"2024-05-01T{h:02d}:00" for h in range(24)]


SAMPLE_FORECAST = {
    "latitude": 38.72,
    "longitude": -9.14,
    "generationtime_ms": 0.08,
    "utc_offset_seconds": 3600,
    "timezone": "Europe/Lisbon",
    "timezone_abbreviation": "WEST",
    "elevation": 48.0,
    "current_units": {"temperature_2m": "°C"},
    "current": {
        "time": "2024-05-01T13:45",
        "interval": 900,
        "temperature_2m": 21.4,
        "relative_humidity_2m": 58,
        "surface_pressure": 1012.3,
        "wind_speed_10m": 14.8,
        "precipitation": 0.0,
        "weather_code": 2,
    },
    "hourly": {
        "time": _hourly_times(),
        "temperature_2m": [14.0 + h * 0.5 for h in range(24)],
        "relative_humidity_2m": [90 - h * 2 for h in range(24)],
        "surface_pressure": [1012.0 + (h % 3) * 0.5 for h in range(24)],
        "wind_speed_10m": [10.0 + h * 0.2 for h in range(24)],
        "precipitation": [0.4 if h in (3, 4) else 0.0 for h in range(24)],
        "weather_code": [61 if h in (3, 4) else 2 for h in range(24)],
    },
}

SAMPLE_PLACE = {
    "place_id": 307548826,
    "licence": "Data © OpenStreetMap contributors, ODbL 1.0.",
    "osm_type": "relation",
    "osm_id": 5400890,
    "lat": "38.7077507",
    "lon": "-9.1365919",
    "class": "boundary",
    "type": "administrative",
    "place_rank": 14,
    "importance": 0.81,
    "addresstype": "city",
    "name": "Lisbon",
    "display_name": "Lisbon, Lisboa, Portugal",
}

SAMPLE_REVERSE = {
    "place_id": 307548826,
    "lat": "38.7077507",
    "lon": "-9.1365919",
    "display_name": "Lisbon, Lisboa, Portugal",
    "address": {
        "city": "Lisbon",
        "county": "Lisboa",
        "state": "Lisboa",
        "country": "Portugal",
        "country_code": "pt",
    },
}

SAMPLE_REVERSE_ERROR = {"error": "Unable to geocode"}


@pytest.fixture
def open_meteo_url() -> str:
    return OPEN_METEO_URL


@pytest.fixture
def nominatim_url() -> str:
    return NOMINATIM_URL
