"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)

from shared.data.types import Condition, WeatherPoint, WeatherSnapshot  # noqa: E402


# ── Log isolation ────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def api_log_dir(tmp_path):
    """Redirect the API call log to tmp_path and reset the cached logger."""
    import shared.api_logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger("skysync_dashboard.api")
    named_logger.handlers.clear()

    mod._logger = None
    mod._LOG_DIR = str(tmp_path)
    mod._LOG_FILE = str(tmp_path / "api_calls.log")

    yield tmp_path

    # Close file handlers to release file locks (important on Windows)
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file


# ── Sample data fixtures ─────────────────────────────────────────────────────


def _make_point(
    hour: int,
    temperature: float = 20.0,
    humidity: float = 60.0,
    pressure: float = 1013.0,
    wind_speed: float = 10.0,
    rainfall: float = 0.0,
    condition: Condition = Condition.CLOUDY,
) -> WeatherPoint:
    return WeatherPoint(
        timestamp=f"{hour:02d}:00",
        temperature=temperature,
        humidity=humidity,
        pressure=pressure,
        wind_speed=wind_speed,
        rainfall=rainfall,
        condition=condition,
    )


def _make_snapshot(
    temperature: float = 21.4,
    location_label: str = "Lisbon, Portugal",
    condition: Condition = Condition.CLOUDY,
    timestamp: str = "13:45",
    hourly_forecast: tuple[WeatherPoint, ...] | None = None,
) -> WeatherSnapshot:
    if hourly_forecast is None:
        hourly_forecast = tuple(_make_point(h) for h in range(24))
    return WeatherSnapshot(
        temperature=temperature,
        humidity=58.0,
        pressure=1012.3,
        wind_speed=14.8,
        precipitation=0.0,
        condition=condition,
        location_label=location_label,
        timestamp=timestamp,
        hourly_forecast=hourly_forecast,
    )


@pytest.fixture
def sample_points() -> list[WeatherPoint]:
    """24 hours: warming and drying through the day, two wet hours."""
    return [
        _make_point(
            h,
            temperature=14.0 + h * 0.5,
            humidity=90.0 - h * 2,
            pressure=1012.0 + (h % 3) * 0.5,
            wind_speed=10.0 + h * 0.2,
            rainfall=0.4 if h == 3 else 1.2 if h == 4 else 0.0,
            condition=Condition.RAINY if h in (3, 4) else Condition.CLOUDY,
        )
        for h in range(24)
    ]


@pytest.fixture
def make_point():
    """Factory fixture for creating weather points."""
    return _make_point


@pytest.fixture
def make_snapshot():
    """Factory fixture for creating weather snapshots."""
    return _make_snapshot
