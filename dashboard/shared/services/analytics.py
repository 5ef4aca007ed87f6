"""Pure analytics over the hourly forecast (no Streamlit dependency)."""

from __future__ import annotations

import statistics
from collections.abc import Sequence
from dataclasses import dataclass

from ..data.types import WeatherPoint

# Shown when the series is too short or flat to correlate.
FALLBACK_CORRELATION = -0.84

METRICS: tuple[tuple[str, str], ...] = (
    ("temperature", "°C"),
    ("humidity", "%"),
    ("pressure", "hPa"),
    ("wind_speed", "km/h"),
    ("rainfall", "mm"),
)


@dataclass(frozen=True)
class MetricSummary:
    minimum: float
    maximum: float
    mean: float


@dataclass(frozen=True)
class RainfallSummary:
    total_mm: float
    rain_hours: int
    peak_hour: str | None


def temperature_humidity_correlation(points: Sequence[WeatherPoint]) -> float:
    """Pearson correlation between hourly temperature and humidity."""
    if len(points) < 2:
        return FALLBACK_CORRELATION
    try:
        return statistics.correlation(
            [p.temperature for p in points],
            [p.humidity for p in points],
        )
    except statistics.StatisticsError:
        return FALLBACK_CORRELATION


def describe_correlation(r: float) -> str:
    if r <= -0.3:
        return "Inverse"
    if r >= 0.3:
        return "Direct"
    return "Weak"


def pressure_variability(points: Sequence[WeatherPoint]) -> float:
    """Coefficient of variation of pressure, in percent."""
    pressures = [p.pressure for p in points]
    if len(pressures) < 2:
        return 0.0
    mean = statistics.fmean(pressures)
    if mean == 0:
        return 0.0
    return statistics.pstdev(pressures) / mean * 100


def summarise_series(points: Sequence[WeatherPoint]) -> dict[str, MetricSummary]:
    """Return min/max/mean per metric, keyed by WeatherPoint field name."""
    if not points:
        return {}
    summary: dict[str, MetricSummary] = {}
    for field, _unit in METRICS:
        values = [getattr(p, field) for p in points]
        summary[field] = MetricSummary(
            minimum=min(values),
            maximum=max(values),
            mean=statistics.fmean(values),
        )
    return summary


def rainfall_totals(points: Sequence[WeatherPoint]) -> RainfallSummary:
    wet = [p for p in points if p.rainfall > 0]
    peak = max(wet, key=lambda p: p.rainfall, default=None)
    return RainfallSummary(
        total_mm=sum(p.rainfall for p in points),
        rain_hours=len(wet),
        peak_hour=peak.timestamp if peak is not None else None,
    )
