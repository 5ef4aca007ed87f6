"""Service layer — business logic decoupled from Streamlit."""

from __future__ import annotations

from .analytics import (
    MetricSummary,
    RainfallSummary,
    describe_correlation,
    pressure_variability,
    rainfall_totals,
    summarise_series,
    temperature_humidity_correlation,
)
from .map_view import MapView
from .prediction import PredictionService, build_reasoning, classify, predict
from .refresh import RefreshController, RefreshOutcome

__all__ = [
    "MapView",
    "MetricSummary",
    "PredictionService",
    "RainfallSummary",
    "RefreshController",
    "RefreshOutcome",
    "build_reasoning",
    "classify",
    "describe_correlation",
    "predict",
    "pressure_variability",
    "rainfall_totals",
    "summarise_series",
    "temperature_humidity_correlation",
]
