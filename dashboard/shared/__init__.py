"""Shared dashboard utilities."""

# --- Config, constants & formatting ---
from .config import DashboardSettings, get_settings
from .constants import (
    CONDITION_COLORS,
    CONDITION_ICONS,
    FEATURE_SIGNIFICANCE,
    MODEL_BENCHMARKS,
    PLACEHOLDER_SNAPSHOT,
    PLOTLY_LAYOUT_DEFAULTS,
)
from .formatters import format_confidence, format_coordinates, format_reading

# --- Data layer ---
from .data import (
    Condition,
    Location,
    PredictionResult,
    Season,
    WeatherDataError,
    WeatherPoint,
    WeatherSnapshot,
    get_repository,
)

# --- Service layer ---
from .services import (
    MapView,
    PredictionService,
    RefreshController,
    RefreshOutcome,
    describe_correlation,
    pressure_variability,
    rainfall_totals,
    summarise_series,
    temperature_humidity_correlation,
)

# --- UI components ---
from .app_state import AppState, get_app_state, run
from .sidebar import render_location_sidebar

__all__ = [
    "AppState",
    "CONDITION_COLORS",
    "CONDITION_ICONS",
    "Condition",
    "DashboardSettings",
    "FEATURE_SIGNIFICANCE",
    "Location",
    "MODEL_BENCHMARKS",
    "MapView",
    "PLACEHOLDER_SNAPSHOT",
    "PLOTLY_LAYOUT_DEFAULTS",
    "PredictionResult",
    "PredictionService",
    "RefreshController",
    "RefreshOutcome",
    "Season",
    "WeatherDataError",
    "WeatherPoint",
    "WeatherSnapshot",
    "describe_correlation",
    "format_confidence",
    "format_coordinates",
    "format_reading",
    "get_app_state",
    "get_repository",
    "get_settings",
    "pressure_variability",
    "rainfall_totals",
    "render_location_sidebar",
    "run",
    "summarise_series",
    "temperature_humidity_correlation",
]
