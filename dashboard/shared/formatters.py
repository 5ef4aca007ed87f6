"""Display formatting helpers."""

from __future__ import annotations


def format_coordinates(lat: float, lon: float) -> str:
    """Format a coordinate pair as ``'51.51°, -0.13°'``."""
    return f"{lat:.2f}°, {lon:.2f}°"


def format_reading(value: float | None, unit: str, digits: int = 1) -> str:
    """Format a sensor reading with its unit, or "\u2014" when missing."""
    if value is None:
        return "—"
    separator = "" if unit in ("%", "°C") else " "
    return f"{value:.{digits}f}{separator}{unit}"


def format_confidence(confidence: float) -> str:
    """Format a [0, 1] probability as a whole percentage."""
    return f"{confidence * 100:.0f}%"
