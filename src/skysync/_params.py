"""Query parameter builder for the Open-Meteo and Nominatim APIs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Coordinates:
    """A latitude/longitude pair rendered as query parameters.

    Usage:
        # Open-Meteo style
        Coordinates(51.5, -0.12).to_params()  # latitude=51.5&longitude=-0.12

        # Nominatim style
        Coordinates(51.5, -0.12).to_params("lat", "lon")  # lat=51.5&lon=-0.12
    """

    latitude: float
    longitude: float

    def to_params(
        self, lat_key: str = "latitude", lon_key: str = "longitude",
    ) -> list[tuple[str, str]]:
        """Convert these coordinates to a list of (key, value) pairs."""
        return [(lat_key, str(self.latitude)), (lon_key, str(self.longitude))]


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(v) for v in value)
    return str(value)


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    Plain values become single parameters. Sequences are comma-joined, which is
    how Open-Meteo takes its variable lists. Coordinates instances expand into
    ``latitude``/``longitude`` pairs.

    Args:
        **kwargs: Keyword arguments where keys are parameter names and values are
                  plain values, sequences or Coordinates instances.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, Coordinates):
            params.extend(value.to_params())
        elif isinstance(value, (list, tuple, set, frozenset)) and not value:
            continue
        else:
            params.append((key, _format_value(value)))
    return params
