"""Heuristic inference engine behind the inference lab form.

No model is involved: a fixed decision tree over humidity and pressure picks
the condition, and the remaining outputs are derived from it.
"""

from __future__ import annotations

import asyncio
import random

from ..api_logging import log_service_call
from ..config import get_settings
from ..data.types import Condition, PredictionResult, Season

CONFIDENCE_BAND = (0.92, 0.97)

STORM_RAINFALL_MM = 25.4
RAINY_RAINFALL_MM = 8.2


def classify(humidity: float, pressure: float) -> Condition:
    """Pick a condition; rules are checked top to bottom and the first match wins."""
    if humidity > 85 and pressure < 1005:
        return Condition.STORM
    if humidity > 70 or (humidity > 50 and pressure < 1010):
        return Condition.RAINY
    if humidity > 40 or pressure < 1015:
        return Condition.CLOUDY
    return Condition.SUNNY


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _predicted_humidity(humidity: float, condition: Condition) -> float:
    # Two documented behaviours disagree for Storm: the formula
    # clamp(h + (15 if Rainy else -5)) would give 90 -> 85, while the
    # published Storm example (30, 90, 1000, 20) keeps humidity at 90.
    # The example wins, so Storm returns the input unchanged; do not fold it
    # into the -5 branch. Only Rainy raises humidity.
    # TODO: confirm whether Storm should also raise humidity like Rainy does.
    if condition is Condition.RAINY:
        return _clamp(humidity + 15, 0, 100)
    if condition is Condition.STORM:
        return humidity
    return _clamp(humidity - 5, 0, 100)


def _season_name(season: Season | str) -> str:
    return season.value if isinstance(season, Season) else str(season)


def build_reasoning(
    temp: float,
    humidity: float,
    pressure: float,
    condition: Condition,
    season: Season | str,
) -> str:
    """Explain the prediction in plain language."""
    clauses: list[str] = []

    if pressure < 1005:
        clauses.append(
            f"Pressure of {pressure:g} hPa marks a deep low capable of organised convection."
        )
    elif pressure < 1010:
        clauses.append(f"Falling pressure ({pressure:g} hPa) points to an approaching low.")
    elif pressure > 1020:
        clauses.append(f"High pressure ({pressure:g} hPa) favours subsiding air and clear skies.")

    if humidity > 85:
        clauses.append(
            f"Near-saturated air ({humidity:g}% humidity) leaves little room before condensation."
        )
    elif humidity > 70:
        clauses.append(f"Elevated humidity ({humidity:g}%) raises the likelihood of precipitation.")
    elif humidity < 30:
        clauses.append(f"A dry air mass ({humidity:g}% humidity) suppresses cloud formation.")

    if temp > 28 and humidity > 60:
        clauses.append(f"Warm, moist surface air at {temp:g}°C adds convective instability.")
    elif temp < 5 and humidity > 70:
        clauses.append(f"Cold, humid air near {temp:g}°C favours low cloud and fog.")

    if not clauses:
        return (
            "Atmospheric parameters indicate stable conditions; the ensemble projects "
            f"{condition.value} weather with no significant change over the next 6 hours."
        )

    clauses.append(
        f"Within the {_season_name(season)} seasonal context, the ensemble projects "
        f"{condition.value} conditions over the next 6 hours."
    )
    return " ".join(clauses)


def predict(
    temp: float,
    humidity: float,
    pressure: float,
    wind: float,
    season: Season | str = Season.SUMMER,
    *,
    rng: random.Random | None = None,
) -> PredictionResult:
    """Project conditions six hours ahead from a handful of inputs.

    Inputs are not validated; out-of-range values flow through the arithmetic.
    Everything except ``confidence`` is deterministic.
    """
    condition = classify(humidity, pressure)
    wet = condition in (Condition.RAINY, Condition.STORM)

    if condition is Condition.STORM:
        rainfall = STORM_RAINFALL_MM
    elif condition is Condition.RAINY:
        rainfall = RAINY_RAINFALL_MM
    else:
        rainfall = 0.0

    low, high = CONFIDENCE_BAND
    confidence = (rng or random).uniform(low, high)

    return PredictionResult(
        temperature=temp + (-3.5 if wet else 1.2),
        humidity=_predicted_humidity(humidity, condition),
        rainfall=rainfall,
        wind_speed=wind * (2.5 if condition is Condition.STORM else 1.1),
        condition=condition,
        confidence=confidence,
        reasoning=build_reasoning(temp, humidity, pressure, condition, season),
    )


class PredictionService:
    """Runs :func:`predict` behind a simulated inference latency."""

    def __init__(
        self,
        latency: float | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._latency = get_settings().prediction_latency_seconds if latency is None else latency
        self._rng = rng

    @property
    def latency(self) -> float:
        return self._latency

    @log_service_call
    async def run(
        self,
        temp: float,
        humidity: float,
        pressure: float,
        wind: float,
        season: Season | str = Season.SUMMER,
    ) -> PredictionResult:
        if self._latency > 0:
            await asyncio.sleep(self._latency)
        return predict(temp, humidity, pressure, wind, season, rng=self._rng)
