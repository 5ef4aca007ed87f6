"""Open-Meteo forecast models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class CurrentConditions(BaseModel):
    """Current weather block of a forecast response (15 min resolution)."""

    model_config = ConfigDict(frozen=True)

    time: str | None = None
    interval: int | None = None
    temperature_2m: float | None = None
    relative_humidity_2m: float | None = None
    surface_pressure: float | None = None
    wind_speed_10m: float | None = None
    precipitation: float | None = None
    weather_code: int | None = None


class HourlySeries(BaseModel):
    """Hourly weather variables as parallel arrays keyed by ``time``."""

    model_config = ConfigDict(frozen=True)

    time: list[str] = []
    temperature_2m: list[float | None] | None = None
    relative_humidity_2m: list[float | None] | None = None
    surface_pressure: list[float | None] | None = None
    wind_speed_10m: list[float | None] | None = None
    precipitation: list[float | None] | None = None
    weather_code: list[int | None] | None = None

    @model_validator(mode="after")
    def _check_lengths(self) -> HourlySeries:
        expected = len(self.time)
        for name in (
            "temperature_2m",
            "relative_humidity_2m",
            "surface_pressure",
            "wind_speed_10m",
            "precipitation",
            "weather_code",
        ):
            values = getattr(self, name)
            if values is not None and len(values) != expected:
                raise ValueError(
                    f"hourly.{name} has {len(values)} values, expected {expected}"
                )
        return self

    def __len__(self) -> int:
        return len(self.time)


class Forecast(BaseModel):
    """Forecast response for a single coordinate."""

    model_config = ConfigDict(frozen=True)

    latitude: float | None = None
    longitude: float | None = None
    elevation: float | None = None
    timezone: str | None = None
    timezone_abbreviation: str | None = None
    utc_offset_seconds: int | None = None
    current: CurrentConditions | None = None
    hourly: HourlySeries | None = None
