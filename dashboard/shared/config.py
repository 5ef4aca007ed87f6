"""Dashboard settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from skysync.client import DEFAULT_USER_AGENT, NOMINATIM_BASE_URL, OPEN_METEO_BASE_URL


class DashboardSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SKYSYNC_", env_file=".env", extra="ignore")

    # Auto-sync
    refresh_period_seconds: int = 5
    tick_interval_seconds: float = 1.0
    auto_sync_enabled: bool = True

    # Geolocation
    geolocation_timeout_seconds: float = 10.0
    geolocation_allowed: bool = True
    home_latitude: float | None = None
    home_longitude: float | None = None
    home_label: str | None = None

    # Upstream APIs
    http_timeout_seconds: float = 30.0
    open_meteo_base_url: str = OPEN_METEO_BASE_URL
    nominatim_base_url: str = NOMINATIM_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    language: str = "en"

    # Inference lab
    prediction_latency_seconds: float = 1.5

    # Map picker
    map_default_latitude: float = 20.0
    map_default_longitude: float = 0.0


@lru_cache
def get_settings() -> DashboardSettings:
    return DashboardSettings()
