"""Single app-level state container kept in ``st.session_state``."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Coroutine
from dataclasses import dataclass, field
from typing import Any, TypeVar

import streamlit as st

from .config import get_settings
from .data import get_geolocation_provider, get_repository
from .data.types import Location, PredictionResult
from .services.map_view import MapView
from .services.refresh import RefreshController

T = TypeVar("T")

_STATE_KEY = "skysync_app_state"


@dataclass
class AppState:
    controller: RefreshController
    map_view: MapView
    tick_interval: float = 1.0
    prediction: PredictionResult | None = None
    last_pick: Location | None = None
    initial_fetch_done: bool = False
    last_tick: float = field(default_factory=time.monotonic)

    def tick_due(self, now: float | None = None) -> bool:
        """True when at least one tick interval passed since the last tick."""
        now = time.monotonic() if now is None else now
        if now - self.last_tick < self.tick_interval:
            return False
        self.last_tick = now
        return True


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Drive a controller coroutine from a Streamlit script run."""
    return asyncio.run(coro)


def get_app_state() -> AppState:
    """Return this session's AppState, creating it on first use."""
    if _STATE_KEY not in st.session_state:
        settings = get_settings()
        controller = RefreshController.from_settings(
            get_repository(), get_geolocation_provider(settings), settings,
        )
        st.session_state[_STATE_KEY] = AppState(
            controller=controller,
            map_view=MapView(
                default_center=(settings.map_default_latitude, settings.map_default_longitude),
            ),
            tick_interval=settings.tick_interval_seconds,
        )
    return st.session_state[_STATE_KEY]
