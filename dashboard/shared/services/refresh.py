"""Live weather refresh controller.

Keeps an always-renderable weather view: a two-slot cache (current/previous)
plus a static placeholder, an auto-sync countdown, and a single user-facing
error message. Overlapping refreshes are cancel-and-replace: every refresh
takes a new generation number and a fetch that finishes after a newer one
started is dropped.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from enum import Enum

from ..api_logging import log_service_call
from ..config import DashboardSettings, get_settings
from ..constants import PLACEHOLDER_SNAPSHOT
from ..data.base import WeatherRepository
from ..data.errors import GeolocationDeniedError, GeolocationUnsupportedError, WeatherDataError
from ..data.geolocation import GeolocationProvider
from ..data.types import Location, WeatherSnapshot

logger = logging.getLogger(__name__)

GEOLOCATION_UNSUPPORTED_MESSAGE = "Geolocation is not supported"
LOCATION_DENIED_MESSAGE = "Location permission denied"
FETCH_FAILED_MESSAGE = "Failed to fetch weather data"


class RefreshOutcome(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"
    SUPERSEDED = "superseded"


class RefreshController:
    """Owns the weather snapshots and decides when to re-fetch."""

    def __init__(
        self,
        repo: WeatherRepository,
        geolocation: GeolocationProvider,
        *,
        period: int = 5,
        tick_interval: float = 1.0,
        geolocation_timeout: float = 10.0,
        auto_sync: bool = True,
        placeholder: WeatherSnapshot = PLACEHOLDER_SNAPSHOT,
    ) -> None:
        if period < 1:
            raise ValueError(f"period must be at least 1 second, got {period}")
        self._repo = repo
        self._geolocation = geolocation
        self._period = period
        self._tick_interval = tick_interval
        self._geolocation_timeout = geolocation_timeout
        self._placeholder = placeholder

        self._current: WeatherSnapshot | None = None
        self._previous: WeatherSnapshot | None = None
        self._loading = False
        self._error: str | None = None
        self._location: Location | None = None
        self._auto_sync_enabled = auto_sync
        self._seconds_remaining = period

        self._generation = 0
        self._started = False
        self._ticker: asyncio.Task[None] | None = None

    @classmethod
    def from_settings(
        cls,
        repo: WeatherRepository,
        geolocation: GeolocationProvider,
        settings: DashboardSettings | None = None,
    ) -> RefreshController:
        settings = settings or get_settings()
        return cls(
            repo,
            geolocation,
            period=settings.refresh_period_seconds,
            tick_interval=settings.tick_interval_seconds,
            geolocation_timeout=settings.geolocation_timeout_seconds,
            auto_sync=settings.auto_sync_enabled,
        )

    # ── Read-only state ────────────────────────────────────────

    @property
    def current(self) -> WeatherSnapshot | None:
        return self._current

    @property
    def previous(self) -> WeatherSnapshot | None:
        return self._previous

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def location(self) -> Location | None:
        return self._location

    @property
    def auto_sync_enabled(self) -> bool:
        return self._auto_sync_enabled

    @property
    def seconds_until_next_refresh(self) -> int:
        return self._seconds_remaining

    @property
    def period(self) -> int:
        return self._period

    @property
    def countdown_fraction(self) -> float:
        """Share of the auto-sync period still remaining, in [0, 1]."""
        return self._seconds_remaining / self._period

    # ── Display ────────────────────────────────────────────────

    def compute_display(self) -> WeatherSnapshot:
        """Return the snapshot to render: current, else previous, else the placeholder."""
        if self._current is not None:
            return self._current
        if self._previous is not None:
            return self._previous
        return self._placeholder

    def dismiss_error(self) -> None:
        self._error = None

    # ── Refresh ────────────────────────────────────────────────

    @log_service_call
    async def refresh(self, location: Location | None = None) -> RefreshOutcome:
        """Fetch a new snapshot for *location*, or for the caller's position when omitted.

        Failures are reported through ``error`` and never clear ``current``.
        """
        self._generation += 1
        generation = self._generation

        if self._current is not None:
            self._previous = self._current
        self._loading = True
        self._error = None
        self._seconds_remaining = self._period

        try:
            target = location if location is not None else await self._locate()
            snapshot = await self._repo.fetch_live_weather(target.lat, target.lon, target.label)
        except GeolocationUnsupportedError as exc:
            return self._fail(generation, GEOLOCATION_UNSUPPORTED_MESSAGE, exc)
        except GeolocationDeniedError as exc:
            return self._fail(generation, LOCATION_DENIED_MESSAGE, exc)
        except WeatherDataError as exc:
            return self._fail(generation, FETCH_FAILED_MESSAGE, exc)
        except asyncio.CancelledError:
            if generation == self._generation:
                self._loading = False
            raise

        if generation != self._generation:
            logger.info("Dropping superseded refresh for %.4f, %.4f", target.lat, target.lon)
            return RefreshOutcome.SUPERSEDED

        self._current = snapshot
        self._location = Location(target.lat, target.lon, snapshot.location_label)
        self._error = None
        self._loading = False
        return RefreshOutcome.SUCCESS

    async def set_location(self, location: Location) -> RefreshOutcome:
        """Track *location* and refresh for it immediately."""
        self._location = location
        return await self.refresh(location)

    async def _locate(self) -> Location:
        try:
            return await asyncio.wait_for(
                self._geolocation.locate(), timeout=self._geolocation_timeout,
            )
        except TimeoutError as exc:
            raise GeolocationDeniedError(
                f"No position within {self._geolocation_timeout:g}s",
            ) from exc

    def _fail(self, generation: int, message: str, exc: Exception) -> RefreshOutcome:
        if generation != self._generation:
            logger.info("Dropping superseded refresh failure: %s", exc)
            return RefreshOutcome.SUPERSEDED
        logger.warning("%s: %s", message, exc)
        self._error = message
        self._loading = False
        return RefreshOutcome.FAILED

    # ── Auto-sync ──────────────────────────────────────────────

    def toggle_auto_sync(self, enabled: bool) -> None:
        """Enable or disable periodic refresh.

        Enabling always restarts the countdown at the full period.
        """
        self._auto_sync_enabled = enabled
        if enabled:
            self._seconds_remaining = self._period
            if self._started:
                self._spawn_ticker()
        else:
            self._cancel_ticker()

    async def tick(self) -> RefreshOutcome | None:
        """Advance the countdown by one step, refreshing when it reaches zero."""
        if not self._auto_sync_enabled:
            return None
        self._seconds_remaining -= 1
        if self._seconds_remaining > 0:
            return None
        try:
            return await self.refresh(self._location)
        finally:
            self._seconds_remaining = self._period

    async def run_auto_sync(self) -> None:
        """Tick once per interval until auto-sync is disabled."""
        while self._auto_sync_enabled:
            await asyncio.sleep(self._tick_interval)
            await self.tick()

    def start(self) -> None:
        """Start the background ticker on the running event loop."""
        self._started = True
        if self._auto_sync_enabled:
            self._spawn_ticker()

    async def stop(self) -> None:
        """Stop the background ticker and wait for it to finish."""
        self._started = False
        ticker = self._ticker
        self._cancel_ticker()
        if ticker is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await ticker

    def _spawn_ticker(self) -> None:
        if self._ticker is None or self._ticker.done():
            self._ticker = asyncio.get_running_loop().create_task(self.run_auto_sync())

    def _cancel_ticker(self) -> None:
        if self._ticker is not None and not self._ticker.done():
            self._ticker.cancel()
        self._ticker = None
