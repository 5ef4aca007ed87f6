"""Cached geocoding fetchers for the sidebar search and map picker."""

from __future__ import annotations

import threading
import time

import streamlit as st

from skysync import NominatimClient

from .config import get_settings
from .data.openmeteo_repo import label_from_reverse, location_from_place
from .data.types import Location

# ── Rate limiting ────────────────────────────────────────────────────────────

_last_request_time: float = 0.0
_rate_limit_lock = threading.Lock()
_MIN_REQUEST_INTERVAL = 1.0  # Nominatim usage policy: at most 1 req/s


def _rate_limit() -> None:
    """Sleep if needed to respect the Nominatim rate limit."""
    global _last_request_time
    with _rate_limit_lock:
        now = time.monotonic()
        elapsed = now - _last_request_time
        if elapsed < _MIN_REQUEST_INTERVAL:
            time.sleep(_MIN_REQUEST_INTERVAL - elapsed)
        _last_request_time = time.monotonic()


def _geocoder() -> NominatimClient:
    settings = get_settings()
    return NominatimClient(
        base_url=settings.nominatim_base_url,
        timeout=settings.http_timeout_seconds,
        user_agent=settings.user_agent,
        language=settings.language,
    )


# ── Cached fetchers ──────────────────────────────────────────────────────────
# Provider failures raise out of these functions: st.cache_data does not store
# exceptions, so an outage is retried on the next call instead of being served
# as "no match" until the TTL expires.


@st.cache_data(ttl=3600, show_spinner=False)
def geocode_place(query: str) -> Location | None:
    """Best forward geocoding match for *query*; no match is None.

    Raises:
        SkySyncError: if Nominatim could not be reached or answered badly.
    """
    query = query.strip()
    if not query:
        return None
    _rate_limit()
    with _geocoder() as geo:
        matches = geo.search(query, limit=1)
    return location_from_place(matches[0]) if matches else None


@st.cache_data(ttl=3600, show_spinner=False)
def reverse_place_label(lat: float, lon: float) -> str:
    """Short place label for a coordinate.

    Raises:
        SkySyncError: if Nominatim could not be reached or answered badly.
    """
    _rate_limit()
    with _geocoder() as geo:
        place = geo.reverse(lat, lon)
    return label_from_reverse(place, lat, lon)
