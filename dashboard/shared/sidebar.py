"""Shared sidebar rendering: location search, map picker and sync controls."""

from __future__ import annotations

import logging

import streamlit as st

from skysync import SkySyncError

from .app_state import AppState, run
from .data.types import Location
from .fetchers import geocode_place, reverse_place_label
from .formatters import format_coordinates
from .services.map_view import MapView

logger = logging.getLogger(__name__)


def _render_search(state: AppState) -> None:
    with st.sidebar.form("location_search", clear_on_submit=True):
        query = st.text_input("Search location", placeholder="City, address or landmark")
        submitted = st.form_submit_button("Search")

    if not submitted or not query.strip():
        return

    try:
        location = geocode_place(query)
    except SkySyncError as exc:
        logger.warning("Geocoding failed for %r: %s", query, exc)
        st.sidebar.warning("Location search is unavailable right now. Try again shortly.")
        return
    if location is None:
        st.sidebar.info(f"No match found for {query!r}.")
        return
    state.map_view.update(location)
    run(state.controller.set_location(location))


def _render_map_picker(state: AppState) -> None:
    show_map = st.sidebar.toggle("Pick on map", value=False, key="show_map_picker")
    if not show_map:
        # Release the figure when the picker is hidden
        state.map_view.close()
        return

    controller = state.controller
    if controller.location is not None and state.map_view.location != controller.location:
        state.map_view.update(controller.location)

    event = st.plotly_chart(
        state.map_view.figure,
        use_container_width=True,
        on_select="rerun",
        selection_mode="points",
        key="map_picker",
    )
    picked = MapView.location_from_selection(event)
    if picked is None or picked == state.last_pick:
        return

    state.last_pick = picked
    try:
        label = reverse_place_label(picked.lat, picked.lon)
    except SkySyncError as exc:
        logger.warning("Reverse geocoding failed for (%s, %s): %s", picked.lat, picked.lon, exc)
        label = format_coordinates(picked.lat, picked.lon)
    location = Location(picked.lat, picked.lon, label)
    state.map_view.update(location)
    run(controller.set_location(location))


def _render_sync_controls(state: AppState) -> None:
    controller = state.controller
    st.sidebar.divider()

    enabled = st.sidebar.toggle(
        "Auto-sync",
        value=controller.auto_sync_enabled,
        help=f"Refresh every {controller.period}s",
    )
    if enabled != controller.auto_sync_enabled:
        controller.toggle_auto_sync(enabled)

    if st.sidebar.button("Refresh now", disabled=controller.loading):
        run(controller.refresh(controller.location))

    if controller.location is not None:
        st.sidebar.caption(
            f"{controller.location.label or 'Unnamed location'}  \n"
            f"{format_coordinates(controller.location.lat, controller.location.lon)}"
        )


def render_location_sidebar(state: AppState) -> None:
    """Render search, map picker and auto-sync controls in the sidebar."""
    st.sidebar.title("SkySync")
    _render_search(state)
    _render_map_picker(state)
    _render_sync_controls(state)
