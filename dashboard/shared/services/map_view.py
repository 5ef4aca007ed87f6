"""Location picker map as a scoped Plotly resource."""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go

from ..constants import BRAND_BLUE, BRAND_NAVY, PLOTLY_LAYOUT_DEFAULTS
from ..data.types import Location

WORLD_ZOOM = 2
CITY_ZOOM = 9

# Clickable grid of faint points around the marker; Plotly maps only report
# clicks that land on a point.
_GRID_STEPS = 15
_GRID_SPAN_DEG = {WORLD_ZOOM: 60.0, CITY_ZOOM: 0.6}


def _pick_grid(center: Location, zoom: int) -> tuple[list[float], list[float]]:
    span = _GRID_SPAN_DEG.get(zoom, 0.6)
    step = 2 * span / (_GRID_STEPS - 1)
    lats: list[float] = []
    lons: list[float] = []
    for i in range(_GRID_STEPS):
        for j in range(_GRID_STEPS):
            lat = center.lat - span + i * step
            if -85.0 <= lat <= 85.0:
                lats.append(round(lat, 4))
                lons.append(round(((center.lon - span + j * step + 180) % 360) - 180, 4))
    return lats, lons


class MapView:
    """A single-marker map acquired on first display and updated in place.

    Usage:
        with MapView(default_center=(20.0, 0.0)) as view:
            fig = view.figure          # built on first access
            view.update(Location(38.72, -9.14))
    """

    def __init__(
        self,
        location: Location | None = None,
        *,
        default_center: tuple[float, float] = (20.0, 0.0),
    ) -> None:
        self._default = Location(*default_center)
        self._location = location
        self._figure: go.Figure | None = None

    def __enter__(self) -> MapView:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._figure is not None

    @property
    def location(self) -> Location:
        return self._location or self._default

    def _zoom(self) -> int:
        loc = self.location
        if (loc.lat, loc.lon) == (self._default.lat, self._default.lon):
            return WORLD_ZOOM
        return CITY_ZOOM

    @property
    def figure(self) -> go.Figure:
        """The map figure, built on first access."""
        if self._figure is None:
            self._figure = self._build()
        return self._figure

    def _build(self) -> go.Figure:
        loc = self.location
        zoom = self._zoom()
        grid_lats, grid_lons = _pick_grid(loc, zoom)
        fig = go.Figure([
            go.Scattermap(
                lat=grid_lats,
                lon=grid_lons,
                mode="markers",
                marker=dict(size=14, color=BRAND_BLUE, opacity=0.08),
                hoverinfo="none",
                name="pick",
            ),
            go.Scattermap(
                lat=[loc.lat],
                lon=[loc.lon],
                mode="markers",
                marker=dict(size=16, color=BRAND_NAVY),
                text=[loc.label or ""],
                hoverinfo="text",
                name="marker",
            ),
        ])
        fig.update_layout(
            **PLOTLY_LAYOUT_DEFAULTS,
            map=dict(style="open-street-map", center=dict(lat=loc.lat, lon=loc.lon), zoom=zoom),
            showlegend=False,
            height=480,
            clickmode="event+select",
        )
        return fig

    def update(self, location: Location) -> None:
        """Move the marker and recentre the map without rebuilding the figure."""
        self._location = location
        if self._figure is None:
            return
        zoom = self._zoom()
        grid_lats, grid_lons = _pick_grid(location, zoom)
        self._figure.update_traces(lat=grid_lats, lon=grid_lons, selector=dict(name="pick"))
        self._figure.update_traces(
            lat=[location.lat], lon=[location.lon], text=[location.label or ""],
            selector=dict(name="marker"),
        )
        self._figure.update_layout(
            map=dict(center=dict(lat=location.lat, lon=location.lon), zoom=zoom),
        )

    def close(self) -> None:
        """Release the figure; the next access to ``figure`` builds a fresh one."""
        self._figure = None

    @staticmethod
    def location_from_selection(event: Any) -> Location | None:
        """Read the clicked point out of a ``st.plotly_chart`` selection event."""
        if not event:
            return None
        selection = event.get("selection") if isinstance(event, dict) else getattr(event, "selection", None)
        if not selection:
            return None
        points = selection.get("points") if isinstance(selection, dict) else getattr(selection, "points", None)
        if not points:
            return None
        point = points[0]
        lat = point.get("lat")
        lon = point.get("lon")
        if lat is None or lon is None:
            return None
        return Location(float(lat), float(lon))
