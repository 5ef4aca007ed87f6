"""Tests for shared/services/map_view.py — the location picker map."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from shared.data.types import Location
from shared.services.map_view import CITY_ZOOM, WORLD_ZOOM, MapView

LISBON = Location(38.72, -9.14, "Lisbon, Portugal")


def _trace(fig, name):
    return next(t for t in fig.data if t.name == name)


class TestLifecycle:
    def test_not_open_until_displayed(self):
        view = MapView()
        assert view.is_open is False
        view.figure
        assert view.is_open is True

    def test_figure_reused(self):
        view = MapView()
        assert view.figure is view.figure

    def test_close_releases_figure(self):
        view = MapView()
        first = view.figure
        view.close()
        assert view.is_open is False
        assert view.figure is not first

    def test_context_manager_closes(self):
        with MapView() as view:
            view.figure
            assert view.is_open
        assert view.is_open is False


class TestFigure:
    def test_default_world_view(self):
        view = MapView(default_center=(20.0, 0.0))
        fig = view.figure
        marker = _trace(fig, "marker")
        assert list(marker.lat) == [20.0]
        assert list(marker.lon) == [0.0]
        assert fig.layout.map.zoom == WORLD_ZOOM
        assert fig.layout.map.style == "open-street-map"

    def test_initial_location(self):
        fig = MapView(LISBON).figure
        marker = _trace(fig, "marker")
        assert list(marker.lat) == [38.72]
        assert list(marker.text) == ["Lisbon, Portugal"]
        assert fig.layout.map.zoom == CITY_ZOOM

    def test_pick_grid_around_marker(self):
        grid = _trace(MapView(LISBON).figure, "pick")
        assert len(grid.lat) == 15 * 15
        assert min(grid.lat) < 38.72 < max(grid.lat)
        assert all(-180 <= lon < 180 for lon in grid.lon)


class TestUpdate:
    def test_updates_in_place(self):
        view = MapView()
        fig = view.figure
        view.update(LISBON)
        assert view.figure is fig
        assert list(_trace(fig, "marker").lat) == [38.72]
        assert list(_trace(fig, "marker").lon) == [-9.14]
        assert fig.layout.map.center.lat == 38.72
        assert fig.layout.map.zoom == CITY_ZOOM

    def test_update_before_display_is_lazy(self):
        view = MapView()
        view.update(LISBON)
        assert view.is_open is False
        assert view.location == LISBON
        assert list(_trace(view.figure, "marker").lat) == [38.72]

    def test_location_defaults_to_center(self):
        assert MapView(default_center=(10.0, 5.0)).location == Location(10.0, 5.0)


class TestLocationFromSelection:
    def test_dict_event(self):
        event = {"selection": {"points": [{"lat": 38.7, "lon": -9.1}]}}
        assert MapView.location_from_selection(event) == Location(38.7, -9.1)

    def test_attribute_event(self):
        event = SimpleNamespace(selection=SimpleNamespace(points=[{"lat": 1, "lon": 2}]))
        assert MapView.location_from_selection(event) == Location(1.0, 2.0)

    @pytest.mark.parametrize(
        "event",
        [
            None,
            {},
            {"selection": {"points": []}},
            {"selection": {"points": [{"lat": 38.7}]}},
        ],
    )
    def test_no_point(self, event):
        assert MapView.location_from_selection(event) is None
