"""Tests for the query parameter builder."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from skysync._params import Coordinates, build_query_params


class TestCoordinates:
    def test_open_meteo_keys(self) -> None:
        assert Coordinates(38.72, -9.14).to_params() == [
            ("latitude", "38.72"),
            ("longitude", "-9.14"),
        ]

    def test_nominatim_keys(self) -> None:
        assert Coordinates(38.72, -9.14).to_params("lat", "lon") == [
            ("lat", "38.72"),
            ("lon", "-9.14"),
        ]

    def test_frozen(self) -> None:
        coords = Coordinates(1.0, 2.0)
        with pytest.raises(FrozenInstanceError):
            coords.latitude = 3.0  # type: ignore[misc]


class TestBuildQueryParams:
    def test_simple_params(self) -> None:
        params = build_query_params(format="json", limit=1)
        assert params == [("format", "json"), ("limit", "1")]

    def test_none_skipped(self) -> None:
        params = build_query_params(q="Lisbon", limit=None)
        assert params == [("q", "Lisbon")]

    def test_coordinates_expand(self) -> None:
        params = build_query_params(location=Coordinates(51.5, -0.12), timezone="auto")
        assert params == [
            ("latitude", "51.5"),
            ("longitude", "-0.12"),
            ("timezone", "auto"),
        ]

    def test_sequences_comma_joined(self) -> None:
        params = build_query_params(hourly=("temperature_2m", "precipitation"))
        assert params == [("hourly", "temperature_2m,precipitation")]

    def test_empty_sequence_skipped(self) -> None:
        assert build_query_params(current=()) == []

    def test_booleans(self) -> None:
        params = build_query_params(addressdetails=True, namedetails=False)
        assert params == [("addressdetails", "1"), ("namedetails", "0")]

    def test_empty(self) -> None:
        assert build_query_params() == []
