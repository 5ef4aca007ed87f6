"""Tests for shared/services/analytics.py — hourly forecast analytics."""

from __future__ import annotations

import pytest

from shared.services.analytics import (
    FALLBACK_CORRELATION,
    METRICS,
    describe_correlation,
    pressure_variability,
    rainfall_totals,
    summarise_series,
    temperature_humidity_correlation,
)


class TestCorrelation:
    def test_inverse_linear_series(self, sample_points):
        assert temperature_humidity_correlation(sample_points) == pytest.approx(-1.0)

    def test_direct_series(self, make_point):
        points = [make_point(h, temperature=10 + h, humidity=40 + 2 * h) for h in range(6)]
        assert temperature_humidity_correlation(points) == pytest.approx(1.0)

    def test_too_few_points(self, make_point):
        assert temperature_humidity_correlation([make_point(0)]) == FALLBACK_CORRELATION
        assert temperature_humidity_correlation([]) == FALLBACK_CORRELATION

    def test_flat_series(self, make_point):
        points = [make_point(h, temperature=20.0, humidity=50 + h) for h in range(4)]
        assert temperature_humidity_correlation(points) == FALLBACK_CORRELATION

    @pytest.mark.parametrize(
        ("r", "label"),
        [(-0.84, "Inverse"), (-0.3, "Inverse"), (0.0, "Weak"), (0.29, "Weak"), (0.7, "Direct")],
    )
    def test_describe(self, r, label):
        assert describe_correlation(r) == label


class TestPressureVariability:
    def test_coefficient_of_variation(self, make_point):
        points = [make_point(0, pressure=1000.0), make_point(1, pressure=1010.0)]
        assert pressure_variability(points) == pytest.approx(5 / 1005 * 100)

    def test_constant_pressure(self, make_point):
        points = [make_point(h, pressure=1013.0) for h in range(5)]
        assert pressure_variability(points) == 0.0

    def test_short_series(self, make_point):
        assert pressure_variability([make_point(0)]) == 0.0


class TestSummariseSeries:
    def test_all_metrics(self, sample_points):
        summary = summarise_series(sample_points)
        assert set(summary) == {field for field, _unit in METRICS}
        temperature = summary["temperature"]
        assert temperature.minimum == 14.0
        assert temperature.maximum == pytest.approx(25.5)
        assert temperature.mean == pytest.approx(19.75)
        assert summary["humidity"].minimum == 44.0

    def test_empty(self):
        assert summarise_series([]) == {}


class TestRainfallTotals:
    def test_totals(self, sample_points):
        rain = rainfall_totals(sample_points)
        assert rain.total_mm == pytest.approx(1.6)
        assert rain.rain_hours == 2
        assert rain.peak_hour == "04:00"

    def test_dry_day(self, make_point):
        rain = rainfall_totals([make_point(h) for h in range(24)])
        assert rain.total_mm == 0
        assert rain.rain_hours == 0
        assert rain.peak_hour is None
