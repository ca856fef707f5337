"""Unit tests for chord distance and spherical interpolation."""

import math

import pytest

from src.domain.distance import (
    EARTH_RADIUS_KM,
    chord_km,
    estimate,
    interpolate,
    to_cartesian,
)


class TestEstimate:
    def test_same_point_is_zero(self):
        assert estimate(-6.891161, 107.610633, -6.891161, 107.610633) == 0

    def test_same_point_is_zero_at_pole(self):
        assert estimate(90.0, 45.0, 90.0, 45.0) == 0

    def test_symmetric(self):
        d1 = estimate(19.0, 72.0, 20.0, 73.0)
        d2 = estimate(20.0, 73.0, 19.0, 72.0)
        assert d1 == d2

    def test_small_latitude_step_at_equator(self):
        """0.001 deg of latitude is ~111 m."""
        assert estimate(0.0, 0.0, 0.001, 0.0) == 111

    def test_matches_closed_form_chord(self):
        dlat = math.radians(0.5)
        expected = 2 * EARTH_RADIUS_KM * math.sin(dlat / 2) * 1000
        assert abs(estimate(10.0, 20.0, 10.5, 20.0) - expected) <= 0.5

    def test_returns_int(self):
        assert isinstance(estimate(0.0, 0.0, 1.0, 1.0), int)

    def test_antipodes_are_one_diameter_apart(self):
        assert estimate(0.0, 0.0, 0.0, 180.0) == round(2 * EARTH_RADIUS_KM * 1000)

    def test_chord_undercounts_surface_distance(self):
        """A quarter great circle is longer than its chord."""
        arc_m = math.pi / 2 * EARTH_RADIUS_KM * 1000
        assert estimate(0.0, 0.0, 0.0, 90.0) < arc_m


class TestCartesian:
    def test_equator_prime_meridian(self):
        x, y, z = to_cartesian(0.0, 0.0)
        assert x == pytest.approx(EARTH_RADIUS_KM)
        assert y == pytest.approx(0.0)
        assert z == pytest.approx(0.0)

    def test_north_pole(self):
        x, y, z = to_cartesian(90.0, 0.0, radius=1.0)
        assert z == pytest.approx(1.0)
        assert math.hypot(x, y) == pytest.approx(0.0, abs=1e-12)

    def test_chord_km_custom_radius(self):
        assert chord_km(0.0, 0.0, 0.0, 180.0, radius=1.0) == pytest.approx(2.0)


class TestInterpolate:
    def test_fraction_zero_is_start(self):
        lat, lng = interpolate((10.0, 20.0), (11.0, 21.0), 0.0)
        assert lat == pytest.approx(10.0)
        assert lng == pytest.approx(20.0)

    def test_fraction_one_is_end(self):
        lat, lng = interpolate((10.0, 20.0), (11.0, 21.0), 1.0)
        assert lat == pytest.approx(11.0)
        assert lng == pytest.approx(21.0)

    def test_midpoint_along_equator(self):
        lat, lng = interpolate((0.0, 0.0), (0.0, 90.0), 0.5)
        assert lat == pytest.approx(0.0, abs=1e-9)
        assert lng == pytest.approx(45.0)

    def test_midpoint_along_meridian(self):
        lat, lng = interpolate((0.0, 30.0), (60.0, 30.0), 0.5)
        assert lat == pytest.approx(30.0)
        assert lng == pytest.approx(30.0)

    def test_coincident_points_fall_back_to_linear(self):
        assert interpolate((5.0, 5.0), (5.0, 5.0), 0.5) == (5.0, 5.0)

    def test_midpoint_is_equidistant(self):
        a, b = (-6.891161, 107.610633), (-6.892000, 107.611000)
        mid = interpolate(a, b, 0.5)
        d_a = chord_km(a[0], a[1], mid[0], mid[1])
        d_b = chord_km(b[0], b[1], mid[0], mid[1])
        assert d_a == pytest.approx(d_b, rel=1e-6)
