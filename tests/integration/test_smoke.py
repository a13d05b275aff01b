"""
Integration smoke tests across the whole LatLon surface.

These tests check properties that must hold for every pair of points,
looping over a spread of world cities (both hemispheres, the
antimeridian, high southern latitudes):
  1. Distance is symmetric and obeys the triangle inequality
  2. Every bearing lies in [0, 360)
  3. Travelling the computed bearing and distance returns to the target
  4. A rhumb line is never shorter than the great circle
  5. Plotting a route end to end composes the operations cleanly
"""

import itertools

import pytest

from spherenav.point import LatLon

FULL_PRECISION = 15


def _pairs(points):
    return [(a, b) for a, b in itertools.permutations(points, 2)]


class TestDistanceProperties:
    """Metric properties of great-circle distance."""

    def test_symmetry(self, world_cities):
        for a, b in _pairs(world_cities):
            assert a.distance_to(b, FULL_PRECISION) == pytest.approx(
                b.distance_to(a, FULL_PRECISION)
            )

    def test_triangle_inequality(self, world_cities):
        for a, b, c in itertools.permutations(world_cities, 3):
            direct = a.distance_to(c, FULL_PRECISION)
            via = a.distance_to(b, FULL_PRECISION) + b.distance_to(c, FULL_PRECISION)
            assert direct <= via + 1e-6

    def test_rhumb_never_shorter(self, world_cities):
        for a, b in _pairs(world_cities):
            assert a.rhumb_distance_to(b) >= a.distance_to(b, FULL_PRECISION) - 1e-6


class TestBearingRange:
    """Every bearing result lies in [0, 360)."""

    def test_all_bearings_in_range(self, world_cities):
        for a, b in _pairs(world_cities):
            for bearing in (a.bearing_to(b), a.final_bearing_to(b), a.rhumb_bearing_to(b)):
                assert 0 <= bearing < 360


class TestRoundTrips:
    """Destination formulas invert distance/bearing formulas."""

    def test_destination_distance_round_trip(self, world_cities):
        """Any bearing, any distance under half the circumference."""
        half_circumference = 3.14159 * 6371
        for origin in world_cities:
            for bearing in range(0, 360, 45):
                for distance in (1.0, 250.0, 5000.0, 0.9 * half_circumference):
                    target = origin.destination_point(bearing, distance)
                    assert target.distance_to(origin, FULL_PRECISION) == pytest.approx(
                        distance, rel=1e-6
                    )

    def test_great_circle_reaches_target(self, world_cities):
        for a, b in _pairs(world_cities):
            p = a.destination_point(a.bearing_to(b), a.distance_to(b, FULL_PRECISION))
            assert p.distance_to(b, FULL_PRECISION) == pytest.approx(0, abs=1e-6)

    def test_rhumb_reaches_target(self, world_cities):
        for a, b in _pairs(world_cities):
            p = a.rhumb_destination_point(a.rhumb_bearing_to(b), a.rhumb_distance_to(b))
            assert p.distance_to(b, FULL_PRECISION) == pytest.approx(0, abs=1e-6)

    def test_midpoints_are_halfway(self, world_cities):
        for a, b in _pairs(world_cities):
            m = a.midpoint_to(b)
            assert a.distance_to(m, FULL_PRECISION) == pytest.approx(
                m.distance_to(b, FULL_PRECISION), rel=1e-9
            )
            r = a.rhumb_midpoint_to(b)
            assert a.rhumb_distance_to(r) == pytest.approx(r.rhumb_distance_to(b), rel=1e-9)


class TestRoutePlanning:
    """Compose operations the way a route planner would."""

    def test_plot_intersection_and_report(self, lands_end, john_o_groats):
        """Head north from Land's End and cut across from John o'Groats."""
        crossing = LatLon.intersection(lands_end, 0, john_o_groats, 225)
        assert crossing is not None
        assert lands_end.latitude < crossing.latitude < john_o_groats.latitude
        assert crossing.longitude == pytest.approx(lands_end.longitude, abs=1e-6)

        report = crossing.to_string("dm", 1)
        assert report.endswith("W")
        assert "N, " in report

    def test_values_are_never_mutated(self, world_cities):
        snapshot = [(p.latitude, p.longitude, p.radius) for p in world_cities]
        for a, b in _pairs(world_cities):
            a.midpoint_to(b)
            a.rhumb_midpoint_to(b)
            LatLon.intersection(a, 45, b, 270)
        assert [(p.latitude, p.longitude, p.radius) for p in world_cities] == snapshot
