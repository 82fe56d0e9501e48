"""
Tests for shared geographic functions.

Tests the haversine distance, point distance and nearest-point lookup.
"""

import pytest

from trailsplit.shared.exceptions import EmptyInputError
from trailsplit.shared.geo import (
    haversine,
    distance,
    nearest_index,
    calculate_total_distance,
    EARTH_RADIUS_KM,
)
from trailsplit.shared.track_types import TrackPoint


# =============================================================================
# Test Haversine Distance
# =============================================================================

class TestHaversine:
    """Tests for haversine function."""

    def test_same_point(self):
        """Distance between same point should be 0."""
        assert haversine(50.85, 4.35, 50.85, 4.35) == 0.0

    def test_known_distance_brussels_ghent(self):
        """Brussels to Ghent is roughly 50 km."""
        dist = haversine(50.8503, 4.3517, 51.0543, 3.7174)
        assert 45 < dist < 55

    def test_small_distance(self):
        """0.001 degree latitude is about 111 meters."""
        dist = haversine(51.0, 3.7, 51.001, 3.7)
        assert 0.1 < dist < 0.12

    def test_east_west_at_equator(self):
        """At equator, 1 degree longitude is about 111 km."""
        assert 110 < haversine(0.0, 0.0, 0.0, 1.0) < 112

    def test_antimeridian(self):
        """2 degrees across the antimeridian is about 222 km."""
        assert 220 < haversine(0.0, 179.0, 0.0, -179.0) < 225

    def test_earth_radius_constant(self):
        assert EARTH_RADIUS_KM == 6371.0


# =============================================================================
# Test Point Distance
# =============================================================================

class TestDistance:
    """Tests for distance between TrackPoints."""

    def test_identical_points(self):
        a = TrackPoint(51.05, 3.72, 10.0)
        assert distance(a, a) == 0.0

    def test_symmetric(self):
        a = TrackPoint(51.05, 3.72, 10.0)
        b = TrackPoint(51.10, 3.80, 200.0)
        assert distance(a, b) == pytest.approx(distance(b, a), rel=1e-12)

    def test_never_negative(self):
        a = TrackPoint(-33.87, 151.21)
        b = TrackPoint(-37.81, 144.96)
        assert distance(a, b) > 0

    def test_elevation_ignored(self):
        """Only horizontal distance counts."""
        low = distance(TrackPoint(51.0, 3.7, 0.0), TrackPoint(51.01, 3.7, 0.0))
        high = distance(TrackPoint(51.0, 3.7, 0.0), TrackPoint(51.01, 3.7, 1000.0))
        assert low == high


# =============================================================================
# Test Calculate Total Distance
# =============================================================================

class TestCalculateTotalDistance:
    """Tests for calculate_total_distance function."""

    def test_empty_list(self):
        assert calculate_total_distance([]) == 0.0

    def test_single_point(self):
        assert calculate_total_distance([TrackPoint(51.0, 3.7)]) == 0.0

    def test_sums_consecutive_legs(self):
        points = [
            TrackPoint(51.000, 3.7),
            TrackPoint(51.001, 3.7),
            TrackPoint(51.002, 3.7),
        ]
        expected = distance(points[0], points[1]) + distance(points[1], points[2])
        assert calculate_total_distance(points) == pytest.approx(expected)

    def test_out_and_back(self):
        """Returning to start doubles the one-way distance."""
        a = TrackPoint(51.0, 3.7)
        b = TrackPoint(51.01, 3.7)
        assert calculate_total_distance([a, b, a]) == pytest.approx(2 * distance(a, b))


# =============================================================================
# Test Nearest Index
# =============================================================================

class TestNearestIndex:
    """Tests for nearest_index function."""

    @pytest.fixture
    def line(self):
        return [TrackPoint(51.0 + i * 0.001, 3.7) for i in range(10)]

    def test_exact_hit(self, line):
        assert nearest_index(line, 51.004, 3.7) == 4

    def test_off_track_position(self, line):
        """A click beside the track snaps to the closest point."""
        assert nearest_index(line, 51.0071, 3.7005) == 7

    def test_before_start(self, line):
        assert nearest_index(line, 50.9, 3.7) == 0

    def test_tie_resolves_to_lowest_index(self):
        """Out-and-back tracks revisit positions; first visit wins."""
        a = TrackPoint(51.0, 3.7)
        b = TrackPoint(51.01, 3.7)
        points = [a, b, a, b]
        assert nearest_index(points, 51.01, 3.7) == 1
        assert nearest_index(points, 51.0, 3.7) == 0

    def test_empty_points(self):
        with pytest.raises(EmptyInputError):
            nearest_index([], 51.0, 3.7)
