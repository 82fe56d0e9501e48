"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
DO NOT duplicate these functions elsewhere.
"""
import math
from typing import Sequence

from .exceptions import EmptyInputError
from .track_types import TrackPoint

# Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance(a: TrackPoint, b: TrackPoint) -> float:
    """Great-circle distance between two track points, in kilometers."""
    return haversine(a.latitude, a.longitude, b.latitude, b.longitude)


def calculate_total_distance(points: Sequence[TrackPoint]) -> float:
    """
    Calculate total distance along a sequence of points.

    Args:
        points: Ordered track points

    Returns:
        Total distance in kilometers (0 for fewer than two points)
    """
    total = 0.0

    for i in range(1, len(points)):
        total += distance(points[i - 1], points[i])

    return total


def nearest_index(
    points: Sequence[TrackPoint],
    lat: float,
    lon: float
) -> int:
    """
    Find the index of the track point closest to a position.

    Ties resolve to the lowest index.

    Args:
        points: Ordered track points (must not be empty)
        lat, lon: Target position (degrees)

    Returns:
        Index into points

    Raises:
        EmptyInputError: If points is empty
    """
    if not points:
        raise EmptyInputError("Cannot resolve a position on an empty track")

    min_distance = math.inf
    closest_index = 0

    for i, point in enumerate(points):
        d = haversine(lat, lon, point.latitude, point.longitude)
        if d < min_distance:
            min_distance = d
            closest_index = i

    return closest_index
