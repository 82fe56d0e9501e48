"""
Shared utilities (NOT business logic).

Usage:
    from trailsplit.shared import haversine, smooth_elevations
    from trailsplit.shared.formatters import format_time_hours
"""
from .geo import (
    haversine,
    distance,
    nearest_index,
    calculate_total_distance,
    EARTH_RADIUS_KM,
)
from .elevation import (
    ElevationChange,
    smooth_elevations,
    calculate_elevation_changes,
    elevation_gain_loss,
)
from .formatters import (
    format_time_hours,
    format_distance_km,
    format_elevation,
)
from .constants import (
    MarkerType,
    DifficultyTier,
    DEFAULT_FITNESS_LEVEL,
    DEFAULT_BACKPACK_WEIGHT_KG,
    HISTORY_LIMIT,
    PROJECT_VERSION,
)
from .track_types import TrackPoint, SplitMarker, MarkerSnapshot, Segment
from .exceptions import (
    TrailSplitError,
    EmptyInputError,
    InvalidProjectFileError,
    InvalidTrackFileError,
    IndexOutOfRangeError,
    MarkerNotFoundError,
    NothingToUndoError,
)

__all__ = [
    # geo
    "haversine",
    "distance",
    "nearest_index",
    "calculate_total_distance",
    "EARTH_RADIUS_KM",
    # elevation
    "ElevationChange",
    "smooth_elevations",
    "calculate_elevation_changes",
    "elevation_gain_loss",
    # formatters
    "format_time_hours",
    "format_distance_km",
    "format_elevation",
    # constants
    "MarkerType",
    "DifficultyTier",
    "DEFAULT_FITNESS_LEVEL",
    "DEFAULT_BACKPACK_WEIGHT_KG",
    "HISTORY_LIMIT",
    "PROJECT_VERSION",
    # types
    "TrackPoint",
    "SplitMarker",
    "MarkerSnapshot",
    "Segment",
    # errors
    "TrailSplitError",
    "EmptyInputError",
    "InvalidProjectFileError",
    "InvalidTrackFileError",
    "IndexOutOfRangeError",
    "MarkerNotFoundError",
    "NothingToUndoError",
]
