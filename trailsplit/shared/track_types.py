"""
Base types for tracks, markers and segments.

This module contains only dataclasses with NO imports from features
to avoid circular dependencies.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from .constants import MarkerType


@dataclass(frozen=True)
class TrackPoint:
    """A single recorded track sample. Immutable once ingested."""
    latitude: float
    longitude: float
    elevation: float = 0.0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TrackPoint":
        """
        Build a point from a raw record.

        Accepts short keys (lat, lon, ele) as produced by track readers
        and stored in project files, or the long field names.
        A missing or null elevation becomes 0.
        """
        lat = data["lat"] if "lat" in data else data["latitude"]
        lon = data["lon"] if "lon" in data else data["longitude"]
        ele = data.get("ele", data.get("elevation"))
        return cls(
            latitude=float(lat),
            longitude=float(lon),
            elevation=float(ele) if ele is not None else 0.0,
        )


@dataclass(frozen=True)
class MarkerSnapshot:
    """Value copy of a marker, used for undo history and project files."""
    point_index: int
    type: MarkerType = MarkerType.SPLIT


@dataclass
class SplitMarker:
    """
    A user-placed split marker.

    point_index references a TrackPoint by position; the engine keeps
    its markers sorted by it. The engine identifies markers by object
    identity, so keep the instance it returned.
    """
    point_index: int
    type: MarkerType = MarkerType.SPLIT

    def snapshot(self) -> MarkerSnapshot:
        return MarkerSnapshot(point_index=self.point_index, type=self.type)

    @classmethod
    def from_snapshot(cls, snapshot: MarkerSnapshot) -> "SplitMarker":
        return cls(point_index=snapshot.point_index, type=snapshot.type)


@dataclass(frozen=True)
class Segment:
    """
    A contiguous run of track points between two boundaries.

    Both indices are inclusive; consecutive segments share their
    boundary point. marker is the SplitMarker that closes the segment,
    None for the final segment.
    """
    start_index: int
    end_index: int
    marker: SplitMarker | None = None

    @property
    def point_count(self) -> int:
        return self.end_index - self.start_index + 1

    @property
    def is_final(self) -> bool:
        return self.marker is None
