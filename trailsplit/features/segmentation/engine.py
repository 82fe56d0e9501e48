"""
Segmentation Engine

Owns one project: the track, the sorted split markers, the effort
settings and the undo history. The rendering layer calls these
operations in response to gestures and reads derived segments back;
it never mutates engine state directly.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping

from trailsplit.features.effort import (
    Difficulty,
    EffortSettings,
    SegmentStats,
    classify,
    compute_stats,
    sum_stats,
)
from trailsplit.features.project import decode_project, encode_project
from trailsplit.shared.constants import MarkerType
from trailsplit.shared.exceptions import (
    EmptyInputError,
    IndexOutOfRangeError,
    InvalidProjectFileError,
    MarkerNotFoundError,
    NothingToUndoError,
)
from trailsplit.shared.geo import nearest_index
from trailsplit.shared.track_types import Segment, SplitMarker, TrackPoint

from .history import HistoryEntry, HistoryStack

logger = logging.getLogger(__name__)

PointInput = TrackPoint | Mapping[str, Any]


@dataclass(frozen=True)
class SegmentReport:
    """What the presentation layer renders for one segment."""
    segment: Segment
    stats: SegmentStats
    difficulty: Difficulty


class SegmentationEngine:
    """
    Stateful trail segmentation model.

    Invariants kept by every operation:
    - markers are sorted ascending by point_index
    - every marker index lies in [0, point_count - 1]
    - history holds at most HISTORY_LIMIT snapshots and never spans
      two tracks

    Derived segment data is dropped on every mutation and rebuilt on
    next access.

    Usage:
        engine = SegmentationEngine()
        engine.load_track(points)
        marker = engine.add_marker(120, MarkerType.HOTEL)
        for report in engine.get_segment_reports():
            ...
    """

    def __init__(self, settings: EffortSettings | None = None):
        self._points: tuple[TrackPoint, ...] = ()
        self._markers: list[SplitMarker] = []
        self._settings = settings or EffortSettings()
        self._history = HistoryStack()
        self._reports: list[SegmentReport] | None = None

    # =========================================================================
    # State access
    # =========================================================================

    @property
    def points(self) -> tuple[TrackPoint, ...]:
        return self._points

    @property
    def point_count(self) -> int:
        return len(self._points)

    @property
    def markers(self) -> tuple[SplitMarker, ...]:
        """Live markers in order. Pass them back to edit operations."""
        return tuple(self._markers)

    @property
    def settings(self) -> EffortSettings:
        return self._settings

    @property
    def history_size(self) -> int:
        return len(self._history)

    @property
    def has_track(self) -> bool:
        return bool(self._points)

    def marker_snapshot(self) -> HistoryEntry:
        """Markers by value, in order."""
        return tuple(m.snapshot() for m in self._markers)

    # =========================================================================
    # Track lifecycle
    # =========================================================================

    def load_track(self, points: Iterable[PointInput]) -> None:
        """
        Replace the track. Markers and history are cleared.

        Args:
            points: Ordered TrackPoints or {lat, lon, ele} mappings

        Raises:
            EmptyInputError: If there are no points (state unchanged)
        """
        track = tuple(
            p if isinstance(p, TrackPoint) else TrackPoint.from_mapping(p)
            for p in points
        )
        if not track:
            raise EmptyInputError("No track points found")

        self._points = track
        self._markers = []
        self._history.clear()
        self._invalidate()
        logger.info(f"Loaded track with {len(track)} points")

    def clear_all(self) -> None:
        """Drop track, markers and history."""
        self._points = ()
        self._markers = []
        self._history.clear()
        self._invalidate()
        logger.debug("Cleared project state")

    def update_settings(self, settings: EffortSettings) -> None:
        """Replace effort settings; all statistics are recomputed."""
        self._settings = settings
        self._invalidate()

    # =========================================================================
    # Marker edits (history-tracked)
    # =========================================================================

    def add_marker(
        self,
        point_index: int,
        marker_type: MarkerType = MarkerType.SPLIT
    ) -> SplitMarker:
        """
        Place a marker at a track index.

        A second marker on an occupied index is accepted and yields a
        zero-length segment.

        Returns:
            The new live marker

        Raises:
            IndexOutOfRangeError: If point_index is outside the track
        """
        self._check_index(point_index)
        self.snapshot()

        marker = SplitMarker(point_index=point_index, type=MarkerType(marker_type))
        self._markers.append(marker)
        self._sort_markers()
        self._invalidate()
        logger.debug(f"Added {marker.type.value} marker at {point_index}")
        return marker

    def add_marker_near(
        self,
        lat: float,
        lon: float,
        marker_type: MarkerType = MarkerType.SPLIT
    ) -> SplitMarker:
        """Place a marker at the track point nearest to a clicked position."""
        return self.add_marker(nearest_index(self._points, lat, lon), marker_type)

    def move_marker(self, marker: SplitMarker, new_point_index: int) -> None:
        """
        Reposition a marker (drag). The pre-move state is recorded.

        Raises:
            MarkerNotFoundError: If marker is not one of this engine's
            IndexOutOfRangeError: If new_point_index is outside the track
        """
        self._position_of(marker)
        self._check_index(new_point_index)
        self.snapshot()

        old_index = marker.point_index
        marker.point_index = new_point_index
        self._sort_markers()
        self._invalidate()
        logger.debug(f"Moved marker {old_index} -> {new_point_index}")

    def move_marker_near(self, marker: SplitMarker, lat: float, lon: float) -> int:
        """
        Reposition a marker to the track point nearest to a drop position.

        Returns:
            The resolved point index
        """
        self._position_of(marker)
        new_index = nearest_index(self._points, lat, lon)
        self.move_marker(marker, new_index)
        return new_index

    def delete_marker(self, marker: SplitMarker) -> None:
        """
        Remove a marker.

        Raises:
            MarkerNotFoundError: If marker is not one of this engine's
        """
        position = self._position_of(marker)
        self.snapshot()

        del self._markers[position]
        self._invalidate()
        logger.debug(f"Deleted marker at {marker.point_index}")

    def edit_marker_type(self, marker: SplitMarker, marker_type: MarkerType) -> None:
        """
        Change a marker's type.

        Raises:
            MarkerNotFoundError: If marker is not one of this engine's
        """
        self._position_of(marker)
        new_type = MarkerType(marker_type)
        self.snapshot()

        marker.type = new_type
        self._invalidate()

    # =========================================================================
    # History
    # =========================================================================

    def snapshot(self) -> None:
        """Record the current markers on the undo stack."""
        self._history.push(self.marker_snapshot())

    def undo(self) -> bool:
        """
        Restore the markers from before the last tracked edit.

        Returns:
            False when there is nothing to undo (no change made)
        """
        try:
            entry = self._history.pop()
        except NothingToUndoError:
            logger.debug("Undo requested with empty history")
            return False

        self._markers = [SplitMarker.from_snapshot(s) for s in entry]
        self._invalidate()
        return True

    # =========================================================================
    # Derived data
    # =========================================================================

    def get_segments(self) -> list[Segment]:
        """
        Partition the track at the markers.

        Returns:
            len(markers) + 1 contiguous segments covering [0, N-1];
            an empty list when no track is loaded
        """
        if not self._points:
            return []

        segments = []
        start_index = 0
        for marker in self._markers:
            segments.append(Segment(start_index, marker.point_index, marker))
            start_index = marker.point_index
        segments.append(Segment(start_index, len(self._points) - 1, None))
        return segments

    def get_segment_reports(self) -> list[SegmentReport]:
        """Statistics and difficulty per segment."""
        if self._reports is None:
            self._reports = [self._build_report(s) for s in self.get_segments()]
        return list(self._reports)

    def get_segment_points(self, segment: Segment) -> tuple[TrackPoint, ...]:
        return self._points[segment.start_index:segment.end_index + 1]

    def get_cumulative_stats(self) -> SegmentStats:
        """Field-wise sum of all segment statistics."""
        return sum_stats(r.stats for r in self.get_segment_reports())

    def get_difficulty(self, equivalent_km: float) -> Difficulty:
        """Classify an effort value at the current fitness level."""
        return classify(equivalent_km, self._settings.fitness_level)

    # =========================================================================
    # Persistence
    # =========================================================================

    def save(self, saved_at: datetime | None = None) -> str:
        """
        Serialize the project.

        Raises:
            EmptyInputError: If no track is loaded
        """
        if not self._points:
            raise EmptyInputError("No track loaded, nothing to save")
        return encode_project(self._points, self._markers, saved_at)

    def load(self, text: str | bytes) -> None:
        """
        Replace the whole project from serialized text.

        Either the full project is loaded or state stays untouched.
        History is cleared on success.

        Raises:
            InvalidProjectFileError: If the file is malformed or a marker
                lies outside the stored track
            EmptyInputError: If the file holds no track points
        """
        project = decode_project(text)
        if not project.points:
            raise EmptyInputError("Project file contains no track points")

        point_count = len(project.points)
        for snapshot in project.markers:
            if not 0 <= snapshot.point_index < point_count:
                raise InvalidProjectFileError(
                    f"Marker index {snapshot.point_index} outside track of {point_count} points"
                )

        self._points = project.points
        self._markers = [SplitMarker.from_snapshot(s) for s in project.markers]
        self._sort_markers()
        self._history.clear()
        self._invalidate()
        logger.info(
            f"Loaded project: {point_count} points, {len(self._markers)} markers"
        )

    # =========================================================================
    # Internals
    # =========================================================================

    def _build_report(self, segment: Segment) -> SegmentReport:
        stats = compute_stats(self.get_segment_points(segment), self._settings)
        return SegmentReport(
            segment=segment,
            stats=stats,
            difficulty=self.get_difficulty(stats.equivalent_km),
        )

    def _check_index(self, point_index: int) -> None:
        if (
            isinstance(point_index, bool)
            or not isinstance(point_index, int)
            or not 0 <= point_index < len(self._points)
        ):
            raise IndexOutOfRangeError(point_index, len(self._points))

    def _position_of(self, marker: SplitMarker) -> int:
        for position, candidate in enumerate(self._markers):
            if candidate is marker:
                return position
        raise MarkerNotFoundError(f"Marker at {marker.point_index} is not part of this project")

    def _sort_markers(self) -> None:
        self._markers.sort(key=lambda m: m.point_index)

    def _invalidate(self) -> None:
        self._reports = None
