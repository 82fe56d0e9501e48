"""
Errors raised by the trail engine and its collaborators.

Every caller-visible failure derives from TrailSplitError so a UI can
catch one type and still tell the kinds apart.
"""


class TrailSplitError(Exception):
    """Base trailsplit error."""
    pass


class EmptyInputError(TrailSplitError):
    """No track points where at least one is required."""
    pass


class InvalidProjectFileError(TrailSplitError):
    """Project file is missing required fields or is malformed."""
    pass


class InvalidTrackFileError(TrailSplitError):
    """Track file (GPX) could not be parsed."""
    pass


class IndexOutOfRangeError(TrailSplitError, IndexError):
    """Marker index outside the loaded track."""

    def __init__(self, point_index: int, point_count: int):
        self.point_index = point_index
        self.point_count = point_count
        if point_count:
            message = f"Point index {point_index} outside track range [0, {point_count - 1}]"
        else:
            message = f"Point index {point_index} given but no track is loaded"
        super().__init__(message)


class MarkerNotFoundError(TrailSplitError, LookupError):
    """Marker is not owned by the engine."""
    pass


class NothingToUndoError(TrailSplitError):
    """Undo history is empty."""
    pass
