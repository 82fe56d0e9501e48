"""
Project file schemas.

Pydantic models for the on-disk project format. Field aliases are the
JSON keys; Python code uses the snake_case names.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from trailsplit.shared.constants import PROJECT_VERSION, MarkerType

LEGACY_MARKERS_FIELD = "markerIndices"


class TrackPointRecord(BaseModel):
    """Single point in a stored track."""

    lat: float
    lon: float
    ele: float = 0.0

    @field_validator("ele", mode="before")
    @classmethod
    def missing_elevation_is_zero(cls, v):
        """Tracks without elevation store null."""
        return 0.0 if v is None else v


class MarkerRecord(BaseModel):
    """Split marker as stored in a version 2 project."""

    model_config = ConfigDict(populate_by_name=True)

    point_index: int = Field(..., ge=0, alias="pointIndex")
    type: MarkerType = MarkerType.SPLIT


class ProjectFile(BaseModel):
    """Current (2.0) project file."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = PROJECT_VERSION
    track_points: list[TrackPointRecord] = Field(..., alias="trackPoints")
    markers: list[MarkerRecord] = Field(default_factory=list)
    saved_at: datetime | None = Field(default=None, alias="savedAt")

    @model_validator(mode="before")
    @classmethod
    def reject_legacy_markers(cls, data):
        """markerIndices belongs to pre-2.0 files only."""
        if isinstance(data, dict) and LEGACY_MARKERS_FIELD in data:
            raise ValueError(
                f"'{LEGACY_MARKERS_FIELD}' is not valid in a version {PROJECT_VERSION} project"
            )
        return data


class LegacyProjectFile(BaseModel):
    """Pre-2.0 project file: bare marker indices, no marker types."""

    model_config = ConfigDict(populate_by_name=True)

    version: str | None = None
    track_points: list[TrackPointRecord] = Field(..., alias="trackPoints")
    marker_indices: list[Annotated[int, Field(ge=0)]] = Field(
        default_factory=list, alias=LEGACY_MARKERS_FIELD
    )
    saved_at: datetime | None = Field(default=None, alias="savedAt")
