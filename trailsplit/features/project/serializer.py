"""
Project Serializer

Versioned JSON persistence of a whole project: track points, markers
and a save timestamp.

Decoding dispatches on the version tag. Each older schema has exactly
one migration into ProjectData; a new schema version gets a new entry
in _DECODERS instead of changes to an existing one.
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterable, Sequence

from pydantic import ValidationError

from trailsplit.shared.constants import (
    LEGACY_PROJECT_VERSION,
    PROJECT_FILENAME_PREFIX,
    PROJECT_VERSION,
    MarkerType,
)
from trailsplit.shared.exceptions import InvalidProjectFileError
from trailsplit.shared.track_types import MarkerSnapshot, SplitMarker, TrackPoint

from .schemas import LegacyProjectFile, MarkerRecord, ProjectFile, TrackPointRecord

logger = logging.getLogger(__name__)

TRACK_POINTS_FIELD = "trackPoints"


@dataclass(frozen=True)
class ProjectData:
    """Decoded project, migrated to the current in-memory model."""
    version: str
    points: tuple[TrackPoint, ...]
    markers: tuple[MarkerSnapshot, ...]
    saved_at: datetime | None = None


# =============================================================================
# Encoding
# =============================================================================

def encode_project(
    points: Sequence[TrackPoint],
    markers: Iterable[SplitMarker | MarkerSnapshot],
    saved_at: datetime | None = None
) -> str:
    """
    Encode a project in the current schema.

    Args:
        points: Track points in order
        markers: Markers (live or snapshots)
        saved_at: Save timestamp, defaults to now (UTC)

    Returns:
        JSON text
    """
    project = ProjectFile(
        version=PROJECT_VERSION,
        track_points=[
            TrackPointRecord(lat=p.latitude, lon=p.longitude, ele=p.elevation)
            for p in points
        ],
        markers=[
            MarkerRecord(point_index=m.point_index, type=m.type)
            for m in markers
        ],
        saved_at=saved_at or datetime.now(timezone.utc),
    )
    return project.model_dump_json(by_alias=True, indent=2)


def project_filename(saved_at: datetime | None = None) -> str:
    """File name for a saved project, e.g. trail-project-2024-06-01.json."""
    day = (saved_at or datetime.now(timezone.utc)).date().isoformat()
    return f"{PROJECT_FILENAME_PREFIX}-{day}.json"


# =============================================================================
# Decoding
# =============================================================================

def _points_from_records(records: Iterable[TrackPointRecord]) -> tuple[TrackPoint, ...]:
    return tuple(
        TrackPoint(latitude=r.lat, longitude=r.lon, elevation=r.ele)
        for r in records
    )


def _decode_current(data: dict) -> ProjectData:
    project = ProjectFile.model_validate(data)
    return ProjectData(
        version=project.version,
        points=_points_from_records(project.track_points),
        markers=tuple(
            MarkerSnapshot(point_index=m.point_index, type=m.type)
            for m in project.markers
        ),
        saved_at=project.saved_at,
    )


def _migrate_legacy(data: dict) -> ProjectData:
    """Pre-2.0 files only stored marker indices; all become plain splits."""
    project = LegacyProjectFile.model_validate(data)
    logger.info(
        f"Migrating project from version {project.version or 'unversioned'}: "
        f"{len(project.marker_indices)} markers -> {MarkerType.SPLIT.value}"
    )
    return ProjectData(
        version=PROJECT_VERSION,
        points=_points_from_records(project.track_points),
        markers=tuple(
            MarkerSnapshot(point_index=index, type=MarkerType.SPLIT)
            for index in project.marker_indices
        ),
        saved_at=project.saved_at,
    )


_DECODERS: dict[str, Callable[[dict], ProjectData]] = {
    LEGACY_PROJECT_VERSION: _migrate_legacy,
    PROJECT_VERSION: _decode_current,
}


def _schema_version(raw_version) -> str:
    """Map the stored version tag onto a key of _DECODERS."""
    if raw_version is None:
        return LEGACY_PROJECT_VERSION

    if isinstance(raw_version, (int, float)) and not isinstance(raw_version, bool):
        # 2 and 2.0 name the same schema
        version = f"{float(raw_version):.1f}"
    else:
        version = str(raw_version)
    major = version.split(".", 1)[0]
    if major.isdigit() and int(major) < 2:
        return LEGACY_PROJECT_VERSION
    return version


def decode_project(text: str | bytes) -> ProjectData:
    """
    Decode project JSON of any supported version.

    Args:
        text: Project file content

    Returns:
        ProjectData in the current model

    Raises:
        InvalidProjectFileError: If the document is malformed, lacks a
            track-point list, or has an unsupported version
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidProjectFileError(f"Project file is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidProjectFileError("Project file must contain a JSON object")

    if TRACK_POINTS_FIELD not in data:
        raise InvalidProjectFileError(f"Project file has no '{TRACK_POINTS_FIELD}' field")
    if not isinstance(data[TRACK_POINTS_FIELD], list):
        raise InvalidProjectFileError(f"'{TRACK_POINTS_FIELD}' must be a list")

    version = _schema_version(data.get("version"))
    decoder = _DECODERS.get(version)
    if decoder is None:
        raise InvalidProjectFileError(f"Unsupported project version: {version}")

    try:
        project = decoder({**data, "version": version})
    except ValidationError as e:
        raise InvalidProjectFileError(f"Invalid project file: {e}") from e

    logger.debug(
        f"Decoded project v{version}: {len(project.points)} points, "
        f"{len(project.markers)} markers"
    )
    return project
