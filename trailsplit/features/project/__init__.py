"""
Project file handling module.

Usage:
    from trailsplit.features.project import encode_project, decode_project

Components:
- encode_project / decode_project: Versioned JSON codec with legacy migration
- ProjectData: Decoded project in the current in-memory model
- ProjectFile, LegacyProjectFile: Pydantic schemas of the stored formats
"""

from .schemas import LegacyProjectFile, MarkerRecord, ProjectFile, TrackPointRecord
from .serializer import ProjectData, decode_project, encode_project, project_filename

__all__ = [
    # Serializer
    "ProjectData",
    "encode_project",
    "decode_project",
    "project_filename",
    # Schemas
    "ProjectFile",
    "LegacyProjectFile",
    "MarkerRecord",
    "TrackPointRecord",
]
