"""
GPX file handling module.

Usage:
    from trailsplit.features.gpx import parse_gpx
"""

from .parser import parse_gpx

__all__ = [
    "parse_gpx",
]
