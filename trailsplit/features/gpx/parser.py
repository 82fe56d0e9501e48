"""
GPX Reader

Extracts the ordered track points of a GPX file for the engine.
"""

import logging
import re

import gpxpy
import gpxpy.gpx

from trailsplit.shared.exceptions import InvalidTrackFileError
from trailsplit.shared.track_types import TrackPoint

logger = logging.getLogger(__name__)

# encoding pseudo-attribute of the XML declaration
_DECLARED_ENCODING = re.compile(rb'^\s*<\?xml[^>]*?encoding=["\']([A-Za-z0-9._-]+)["\']')
_ENCODING_ATTRIBUTE = re.compile(r'^(\s*<\?xml[^>]*?)\s+encoding=["\'][^"\']*["\']')


def _decode(content: bytes) -> str:
    """Decode raw GPX bytes with the declared encoding (UTF-8 by default)."""
    content = content.removeprefix(b"\xef\xbb\xbf")
    match = _DECLARED_ENCODING.match(content)
    encoding = match.group(1).decode("ascii") if match else "utf-8"
    return content.decode(encoding)


def _to_track_point(point) -> TrackPoint:
    ele = float(point.elevation) if point.elevation else 0.0
    return TrackPoint(latitude=point.latitude, longitude=point.longitude, elevation=ele)


def parse_gpx(content: str | bytes) -> list[TrackPoint]:
    """
    Extract points from GPX content.

    Track points of all tracks and segments are concatenated in file
    order. Route points are used only when the file has no tracks.
    Points without elevation get 0.

    Args:
        content: GPX file content; bytes are decoded using the encoding
            named in the XML declaration

    Returns:
        List of TrackPoint (may be empty)

    Raises:
        InvalidTrackFileError: If the content is not valid GPX or cannot
            be decoded
    """
    try:
        if isinstance(content, bytes):
            content = _decode(content)
        # Text is decoded from here on; drop the declared encoding
        content = _ENCODING_ATTRIBUTE.sub(r"\1", content, count=1)
        gpx = gpxpy.parse(content)
    except (UnicodeDecodeError, LookupError, gpxpy.gpx.GPXException) as e:
        logger.error(f"Failed to parse GPX: {e}")
        raise InvalidTrackFileError(f"Invalid GPX file: {e}") from e

    points: list[TrackPoint] = []

    for track in gpx.tracks:
        for segment in track.segments:
            for point in segment.points:
                points.append(_to_track_point(point))

    if not points:
        for route in gpx.routes:
            for point in route.points:
                points.append(_to_track_point(point))

    logger.debug(f"Parsed {len(points)} points from GPX")
    return points
