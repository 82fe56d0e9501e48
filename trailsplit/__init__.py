"""
trailsplit: hiking effort estimation over user-split GPX tracks.

Usage:
    from trailsplit.features.segmentation import SegmentationEngine
    from trailsplit.features.gpx import parse_gpx
"""

__version__ = "0.1.0"
