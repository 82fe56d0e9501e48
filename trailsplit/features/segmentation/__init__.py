"""
Trail segmentation module.

Usage:
    from trailsplit.features.segmentation import SegmentationEngine

Components:
- SegmentationEngine: Owns track, markers, settings and undo history
- SegmentReport: Per-segment statistics and difficulty
- HistoryStack: Bounded snapshot stack for undo
"""

from .engine import SegmentationEngine, SegmentReport
from .history import HistoryEntry, HistoryStack

__all__ = [
    "SegmentationEngine",
    "SegmentReport",
    "HistoryStack",
    "HistoryEntry",
]
