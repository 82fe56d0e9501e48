"""
Effort estimation module.

Usage:
    from trailsplit.features.effort import EffortSettings, compute_stats, classify

Components:
- EffortSettings: Pydantic model for fitness level and backpack weight
- compute_stats / estimate_effort: Segment statistics and effort formulas
- classify: Fitness-dependent difficulty tiers
- SettingsRepository: JSON-file persistence of EffortSettings
"""

from .schemas import EffortSettings
from .stats import SegmentStats, compute_stats, estimate_effort, sum_stats
from .difficulty import (
    Difficulty,
    TierThresholds,
    FITNESS_THRESHOLDS,
    classify,
    classify_tier,
    thresholds_for,
)
from .repository import SettingsRepository

__all__ = [
    # Schemas
    "EffortSettings",
    # Statistics
    "SegmentStats",
    "compute_stats",
    "estimate_effort",
    "sum_stats",
    # Difficulty
    "Difficulty",
    "TierThresholds",
    "FITNESS_THRESHOLDS",
    "classify",
    "classify_tier",
    "thresholds_for",
    # Repository
    "SettingsRepository",
]
