"""
Unified constants for markers, difficulty tiers and project files.

This module provides a single source of truth for enum values that
travel over the wire (project files, settings) and for the domain
constants of the effort model.
"""

from enum import Enum


class MarkerType(str, Enum):
    """
    Kind of split marker placed on the track.

    Values are the strings stored in project files.
    """
    SPLIT = "split"
    WILD_CAMP = "wildcamp"
    CAMPING = "camping"
    HOTEL = "hotel"
    REST = "rest"


class DifficultyTier(str, Enum):
    """Difficulty tier of a segment, ordered from easiest to hardest."""
    COMFORTABLE = "comfortable"
    MODERATE = "moderate"
    HEAVY = "heavy"
    SEVERE = "severe"

    @property
    def severity(self) -> int:
        """Position in the easiest-to-hardest ordering (0..3)."""
        return list(DifficultyTier).index(self)


# === Effort settings ===
MIN_FITNESS_LEVEL = 1
MAX_FITNESS_LEVEL = 5
DEFAULT_FITNESS_LEVEL = 2
DEFAULT_BACKPACK_WEIGHT_KG = 15.0

# Key under which effort settings are persisted
SETTINGS_KEY = "hikingSettings"

# === Undo history ===
HISTORY_LIMIT = 20

# === Project files ===
PROJECT_VERSION = "2.0"
LEGACY_PROJECT_VERSION = "1.0"
PROJECT_FILENAME_PREFIX = "trail-project"
