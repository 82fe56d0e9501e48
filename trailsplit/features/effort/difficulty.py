"""
Difficulty classification for segments.

Maps equivalent km onto four tiers using thresholds that depend on the
hiker's fitness level. Single source of truth for the cut points and
the colors the presentation layer uses per tier.
"""

from dataclasses import dataclass
from typing import NamedTuple

from trailsplit.shared.constants import DifficultyTier


class TierThresholds(NamedTuple):
    """Upper bounds (exclusive, equivalent km) of the first three tiers."""
    comfortable: float
    moderate: float
    heavy: float


# Fitness level -> cut points. Level 3 is the reference table.
FITNESS_THRESHOLDS: dict[int, TierThresholds] = {
    1: TierThresholds(comfortable=20.0, moderate=26.0, heavy=32.0),
    2: TierThresholds(comfortable=25.0, moderate=32.0, heavy=38.0),
    3: TierThresholds(comfortable=30.0, moderate=38.0, heavy=45.0),
    4: TierThresholds(comfortable=35.0, moderate=44.0, heavy=52.0),
    5: TierThresholds(comfortable=40.0, moderate=50.0, heavy=60.0),
}

FALLBACK_FITNESS_LEVEL = 3

# Tier -> (color, background color, label)
TIER_STYLES: dict[DifficultyTier, tuple] = {
    DifficultyTier.COMFORTABLE: ("#4CAF50", "#e8f5e9", "Comfortable"),
    DifficultyTier.MODERATE: ("#FF9800", "#fff3e0", "Tough but doable"),
    DifficultyTier.HEAVY: ("#FF5722", "#fbe9e7", "Heavy"),
    DifficultyTier.SEVERE: ("#D32F2F", "#ffebee", "Very heavy / experienced hikers only"),
}


@dataclass(frozen=True)
class Difficulty:
    """Classification result with display hints."""
    tier: DifficultyTier
    color: str
    background_color: str
    label: str


def thresholds_for(fitness_level: int) -> TierThresholds:
    """Cut points for a fitness level; unknown levels use level 3."""
    return FITNESS_THRESHOLDS.get(fitness_level, FITNESS_THRESHOLDS[FALLBACK_FITNESS_LEVEL])


def classify_tier(equivalent_km: float, fitness_level: int) -> DifficultyTier:
    """
    Classify equivalent km into a difficulty tier.

    Args:
        equivalent_km: Effort metric of a segment
        fitness_level: 1-5

    Returns:
        DifficultyTier
    """
    limits = thresholds_for(fitness_level)
    if equivalent_km < limits.comfortable:
        return DifficultyTier.COMFORTABLE
    if equivalent_km < limits.moderate:
        return DifficultyTier.MODERATE
    if equivalent_km < limits.heavy:
        return DifficultyTier.HEAVY
    return DifficultyTier.SEVERE


def classify(equivalent_km: float, fitness_level: int) -> Difficulty:
    """Classify equivalent km and attach the tier's display colors."""
    tier = classify_tier(equivalent_km, fitness_level)
    color, background_color, label = TIER_STYLES[tier]
    return Difficulty(
        tier=tier,
        color=color,
        background_color=background_color,
        label=label,
    )
