"""
Segment Statistics

Distance, elevation and effort figures for a run of track points.

Equivalent km folds climbing and descending into flat-distance terms
(80 m up or 150 m down count as one extra km) and scales by carried
weight. Walking time follows a 4 km/h + 500 m/h up + 2000 m/h down
rule, shifted 10% per fitness level.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence

from trailsplit.shared.elevation import elevation_gain_loss
from trailsplit.shared.geo import calculate_total_distance
from trailsplit.shared.track_types import TrackPoint

from .schemas import EffortSettings

# Equivalent km
CLIMB_M_PER_EQUIVALENT_KM = 80.0
DESCENT_M_PER_EQUIVALENT_KM = 150.0
BACKPACK_REFERENCE_KG = 75.0

# Walking time
FLAT_SPEED_KMH = 4.0
CLIMB_RATE_M_PER_HOUR = 500.0
DESCENT_RATE_M_PER_HOUR = 2000.0

# Fitness pace factor: BASE + (PIVOT - level) * STEP
FITNESS_FACTOR_BASE = 0.9
FITNESS_FACTOR_PIVOT = 3
FITNESS_FACTOR_STEP = 0.1


@dataclass(frozen=True)
class SegmentStats:
    """Derived metrics for one segment (or a sum of segments)."""
    distance_km: float = 0.0
    elevation_gain_m: float = 0.0
    elevation_loss_m: float = 0.0
    equivalent_km: float = 0.0
    hours: float = 0.0

    def __add__(self, other: "SegmentStats") -> "SegmentStats":
        if not isinstance(other, SegmentStats):
            return NotImplemented
        return SegmentStats(
            distance_km=self.distance_km + other.distance_km,
            elevation_gain_m=self.elevation_gain_m + other.elevation_gain_m,
            elevation_loss_m=self.elevation_loss_m + other.elevation_loss_m,
            equivalent_km=self.equivalent_km + other.equivalent_km,
            hours=self.hours + other.hours,
        )


def backpack_multiplier(backpack_weight_kg: float) -> float:
    """0 kg -> 1.0, 15 kg -> 1.2."""
    return 1 + backpack_weight_kg / BACKPACK_REFERENCE_KG


def fitness_factor(fitness_level: int) -> float:
    """Pace multiplier for walking time; each level shifts it by 10%."""
    return FITNESS_FACTOR_BASE + (FITNESS_FACTOR_PIVOT - fitness_level) * FITNESS_FACTOR_STEP


def estimate_effort(
    distance_km: float,
    elevation_gain_m: float,
    elevation_loss_m: float,
    settings: EffortSettings
) -> SegmentStats:
    """
    Apply the effort formulas to raw totals.

    Args:
        distance_km: Horizontal distance
        elevation_gain_m: Total ascent
        elevation_loss_m: Total descent
        settings: Fitness level and backpack weight

    Returns:
        SegmentStats with equivalent_km and hours filled in
    """
    equivalent_km = (
        distance_km
        + elevation_gain_m / CLIMB_M_PER_EQUIVALENT_KM
        + elevation_loss_m / DESCENT_M_PER_EQUIVALENT_KM
    ) * backpack_multiplier(settings.backpack_weight_kg)

    base_hours = (
        distance_km / FLAT_SPEED_KMH
        + elevation_gain_m / CLIMB_RATE_M_PER_HOUR
        + elevation_loss_m / DESCENT_RATE_M_PER_HOUR
    )
    hours = base_hours * fitness_factor(settings.fitness_level)

    return SegmentStats(
        distance_km=distance_km,
        elevation_gain_m=elevation_gain_m,
        elevation_loss_m=elevation_loss_m,
        equivalent_km=equivalent_km,
        hours=hours,
    )


def compute_stats(
    points: Sequence[TrackPoint],
    settings: EffortSettings
) -> SegmentStats:
    """
    Compute statistics for a run of track points.

    Fewer than two points yield zero distance and elevation.
    """
    distance_km = calculate_total_distance(points)
    gain, loss = elevation_gain_loss([p.elevation for p in points])
    return estimate_effort(distance_km, gain, loss, settings)


def sum_stats(stats: Iterable[SegmentStats]) -> SegmentStats:
    """Field-wise sum, used for progressive trip totals."""
    total = SegmentStats()
    for s in stats:
        total = total + s
    return total
