"""
Elevation processing utilities.

This is the SINGLE SOURCE OF TRUTH for elevation calculations.
"""
from typing import NamedTuple, Sequence

# Moving-average window for GPS elevation noise
SMOOTHING_WINDOW = 5

# Accumulated change (m) needed before it counts as gain or loss
NOISE_THRESHOLD_M = 0.5


class ElevationChange(NamedTuple):
    """Total elevation gain and loss in meters."""
    gain_m: float
    loss_m: float


def smooth_elevations(
    elevations: Sequence[float],
    window_size: int = SMOOTHING_WINDOW
) -> list[float]:
    """
    Smooth elevation data using a centered moving average.

    The window is clipped at both ends of the sequence, so the first
    and last samples are averaged over fewer neighbors.

    Args:
        elevations: Raw elevation values
        window_size: Size of smoothing window (odd number recommended)

    Returns:
        Smoothed elevation values, same length as the input
    """
    smoothed = []
    half_window = window_size // 2

    for i in range(len(elevations)):
        start = max(0, i - half_window)
        end = min(len(elevations), i + half_window + 1)
        window = elevations[start:end]
        smoothed.append(sum(window) / len(window))

    return smoothed


def calculate_elevation_changes(
    elevations: Sequence[float],
    threshold: float = NOISE_THRESHOLD_M
) -> ElevationChange:
    """
    Calculate total elevation gain and loss with a hysteresis band.

    Signed deltas accumulate until the running total leaves
    [-threshold, threshold]; it is then booked as gain or loss and
    reset. Small up-and-down jitter therefore never counts twice.
    A residual still inside the band at the end is dropped.

    Args:
        elevations: List of elevation values
        threshold: Half-width of the band in meters

    Returns:
        ElevationChange(gain_m, loss_m)
    """
    gain = 0.0
    loss = 0.0
    cumulative = 0.0

    for i in range(1, len(elevations)):
        cumulative += elevations[i] - elevations[i - 1]
        if cumulative > threshold:
            gain += cumulative
            cumulative = 0.0
        elif cumulative < -threshold:
            loss += abs(cumulative)
            cumulative = 0.0

    return ElevationChange(gain, loss)


def elevation_gain_loss(elevations: Sequence[float]) -> ElevationChange:
    """Smooth raw samples, then total their gain and loss."""
    if len(elevations) < 2:
        return ElevationChange(0.0, 0.0)
    return calculate_elevation_changes(smooth_elevations(elevations))
