"""
Formatting utilities for display.

Used by the CLI report.
"""


def format_time_hours(hours: float) -> str:
    """
    Format hours as 'XhYYm'.

    Args:
        hours: Time in hours (e.g., 2.5)

    Returns:
        Formatted string (e.g., '2h30m')
    """
    if hours < 0:
        return "—"

    total_minutes = round(hours * 60)
    h = total_minutes // 60
    m = total_minutes % 60

    return f"{h}h{m:02d}m"


def format_distance_km(km: float) -> str:
    """
    Format distance.

    Args:
        km: Distance in kilometers

    Returns:
        Formatted string (e.g., '12.50 km')
    """
    return f"{km:.2f} km"


def format_elevation(meters: float, sign: str = "+") -> str:
    """
    Format an elevation change with a direction sign.

    Args:
        meters: Elevation change in meters (magnitude)
        sign: '+' for gain, '-' for loss

    Returns:
        Formatted string (e.g., '+850 m')
    """
    return f"{sign}{round(abs(meters))} m"
