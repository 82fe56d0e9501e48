"""
Tests for display formatters.
"""

from trailsplit.shared.formatters import (
    format_time_hours,
    format_distance_km,
    format_elevation,
)


class TestFormatTimeHours:

    def test_whole_hours(self):
        assert format_time_hours(3.0) == "3h00m"

    def test_minutes_padded(self):
        assert format_time_hours(2.0 + 5 / 60) == "2h05m"

    def test_rounds_up_to_next_hour(self):
        """59.7 minutes must not render as '0h60m'."""
        assert format_time_hours(0.995) == "1h00m"

    def test_negative(self):
        assert format_time_hours(-1.0) == "—"


class TestFormatDistance:

    def test_two_decimals(self):
        assert format_distance_km(12.3456) == "12.35 km"


class TestFormatElevation:

    def test_gain(self):
        assert format_elevation(849.6) == "+850 m"

    def test_loss(self):
        assert format_elevation(300.2, "-") == "-300 m"
