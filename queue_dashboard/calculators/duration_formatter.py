"""Compact duration formatting for dashboard cards.

Durations are rendered as ``"45m"``, ``"2h 30m"`` or ``"1d 6h"``. Days are
business days: both the hour/day threshold and the day divisor use the
width of the business window (8 hours for an 08:00-16:00 window), in every
call site.
"""

import datetime as dt
from typing import Optional

from queue_dashboard.calculators.business_time import BusinessTimeCalculator
from queue_dashboard.calculators.time_utils import Instant, seconds_to_minutes
from queue_dashboard.models.contact import Contact


def format_duration_minutes(minutes: int, day_length_hours: int) -> str:
    """Format a minute count as a compact string.

    Args:
        minutes: Duration in whole minutes (negative values clamp to 0)
        day_length_hours: Hours in one displayed day

    Returns:
        Formatted duration

    Example:
        >>> format_duration_minutes(45, 8)
        '45m'
        >>> format_duration_minutes(150, 8)
        '2h 30m'
        >>> format_duration_minutes(600, 8)
        '1d 2h'
    """
    minutes = max(0, int(minutes))
    day_length_hours = max(1, int(day_length_hours))
    hours = minutes // 60

    if minutes < 60:
        return f"{minutes}m"
    if hours < day_length_hours:
        return f"{hours}h {minutes % 60}m"
    return f"{hours // day_length_hours}d {hours % day_length_hours}h"


class DurationFormatter:
    """Formats business durations using one day-length convention.

    Args:
        calculator: Business-time calculator for instant-based formatting
        day_length_hours: Hours per displayed day (defaults to the
            calculator's business window width)
    """

    def __init__(
        self,
        calculator: BusinessTimeCalculator,
        day_length_hours: Optional[int] = None,
    ):
        self.calculator = calculator
        self.day_length_hours = day_length_hours or calculator.hours.window_hours

    def format_minutes(self, minutes: int) -> str:
        return format_duration_minutes(minutes, self.day_length_hours)

    def format_from_seconds(self, total_seconds: float) -> str:
        """Format a duration given in seconds (partial minutes dropped)."""
        return self.format_minutes(seconds_to_minutes(total_seconds))

    def format_smart(self, start: Instant, now: Optional[Instant] = None) -> str:
        """Format the business time elapsed from ``start`` until ``now``.

        Raises:
            InvalidTimestampError: If ``start`` cannot be parsed
        """
        end = now if now is not None else self.calculator.now()
        return self.format_minutes(self.calculator.business_minutes(start, end))

    def attendance_duration(
        self, contact: Contact, now: Optional[dt.datetime] = None
    ) -> str:
        """Format how long the contact has been in attendance."""
        return self.format_smart(contact.attendance_started_at, now)
