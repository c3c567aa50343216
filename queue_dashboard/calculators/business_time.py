"""Business-hours duration engine.

This module computes elapsed "working time" between two instants:
- Only the daily window [start_hour:00, end_hour:00) counts
- Saturdays and Sundays contribute nothing
- The total is floored to whole minutes

Instants are converted to the configured business time zone before the
walk, and the window is applied on that zone's wall clock.
"""

import datetime as dt
from typing import Optional

from pydantic import Field, field_validator, model_validator

from queue_dashboard.calculators.time_utils import (
    Instant,
    get_zone,
    parse_instant,
    timedelta_to_minutes,
)
from queue_dashboard.models.base import BaseDataModel

DEFAULT_START_HOUR = 8
DEFAULT_END_HOUR = 16
DEFAULT_TIMEZONE = "America/Sao_Paulo"

# date.weekday(): Monday is 0, Saturday 5, Sunday 6
_FIRST_WEEKEND_DAY = 5


class BusinessHours(BaseDataModel):
    """Daily business window and the zone it is measured in.

    Attributes:
        start_hour: First business hour of the day (inclusive)
        end_hour: Hour at which business ends (exclusive, 24 allowed)
        timezone: IANA zone name the window is expressed in

    Example:
        >>> hours = BusinessHours(start_hour=8, end_hour=16)
        >>> hours.window_hours
        8
    """

    start_hour: int = Field(DEFAULT_START_HOUR, ge=0, le=23)
    end_hour: int = Field(DEFAULT_END_HOUR, ge=1, le=24)
    timezone: str = Field(DEFAULT_TIMEZONE, min_length=1)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Ensure the zone name resolves."""
        get_zone(v)
        return v

    @model_validator(mode="after")
    def validate_window(self) -> "BusinessHours":
        """Ensure the window is not empty."""
        if self.end_hour <= self.start_hour:
            raise ValueError(
                f"end_hour ({self.end_hour}) must be after "
                f"start_hour ({self.start_hour})"
            )
        return self

    @property
    def window_hours(self) -> int:
        """Width of the daily window in hours (one business day)."""
        return self.end_hour - self.start_hour

    @property
    def zone(self) -> dt.tzinfo:
        return get_zone(self.timezone)


class BusinessTimeCalculator:
    """Computes business minutes between two instants.

    The calculator holds no mutable state; one instance can be shared by
    every board that needs durations.

    Example:
        >>> calc = BusinessTimeCalculator(BusinessHours(timezone="UTC"))
        >>> calc.business_minutes("2024-03-04T09:00:00Z", "2024-03-04T10:30:00Z")
        90
        >>> calc.business_minutes("2024-03-09T09:00:00Z", "2024-03-10T15:00:00Z")
        0
    """

    def __init__(self, hours: Optional[BusinessHours] = None):
        self.hours = hours or BusinessHours()

    def now(self) -> dt.datetime:
        """Current instant in the business zone."""
        return dt.datetime.now(self.hours.zone)

    def localize(self, value: Instant) -> dt.datetime:
        """Parse ``value`` and express it in the business zone.

        Raises:
            InvalidTimestampError: If ``value`` cannot be parsed
        """
        return parse_instant(value, self.hours.zone)

    def business_minutes(self, start: Instant, end: Optional[Instant] = None) -> int:
        """Count business minutes in [start, end).

        Walks the calendar days from ``start``'s day to ``end``'s day. On
        each weekday, the window [start_hour, end_hour) is intersected
        with the part of [start, end) that falls on that day.

        Args:
            start: Beginning of the span
            end: End of the span (defaults to now)

        Returns:
            Whole business minutes; 0 when ``start >= end``

        Raises:
            InvalidTimestampError: If a timestamp string cannot be parsed
        """
        start_local = self.localize(start)
        end_local = self.localize(end) if end is not None else self.now()

        if start_local >= end_local:
            return 0

        zone = self.hours.zone
        window_open = dt.timedelta(hours=self.hours.start_hour)
        window_close = dt.timedelta(hours=self.hours.end_hour)
        total = dt.timedelta()

        day = start_local.date()
        last_day = end_local.date()
        while day <= last_day:
            if day.weekday() < _FIRST_WEEKEND_DAY:
                midnight = dt.datetime.combine(day, dt.time.min, tzinfo=zone)
                overlap_start = max(start_local, midnight + window_open)
                overlap_end = min(end_local, midnight + window_close)
                if overlap_start < overlap_end:
                    total += overlap_end - overlap_start
            day += dt.timedelta(days=1)

        return timedelta_to_minutes(total)

    def business_seconds(self, start: Instant, end: Optional[Instant] = None) -> int:
        """Business duration in seconds, at whole-minute resolution."""
        return self.business_minutes(start, end) * 60


def business_minutes(
    start: Instant, end: Instant, hours: Optional[BusinessHours] = None
) -> int:
    """Convenience wrapper around BusinessTimeCalculator.business_minutes."""
    return BusinessTimeCalculator(hours).business_minutes(start, end)
