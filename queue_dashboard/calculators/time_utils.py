"""Time utilities for the queue dashboard.

This module provides low-level helpers for the business-time engine:
- Resolving IANA time zone names
- Parsing ISO-8601 instants (with a trailing ``Z``) into a business zone
- Converting between minutes, seconds and timedelta

Naive datetimes are interpreted as wall-clock time in the business zone.
"""

import datetime as dt
from functools import lru_cache
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

Instant = Union[str, dt.datetime]


class InvalidTimestampError(ValueError):
    """Raised when a timestamp cannot be parsed into an instant."""

    pass


@lru_cache(maxsize=None)
def get_zone(name: str) -> ZoneInfo:
    """Resolve an IANA time zone name.

    Args:
        name: Zone name such as "America/Sao_Paulo"

    Returns:
        The ZoneInfo instance

    Raises:
        ValueError: If the zone is unknown
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown time zone: {name!r}") from e


def parse_instant(value: Instant, zone: dt.tzinfo) -> dt.datetime:
    """Parse an ISO-8601 string or datetime into an aware datetime in ``zone``.

    Args:
        value: ISO-8601 string (``Z`` suffix accepted) or datetime
        zone: Business time zone

    Returns:
        Aware datetime expressed in ``zone``

    Raises:
        InvalidTimestampError: If the value cannot be parsed

    Example:
        >>> utc = dt.timezone.utc
        >>> parse_instant("2024-03-04T09:30:00Z", utc)
        datetime.datetime(2024, 3, 4, 9, 30, tzinfo=datetime.timezone.utc)
    """
    if isinstance(value, dt.datetime):
        moment = value
    elif isinstance(value, str):
        text = value.strip()
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        try:
            moment = dt.datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidTimestampError(f"Invalid timestamp: {value!r}") from e
    else:
        raise InvalidTimestampError(
            f"Expected ISO-8601 string or datetime, got {type(value).__name__}"
        )

    if moment.tzinfo is None:
        return moment.replace(tzinfo=zone)
    return moment.astimezone(zone)


def seconds_to_minutes(total_seconds: float) -> int:
    """Convert seconds to whole minutes, dropping partial minutes.

    Negative durations are clamped to zero.

    Example:
        >>> seconds_to_minutes(179.9)
        2
        >>> seconds_to_minutes(-30)
        0
    """
    if total_seconds <= 0:
        return 0
    return int(total_seconds // 60)


def timedelta_to_minutes(td: dt.timedelta) -> int:
    """Convert a timedelta to whole minutes (floored, never negative)."""
    return seconds_to_minutes(td.total_seconds())
