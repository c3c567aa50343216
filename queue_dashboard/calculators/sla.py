"""SLA evaluation for waiting contacts.

A contact's wait is measured in business minutes from its last activity.
The elapsed percentage is deliberately not clamped: alerting needs the true
value once the limit is passed, while progress bars use ``progress``.
"""

import datetime as dt
from dataclasses import dataclass
from typing import Optional

from queue_dashboard.calculators.business_time import BusinessTimeCalculator
from queue_dashboard.models.contact import Contact


@dataclass(frozen=True)
class SlaStatus:
    """SLA state of a waiting contact.

    Attributes:
        is_overdue: True once the wait reaches the limit
        minutes_overdue: Minutes past the limit (0 when not overdue)
        minutes_remaining: Minutes left before the limit (0 when overdue)
        formatted_time: "-5m" when overdue, "10m" otherwise
        percentage: Share of the limit already waited, above 100 when overdue
    """

    is_overdue: bool
    minutes_overdue: int
    minutes_remaining: int
    formatted_time: str
    percentage: float

    @property
    def progress(self) -> float:
        """Percentage clamped to 0-100 for progress bars."""
        return min(100.0, max(0.0, self.percentage))


def evaluate_minutes(minutes_waiting: int, sla_limit_minutes: int) -> SlaStatus:
    """Derive the SLA status for a precomputed wait.

    Args:
        minutes_waiting: Business minutes waited so far
        sla_limit_minutes: SLA limit in minutes

    Returns:
        SlaStatus

    Raises:
        ValueError: If the limit is not positive

    Example:
        >>> status = evaluate_minutes(20, 15)
        >>> status.formatted_time, round(status.percentage, 1)
        ('-5m', 133.3)
    """
    if sla_limit_minutes <= 0:
        raise ValueError(f"SLA limit must be positive, got {sla_limit_minutes}")

    minutes_waiting = max(0, minutes_waiting)
    is_overdue = minutes_waiting >= sla_limit_minutes

    if is_overdue:
        minutes_overdue = minutes_waiting - sla_limit_minutes
        minutes_remaining = 0
        formatted_time = f"-{minutes_overdue}m"
    else:
        minutes_overdue = 0
        minutes_remaining = sla_limit_minutes - minutes_waiting
        formatted_time = f"{minutes_remaining}m"

    return SlaStatus(
        is_overdue=is_overdue,
        minutes_overdue=minutes_overdue,
        minutes_remaining=minutes_remaining,
        formatted_time=formatted_time,
        percentage=(minutes_waiting / sla_limit_minutes) * 100,
    )


class SlaEvaluator:
    """Evaluates contacts against an SLA limit in business minutes."""

    def __init__(self, calculator: BusinessTimeCalculator):
        self.calculator = calculator

    def evaluate(
        self,
        contact: Contact,
        sla_limit_minutes: int,
        now: Optional[dt.datetime] = None,
    ) -> SlaStatus:
        """Evaluate how the contact's wait compares to the SLA limit.

        Args:
            contact: Waiting contact
            sla_limit_minutes: SLA limit in minutes
            now: Current instant (defaults to the calculator's clock)

        Returns:
            SlaStatus for the contact
        """
        end = now if now is not None else self.calculator.now()
        minutes_waiting = self.calculator.business_minutes(contact.last_activity, end)
        return evaluate_minutes(minutes_waiting, sla_limit_minutes)
