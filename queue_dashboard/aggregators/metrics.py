"""Headline metrics for the TV and desktop boards."""

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from queue_dashboard.calculators.business_time import BusinessTimeCalculator
from queue_dashboard.models.contact import Contact

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardMetrics:
    """Summary figures shown in the board header.

    All durations are business seconds at whole-minute resolution.

    Attributes:
        total_waiting: Contacts in the waiting queue
        total_active: Contacts being served
        avg_wait_seconds: Floored mean wait of waiting contacts
        longest_wait_seconds: Longest wait among waiting contacts
        sla_breached_count: Waiting contacts at or past the SLA limit
        avg_active_seconds: Floored mean attendance time of active contacts
    """

    total_waiting: int = 0
    total_active: int = 0
    avg_wait_seconds: int = 0
    longest_wait_seconds: int = 0
    sla_breached_count: int = 0
    avg_active_seconds: int = 0


def calculate_dashboard_metrics(
    waiting_contacts: Sequence[Contact],
    active_contacts: Sequence[Contact],
    calculator: BusinessTimeCalculator,
    sla_limit_minutes: int,
    now: Optional[dt.datetime] = None,
) -> DashboardMetrics:
    """Compute the board header metrics.

    Waiting time runs from each contact's last activity; attendance time
    from its answer time (falling back to last activity).

    Args:
        waiting_contacts: Waiting queue
        active_contacts: Contacts in attendance
        calculator: Business-time calculator
        sla_limit_minutes: SLA limit in minutes
        now: Current instant (defaults to the calculator's clock)

    Returns:
        DashboardMetrics; all zeros for empty queues
    """
    now = now if now is not None else calculator.now()

    total_waiting_seconds = 0
    longest_wait_seconds = 0
    sla_breached_count = 0
    for contact in waiting_contacts:
        minutes = calculator.business_minutes(contact.last_activity, now)
        seconds = minutes * 60
        total_waiting_seconds += seconds
        longest_wait_seconds = max(longest_wait_seconds, seconds)
        if minutes >= sla_limit_minutes:
            sla_breached_count += 1

    total_active_seconds = sum(
        calculator.business_seconds(contact.attendance_started_at, now)
        for contact in active_contacts
    )

    metrics = DashboardMetrics(
        total_waiting=len(waiting_contacts),
        total_active=len(active_contacts),
        avg_wait_seconds=(
            total_waiting_seconds // len(waiting_contacts) if waiting_contacts else 0
        ),
        longest_wait_seconds=longest_wait_seconds,
        sla_breached_count=sla_breached_count,
        avg_active_seconds=(
            total_active_seconds // len(active_contacts) if active_contacts else 0
        ),
    )
    logger.debug(f"Dashboard metrics: {metrics}")
    return metrics
