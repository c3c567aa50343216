"""Time breakdown of a single contact for the details view."""

import datetime as dt
from dataclasses import dataclass
from typing import Optional

from queue_dashboard.calculators.business_time import BusinessTimeCalculator
from queue_dashboard.models.contact import Contact


@dataclass(frozen=True)
class ContactTimeline:
    """Waiting and attendance spans of one contact.

    Attributes:
        waiting_started_at: Queue entry (request time, else creation, else now)
        waiting_ended_at: Answer time, or now while still waiting
        waiting_minutes: Business minutes spent waiting
        attendance_minutes: Business minutes since attendance started
        is_answered: Whether an attendant picked the contact up
    """

    waiting_started_at: dt.datetime
    waiting_ended_at: dt.datetime
    waiting_minutes: int
    attendance_minutes: int
    is_answered: bool


def calculate_contact_timeline(
    contact: Contact,
    calculator: BusinessTimeCalculator,
    now: Optional[dt.datetime] = None,
) -> ContactTimeline:
    """Break a contact's history into waiting and attendance business time."""
    now = calculator.localize(now) if now is not None else calculator.now()
    agent = contact.agent

    if agent is not None and agent.date_request is not None:
        waiting_start = agent.date_request
    elif contact.date_create is not None:
        waiting_start = contact.date_create
    else:
        waiting_start = now

    is_answered = agent is not None and agent.date_answer is not None
    waiting_end = agent.date_answer if is_answered else now

    return ContactTimeline(
        waiting_started_at=calculator.localize(waiting_start),
        waiting_ended_at=calculator.localize(waiting_end),
        waiting_minutes=calculator.business_minutes(waiting_start, waiting_end),
        attendance_minutes=(
            calculator.business_minutes(contact.attendance_started_at, now)
            if is_answered
            else 0
        ),
        is_answered=is_answered,
    )
