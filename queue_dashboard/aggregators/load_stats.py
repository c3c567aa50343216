"""Per-attendant and per-department load statistics for active contacts.

Both boards highlight entries whose average attendance time exceeds an
alert limit: critical entries sort first, then by average duration
descending.
"""

import datetime as dt
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from queue_dashboard.aggregators.departments import (
    normalize_department_id,
    normalize_department_map,
)
from queue_dashboard.calculators.business_time import BusinessTimeCalculator
from queue_dashboard.models.attendant import Attendant
from queue_dashboard.models.contact import Contact

DEFAULT_ALERT_LIMIT_MINUTES = 30

UNKNOWN_DEPARTMENT_KEY = "unknown"
NO_DEPARTMENT_NAME = "No department"
UNKNOWN_NAME = "Unknown"


@dataclass(frozen=True)
class AttendantLoad:
    """Active workload of one attendant."""

    attendant: Attendant
    active_count: int
    avg_duration_seconds: float
    longest_duration_seconds: int
    longest_contact_name: str
    is_critical: bool


@dataclass(frozen=True)
class DepartmentLoad:
    """Active workload of one department."""

    id: str
    name: str
    active_count: int
    avg_duration_seconds: float
    longest_duration_seconds: int
    longest_agent_name: str
    agent_count: int
    is_critical: bool


@dataclass
class _LoadAccumulator:
    count: int = 0
    total_seconds: int = 0
    longest_seconds: int = 0
    longest_label: str = ""

    def add(self, seconds: int, label: str) -> None:
        self.count += 1
        self.total_seconds += seconds
        if seconds > self.longest_seconds:
            self.longest_seconds = seconds
            self.longest_label = label

    @property
    def average(self) -> float:
        return self.total_seconds / self.count if self.count else 0.0


def _critical_first(avg_seconds: float, is_critical: bool) -> Tuple[bool, float]:
    return (not is_critical, -avg_seconds)


def calculate_attendant_stats(
    attendants: Iterable[Attendant],
    active_contacts: Iterable[Contact],
    calculator: BusinessTimeCalculator,
    alert_limit_minutes: int = DEFAULT_ALERT_LIMIT_MINUTES,
    now: Optional[dt.datetime] = None,
) -> List[AttendantLoad]:
    """Workload of every attendant currently serving contacts.

    Contacts are attributed through ``agent.platform_user_id``; attendants
    without active contacts are left out.

    Args:
        attendants: Known attendants
        active_contacts: Contacts in attendance
        calculator: Business-time calculator
        alert_limit_minutes: Average duration above which an entry is critical
        now: Current instant (defaults to the calculator's clock)

    Returns:
        AttendantLoad entries, critical first, then by average descending
    """
    now = now if now is not None else calculator.now()
    limit_seconds = alert_limit_minutes * 60

    accumulators: Dict[str, _LoadAccumulator] = {}
    for contact in active_contacts:
        attendant_id = contact.attendant_id
        if not attendant_id:
            continue
        seconds = calculator.business_seconds(contact.attendance_started_at, now)
        accumulators.setdefault(attendant_id, _LoadAccumulator()).add(
            seconds, contact.name
        )

    loads = []
    for attendant in attendants:
        stats = accumulators.get(attendant.id)
        if stats is None:
            continue
        loads.append(
            AttendantLoad(
                attendant=attendant,
                active_count=stats.count,
                avg_duration_seconds=stats.average,
                longest_duration_seconds=stats.longest_seconds,
                longest_contact_name=stats.longest_label,
                is_critical=stats.average > limit_seconds,
            )
        )

    return sorted(
        loads,
        key=lambda load: _critical_first(load.avg_duration_seconds, load.is_critical),
    )


def calculate_department_stats(
    active_contacts: Sequence[Contact],
    department_map: Mapping[str, str],
    attendants: Iterable[Attendant],
    calculator: BusinessTimeCalculator,
    alert_limit_minutes: int = DEFAULT_ALERT_LIMIT_MINUTES,
    now: Optional[dt.datetime] = None,
) -> List[DepartmentLoad]:
    """Workload of every department with active contacts.

    Active contacts are attributed to the serving agent's department first,
    then the contact's own, then the channel default.

    Returns:
        DepartmentLoad entries, critical first, then by average descending
    """
    now = now if now is not None else calculator.now()
    limit_seconds = alert_limit_minutes * 60
    names = normalize_department_map(department_map)
    attendant_names = {a.id: a.name for a in attendants if a.id and a.name}

    accumulators: Dict[str, _LoadAccumulator] = {}
    agents: Dict[str, set] = {}
    for contact in active_contacts:
        agent_department = contact.agent.department_id if contact.agent else None
        department_id = (
            agent_department
            or contact.department_id
            or contact.default_department_id
            or UNKNOWN_DEPARTMENT_KEY
        )
        attendant_id = contact.attendant_id
        agent_name = attendant_names.get(attendant_id or "", UNKNOWN_NAME)

        seconds = calculator.business_seconds(contact.attendance_started_at, now)
        accumulators.setdefault(department_id, _LoadAccumulator()).add(
            seconds, agent_name
        )
        members = agents.setdefault(department_id, set())
        if attendant_id:
            members.add(attendant_id)

    loads = []
    for department_id, stats in accumulators.items():
        if department_id == UNKNOWN_DEPARTMENT_KEY:
            name = NO_DEPARTMENT_NAME
        else:
            name = names.get(normalize_department_id(department_id), UNKNOWN_NAME)
        loads.append(
            DepartmentLoad(
                id=department_id,
                name=name,
                active_count=stats.count,
                avg_duration_seconds=stats.average,
                longest_duration_seconds=stats.longest_seconds,
                longest_agent_name=stats.longest_label,
                agent_count=len(agents[department_id]),
                is_critical=stats.average > limit_seconds,
            )
        )

    return sorted(
        loads,
        key=lambda load: _critical_first(load.avg_duration_seconds, load.is_critical),
    )
