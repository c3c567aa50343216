"""Attendant roster for the agent status board."""

from dataclasses import dataclass
from typing import Iterable, Tuple

from queue_dashboard.models.attendant import Attendant, AttendantStatus

# Name the ticketing platform gives to unfinished attendant registrations
PLACEHOLDER_ATTENDANT_NAME = "Atendente"

_PRESENCE_RANK = {
    AttendantStatus.ONLINE: 0,
    AttendantStatus.BUSY: 1,
    AttendantStatus.OFFLINE: 2,
}


@dataclass(frozen=True)
class AttendantRoster:
    """Valid attendants, online first, with presence counts."""

    attendants: Tuple[Attendant, ...]
    online: int
    busy: int
    offline: int

    @property
    def total(self) -> int:
        return len(self.attendants)


def is_listed_attendant(
    attendant: Attendant, placeholder_name: str = PLACEHOLDER_ATTENDANT_NAME
) -> bool:
    """Whether an attendant record is complete enough to show."""
    if not attendant.id or not attendant.name:
        return False
    return attendant.name.strip() != placeholder_name


def build_attendant_roster(
    attendants: Iterable[Attendant],
    placeholder_name: str = PLACEHOLDER_ATTENDANT_NAME,
) -> AttendantRoster:
    """Filter incomplete records and order attendants online > busy > offline.

    The sort is stable, so attendants with the same presence keep the API
    order.
    """
    listed = [a for a in attendants if is_listed_attendant(a, placeholder_name)]
    ordered = tuple(sorted(listed, key=lambda a: _PRESENCE_RANK[a.presence]))

    return AttendantRoster(
        attendants=ordered,
        online=sum(1 for a in ordered if a.presence is AttendantStatus.ONLINE),
        busy=sum(1 for a in ordered if a.presence is AttendantStatus.BUSY),
        offline=sum(1 for a in ordered if a.presence is AttendantStatus.OFFLINE),
    )
