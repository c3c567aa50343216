"""Contact filtering for the per-attendant console."""

from enum import Enum
from typing import Iterable, List, Mapping, Optional

from queue_dashboard.aggregators.departments import (
    DEFAULT_NO_DEPARTMENT_LABEL,
    DepartmentResolver,
)
from queue_dashboard.models.contact import Contact


class ConsoleTab(Enum):
    """Queue shown in the console."""

    WAITING = "waiting"
    ACTIVE = "active"


def filter_console_contacts(
    contacts: Iterable[Contact],
    department_map: Mapping[str, str],
    tab: ConsoleTab,
    department: Optional[str] = None,
    attendant_id: Optional[str] = None,
    search: Optional[str] = None,
    no_department_label: str = DEFAULT_NO_DEPARTMENT_LABEL,
) -> List[Contact]:
    """Select the contacts one attendant's console shows.

    Args:
        contacts: Queue matching ``tab``
        department_map: Department id to display name
        tab: Waiting or active queue
        department: Only this department name (None for all)
        attendant_id: Only this attendant's chats; applies to the active tab,
            the waiting queue is shared by the whole department
        search: Case-insensitive match on name, substring match on phone
        no_department_label: Name for contacts without a department

    Returns:
        Matching contacts in input order
    """
    resolver = DepartmentResolver(department_map, no_department_label)
    query = (search or "").strip()

    selected = []
    for contact in contacts:
        if department and resolver.resolve(contact) != department:
            continue
        if attendant_id and tab is ConsoleTab.ACTIVE:
            if contact.attendant_id != attendant_id:
                continue
        if query and not (
            query.lower() in contact.name.lower() or query in contact.phone
        ):
            continue
        selected.append(contact)
    return selected
