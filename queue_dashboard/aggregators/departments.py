"""Department name resolution for contacts.

A contact's department comes from the first non-blank id among its own
department, its agent's department and the channel default. Ids are
matched against the department map case-insensitively (trimmed and
lowercased on both sides); unmapped ids are shown as-is.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from queue_dashboard.models.attendant import Department
from queue_dashboard.models.contact import Contact

logger = logging.getLogger(__name__)

DEFAULT_NO_DEPARTMENT_LABEL = "General"


def normalize_department_id(department_id: Optional[str]) -> str:
    """Trim and lowercase a department id ("" for None)."""
    return (department_id or "").strip().lower()


def normalize_department_map(department_map: Mapping[str, str]) -> Dict[str, str]:
    """Return a new map keyed by normalized department ids.

    Entries whose id normalizes to "" are dropped. When two keys collide
    after normalization, the later one wins.

    Example:
        >>> normalize_department_map({" CB123 ": "Sales"})
        {'cb123': 'Sales'}
    """
    normalized: Dict[str, str] = {}
    for department_id, name in department_map.items():
        key = normalize_department_id(department_id)
        if key:
            normalized[key] = name
    return normalized


def effective_department_id(contact: Contact) -> Optional[str]:
    """First non-blank id of: contact, agent, channel default."""
    agent_department = contact.agent.department_id if contact.agent else None
    for candidate in (
        contact.department_id,
        agent_department,
        contact.default_department_id,
    ):
        if candidate and candidate.strip():
            return candidate
    return None


class DepartmentResolver:
    """Resolves display names against one department map.

    The map is normalized once at construction so resolving a whole queue
    does not re-normalize it per contact.

    Example:
        >>> resolver = DepartmentResolver({"cb123": "Sales"})
        >>> resolver.lookup("CB123")
        'Sales'
        >>> resolver.lookup("cb999")
        'cb999'
    """

    def __init__(
        self,
        department_map: Mapping[str, str],
        no_department_label: str = DEFAULT_NO_DEPARTMENT_LABEL,
    ):
        self.department_map = normalize_department_map(department_map)
        self.no_department_label = no_department_label

    def lookup(self, department_id: str) -> str:
        """Mapped name for ``department_id``, or the raw id when unmapped."""
        name = self.department_map.get(normalize_department_id(department_id))
        if name:
            return name
        return department_id

    def resolve(self, contact: Contact) -> str:
        """Effective department name of ``contact``; never empty."""
        department_id = effective_department_id(contact)
        if department_id is None:
            return self.no_department_label
        return self.lookup(department_id)


def resolve_department_name(
    contact: Contact,
    department_map: Mapping[str, str],
    no_department_label: str = DEFAULT_NO_DEPARTMENT_LABEL,
) -> str:
    """Resolve a contact's department display name.

    Args:
        contact: Contact to resolve
        department_map: Department id to display name (any key casing)
        no_department_label: Label used when the contact has no department

    Returns:
        Mapped name, the raw id if unmapped, or the no-department label
    """
    return DepartmentResolver(department_map, no_department_label).resolve(contact)


def build_department_map(
    departments: Iterable[Department],
    defaults: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """Merge fetched departments over a default map.

    Args:
        departments: Departments returned by the API
        defaults: Fallback id to name map

    Returns:
        New map keyed by normalized id
    """
    merged = normalize_department_map(defaults or {})
    for department in departments:
        key = normalize_department_id(department.id)
        name = (department.name or "").strip()
        if key and name:
            merged[key] = name
        else:
            logger.debug(f"Ignoring department without id or name: {department!r}")
    return merged


def list_department_names(
    waiting_contacts: Iterable[Contact],
    active_contacts: Iterable[Contact],
    department_map: Mapping[str, str],
    excluded_departments: Iterable[str] = (),
) -> List[str]:
    """Sorted, unique department names known to the dashboard.

    Combines every id in the map with the ids the contacts are queued in,
    maps them to names and drops excluded names.
    """
    resolver = DepartmentResolver(department_map)
    excluded = frozenset(excluded_departments)

    ids = list(resolver.department_map)
    for contact in (*waiting_contacts, *active_contacts):
        if contact.department_id and contact.department_id.strip():
            ids.append(contact.department_id)

    names = {resolver.lookup(department_id) for department_id in ids}
    return sorted(name for name in names if name not in excluded)
