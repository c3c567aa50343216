"""Queue column pagination for the rotating boards.

Contacts are grouped by department, departments are ordered by queue size
(then name), each department is split into fixed-size columns that keep
queue positions, and the columns are sliced into fixed-size pages.

The paginator does not reorder contacts inside a department; callers that
want a particular order (oldest first, longest attendance first) sort the
input before calling.
"""

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from queue_dashboard.aggregators.departments import (
    DEFAULT_NO_DEPARTMENT_LABEL,
    DepartmentResolver,
)
from queue_dashboard.calculators.time_utils import parse_instant
from queue_dashboard.models.contact import Contact

logger = logging.getLogger(__name__)

DEFAULT_ITEMS_PER_COLUMN = 5
DEFAULT_COLUMNS_PER_PAGE = 5

DepartmentGroup = Tuple[str, Tuple[Contact, ...]]


@dataclass(frozen=True)
class DashboardColumn:
    """One column of a dashboard page.

    Attributes:
        id: "<department>-<part>"
        title: Department name, with "(part/total)" when split
        contacts: At most items_per_column contacts, in queue order
        start_position: 1-based queue rank of the first contact
        has_more: True unless this is the department's last column
        is_empty: True only for placeholder columns
    """

    id: str
    title: str
    contacts: Tuple[Contact, ...]
    start_position: int = 1
    has_more: bool = False
    is_empty: bool = False

    @classmethod
    def placeholder(cls, title: str) -> "DashboardColumn":
        """Column shown for a department with nobody in the queue."""
        return cls(id=f"{title}-empty", title=title, contacts=(), is_empty=True)


def group_by_department(
    contacts: Iterable[Contact],
    resolver: DepartmentResolver,
    excluded_departments: Iterable[str] = (),
) -> Tuple[DepartmentGroup, ...]:
    """Group contacts by resolved department name.

    Contacts keep their input order within a group. Groups are ordered by
    descending size, then by name.

    Returns:
        Tuple of (department name, contacts) pairs
    """
    excluded = frozenset(excluded_departments)
    buckets: Dict[str, List[Contact]] = {}
    for contact in contacts:
        name = resolver.resolve(contact)
        if name in excluded:
            continue
        buckets.setdefault(name, []).append(contact)

    ordered = sorted(buckets.items(), key=lambda item: (-len(item[1]), item[0]))
    return tuple((name, tuple(members)) for name, members in ordered)


def chunk_department(
    name: str, contacts: Sequence[Contact], items_per_column: int
) -> List[DashboardColumn]:
    """Split one department's queue into consecutive columns.

    Example:
        12 contacts with 5 per column give columns starting at 1, 6 and 11,
        titled "Dept (1/3)", "Dept (2/3)" and "Dept (3/3)".
    """
    size = max(1, items_per_column)
    total_parts = (len(contacts) + size - 1) // size
    columns = []
    for offset in range(0, len(contacts), size):
        part = offset // size + 1
        title = f"{name} ({part}/{total_parts})" if total_parts > 1 else name
        columns.append(
            DashboardColumn(
                id=f"{name}-{part}",
                title=title,
                contacts=tuple(contacts[offset : offset + size]),
                start_position=offset + 1,
                has_more=offset + size < len(contacts),
            )
        )
    return columns


def paginate_columns(
    columns: Sequence[DashboardColumn], columns_per_page: int
) -> List[List[DashboardColumn]]:
    """Slice columns into pages; no columns gives one empty page."""
    size = max(1, columns_per_page)
    pages = [list(columns[i : i + size]) for i in range(0, len(columns), size)]
    return pages or [[]]


def paginate_queue(
    contacts: Iterable[Contact],
    department_map: Mapping[str, str],
    items_per_column: int = DEFAULT_ITEMS_PER_COLUMN,
    columns_per_page: int = DEFAULT_COLUMNS_PER_PAGE,
    excluded_departments: Iterable[str] = (),
    no_department_label: str = DEFAULT_NO_DEPARTMENT_LABEL,
) -> List[List[DashboardColumn]]:
    """Lay out a queue as pages of department columns.

    Args:
        contacts: Contacts in queue order
        department_map: Department id to display name
        items_per_column: Contacts per column (floored to 1)
        columns_per_page: Columns per page (floored to 1)
        excluded_departments: Department names never shown
        no_department_label: Name for contacts without a department

    Returns:
        Pages of columns; ``[[]]`` when nothing is eligible
    """
    resolver = DepartmentResolver(department_map, no_department_label)
    groups = group_by_department(contacts, resolver, excluded_departments)

    columns: List[DashboardColumn] = []
    for name, members in groups:
        columns.extend(chunk_department(name, members, items_per_column))

    pages = paginate_columns(columns, columns_per_page)
    logger.debug(
        f"Paginated {len(groups)} department(s) into {len(columns)} column(s) "
        f"across {len(pages)} page(s)"
    )
    return pages


def sort_active_contacts_by_duration(
    contacts: Iterable[Contact], zone: dt.tzinfo = dt.timezone.utc
) -> List[Contact]:
    """Order active contacts longest-running first.

    Sorts by attendance start ascending; ties keep their input order.
    Naive timestamps are read in ``zone``.
    """
    return sorted(
        contacts,
        key=lambda contact: parse_instant(contact.attendance_started_at, zone),
    )


class QueueColumnPaginator:
    """Paginator bound to one board's layout settings.

    Naive attendance timestamps are read in ``zone`` when sorting active
    contacts.

    Example:
        >>> paginator = QueueColumnPaginator(items_per_column=5, columns_per_page=4)
        >>> paginator.paginate([], {})
        [[]]
    """

    def __init__(
        self,
        items_per_column: int = DEFAULT_ITEMS_PER_COLUMN,
        columns_per_page: int = DEFAULT_COLUMNS_PER_PAGE,
        excluded_departments: Iterable[str] = (),
        no_department_label: str = DEFAULT_NO_DEPARTMENT_LABEL,
        zone: dt.tzinfo = dt.timezone.utc,
    ):
        self.items_per_column = max(1, items_per_column)
        self.columns_per_page = max(1, columns_per_page)
        self.excluded_departments = frozenset(excluded_departments)
        self.no_department_label = no_department_label
        self.zone = zone

    def paginate(
        self, contacts: Iterable[Contact], department_map: Mapping[str, str]
    ) -> List[List[DashboardColumn]]:
        return paginate_queue(
            contacts,
            department_map,
            items_per_column=self.items_per_column,
            columns_per_page=self.columns_per_page,
            excluded_departments=self.excluded_departments,
            no_department_label=self.no_department_label,
        )

    def paginate_active(
        self, contacts: Iterable[Contact], department_map: Mapping[str, str]
    ) -> List[List[DashboardColumn]]:
        """Paginate active contacts, longest-running first."""
        return self.paginate(
            sort_active_contacts_by_duration(contacts, self.zone), department_map
        )
