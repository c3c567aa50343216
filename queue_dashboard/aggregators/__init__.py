"""Aggregators that turn fetched queues into board structures.

This package groups, paginates and summarizes contacts and attendants for
the TV, desktop and console boards.
"""

from queue_dashboard.aggregators.console import (
    ConsoleTab,
    filter_console_contacts,
)
from queue_dashboard.aggregators.departments import (
    DEFAULT_NO_DEPARTMENT_LABEL,
    DepartmentResolver,
    build_department_map,
    list_department_names,
    normalize_department_map,
    resolve_department_name,
)
from queue_dashboard.aggregators.load_stats import (
    AttendantLoad,
    DepartmentLoad,
    calculate_attendant_stats,
    calculate_department_stats,
)
from queue_dashboard.aggregators.metrics import (
    DashboardMetrics,
    calculate_dashboard_metrics,
)
from queue_dashboard.aggregators.pagination import (
    DashboardColumn,
    QueueColumnPaginator,
    paginate_queue,
    sort_active_contacts_by_duration,
)
from queue_dashboard.aggregators.roster import AttendantRoster, build_attendant_roster
from queue_dashboard.aggregators.rotation import (
    DashboardView,
    ViewKind,
    build_view_rotation,
    parse_external_urls,
)
from queue_dashboard.aggregators.timeline import (
    ContactTimeline,
    calculate_contact_timeline,
)

__all__ = [
    "ConsoleTab",
    "filter_console_contacts",
    "DEFAULT_NO_DEPARTMENT_LABEL",
    "DepartmentResolver",
    "build_department_map",
    "list_department_names",
    "normalize_department_map",
    "resolve_department_name",
    "AttendantLoad",
    "DepartmentLoad",
    "calculate_attendant_stats",
    "calculate_department_stats",
    "DashboardMetrics",
    "calculate_dashboard_metrics",
    "DashboardColumn",
    "QueueColumnPaginator",
    "paginate_queue",
    "sort_active_contacts_by_duration",
    "AttendantRoster",
    "build_attendant_roster",
    "DashboardView",
    "ViewKind",
    "build_view_rotation",
    "parse_external_urls",
    "ContactTimeline",
    "calculate_contact_timeline",
]
