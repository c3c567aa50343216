"""Text rendering of dashboard snapshots for the terminal."""

import datetime as dt
from typing import Dict, Iterable, List, Optional, Sequence

from queue_dashboard.aggregators.load_stats import (
    calculate_attendant_stats,
    calculate_department_stats,
)
from queue_dashboard.aggregators.metrics import calculate_dashboard_metrics
from queue_dashboard.aggregators.pagination import DashboardColumn, QueueColumnPaginator
from queue_dashboard.aggregators.roster import build_attendant_roster
from queue_dashboard.aggregators.rotation import (
    DashboardView,
    ViewKind,
    build_view_rotation,
)
from queue_dashboard.calculators.business_time import BusinessTimeCalculator
from queue_dashboard.calculators.duration_formatter import DurationFormatter
from queue_dashboard.calculators.sla import SlaEvaluator
from queue_dashboard.cli.utils.formatters import (
    format_heading,
    format_info,
    format_table,
    format_warning,
)
from queue_dashboard.config.settings import DashboardConfig
from queue_dashboard.services.poller import DashboardSnapshot

VIEW_KINDS = {
    "waiting": {ViewKind.WAITING},
    "active": {ViewKind.ACTIVE},
    "all": set(ViewKind),
}


class DashboardRenderer:
    """Renders the board rotation of a snapshot as plain-text tables."""

    def __init__(self, config: DashboardConfig):
        self.config = config
        self.calculator = BusinessTimeCalculator(config.business_hours())
        self.formatter = DurationFormatter(self.calculator)
        self.sla = SlaEvaluator(self.calculator)
        self.paginator = QueueColumnPaginator(
            items_per_column=config.items_per_column,
            columns_per_page=config.columns_per_page,
            excluded_departments=config.excluded_departments,
            no_department_label=config.no_department_label,
            zone=self.calculator.hours.zone,
        )

    def rotation(self, snapshot: DashboardSnapshot) -> List[DashboardView]:
        waiting_pages = self.paginator.paginate(
            snapshot.waiting, snapshot.department_map
        )
        active_pages = self.paginator.paginate_active(
            snapshot.active, snapshot.department_map
        )
        return build_view_rotation(
            waiting_pages,
            active_pages,
            has_active_contacts=bool(snapshot.active),
            external_urls=self.config.external_urls,
        )

    def render(
        self,
        snapshot: DashboardSnapshot,
        view: str = "all",
        now: Optional[dt.datetime] = None,
    ) -> str:
        """Render the header metrics followed by every selected view."""
        now = now if now is not None else self.calculator.now()
        kinds = VIEW_KINDS[view]

        sections = [self.render_metrics(snapshot, now)]
        for dashboard_view in self.rotation(snapshot):
            if dashboard_view.kind not in kinds:
                continue
            sections.append(self.render_view(dashboard_view, snapshot, now))
        return "\n\n".join(section for section in sections if section)

    def render_view(
        self, view: DashboardView, snapshot: DashboardSnapshot, now: dt.datetime
    ) -> str:
        if view.kind is ViewKind.WAITING:
            return self._render_page(
                f"Waiting queue, page {view.page_index + 1}",
                view.columns,
                lambda column: self._waiting_rows(column, now),
                ["#", "Name", "Phone", "Waiting", "SLA"],
            )
        if view.kind is ViewKind.ACTIVE:
            names = _attendant_names(snapshot)
            return self._render_page(
                f"In attendance, page {view.page_index + 1}",
                view.columns,
                lambda column: self._active_rows(column, names, now),
                ["#", "Name", "Attendant", "Duration"],
            )
        if view.kind is ViewKind.ATTENDANTS:
            return self.render_attendants(snapshot, now)
        if view.kind is ViewKind.DEPARTMENTS:
            return self.render_departments(snapshot, now)
        return format_info(f"External page: {view.url}")

    def render_metrics(self, snapshot: DashboardSnapshot, now: dt.datetime) -> str:
        metrics = calculate_dashboard_metrics(
            snapshot.waiting,
            snapshot.active,
            self.calculator,
            self.config.sla_limit,
            now=now,
        )
        fmt = self.formatter.format_from_seconds
        rows = [
            ["Waiting", metrics.total_waiting],
            ["In attendance", metrics.total_active],
            ["Average wait", fmt(metrics.avg_wait_seconds)],
            ["Longest wait", fmt(metrics.longest_wait_seconds)],
            [f"Over SLA ({self.config.sla_limit}m)", metrics.sla_breached_count],
            ["Average attendance", fmt(metrics.avg_active_seconds)],
        ]
        return format_table(["Metric", "Value"], rows)

    def render_attendants(self, snapshot: DashboardSnapshot, now: dt.datetime) -> str:
        roster = build_attendant_roster(snapshot.attendants)
        loads = {
            load.attendant.id: load
            for load in calculate_attendant_stats(
                roster.attendants,
                snapshot.active,
                self.calculator,
                self.config.avg_time_alert_limit,
                now=now,
            )
        }
        rows = []
        for attendant in roster.attendants:
            load = loads.get(attendant.id)
            rows.append(
                [
                    attendant.name,
                    attendant.presence.name.lower(),
                    load.active_count if load else 0,
                    self.formatter.format_from_seconds(load.avg_duration_seconds)
                    if load
                    else "-",
                    "!" if load and load.is_critical else "",
                ]
            )
        heading = format_heading(
            f"Attendants: {roster.online} online, {roster.busy} busy, "
            f"{roster.offline} offline"
        )
        return "\n".join(
            [heading, format_table(["Name", "Status", "Chats", "Average", ""], rows)]
        )

    def render_departments(self, snapshot: DashboardSnapshot, now: dt.datetime) -> str:
        loads = calculate_department_stats(
            snapshot.active,
            snapshot.department_map,
            snapshot.attendants,
            self.calculator,
            self.config.avg_time_alert_limit,
            now=now,
        )
        rows = [
            [
                load.name,
                load.active_count,
                load.agent_count,
                self.formatter.format_from_seconds(load.avg_duration_seconds),
                self.formatter.format_from_seconds(load.longest_duration_seconds),
                "!" if load.is_critical else "",
            ]
            for load in loads
        ]
        return "\n".join(
            [
                format_heading("Departments"),
                format_table(
                    ["Department", "Chats", "Agents", "Average", "Longest", ""], rows
                ),
            ]
        )

    def _render_page(
        self,
        title: str,
        columns: Sequence[DashboardColumn],
        row_builder,
        headers: List[str],
    ) -> str:
        lines = [format_heading(title)]
        for column in columns or [DashboardColumn.placeholder("All departments")]:
            if column.is_empty:
                lines.append(format_info(f"{column.title}: queue is empty"))
                continue
            lines.append(column.title)
            lines.append(format_table(headers, row_builder(column)))
            if column.has_more:
                lines.append(format_warning("continues in the next column"))
        return "\n".join(lines)

    def _waiting_rows(self, column: DashboardColumn, now: dt.datetime) -> List[list]:
        rows = []
        for position, contact in _numbered(column):
            status = self.sla.evaluate(contact, self.config.sla_limit, now=now)
            rows.append(
                [
                    position,
                    contact.name or contact.phone,
                    contact.phone,
                    self.formatter.format_smart(contact.last_activity, now),
                    status.formatted_time,
                ]
            )
        return rows

    def _active_rows(
        self, column: DashboardColumn, names: Dict[str, str], now: dt.datetime
    ) -> List[list]:
        return [
            [
                position,
                contact.name or contact.phone,
                names.get(contact.attendant_id or "", "-"),
                self.formatter.attendance_duration(contact, now),
            ]
            for position, contact in _numbered(column)
        ]


def _numbered(column: DashboardColumn) -> Iterable:
    return enumerate(column.contacts, start=column.start_position)


def _attendant_names(snapshot: DashboardSnapshot) -> Dict[str, str]:
    return {a.id: a.name for a in snapshot.attendants if a.id and a.name}
