"""Console command: one attendant's filtered view of a queue."""

from typing import Optional

import click

from queue_dashboard.aggregators.console import (
    ConsoleTab,
    filter_console_contacts,
)
from queue_dashboard.aggregators.departments import (
    list_department_names,
    resolve_department_name,
)
from queue_dashboard.aggregators.timeline import calculate_contact_timeline
from queue_dashboard.calculators.business_time import BusinessTimeCalculator
from queue_dashboard.calculators.duration_formatter import DurationFormatter
from queue_dashboard.cli.error_handlers import APIError, with_error_handling
from queue_dashboard.cli.utils.formatters import format_info, format_table
from queue_dashboard.cli.utils.runtime import create_poller, load_settings


@click.command(name="console")
@click.option(
    "--tab",
    type=click.Choice([tab.value for tab in ConsoleTab]),
    default=ConsoleTab.WAITING.value,
    show_default=True,
    help="Queue to list",
)
@click.option("--department", default=None, help="Only this department name")
@click.option(
    "--attendant", "attendant_id", default=None, help="Only this attendant's chats"
)
@click.option("--search", default=None, help="Match on contact name or phone")
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def console(
    tab: str,
    department: Optional[str],
    attendant_id: Optional[str],
    search: Optional[str],
    debug: bool,
):
    """List contacts for one attendant's console.

    Example:
        queue-dashboard console --tab active --attendant u-42
        queue-dashboard console --department Sales --search maria
    """
    with with_error_handling(debug):
        config = load_settings(require_api=True)
        result = create_poller(config).poll()
        if result.error:
            raise APIError(result.error)

        calculator = BusinessTimeCalculator(config.business_hours())
        formatter = DurationFormatter(calculator)
        now = calculator.now()
        console_tab = ConsoleTab(tab)
        queue = result.waiting if console_tab is ConsoleTab.WAITING else result.active

        contacts = filter_console_contacts(
            queue,
            result.department_map,
            console_tab,
            department=department,
            attendant_id=attendant_id,
            search=search,
            no_department_label=config.no_department_label,
        )

        if not contacts:
            names = list_department_names(
                result.waiting,
                result.active,
                result.department_map,
                config.excluded_departments,
            )
            click.echo(format_info("No matching contacts"))
            if names:
                click.echo(format_info(f"Departments: {', '.join(names)}"))
            return

        rows = []
        for contact in contacts:
            timeline = calculate_contact_timeline(contact, calculator, now=now)
            rows.append(
                [
                    contact.name or "-",
                    contact.phone,
                    resolve_department_name(
                        contact, result.department_map, config.no_department_label
                    ),
                    formatter.format_minutes(timeline.waiting_minutes),
                    formatter.format_minutes(timeline.attendance_minutes)
                    if timeline.is_answered
                    else "-",
                ]
            )
        click.echo(
            format_table(["Name", "Phone", "Department", "Waited", "In attendance"], rows)
        )
