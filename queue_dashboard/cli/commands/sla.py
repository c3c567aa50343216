"""SLA command."""

from typing import Optional

import click

from queue_dashboard.calculators.business_time import BusinessTimeCalculator
from queue_dashboard.calculators.sla import evaluate_minutes
from queue_dashboard.calculators.time_utils import InvalidTimestampError
from queue_dashboard.cli.error_handlers import DataValidationError, with_error_handling
from queue_dashboard.cli.utils.formatters import format_error, format_success
from queue_dashboard.cli.utils.runtime import load_settings


@click.command(name="sla")
@click.argument("started_at")
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="SLA limit in minutes (defaults to SLA_LIMIT)",
)
@click.option("--now", "now", default=None, help="Evaluate at this instant instead of now")
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def sla(started_at: str, limit: Optional[int], now: Optional[str], debug: bool):
    """Show the SLA status of a contact waiting since STARTED_AT.

    Example:
        queue-dashboard sla 2024-03-04T09:30:00-03:00 --limit 15
    """
    with with_error_handling(debug):
        config = load_settings()
        calculator = BusinessTimeCalculator(config.business_hours())
        sla_limit = limit or config.sla_limit

        try:
            minutes = calculator.business_minutes(
                started_at, now if now is not None else calculator.now()
            )
        except InvalidTimestampError as e:
            raise DataValidationError(
                str(e), recovery_hint="Use ISO-8601, e.g. 2024-03-04T09:30:00Z"
            ) from e

        status = evaluate_minutes(minutes, sla_limit)
        summary = (
            f"Waited {minutes}m of {sla_limit}m ({status.percentage:.1f}%), "
            f"{status.formatted_time}"
        )
        if status.is_overdue:
            click.echo(format_error(f"Overdue by {status.minutes_overdue}m. {summary}"))
        else:
            click.echo(
                format_success(f"{status.minutes_remaining}m remaining. {summary}")
            )
