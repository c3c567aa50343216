"""Business-time command."""

from typing import Optional

import click

from queue_dashboard.calculators.business_time import BusinessTimeCalculator
from queue_dashboard.calculators.duration_formatter import DurationFormatter
from queue_dashboard.calculators.time_utils import InvalidTimestampError
from queue_dashboard.cli.error_handlers import DataValidationError, with_error_handling
from queue_dashboard.cli.utils.formatters import format_table
from queue_dashboard.cli.utils.runtime import load_settings


@click.command(name="business-time")
@click.argument("start")
@click.argument("end", required=False)
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def business_time(start: str, end: Optional[str], debug: bool):
    """Count business minutes between START and END (default: now).

    Timestamps are ISO-8601; naive ones are read in BUSINESS_TIMEZONE.

    Example:
        queue-dashboard business-time 2024-03-04T09:00:00Z 2024-03-05T10:30:00Z
    """
    with with_error_handling(debug):
        config = load_settings()
        calculator = BusinessTimeCalculator(config.business_hours())
        formatter = DurationFormatter(calculator)

        try:
            start_at = calculator.localize(start)
            end_at = calculator.localize(end) if end else calculator.now()
        except InvalidTimestampError as e:
            raise DataValidationError(
                str(e), recovery_hint="Use ISO-8601, e.g. 2024-03-04T09:30:00Z"
            ) from e

        minutes = calculator.business_minutes(start_at, end_at)
        rows = [
            ["Start", start_at.isoformat()],
            ["End", end_at.isoformat()],
            [
                "Business window",
                f"{config.business_start_hour:02d}:00-"
                f"{config.business_end_hour:02d}:00 {config.timezone}",
            ],
            ["Business minutes", minutes],
            ["Duration", formatter.format_minutes(minutes)],
        ]
        click.echo(format_table(["Field", "Value"], rows, max_width=60))
