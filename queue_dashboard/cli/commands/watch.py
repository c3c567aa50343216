"""Watch command: poll and redraw on the refresh interval."""

import time
from typing import Optional

import click

from queue_dashboard.cli.error_handlers import with_error_handling
from queue_dashboard.cli.utils.formatters import format_error, format_info
from queue_dashboard.cli.utils.render import VIEW_KINDS, DashboardRenderer
from queue_dashboard.cli.utils.runtime import create_poller, load_settings


@click.command(name="watch")
@click.option(
    "--view",
    type=click.Choice(sorted(VIEW_KINDS)),
    default="all",
    show_default=True,
    help="Which boards to print",
)
@click.option(
    "--cycles",
    type=click.IntRange(min=1),
    default=None,
    help="Stop after N refreshes (runs until interrupted by default)",
)
@click.option(
    "--interval",
    type=click.IntRange(min=1),
    default=None,
    help="Seconds between refreshes (defaults to REFRESH_INTERVAL)",
)
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def watch(view: str, cycles: Optional[int], interval: Optional[int], debug: bool):
    """Keep the dashboard on screen, refreshing every interval.

    A failed refresh is reported and the previous data stays on screen.

    Example:
        queue-dashboard watch
        queue-dashboard watch --cycles 4 --interval 30
    """
    with with_error_handling(debug):
        config = load_settings(require_api=True)
        poller = create_poller(config)
        renderer = DashboardRenderer(config)
        delay = interval or config.refresh_interval

        cycle = 0
        while cycles is None or cycle < cycles:
            if cycle:
                time.sleep(delay)
            cycle += 1

            result = poller.poll()
            click.clear()
            click.echo(renderer.render(result, view=view))
            click.echo()
            if result.error:
                click.echo(format_error(f"Refresh failed: {result.error}"))
            if cycles is None or cycle < cycles:
                click.echo(
                    format_info(f"Refresh {cycle}, next in {delay}s (Ctrl+C to stop)")
                )
