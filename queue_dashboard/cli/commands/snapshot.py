"""Snapshot command: one poll rendered as tables."""

import click

from queue_dashboard.cli.error_handlers import APIError, with_error_handling
from queue_dashboard.cli.utils.formatters import format_info, format_success
from queue_dashboard.cli.utils.render import VIEW_KINDS, DashboardRenderer
from queue_dashboard.cli.utils.runtime import create_poller, load_settings


@click.command(name="snapshot")
@click.option(
    "--view",
    type=click.Choice(sorted(VIEW_KINDS)),
    default="all",
    show_default=True,
    help="Which boards to print",
)
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def snapshot(view: str, debug: bool):
    """Fetch the queues once and print every board page.

    Example:
        queue-dashboard snapshot
        queue-dashboard snapshot --view waiting
    """
    with with_error_handling(debug):
        config = load_settings(require_api=True)
        click.echo(format_info("Fetching queues from the Suri API..."))

        poller = create_poller(config)
        result = poller.poll()
        if result.error:
            raise APIError(
                result.error,
                recovery_hint="Check SURI_API_URL, SURI_API_KEY and the API status",
            )

        click.echo()
        click.echo(DashboardRenderer(config).render(result, view=view))
        click.echo()
        click.echo(
            format_success(
                f"{len(result.waiting)} waiting, {len(result.active)} in attendance"
            )
        )
