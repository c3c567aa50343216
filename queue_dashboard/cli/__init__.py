"""Queue Dashboard CLI.

Terminal front end for the contact-center queue dashboard: prints the
waiting and active boards, watches them live, and answers business-time
and SLA questions.
"""

import click

from queue_dashboard import __version__
from queue_dashboard.cli.commands.business_time import business_time
from queue_dashboard.cli.commands.console import console
from queue_dashboard.cli.commands.sla import sla
from queue_dashboard.cli.commands.snapshot import snapshot
from queue_dashboard.cli.commands.watch import watch
from queue_dashboard.config.logging_config import LoggingConfig, configure_logging


@click.group(help="Queue Dashboard CLI - Live view of Suri contact-center queues")
@click.version_option(version=__version__)
def cli():
    """Queue Dashboard CLI main entry point."""
    pass


cli.add_command(snapshot)
cli.add_command(watch)
cli.add_command(console)
cli.add_command(business_time)
cli.add_command(sla)


def main():
    """Main entry point for the CLI."""
    configure_logging(LoggingConfig.from_env())
    cli()


if __name__ == "__main__":
    main()
