"""CLI commands."""

from queue_dashboard.cli.commands.business_time import business_time
from queue_dashboard.cli.commands.console import console
from queue_dashboard.cli.commands.sla import sla
from queue_dashboard.cli.commands.snapshot import snapshot
from queue_dashboard.cli.commands.watch import watch

__all__ = ["business_time", "console", "sla", "snapshot", "watch"]
