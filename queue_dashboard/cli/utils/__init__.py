"""CLI utility functions."""

from queue_dashboard.cli.utils.formatters import (
    format_error,
    format_heading,
    format_info,
    format_success,
    format_table,
    format_warning,
)
from queue_dashboard.cli.utils.render import DashboardRenderer

__all__ = [
    "format_error",
    "format_heading",
    "format_info",
    "format_success",
    "format_table",
    "format_warning",
    "DashboardRenderer",
]
