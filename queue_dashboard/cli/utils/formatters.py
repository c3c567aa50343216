"""Output formatting utilities for CLI."""

from typing import List, Sequence

import click


def format_success(message: str) -> str:
    """Format a success message in green."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message in red."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message in yellow."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message in blue."""
    return click.style(f"ℹ {message}", fg="blue")


def format_heading(title: str) -> str:
    """Format a section heading, e.g. a department column title."""
    return click.style(title, bold=True, underline=True)


def format_table(
    headers: Sequence[str], rows: Sequence[Sequence[object]], max_width: int = 40
) -> str:
    """Render rows as an ASCII table.

    Cells longer than ``max_width`` are truncated. A table without rows
    renders only its header.

    Example:
        >>> print(format_table(["Name"], [["Maria"]]))
        +-------+
        | Name  |
        +-------+
        | Maria |
        +-------+
    """
    if not headers:
        return ""

    widths = [len(str(h)) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(widths)]):
            widths[i] = max(widths[i], len(str(cell)))
    widths = [min(w, max_width) for w in widths]

    def render_row(cells: Sequence[object]) -> str:
        padded = [
            f" {str(cell)[:width]:<{width}} " for cell, width in zip(cells, widths)
        ]
        return "|" + "|".join(padded) + "|"

    separator = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    lines: List[str] = [separator, render_row(headers), separator]
    if rows:
        lines.extend(render_row(row) for row in rows)
        lines.append(separator)
    return "\n".join(lines)
