"""
Console output utilities for tagver using Rich.

This module provides user-facing output helpers for the CLI tools.
For diagnostic or debug output, use :mod:`tagver.utils.logger`.

Guidelines:
- print_error / print_warning: status messages, always on stderr so that
  stdout stays machine-readable
- print_table: structured output on stdout
- every helper takes the ``color`` setting explicitly
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

from rich.table import Table
from rich.theme import Theme
from rich.markup import escape
from rich.console import Console

# ---------------------------------------------------------------------------
# Theme configuration
# ---------------------------------------------------------------------------

TAGVER_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "dim": "dim",
        "highlight": "bold magenta",
    }
)


def _should_use_color(color: bool) -> bool:
    """Return True if colored output should be enabled."""
    if not color:
        return False
    if os.environ.get("NO_COLOR"):
        return False
    return True


def make_console(*, color: bool = True, stderr: bool = False) -> Console:
    """Build a Rich console bound to stdout or stderr.

    Rich still disables styling on its own when the stream is not a
    terminal; ``color=False`` additionally forbids it on terminals.
    """
    use_color = _should_use_color(color)
    return Console(
        theme=TAGVER_THEME,
        stderr=stderr,
        no_color=not use_color,
        highlight=use_color,
    )


# ---------------------------------------------------------------------------
# Status message helpers
# ---------------------------------------------------------------------------


def print_error(message: str, *, prefix: str = "[ERROR]", color: bool = True) -> None:
    """Print an error message to stderr."""
    make_console(color=color, stderr=True).print(
        f"{escape(prefix)} {escape(message)}", style="error", soft_wrap=True
    )


def print_warning(
    message: str, *, prefix: str = "[WARNING]", color: bool = True
) -> None:
    """Print a warning message to stderr."""
    make_console(color=color, stderr=True).print(
        f"{escape(prefix)} {escape(message)}", style="warning", soft_wrap=True
    )


# ---------------------------------------------------------------------------
# Structured output
# ---------------------------------------------------------------------------


def print_table(
    data: List[Dict[str, Any]],
    *,
    headers: Optional[List[str]] = None,
    title: Optional[str] = None,
    column_styles: Optional[Dict[str, Dict[str, Any]]] = None,
    color: bool = True,
) -> None:
    """Render structured data as a Rich table on stdout.

    Cell values are printed literally; Rich markup inside them (such as the
    character classes of a regular expression) is escaped.

    Args:
        data: List of row dictionaries.
        headers: Column order. Defaults to keys of the first row.
        title: Optional table title.
        column_styles: Per-column style configuration.
        color: Whether styling may be emitted.
    """
    if not data:
        return

    if headers is None:
        headers = list(data[0].keys())

    table = Table(
        title=title,
        show_header=True,
        header_style="bold",
    )

    column_styles = column_styles or {}
    for header in headers:
        config = column_styles.get(header, {})
        table.add_column(
            header,
            style=config.get("style"),
            justify=config.get("justify", "default"),
            no_wrap=config.get("no_wrap", False),
            overflow=config.get("overflow", "fold"),
        )

    for row in data:
        table.add_row(*(escape(str(row.get(h, ""))) for h in headers))

    make_console(color=color).print(table)
