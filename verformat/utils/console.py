"""
Console output utilities for verformat using Rich.

Two kinds of output leave the CLI:

- *values* (a parsed field, a composed or extracted version) go to stdout
  verbatim through :func:`print_value`, so shell callers can capture them;
- *status* messages and tables go through the themed Rich console.

Diagnostics belong to :mod:`verformat.utils.logger`, never to this module.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Dict, List, Mapping, Optional

import click
from rich.table import Table
from rich.theme import Theme
from rich.console import Console

VERFORMAT_THEME = Theme(
    {
        "error": "bold red",
        "warning": "bold yellow",
    }
)

_console: Optional[Console] = None
_err_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def _make_console(*, stderr: bool) -> Console:
    use_color = _should_use_color()
    return Console(
        theme=VERFORMAT_THEME,
        no_color=not use_color,
        highlight=False,
        stderr=stderr,
    )


def _get_console() -> Console:
    """Return the stdout console singleton."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                _console = _make_console(stderr=False)
    return _console


def _get_err_console() -> Console:
    """Return the stderr console singleton used for errors and warnings."""
    global _err_console

    if _err_console is None:
        with _console_lock:
            if _err_console is None:
                _err_console = _make_console(stderr=True)
    return _err_console


def reconfigure_console() -> None:
    """Drop the console singletons so the next call rebuilds them.

    Needed when ``NO_COLOR`` changes at runtime or when stdout/stderr
    are swapped (as the click test runner does).
    """
    global _console, _err_console
    with _console_lock:
        _console = None
        _err_console = None


# ---------------------------------------------------------------------------
# Status messages
# ---------------------------------------------------------------------------


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message to stderr."""
    _get_err_console().print(f"{prefix} {message}", style="error", markup=False)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message to stderr."""
    _get_err_console().print(f"{prefix} {message}", style="warning", markup=False)


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


def print_value(value: Any) -> None:
    """Write ``value`` followed by a newline to stdout, without styling."""
    click.echo(str(value))


def print_key_values(values: Mapping[str, Any], *, key_prefix: str = "") -> None:
    """Write ``KEY=VALUE`` lines, upper-casing keys after ``key_prefix``."""
    for key, value in values.items():
        click.echo(f"{key_prefix}{key.upper().replace('-', '_')}={value}")


def print_table(
    data: List[Dict[str, Any]],
    *,
    headers: Optional[List[str]] = None,
    title: Optional[str] = None,
) -> None:
    """Render rows as a Rich table.

    Args:
        data: List of row dictionaries.
        headers: Column order. Defaults to keys of the first row.
        title: Optional table title.
    """
    if not data:
        return

    if headers is None:
        headers = list(data[0].keys())

    table = Table(title=title, show_header=True, header_style="bold")
    for header in headers:
        table.add_column(header, overflow="fold")

    for row in data:
        table.add_row(*(str(row.get(h, "")) for h in headers))

    _get_console().print(table)