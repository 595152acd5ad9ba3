"""User-facing console output for CLI runs.

Filtered test output and the final summary go through a single rich
console on stderr so they never interleave with stdout consumers, e.g. a
shell capturing the summary line.

Usage::

    from gotestflow.core.progress import console_line, status

    console_line("    handler_test.go:12: unexpected nil")
    status("Tests passed", style="success")  # ✓ Tests passed
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

_console = Console(stderr=True)

_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}


def _get_logger() -> BoundLogger:
    """Get logger lazily to respect runtime config."""
    from gotestflow.core.logging import get_logger

    return get_logger("progress")


def _is_tty() -> bool:
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


def console_line(line: str) -> None:
    """Print one filtered test-output line verbatim.

    Markup and highlighting are disabled: test output routinely contains
    square brackets (``[setup failed]``) that rich would otherwise eat.
    """
    _console.print(line, markup=False, highlight=False, soft_wrap=True)


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print a styled status message to stderr."""
    prefix = _STYLES.get(style, "")
    padding = " " * indent
    _console.print(f"{padding}{prefix}{message}", highlight=False)

    _get_logger().debug("status", message=message, style=style)


@contextmanager
def spinner(message: str) -> Iterator[None]:
    """Show a spinner on a TTY while a phase produces no output.

    Usage::

        with spinner("Installing wasmbrowsertest"):
            await ensure_harness()
    """
    if _is_tty():
        with _console.status(f"[cyan]{message}[/cyan]", spinner="dots"):
            yield
    else:
        _console.print(f"{message}...", highlight=False)
        yield
