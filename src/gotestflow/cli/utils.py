"""CLI utilities."""

from pathlib import Path

import click


def find_module_root(start_path: Path | None = None) -> Path:
    """Find the Go module root from the given path.

    Walks up the directory tree looking for go.mod.
    If start_path is None, uses the current working directory.

    Args:
        start_path: Starting directory to search from

    Returns:
        Path to the directory holding go.mod

    Raises:
        click.ClickException: If not inside a Go module
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while current != current.parent:
        if (current / "go.mod").is_file():
            return current
        current = current.parent

    if (current / "go.mod").is_file():
        return current

    raise click.ClickException(
        f"Not inside a Go module: {start_path}\n"
        "gotest must be run from a directory containing go.mod or below it."
    )
