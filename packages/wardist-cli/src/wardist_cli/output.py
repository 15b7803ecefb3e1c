"""Rich console output for wardist-cli.

Status lines (success, error, warning, info) and the artifact table
printed by `wardist resolve` and `wardist dist`. NO_COLOR and the
--no-color flag both disable colors.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from wardist_core.registry import Artifact

_force_no_color = os.environ.get("NO_COLOR") is not None


def create_console(no_color: bool = False) -> Console:
    """Create a Rich Console honoring --no-color and NO_COLOR.

    Args:
        no_color: If True, disable colored output.

    Returns:
        Configured Console instance.
    """
    disable = no_color or _force_no_color
    return Console(force_terminal=False if disable else None, no_color=disable)


console = create_console()


def success(message: str, **kwargs: Any) -> None:
    """Print a success line prefixed with a green check mark."""
    console.print(f"[green]✓[/green] {message}", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print an error line prefixed with a red cross."""
    console.print(f"[red]✗[/red] {message}", **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    """Print a warning line prefixed with a yellow triangle."""
    console.print(f"[yellow]⚠[/yellow] {message}", **kwargs)


def info(message: str, **kwargs: Any) -> None:
    console.print(message, **kwargs)


def artifact_table(artifacts: Iterable[Artifact], title: str | None = None) -> Table:
    """Build a table of resolved artifacts sorted by file name.

    Args:
        artifacts: Resolved artifacts.
        title: Optional table title.

    Returns:
        Rich Table with module, channel, file and path columns.
    """
    table = Table(title=title)
    table.add_column("Module")
    table.add_column("Channel")
    table.add_column("File", style="bold")
    table.add_column("Path", overflow="fold")
    for artifact in sorted(artifacts, key=lambda a: (a.name, a.module)):
        table.add_row(artifact.module, artifact.channel, artifact.name, str(artifact.path))
    return table


def print_artifacts(artifacts: Iterable[Artifact], title: str | None = None) -> None:
    console.print(artifact_table(artifacts, title=title))


def print_written(paths: Iterable[Path]) -> None:
    """Print one indented line per written file."""
    for path in paths:
        console.print(f"  {path}", highlight=False)


def set_no_color(no_color: bool) -> None:
    """Replace the module console, enabling or disabling colors."""
    global console
    console = create_console(no_color=no_color)
