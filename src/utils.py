"""Shared utility functions for pg-scaffold.

Provides Rich-based console reporting and path helpers used by the CLI.
"""

from __future__ import annotations

import os
from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def resolve_target_dir(target: str | None, base_dir: str | Path) -> Path:
    """Join *target* onto *base_dir* and normalise the result.

    *target* is always taken relative to *base_dir*, even when it starts
    with a slash.  The path is normalised lexically (``..`` and ``.``
    collapsed); symlinks are not resolved.

    Examples::

        resolve_target_dir(None, "/opt/tool")         -> Path("/opt/tool")
        resolve_target_dir("../app", "/opt/tool")     -> Path("/opt/app")
        resolve_target_dir("./svc/", "/opt/tool")     -> Path("/opt/tool/svc")
    """
    return Path(os.path.normpath(f"{base_dir}/{target or ''}"))


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print what a scaffolding run produced as a two-column table.

    Args:
        data: Mapping of label -> value; values may span several lines.
        title: Table title, usually naming the project.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
