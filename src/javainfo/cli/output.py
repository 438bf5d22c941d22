"""Rich output formatting helpers for the javainfo CLI.

Sentinel versions are highlighted so a user can tell "no release file
could be read" apart from a real version string.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from javainfo.core.version import CANNOT_OPEN_METADATA, UNKNOWN_VERSION
from javainfo.discovery.models import Installation

_SENTINEL_STYLES: dict[str, str] = {
    CANNOT_OPEN_METADATA: "bold red",
    UNKNOWN_VERSION: "yellow",
}

console = Console()


def version_text(version: str) -> Text:
    """Render a version string, styling sentinels and empty values."""
    if not version:
        return Text("-", style="dim")
    return Text(version, style=_SENTINEL_STYLES.get(version, "bold green"))


def print_installations(
    installations: list[Installation],
    title: str = "Java Installations",
) -> None:
    """Print a table of installations.

    Args:
        installations: Installations to show, already in display order.
        title: Table title.
    """
    if not installations:
        console.print("[dim]No Java installations found.[/dim]")
        return

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Version", justify="left", no_wrap=True)
    table.add_column("Path", style="dim", overflow="fold")
    for java in installations:
        table.add_row(version_text(java.version), java.path)
    console.print(table)
    console.print(f"[bold]{len(installations)}[/bold] installation(s) found")
