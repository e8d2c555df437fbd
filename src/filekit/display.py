"""Rich output helpers for the command line."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from filekit.types import FileInfo


def _format_size(size: int) -> str:
    """Format a byte count for humans, e.g. ``1.5 KiB``."""
    if size < 1024:
        return f"{size} B"
    value = size / 1024
    for unit in ("KiB", "MiB"):
        if value < 1024:
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} GiB"


class Display:
    """Renders command results to the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize display.

        Args:
            console: Console to render to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Display success message.

        Args:
            message: Message to display.
        """
        self.console.print(f"[green]✓[/green] {message}", highlight=False)

    def show_error(self, message: str) -> None:
        """Display error message.

        Args:
            message: Message to display.
        """
        self.console.print(f"[red]✗[/red] {message}", highlight=False)

    def show_listing(self, directory: str, entries: list[FileInfo]) -> None:
        """Display directory entries table.

        Args:
            directory: Directory that was listed.
            entries: Entries to show.
        """
        if not entries:
            self.console.print(f"[yellow]{directory} is empty[/yellow]")
            return

        table = Table(title=directory)
        table.add_column("Name", style="cyan")
        table.add_column("Type")
        table.add_column("Size", justify="right")
        table.add_column("Modified")

        for entry in entries:
            name = f"{entry.name}/" if entry.is_dir else entry.name
            size = "" if entry.is_dir else _format_size(entry.size)
            table.add_row(name, entry.kind, size, entry.modified.isoformat(timespec="seconds"))

        self.console.print(table)

    def show_info(self, info: FileInfo) -> None:
        """Display metadata for a single entry."""
        table = Table(show_header=False, box=None)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        table.add_row("Path", info.path)
        table.add_row("Type", info.kind)
        table.add_row("Size", f"{info.size} bytes")
        table.add_row("Modified", info.modified.isoformat())
        self.console.print(table)
