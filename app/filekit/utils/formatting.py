"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from filekit.core.theme import get_theme

if TYPE_CHECKING:
    from filekit.filesystem.models import WalkEntry


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())

_ENTRY_STYLES = {
    "directory": "entry.directory",
    "file": "entry.file",
    "symlink": "entry.link",
    "dead_symlink": "entry.missing",
    "missing": "entry.missing",
}


def create_entry_table(title: str = "Directory Walk") -> Table:
    """Create a pre-configured table for displaying walk entries.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for entry display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Depth", style="muted", justify="right", width=5)
    table.add_column("Path", no_wrap=True)
    table.add_column("Type", style="muted", width=12)
    table.add_column("Size", style="info", justify="right")
    table.add_column("Modified", style="muted")
    return table


def format_entry_row(entry: WalkEntry, root: str | None = None) -> tuple[str, str, str, str, str]:
    """Format a walk entry as a table row with styling.

    Directories are indented by depth so the table reads like a tree.

    Args:
        entry: The entry to format.
        root: Walk root; when given, paths are shown relative to it.

    Returns:
        Tuple of (depth, path, type, size, modified) with Rich markup.
    """
    style = _ENTRY_STYLES.get(entry.entry_type.value, "text")
    shown = entry.path
    if root and shown.startswith(root) and shown != root:
        shown = shown[len(root) :].lstrip("/\\")
    indent = "  " * entry.depth
    path = f"{indent}[{style}]{escape(shown)}[/]"
    size = format_size(entry.size_bytes) if entry.size_bytes is not None else "-"
    modified = entry.mtime[:19] if entry.mtime else "-"
    return (str(entry.depth), path, entry.entry_type.value, size, modified)


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string."""
    if size_bytes is None or size_bytes == 0:
        return "0 B"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
