"""Walk command implementation.

Walks a directory tree with the configured filters and depth limit and
prints the visited entries as a table or JSON.
"""

import json
import logging
from dataclasses import asdict
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from filekit.core.config import ConfigError, WalkConfig, load_config_or_default
from filekit.core.paths import ensure_state_dir, get_last_walk_path
from filekit.filesystem.comparators import (
    Comparator,
    directory_comparator,
    last_modified_comparator,
    name_comparator,
    path_comparator,
    size_comparator,
    sort,
)
from filekit.filesystem.filters import (
    FileFilter,
    and_filter,
    directory_only,
    file_only,
    make_cvs_aware,
    make_git_aware,
    make_svn_aware,
    or_filter,
    true_filter,
    visible_filter,
    wildcard_filter,
)
from filekit.filesystem.listing import EntryCollector
from filekit.filesystem.models import WalkEntry
from filekit.utils.formatting import (
    console,
    create_entry_table,
    format_entry_row,
    format_size,
    print_error,
    print_info,
    print_warning,
)

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Output format options for walk."""

    TABLE = "table"
    JSON = "json"


class SortChoice(str, Enum):
    """Ordering options; WALK keeps the traversal order."""

    WALK = "walk"
    NAME = "name"
    PATH = "path"
    SIZE = "size"
    MODIFIED = "modified"
    DIRS_FIRST = "dirs-first"


def build_walk_filter(
    config: WalkConfig,
    include: list[str] | None,
    show_hidden: bool,
) -> FileFilter:
    """Build the child filter for a walk from config and CLI options.

    Args:
        config: Loaded walk configuration.
        include: Wildcard patterns selecting files; None keeps every file.
        show_hidden: Include hidden entries even if the config ignores them.

    Returns:
        A filter applying directory and file rules independently.
    """
    dir_rule: FileFilter = true_filter
    file_rule: FileFilter = wildcard_filter(include, config.io_case) if include else true_filter

    if config.ignore_hidden and not show_hidden:
        dir_rule = and_filter(dir_rule, visible_filter)
        file_rule = and_filter(file_rule, visible_filter)
    if config.ignore_vcs:
        dir_rule = make_git_aware(make_svn_aware(make_cvs_aware(dir_rule)))

    return or_filter(directory_only(dir_rule), file_only(file_rule))


def _comparator_for(choice: SortChoice, config: WalkConfig) -> Comparator | None:
    if choice == SortChoice.NAME:
        return name_comparator(config.io_case)
    if choice == SortChoice.PATH:
        return path_comparator(config.io_case)
    if choice == SortChoice.SIZE:
        return size_comparator()
    if choice == SortChoice.MODIFIED:
        return last_modified_comparator
    if choice == SortChoice.DIRS_FIRST:
        return directory_comparator
    return None


def _sort_entries(entries: list[WalkEntry], comparator: Comparator) -> list[WalkEntry]:
    by_path = {entry.path: entry for entry in entries}
    ordered = sort([Path(entry.path) for entry in entries], comparator)
    return [by_path[str(path)] for path in ordered]


def walk(
    directory: Annotated[Path, typer.Argument(help="Directory to walk.")],
    depth: Annotated[
        int | None,
        typer.Option("--depth", "-d", help="Maximum depth (-1 = unlimited)."),
    ] = None,
    include: Annotated[
        list[str] | None,
        typer.Option("--include", "-i", help="Wildcard for files to list (repeatable)."),
    ] = None,
    show_hidden: Annotated[
        bool,
        typer.Option("--hidden", help="Include hidden entries."),
    ] = False,
    files_only: Annotated[
        bool,
        typer.Option("--files-only", help="List files without their directories."),
    ] = False,
    sort_by: Annotated[
        SortChoice,
        typer.Option("--sort", "-s", help="Order of the listing.", case_sensitive=False),
    ] = SortChoice.WALK,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", help="Stop the walk after this many entries."),
    ] = None,
    save: Annotated[
        bool,
        typer.Option("--save", help="Store the listing as the last walk in the state dir."),
    ] = False,
) -> None:
    """Walk DIRECTORY depth-first and list what was visited."""
    if not directory.is_dir():
        print_error(f"Not a directory: {directory}")
        raise typer.Exit(code=1)

    try:
        config = load_config_or_default()
    except ConfigError as e:
        print_warning(f"Ignoring invalid config: {e}")
        config = WalkConfig()

    depth_limit = config.depth_limit if depth is None else depth
    collector = EntryCollector(
        build_walk_filter(config, include, show_hidden),
        depth_limit=depth_limit,
        limit=limit,
        include_directories=not files_only,
    )
    try:
        entries = collector.collect(directory)
    except OSError as e:
        print_error(f"Walk failed: {e}")
        raise typer.Exit(code=1) from e

    comparator = _comparator_for(sort_by, config)
    if comparator is not None:
        try:
            entries = _sort_entries(entries, comparator)
        except OSError as e:
            print_error(f"Cannot sort entries: {e}")
            raise typer.Exit(code=1) from e

    if save:
        _save_last_walk(entries)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([_entry_to_dict(e) for e in entries]))
        return

    _print_table(entries, str(directory))
    total = sum(e.size_bytes or 0 for e in entries)
    console.print(f"\n[dim]{len(entries)} entries ({format_size(total)} in files)[/dim]")
    if collector.truncated:
        console.print(f"[dim](walk stopped after {limit} entries)[/dim]")


# === Private helper functions ===


def _entry_to_dict(entry: WalkEntry) -> dict[str, object]:
    data = asdict(entry)
    data["entry_type"] = entry.entry_type.value
    return data


def _print_table(entries: list[WalkEntry], root: str) -> None:
    """Display entries as a Rich table."""
    table = create_entry_table(f"Walk of {root}")
    for entry in entries:
        table.add_row(*format_entry_row(entry, root))
    console.print(table)


def _save_last_walk(entries: list[WalkEntry]) -> None:
    """Write entries to the last-walk file, warning instead of failing."""
    try:
        ensure_state_dir()
        path = get_last_walk_path()
        path.write_text(json.dumps([_entry_to_dict(e) for e in entries], indent=2))
        print_info(f"Listing saved to {path}")
    except (OSError, RuntimeError) as e:
        logger.debug("Saving last walk failed", exc_info=True)
        print_warning(f"Could not save listing: {e}")
