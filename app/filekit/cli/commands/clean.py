"""Clean command implementation.

Empties a directory using one of the delete strategies, with a
confirmation prompt and a per-entry result table.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from filekit.filesystem.deletion import DeleteStrategy
from filekit.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)


@dataclass(frozen=True, slots=True)
class CleanResult:
    """Outcome of deleting a single entry.

    Attributes:
        path: Path that was operated on.
        success: Whether the entry is gone.
        error: Error message if deletion failed, None otherwise.
        dry_run: Whether this was only simulated.
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False


def _is_protected(directory: Path) -> bool:
    """Refuse to empty the filesystem root or the home directory."""
    resolved = directory.resolve()
    return resolved == Path(resolved.anchor) or resolved == Path.home().resolve()


def clean_entries(
    directory: Path, strategy: DeleteStrategy, dry_run: bool = False
) -> list[CleanResult]:
    """Delete every entry inside directory, isolating failures per entry.

    Args:
        directory: Directory to empty; the directory itself is kept.
        strategy: NORMAL leaves non-empty subdirectories in place, FORCE removes them.
        dry_run: Report what would be deleted without deleting.

    Returns:
        One CleanResult per direct child, sorted by path.
    """
    results: list[CleanResult] = []
    for child in sorted(directory.iterdir()):
        if dry_run:
            results.append(CleanResult(path=str(child), success=True, dry_run=True))
            continue
        try:
            strategy.delete(child)
            results.append(CleanResult(path=str(child), success=True))
        except OSError as e:
            results.append(CleanResult(path=str(child), success=False, error=str(e)))
    return results


def clean(
    directory: Annotated[Path, typer.Argument(help="Directory to empty.")],
    force: Annotated[
        bool,
        typer.Option("--force", help="Delete non-empty subdirectories too."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete the contents of DIRECTORY, keeping DIRECTORY itself."""
    if not directory.is_dir():
        print_error(f"Not a directory: {directory}")
        raise typer.Exit(code=1)
    if _is_protected(directory):
        print_error(f"Refusing to clean protected directory: {directory}")
        raise typer.Exit(code=1)

    if not any(directory.iterdir()):
        print_info(f"{directory} is already empty.")
        return

    strategy = DeleteStrategy.FORCE if force else DeleteStrategy.NORMAL

    if not dry_run and not yes:
        confirmed = typer.confirm(
            f"Delete the contents of {directory} ({strategy.value.lower()} delete)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    results = clean_entries(directory, strategy, dry_run)
    _print_results(results)

    if any(not r.success for r in results):
        raise typer.Exit(code=1)


def _print_results(results: list[CleanResult]) -> None:
    """Display deletion results."""
    table = Table(title="Deletion Results", show_lines=False)
    table.add_column("Path", style="bold")
    table.add_column("Status", width=10)
    table.add_column("Detail", style="dim")

    for r in results:
        if r.dry_run:
            status = "[info]dry-run[/]"
        elif r.success:
            status = "[success]deleted[/]"
        else:
            status = "[error]failed[/]"
        table.add_row(r.path, status, r.error or "-")

    console.print(table)

    success_count = sum(1 for r in results if r.success)
    fail_count = sum(1 for r in results if not r.success)
    dry_count = sum(1 for r in results if r.dry_run)

    if dry_count:
        print_info(f"Dry-run: {dry_count} entries would be deleted.")
    elif fail_count:
        print_warning(f"{success_count} succeeded, {fail_count} failed")
    else:
        print_success(f"All {success_count} entries deleted.")
