"""Name commands.

Exposes the path-string helpers: normalize, concat, split a path into its
components, and wildcard matching. Nothing here touches the filesystem.
"""

import json
from enum import Enum
from typing import Annotated

import typer
from rich.table import Table

from filekit.core.config import ConfigError, WalkConfig, load_config_or_default
from filekit.core.iocase import IOCase
from filekit.names import (
    concat,
    get_base_name,
    get_extension,
    get_full_path,
    get_name,
    get_path,
    get_prefix,
    normalize,
    normalize_no_end_separator,
    wildcard_match,
)
from filekit.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Normalize, join, split and match path strings.",
    no_args_is_help=True,
)


class CaseChoice(str, Enum):
    """Case policy options."""

    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"
    SYSTEM = "system"


class OutputFormat(str, Enum):
    """Output format options for split."""

    TABLE = "table"
    JSON = "json"


def _load_settings() -> WalkConfig:
    try:
        return load_config_or_default()
    except ConfigError as e:
        print_warning(f"Ignoring invalid config: {e}")
        return WalkConfig()


def _unix_flag(unix: bool | None) -> bool:
    return _load_settings().unix_separators if unix is None else unix


@app.command("normalize")
def normalize_command(
    path: Annotated[str, typer.Argument(help="Path string to normalize.")],
    unix: Annotated[
        bool | None,
        typer.Option("--unix/--windows", help="Separator style of the result."),
    ] = None,
    no_end_separator: Annotated[
        bool,
        typer.Option("--no-end-separator", "-n", help="Drop any trailing separator."),
    ] = False,
) -> None:
    """Collapse '.', '..' and duplicate separators in PATH."""
    fn = normalize_no_end_separator if no_end_separator else normalize
    try:
        result = fn(path, _unix_flag(unix))
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    if result is None:
        print_error(f"Path cannot be normalized: {path}")
        raise typer.Exit(code=1)
    console.print(result, markup=False, highlight=False)


@app.command("concat")
def concat_command(
    base: Annotated[str, typer.Argument(help="Base path.")],
    add: Annotated[str, typer.Argument(help="Path to append; absolute paths win.")],
) -> None:
    """Join BASE and ADD the way a shell resolves them, then normalize."""
    try:
        result = concat(base, add)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    if result is None:
        print_error(f"Cannot concatenate {base!r} and {add!r}")
        raise typer.Exit(code=1)
    console.print(result, markup=False, highlight=False)


@app.command("split")
def split_command(
    path: Annotated[str, typer.Argument(help="Path string to split.")],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the prefix, path, name, base name and extension of PATH."""
    try:
        parts = {
            "prefix": get_prefix(path),
            "path": get_path(path),
            "full_path": get_full_path(path),
            "name": get_name(path),
            "base_name": get_base_name(path),
            "extension": get_extension(path),
        }
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(parts))
        return

    table = Table(title=f"Components of {path}", show_lines=False)
    table.add_column("Component", style="bold")
    table.add_column("Value")
    for key, value in parts.items():
        table.add_row(key, "[dim]<invalid>[/dim]" if value is None else repr(value))
    console.print(table)


@app.command("match")
def match_command(
    name: Annotated[str, typer.Argument(help="File name to test.")],
    pattern: Annotated[str, typer.Argument(help="Wildcard pattern using ? and *.")],
    case: Annotated[
        CaseChoice | None,
        typer.Option("--case", "-c", help="Case policy.", case_sensitive=False),
    ] = None,
) -> None:
    """Check NAME against a wildcard PATTERN. Exits 1 when it does not match."""
    if case is None:
        io_case = _load_settings().io_case
    else:
        io_case = IOCase.for_name(case.value.capitalize())
    if wildcard_match(name, pattern, io_case):
        print_success(f"{name} matches {pattern}")
        return
    print_warning(f"{name} does not match {pattern}")
    raise typer.Exit(code=1)
