"""Config commands.

Show the effective walk configuration or write a default config file.
"""

import json
from enum import Enum
from typing import Annotated

import typer
from rich.table import Table

from filekit.core.config import (
    ConfigError,
    ConfigNotFoundError,
    WalkConfig,
    load_config,
    save_config,
)
from filekit.core.paths import get_config_path
from filekit.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the walk configuration.",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format options for config show."""

    TABLE = "table"
    JSON = "json"


@app.command()
def show(
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """Print the effective configuration."""
    path = get_config_path()
    try:
        config = load_config(path)
        source = str(path)
    except ConfigNotFoundError:
        config = WalkConfig()
        source = "defaults (no config file)"
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(config.model_dump()))
        return

    table = Table(title="Walk Configuration", show_lines=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    for key, value in config.model_dump().items():
        table.add_row(key, str(value))
    console.print(table)
    console.print(f"[dim]Source: {source}[/dim]")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file holding the default settings."""
    path = get_config_path()
    if path.exists() and not force:
        print_info(f"Config already exists: {path} (use --force to overwrite)")
        return
    try:
        saved = save_config(WalkConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(f"Config written to {saved}")
