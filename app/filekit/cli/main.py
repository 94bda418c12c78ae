"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from filekit import __version__
from filekit.cli.commands import clean, config, names, walk
from filekit.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="filekit",
    help="Path normalization and filtered directory walking.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"filekit version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Route library logging through Rich on stderr.

    Args:
        verbose: Show debug messages.
        quiet: Show errors only.
    """
    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """filekit - path normalization and filtered directory walking.

    Normalize and compare path strings without touching the disk, and walk
    directory trees with wildcard filters, depth limits and sorting.
    """
    configure_logging(verbose, quiet)
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.add_typer(names.app, name="names")
app.add_typer(config.app, name="config")
app.command(name="walk")(walk.walk)
app.command(name="clean")(clean.clean)


if __name__ == "__main__":
    app()
