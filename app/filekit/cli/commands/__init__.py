"""CLI commands for filekit.

This package contains all subcommand implementations.
"""

from filekit.cli.commands import clean, config, names, walk

__all__ = ["clean", "config", "names", "walk"]
