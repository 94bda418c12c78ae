"""Utility modules for filekit.

This module exports commonly used console helpers and the standard
line separators.
"""

from filekit.utils.formatting import (
    console,
    create_entry_table,
    err_console,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from filekit.utils.line_separator import StandardLineSeparator

__all__ = [
    "StandardLineSeparator",
    "console",
    "create_entry_table",
    "err_console",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
