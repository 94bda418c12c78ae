"""File filters and their combinators.

A filter is any callable taking a Path and returning a bool. The factories
here build the common ones (by name, wildcard, type, age, size, hidden
flag) and compose them with plain functions instead of a class hierarchy::

    python_sources = and_filter(file_filter, suffix_filter(".py"))
    walker_filter = make_svn_aware(directory_only(not_filter(hidden_filter)))
"""

import os
import stat
import sys
from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path

from filekit.core.iocase import IOCase
from filekit.names.wildcard import wildcard_match

FileFilter = Callable[[Path], bool]


def _as_list(values: str | Iterable[str]) -> list[str]:
    if isinstance(values, str):
        return [values]
    items = list(values)
    if any(v is None for v in items):
        msg = "Filter values must not contain None"
        raise TypeError(msg)
    return items


# =============================================================================
# Constants and combinators
# =============================================================================


def true_filter(path: Path) -> bool:
    """Accept everything."""
    return True


def false_filter(path: Path) -> bool:
    """Reject everything."""
    return False


def and_filter(*filters: FileFilter) -> FileFilter:
    """Accept a path only if every filter accepts it.

    With no filters at all nothing is accepted.
    """
    members = list(filters)

    def accept(path: Path) -> bool:
        return bool(members) and all(f(path) for f in members)

    return accept


def or_filter(*filters: FileFilter) -> FileFilter:
    """Accept a path if any filter accepts it."""
    members = list(filters)

    def accept(path: Path) -> bool:
        return any(f(path) for f in members)

    return accept


def not_filter(inner: FileFilter) -> FileFilter:
    """Invert a filter."""

    def accept(path: Path) -> bool:
        return not inner(path)

    return accept


# =============================================================================
# Type filters
# =============================================================================


def directory_filter(path: Path) -> bool:
    """Accept directories only."""
    return path.is_dir()


def file_filter(path: Path) -> bool:
    """Accept regular files only."""
    return path.is_file()


def directory_only(inner: FileFilter | None) -> FileFilter:
    """Restrict a filter to directories; files are rejected outright."""
    if inner is None:
        return directory_filter
    return and_filter(directory_filter, inner)


def file_only(inner: FileFilter | None) -> FileFilter:
    """Restrict a filter to files; directories are rejected outright."""
    if inner is None:
        return file_filter
    return and_filter(file_filter, inner)


# =============================================================================
# Name filters
# =============================================================================


def name_filter(names: str | Iterable[str], case: IOCase = IOCase.SENSITIVE) -> FileFilter:
    """Accept paths whose name equals one of names."""
    wanted = _as_list(names)

    def accept(path: Path) -> bool:
        return any(case.check_equals(path.name, n) for n in wanted)

    return accept


def prefix_filter(prefixes: str | Iterable[str], case: IOCase = IOCase.SENSITIVE) -> FileFilter:
    """Accept paths whose name starts with one of prefixes."""
    wanted = _as_list(prefixes)

    def accept(path: Path) -> bool:
        return any(case.check_starts_with(path.name, p) for p in wanted)

    return accept


def suffix_filter(suffixes: str | Iterable[str], case: IOCase = IOCase.SENSITIVE) -> FileFilter:
    """Accept paths whose name ends with one of suffixes."""
    wanted = _as_list(suffixes)

    def accept(path: Path) -> bool:
        return any(case.check_ends_with(path.name, s) for s in wanted)

    return accept


def wildcard_filter(
    patterns: str | Iterable[str], case: IOCase = IOCase.SENSITIVE
) -> FileFilter:
    """Accept paths whose name matches one of the wildcard patterns."""
    wanted = _as_list(patterns)

    def accept(path: Path) -> bool:
        return any(wildcard_match(path.name, p, case) for p in wanted)

    return accept


# =============================================================================
# Attribute filters
# =============================================================================


def _cutoff_timestamp(cutoff: datetime | float | int | Path) -> float:
    if isinstance(cutoff, datetime):
        return cutoff.timestamp()
    if isinstance(cutoff, Path):
        # reference file must exist
        return cutoff.stat().st_mtime
    return float(cutoff)


def _is_newer(path: Path, cutoff: float) -> bool:
    try:
        return path.stat().st_mtime > cutoff
    except FileNotFoundError:
        return False


def age_filter(
    cutoff: datetime | float | int | Path, accept_older: bool = True
) -> FileFilter:
    """Filter on last-modified time.

    Args:
        cutoff: A datetime, an epoch timestamp in seconds, or a reference
            file whose modification time becomes the cutoff.
        accept_older: Accept paths modified at or before the cutoff when
            True, strictly after it when False.

    Returns:
        The filter. Missing paths count as older than any cutoff.

    Raises:
        FileNotFoundError: If cutoff is a reference file that does not exist.
    """
    threshold = _cutoff_timestamp(cutoff)

    def accept(path: Path) -> bool:
        return accept_older != _is_newer(path, threshold)

    return accept


def _size_of(path: Path) -> int:
    try:
        return path.stat().st_size
    except FileNotFoundError:
        return 0


def size_filter(threshold: int, accept_larger: bool = True) -> FileFilter:
    """Filter on file size in bytes.

    Args:
        threshold: Size boundary in bytes.
        accept_larger: Accept sizes at or above threshold when True,
            strictly below it when False.

    Raises:
        ValueError: If threshold is negative.
    """
    if threshold < 0:
        msg = f"The size must be non-negative: {threshold}"
        raise ValueError(msg)

    def accept(path: Path) -> bool:
        return accept_larger != (_size_of(path) < threshold)

    return accept


def size_range_filter(minimum: int, maximum: int) -> FileFilter:
    """Accept sizes between minimum and maximum bytes, both inclusive."""
    return and_filter(size_filter(minimum, True), size_filter(maximum + 1, False))


def hidden_filter(path: Path) -> bool:
    """Accept hidden paths: dot-names, or the hidden attribute on Windows."""
    if path.name.startswith("."):
        return True
    if sys.platform.startswith("win"):
        try:
            attrs = os.stat(path).st_file_attributes  # type: ignore[attr-defined]
        except OSError:
            return False
        return bool(attrs & stat.FILE_ATTRIBUTE_HIDDEN)  # type: ignore[attr-defined]
    return False


def visible_filter(path: Path) -> bool:
    """Accept paths that are not hidden."""
    return not hidden_filter(path)


# =============================================================================
# Version control awareness
# =============================================================================


def _vcs_aware(inner: FileFilter | None, directory_name: str) -> FileFilter:
    exclude = not_filter(and_filter(directory_filter, name_filter(directory_name)))
    if inner is None:
        return exclude
    return and_filter(inner, exclude)


def make_cvs_aware(inner: FileFilter | None) -> FileFilter:
    """Decorate a filter so it rejects CVS administrative directories."""
    return _vcs_aware(inner, "CVS")


def make_svn_aware(inner: FileFilter | None) -> FileFilter:
    """Decorate a filter so it rejects .svn administrative directories."""
    return _vcs_aware(inner, ".svn")


def make_git_aware(inner: FileFilter | None) -> FileFilter:
    """Decorate a filter so it rejects .git directories."""
    return _vcs_aware(inner, ".git")
