"""Path comparators for ordering listings.

A comparator is a callable ``(a, b) -> int`` returning a negative number,
zero, or a positive number, as in a classic three-way compare. They
compose with reverse() and composite(), and sort() applies one to a
sequence of paths.
"""

import functools
from collections.abc import Callable, Iterable
from pathlib import Path

from filekit.core.iocase import IOCase
from filekit.filesystem.measure import size_of_directory
from filekit.names.components import get_extension

Comparator = Callable[[Path, Path], int]


def _sign(a: float, b: float) -> int:
    return (a > b) - (a < b)


def name_comparator(case: IOCase = IOCase.SENSITIVE) -> Comparator:
    """Compare by file name under the given case policy."""

    def compare(a: Path, b: Path) -> int:
        return case.check_compare_to(a.name, b.name)

    return compare


def path_comparator(case: IOCase = IOCase.SENSITIVE) -> Comparator:
    """Compare by full path string under the given case policy."""

    def compare(a: Path, b: Path) -> int:
        return case.check_compare_to(str(a), str(b))

    return compare


def extension_comparator(case: IOCase = IOCase.SENSITIVE) -> Comparator:
    """Compare by file extension; names without one sort first."""

    def compare(a: Path, b: Path) -> int:
        return case.check_compare_to(get_extension(a.name) or "", get_extension(b.name) or "")

    return compare


def _size_of(path: Path, sum_directory_contents: bool) -> int:
    if path.is_dir():
        return size_of_directory(path) if sum_directory_contents else 0
    return path.stat().st_size if path.exists() else 0


def size_comparator(sum_directory_contents: bool = False) -> Comparator:
    """Compare by size in bytes.

    Args:
        sum_directory_contents: Measure a directory as the total size of the
            files below it; otherwise directories count as size 0.
    """

    def compare(a: Path, b: Path) -> int:
        return _sign(_size_of(a, sum_directory_contents), _size_of(b, sum_directory_contents))

    return compare


def last_modified_comparator(a: Path, b: Path) -> int:
    """Compare by modification time, oldest first."""
    return _sign(a.stat().st_mtime, b.stat().st_mtime)


def directory_comparator(a: Path, b: Path) -> int:
    """Put directories before files."""
    return _sign(0 if a.is_dir() else 1, 0 if b.is_dir() else 1)


def reverse(comparator: Comparator) -> Comparator:
    """Invert the order of comparator."""

    def compare(a: Path, b: Path) -> int:
        return comparator(b, a)

    return compare


def composite(*comparators: Comparator) -> Comparator:
    """Chain comparators; the first non-zero answer wins.

    With no comparators every pair compares equal.
    """
    delegates = list(comparators)

    def compare(a: Path, b: Path) -> int:
        for delegate in delegates:
            result = delegate(a, b)
            if result != 0:
                return result
        return 0

    return compare


def sort(paths: Iterable[Path], comparator: Comparator) -> list[Path]:
    """Return paths as a new list ordered by comparator (stable)."""
    return sorted(paths, key=functools.cmp_to_key(comparator))


NAME_COMPARATOR = name_comparator(IOCase.SENSITIVE)
NAME_INSENSITIVE_COMPARATOR = name_comparator(IOCase.INSENSITIVE)
NAME_SYSTEM_COMPARATOR = name_comparator(IOCase.SYSTEM)
NAME_REVERSE = reverse(NAME_COMPARATOR)
PATH_COMPARATOR = path_comparator(IOCase.SENSITIVE)
EXTENSION_COMPARATOR = extension_comparator(IOCase.SENSITIVE)
SIZE_COMPARATOR = size_comparator()
SIZE_SUMDIR_COMPARATOR = size_comparator(sum_directory_contents=True)
