"""Sizes and modification times of files and directory trees."""

from datetime import datetime
from pathlib import Path

from filekit.filesystem.walker import DirectoryWalker

ONE_KB = 1024
ONE_MB = ONE_KB * ONE_KB
ONE_GB = ONE_KB * ONE_MB
ONE_TB = ONE_KB * ONE_GB
ONE_PB = ONE_KB * ONE_TB
ONE_EB = ONE_KB * ONE_PB

_DISPLAY_UNITS = (
    (ONE_EB, "EB"),
    (ONE_PB, "PB"),
    (ONE_TB, "TB"),
    (ONE_GB, "GB"),
    (ONE_MB, "MB"),
    (ONE_KB, "KB"),
)


def byte_count_to_display_size(size: int) -> str:
    """Describe a byte count in the largest whole unit, rounding down.

    Examples::

        1023           -->   1023 bytes
        1025           -->   1 KB
        2 * ONE_GB - 1 -->   1 GB
    """
    for unit_size, unit in _DISPLAY_UNITS:
        if size // unit_size > 0:
            return f"{size // unit_size} {unit}"
    return f"{size} bytes"


class _SizeWalker(DirectoryWalker[int]):
    """Adds up the sizes of regular files, leaving symbolic links out."""

    def handle_directory(self, directory: Path, depth: int, results: list[int]) -> bool:
        return depth == 0 or not directory.is_symlink()

    def handle_file(self, file: Path, depth: int, results: list[int]) -> None:
        if not file.is_symlink():
            results.append(file.stat().st_size)


def size_of_directory(directory: Path) -> int:
    """Total size in bytes of the files below directory.

    Symbolic links are neither followed nor counted, so link cycles are
    harmless.

    Raises:
        TypeError: If directory is None.
        ValueError: If directory does not exist or is not a directory.
        OSError: If part of the tree cannot be read.
    """
    if directory is None:
        msg = "Parameter 'directory' must not be None"
        raise TypeError(msg)
    directory = Path(directory)
    if not directory.exists():
        msg = f"{directory} does not exist"
        raise ValueError(msg)
    if not directory.is_dir():
        msg = f"{directory} is not a directory"
        raise ValueError(msg)
    sizes: list[int] = []
    _SizeWalker().walk(directory, sizes)
    return sum(sizes)


def size_of(path: Path) -> int:
    """Size in bytes of a file, or of everything below a directory.

    Raises:
        TypeError: If path is None.
        ValueError: If path does not exist.
    """
    if path is None:
        msg = "Parameter 'path' must not be None"
        raise TypeError(msg)
    path = Path(path)
    if not path.exists():
        msg = f"{path} does not exist"
        raise ValueError(msg)
    if path.is_dir():
        return size_of_directory(path)
    return path.stat().st_size


# =============================================================================
# Modification times
# =============================================================================


def _reference_time(reference: Path | datetime | float) -> float:
    if isinstance(reference, datetime):
        return reference.timestamp()
    if isinstance(reference, (int, float)):
        return float(reference)
    reference = Path(reference)
    if not reference.exists():
        msg = f"The reference file '{reference}' doesn't exist"
        raise ValueError(msg)
    return reference.stat().st_mtime


def is_file_newer(file: Path, reference: Path | datetime | float) -> bool:
    """Whether file was modified after reference.

    Args:
        file: File to test; a missing file is never newer.
        reference: Another file, a datetime, or a POSIX timestamp in seconds.
            A naive datetime is taken as local time.

    Raises:
        TypeError: If file or reference is None.
        ValueError: If reference names a file that does not exist.
    """
    if file is None or reference is None:
        msg = "Parameters 'file' and 'reference' must not be None"
        raise TypeError(msg)
    threshold = _reference_time(reference)
    file = Path(file)
    if not file.exists():
        return False
    return file.stat().st_mtime > threshold


def is_file_older(file: Path, reference: Path | datetime | float) -> bool:
    """Whether file was modified before reference.

    Takes the same arguments as is_file_newer(); a missing file is never older.
    """
    if file is None or reference is None:
        msg = "Parameters 'file' and 'reference' must not be None"
        raise TypeError(msg)
    threshold = _reference_time(reference)
    file = Path(file)
    if not file.exists():
        return False
    return file.stat().st_mtime < threshold
