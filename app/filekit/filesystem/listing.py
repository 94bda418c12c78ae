"""Directory listings built on DirectoryWalker.

These functions turn a filtered walk into a flat list (or iterator) of
paths or WalkEntry snapshots. Filters follow the listing convention: the
file filter picks which files are returned, the directory filter picks
which subdirectories are descended into; without a directory filter the
listing stays at the top level.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from filekit.filesystem.filters import (
    FileFilter,
    and_filter,
    directory_filter,
    false_filter,
    not_filter,
    or_filter,
    suffix_filter,
    true_filter,
)
from filekit.filesystem.models import WalkEntry
from filekit.filesystem.walker import CancelError, DirectoryWalker
from filekit.names.components import directory_contains as name_contains

logger = logging.getLogger(__name__)


def _validate_directory(directory: Path) -> Path:
    if directory is None:
        msg = "Parameter 'directory' must not be None"
        raise TypeError(msg)
    directory = Path(directory)
    if not directory.is_dir():
        msg = f"Parameter 'directory' is not a directory: {directory}"
        raise ValueError(msg)
    return directory


class _ListingWalker(DirectoryWalker[Path]):
    """Collects files, and optionally the directories it descends into."""

    def __init__(self, walk_filter: FileFilter, include_directories: bool) -> None:
        super().__init__(walk_filter)
        self.include_directories = include_directories

    def handle_directory_start(self, directory: Path, depth: int, results: list[Path]) -> None:
        if self.include_directories:
            results.append(directory)

    def handle_file(self, file: Path, depth: int, results: list[Path]) -> None:
        results.append(file)


def _listing_filter(file_filter: FileFilter, dir_filter: FileFilter | None) -> FileFilter:
    effective_files = and_filter(file_filter, not_filter(directory_filter))
    effective_dirs = (
        false_filter if dir_filter is None else and_filter(dir_filter, directory_filter)
    )
    return or_filter(effective_files, effective_dirs)


def list_files(
    directory: Path, file_filter: FileFilter, dir_filter: FileFilter | None = None
) -> list[Path]:
    """List the files below directory.

    Directories are never part of the result.

    Args:
        directory: Directory to search.
        file_filter: Selects the files to return.
        dir_filter: Selects the subdirectories to descend into; None means
            stay in directory itself.

    Returns:
        Matching files in walk order.

    Raises:
        TypeError: If directory or file_filter is None.
        ValueError: If directory is not an existing directory.
    """
    directory = _validate_directory(directory)
    if file_filter is None:
        msg = "Parameter 'file_filter' must not be None"
        raise TypeError(msg)
    results: list[Path] = []
    _ListingWalker(_listing_filter(file_filter, dir_filter), False).walk(directory, results)
    return results


def iterate_files(
    directory: Path, file_filter: FileFilter, dir_filter: FileFilter | None = None
) -> Iterator[Path]:
    """Iterate lazily over the files list_files() would return.

    Arguments are checked on the call. The tree is then read only as far as
    the iteration goes, so breaking out early skips the rest of it.
    """
    directory = _validate_directory(directory)
    if file_filter is None:
        msg = "Parameter 'file_filter' must not be None"
        raise TypeError(msg)
    return _ListingWalker(_listing_filter(file_filter, dir_filter), False).iter_walk(directory)


def list_files_by_extension(
    directory: Path, extensions: Iterable[str] | None, recursive: bool
) -> list[Path]:
    """List files with one of the given extensions.

    Args:
        directory: Directory to search.
        extensions: Extensions without the dot, e.g. ``["py", "toml"]``;
            None returns every file.
        recursive: Descend into all subdirectories when True.

    Returns:
        Matching files in walk order.
    """
    if extensions is None:
        selector: FileFilter = true_filter
    else:
        selector = suffix_filter([f".{ext}" for ext in extensions])
    return list_files(directory, selector, true_filter if recursive else None)


def list_files_and_dirs(
    directory: Path, file_filter: FileFilter, dir_filter: FileFilter | None = None
) -> list[Path]:
    """Like list_files(), but the result also holds every directory descended into.

    The start directory is always included.
    """
    directory = _validate_directory(directory)
    if file_filter is None:
        msg = "Parameter 'file_filter' must not be None"
        raise TypeError(msg)
    results: list[Path] = []
    _ListingWalker(_listing_filter(file_filter, dir_filter), True).walk(directory, results)
    return results


def directory_contains(directory: Path, child: Path | None) -> bool:
    """Whether child lives somewhere below directory on disk.

    Both paths are resolved first, so symlinks and ``..`` segments do
    not fool the check. A directory does not contain itself.

    Raises:
        TypeError: If directory is None.
        ValueError: If directory does not exist or is not a directory.
    """
    directory = _validate_directory(directory)
    if child is None or not Path(child).exists():
        return False
    return name_contains(str(directory.resolve()), str(Path(child).resolve()))


# =============================================================================
# Entry snapshots
# =============================================================================


class EntryCollector(DirectoryWalker[WalkEntry]):
    """Walker that records a WalkEntry for every directory and file visited.

    Directories that cannot be read for lack of permission, or that close a
    symlink cycle, are logged as warnings and skipped; the walk goes on.

    Args:
        walk_filter: Filter applied to children.
        depth_limit: Maximum depth, -1 for unlimited.
        limit: Stop after this many entries; the partial listing is kept.
        include_directories: Record directories as well as files.
    """

    def __init__(
        self,
        walk_filter: FileFilter | None = None,
        depth_limit: int = -1,
        limit: int | None = None,
        include_directories: bool = True,
    ) -> None:
        super().__init__(walk_filter, depth_limit)
        self.limit = limit
        self.include_directories = include_directories
        self.truncated = False

    def handle_directory_start(
        self, directory: Path, depth: int, results: list[WalkEntry]
    ) -> None:
        if self.include_directories:
            results.append(WalkEntry.from_path(directory, depth))

    def handle_file(self, file: Path, depth: int, results: list[WalkEntry]) -> None:
        results.append(WalkEntry.from_path(file, depth))

    def list_directory(self, directory: Path, depth: int) -> list[Path] | None:
        try:
            return super().list_directory(directory, depth)
        except PermissionError as e:
            logger.debug("Permission denied listing %s: %s", directory, e)
            return None

    def handle_restricted(self, directory: Path, depth: int, results: list[WalkEntry]) -> None:
        logger.warning("Cannot list %s", directory)

    def handle_is_cancelled(self, file: Path, depth: int, results: list[WalkEntry]) -> bool:
        return self.limit is not None and len(results) >= self.limit

    def handle_cancelled(
        self, start_directory: Path, results: list[WalkEntry], cancel: CancelError
    ) -> None:
        self.truncated = True
        logger.debug("Listing of %s stopped at %d entries", start_directory, len(results))

    def collect(self, start_directory: Path) -> list[WalkEntry]:
        """Walk start_directory and return the collected entries."""
        results: list[WalkEntry] = []
        self.truncated = False
        self.walk(start_directory, results)
        return results
