"""Depth-first directory walking with filtering, depth limits and cancellation.

DirectoryWalker is a base class. Subclasses override the ``handle_*`` hooks
to collect whatever they need into a caller-owned results list, then call
walk(). Callback order for a root R holding a directory D holding a file F::

    handle_start(R)
      handle_directory(R) -> handle_directory_start(R)
        handle_directory(D) -> handle_directory_start(D)
          handle_file(F)
        handle_directory_end(D)
      handle_directory_end(R)
    handle_end()

Traversal uses an explicit stack of frames rather than recursion, so the
depth of the tree is bounded by memory, not the interpreter stack.
Symbolic links to directories are followed. A directory that resolves to
one still being walked (a link cycle) is entered but reported through
handle_restricted() instead of being listed again.

Listing goes through the list_directory() hook. Missing directories are
reported as restricted; any other OSError, PermissionError included,
aborts the walk unless a subclass overrides list_directory() to tolerate it.

walk() fills a caller-owned list; iter_walk() yields the same results
lazily, reading the tree only as far as the consumer asks.

Cancellation is cooperative: handle_is_cancelled() is polled on entering
each directory, around each file, and after each directory ends. A True
answer raises CancelError, which walk() routes once through
handle_cancelled(). The default re-raises; a subclass may swallow it to
keep the partial results.

Example:
    >>> class PyFinder(DirectoryWalker[Path]):
    ...     def handle_file(self, file, depth, results):
    ...         results.append(file)
    >>> found = []
    >>> PyFinder(suffix_filter(".py")).walk(Path("src"), found)
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from filekit.filesystem.filters import (
    FileFilter,
    directory_only,
    file_only,
    or_filter,
    true_filter,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CancelError(Exception):
    """Raised when a walk is cancelled.

    Attributes:
        file: The path being visited when cancellation was detected.
        depth: Depth of that path; the start directory is depth 0.
    """

    def __init__(self, file: Path, depth: int, message: str = "Operation Cancelled") -> None:
        super().__init__(message)
        self.file = file
        self.depth = depth

    def __repr__(self) -> str:
        return f"CancelError(file={self.file!r}, depth={self.depth})"


@dataclass(slots=True)
class _Frame:
    directory: Path
    depth: int
    children: Iterator[Path]
    real: Path | None = None


def _require_start(start_directory: Path) -> Path:
    if start_directory is None:
        msg = "Start directory must not be None"
        raise TypeError(msg)
    return Path(start_directory)


def _real_path(directory: Path) -> Path | None:
    """Resolve directory, or None when its links cannot be followed."""
    try:
        return directory.resolve()
    except (OSError, RuntimeError):
        return None


def _drain(results: list[T]) -> Iterator[T]:
    pending = results[:]
    results.clear()
    yield from pending


class DirectoryWalker(Generic[T]):
    """Abstract depth-first walker over a directory tree.

    Filters apply to descendants only; the start location is always visited.

    Args:
        filter: Applied to every child, directories and files alike.
        depth_limit: How deep to descend; 0 visits the start directory only,
            -1 means unlimited.
        directory_filter: Applied to child directories only.
        file_filter: Applied to child files only.

    Passing directory_filter or file_filter splits filtering by category:
    a missing half accepts everything of its category, so a directory
    filter never hides files and vice versa.

    Raises:
        ValueError: If filter is combined with directory_filter/file_filter.
    """

    def __init__(
        self,
        filter: FileFilter | None = None,
        depth_limit: int = -1,
        *,
        directory_filter: FileFilter | None = None,
        file_filter: FileFilter | None = None,
    ) -> None:
        if directory_filter is not None or file_filter is not None:
            if filter is not None:
                msg = "Use either filter or directory_filter/file_filter, not both"
                raise ValueError(msg)
            filter = or_filter(
                directory_only(directory_filter or true_filter),
                file_only(file_filter or true_filter),
            )
        self.filter = filter
        self.depth_limit = depth_limit

    # =========================================================================
    # Traversal
    # =========================================================================

    def walk(self, start_directory: Path, results: list[T]) -> None:
        """Walk the tree below start_directory.

        Args:
            start_directory: Where to start; visited at depth 0.
            results: Caller-owned sink handed to every hook.

        Raises:
            TypeError: If start_directory is None.
            CancelError: If cancelled and handle_cancelled() re-raises.
            OSError: If a directory cannot be listed (e.g. permission denied).
        """
        start_directory = _require_start(start_directory)
        try:
            self.handle_start(start_directory, results)
            for _ in self._steps(start_directory, results):
                pass
            self.handle_end(results)
        except CancelError as cancel:
            self._cancelled(start_directory, results, cancel)

    def iter_walk(self, start_directory: Path) -> Iterator[T]:
        """Walk lazily, yielding results as the hooks produce them.

        The tree is read one step at a time, so stopping the iteration early
        leaves the rest of it unvisited. Hooks receive a results list that
        holds only what has not been yielded yet.

        Raises:
            TypeError: If start_directory is None, on the call itself.
            CancelError: If cancelled and handle_cancelled() re-raises.
            OSError: If a directory cannot be listed (e.g. permission denied).
        """
        return self._iter_steps(_require_start(start_directory))

    def _iter_steps(self, start_directory: Path) -> Iterator[T]:
        results: list[T] = []
        try:
            self.handle_start(start_directory, results)
            yield from _drain(results)
            for _ in self._steps(start_directory, results):
                yield from _drain(results)
            self.handle_end(results)
        except CancelError as cancel:
            self._cancelled(start_directory, results, cancel)
        yield from _drain(results)

    def _cancelled(self, start_directory: Path, results: list[T], cancel: CancelError) -> None:
        logger.debug(
            "Walk of %s cancelled at %s (depth %d)",
            start_directory,
            cancel.file,
            cancel.depth,
        )
        self.handle_cancelled(start_directory, results, cancel)

    def _steps(self, root: Path, results: list[T]) -> Iterator[None]:
        """Visit the tree, pausing after every directory entered or left and every file."""
        if root.is_file():
            self._visit_file(root, 0, results)
            yield
            return

        stack: list[_Frame] = []
        active: set[Path] = set()
        self._enter_directory(root, 0, results, stack, active)
        yield
        while stack:
            frame = stack[-1]
            child = next(frame.children, None)
            if child is None:
                stack.pop()
                if frame.real is not None:
                    active.discard(frame.real)
                self.handle_directory_end(frame.directory, frame.depth, results)
                self.check_if_cancelled(frame.directory, frame.depth, results)
            elif child.is_dir():
                self._enter_directory(child, frame.depth + 1, results, stack, active)
            else:
                self._visit_file(child, frame.depth + 1, results)
            yield

    def _enter_directory(
        self,
        directory: Path,
        depth: int,
        results: list[T],
        stack: list[_Frame],
        active: set[Path],
    ) -> None:
        self.check_if_cancelled(directory, depth, results)
        if not self.handle_directory(directory, depth, results):
            self.check_if_cancelled(directory, depth, results)
            return

        self.handle_directory_start(directory, depth, results)
        children: list[Path] = []
        real: Path | None = None
        child_depth = depth + 1
        if self.depth_limit < 0 or child_depth <= self.depth_limit:
            self.check_if_cancelled(directory, depth, results)
            real = _real_path(directory)
            if real is not None and real in active:
                # a symlink back to a directory still being walked
                logger.debug("Directory %s leads back to %s, not descending", directory, real)
                real = None
                listing = None
            else:
                listing = self.filter_directory_contents(
                    directory, depth, self._list_children(directory, depth)
                )
            if listing is None:
                self.handle_restricted(directory, child_depth, results)
            else:
                children = listing
        if real is not None:
            active.add(real)
        stack.append(_Frame(directory, depth, iter(children), real))

    def _visit_file(self, file: Path, depth: int, results: list[T]) -> None:
        self.check_if_cancelled(file, depth, results)
        self.handle_file(file, depth, results)
        self.check_if_cancelled(file, depth, results)

    def _list_children(self, directory: Path, depth: int) -> list[Path] | None:
        entries = self.list_directory(directory, depth)
        if entries is None or self.filter is None:
            return entries
        return [entry for entry in entries if self.filter(entry)]

    def check_if_cancelled(self, file: Path, depth: int, results: list[T]) -> None:
        """Raise CancelError if handle_is_cancelled() says so."""
        if self.handle_is_cancelled(file, depth, results):
            raise CancelError(file, depth)

    # =========================================================================
    # Hooks
    # =========================================================================

    def handle_start(self, start_directory: Path, results: list[T]) -> None:
        """Called once before anything is visited."""

    def handle_directory(self, directory: Path, depth: int, results: list[T]) -> bool:
        """Decide whether to process a directory.

        Returning False skips the directory entirely: no start or end hook,
        no children.
        """
        return True

    def handle_directory_start(self, directory: Path, depth: int, results: list[T]) -> None:
        """Called on entering a directory, before its children."""

    def list_directory(self, directory: Path, depth: int) -> list[Path] | None:
        """Read the children of directory in filesystem order.

        The walker filter is applied to whatever this returns.

        Returns:
            The children, or None when the directory is missing or not a
            directory. Other OS errors propagate and abort the walk; an
            override may catch them and return None to report the directory
            as restricted instead.
        """
        try:
            return list(directory.iterdir())
        except (FileNotFoundError, NotADirectoryError):
            return None

    def filter_directory_contents(
        self, directory: Path, depth: int, files: list[Path] | None
    ) -> list[Path] | None:
        """Last chance to reorder or drop the children of a directory.

        Args:
            directory: The directory being listed.
            depth: Its depth.
            files: Filtered children, or None if the listing was impossible.

        Returns:
            The children to visit, or None to report the directory as restricted.
        """
        return files

    def handle_restricted(self, directory: Path, depth: int, results: list[T]) -> None:
        """Called when a directory could not be listed."""
        logger.debug("Directory %s could not be listed (depth %d)", directory, depth)

    def handle_file(self, file: Path, depth: int, results: list[T]) -> None:
        """Called for each file."""

    def handle_directory_end(self, directory: Path, depth: int, results: list[T]) -> None:
        """Called after a directory's children are processed."""

    def handle_end(self, results: list[T]) -> None:
        """Called once after a walk completes without cancellation."""

    def handle_is_cancelled(self, file: Path, depth: int, results: list[T]) -> bool:
        """Polled throughout the walk; return True to cancel."""
        return False

    def handle_cancelled(
        self, start_directory: Path, results: list[T], cancel: CancelError
    ) -> None:
        """Handle a cancelled walk. Re-raises by default."""
        raise cancel
