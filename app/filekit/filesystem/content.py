"""Byte and text content comparison for files and directory trees.

All comparisons treat two missing paths as equal and a missing path as
different from an existing one. None is accepted in place of either path
and equals only None.
"""

import logging
from pathlib import Path

from filekit.filesystem.walker import DirectoryWalker

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


def _decided_by_existence(path1: Path, path2: Path) -> bool | None:
    """Return the answer when a missing path settles it, else None."""
    exists1 = path1.exists()
    if exists1 != path2.exists():
        return False
    if not exists1:
        return True
    return None


def _same_file(path1: Path, path2: Path) -> bool:
    try:
        return path1.samefile(path2)
    except OSError:
        return False


def _bytes_equal(path1: Path, path2: Path) -> bool:
    if path1.stat().st_size != path2.stat().st_size:
        return False
    if _same_file(path1, path2):
        return True
    with open(path1, "rb") as f1, open(path2, "rb") as f2:
        while True:
            chunk1 = f1.read(_CHUNK_SIZE)
            chunk2 = f2.read(_CHUNK_SIZE)
            if chunk1 != chunk2:
                return False
            if not chunk1:
                return True


def file_content_equals(path1: Path | None, path2: Path | None) -> bool:
    """Whether two files hold the same bytes.

    Raises:
        IsADirectoryError: If either path is a directory.
        OSError: If a file cannot be read.
    """
    if path1 is None or path2 is None:
        return path1 is None and path2 is None
    decided = _decided_by_existence(path1, path2)
    if decided is not None:
        return decided
    for path in (path1, path2):
        if path.is_dir():
            msg = f"Cannot compare directories, only files: {path}"
            raise IsADirectoryError(msg)
    return _bytes_equal(path1, path2)


def content_equals(file1: Path | None, file2: Path | None) -> bool:
    """Whether two files hold the same bytes.

    Same as file_content_equals(), but a directory is a caller error.

    Raises:
        ValueError: If either path is a directory.
        OSError: If a file cannot be read.
    """
    try:
        return file_content_equals(file1, file2)
    except IsADirectoryError as e:
        raise ValueError(str(e)) from e


def _lines(path: Path, encoding: str | None) -> list[str]:
    # universal newlines turn \r, \r\n and \n into \n
    with open(path, encoding=encoding or "utf-8", newline=None) as f:
        return [line.rstrip("\n") for line in f]


def content_equals_ignore_eol(
    file1: Path | None, file2: Path | None, encoding: str | None = None
) -> bool:
    """Whether two text files hold the same lines, whatever their line endings.

    ``\\r``, ``\\n`` and ``\\r\\n`` all count as the same line break, and a
    missing final line break is not a difference.

    Args:
        file1: First file.
        file2: Second file.
        encoding: Text encoding of both files, UTF-8 when None.

    Raises:
        ValueError: If either path is a directory.
        OSError: If a file cannot be read.
        UnicodeDecodeError: If a file is not valid in the encoding.
    """
    if file1 is None or file2 is None:
        return file1 is None and file2 is None
    decided = _decided_by_existence(file1, file2)
    if decided is not None:
        return decided
    for path in (file1, file2):
        if path.is_dir():
            msg = f"Cannot compare directories, only files: {path}"
            raise ValueError(msg)
    if _same_file(file1, file2):
        return True
    return _lines(file1, encoding) == _lines(file2, encoding)


# =============================================================================
# Directory trees
# =============================================================================


class _RelativeTree(DirectoryWalker[tuple[str, bool]]):
    """Records (relative posix path, is directory) for everything below the root."""

    def __init__(self) -> None:
        super().__init__()
        self.root = Path()

    def handle_start(self, start_directory: Path, results: list[tuple[str, bool]]) -> None:
        self.root = start_directory

    def handle_directory_start(
        self, directory: Path, depth: int, results: list[tuple[str, bool]]
    ) -> None:
        if depth > 0:
            results.append((directory.relative_to(self.root).as_posix(), True))

    def handle_file(self, file: Path, depth: int, results: list[tuple[str, bool]]) -> None:
        results.append((file.relative_to(self.root).as_posix(), False))

    def collect(self, root: Path) -> list[tuple[str, bool]]:
        results: list[tuple[str, bool]] = []
        self.walk(root, results)
        return sorted(results)


def directory_content_equals(
    dir1: Path | None, dir2: Path | None, compare_files: bool = True
) -> bool:
    """Whether two directory trees have the same layout and, optionally, content.

    The trees match when they hold the same relative paths with the same
    kinds (file or directory). With compare_files, files at the same
    relative path must also hold the same bytes. Two files are compared as
    files; a file never equals a directory.

    Raises:
        OSError: If a directory cannot be listed or a file cannot be read.
    """
    if dir1 is None or dir2 is None:
        return dir1 is None and dir2 is None
    decided = _decided_by_existence(dir1, dir2)
    if decided is not None:
        return decided
    is_dir1, is_dir2 = dir1.is_dir(), dir2.is_dir()
    if is_dir1 != is_dir2:
        return False
    if not is_dir1:
        return not compare_files or _bytes_equal(dir1, dir2)
    if _same_file(dir1, dir2):
        return True

    tree1 = _RelativeTree().collect(dir1)
    tree2 = _RelativeTree().collect(dir2)
    if tree1 != tree2:
        logger.debug("Trees %s and %s differ in layout", dir1, dir2)
        return False
    if not compare_files:
        return True
    for relative, is_directory in tree1:
        if not is_directory and not _bytes_equal(dir1 / relative, dir2 / relative):
            logger.debug("Trees %s and %s differ at %s", dir1, dir2, relative)
            return False
    return True
