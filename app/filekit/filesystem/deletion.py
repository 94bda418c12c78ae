"""File and directory deletion.

Provides the two deletion strategies (refuse non-empty directories, or
remove the whole tree) and the directory helpers built on them. Failures
are raised as OSError; cleaning a directory keeps going past individual
failures and raises them together as an IOErrorList at the end.
"""

import logging
import shutil
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


def _describe(error: BaseException) -> str:
    text = str(error)
    name = type(error).__name__
    return f"{name}: {text}" if text else name


class IOErrorList(OSError):
    """Several I/O errors gathered into one.

    Attributes:
        cause_list: The collected errors, in the order they occurred.
    """

    def __init__(
        self, causes: list[BaseException] | None, message: str | None = None
    ) -> None:
        self.cause_list: list[BaseException] = list(causes or [])
        if message is None:
            described = ", ".join(_describe(c) for c in self.cause_list)
            message = f"{len(self.cause_list)} exceptions: [{described}]"
        super().__init__(message)
        if self.cause_list:
            self.__cause__ = self.cause_list[0]

    @property
    def cause(self) -> BaseException | None:
        """The first collected error, or None."""
        return self.cause_list[0] if self.cause_list else None

    def get_cause(self, index: int) -> BaseException:
        """Return the error at index."""
        return self.cause_list[index]

    def get_cause_list(
        self, error_type: type[BaseException] = BaseException
    ) -> list[BaseException]:
        """Return the collected errors that are instances of error_type."""
        return [c for c in self.cause_list if isinstance(c, error_type)]

    def __str__(self) -> str:
        return str(self.args[0])


def _exists(path: Path) -> bool:
    return path.exists() or path.is_symlink()


class DeleteStrategy(str, Enum):
    """How to delete a path.

    Attributes:
        NORMAL: Delete files and empty directories; a non-empty directory
            raises OSError.
        FORCE: Delete files and whole directory trees.
    """

    NORMAL = "Normal"
    FORCE = "Force"

    def delete(self, path: Path) -> None:
        """Delete path according to this strategy.

        A path that does not exist is silently ignored.

        Raises:
            TypeError: If path is None.
            OSError: If the deletion fails.
        """
        if path is None:
            msg = "path must not be None"
            raise TypeError(msg)
        path = Path(path)
        if not _exists(path):
            return
        if self is DeleteStrategy.FORCE:
            force_delete(path)
        elif path.is_dir() and not path.is_symlink():
            path.rmdir()
        else:
            path.unlink()

    def delete_quietly(self, path: Path | None) -> bool:
        """Delete path, reporting failure as False instead of raising.

        Returns:
            True if path is gone afterwards (None counts as gone).
        """
        if path is None:
            return True
        try:
            self.delete(path)
        except OSError as e:
            logger.debug("Quiet %s delete of %s failed: %s", self.value, path, e)
            return False
        return True

    def __str__(self) -> str:
        return f"DeleteStrategy[{self.value}]"


def force_delete(path: Path) -> None:
    """Delete a file, or a directory with everything in it.

    Symlinks are removed, never followed.

    Raises:
        FileNotFoundError: If path does not exist.
        OSError: If anything cannot be removed.
    """
    path = Path(path)
    if path.is_dir() and not path.is_symlink():
        delete_directory(path)
        return
    if not _exists(path):
        msg = f"File does not exist: {path}"
        raise FileNotFoundError(msg)
    path.unlink()


def clean_directory(directory: Path) -> None:
    """Delete everything inside directory, keeping the directory itself.

    Every child is attempted; failures are collected and raised together.

    Raises:
        ValueError: If directory does not exist or is not a directory.
        IOErrorList: If one or more children could not be deleted.
    """
    directory = Path(directory)
    if not directory.exists():
        msg = f"{directory} does not exist"
        raise ValueError(msg)
    if not directory.is_dir():
        msg = f"{directory} is not a directory"
        raise ValueError(msg)

    causes: list[BaseException] = []
    for child in directory.iterdir():
        try:
            force_delete(child)
        except OSError as e:
            logger.warning("Failed to delete %s: %s", child, e)
            causes.append(e)
    if causes:
        raise IOErrorList(causes)


def delete_directory(directory: Path) -> None:
    """Delete a directory recursively. A missing directory is ignored.

    A symlink to a directory is unlinked without touching the target.

    Raises:
        ValueError: If directory is not a directory.
        OSError: If the directory or its contents cannot be removed.
    """
    directory = Path(directory)
    if not _exists(directory):
        return
    if directory.is_symlink():
        directory.unlink()
        return
    clean_directory(directory)
    directory.rmdir()


def delete_quietly(path: Path | None) -> bool:
    """Delete a file or directory tree without ever raising.

    Returns:
        True if the path was deleted, False if it was None or deletion failed.
    """
    if path is None:
        return False
    path = Path(path)
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as e:
        logger.debug("Quiet delete of %s failed: %s", path, e)
        return False
    return True
