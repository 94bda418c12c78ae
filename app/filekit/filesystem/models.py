"""Filesystem domain models for directory walking.

This module defines the records produced when a walk is materialized into
a listing: the entry type classification and the immutable per-entry
snapshot used by the CLI and by JSON export.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path


class EntryType(str, Enum):
    """Type of filesystem entry.

    Attributes:
        DIRECTORY: Regular directory.
        FILE: Regular file.
        SYMLINK: Symbolic link with a valid target.
        DEAD_SYMLINK: Symbolic link whose target does not exist.
        MISSING: Path that does not exist at all.
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    DEAD_SYMLINK = "dead_symlink"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class WalkEntry:
    """Represents a filesystem entry visited during a walk.

    Attributes:
        path: Filesystem path as visited.
        entry_type: Classification of the entry.
        depth: Distance from the walk root (root = 0).
        size_bytes: File size in bytes (None for directories or on error).
        mtime: Last modification time in ISO 8601 format (None if unavailable).
    """

    path: str
    entry_type: EntryType
    depth: int
    size_bytes: int | None
    mtime: str | None

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.depth < 0:
            msg = f"Depth must be non-negative, got {self.depth}"
            raise ValueError(msg)

    @property
    def is_directory(self) -> bool:
        return self.entry_type == EntryType.DIRECTORY

    @classmethod
    def from_path(cls, path: Path, depth: int) -> "WalkEntry":
        """Snapshot path as it is on disk right now.

        Args:
            path: Path to inspect.
            depth: Depth at which the walk reached it.

        Returns:
            A new WalkEntry; stat failures leave size and mtime as None.
        """
        entry_type = get_entry_type(path)
        size: int | None = None
        mtime: str | None = None
        try:
            stat = path.lstat()
            mtime = datetime.fromtimestamp(stat.st_mtime, tz=UTC).isoformat()
            if entry_type != EntryType.DIRECTORY:
                size = stat.st_size
        except OSError:
            pass
        return cls(
            path=str(path),
            entry_type=entry_type,
            depth=depth,
            size_bytes=size,
            mtime=mtime,
        )


def get_entry_type(path: Path) -> EntryType:
    """Classify a path.

    Checks for symlinks first (before is_dir/is_file which follow
    symlinks), distinguishing between live and dead symlinks.

    Args:
        path: Path to classify.

    Returns:
        EntryType classification.
    """
    if path.is_symlink():
        if not path.exists():
            return EntryType.DEAD_SYMLINK
        return EntryType.SYMLINK
    if path.is_dir():
        return EntryType.DIRECTORY
    if path.exists():
        return EntryType.FILE
    return EntryType.MISSING
