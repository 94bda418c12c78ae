"""Host filesystem traits.

Describes the naming rules of the filesystems filekit knows about: which
characters may appear in a file name, which names are reserved, how long
names and paths may get, and whether drive letters exist. Name helpers
consult FileSystem.get_current() when a rule depends on the host.
"""

import sys
from enum import Enum

# Java's Integer.MAX_VALUE; "no practical limit"
_UNLIMITED = 2**31 - 1

_WINDOWS_ILLEGAL = tuple(
    sorted([chr(i) for i in range(32)] + ['"', "*", "/", ":", "<", ">", "?", "\\", "|"])
)

_WINDOWS_RESERVED = tuple(
    sorted(
        ["AUX", "CON", "NUL", "PRN"]
        + [f"COM{i}" for i in range(1, 10)]
        + [f"LPT{i}" for i in range(1, 10)]
    )
)


class FileSystem(Enum):
    """Known filesystem families.

    Each member is a tuple of (case_sensitive, case_preserving,
    max_file_name_length, max_path_length, illegal_chars, reserved_names,
    supports_drive_letter).

    Attributes:
        GENERIC: Lowest common denominator, used for unknown hosts.
        LINUX: ext4 and friends.
        MAC_OSX: APFS / HFS+ as seen through POSIX.
        WINDOWS: NTFS with Win32 naming rules.
    """

    GENERIC = (False, False, _UNLIMITED, _UNLIMITED, ("\0",), (), False)
    LINUX = (True, True, 255, 4096, ("\0", "/"), (), False)
    MAC_OSX = (True, True, 255, 1024, ("\0", "/", ":"), (), False)
    WINDOWS = (False, True, 255, 32000, _WINDOWS_ILLEGAL, _WINDOWS_RESERVED, True)

    def __init__(
        self,
        case_sensitive: bool,
        case_preserving: bool,
        max_file_name_length: int,
        max_path_length: int,
        illegal_chars: tuple[str, ...],
        reserved_names: tuple[str, ...],
        supports_drive_letter: bool,
    ) -> None:
        self.case_sensitive = case_sensitive
        self.case_preserving = case_preserving
        self.max_file_name_length = max_file_name_length
        self.max_path_length = max_path_length
        self.illegal_chars = illegal_chars
        self.reserved_names = reserved_names
        self.supports_drive_letter = supports_drive_letter

    @classmethod
    def get_current(cls) -> "FileSystem":
        """Return the filesystem family of the running host."""
        if sys.platform.startswith("win"):
            return cls.WINDOWS
        if sys.platform.startswith("linux"):
            return cls.LINUX
        if sys.platform == "darwin":
            return cls.MAC_OSX
        return cls.GENERIC

    def is_illegal_char(self, ch: str) -> bool:
        return ch in self.illegal_chars

    def is_reserved_file_name(self, candidate: str | None) -> bool:
        """Whether candidate is a reserved device name on this filesystem.

        The comparison ignores case and any extension, so "con.txt" is as
        reserved as "CON" on Windows.
        """
        if not candidate or not self.reserved_names:
            return False
        stem = candidate.split(".", 1)[0].upper()
        return stem in self.reserved_names

    def is_legal_file_name(self, candidate: str | None) -> bool:
        """Whether candidate can be used as a file name on this filesystem.

        Args:
            candidate: A bare file name (no separators expected).

        Returns:
            False for None, empty, over-long, reserved names, or names
            containing an illegal character.
        """
        if not candidate or len(candidate) > self.max_file_name_length:
            return False
        if self.is_reserved_file_name(candidate):
            return False
        return not any(self.is_illegal_char(ch) for ch in candidate)

    def to_legal_file_name(self, candidate: str, replacement: str) -> str:
        """Turn candidate into a legal file name.

        Illegal characters are replaced and the result is truncated to
        max_file_name_length.

        Args:
            candidate: Name to sanitize.
            replacement: Single character that replaces illegal ones.

        Returns:
            The sanitized name.

        Raises:
            ValueError: If replacement is itself illegal on this filesystem.
        """
        if self.is_illegal_char(replacement):
            shown = "\\0" if replacement == "\0" else replacement
            msg = (
                f"The replacement character '{shown}' cannot be one of the "
                f"{self.name} illegal characters: {list(self.illegal_chars)}"
            )
            raise ValueError(msg)
        truncated = candidate[: self.max_file_name_length]
        return "".join(replacement if self.is_illegal_char(ch) else ch for ch in truncated)
