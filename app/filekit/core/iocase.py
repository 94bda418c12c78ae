"""Case-sensitivity policy for file name comparisons.

Different filesystems treat letter case differently. IOCase captures the
three policies filekit needs (always sensitive, always insensitive, follow
the host) and offers the small set of string checks the name and wildcard
helpers are built on.
"""

import os
from enum import Enum


def _fold(ch: str) -> str:
    """Fold a single character for case-insensitive comparison.

    Upper-cases then lower-cases the character, keeping the original when
    a case mapping would expand to several characters (e.g. German sharp s).
    """
    upper = ch.upper()
    if len(upper) != 1:
        upper = ch
    lower = upper.lower()
    if len(lower) != 1:
        return upper
    return lower


def _require(value: str | None, name: str) -> str:
    if value is None:
        msg = f"{name} must not be None"
        raise TypeError(msg)
    return value


class IOCase(str, Enum):
    """Case-sensitivity policy.

    Attributes:
        SENSITIVE: Case matters regardless of the host.
        INSENSITIVE: Case is ignored regardless of the host.
        SYSTEM: Follows the host filesystem; insensitive on Windows only.
    """

    SENSITIVE = "Sensitive"
    INSENSITIVE = "Insensitive"
    SYSTEM = "System"

    @classmethod
    def for_name(cls, name: str | None) -> "IOCase":
        """Look up a policy by its display name.

        Args:
            name: One of "Sensitive", "Insensitive" or "System".

        Returns:
            The matching IOCase member.

        Raises:
            ValueError: If the name is None or unknown.
        """
        for case in cls:
            if case.value == name:
                return case
        msg = f"Invalid IOCase name: {name}"
        raise ValueError(msg)

    @classmethod
    def value_of(cls, case: "IOCase | None", default: "IOCase") -> "IOCase":
        """Return case, or default when case is None."""
        return case if case is not None else default

    @property
    def is_case_sensitive(self) -> bool:
        """Whether this policy distinguishes letter case on this host."""
        if self is IOCase.SYSTEM:
            return os.name != "nt"
        return self is IOCase.SENSITIVE

    def __str__(self) -> str:
        return self.value

    # =========================================================================
    # String checks
    # =========================================================================

    def check_compare_to(self, str1: str | None, str2: str | None) -> int:
        """Compare two strings under this policy.

        Returns:
            -1, 0 or 1 as str1 sorts before, equal to, or after str2.

        Raises:
            TypeError: If either string is None.
        """
        a = _require(str1, "str1")
        b = _require(str2, "str2")
        if not self.is_case_sensitive:
            a = "".join(_fold(c) for c in a)
            b = "".join(_fold(c) for c in b)
        return (a > b) - (a < b)

    def check_equals(self, str1: str | None, str2: str | None) -> bool:
        """Whether two strings are equal under this policy.

        Raises:
            TypeError: If either string is None.
        """
        a = _require(str1, "str1")
        b = _require(str2, "str2")
        return len(a) == len(b) and self.check_region_matches(a, 0, b)

    def check_starts_with(self, text: str | None, start: str | None) -> bool:
        """Whether text starts with start; False if either is None."""
        if text is None or start is None:
            return False
        return self.check_region_matches(text, 0, start)

    def check_ends_with(self, text: str | None, end: str | None) -> bool:
        """Whether text ends with end; False if either is None."""
        if text is None or end is None:
            return False
        return self.check_region_matches(text, len(text) - len(end), end)

    def check_index_of(self, text: str | None, start_index: int, search: str | None) -> int:
        """Find search in text at or after start_index.

        Returns:
            The first matching index, or -1 if there is none.

        Raises:
            TypeError: If text or search is None.
        """
        haystack = _require(text, "text")
        needle = _require(search, "search")
        end_index = len(haystack) - len(needle)
        if end_index >= start_index:
            for i in range(max(start_index, 0), end_index + 1):
                if self.check_region_matches(haystack, i, needle):
                    return i
        return -1

    def check_region_matches(self, text: str | None, start: int, search: str | None) -> bool:
        """Whether search occurs in text exactly at index start.

        Raises:
            TypeError: If text or search is None.
        """
        haystack = _require(text, "text")
        needle = _require(search, "search")
        if start < 0 or start > len(haystack) - len(needle):
            return False
        region = haystack[start : start + len(needle)]
        if self.is_case_sensitive:
            return region == needle
        return all(
            a == b or a.upper() == b.upper() or a.lower() == b.lower()
            for a, b in zip(region, needle, strict=True)
        )
