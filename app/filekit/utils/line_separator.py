"""Standard line separators."""

import os
from enum import Enum


class StandardLineSeparator(Enum):
    """The three line endings in common use.

    Attributes:
        CR: Classic Mac OS.
        CRLF: Windows and most network protocols.
        LF: Unix, Linux and macOS.
    """

    CR = "\r"
    CRLF = "\r\n"
    LF = "\n"

    def get_string(self) -> str:
        return self.value

    def get_bytes(self, encoding: str = "utf-8") -> bytes:
        """Encode the separator.

        Raises:
            TypeError: If encoding is None.
        """
        if encoding is None:
            msg = "encoding must not be None"
            raise TypeError(msg)
        return self.value.encode(encoding)

    @classmethod
    def system(cls) -> "StandardLineSeparator":
        """Return the host's separator."""
        return cls(os.linesep)
