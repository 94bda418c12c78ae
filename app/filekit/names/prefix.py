"""Path prefix recognition.

A prefix is the part of a path that segment processing must never touch:
a root separator, a drive letter, a UNC authority, or a home reference.
Everything here works on plain strings and never touches the disk.

Recognized forms:
- ``""``            no prefix, relative path
- ``/`` or ``\\``   root
- ``C:`` / ``C:\\``  drive relative / drive absolute
- ``//server/``     UNC, server validated as a host name
- ``~/`` ``~user/`` home reference (a bare ``~`` gains its separator)
"""

import os
import re

from filekit.core.platform import FileSystem

UNIX_SEPARATOR = "/"
WINDOWS_SEPARATOR = "\\"
SYSTEM_SEPARATOR = os.sep
EXTENSION_SEPARATOR = "."

_NULL_CHAR_MESSAGE = (
    "Null character present in file/path name. There are no known legitimate use "
    "cases for such data, but several injection attacks may use it"
)

_IPV4_PATTERN = re.compile(r"^(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})$")
_HEX_GROUP_PATTERN = re.compile(r"^[0-9a-fA-F]{1,4}$")
_REG_NAME_PART_PATTERN = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9-]*$")
_IPV6_MAX_HEX_GROUPS = 8


def is_separator(ch: str) -> bool:
    """Whether ch is a unix or windows name separator."""
    return ch in (UNIX_SEPARATOR, WINDOWS_SEPARATOR)


def require_non_null_chars(path: str) -> str:
    """Reject paths carrying an embedded NUL character.

    Raises:
        ValueError: If path contains ``\\0``.
    """
    if "\0" in path:
        raise ValueError(_NULL_CHAR_MESSAGE)
    return path


def get_prefix_length(name: str | None) -> int:
    """Return the length of the prefix of name.

    Both separator styles are accepted regardless of the host. A bare
    ``~`` or ``~user`` reports one more than its length, accounting for
    the separator the prefix implicitly carries.

    Args:
        name: Path to inspect.

    Returns:
        The prefix length, or -1 when name is None or has an invalid
        prefix (such as a malformed UNC authority).
    """
    if name is None:
        return -1
    size = len(name)
    if size == 0:
        return 0
    ch0 = name[0]
    if ch0 == ":":
        return -1
    if size == 1:
        if ch0 == "~":
            return 2
        return 1 if is_separator(ch0) else 0

    if ch0 == "~":
        pos_unix = name.find(UNIX_SEPARATOR, 1)
        pos_win = name.find(WINDOWS_SEPARATOR, 1)
        if pos_unix == -1 and pos_win == -1:
            return size + 1
        pos_unix = size if pos_unix == -1 else pos_unix
        pos_win = size if pos_win == -1 else pos_win
        return min(pos_unix, pos_win) + 1

    ch1 = name[1]
    if ch1 == ":":
        if ch0.isascii() and ch0.isalpha():
            if size == 2 and not FileSystem.get_current().supports_drive_letter:
                return 0
            if size == 2 or not is_separator(name[2]):
                return 2
            return 3
        if ch0 == UNIX_SEPARATOR:
            return 1
        return -1

    if not is_separator(ch0) or not is_separator(ch1):
        return 1 if is_separator(ch0) else 0

    # UNC: //server/...
    pos_unix = name.find(UNIX_SEPARATOR, 2)
    pos_win = name.find(WINDOWS_SEPARATOR, 2)
    if (pos_unix == -1 and pos_win == -1) or pos_unix == 2 or pos_win == 2:
        return -1
    pos_unix = size if pos_unix == -1 else pos_unix
    pos_win = size if pos_win == -1 else pos_win
    pos = min(pos_unix, pos_win) + 1
    hostname = name[2 : pos - 1]
    return pos if is_valid_hostname(hostname) else -1


def get_prefix(name: str | None) -> str | None:
    """Return the prefix of name, e.g. ``C:/`` or ``~/``.

    Raises:
        ValueError: If the prefix contains a NUL character.
    """
    if name is None:
        return None
    length = get_prefix_length(name)
    if length < 0:
        return None
    if length > len(name):
        return require_non_null_chars(name + UNIX_SEPARATOR)
    return require_non_null_chars(name[:length])


# =============================================================================
# Host name validation (UNC authorities)
# =============================================================================


def is_valid_hostname(name: str) -> bool:
    """Whether name is a usable UNC server: an IPv6 literal or an RFC 3986 reg-name.

    Dotted-quad IPv4 addresses are accepted through the reg-name grammar.
    """
    return is_ipv6_address(name) or is_rfc3986_host_name(name)


def is_ipv4_address(name: str) -> bool:
    """Whether name is a dotted-quad IPv4 address without leading zeros."""
    match = _IPV4_PATTERN.match(name)
    if match is None:
        return False
    for group in match.groups():
        if int(group) > 255:
            return False
        if len(group) > 1 and group.startswith("0"):
            return False
    return True


def is_ipv6_address(address: str) -> bool:
    """Whether address is a textual IPv6 address.

    Accepts zero compression (``::``) and a trailing embedded IPv4 part.
    """
    compressed = "::" in address
    if compressed and address.find("::") != address.rfind("::"):
        return False
    if (address.startswith(":") and not address.startswith("::")) or (
        address.endswith(":") and not address.endswith("::")
    ):
        return False

    groups = address.split(":")
    while groups and groups[-1] == "":
        groups.pop()
    if compressed:
        if address.endswith("::"):
            groups.append("")
        elif address.startswith("::") and groups:
            groups.pop(0)

    if len(groups) > _IPV6_MAX_HEX_GROUPS:
        return False

    valid_groups = 0
    empty_groups = 0
    for index, group in enumerate(groups):
        if not group:
            empty_groups += 1
            if empty_groups > 1:
                return False
        else:
            empty_groups = 0
            if index == len(groups) - 1 and "." in group:
                if not is_ipv4_address(group):
                    return False
                valid_groups += 2
                continue
            if not _HEX_GROUP_PATTERN.match(group):
                return False
        valid_groups += 1

    return valid_groups <= _IPV6_MAX_HEX_GROUPS and (
        valid_groups >= _IPV6_MAX_HEX_GROUPS or compressed
    )


def is_rfc3986_host_name(name: str) -> bool:
    """Whether name is a dot-separated reg-name; a single trailing dot is allowed."""
    parts = name.split(".")
    for i, part in enumerate(parts):
        if not part:
            return i == len(parts) - 1
        if not _REG_NAME_PART_PATTERN.match(part):
            return False
    return True
