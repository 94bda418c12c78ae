"""Splitting file names into their components.

A full name breaks down as::

    C:\\dev\\project\\file.txt
    [prefix][  path  ][name]
                      [base].[extension]

get_path() excludes the prefix, get_full_path() includes it. All helpers
accept either separator style regardless of the host and never touch the
filesystem.
"""

from collections.abc import Iterable

from filekit.core.iocase import IOCase
from filekit.core.platform import FileSystem
from filekit.names.normalize import normalize
from filekit.names.prefix import (
    EXTENSION_SEPARATOR,
    UNIX_SEPARATOR,
    WINDOWS_SEPARATOR,
    get_prefix,
    get_prefix_length,
    require_non_null_chars,
)


def index_of_last_separator(name: str | None) -> int:
    """Return the index of the last separator of either style, or -1."""
    if name is None:
        return -1
    return max(name.rfind(UNIX_SEPARATOR), name.rfind(WINDOWS_SEPARATOR))


def _ads_critical_offset(name: str) -> int:
    offset = index_of_last_separator(name)
    return 0 if offset == -1 else offset + 1


def index_of_extension(name: str | None) -> int:
    """Return the index of the dot that starts the extension, or -1.

    A dot inside a directory segment does not count.

    Raises:
        ValueError: On Windows, if the name part holds an NTFS alternate
            data stream separator (``:``).
    """
    if name is None:
        return -1
    if FileSystem.get_current() is FileSystem.WINDOWS:
        if name.find(":", _ads_critical_offset(name)) != -1:
            msg = "NTFS ADS separator (':') in file name is forbidden."
            raise ValueError(msg)
    extension_pos = name.rfind(EXTENSION_SEPARATOR)
    if index_of_last_separator(name) > extension_pos:
        return -1
    return extension_pos


def get_name(name: str | None) -> str | None:
    """Return the name after the last separator: ``a/b/c.txt`` -> ``c.txt``."""
    if name is None:
        return None
    require_non_null_chars(name)
    return name[index_of_last_separator(name) + 1 :]


def get_base_name(name: str | None) -> str | None:
    """Return the name without path or extension: ``a/b/c.txt`` -> ``c``."""
    return remove_extension(get_name(name))


def get_extension(name: str | None) -> str | None:
    """Return the extension without its dot, or an empty string."""
    if name is None:
        return None
    index = index_of_extension(name)
    if index == -1:
        return ""
    return name[index + 1 :]


def remove_extension(name: str | None) -> str | None:
    """Strip the extension (and its dot) from name."""
    if name is None:
        return None
    require_non_null_chars(name)
    index = index_of_extension(name)
    if index == -1:
        return name
    return name[:index]


def is_extension(name: str | None, extensions: str | Iterable[str | None] | None = None) -> bool:
    """Check the extension of name.

    Args:
        name: File name to check.
        extensions: A single extension, several of them, or None/empty to
            check that name has no extension at all. None entries never match.

    Returns:
        True if the extension of name is one of extensions.
    """
    if name is None:
        return False
    require_non_null_chars(name)
    if isinstance(extensions, str):
        extensions = [extensions] if extensions else []
    wanted = list(extensions or [])
    if not wanted:
        return index_of_extension(name) == -1
    return get_extension(name) in [ext for ext in wanted if ext is not None]


# =============================================================================
# Paths
# =============================================================================


def _do_get_path(name: str | None, separator_add: int) -> str | None:
    if name is None:
        return None
    prefix = get_prefix_length(name)
    if prefix < 0:
        return None
    index = index_of_last_separator(name)
    end_index = index + separator_add
    if prefix >= len(name) or index < 0 or prefix >= end_index:
        return ""
    return require_non_null_chars(name[prefix:end_index])


def get_path(name: str | None) -> str | None:
    """Return the path without prefix, keeping the end separator.

    ``C:\\a\\b\\c.txt`` -> ``a\\b\\``, ``~/a/b/c.txt`` -> ``a/b/``.
    """
    return _do_get_path(name, 1)


def get_path_no_end_separator(name: str | None) -> str | None:
    """Return the path without prefix or end separator."""
    return _do_get_path(name, 0)


def _do_get_full_path(name: str | None, include_separator: bool) -> str | None:
    if name is None:
        return None
    prefix = get_prefix_length(name)
    if prefix < 0:
        return None
    if prefix >= len(name):
        if include_separator:
            return get_prefix(name)
        return name
    index = index_of_last_separator(name)
    if index < 0:
        return name[:prefix]
    end = index + (1 if include_separator else 0)
    if end == 0:
        end += 1
    return name[:end]


def get_full_path(name: str | None) -> str | None:
    """Return the prefix plus path, keeping the end separator."""
    return _do_get_full_path(name, True)


def get_full_path_no_end_separator(name: str | None) -> str | None:
    """Return the prefix plus path without the end separator."""
    return _do_get_full_path(name, False)


# =============================================================================
# Comparison
# =============================================================================


def equals(
    name1: str | None,
    name2: str | None,
    normalized: bool = False,
    case: IOCase | None = IOCase.SENSITIVE,
) -> bool:
    """Compare two names, optionally normalizing them first.

    Args:
        name1: First name.
        name2: Second name.
        normalized: Normalize both names before comparing.
        case: Case policy; None means sensitive.

    Returns:
        True if both are None, or both are equal under the given rules.
        A name that fails to normalize never equals anything.
    """
    if name1 is None or name2 is None:
        return name1 is None and name2 is None
    if normalized:
        name1 = normalize(name1)
        if name1 is None:
            return False
        name2 = normalize(name2)
        if name2 is None:
            return False
    return IOCase.value_of(case, IOCase.SENSITIVE).check_equals(name1, name2)


def equals_on_system(name1: str | None, name2: str | None) -> bool:
    return equals(name1, name2, False, IOCase.SYSTEM)


def equals_normalized(name1: str | None, name2: str | None) -> bool:
    return equals(name1, name2, True, IOCase.SENSITIVE)


def equals_normalized_on_system(name1: str | None, name2: str | None) -> bool:
    return equals(name1, name2, True, IOCase.SYSTEM)


def directory_contains(canonical_parent: str | None, canonical_child: str | None) -> bool:
    """Whether canonical_child lies strictly below canonical_parent.

    Both arguments are expected to be canonical path strings; no
    normalization happens here. A path does not contain itself.

    Raises:
        TypeError: If canonical_parent is None.
    """
    if canonical_parent is None:
        msg = "canonical_parent must not be None"
        raise TypeError(msg)
    if not canonical_parent or canonical_child is None:
        return False
    if IOCase.SYSTEM.check_equals(canonical_parent, canonical_child):
        return False
    separator = UNIX_SEPARATOR if canonical_parent[0] == UNIX_SEPARATOR else WINDOWS_SEPARATOR
    parent = canonical_parent
    if parent[-1] != separator:
        parent += separator
    return IOCase.SYSTEM.check_starts_with(canonical_child, parent)
