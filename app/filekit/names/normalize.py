"""Path string normalization.

Collapses ``.`` and ``..`` segments and duplicate separators while keeping
the prefix intact, then reassembles the path with a single separator style.
This is pure string work; nothing here consults the filesystem, so the
result is safe to use for display, comparison, and containment checks.

Malformed input yields None rather than an exception. The one exception is
an embedded NUL character, which raises ValueError.
"""

from filekit.names.prefix import (
    SYSTEM_SEPARATOR,
    UNIX_SEPARATOR,
    WINDOWS_SEPARATOR,
    get_prefix_length,
    is_separator,
    require_non_null_chars,
)


def _separator_for(unix_separator: bool | None) -> str:
    if unix_separator is None:
        return SYSTEM_SEPARATOR
    return UNIX_SEPARATOR if unix_separator else WINDOWS_SEPARATOR


def _do_normalize(name: str | None, separator: str, keep_separator: bool) -> str | None:
    if name is None:
        return None
    require_non_null_chars(name)
    if not name:
        return name

    prefix_len = get_prefix_length(name)
    if prefix_len < 0:
        return None

    other = WINDOWS_SEPARATOR if separator == UNIX_SEPARATOR else UNIX_SEPARATOR
    unified = name.replace(other, separator)

    if prefix_len > len(unified):
        # bare home reference such as "~" or "~user"
        prefix = unified + separator
        rest = ""
    else:
        prefix = unified[:prefix_len]
        rest = unified[prefix_len:]

    segments: list[str] = []
    parts = rest.split(separator) if rest else []
    for part in parts:
        if not part or part == ".":
            continue
        if part == "..":
            if not segments:
                return None
            segments.pop()
            continue
        segments.append(part)

    if not segments:
        return prefix

    ends_as_directory = bool(rest) and (
        rest.endswith(separator) or parts[-1] in (".", "..")
    )
    result = prefix + separator.join(segments)
    if not prefix and get_prefix_length(result) != 0:
        # a leading "~x" or "x:" segment must not turn into a prefix
        result = "." + separator + result
    if ends_as_directory and keep_separator:
        result += separator
    return result


def normalize(name: str | None, unix_separator: bool | None = None) -> str | None:
    """Normalize a path, removing double and single dot segments.

    The trailing separator is kept when the input ends with one (or with a
    dot segment, which names a directory). A ``..`` that would climb above
    the prefix makes the whole path invalid.

    Examples (unix separator)::

        /foo//               -->   /foo/
        /foo/./              -->   /foo/
        /foo/../bar          -->   /bar
        /foo/../bar/         -->   /bar/
        /foo/../bar/../baz   -->   /baz
        //foo//./bar         -->   //foo/bar
        /../                 -->   None
        ../foo               -->   None
        foo/bar/..           -->   foo/
        foo/../../bar        -->   None
        foo/../bar           -->   bar
        //server/foo/../bar  -->   //server/bar
        //server/../bar      -->   None
        C:\\foo\\..\\bar     -->   C:\\bar
        C:\\..\\bar          -->   None
        ~/foo/../bar/        -->   ~/bar/
        ~/../bar             -->   None
        a/../~               -->   ./~
        .//:a                -->   ./:a

    A relative result whose first segment would read as a prefix keeps a
    leading ``./``, so normalizing the output again returns it unchanged.

    Args:
        name: Path to normalize; None passes through.
        unix_separator: True for ``/``, False for ``\\``, None for the host's.

    Returns:
        The normalized path, or None if name is None or invalid.

    Raises:
        ValueError: If name contains a NUL character.
    """
    return _do_normalize(name, _separator_for(unix_separator), True)


def normalize_no_end_separator(
    name: str | None, unix_separator: bool | None = None
) -> str | None:
    """Normalize a path and drop any trailing separator.

    A result that is nothing but a prefix (``/``, ``C:\\``, ``~/``) keeps it.
    See normalize() for the rules and return values.
    """
    return _do_normalize(name, _separator_for(unix_separator), False)


def concat(base_path: str | None, full_filename_to_add: str | None) -> str | None:
    """Join a base path and a name the way a shell would, then normalize.

    A name carrying its own prefix (absolute, drive, UNC or home) replaces
    the base path entirely.

    Args:
        base_path: Base path to start from.
        full_filename_to_add: Path to append.

    Returns:
        The normalized concatenation, or None when either side is invalid.
    """
    prefix = get_prefix_length(full_filename_to_add)
    if prefix < 0:
        return None
    if prefix > 0:
        return normalize(full_filename_to_add)
    if base_path is None:
        return None
    if not base_path:
        return normalize(full_filename_to_add)
    if is_separator(base_path[-1]):
        return normalize(base_path + full_filename_to_add)
    return normalize(base_path + UNIX_SEPARATOR + full_filename_to_add)


def separators_to_unix(path: str | None) -> str | None:
    """Convert all backslashes to forward slashes."""
    if path is None or WINDOWS_SEPARATOR not in path:
        return path
    return path.replace(WINDOWS_SEPARATOR, UNIX_SEPARATOR)


def separators_to_windows(path: str | None) -> str | None:
    """Convert all forward slashes to backslashes."""
    if path is None or UNIX_SEPARATOR not in path:
        return path
    return path.replace(UNIX_SEPARATOR, WINDOWS_SEPARATOR)


def separators_to_system(path: str | None) -> str | None:
    """Convert separators to the host's style."""
    if SYSTEM_SEPARATOR == WINDOWS_SEPARATOR:
        return separators_to_windows(path)
    return separators_to_unix(path)
