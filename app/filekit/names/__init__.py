"""File name and path string helpers.

This package works purely on strings: prefix detection, normalization,
component extraction, comparison, and wildcard matching. None of it
touches the filesystem.
"""

from filekit.names.components import (
    directory_contains,
    equals,
    equals_normalized,
    equals_normalized_on_system,
    equals_on_system,
    get_base_name,
    get_extension,
    get_full_path,
    get_full_path_no_end_separator,
    get_name,
    get_path,
    get_path_no_end_separator,
    index_of_extension,
    index_of_last_separator,
    is_extension,
    remove_extension,
)
from filekit.names.normalize import (
    concat,
    normalize,
    normalize_no_end_separator,
    separators_to_system,
    separators_to_unix,
    separators_to_windows,
)
from filekit.names.prefix import get_prefix, get_prefix_length
from filekit.names.wildcard import split_on_tokens, wildcard_match, wildcard_match_on_system

__all__ = [
    "concat",
    "directory_contains",
    "equals",
    "equals_normalized",
    "equals_normalized_on_system",
    "equals_on_system",
    "get_base_name",
    "get_extension",
    "get_full_path",
    "get_full_path_no_end_separator",
    "get_name",
    "get_path",
    "get_path_no_end_separator",
    "get_prefix",
    "get_prefix_length",
    "index_of_extension",
    "index_of_last_separator",
    "is_extension",
    "normalize",
    "normalize_no_end_separator",
    "remove_extension",
    "separators_to_system",
    "separators_to_unix",
    "separators_to_windows",
    "split_on_tokens",
    "wildcard_match",
    "wildcard_match_on_system",
]
