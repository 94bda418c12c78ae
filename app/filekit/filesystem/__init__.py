"""Filesystem walking, listing, measuring and deletion module.

This module provides the filtered depth-first DirectoryWalker, the
filter and comparator toolkits it is driven with, the listings, size and
content comparisons built on top of it, and the deletion strategies.
"""

from filekit.filesystem.content import (
    content_equals,
    content_equals_ignore_eol,
    directory_content_equals,
    file_content_equals,
)
from filekit.filesystem.deletion import (
    DeleteStrategy,
    IOErrorList,
    clean_directory,
    delete_directory,
    delete_quietly,
    force_delete,
)
from filekit.filesystem.listing import (
    EntryCollector,
    directory_contains,
    iterate_files,
    list_files,
    list_files_and_dirs,
    list_files_by_extension,
)
from filekit.filesystem.measure import (
    byte_count_to_display_size,
    is_file_newer,
    is_file_older,
    size_of,
    size_of_directory,
)
from filekit.filesystem.models import EntryType, WalkEntry
from filekit.filesystem.walker import CancelError, DirectoryWalker

__all__ = [
    "CancelError",
    "DeleteStrategy",
    "DirectoryWalker",
    "EntryCollector",
    "EntryType",
    "IOErrorList",
    "WalkEntry",
    "byte_count_to_display_size",
    "clean_directory",
    "content_equals",
    "content_equals_ignore_eol",
    "delete_directory",
    "delete_quietly",
    "directory_content_equals",
    "directory_contains",
    "file_content_equals",
    "force_delete",
    "is_file_newer",
    "is_file_older",
    "iterate_files",
    "list_files",
    "list_files_and_dirs",
    "list_files_by_extension",
    "size_of",
    "size_of_directory",
]
