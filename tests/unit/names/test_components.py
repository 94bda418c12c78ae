"""Unit tests for file name component helpers."""

import os
from unittest.mock import patch

import pytest

from filekit.core.iocase import IOCase
from filekit.core.platform import FileSystem
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

WINDOWS_HOST = os.name == "nt"


class TestIndexes:
    """Tests for separator and extension indexes."""

    def test_index_of_last_separator(self) -> None:
        """Both separator styles are found."""
        assert index_of_last_separator(None) == -1
        assert index_of_last_separator("noseparator.inthispath") == -1
        assert index_of_last_separator("a/b/c") == 3
        assert index_of_last_separator("a\\b\\c") == 3

    def test_index_of_extension(self) -> None:
        """Dots in directory names do not count."""
        assert index_of_extension(None) == -1
        assert index_of_extension("file.txt") == 4
        assert index_of_extension("a.txt/b.txt/c.txt") == 13
        assert index_of_extension("a.txt/b") == -1
        assert index_of_extension("a\\b\\c") == -1

    def test_ads_separator_rejected_on_windows(self) -> None:
        """A colon in the name part is an alternate data stream on NTFS."""
        with patch.object(FileSystem, "get_current", return_value=FileSystem.WINDOWS):
            with pytest.raises(ValueError, match="NTFS ADS separator"):
                get_extension("foo.exe:bar.txt")

    def test_ads_separator_allowed_elsewhere(self) -> None:
        """Other filesystems treat the colon as an ordinary character."""
        with patch.object(FileSystem, "get_current", return_value=FileSystem.LINUX):
            assert get_extension("foo.exe:bar.txt") == "txt"


class TestNameParts:
    """Tests for get_name, get_base_name, get_extension and remove_extension."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("noseparator.inthispath", "noseparator.inthispath"),
            ("a/b/c.txt", "c.txt"),
            ("a/b/c", "c"),
            ("a/b/c/", ""),
            ("a\\b\\c", "c"),
        ],
    )
    def test_get_name(self, name: str, expected: str) -> None:
        """get_name returns the text after the last separator."""
        assert get_name(name) == expected

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("noseparator.inthispath", "noseparator"),
            ("a/b/c.txt", "c"),
            ("a/b/c", "c"),
            ("a/b/c/", ""),
            ("a\\b\\c", "c"),
            ("file.txt.bak", "file.txt"),
        ],
    )
    def test_get_base_name(self, name: str, expected: str) -> None:
        """get_base_name drops path and the last extension."""
        assert get_base_name(name) == expected

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("file.ext", "ext"),
            ("README", ""),
            ("domain.dot.com", "com"),
            ("image.jpeg", "jpeg"),
            ("a.b/c", ""),
            ("a.b/c.txt", "txt"),
            ("a/b/c", ""),
            ("a.b\\c", ""),
            ("a.b\\c.txt", "txt"),
            ("C:\\temp\\foo.bar\\README", ""),
            ("../filename.ext", "ext"),
        ],
    )
    def test_get_extension(self, name: str, expected: str) -> None:
        """get_extension returns the text after the last dot of the name."""
        assert get_extension(name) == expected

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("file.ext", "file"),
            ("README", "README"),
            ("domain.dot.com", "domain.dot"),
            ("a.b/c", "a.b/c"),
            ("a.b/c.txt", "a.b/c"),
            ("a.b\\c.txt", "a.b\\c"),
            ("C:\\temp\\foo.bar\\README", "C:\\temp\\foo.bar\\README"),
            ("../filename.ext", "../filename"),
        ],
    )
    def test_remove_extension(self, name: str, expected: str) -> None:
        """remove_extension strips the extension and its dot."""
        assert remove_extension(name) == expected

    def test_none_passes_through(self) -> None:
        """All name helpers return None for None."""
        assert get_name(None) is None
        assert get_base_name(None) is None
        assert get_extension(None) is None
        assert remove_extension(None) is None

    def test_null_character_raises(self) -> None:
        """Names with NUL characters are rejected."""
        with pytest.raises(ValueError):
            get_name("a\\b\\\0c")
        with pytest.raises(ValueError):
            get_base_name("fil\0e.txt.bak")


class TestIsExtension:
    """Tests for is_extension."""

    def test_none_name(self) -> None:
        """None never has an extension."""
        assert not is_extension(None, "txt")
        assert not is_extension(None, None)

    @pytest.mark.parametrize("name", ["file.txt", "a/b/file.txt", "a.b/file.txt", "a\\b\\file.txt"])
    def test_single_extension(self, name: str) -> None:
        """A single string matches exactly the extension."""
        assert is_extension(name, "txt")
        assert not is_extension(name, "rtf")
        assert not is_extension(name, "")
        assert not is_extension(name, None)

    def test_no_extension_expected(self) -> None:
        """None or empty asks whether the name has no extension."""
        assert is_extension("file", None)
        assert is_extension("file", "")
        assert is_extension("file", [])

    def test_several_extensions(self) -> None:
        """Any member of the collection may match; None entries are skipped."""
        assert is_extension("file.txt", ["rtf", "txt"])
        assert is_extension("file.txt", {"txt"})
        assert not is_extension("file.txt", ["rtf", None])
        assert not is_extension("file.txt", ["TXT"])


class TestPaths:
    """Tests for get_path and get_full_path variants."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("noseparator.inthispath", ""),
            ("/noseparator.inthispath", ""),
            ("\\noseparator.inthispath", ""),
            ("a/b/c.txt", "a/b/"),
            ("a/b/c", "a/b/"),
            ("a/b/c/", "a/b/c/"),
            ("a\\b\\c", "a\\b\\"),
            ("", ""),
            ("C:/", ""),
            ("//server/", ""),
            ("~", ""),
            ("~/", ""),
            ("~user", ""),
            ("~user/", ""),
            ("/a/b/c.txt", "a/b/"),
            ("C:a", ""),
            ("C:a/b/c.txt", "a/b/"),
            ("C:/a/b/c.txt", "a/b/"),
            ("//server/a/b/c.txt", "a/b/"),
            ("~/a/b/c.txt", "a/b/"),
            ("~user/a/b/c.txt", "a/b/"),
        ],
    )
    def test_get_path(self, name: str, expected: str) -> None:
        """get_path drops the prefix and the name, keeping the end separator."""
        assert get_path(name) == expected

    @pytest.mark.parametrize(
        "name", [None, ":", "1:/a/b/c.txt", "1:", "1:a", "///a/b/c.txt", "//a"]
    )
    def test_get_path_invalid(self, name: str | None) -> None:
        """Invalid prefixes give None."""
        assert get_path(name) is None
        assert get_full_path(name) is None

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("noseparator.inthispath", ""),
            ("/noseparator.inthispath", ""),
            ("a/b/c.txt", "a/b"),
            ("a/b/c/", "a/b/c"),
            ("a\\b\\c", "a\\b"),
            ("~user/a/b/c.txt", "a/b"),
        ],
    )
    def test_get_path_no_end_separator(self, name: str, expected: str) -> None:
        """The end separator is dropped."""
        assert get_path_no_end_separator(name) == expected

    def test_get_path_null_character(self) -> None:
        """A NUL inside the path part is rejected."""
        with pytest.raises(ValueError):
            get_path("~user/a/\0b/c.txt")

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("noseparator.inthispath", ""),
            ("a/b/c.txt", "a/b/"),
            ("a/b/c", "a/b/"),
            ("a/b/c/", "a/b/c/"),
            ("a\\b\\c", "a\\b\\"),
            ("", ""),
            ("C:/", "C:/"),
            ("//server/", "//server/"),
            ("~", "~/"),
            ("~/", "~/"),
            ("~user", "~user/"),
            ("~user/", "~user/"),
            ("/a/b/c.txt", "/a/b/"),
            ("C:a", "C:"),
            ("C:a/b/c.txt", "C:a/b/"),
            ("C:/a/b/c.txt", "C:/a/b/"),
            ("//server/a/b/c.txt", "//server/a/b/"),
            ("~/a/b/c.txt", "~/a/b/"),
            ("~user/a/b/c.txt", "~user/a/b/"),
        ],
    )
    def test_get_full_path(self, name: str, expected: str) -> None:
        """get_full_path keeps the prefix and the end separator."""
        assert get_full_path(name) == expected

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("a/b/c.txt", "a/b"),
            ("a/b/c/", "a/b/c"),
            ("/", "/"),
            ("/a", "/"),
            ("C:/", "C:/"),
            ("~", "~"),
            ("~user/", "~user/"),
            ("/a/b/c.txt", "/a/b"),
            ("C:/a/b/c.txt", "C:/a/b"),
            ("//server/a/b/c.txt", "//server/a/b"),
        ],
    )
    def test_get_full_path_no_end_separator(self, name: str, expected: str) -> None:
        """The end separator is dropped unless it is the whole path."""
        assert get_full_path_no_end_separator(name) == expected

    def test_bare_drive_full_path(self) -> None:
        """A bare drive is kept only where drive letters exist."""
        with patch.object(FileSystem, "get_current", return_value=FileSystem.WINDOWS):
            assert get_full_path("C:") == "C:"
        with patch.object(FileSystem, "get_current", return_value=FileSystem.LINUX):
            assert get_full_path("C:") == ""


class TestEquals:
    """Tests for the equals family."""

    def test_plain_equals(self) -> None:
        """Plain equals is exact and case sensitive."""
        assert equals(None, None)
        assert not equals(None, "")
        assert not equals("", None)
        assert equals("", "")
        assert equals("file.txt", "file.txt")
        assert not equals("file.txt", "FILE.TXT")
        assert not equals("a\\b\\file.txt", "a/b/file.txt")

    def test_case_policies(self) -> None:
        """The case argument controls case folding; None means sensitive."""
        assert not equals("file.txt", "FILE.TXT", True, IOCase.SENSITIVE)
        assert equals("file.txt", "FILE.TXT", True, IOCase.INSENSITIVE)
        assert equals("file.txt", "FILE.TXT", True, IOCase.SYSTEM) is WINDOWS_HOST
        assert not equals("file.txt", "FILE.TXT", True, None)

    def test_equals_on_system(self) -> None:
        """equals_on_system follows the host case policy."""
        assert equals_on_system(None, None)
        assert equals_on_system("file.txt", "file.txt")
        assert equals_on_system("file.txt", "FILE.TXT") is WINDOWS_HOST

    def test_equals_normalized(self) -> None:
        """Normalized comparison ignores dot segments and separator style."""
        assert equals_normalized("a/b/./c", "a/b/c")
        assert equals_normalized("a\\b\\file.txt", "a/b/file.txt")
        assert equals_normalized("a/b/../c", "a/c")
        assert not equals_normalized("file.txt", "FILE.TXT")

    def test_invalid_normalization_is_never_equal(self) -> None:
        """A name that cannot be normalized equals nothing, not even itself."""
        assert not equals_normalized("../a", "../a")
        assert not equals_normalized("a", "../a")

    def test_equals_normalized_on_system(self) -> None:
        """Normalizes then applies the host case policy."""
        assert equals_normalized_on_system("a/./B.txt", "a/b.txt") is WINDOWS_HOST
        assert equals_normalized_on_system("a/./b.txt", "a/b.txt")


class TestDirectoryContains:
    """Tests for the string-level directory_contains."""

    def test_child_below_parent(self) -> None:
        """A path under the parent is contained."""
        assert directory_contains("/a/b", "/a/b/c")
        assert directory_contains("/a/b/", "/a/b/c/d.txt")
        assert directory_contains("C:\\a", "C:\\a\\b")

    def test_not_contained(self) -> None:
        """Siblings, prefixes of names, and the parent itself are excluded."""
        assert not directory_contains("/a/b", "/a/bc")
        assert not directory_contains("/a/b", "/a/b")
        assert not directory_contains("/a/b", "/a")
        assert not directory_contains("/a/b", None)
        assert not directory_contains("", "/a")

    def test_none_parent_raises(self) -> None:
        """The parent is required."""
        with pytest.raises(TypeError):
            directory_contains(None, "/a")
