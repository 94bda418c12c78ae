"""Unit tests for wildcard matching."""

import os

import pytest

from filekit.core.iocase import IOCase
from filekit.names.wildcard import split_on_tokens, wildcard_match, wildcard_match_on_system

WINDOWS_HOST = os.name == "nt"


class TestSplitOnTokens:
    """Tests for split_on_tokens."""

    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("Ad*er", ["Ad", "*", "er"]),
            ("Ad?er", ["Ad", "?", "er"]),
            ("Test*?One", ["Test", "*", "?", "One"]),
            ("Test?*One", ["Test", "?", "*", "One"]),
            ("****", ["*"]),
            ("*??*", ["*", "?", "?", "*"]),
            ("*?**?*", ["*", "?", "*", "?", "*"]),
            ("*?***?*", ["*", "?", "*", "?", "*"]),
            ("h??*", ["h", "?", "?", "*"]),
            ("", [""]),
            ("plain", ["plain"]),
        ],
    )
    def test_tokens(self, pattern: str, expected: list[str]) -> None:
        """Literal runs and wildcards become separate tokens."""
        assert split_on_tokens(pattern) == expected


class TestWildcardMatch:
    """Tests for wildcard_match."""

    def test_none_handling(self) -> None:
        """Two Nones match, a single None never does."""
        assert wildcard_match(None, None)
        assert not wildcard_match(None, "Foo")
        assert not wildcard_match("Foo", None)

    @pytest.mark.parametrize(
        ("name", "pattern", "expected"),
        [
            ("Foo", "Foo", True),
            ("", "", True),
            ("", "*", True),
            ("", "?", False),
            ("Foo", "Fo*", True),
            ("Foo", "Fo?", True),
            ("Foo Bar and Catflap", "Fo*", True),
            ("New Bookmarks", "N?w ?o?k??r?s", True),
            ("Foo", "Bar", False),
            ("Foo Bar Foo", "F*o Bar*", True),
            ("Adobe Acrobat Installer", "Ad*er", True),
            ("Foo", "*Foo", True),
            ("BarFoo", "*Foo", True),
            ("FooBar", "Foo*", True),
            ("FOO", "*Foo", False),
            ("FOOBAR", "Foo*", False),
        ],
    )
    def test_basic_patterns(self, name: str, pattern: str, expected: bool) -> None:
        """Matching is case sensitive by default."""
        assert wildcard_match(name, pattern) is expected

    @pytest.mark.parametrize(
        ("name", "pattern", "expected"),
        [
            ("log.txt", "log.txt", True),
            ("log.txt1", "log.txt", False),
            ("log.txt", "log.txt*", True),
            ("log.txt", "log.txt*1", False),
            ("log.txt", "*log.txt*", True),
            ("log.txt", "*.txt", True),
            ("txt.log", "*.txt", False),
            ("config.txt.bak", "con*.txt", False),
            ("log.txt9", "*.txt?", True),
            ("log.txt", "*.txt?", False),
            ("progtestcase.java~5~", "*test*.java~*~", True),
            ("progtestcase.java;5~", "*test*.java~*~", False),
            ("progtestcase.java~5", "*test*.java~*~", False),
            ("log.txt", "log?*", True),
            ("log.txt12", "log.txt??", True),
            ("log.log", "log**log", True),
            ("log.log", "**.log", True),
            ("log.log", "*log?", False),
            ("log.log", "*log?*", True),
            ("log.log.abc", "*log?abc", True),
            ("log.log.abc.log.abc", "*log?abc", True),
            ("log.log.abc.log.abc.d", "*log?abc?d", True),
        ],
    )
    def test_backtracking(self, name: str, pattern: str, expected: bool) -> None:
        """Stars backtrack over repeated literal text."""
        assert wildcard_match(name, pattern) is expected

    @pytest.mark.parametrize(
        ("name", "pattern", "expected"),
        [
            ("aaa", "aa*?", True),
            ("", "?*", False),
            ("a", "a?*", False),
            ("aa", "aa?*", False),
            ("a", "?*", True),
            ("aa", "?*", True),
            ("aaa", "?*", True),
        ],
    )
    def test_star_next_to_question_mark(self, name: str, pattern: str, expected: bool) -> None:
        """'?*' needs at least one character."""
        assert wildcard_match(name, pattern) is expected

    def test_case_policies(self) -> None:
        """INSENSITIVE folds case, SYSTEM follows the host, None is sensitive."""
        assert wildcard_match("FOO", "*Foo", IOCase.INSENSITIVE)
        assert wildcard_match("FOOBAR", "Foo*", IOCase.INSENSITIVE)
        assert not wildcard_match("FOO", "*Foo", IOCase.SENSITIVE)
        assert not wildcard_match("FOO", "*Foo", None)
        assert wildcard_match("BARFOO", "*Foo", IOCase.SYSTEM) is WINDOWS_HOST

    def test_on_system(self) -> None:
        """wildcard_match_on_system uses the host case policy."""
        assert wildcard_match_on_system(None, None)
        assert wildcard_match_on_system("Foo", "Fo*")
        assert wildcard_match_on_system("FOO", "Foo*") is WINDOWS_HOST
