"""Unit tests for the walk CLI command."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from filekit.cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(xdg_home):
    """Keep the user's real config and state out of these tests."""
    return xdg_home


def _walk_json(*args: str) -> list[dict]:
    result = runner.invoke(app, ["walk", *args, "--format", "json"])
    assert result.exit_code == 0, result.stderr
    return json.loads(result.stdout)


def _names(entries: list[dict]) -> list[str]:
    return [Path(e["path"]).name for e in entries]


class TestWalk:
    """Tests for filekit walk."""

    def test_json_skips_vcs_directories(self, sample_tree: Path) -> None:
        """The default config prunes CVS and keeps hidden entries."""
        entries = _walk_json(str(sample_tree))

        names = _names(entries)
        assert len(entries) == 9
        assert "CVS" not in names
        assert "Entries" not in names
        assert ".hidden" in names
        assert entries[0]["depth"] == 0
        assert entries[0]["entry_type"] == "directory"

    def test_depth(self, sample_tree: Path) -> None:
        """--depth bounds the walk."""
        entries = _walk_json(str(sample_tree), "--depth", "1")

        assert max(e["depth"] for e in entries) == 1
        assert set(_names(entries)) == {"root", ".hidden", "a.txt", "b.py", "sub"}

    def test_include_patterns(self, sample_tree: Path) -> None:
        """--include filters files but still descends into directories."""
        entries = _walk_json(str(sample_tree), "--include", "*.py", "--files-only")

        assert sorted(_names(entries)) == ["b.py", "c.py"]

    def test_config_hides_hidden(self, sample_tree: Path, xdg_home: Path) -> None:
        """ignore_hidden in the config prunes dot entries unless --hidden is given."""
        config_file = xdg_home / "config" / "filekit" / "config.toml"
        config_file.parent.mkdir(parents=True)
        config_file.write_text("[walk]\nignore_hidden = true\n")

        hidden = _walk_json(str(sample_tree))
        shown = _walk_json(str(sample_tree), "--hidden")

        assert ".hidden" not in _names(hidden)
        assert ".hidden" in _names(shown)

    def test_sort_by_name(self, sample_tree: Path) -> None:
        """--sort name orders the listing by file name."""
        entries = _walk_json(str(sample_tree), "--files-only", "--sort", "name")

        assert _names(entries) == ["a.txt", "b.py", "c.py", "d.txt", "e.txt"]

    def test_table_output(self, sample_tree: Path) -> None:
        """The table shows a summary line."""
        result = runner.invoke(app, ["walk", str(sample_tree)])

        assert result.exit_code == 0
        assert "9 entries" in result.stdout

    def test_limit(self, sample_tree: Path) -> None:
        """--limit stops early and says so."""
        result = runner.invoke(app, ["walk", str(sample_tree), "--limit", "3"])

        assert result.exit_code == 0
        assert "3 entries" in result.stdout
        assert "walk stopped after 3 entries" in result.stdout

    def test_save(self, sample_tree: Path, xdg_home: Path) -> None:
        """--save writes the listing to the state directory."""
        result = runner.invoke(app, ["walk", str(sample_tree), "--save"])

        saved = xdg_home / "state" / "filekit" / "last-walk.json"
        assert result.exit_code == 0
        assert saved.exists()
        assert len(json.loads(saved.read_text())) == 9

    def test_not_a_directory(self, sample_tree: Path) -> None:
        """Files are rejected."""
        result = runner.invoke(app, ["walk", str(sample_tree / "a.txt")])

        assert result.exit_code == 1
        assert "Not a directory" in result.stderr

    def test_invalid_config_falls_back(self, sample_tree: Path, xdg_home: Path) -> None:
        """A broken config produces a warning and default settings."""
        config_file = xdg_home / "config" / "filekit" / "config.toml"
        config_file.parent.mkdir(parents=True)
        config_file.write_text("not toml [")

        result = runner.invoke(app, ["walk", str(sample_tree), "--format", "json"])

        assert result.exit_code == 0
        assert "Ignoring invalid config" in result.stderr
        assert len(json.loads(result.stdout)) == 9

    def test_unreadable_subdirectory_is_skipped(self, sample_tree: Path) -> None:
        """A directory that cannot be listed is reported, not fatal."""
        original = Path.iterdir

        def iterdir(self: Path):
            if self.name == "sub":
                raise PermissionError(13, "Permission denied", str(self))
            return original(self)

        with patch.object(Path, "iterdir", iterdir):
            entries = _walk_json(str(sample_tree))

        names = _names(entries)
        assert "sub" in names
        assert "c.py" not in names
        assert "a.txt" in names

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlink_loop_listed_once(self, sample_tree: Path) -> None:
        """A link back to the start directory does not repeat the tree."""
        (sample_tree / "loop").symlink_to(sample_tree, target_is_directory=True)

        entries = _walk_json(str(sample_tree))

        names = _names(entries)
        assert names.count("loop") == 1
        assert names.count("a.txt") == 1
        assert len(entries) == 10
