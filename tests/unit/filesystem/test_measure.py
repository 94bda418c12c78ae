"""Unit tests for sizes and modification times."""

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

from filekit.filesystem.measure import (
    ONE_EB,
    ONE_GB,
    ONE_KB,
    ONE_MB,
    ONE_PB,
    ONE_TB,
    byte_count_to_display_size,
    is_file_newer,
    is_file_older,
    size_of,
    size_of_directory,
)

# a.txt + b.py + sub/c.py + sub/deep/d.txt + .hidden/e.txt + CVS/Entries
SAMPLE_TREE_SIZE = 5 + 11 + 6 + 11 + 1 + 14


class TestByteCountToDisplaySize:
    """Tests for byte_count_to_display_size."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 bytes"),
            (1, "1 bytes"),
            (1023, "1023 bytes"),
            (1024, "1 KB"),
            (1025, "1 KB"),
            (1024 * 1023, "1023 KB"),
            (ONE_MB, "1 MB"),
            (ONE_MB + 1, "1 MB"),
            (ONE_MB * 1023, "1023 MB"),
            (ONE_GB, "1 GB"),
            (ONE_GB + 1, "1 GB"),
            (ONE_GB * 2 - 1, "1 GB"),
            (ONE_GB * 2, "2 GB"),
            (ONE_TB, "1 TB"),
            (ONE_PB, "1 PB"),
            (ONE_EB, "1 EB"),
            (2**63 - 1, "7 EB"),
            (65535, "63 KB"),
            (32767, "31 KB"),
            (2**31 - 1, "1 GB"),
        ],
    )
    def test_rounds_down_to_largest_unit(self, size: int, expected: str) -> None:
        """The largest unit that fits is used and the count is floored."""
        assert byte_count_to_display_size(size) == expected

    def test_unit_constants(self) -> None:
        """Units are powers of 1024."""
        assert ONE_KB == 1024
        assert ONE_EB == 1024**6


class TestSizeOf:
    """Tests for size_of and size_of_directory."""

    def test_file(self, sample_tree: Path) -> None:
        """A file measures its byte length."""
        assert size_of(sample_tree / "a.txt") == 5

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file is zero bytes."""
        (tmp_path / "empty").touch()

        assert size_of(tmp_path / "empty") == 0

    def test_directory(self, sample_tree: Path) -> None:
        """A directory measures the files below it."""
        assert size_of(sample_tree) == SAMPLE_TREE_SIZE
        assert size_of_directory(sample_tree) == SAMPLE_TREE_SIZE
        assert size_of_directory(sample_tree / "sub") == 6 + 11

    def test_empty_directory(self, tmp_path: Path) -> None:
        """An empty directory is zero bytes."""
        assert size_of_directory(tmp_path) == 0

    def test_missing_path(self, tmp_path: Path) -> None:
        """Missing paths are rejected."""
        with pytest.raises(ValueError, match="does not exist"):
            size_of(tmp_path / "gone")
        with pytest.raises(ValueError, match="does not exist"):
            size_of_directory(tmp_path / "gone")

    def test_file_is_not_a_directory(self, sample_tree: Path) -> None:
        """size_of_directory refuses files."""
        with pytest.raises(ValueError, match="is not a directory"):
            size_of_directory(sample_tree / "a.txt")

    def test_none_rejected(self) -> None:
        """None is a TypeError."""
        with pytest.raises(TypeError):
            size_of(None)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            size_of_directory(None)  # type: ignore[arg-type]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_links_not_counted(self, sample_tree: Path) -> None:
        """Links, including a cycle back to the root, add nothing."""
        (sample_tree / "loop").symlink_to(sample_tree, target_is_directory=True)
        (sample_tree / "alias.txt").symlink_to(sample_tree / "a.txt")

        assert size_of_directory(sample_tree) == SAMPLE_TREE_SIZE


class TestFileAge:
    """Tests for is_file_newer and is_file_older."""

    @pytest.fixture
    def aged(self, tmp_path: Path) -> dict[str, Path]:
        paths = {name: tmp_path / f"{name}.txt" for name in ("old", "reference", "new")}
        for stamp, path in zip((1_000_000, 2_000_000, 3_000_000), paths.values(), strict=True):
            path.write_text(path.stem)
            os.utime(path, (stamp, stamp))
        return paths

    def test_against_reference_file(self, aged: dict[str, Path]) -> None:
        """Modification times are compared with the reference file's."""
        reference = aged["reference"]

        assert is_file_newer(aged["new"], reference)
        assert not is_file_newer(aged["old"], reference)
        assert is_file_older(aged["old"], reference)
        assert not is_file_older(aged["new"], reference)
        assert not is_file_newer(reference, reference)
        assert not is_file_older(reference, reference)

    def test_against_timestamp(self, aged: dict[str, Path]) -> None:
        """A POSIX timestamp works as the reference."""
        assert is_file_newer(aged["new"], 2_500_000)
        assert is_file_older(aged["old"], 1_500_000.5)
        assert not is_file_newer(aged["old"], 1_500_000)

    def test_against_datetime(self, aged: dict[str, Path]) -> None:
        """A timezone-aware datetime works as the reference."""
        moment = datetime.fromtimestamp(2_000_000, tz=timezone.utc)

        assert is_file_newer(aged["new"], moment)
        assert is_file_older(aged["old"], moment)

    def test_missing_file_is_neither(self, aged: dict[str, Path], tmp_path: Path) -> None:
        """A missing file is neither newer nor older."""
        gone = tmp_path / "gone.txt"

        assert not is_file_newer(gone, aged["reference"])
        assert not is_file_older(gone, aged["reference"])

    def test_missing_reference_rejected(self, aged: dict[str, Path], tmp_path: Path) -> None:
        """A reference file must exist."""
        with pytest.raises(ValueError, match="doesn't exist"):
            is_file_newer(aged["new"], tmp_path / "gone.txt")
        with pytest.raises(ValueError, match="doesn't exist"):
            is_file_older(aged["new"], tmp_path / "gone.txt")

    def test_none_rejected(self, aged: dict[str, Path]) -> None:
        """None arguments are a TypeError."""
        with pytest.raises(TypeError):
            is_file_newer(None, aged["reference"])  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            is_file_older(aged["new"], None)  # type: ignore[arg-type]
