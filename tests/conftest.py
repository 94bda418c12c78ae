"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Build a small directory tree for walker and listing tests.

    Layout::

        root/
            a.txt
            b.py
            sub/
                c.py
                deep/
                    d.txt
            .hidden/
                e.txt
            CVS/
                Entries
    """
    root = tmp_path / "root"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / ".hidden").mkdir()
    (root / "CVS").mkdir()
    (root / "a.txt").write_text("alpha")
    (root / "b.py").write_text("print('b')\n")
    (root / "sub" / "c.py").write_text("c = 1\n")
    (root / "sub" / "deep" / "d.txt").write_text("delta delta")
    (root / ".hidden" / "e.txt").write_text("e")
    (root / "CVS" / "Entries").write_text("/a.txt/1.1///\n")
    return root


@pytest.fixture
def xdg_home(tmp_path: Path):
    """Point XDG config and state directories into tmp_path."""
    env = {
        "XDG_CONFIG_HOME": str(tmp_path / "config"),
        "XDG_STATE_HOME": str(tmp_path / "state"),
    }
    with patch.dict(os.environ, env):
        yield tmp_path
