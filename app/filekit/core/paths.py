"""Where filekit keeps its files.

Locations follow the XDG Base Directory layout:

- config: ``$XDG_CONFIG_HOME/filekit`` (default ``~/.config/filekit``)
- state: ``$XDG_STATE_HOME/filekit`` (default ``~/.local/state/filekit``)
"""

import os
from pathlib import Path

APP_NAME = "filekit"

CONFIG_FILE_NAME = "config.toml"
LAST_WALK_FILE_NAME = "last-walk.json"


def _xdg_base(env_var: str, fallback: str) -> Path:
    # An empty variable counts as unset.
    value = os.environ.get(env_var, "")
    return Path(value) if value else Path.home() / fallback


def get_config_dir() -> Path:
    """Return the directory holding config.toml and theme.toml."""
    return _xdg_base("XDG_CONFIG_HOME", ".config") / APP_NAME


def get_state_dir() -> Path:
    """Return the directory for data kept between runs, such as the last walk."""
    return _xdg_base("XDG_STATE_HOME", ".local/state") / APP_NAME


def get_config_path() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


def get_last_walk_path() -> Path:
    return get_state_dir() / LAST_WALK_FILE_NAME


def ensure_state_dir() -> Path:
    """Create the state directory and its parents when missing.

    Returns:
        The state directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    state_dir = get_state_dir()
    try:
        state_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        reason = "Permission denied" if isinstance(e, PermissionError) else str(e)
        msg = f"Cannot create state directory {state_dir}: {reason}"
        raise RuntimeError(msg) from e
    return state_dir
