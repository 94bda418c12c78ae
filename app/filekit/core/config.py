"""Walk configuration and settings.

This module provides the configuration model and I/O functions for the
defaults the CLI applies to walks and name operations: depth limit,
hidden/VCS filtering, case policy, and separator style.

Configuration is stored in ~/.config/filekit/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from filekit.core.iocase import IOCase
from filekit.core.paths import get_config_path

logger = logging.getLogger(__name__)

CaseName = Literal["Sensitive", "Insensitive", "System"]


class WalkConfig(BaseModel):
    """Defaults for walks and name operations.

    Attributes:
        depth_limit: Maximum walk depth; -1 means unlimited.
        ignore_hidden: Skip dot-files and hidden entries.
        ignore_vcs: Skip CVS, .svn and .git directories.
        case: Case policy used for wildcard matching.
        unix_separators: Emit "/" from name commands (False emits "\\").
    """

    model_config = ConfigDict(extra="forbid")

    depth_limit: Annotated[
        int,
        Field(ge=-1, description="Maximum walk depth (-1 = unlimited)"),
    ] = -1
    ignore_hidden: Annotated[
        bool,
        Field(description="Skip hidden entries while walking"),
    ] = False
    ignore_vcs: Annotated[
        bool,
        Field(description="Skip version control directories while walking"),
    ] = True
    case: Annotated[
        CaseName,
        Field(description="Case policy for wildcard matching"),
    ] = "System"
    unix_separators: Annotated[
        bool,
        Field(description="Use forward slashes in name output"),
    ] = True

    @property
    def io_case(self) -> IOCase:
        """The configured case policy as an IOCase."""
        return IOCase.for_name(self.case)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> WalkConfig:
    """Load walk configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated WalkConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    walk_section = data.get("walk", data)
    try:
        return WalkConfig.model_validate(walk_section)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> WalkConfig:
    """Load the config, falling back to defaults when no file exists.

    Raises:
        ConfigParseError: If the file exists but is not valid TOML.
        ConfigError: If the file exists but does not validate.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file, using defaults")
        return WalkConfig()


def save_config(config: WalkConfig, path: Path | None = None) -> Path:
    """Save walk configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The WalkConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {"walk": config.model_dump()}

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
