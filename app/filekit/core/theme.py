"""Color theme for filekit output.

The bundled ``filekit/data/theme.toml`` supplies every color. A user file at
``$XDG_CONFIG_HOME/filekit/theme.toml`` may override any subset of them under
its ``[colors]`` table. The merged colors are turned into Rich styles, among
them the ``entry.*`` styles used to render walk listings.
"""

import functools
import logging
import re
import tomllib
from collections.abc import Iterator
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from filekit.core.paths import get_config_dir

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")

# Rich style name -> (color field, style modifier)
_STYLES: dict[str, tuple[str, str]] = {
    "text": ("text", ""),
    "muted": ("muted", ""),
    "dim": ("muted", ""),
    "header": ("header", ""),
    "bold_header": ("header", "bold"),
    "border": ("border", ""),
    "success": ("success", ""),
    "warning": ("warning", ""),
    "error": ("error", "bold"),
    "info": ("info", ""),
    "entry.directory": ("entry_directory", "bold"),
    "entry.file": ("entry_file", ""),
    "entry.link": ("entry_link", "italic"),
    "entry.missing": ("entry_missing", ""),
}


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) for the CLI."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    entry_directory: str = "#0e8ac8"
    entry_file: str = "#ffffff"
    entry_link: str = "#d44ebc"
    entry_missing: str = "#f53263"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        color = v.strip() if isinstance(v, str) else v
        if not isinstance(color, str) or not _HEX_COLOR.fullmatch(color):
            msg = f"{info.field_name}: expected #RGB or #RRGGBB, got {v!r}"
            raise ValueError(msg)
        return color


def get_user_theme_path() -> Path:
    """Return the user theme file next to config.toml."""
    return get_config_dir() / "theme.toml"


def get_bundled_theme_path() -> Path:
    return Path(str(resources.files("filekit.data").joinpath("theme.toml")))


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the string values of the [colors] table in path.

    Returns:
        The colors, or None when the file is missing, unreadable, or has a
        [colors] entry that is not a table.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return None

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return None
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def _theme_layers() -> Iterator[dict[str, str]]:
    """Yield color layers from lowest to highest precedence."""
    bundled = _load_toml_colors(get_bundled_theme_path())
    if bundled is None:
        logger.error("Bundled theme is missing, falling back to built-in colors")
    else:
        yield bundled

    user_path = get_user_theme_path()
    user = _load_toml_colors(user_path)
    if user is not None:
        logger.debug("Applying user theme %s", user_path)
        yield user


def load_theme() -> ThemeColors:
    """Merge the theme layers into ThemeColors.

    An invalid merged result is logged and replaced by the built-in colors.
    """
    merged: dict[str, str] = {}
    for layer in _theme_layers():
        merged.update(layer)
    try:
        return ThemeColors.model_validate(merged)
    except ValidationError as e:
        logger.warning("Invalid theme, using built-in colors: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich Theme for colors, loading them when not given."""
    if colors is None:
        colors = load_theme()
    styles = {}
    for style_name, (field, modifier) in _STYLES.items():
        color = getattr(colors, field)
        styles[style_name] = f"{modifier} {color}" if modifier else color
    return Theme(styles)


@functools.cache
def get_theme() -> Theme:
    """Return the Rich theme, built once per process."""
    return get_rich_theme()


def reload_theme() -> Theme:
    """Drop the cached theme and build it again from disk."""
    get_theme.cache_clear()
    return get_theme()
