"""Configuration for textpager.

Settings live in a small YAML file::

    page_size: 8
    theme:
      info: "yellow"
      heading: "bold cyan"
      command: "bright_blue underline"

Every key is optional; anything left out keeps its default.  Theme values
are Rich style strings and are checked when the file is loaded.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml
from rich.errors import StyleSyntaxError
from rich.style import Style as RichStyle

from textpager.pager.pager import DEFAULT_PAGE_SIZE
from textpager.text.nodes import Colour

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or is invalid."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        super().__init__(f"Invalid configuration in {source}: {reason}")


@dataclass(frozen=True)
class Theme:
    """Rich style string for each colour role."""

    plain: str = ""
    info: str = "gold1"
    heading: str = "dark_cyan"
    error: str = "red"
    command: str = "bright_cyan"
    disabled: str = "grey37"

    def style_for(self, colour: Colour) -> str:
        """Return the style string configured for ``colour``."""
        return getattr(self, colour.name.lower())


@dataclass(frozen=True)
class PagerConfig:
    """Settings shared by the CLI and the renderers.

    Parameters
    ----------
    page_size:
        Items per page when the caller does not pick one.
    theme:
        Colours used by the terminal renderer.
    """

    page_size: int = DEFAULT_PAGE_SIZE
    theme: Theme = field(default_factory=Theme)


def config_from_dict(data: dict[str, Any], source: str = "<dict>") -> PagerConfig:
    """Build a ``PagerConfig`` from a parsed mapping.

    Raises
    ------
    ConfigError
        On unknown keys, a non-positive page size or an unparsable style.
    """
    if not isinstance(data, dict):
        raise ConfigError(source, "top level must be a mapping")

    unknown = set(data) - {"page_size", "theme"}
    if unknown:
        raise ConfigError(source, f"unknown key(s): {', '.join(sorted(unknown))}")

    page_size = data.get("page_size", DEFAULT_PAGE_SIZE)
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise ConfigError(source, f"page_size must be a positive integer, got {page_size!r}")

    theme_data = data.get("theme") or {}
    if not isinstance(theme_data, dict):
        raise ConfigError(source, "theme must be a mapping")
    known_roles = {f.name for f in fields(Theme)}
    unknown_roles = set(theme_data) - known_roles
    if unknown_roles:
        raise ConfigError(source, f"unknown theme role(s): {', '.join(sorted(unknown_roles))}")
    for role, value in theme_data.items():
        if not isinstance(value, str):
            raise ConfigError(source, f"theme.{role} must be a string")
        try:
            RichStyle.parse(value)
        except StyleSyntaxError as exc:
            raise ConfigError(source, f"theme.{role}: {exc}") from exc

    return PagerConfig(page_size=page_size, theme=Theme(**theme_data))


def load_config(path: str | Path) -> PagerConfig:
    """Load a ``PagerConfig`` from a YAML file.

    An empty file yields the defaults.

    Raises
    ------
    ConfigError
        If the file is missing, is not valid YAML, or holds invalid values.
    """
    source = str(path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(source, f"cannot read file ({exc})") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(source, f"not valid YAML ({exc})") from exc

    config = config_from_dict(data or {}, source)
    logger.debug("Loaded configuration from %s: %r", source, config)
    return config
