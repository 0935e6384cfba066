"""Configuration file loading.

The file is optional, every setting has a default::

    [hyprws]
    ordinals = "position"    # or "id"

    [bar]
    label = " {workspace} "
    selected_class = "selected"
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from logging import Logger
from pathlib import Path
from typing import Any

import aiofiles
import aiofiles.os

from .constants import CONFIG_FILE
from .models import ConfigError, OrdinalSource

__all__ = ["BarSettings", "Settings", "load_settings"]


@dataclass(frozen=True)
class BarSettings:
    """Bar feed appearance."""

    label: str = " {workspace} "
    selected_class: str = "selected"


@dataclass(frozen=True)
class Settings:
    """Validated configuration."""

    ordinals: OrdinalSource = OrdinalSource.POSITION
    bar: BarSettings = BarSettings()


def _get_str(section: dict[str, Any], name: str, default: str, section_name: str) -> str:
    value = section.get(name, default)
    if not isinstance(value, str):
        msg = f"[{section_name}] {name} must be a string, got {type(value).__name__}"
        raise ConfigError(msg)
    return value


def parse_settings(config: dict[str, Any]) -> Settings:
    """Build `Settings` from a parsed TOML document.

    Raises:
        ConfigError: a value has the wrong type or is unknown
    """
    main = config.get("hyprws", {})
    bar = config.get("bar", {})
    if not isinstance(main, dict) or not isinstance(bar, dict):
        msg = "[hyprws] and [bar] must be tables"
        raise ConfigError(msg)

    ordinals = _get_str(main, "ordinals", OrdinalSource.POSITION.value, "hyprws")
    try:
        ordinal_source = OrdinalSource(ordinals)
    except ValueError as e:
        choices = ", ".join(f'"{o.value}"' for o in OrdinalSource)
        msg = f'[hyprws] ordinals: "{ordinals}" is not one of {choices}'
        raise ConfigError(msg) from e

    defaults = BarSettings()
    label = _get_str(bar, "label", defaults.label, "bar")
    try:
        label.format(workspace=1, display=0)
    except (KeyError, IndexError, ValueError) as e:
        msg = f"[bar] label: invalid template {label!r} ({e})"
        raise ConfigError(msg) from e

    return Settings(
        ordinals=ordinal_source,
        bar=BarSettings(
            label=label,
            selected_class=_get_str(bar, "selected_class", defaults.selected_class, "bar"),
        ),
    )


async def load_settings(filename: str | Path | None, log: Logger) -> Settings:
    """Load the configuration file.

    Args:
        filename: explicit file to read, or None to use the default location
        log: logger to use

    Raises:
        ConfigError: the file is missing (explicit only), unreadable or invalid
    """
    path = Path(filename).expanduser() if filename else CONFIG_FILE
    if not await aiofiles.os.path.exists(path):
        if filename:
            msg = f"config file {path} not found"
            raise ConfigError(msg)
        log.debug("No config file at %s, using defaults", path)
        return Settings()

    log.info("Loading %s", path)
    try:
        async with aiofiles.open(path, "rb") as f:
            content = await f.read()
        config = tomllib.loads(content.decode("utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        msg = f"problem reading {path}: {e}"
        raise ConfigError(msg) from e
    return parse_settings(config)
