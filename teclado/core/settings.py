from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from teclado.core.errors import SettingsError

logger = logging.getLogger(__name__)

SETTINGS_ENV = "TECLADO_SETTINGS"
LOG_LEVEL_ENV = "TECLADO_LOG_LEVEL"

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class KeyboardSettings:
    """Presentation settings for the on-screen keyboard window."""

    key_height: int = 44
    font_size: int = 16
    spacing: int = 6
    highlight_color: str = "#FFA500"
    log_level: str = "INFO"


def default_settings_path() -> Path:
    override = os.environ.get(SETTINGS_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".teclado" / "settings.yaml"


def load_settings(path: Optional[Path] = None) -> KeyboardSettings:
    """Read settings from YAML, falling back to defaults when the file is absent.

    ``TECLADO_LOG_LEVEL`` overrides ``log_level`` from the file.
    """
    settings_path = path if path is not None else default_settings_path()
    settings = KeyboardSettings()
    if settings_path.exists():
        try:
            raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise SettingsError(f"{settings_path.name}: not valid YAML: {e}") from e
        settings = _parse(settings_path.name, raw)
        logger.info("Loaded settings from %s", settings_path)

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        settings = replace(settings, log_level=_check_log_level(LOG_LEVEL_ENV, env_level))
    return settings


def _parse(source: str, raw: Any) -> KeyboardSettings:
    if raw is None:
        return KeyboardSettings()
    if not isinstance(raw, dict):
        raise SettingsError(f"{source}: expected a mapping of setting names to values")

    known = {f.name for f in fields(KeyboardSettings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise SettingsError(f"{source}: unknown settings: {', '.join(map(str, unknown))}")

    values: Dict[str, Any] = {}
    for name in ("key_height", "font_size", "spacing"):
        if name in raw:
            value = raw[name]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise SettingsError(f"{source}: '{name}' must be a non-negative integer")
            values[name] = value
    if "highlight_color" in raw:
        color = raw["highlight_color"]
        if not isinstance(color, str) or not _HEX_COLOR.match(color):
            raise SettingsError(f"{source}: 'highlight_color' must look like #RRGGBB")
        values["highlight_color"] = color.upper()
    if "log_level" in raw:
        values["log_level"] = _check_log_level(source, raw["log_level"])
    return KeyboardSettings(**values)


def _check_log_level(source: str, value: Any) -> str:
    level = str(value).strip().upper()
    if level not in _LOG_LEVELS:
        raise SettingsError(f"{source}: invalid log level {value!r}")
    return level
