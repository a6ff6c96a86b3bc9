"""User settings, loaded from a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .markup import Color, RenderConfig, resolve_color

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".regfind.yaml"


class SettingsError(Exception):
    """Settings file unreadable or invalid."""


def _check_color(value: Optional[str]) -> Optional[str]:
    if value is None or value == "":
        return None
    if resolve_color(value) is None:
        known = ", ".join(Color.__members__)
        raise ValueError(f"Unknown color {value!r}. Known colors: {known}")
    return value.lower()


class Settings(BaseModel):
    registry: Optional[str] = None
    highlight_color: str = "yellow"
    default_foreground: Optional[str] = None
    default_background: Optional[str] = None
    suppress_trailing_newline: bool = False
    pause_on_exit: bool = False
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @field_validator("highlight_color")
    @classmethod
    def _highlight_color(cls, value: str) -> str:
        checked = _check_color(value)
        if checked is None:
            raise ValueError("highlight_color cannot be empty")
        return checked

    @field_validator("default_foreground", "default_background")
    @classmethod
    def _default_color(cls, value: Optional[str]) -> Optional[str]:
        return _check_color(value)

    @field_validator("log_level")
    @classmethod
    def _log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def render_config(self) -> RenderConfig:
        return RenderConfig(
            default_foreground=resolve_color(self.default_foreground) if self.default_foreground else None,
            default_background=resolve_color(self.default_background) if self.default_background else None,
            suppress_trailing_newline=self.suppress_trailing_newline,
        )


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from *path* (or the default file, if it exists)."""
    if path is None:
        p = DEFAULT_SETTINGS_PATH
        if not p.is_file():
            return Settings()
    else:
        p = Path(path)
        if not p.is_file():
            raise SettingsError(f"Settings file not found: {p}")

    try:
        with open(p, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise SettingsError(f"Cannot read settings {p}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {p} must contain a mapping")

    try:
        settings = Settings(**data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {p}: {e}") from e

    logger.debug("Loaded settings from %s", p)
    return settings
