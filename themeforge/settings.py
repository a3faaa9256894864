"""User settings for the themeforge command line."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from .errors import SettingsError

LOG_LEVEL_ENV = "THEMEFORGE_LOG_LEVEL"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def validate_log_level(level: str) -> str:
    name = str(level).strip().upper()
    if name not in LOG_LEVELS:
        raise SettingsError(f"Unknown log level {level!r}; expected one of {', '.join(LOG_LEVELS)}")
    return name


@dataclass
class Settings:
    themes_dir: str = "themes"
    theme_file: str = "theme.scss"
    output_dir: str = "_site"
    site_name: str = "Theme preview"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        defaults = cls()
        log_file = data.get("log_file")
        return cls(
            themes_dir=str(data.get("themes_dir", defaults.themes_dir)),
            theme_file=str(data.get("theme_file", defaults.theme_file)),
            output_dir=str(data.get("output_dir", defaults.output_dir)),
            site_name=str(data.get("site_name", defaults.site_name)),
            log_level=validate_log_level(data.get("log_level", defaults.log_level)),
            log_file=str(log_file) if log_file else None,
        )


def load_settings(path: str | Path | None = None) -> Settings:
    settings = Settings()
    if path is not None:
        path = Path(path)
        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
                raise SettingsError(f"Unable to read settings {path}: {exc}") from exc
            if not isinstance(data, dict):
                raise SettingsError(f"Expected a JSON object in {path}")
            settings = Settings.from_dict(data)

    env_level = os.getenv(LOG_LEVEL_ENV)
    if env_level:
        settings.log_level = validate_log_level(env_level)
    return settings
