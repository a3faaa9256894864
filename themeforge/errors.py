"""Exceptions raised outside the pure theme compiler."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ThemeforgeError(Exception):
    """Base class for errors reported by themeforge."""


class ThemeFileError(ThemeforgeError):
    """Raised when a theme or snapshot file cannot be read or written."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is not None:
            return f"{message} ({self.path})"
        return message


class SettingsError(ThemeforgeError):
    """Raised when the settings file is not a valid JSON object."""
