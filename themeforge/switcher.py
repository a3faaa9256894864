"""Compile bundled themes into the theme switcher stylesheet.

Each ``theme-<name>.scss`` file in the themes directory contributes its
``:root`` variables as an ``html[data-theme="<name>"]`` block.  A metadata
``:root`` block lists the available themes and their display names so the
switcher button can cycle through them at runtime.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .core.parser import extract_root_block
from .errors import ThemeFileError

logger = logging.getLogger(__name__)

DEFAULT_THEME = "default"
EXCLUDED_THEMES = frozenset({"editor"})

_THEME_FILE_RE = re.compile(r"theme-(.+)\.scss")

HEADER = (
    "/* Auto-generated theme definitions - DO NOT EDIT */\n"
    "/* Compiled from theme-*.scss files; edit those instead. */"
)
METADATA_COMMENT = "/* Theme metadata for JavaScript access */"

THEME_FONTS: Dict[str, str] = {
    "floral": "princess-sofia:400",
    "hacker": "share-tech-mono:400",
    "neon": "orbitron:600",
}
FONT_CSS_URL = "https://fonts.bunny.net/css?family={family}"


@dataclass(frozen=True)
class ThemeFile:
    name: str
    file: str
    content: str


def _is_theme_name(name: str) -> bool:
    return not name.startswith("switcher") and name not in EXCLUDED_THEMES


@lru_cache(maxsize=None)
def _theme_files(themes_dir: Path) -> Tuple[ThemeFile, ...]:
    if not themes_dir.is_dir():
        logger.warning("Themes directory not found: %s", themes_dir)
        return ()
    themes: List[ThemeFile] = []
    for path in themes_dir.iterdir():
        match = _THEME_FILE_RE.fullmatch(path.name)
        if not match or not path.is_file() or not _is_theme_name(match.group(1)):
            continue
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ThemeFileError(f"Unable to read theme: {exc}", path) from exc
        themes.append(ThemeFile(name=match.group(1), file=path.name, content=content))
    themes.sort(key=lambda theme: theme.name)
    logger.debug("Found %d themes in %s", len(themes), themes_dir)
    return tuple(themes)


def get_theme_files(themes_dir: str | Path) -> Tuple[ThemeFile, ...]:
    """Return the themes in ``themes_dir`` sorted by name (memoized per directory)."""

    return _theme_files(Path(themes_dir).resolve())


def clear_cache() -> None:
    _theme_files.cache_clear()
    _compile_theme_switcher.cache_clear()


def extract_root_variables(content: str) -> str:
    return extract_root_block(content).strip()


def to_display_name(name: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in name.split("-") if word)


def _indent(body: str) -> str:
    return "\n".join(f"  {line.strip()}" for line in body.splitlines() if line.strip())


def generate_theme_switcher_content(themes: Iterable[ThemeFile]) -> str:
    themes = list(themes)
    parts: List[str] = [HEADER]
    for theme in themes:
        variables = extract_root_variables(theme.content)
        if not variables:
            logger.debug("Theme %s has no :root variables; skipping rule", theme.name)
            continue
        parts.append(f'html[data-theme="{theme.name}"] {{\n{_indent(variables)}\n}}')

    names = [DEFAULT_THEME] + [theme.name for theme in themes]
    metadata = [f'  --theme-list: "{",".join(names)}";']
    metadata.extend(f'  --theme-{name}-name: "{to_display_name(name)}";' for name in names)
    parts.append(METADATA_COMMENT + "\n:root {\n" + "\n".join(metadata) + "\n}")
    return "\n\n".join(parts) + "\n"


@lru_cache(maxsize=None)
def _compile_theme_switcher(themes_dir: Path) -> str:
    return generate_theme_switcher_content(_theme_files(themes_dir))


def compile_theme_switcher(themes_dir: str | Path) -> str:
    return _compile_theme_switcher(Path(themes_dir).resolve())


def parse_theme_list(raw: Optional[str]) -> List[str]:
    """Read the ``--theme-list`` value back into theme names."""

    cleaned = (raw or "").strip().replace('"', "").replace("'", "")
    names = [name.strip() for name in cleaned.split(",") if name.strip()]
    return names or [DEFAULT_THEME]


def next_theme(themes: Sequence[str], current: Optional[str]) -> str:
    if not themes:
        return DEFAULT_THEME
    index = themes.index(current) if current in themes else -1
    return themes[(index + 1) % len(themes)]


def theme_font_href(name: str) -> Optional[str]:
    family = THEME_FONTS.get(name)
    if family is None:
        return None
    return FONT_CSS_URL.format(family=family)
