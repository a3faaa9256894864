"""Parse theme stylesheet text into a :class:`ThemeDocument`.

The grammar is deliberately small: one ``:root`` block of custom properties,
optional override blocks for the fixed region catalog and a trailing
``/* body_classes: ... */`` comment.  Anything else in the text is ignored, and
malformed input degrades to empty structures instead of raising.
"""

from __future__ import annotations

import logging
import re
from re import Pattern
from typing import Dict, List, Optional

from .models import ThemeDocument
from .regions import REGIONS, Region

logger = logging.getLogger(__name__)

_ROOT_RE = re.compile(r":root\s*\{([^}]*)\}", re.S)
_LAYOUT_CLASSES_RE = re.compile(r"/\* body_classes: (.+) \*/")
_DECLARATION_RE = re.compile(r"\s*(--[\w-]+)\s*:\s*(.+?)\s*")
_BUTTON_RE = re.compile(r'button\s*,[\s\S]*?input\[type="submit"\]\s*\{([^}]*)\}')


def _region_pattern(region: Region) -> Pattern[str]:
    if region is Region.BUTTON:
        return _BUTTON_RE
    # The selector must start a header, so ``.site-header {`` is not ``header``.
    return re.compile(r"(?:^|[\s;{}])" + re.escape(region.value) + r"\s*\{([^}]*)\}", re.S)


_REGION_PATTERNS: Dict[Region, Pattern[str]] = {region: _region_pattern(region) for region in REGIONS}


def parse_declarations(block: Optional[str]) -> Dict[str, str]:
    """Extract ``--name: value`` pairs from the body of a block."""

    if not block:
        return {}
    declarations: Dict[str, str] = {}
    for segment in block.split(";"):
        match = _DECLARATION_RE.fullmatch(segment)
        if match:
            declarations[match.group(1)] = match.group(2)
    return declarations


def extract_root_block(text: Optional[str]) -> str:
    """Return the raw body of the ``:root`` block, or an empty string."""

    if not text:
        return ""
    match = _ROOT_RE.search(text)
    return match.group(1) if match else ""


def _parse_layout_classes(text: str) -> List[str]:
    match = _LAYOUT_CLASSES_RE.search(text)
    if not match:
        return []
    return [name.strip() for name in match.group(1).split(",") if name.strip()]


def parse(text: Optional[str]) -> ThemeDocument:
    if not text or not isinstance(text, str):
        return ThemeDocument()

    root = _ROOT_RE.search(text)
    if root is None:
        logger.debug("Theme text has no :root block")

    overrides: Dict[Region, Dict[str, str]] = {}
    for region in REGIONS:
        match = _REGION_PATTERNS[region].search(text)
        if match:
            overrides[region] = parse_declarations(match.group(1))

    return ThemeDocument(
        global_vars=parse_declarations(root.group(1)) if root else {},
        region_overrides=overrides,
        layout_classes=_parse_layout_classes(text),
    )
