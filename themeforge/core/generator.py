"""Serialize theme tokens back to stylesheet text."""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional

from .models import token_name
from .regions import REGION_SELECTORS, by_region

INDENT = "  "


def _declaration(name: str, value: str) -> str:
    return f"{INDENT}{token_name(name)}: {value};"


def _block(selector: str, declarations: Mapping[str, str]) -> str:
    lines = [_declaration(name, value) for name, value in declarations.items()]
    if not lines:
        return f"{selector} {{\n}}"
    return f"{selector} {{\n" + "\n".join(lines) + "\n}"


def layout_classes_comment(layout_classes: Iterable[str]) -> str:
    return f"/* body_classes: {', '.join(layout_classes)} */"


def generate(
    global_vars: Mapping[str, str],
    region_overrides: Optional[Mapping[object, Mapping[str, str]]] = None,
    layout_classes: Optional[Iterable[str]] = None,
) -> str:
    blocks: List[str] = [_block(":root", global_vars)]
    for region, overrides in by_region(region_overrides).items():
        if overrides:
            blocks.append(_block(REGION_SELECTORS[region], overrides))
    css = "\n\n".join(blocks) + "\n"

    classes = list(layout_classes or [])
    if classes:
        return f"{css}\n{layout_classes_comment(classes)}"
    return css
