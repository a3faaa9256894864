"""Data models for theme documents."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .regions import Region, by_region, coerce_region

TOKEN_PREFIX = "--"

_BORDER_RE = re.compile(r"\s*(\d+)px\s+(\w+)\s+(\S.*?)\s*")


def token_name(name: str) -> str:
    """Return ``name`` with the custom-property prefix applied exactly once."""

    return name if name.startswith(TOKEN_PREFIX) else f"{TOKEN_PREFIX}{name}"


@dataclass(frozen=True)
class BorderValue:
    """The three parts of a composite ``--border`` token."""

    width: int
    style: str
    color: str

    def compose(self) -> str:
        return f"{self.width}px {self.style} {self.color}"

    def __str__(self) -> str:
        return self.compose()


def parse_border(value: Optional[str]) -> Optional[BorderValue]:
    """Split ``"2px solid #000000"`` into its parts; None when it does not fit."""

    if not value:
        return None
    match = _BORDER_RE.fullmatch(value)
    if not match:
        return None
    return BorderValue(width=int(match.group(1)), style=match.group(2), color=match.group(3))


@dataclass
class ThemeDocument:
    global_vars: Dict[str, str] = field(default_factory=dict)
    region_overrides: Dict[Region, Dict[str, str]] = field(default_factory=dict)
    layout_classes: List[str] = field(default_factory=list)

    def overrides_for(self, region: Region | str) -> Dict[str, str]:
        return dict(by_region(self.region_overrides).get(coerce_region(region), {}))

    def to_dict(self) -> dict:
        return {
            "globals": dict(self.global_vars),
            "regions": {
                region.value: dict(values)
                for region, values in by_region(self.region_overrides).items()
            },
            "layout_classes": list(self.layout_classes),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ThemeDocument":
        global_vars = data.get("globals", {})
        regions = data.get("regions", {})
        classes = data.get("layout_classes", [])
        return cls(
            global_vars={str(k): str(v) for k, v in global_vars.items()}
            if isinstance(global_vars, dict)
            else {},
            region_overrides={
                region: {str(k): str(v) for k, v in values.items()}
                for region, values in by_region(regions if isinstance(regions, dict) else {}).items()
                if isinstance(values, dict)
            },
            layout_classes=[str(c) for c in classes] if isinstance(classes, list) else [],
        )
