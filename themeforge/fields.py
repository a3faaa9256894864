"""Theme editor field catalogue.

Describes every input the theme editor offers so the UI can build its controls
and the editor session can map control values to theme tokens.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional

from .core.models import token_name
from .core.regions import REGION_SELECTORS, REGIONS, Region

FieldType = Literal["color", "number", "border", "text", "select", "select-class"]


@dataclass(frozen=True)
class FieldSpec:
    type: FieldType
    label: str
    tab: str = ""
    suffix: str = ""
    step: Optional[float] = None
    options: str = ""


@dataclass(frozen=True)
class RegionDefinition:
    selector: str
    label: str
    tab: str
    extra_inputs: Dict[str, FieldSpec] = field(default_factory=dict)


GLOBAL_INPUTS: Dict[str, FieldSpec] = {
    # Colours
    "color-bg": FieldSpec("color", "Background", tab="default"),
    "color-text": FieldSpec("color", "Text", tab="default"),
    "color-link": FieldSpec("color", "Links", tab="default"),
    "color-link-hover": FieldSpec("color", "Link Hover", tab="default"),
    # Layout
    "border-radius": FieldSpec("number", "Border Radius", tab="default", suffix="px"),
    "border": FieldSpec("border", "Border", tab="default"),
    "box-shadow": FieldSpec("text", "Box Shadow", tab="default"),
    "width-content": FieldSpec("text", "Content Width", tab="default"),
    "width-card": FieldSpec("text", "Card Width", tab="default"),
    "width-card-medium": FieldSpec("text", "Medium Card Width", tab="default"),
    "width-card-wide": FieldSpec("text", "Wide Card Width", tab="default"),
    # Fonts
    "font-family-heading": FieldSpec("select", "Headings", tab="fonts", options="fonts"),
    "font-family-body": FieldSpec("select", "Body", tab="fonts", options="fonts"),
    "line-height": FieldSpec("number", "Line Height", tab="fonts", step=0.1),
    "link-decoration": FieldSpec(
        "select", "Link Decoration", tab="fonts", options="text-decoration"
    ),
    "link-decoration-hover": FieldSpec(
        "select", "Link Decoration (hover)", tab="fonts", options="text-decoration"
    ),
    "link-decoration-style": FieldSpec(
        "select", "Link Decoration Style", tab="fonts", options="line-styles"
    ),
}

SCOPED_INPUTS: Dict[str, FieldSpec] = {
    "color-bg": FieldSpec("color", "Background"),
    "color-text": FieldSpec("color", "Text"),
    "color-link": FieldSpec("color", "Links"),
    "color-link-hover": FieldSpec("color", "Link Hover"),
    "border": FieldSpec("border", "Border"),
}

REGION_DEFINITIONS: Dict[Region, RegionDefinition] = {
    Region.HEADER: RegionDefinition(
        selector=REGION_SELECTORS[Region.HEADER],
        label="Header",
        tab="header",
        extra_inputs={
            "header-decoration": FieldSpec(
                "select-class", "Header Style", options="header-decorations"
            ),
        },
    ),
    Region.NAV: RegionDefinition(
        selector=REGION_SELECTORS[Region.NAV], label="Navigation", tab="nav"
    ),
    Region.ARTICLE: RegionDefinition(
        selector=REGION_SELECTORS[Region.ARTICLE],
        label="Article/Main Content",
        tab="main",
        extra_inputs={
            "main-heading-decoration": FieldSpec(
                "select-class", "Heading Style", options="heading-decorations"
            ),
        },
    ),
    Region.FORM: RegionDefinition(
        selector=REGION_SELECTORS[Region.FORM], label="Form", tab="form"
    ),
    Region.BUTTON: RegionDefinition(
        selector=REGION_SELECTORS[Region.BUTTON], label="Button", tab="form"
    ),
}


def global_input_ids() -> List[str]:
    return list(GLOBAL_INPUTS)


def scoped_input_ids(region: Region | str) -> List[str]:
    name = Region(region).value
    return [f"{name}-{input_id}" for input_id in SCOPED_INPUTS]


def scoped_var_names() -> List[str]:
    return [token_name(input_id) for input_id in SCOPED_INPUTS]


def region_selector(region: Region | str) -> str:
    return REGION_DEFINITIONS[Region(region)].selector


def input_counts() -> Dict[str, int]:
    global_count = len(GLOBAL_INPUTS)
    per_region = len(SCOPED_INPUTS)
    regions = len(REGIONS)
    extra = sum(len(definition.extra_inputs) for definition in REGION_DEFINITIONS.values())
    return {
        "global": global_count,
        "scoped_per_region": per_region,
        "regions": regions,
        "total_scoped": per_region * regions,
        "extra_inputs": extra,
        "total": global_count + per_region * regions + extra,
    }


def control_value(field_id: str, raw: str) -> str:
    """Turn a raw control value into the token value written to the theme."""

    spec = GLOBAL_INPUTS.get(field_id)
    if spec is not None and spec.suffix and raw and not raw.endswith(spec.suffix):
        return f"{raw}{spec.suffix}"
    return raw
