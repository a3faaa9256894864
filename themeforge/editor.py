"""Editing session for the theme editor.

The UI owns the live field values; it hands them over as immutable
:class:`FieldSnapshot` values and gets back the regenerated theme text plus the
snapshot it should write back into its fields after cascading.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .core.generator import generate
from .core.models import BorderValue, ThemeDocument, parse_border, token_name
from .core.parser import parse
from .core.regions import REGIONS, Region, by_region, coerce_region
from .core.resolver import cascade, collect_region_overrides
from .fields import control_value, scoped_var_names

logger = logging.getLogger(__name__)

BORDER_TOKEN = "--border"


@dataclass(frozen=True)
class FieldSnapshot:
    global_vars: Dict[str, str] = field(default_factory=dict)
    region_values: Dict[Region, Dict[str, str]] = field(default_factory=dict)
    layout_classes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EditResult:
    text: str
    snapshot: FieldSnapshot
    document: ThemeDocument


@dataclass(frozen=True)
class ClassSelect:
    """A select control whose chosen option is a layout class."""

    name: str
    options: Tuple[str, ...]


def initial_snapshot(
    document: ThemeDocument,
    scoped_vars: Optional[Iterable[str]] = None,
) -> FieldSnapshot:
    """Build the field values shown when a theme is opened.

    A region field shows its explicit override when the theme has one and
    otherwise the current global value, so untouched fields follow the global.
    """

    names = list(scoped_vars) if scoped_vars is not None else scoped_var_names()
    overrides = by_region(document.region_overrides)
    region_values: Dict[Region, Dict[str, str]] = {}
    for region in REGIONS:
        values = dict(overrides.get(region, {}))
        for name in names:
            if name in values:
                continue
            global_value = document.global_vars.get(name)
            if global_value:
                values[name] = global_value
        region_values[region] = values
    return FieldSnapshot(
        global_vars=dict(document.global_vars),
        region_values=region_values,
        layout_classes=tuple(document.layout_classes),
    )


def apply_edit(previous_text: str, snapshot: FieldSnapshot) -> EditResult:
    """Regenerate the theme text for an edited snapshot.

    Globals in ``previous_text`` are the values before the edit; region fields
    still equal to them are cascaded onto the new globals before filtering.
    """

    old_globals = parse(previous_text).global_vars
    new_globals = dict(snapshot.global_vars)
    region_values = cascade(old_globals, new_globals, snapshot.region_values)
    overrides = collect_region_overrides(region_values, new_globals)
    classes = list(snapshot.layout_classes)
    text = generate(new_globals, overrides, classes)
    logger.debug(
        "Regenerated theme: %d globals, %d overridden regions",
        len(new_globals),
        len(overrides),
    )
    return EditResult(
        text=text,
        snapshot=FieldSnapshot(
            global_vars=new_globals,
            region_values=region_values,
            layout_classes=tuple(classes),
        ),
        document=ThemeDocument(
            global_vars=new_globals,
            region_overrides=overrides,
            layout_classes=classes,
        ),
    )


def is_control_enabled(field_id: str, enabled_flags: Mapping[str, bool]) -> bool:
    # Controls without an enable checkbox are always on.
    return enabled_flags.get(field_id, True)


def global_vars_from_controls(
    controls: Mapping[str, str],
    enabled_flags: Optional[Mapping[str, bool]] = None,
) -> Dict[str, str]:
    """Map raw global control values to tokens, skipping disabled controls."""

    flags = enabled_flags or {}
    return {
        token_name(field_id): control_value(field_id, raw)
        for field_id, raw in controls.items()
        if is_control_enabled(field_id, flags)
    }


def collect_active_classes(
    selects: Sequence[ClassSelect],
    selected: Mapping[str, str],
    enabled_flags: Optional[Mapping[str, bool]] = None,
) -> List[str]:
    flags = enabled_flags or {}
    active: List[str] = []
    for select in selects:
        if not is_control_enabled(select.name, flags):
            continue
        choice = selected.get(select.name, "")
        if choice and choice in select.options:
            active.append(choice)
    return active


def initial_enabled_flags(
    document: ThemeDocument,
    optional_ids: Iterable[str],
    selects: Sequence[ClassSelect] = (),
) -> Dict[str, bool]:
    """Turn on optional controls whose token or layout class is in use."""

    options_by_name = {select.name: select.options for select in selects}
    active = set(document.layout_classes)
    flags: Dict[str, bool] = {}
    for field_id in optional_ids:
        has_token = token_name(field_id) in document.global_vars
        has_class = any(
            option and option in active for option in options_by_name.get(field_id, ())
        )
        flags[field_id] = has_token or has_class
    return flags


def compose_border(width: int, style: str, color: str) -> str:
    return BorderValue(width=width, style=style, color=color).compose()


def border_fields(
    snapshot: FieldSnapshot,
    region: Optional[Region | str] = None,
) -> Optional[BorderValue]:
    """Border parts for the global border control or a region's control.

    A region without its own parseable border falls back to the global one.
    """

    if region is not None:
        values = by_region(snapshot.region_values).get(coerce_region(region), {})
        parsed = parse_border(values.get(BORDER_TOKEN))
        if parsed is not None:
            return parsed
    return parse_border(snapshot.global_vars.get(BORDER_TOKEN))
