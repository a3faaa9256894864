from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from themeforge.core.regions import REGIONS, Region
from themeforge.fields import (
    GLOBAL_INPUTS,
    REGION_DEFINITIONS,
    SCOPED_INPUTS,
    control_value,
    global_input_ids,
    input_counts,
    region_selector,
    scoped_input_ids,
    scoped_var_names,
)


def test_region_definitions_cover_catalog() -> None:
    assert list(REGION_DEFINITIONS) == list(REGIONS)


def test_region_selectors() -> None:
    assert region_selector("header") == "header"
    assert region_selector(Region.NAV) == "nav"
    assert region_selector("button") == 'button,\n.button,\ninput[type="submit"]'


def test_global_inputs_include_colors() -> None:
    for input_id in ("color-bg", "color-text", "color-link", "color-link-hover"):
        assert GLOBAL_INPUTS[input_id].type == "color"
    assert global_input_ids()[0] == "color-bg"


def test_scoped_inputs() -> None:
    assert set(SCOPED_INPUTS) == {"color-bg", "color-text", "color-link", "color-link-hover", "border"}
    assert "--border" in scoped_var_names()
    assert scoped_input_ids("form")[0] == "form-color-bg"


def test_input_counts_are_consistent() -> None:
    counts = input_counts()
    assert counts["global"] == len(GLOBAL_INPUTS)
    assert counts["regions"] == 5
    assert counts["total_scoped"] == counts["scoped_per_region"] * 5
    assert counts["extra_inputs"] == 2
    assert counts["total"] == counts["global"] + counts["total_scoped"] + counts["extra_inputs"]


def test_control_value_applies_suffix() -> None:
    assert control_value("border-radius", "8") == "8px"
    assert control_value("border-radius", "8px") == "8px"
    assert control_value("line-height", "1.5") == "1.5"
    assert control_value("unknown", "x") == "x"
