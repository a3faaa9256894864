"""Decide which region values are real overrides of the global tokens."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from .regions import Region, by_region


def should_include(candidate: Optional[str], global_value: Optional[str]) -> bool:
    """Return True when ``candidate`` overrides its own global value.

    Empty candidates and candidates equal to the global are not overrides.
    Every other value is, whatever colour it happens to be.
    """

    if not candidate:
        return False
    if candidate == global_value:
        return False
    return True


def collect_overrides(
    candidates: Mapping[str, str],
    global_vars: Mapping[str, str],
) -> Dict[str, str]:
    return {
        name: value
        for name, value in candidates.items()
        if should_include(value, global_vars.get(name))
    }


def collect_region_overrides(
    region_candidates: Mapping[object, Mapping[str, str]],
    global_vars: Mapping[str, str],
) -> Dict[Region, Dict[str, str]]:
    """Run :func:`collect_overrides` per region and drop regions left empty."""

    resolved: Dict[Region, Dict[str, str]] = {}
    for region, candidates in by_region(region_candidates).items():
        overrides = collect_overrides(candidates, global_vars)
        if overrides:
            resolved[region] = overrides
    return resolved


def cascade(
    old_globals: Mapping[str, str],
    new_globals: Mapping[str, str],
    region_candidates: Mapping[object, Mapping[str, str]],
) -> Dict[Region, Dict[str, str]]:
    """Move region values that were tracking an old global onto the new one.

    A value equal to ``old_globals[name]`` follows the global and takes
    ``new_globals[name]``; anything else is an intentional override and is
    left alone.  Must run before collecting overrides after a global edit.
    """

    cascaded: Dict[Region, Dict[str, str]] = {}
    for region, candidates in by_region(region_candidates).items():
        values: Dict[str, str] = {}
        for name, value in candidates.items():
            old = old_globals.get(name)
            new = new_globals.get(name)
            if old and new and value == old:
                values[name] = new
            else:
                values[name] = value
        cascaded[region] = values
    return cascaded
