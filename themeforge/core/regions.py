"""Fixed catalog of page regions that may override global theme tokens."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Mapping, Optional, Tuple, TypeVar

T = TypeVar("T")


class Region(str, Enum):
    HEADER = "header"
    NAV = "nav"
    ARTICLE = "article"
    FORM = "form"
    BUTTON = "button"


# Catalog order; generated text always follows it.
REGIONS: Tuple[Region, ...] = tuple(Region)

REGION_SELECTORS: Dict[Region, str] = {
    Region.HEADER: "header",
    Region.NAV: "nav",
    Region.ARTICLE: "article",
    Region.FORM: "form",
    Region.BUTTON: 'button,\n.button,\ninput[type="submit"]',
}


def coerce_region(key: object) -> Optional[Region]:
    """Return the catalog member for ``key`` (a Region or its name), else None."""

    if isinstance(key, Region):
        return key
    try:
        return Region(str(key))
    except ValueError:
        return None


def by_region(mapping: Optional[Mapping[object, T]]) -> Dict[Region, T]:
    """Re-key a region mapping onto catalog members, in catalog order.

    Unknown keys are dropped so callers may pass plain strings freely.
    """

    if not mapping:
        return {}
    keyed: Dict[Region, T] = {}
    for key, value in mapping.items():
        region = coerce_region(key)
        if region is not None:
            keyed[region] = value
    return {region: keyed[region] for region in REGIONS if region in keyed}
