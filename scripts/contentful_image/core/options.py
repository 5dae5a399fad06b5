"""Option names and the query parameters they map to."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Tuple


# Some options are spread over several parameters: an 8-bit png needs both
# fm=png and fl=png8, so "format" fans out to ("fm", "fl").
OPTION_QUERY_KEYS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "format": ("fm", "fl"),
        "width": ("w",),
        "height": ("h",),
        "fit": ("fit",),
        "focus_area": ("f",),
        "radius": ("r",),
        "quality": ("q",),
        "background_color": ("bg",),
    }
)

OPTION_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "focusarea": "focus_area",
        "backgroundcolor": "background_color",
        "background_colour": "background_color",
        "backgroundcolour": "background_color",
    }
)

_CAMEL_RE = re.compile(r"(?<=[a-z0-9])([A-Z])")


def normalize_option_name(name: str) -> str:
    """Map ``focusArea``, ``focus-area`` and ``focus_area`` to one key."""
    slug = _CAMEL_RE.sub(r"_\1", str(name).strip())
    slug = re.sub(r"[^a-z0-9]+", "_", slug.lower()).strip("_")
    return OPTION_ALIASES.get(slug, slug)
