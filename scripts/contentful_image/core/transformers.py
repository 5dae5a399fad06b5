"""Value transformers applied before a value is split into parameters."""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from .errors import InvalidOptionValue
from .utils import parse_int_prefix

QUALITY_MIN = 1
QUALITY_MAX = 100
RGB_PREFIX = "rgb:"

Transformer = Callable[[str], str]


def transform_background_color(value: str) -> str:
    return RGB_PREFIX + value.replace("#", "")


def transform_quality(value: str) -> str:
    parsed = parse_int_prefix(value)
    if parsed is None:
        raise InvalidOptionValue("quality", value, "expected an integer between 1 and 100")
    return str(round(min(QUALITY_MAX, max(QUALITY_MIN, parsed))))


TRANSFORMERS: Mapping[str, Transformer] = MappingProxyType(
    {
        "background_color": transform_background_color,
        "quality": transform_quality,
    }
)
