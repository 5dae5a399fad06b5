"""Utility helpers for option values."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Optional

from .errors import InvalidOptionValue

_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")


def stringify_value(option: str, value: Any) -> str:
    if isinstance(value, bool):
        raise InvalidOptionValue(option, value, "booleans are not accepted")
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidOptionValue(option, value, "must be a finite number")
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    raise InvalidOptionValue(option, value, f"unsupported type {type(value).__name__}")


def parse_int_prefix(value: str) -> Optional[int]:
    """Read the leading base-10 integer of ``value``; ``"51.1"`` gives 51."""
    match = _INT_PREFIX_RE.match(value or "")
    if not match:
        return None
    return int(match.group(1))
