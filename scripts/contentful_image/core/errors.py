"""Errors raised while building image URLs."""

from __future__ import annotations

from typing import Any


class ContentfulImageError(ValueError):
    pass


class InvalidSource(ContentfulImageError):
    pass


class InvalidOptionValue(ContentfulImageError):
    def __init__(self, option: str, value: Any, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for option '{option}': {reason}")
        self.option = option
        self.value = value


class UnknownOption(ContentfulImageError):
    def __init__(self, option: str) -> None:
        super().__init__(f"Unknown image option '{option}'")
        self.option = option
