"""Core data contracts for Contentful image URLs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Union


ImageFormat = Literal["jpg", "png", "webp", "gif", "avif", "jpg/progressive", "png/png8"]
ImageFit = Literal["pad", "fill", "scale", "crop", "thumb"]
ImageFocusArea = Literal[
    "center",
    "top",
    "left",
    "right",
    "bottom",
    "top_right",
    "bottom_right",
    "top_left",
    "bottom_left",
    "face",
    "faces",
]
ImageRadius = Union[int, Literal["max"]]


@dataclass(frozen=True)
class UrlSource:
    """Any object carrying the URL directly, e.g. ``asset.fields.file``."""

    url: str


@dataclass(frozen=True)
class FileSource:
    """Object with the URL under ``file.url``, e.g. ``asset.fields``."""

    file: UrlSource


@dataclass(frozen=True)
class FieldsSource:
    """A whole Contentful asset, URL under ``fields.file.url``."""

    fields: FileSource


ImageSource = Union[str, UrlSource, FileSource, FieldsSource]


@dataclass(frozen=True)
class ImageOptions:
    """Transformations understood by the Contentful Images API.

    Every field is optional; ``None`` leaves the parameter out of the query.
    Width and height are capped at 4000 by the API, quality is clamped to
    1-100 when the query is built. ``background_color`` takes an RGB hex
    string with or without a leading ``#``.
    """

    format: Optional[ImageFormat] = None
    width: Optional[int] = None
    height: Optional[int] = None
    fit: Optional[ImageFit] = None
    focus_area: Optional[ImageFocusArea] = None
    radius: Optional[ImageRadius] = None
    quality: Optional[int] = None
    background_color: Optional[str] = None
