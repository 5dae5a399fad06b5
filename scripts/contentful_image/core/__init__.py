"""Core contracts and helpers."""

from .contracts import FieldsSource, FileSource, ImageOptions, ImageSource, UrlSource
from .errors import ContentfulImageError, InvalidOptionValue, InvalidSource, UnknownOption
from .query import get_image_query
from .source import coerce_source, get_image_src_url

__all__ = [
    "ContentfulImageError",
    "FieldsSource",
    "FileSource",
    "ImageOptions",
    "ImageSource",
    "InvalidOptionValue",
    "InvalidSource",
    "UnknownOption",
    "UrlSource",
    "coerce_source",
    "get_image_query",
    "get_image_src_url",
]
