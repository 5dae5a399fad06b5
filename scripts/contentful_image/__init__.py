"""contentful-image public surface."""

from .api import contentful_image
from .core import (
    ContentfulImageError,
    FieldsSource,
    FileSource,
    ImageOptions,
    ImageSource,
    InvalidOptionValue,
    InvalidSource,
    UnknownOption,
    UrlSource,
    get_image_query,
    get_image_src_url,
)

__all__ = [
    "contentful_image",
    "get_image_query",
    "get_image_src_url",
    "ImageOptions",
    "ImageSource",
    "UrlSource",
    "FileSource",
    "FieldsSource",
    "ContentfulImageError",
    "InvalidSource",
    "InvalidOptionValue",
    "UnknownOption",
]
