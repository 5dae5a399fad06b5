"""Resolve the base image URL from the accepted source shapes."""

from __future__ import annotations

from typing import Any, Mapping

from .contracts import FieldsSource, FileSource, ImageSource, UrlSource
from .errors import InvalidSource

HTTPS_SCHEME = "https:"
PROTOCOL_RELATIVE_PREFIX = "//"


def _require_url(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidSource(f"Image URL must be a string, got {type(value).__name__}")
    if not value:
        raise InvalidSource("Image URL is empty.")
    return value


def _require_key(source: Mapping[str, Any], key: str, path: str) -> Any:
    if key not in source:
        raise InvalidSource(f"Image source is missing '{path}'.")
    return source[key]


def _coerce_file(value: Any) -> FileSource:
    if isinstance(value, FileSource):
        return value
    if not isinstance(value, Mapping):
        raise InvalidSource(f"Expected an object with 'file.url', got {type(value).__name__}")
    file_value = _require_key(value, "file", "file")
    if isinstance(file_value, UrlSource):
        return FileSource(file=file_value)
    if not isinstance(file_value, Mapping):
        raise InvalidSource(f"Expected 'file' to be an object, got {type(file_value).__name__}")
    return FileSource(file=UrlSource(url=_require_url(_require_key(file_value, "url", "file.url"))))


def coerce_source(source: Any) -> ImageSource:
    """Turn a loosely shaped source into one of the tagged source variants.

    Mappings are checked for ``fields`` first, then ``file``, then ``url``;
    only the first matching shape is read.
    """
    if isinstance(source, (str, UrlSource, FileSource, FieldsSource)):
        return source
    if not isinstance(source, Mapping):
        raise InvalidSource(f"Unsupported image source type: {type(source).__name__}")
    if "fields" in source:
        fields = source["fields"]
        if isinstance(fields, FileSource):
            return FieldsSource(fields=fields)
        if not isinstance(fields, Mapping):
            raise InvalidSource(f"Expected 'fields' to be an object, got {type(fields).__name__}")
        try:
            return FieldsSource(fields=_coerce_file(fields))
        except InvalidSource as exc:
            raise InvalidSource(f"Invalid 'fields' in image source: {exc}") from exc
    if "file" in source:
        return _coerce_file(source)
    if "url" in source:
        return UrlSource(url=_require_url(source["url"]))
    raise InvalidSource("Image source must be a URL string or contain 'url', 'file.url' or 'fields.file.url'.")


def _raw_url(source: ImageSource) -> str:
    if isinstance(source, str):
        return _require_url(source)
    if isinstance(source, FieldsSource):
        return _raw_url(source.fields)
    if isinstance(source, FileSource):
        return _raw_url(source.file)
    if isinstance(source, UrlSource):
        return _require_url(source.url)
    raise InvalidSource(f"Unsupported image source type: {type(source).__name__}")


def get_image_src_url(source: ImageSource) -> str:
    """Return the base URL of ``source`` with ``https:`` added and any query removed."""
    url = _raw_url(coerce_source(source))
    if url.startswith(PROTOCOL_RELATIVE_PREFIX):
        url = HTTPS_SCHEME + url
    url = url.split("?", 1)[0]
    if not url:
        raise InvalidSource("Image URL is empty once its query is removed.")
    return url
