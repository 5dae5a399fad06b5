"""Public API for contentful-image."""

from __future__ import annotations

import logging
from typing import Any, Dict

from contentful_image.core.contracts import ImageSource
from contentful_image.core.query import OptionsInput, get_image_query, iter_options
from contentful_image.core.source import get_image_src_url

logger = logging.getLogger(__name__)


def _merge_options(options: OptionsInput, overrides: Dict[str, Any]) -> OptionsInput:
    if not overrides:
        return options
    merged: Dict[str, Any] = dict(iter_options(options))
    merged.update(overrides)
    return merged


def contentful_image(
    source: ImageSource,
    options: OptionsInput = None,
    *,
    strict: bool = False,
    **option_kwargs: Any,
) -> str:
    """Return a Contentful Images API URL for ``source`` with ``options`` applied.

    ``source`` may be a URL string, an asset (``fields.file.url``), its
    fields (``file.url``) or its file (``url``), either as plain mappings or
    as the source dataclasses. Options can be given as ``ImageOptions``, a
    mapping, keyword arguments, or a mix; keywords win over ``options``.

    >>> contentful_image("//images.ctfassets.net/a/b/c.png?h=1", format="png/png8", width=400)
    'https://images.ctfassets.net/a/b/c.png?fm=png&fl=png8&w=400'
    """
    url = get_image_src_url(source)
    query = get_image_query(_merge_options(options, option_kwargs), strict=strict)
    result = f"{url}?{query}" if query else url
    logger.debug("Built image URL %s", result)
    return result
