"""Build the Images API query string from image options."""

from __future__ import annotations

import logging
from dataclasses import fields, is_dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote

from .contracts import ImageOptions
from .errors import UnknownOption
from .options import OPTION_QUERY_KEYS, normalize_option_name
from .transformers import TRANSFORMERS
from .utils import stringify_value

logger = logging.getLogger(__name__)

QUERY_SEPARATOR = "&"
VALUE_SEPARATOR = "/"
_SAFE_VALUE_CHARS = ":"

OptionsInput = Union[ImageOptions, Mapping[str, Any], None]


def iter_options(options: OptionsInput) -> Iterator[Tuple[str, Any]]:
    """Yield ``(name, value)`` for every option entry in order, unset ones included."""
    if options is None:
        return
    if is_dataclass(options) and not isinstance(options, type):
        items = ((item.name, getattr(options, item.name)) for item in fields(options))
    elif isinstance(options, Mapping):
        items = iter(options.items())
    else:
        raise TypeError(f"Unsupported options type: {type(options)}")
    yield from items


def collect_options(options: OptionsInput) -> Dict[str, Tuple[str, Any]]:
    """Key option entries by normalized name, keeping the name as given.

    Spellings of the same option collapse into the slot of the first one
    and the last value wins.
    """
    collected: Dict[str, Tuple[str, Any]] = {}
    for raw_name, value in iter_options(options):
        collected[normalize_option_name(raw_name)] = (str(raw_name), value)
    return collected


def _option_pairs(name: str, value: Any, query_keys: Tuple[str, ...]) -> List[str]:
    text = stringify_value(name, value)
    transformer = TRANSFORMERS.get(name)
    if transformer is not None:
        text = transformer(text)
    values = text.split(VALUE_SEPARATOR)

    pairs: List[str] = []
    for index, key in enumerate(query_keys):
        part: Optional[str] = values[index] if index < len(values) else None
        if not key or not part:
            logger.debug("Dropping empty '%s' parameter for option '%s'.", key, name)
            continue
        pairs.append(f"{key}={quote(part, safe=_SAFE_VALUE_CHARS)}")
    return pairs


def get_image_query(options: OptionsInput, *, strict: bool = False) -> str:
    """Return the query string (without ``?``) for ``options``.

    Values are split on ``/`` and matched to the option's parameters by
    index, so ``format="jpg/progressive"`` gives ``fm=jpg&fl=progressive``
    while ``format="jpg"`` gives only ``fm=jpg``. Unknown option names are
    skipped unless ``strict`` is set, in which case ``UnknownOption`` is
    raised.
    """
    pairs: List[str] = []
    for name, (raw_name, value) in collect_options(options).items():
        if value is None:
            continue
        query_keys = OPTION_QUERY_KEYS.get(name)
        if query_keys is None:
            if strict:
                raise UnknownOption(raw_name)
            logger.warning("Ignoring unknown image option '%s'.", raw_name)
            continue
        pairs.extend(_option_pairs(name, value, query_keys))
    return QUERY_SEPARATOR.join(pairs)
