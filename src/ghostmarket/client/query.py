"""Query merging and query-string serialization."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel

Query = BaseModel | Mapping[str, Any]


def query_to_dict(query: Query | None) -> dict[str, Any]:
    """Convert a query model or mapping into a plain dict of explicit values.

    For models only the fields the caller actually set are kept, so unset
    fields never shadow endpoint defaults.
    """
    if query is None:
        return {}
    if isinstance(query, BaseModel):
        return query.model_dump(mode="json", exclude_unset=True)
    return dict(query)


def merge_query(
    defaults: Mapping[str, Any], overrides: Query | None = None
) -> dict[str, Any]:
    """Overlay ``overrides`` on ``defaults``, key by key.

    A key present in ``overrides`` replaces the default unless its value is
    ``None``, which keeps the default. Keys that only exist in ``overrides``
    are appended after the defaults, in their original order.
    """
    merged = dict(defaults)
    for key, value in query_to_dict(overrides).items():
        if value is not None:
            merged[key] = value
    return merged


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def stringify_query(query: Query | None) -> str:
    """Serialize a query into a URL-encoded query string.

    Keys keep their insertion order and ``None`` values are dropped. Booleans
    are written as ``true``/``false`` and sequences as repeated keys.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in query_to_dict(query).items():
        if value is None:
            continue
        if isinstance(value, list | tuple):
            pairs.extend((key, _encode_value(item)) for item in value if item is not None)
        else:
            pairs.append((key, _encode_value(value)))
    return urlencode(pairs)
