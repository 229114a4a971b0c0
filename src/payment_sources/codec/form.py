"""Form encoding of request parameters.

Keys follow the bracket convention used by the API: nested structures become
``owner[address][line1]``, maps become ``metadata[key]`` and lists become
``expand[]``. Empty values (``None``, ``""``, ``0``, empty collections) are
left out of the body.
"""

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from payment_sources.domain.params import Params, SourceObjectParams


HEADER_FIELDS = frozenset({"idempotency_key"})

# Maps whose entries are written at the top level of the form, without a prefix.
FLATTENED_FIELDS = frozenset({"type_data"})


def encode_params(params: Params) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for f in fields(params):
        if f.name in HEADER_FIELDS:
            continue
        value = getattr(params, f.name)
        if f.name in FLATTENED_FIELDS:
            for key, item in value.items():
                _encode_value(key, item, pairs)
            continue
        _encode_value(f.name, value, pairs)
    return pairs


def urlencode_params(params: Params) -> str:
    return urlencode(encode_params(params))


def request_headers(params: Params) -> dict[str, str]:
    headers: dict[str, str] = {}
    if params.idempotency_key:
        headers["Idempotency-Key"] = params.idempotency_key
    return headers


def source_form(params: SourceObjectParams) -> tuple[str, dict[str, str]]:
    """Return the form body and headers for a source creation request."""
    return urlencode_params(params), request_headers(params)


def _encode_value(key: str, value: Any, pairs: list[tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Enum):
        pairs.append((key, str(value.value)))
    elif isinstance(value, bool):
        pairs.append((key, "true" if value else "false"))
    elif isinstance(value, str):
        if value:
            pairs.append((key, value))
    elif isinstance(value, int):
        if value != 0:
            pairs.append((key, str(value)))
    elif isinstance(value, dict):
        for item_key, item in value.items():
            _encode_value(f"{key}[{item_key}]", item, pairs)
    elif isinstance(value, list | tuple):
        for item in value:
            _encode_value(f"{key}[]", item, pairs)
    elif is_dataclass(value):
        for f in fields(value):
            _encode_value(f"{key}[{f.name}]", getattr(value, f.name), pairs)
    else:
        pairs.append((key, str(value)))
