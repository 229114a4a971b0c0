"""Payment source resource model and decoder."""

from payment_sources.codec import decode_source, decode_sources, encode_params, urlencode_params
from payment_sources.domain import DecodeError, Source, SourceObjectParams


__all__ = [
    "DecodeError",
    "Source",
    "SourceObjectParams",
    "decode_source",
    "decode_sources",
    "encode_params",
    "urlencode_params",
]
