"""Codec layer - payload decoding and request encoding."""

from payment_sources.codec.decoder import decode_source, decode_sources
from payment_sources.codec.form import encode_params, request_headers, source_form, urlencode_params


__all__ = [
    "decode_source",
    "decode_sources",
    "encode_params",
    "request_headers",
    "source_form",
    "urlencode_params",
]
