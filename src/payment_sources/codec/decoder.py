import json
from collections.abc import Iterable
from typing import Any

import structlog
from pydantic import TypeAdapter, ValidationError

from payment_sources.config import settings
from payment_sources.domain.exceptions import DecodeError
from payment_sources.domain.models import OpenEnum, Source
from payment_sources.infrastructure.metrics import (
    SOURCE_DECODE_TOTAL,
    SOURCE_TYPE_DATA_TOTAL,
    UNRECOGNIZED_ENUM_VALUES_TOTAL,
    track_decode_duration,
)


logger = structlog.get_logger()

_source_adapter: TypeAdapter[Source] = TypeAdapter(Source)


@track_decode_duration
def decode_source(data: bytes | str) -> Source:
    """Decode one source payload, including its type-specific hash.

    The type-specific data lives under a top-level key equal to the source's
    own ``type``, which no fixed schema can declare. The payload is therefore
    decoded twice: once against the ``Source`` schema and once as a plain
    JSON tree, and the value of ``type`` from the first pass picks the hash
    out of the second. A missing hash, or one that is not a JSON object,
    leaves ``type_data`` empty.

    Raises:
        DecodeError: If the payload is not valid JSON, is not an object, or a
            fixed field has the wrong JSON type.
    """
    try:
        source = _source_adapter.validate_json(data)
    except ValidationError as e:
        _record_decode("error")
        logger.warning("source_decode_failed", stage="schema", error_count=e.error_count())
        raise DecodeError(_describe_validation_error(e)) from e

    try:
        raw = json.loads(data)
    except ValueError as e:
        _record_decode("error")
        logger.warning("source_decode_failed", stage="generic", error=str(e))
        raise DecodeError(str(e)) from e

    source.type_data = _extract_type_data(raw, source.type)
    _report_unrecognized_enums(source)
    _record_decode("success")

    logger.debug(
        "source_decoded",
        source_id=source.id,
        source_type=source.type,
        flow=source.flow,
        status=source.status,
        type_data_keys=len(source.type_data),
    )
    return source


def decode_sources(items: Iterable[bytes | str]) -> list[Source]:
    """Decode several source payloads, stopping at the first bad one."""
    sources: list[Source] = []
    for index, item in enumerate(items):
        try:
            sources.append(decode_source(item))
        except DecodeError as e:
            raise DecodeError(e.reason, index=index) from e
    return sources


def _extract_type_data(raw: Any, type_name: str | None) -> dict[str, Any]:
    if not isinstance(raw, dict) or type_name is None or type_name not in raw:
        _record_type_data("absent")
        return {}

    nested = raw[type_name]
    if not isinstance(nested, dict):
        _record_type_data("not_object")
        return {}

    _record_type_data("extracted")
    return nested


def _unrecognized_enums(source: Source) -> list[tuple[str, OpenEnum]]:
    candidates: list[tuple[str, Any]] = [
        ("status", source.status),
        ("flow", source.flow),
        ("usage", source.usage),
    ]
    if source.redirect is not None:
        candidates.append(("redirect.status", source.redirect.status))
    if source.receiver is not None:
        candidates.append(("receiver.refund_attributes_method", source.receiver.refund_attributes_method))
        candidates.append(("receiver.refund_attributes_status", source.receiver.refund_attributes_status))
    if source.verification is not None:
        candidates.append(("verification.status", source.verification.status))

    return [
        (field_name, value)
        for field_name, value in candidates
        if isinstance(value, OpenEnum) and not value.is_recognized
    ]


def _report_unrecognized_enums(source: Source) -> None:
    for field_name, value in _unrecognized_enums(source):
        if settings.log_unrecognized_enums:
            logger.warning(
                "unrecognized_enum_value",
                source_id=source.id,
                field=field_name,
                value=str(value),
            )
        if settings.metrics_enabled:
            UNRECOGNIZED_ENUM_VALUES_TOTAL.labels(field=field_name).inc()


def _record_decode(result: str) -> None:
    if settings.metrics_enabled:
        SOURCE_DECODE_TOTAL.labels(result=result).inc()


def _record_type_data(outcome: str) -> None:
    if settings.metrics_enabled:
        SOURCE_TYPE_DATA_TOTAL.labels(outcome=outcome).inc()


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors(include_url=False)[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]
