#!/usr/bin/env python3
"""Decode source payloads and log what they contain.

Reads one JSON source body per file argument (or a single body from stdin
when no files are given) and logs a structured summary of each, including
its flow details and the keys of its type-specific data.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import structlog

from payment_sources.codec import decode_source
from payment_sources.config import settings
from payment_sources.domain import DecodeError, Source, SourceFlow
from payment_sources.logging import configure_logging


logger = structlog.get_logger()


def process_source(origin: str, source: Source) -> None:
    """Log a summary of a decoded source."""
    common = {
        "origin": origin,
        "source_id": source.id,
        "source_type": source.type,
        "status": source.status,
        "usage": source.usage,
        "livemode": source.livemode,
        "type_data_keys": sorted(source.type_data),
    }

    details = source.flow_details
    if source.flow == SourceFlow.REDIRECT and details is not None:
        logger.info(
            "redirect_source",
            **common,
            redirect_status=details.status,
            redirect_url=details.url,
        )
    elif source.flow == SourceFlow.RECEIVER and details is not None:
        logger.info(
            "receiver_source",
            **common,
            amount_charged=details.amount_charged,
            amount_received=details.amount_received,
            amount_returned=details.amount_returned,
        )
    elif source.flow == SourceFlow.VERIFICATION and details is not None:
        logger.info(
            "verification_source",
            **common,
            verification_status=details.status,
            attempts_remaining=details.attempts_remaining,
        )
    else:
        logger.info("source_without_flow", **common, flow=source.flow)


def inspect(origin: str, data: bytes) -> bool:
    """Decode and log one payload. Returns False if it could not be decoded."""
    try:
        source = decode_source(data)
    except DecodeError as e:
        logger.warning("source_rejected", origin=origin, reason=e.reason)
        return False
    process_source(origin, source)
    return True


def main(argv: list[str]) -> int:
    """Main entrypoint."""
    configure_logging(level=settings.log_level, log_format=settings.log_format)

    if not argv:
        return 0 if inspect("<stdin>", sys.stdin.buffer.read()) else 1

    failures = 0
    for path in argv:
        if not inspect(path, Path(path).read_bytes()):
            failures += 1

    logger.info("inspection_complete", total=len(argv), failed=failures)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
