import time
from collections.abc import Callable
from functools import wraps

from prometheus_client import Counter, Histogram

from payment_sources.config import settings


SOURCE_DECODE_TOTAL = Counter(
    "source_decode_total",
    "Total number of source payloads decoded",
    ["result"],
)

SOURCE_TYPE_DATA_TOTAL = Counter(
    "source_type_data_total",
    "Outcome of type-specific payload extraction",
    ["outcome"],
)

UNRECOGNIZED_ENUM_VALUES_TOTAL = Counter(
    "source_unrecognized_enum_values_total",
    "Enum values received that this client does not know about",
    ["field"],
)

SOURCE_DECODE_DURATION_SECONDS = Histogram(
    "source_decode_duration_seconds",
    "Source payload decode duration",
    buckets=[0.0001, 0.00025, 0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.1],
)


def track_decode_duration[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        if not settings.metrics_enabled:
            return func(*args, **kwargs)
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            duration = time.perf_counter() - start
            SOURCE_DECODE_DURATION_SECONDS.observe(duration)

    return wrapper
