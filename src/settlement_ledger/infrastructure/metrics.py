import time
from collections.abc import Callable
from functools import wraps

from prometheus_client import Counter, Histogram


SETTLEMENTS_TOTAL = Counter(
    "settlements_total",
    "Total number of settlement attempts",
    ["payment_method", "status", "error_code"],
)

SETTLED_AMOUNT_TOTAL = Counter(
    "settled_amount_total",
    "Total effective amount moved between accounts, in smallest currency units",
    ["payment_method"],
)

SETTLEMENT_DURATION_SECONDS = Histogram(
    "settlement_duration_seconds",
    "Settlement processing duration",
    buckets=[0.0001, 0.00025, 0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05],
)


def track_settlement_duration[**P, R](
    func: Callable[P, R],
) -> Callable[P, R]:
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            duration = time.perf_counter() - start
            SETTLEMENT_DURATION_SECONDS.observe(duration)

    return wrapper
