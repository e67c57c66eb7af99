"""Elapsed-time logging for costing runs."""

import time
from contextlib import contextmanager

from recipe_costing.logging import get_logger, log_fields

logger = get_logger(__name__)

_TIMING_PREFIX = "[TIMING]"


def format_duration(ms: float) -> str:
    """Return human-readable duration: e.g. 12500 -> '12.5s', 0.4 -> '0.4ms'."""
    if ms >= 1000:
        return f"{ms / 1000:.1f}s"
    if ms >= 1:
        return f"{int(ms)}ms"
    return f"{ms:.1f}ms"


@contextmanager
def time_span(name: str, **extra: object):
    """Log how long the block took, with extra key=value fields."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s elapsed_ms=%.3f (%s) %s",
            _TIMING_PREFIX,
            name,
            elapsed_ms,
            format_duration(elapsed_ms),
            log_fields(**extra),
        )
