"""Prometheus metrics for seqkit operations.

Collects per-operation call count, error count and latency. Nothing is served
over the network; callers publish ``render_metrics()`` however they like.
"""
from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, Tuple, TypeVar

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

from seqkit.config import get_settings

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Prometheus metric names as constants
OPERATION_COUNT_NAME = "seqkit_operation_total"
OPERATION_LATENCY_NAME = "seqkit_operation_duration_seconds"
OPERATION_ERROR_COUNT_NAME = "seqkit_operation_errors_total"

# -----------------------------------------------------------------------------
# Metric objects
# -----------------------------------------------------------------------------
# Prometheus metrics objects (these are global and thread-safe)
# OPERATION_COUNT: every call, labeled by operation name and outcome ("ok"/"error").
OPERATION_COUNT = Counter(
    name=OPERATION_COUNT_NAME,
    documentation="Total seqkit operation calls",
    labelnames=["operation", "status"],
)

# OPERATION_LATENCY: wall time per call in seconds (successful or not).
OPERATION_LATENCY = Histogram(
    name=OPERATION_LATENCY_NAME,
    documentation="Operation latency in seconds",
    labelnames=["operation"],
)

# OPERATION_ERROR_COUNT: failed calls, labeled by the exception class name.
OPERATION_ERROR_COUNT = Counter(
    name=OPERATION_ERROR_COUNT_NAME,
    documentation="Total failed seqkit operation calls",
    labelnames=["operation", "error"],
)

# -----------------------------------------------------------------------------
# Decorator
# -----------------------------------------------------------------------------
# Wraps a public operation and:
# - Records the start time.
# - On return or raise, increments the call counter and observes the latency.
# - Re-raises every exception untouched.
def instrumented(operation: str) -> Callable[[F], F]:
    """Record call count, errors and latency for ``operation``."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if not get_settings().metrics_enabled:
                return func(*args, **kwargs)
            started_at = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                OPERATION_COUNT.labels(operation, "error").inc()
                OPERATION_ERROR_COUNT.labels(operation, type(exc).__name__).inc()
                raise
            else:
                OPERATION_COUNT.labels(operation, "ok").inc()
                return result
            finally:
                OPERATION_LATENCY.labels(operation).observe(time.perf_counter() - started_at)

        logger.debug("Instrumented operation %s", operation)
        return wrapper  # type: ignore[return-value]

    return decorator


# -----------------------------------------------------------------------------
# Exposition
# -----------------------------------------------------------------------------
def render_metrics(registry: CollectorRegistry = REGISTRY) -> Tuple[bytes, str]:
    """Return all metrics in the Prometheus plaintext exposition format,
    together with the content type to serve them under."""
    return generate_latest(registry), CONTENT_TYPE_LATEST
