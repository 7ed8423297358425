"""Performance measurement logging."""

import time
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import structlog


@contextmanager
def log_performance(
    logger: structlog.stdlib.BoundLogger, operation: str, **extra: Any
) -> Generator[None, None, None]:
    """Context manager that logs how long an outbound call took."""
    start = time.perf_counter()
    try:
        yield
    except Exception as exc:
        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
        logger.warning(
            "operation_failed",
            operation=operation,
            duration_ms=elapsed_ms,
            error_type=type(exc).__name__,
            **extra,
        )
        raise
    else:
        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
        logger.info(
            "operation_completed",
            operation=operation,
            duration_ms=elapsed_ms,
            **extra,
        )
