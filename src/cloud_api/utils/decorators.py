"""Decorator utilities for cross-cutting concerns."""
import time
import logging
import functools
from typing import Any, Callable, TypeVar, cast

from cloud_api.errors import CloudApiError

# Setup logging
logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


def log_backend_call(operation: str) -> Callable[[F], F]:
    """Decorator to log the outcome and duration of a backend operation.

    Args:
        operation: Name logged for the call, e.g. "s3:PutObject"

    Returns:
        Decorator that wraps a synchronous adapter method
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except CloudApiError as e:
                # reported to the caller and logged by the error handler
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.info(f"{operation} rejected after {duration_ms:.1f}ms: {e.message}")
                raise
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.warning(f"{operation} failed after {duration_ms:.1f}ms: {str(e)}")
                raise
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.info(f"{operation} completed in {duration_ms:.1f}ms")
            return result
        return cast(F, wrapper)

    return decorator
