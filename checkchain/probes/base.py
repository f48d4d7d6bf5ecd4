"""Shared helpers for leaf probes."""

import logging
import time
from functools import wraps
from typing import Callable

from ..utils.result import Result
from ..utils.status import State


logger = logging.getLogger(__name__)


def safe_probe(host: str, service: str):
    """
    Decorator that keeps a probe body from raising.

    Any exception escaping the wrapped zero-argument function is logged and
    turned into a critical Result whose description carries the error, so
    every leaf probe honors the producer contract.

    Args:
        host: Host reported on the fallback result
        service: Service reported on the fallback result

    Returns:
        Decorator for a zero-argument probe body
    """
    def decorator(func: Callable[[], Result]) -> Callable[[], Result]:
        @wraps(func)
        def wrapper() -> Result:
            try:
                return func()
            except Exception as e:
                logger.error(f"Probe {host}/{service} failed: {e}", exc_info=True)
                return critical(host, service, f"Probe error: {e}")
        return wrapper
    return decorator


def critical(host: str, service: str, description: str, metric: float = 0.0) -> Result:
    """Build a critical result."""
    return Result(
        host=host,
        service=service,
        state=State.CRITICAL,
        metric=metric,
        description=description
    )


def missing_library(host: str, service: str, library: str) -> Result:
    """Build the critical result reported when a probe's client library is absent."""
    return critical(host, service, f"{library} library not installed")


def elapsed_ms(start: float) -> float:
    """Milliseconds elapsed since a ``time.monotonic()`` reading."""
    return (time.monotonic() - start) * 1000.0
