"""HTTP endpoint probe."""

import time

try:
    import httpx
except ImportError:
    httpx = None

from ..checks.check import Check
from ..utils.result import Result
from ..utils.status import State
from .base import critical, elapsed_ms, missing_library, safe_probe


def new_http_check(host: str, service: str, url: str, timeout: float = 5.0) -> Check:
    """
    Check that ``url`` answers a GET with HTTP 200.

    Args:
        host: Monitored entity identifier
        service: Check name
        url: Endpoint URL
        timeout: Request timeout in seconds

    Returns:
        Check: Metric is the response time in ms; critical on non-200 or error
    """
    @safe_probe(host, service)
    def get() -> Result:
        if httpx is None:
            return missing_library(host, service, "httpx")

        start = time.monotonic()
        try:
            with httpx.Client(timeout=timeout, follow_redirects=True) as client:
                response = client.get(url)
        except httpx.TimeoutException:
            return critical(host, service, "Request timeout", metric=elapsed_ms(start))
        except httpx.RequestError as e:
            return critical(host, service, f"Request error: {e}")

        response_time_ms = elapsed_ms(start)
        if response.status_code != 200:
            return critical(host, service, f"HTTP {response.status_code}", metric=response_time_ms)

        return Result(host=host, service=service, state=State.OK, metric=response_time_ms)

    return Check(get)
