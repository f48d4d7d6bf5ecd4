"""TCP port reachability probe."""

import socket
import time

from ..checks.check import Check
from ..utils.result import Result
from ..utils.status import State
from .base import critical, elapsed_ms, safe_probe


def new_tcp_port_check(host: str, service: str, ip: str, port: int, timeout: float) -> Check:
    """
    Check that a TCP connection to ``ip:port`` can be opened.

    Args:
        host: Monitored entity identifier
        service: Check name
        ip: Address or hostname to connect to
        port: TCP port
        timeout: Connect timeout in seconds

    Returns:
        Check: ok with the connect time in ms, critical with the error otherwise
    """
    @safe_probe(host, service)
    def dial() -> Result:
        start = time.monotonic()
        try:
            conn = socket.create_connection((ip, port), timeout=timeout)
        except OSError as e:
            return critical(host, service, str(e) or e.__class__.__name__)

        conn.close()
        return Result(host=host, service=service, state=State.OK, metric=elapsed_ms(start))

    return Check(dial)
