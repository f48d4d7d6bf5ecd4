"""ICMP echo probe."""

import logging

try:
    import icmplib
except ImportError:
    icmplib = None

from ..checks.check import Check
from ..utils.result import Result
from ..utils.status import State
from .base import critical, missing_library, safe_probe


logger = logging.getLogger(__name__)

MAX_PING_TIME = 1.0


def new_ping_check(host: str, service: str, ip: str, timeout: float = MAX_PING_TIME) -> Check:
    """
    Check that ``ip`` answers a single ICMP echo request.

    Uses unprivileged (datagram) ICMP sockets, so the process does not need
    root as long as the kernel allows it (``net.ipv4.ping_group_range``).

    Args:
        host: Monitored entity identifier
        service: Check name
        ip: Address or hostname to ping
        timeout: Seconds to wait for the reply

    Returns:
        Check: ok with the round-trip time in ms, critical otherwise
    """
    @safe_probe(host, service)
    def ping() -> Result:
        if icmplib is None:
            return missing_library(host, service, "icmplib")

        try:
            reply = icmplib.ping(ip, count=1, timeout=timeout, privileged=False)
        except icmplib.ICMPLibError as e:
            return critical(host, service, str(e) or e.__class__.__name__)

        if not reply.is_alive:
            return critical(host, service, f"No reply from {ip} within {timeout:g}s")

        logger.debug(f"Ping {ip}: {reply.avg_rtt:.2f}ms")
        return Result(host=host, service=service, state=State.OK, metric=reply.avg_rtt)

    return Check(ping)
