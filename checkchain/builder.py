"""Build check chains from configuration."""

import logging
from typing import Dict, List

from .checks.check import Check
from .config.models import (
    CheckConfig,
    HTTPProbeConfig,
    MySQLProbeConfig,
    PingProbeConfig,
    PostgresProbeConfig,
    RabbitMQProbeConfig,
    TCPProbeConfig,
)
from .probes.database import new_mysql_connection_check, new_postgres_connection_check
from .probes.http import new_http_check
from .probes.ping import new_ping_check
from .probes.rabbitmq import new_rabbitmq_queue_len_check
from .probes.tcp import new_tcp_port_check


logger = logging.getLogger(__name__)


def build_probe(config: CheckConfig) -> Check:
    """
    Create the undecorated leaf probe for a check definition.

    Args:
        config: Check definition

    Returns:
        Check: Base check

    Raises:
        ValueError: If the probe kind is not supported
    """
    probe = config.probe
    host, service = config.host, config.service

    if isinstance(probe, PingProbeConfig):
        return new_ping_check(host, service, probe.ip, probe.timeout)
    if isinstance(probe, TCPProbeConfig):
        return new_tcp_port_check(host, service, probe.ip, probe.port, probe.timeout)
    if isinstance(probe, RabbitMQProbeConfig):
        return new_rabbitmq_queue_len_check(host, service, probe.amqp_uri, probe.queue, probe.max_len)
    if isinstance(probe, MySQLProbeConfig):
        return new_mysql_connection_check(host, service, probe.uri)
    if isinstance(probe, PostgresProbeConfig):
        return new_postgres_connection_check(host, service, probe.uri)
    if isinstance(probe, HTTPProbeConfig):
        return new_http_check(host, service, probe.url, probe.timeout)

    raise ValueError(f"Unsupported probe kind: {probe.kind}")


def decorate(check: Check, config: CheckConfig) -> Check:
    """
    Apply the decorations of a check definition.

    Order, innermost first: warning thresholds, critical thresholds, retry,
    TTL, attributes, tags. Retry sits outside the thresholds so a threshold
    breach is retried like a probe failure.

    Args:
        check: Base check
        config: Check definition

    Returns:
        Check: Decorated check
    """
    thresholds = config.thresholds
    if thresholds is not None:
        if thresholds.warning_above is not None:
            check = check.warning_if_greater_than(thresholds.warning_above)
        if thresholds.warning_below is not None:
            check = check.warning_if_less_than(thresholds.warning_below)
        if thresholds.critical_above is not None:
            check = check.critical_if_greater_than(thresholds.critical_above)
        if thresholds.critical_below is not None:
            check = check.critical_if_less_than(thresholds.critical_below)

    if config.retry is not None:
        check = check.retry(config.retry.times, config.retry.sleep)
    if config.ttl is not None:
        check = check.ttl(config.ttl)
    if config.attributes:
        check = check.attributes(config.attributes)
    if config.tags:
        check = check.tags(*config.tags)

    return check


def build_check(config: CheckConfig) -> Check:
    """Build the full chain for one check definition."""
    logger.debug(f"Building check {config.name} ({config.probe.kind})")
    return decorate(build_probe(config), config)


def build_checks(configs: List[CheckConfig]) -> Dict[str, Check]:
    """
    Build every configured check.

    Args:
        configs: Check definitions

    Returns:
        Dict[str, Check]: Checks keyed by name, in configuration order
    """
    return {config.name: build_check(config) for config in configs}
