"""Fluent wrapper over a producer."""

from typing import Mapping

from ..utils.result import Producer, Result
from . import decorators


class Check:
    """
    A producer with chainable decorators.

    Calling a Check evaluates it and returns a Result. Every decorator method
    returns a new Check wrapping this one, so a chain reads outward from the
    base probe::

        check = (
            new_tcp_port_check("db1", "mysql-port", "10.0.0.5", 3306, 2.0)
            .warning_if_greater_than(200)
            .critical_if_greater_than(1000)
            .retry(3, 1.0)
            .tags("database", "tcp")
        )
        result = check()
    """

    def __init__(self, producer: Producer):
        """
        Initialize check.

        Args:
            producer: Zero-argument callable returning a Result
        """
        if not callable(producer):
            raise TypeError(f"producer must be callable, got {type(producer).__name__}")
        self._producer = producer

    def __call__(self) -> Result:
        return self._producer()

    def __repr__(self) -> str:
        return f"Check({self._producer!r})"

    def tags(self, *tags: str) -> "Check":
        return Check(decorators.with_tags(self._producer, tags))

    def attributes(self, attributes: Mapping[str, str]) -> "Check":
        return Check(decorators.with_attributes(self._producer, attributes))

    def ttl(self, ttl: float) -> "Check":
        return Check(decorators.with_ttl(self._producer, ttl))

    def retry(self, times: int, sleep: float) -> "Check":
        return Check(decorators.retry(self._producer, times, sleep))

    def critical_if_less_than(self, threshold: float) -> "Check":
        return Check(decorators.critical_if_less_than(self._producer, threshold))

    def critical_if_greater_than(self, threshold: float) -> "Check":
        return Check(decorators.critical_if_greater_than(self._producer, threshold))

    def warning_if_less_than(self, threshold: float) -> "Check":
        return Check(decorators.warning_if_less_than(self._producer, threshold))

    def warning_if_greater_than(self, threshold: float) -> "Check":
        return Check(decorators.warning_if_greater_than(self._producer, threshold))
