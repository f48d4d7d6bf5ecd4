"""Shared pytest configuration and fixtures."""

import logging
import pytest

from checkchain.utils.result import Result
from checkchain.utils.status import State


@pytest.fixture
def logger():
    """Create logger for tests."""
    logger = logging.getLogger("checkchain.test")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def make_result():
    """Factory for results with sensible defaults."""
    def factory(state=State.OK, metric=0.0, **fields):
        fields.setdefault("host", "web1")
        fields.setdefault("service", "latency")
        return Result(state=state, metric=metric, **fields)
    return factory


@pytest.fixture
def scripted_producer():
    """
    Factory for producers that return the given results in order.

    The last result repeats once the script is exhausted. The producer keeps
    the number of times it was called in ``.calls``.
    """
    def factory(*results):
        script = list(results)

        def producer():
            producer.calls += 1
            index = min(producer.calls, len(script)) - 1
            return script[index]

        producer.calls = 0
        return producer
    return factory


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logger() on the package logger so caplog keeps working."""
    yield
    package_logger = logging.getLogger("checkchain")
    package_logger.handlers = []
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
