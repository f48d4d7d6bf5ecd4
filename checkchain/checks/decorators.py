"""Producer decorators: tagging, attributes, TTL, retry and thresholds.

Every function here takes a producer and returns a new producer that calls
the wrapped one and derives its own Result from the returned one. Nothing is
evaluated until the outermost producer is called.

Threshold decorators only ever escalate: a result that is already critical
passes through untouched, so stacking ``warning_if_greater_than(p, 80)``
inside ``critical_if_greater_than(..., 95)`` can never let the looser check
overwrite the stricter one.
"""

import logging
import operator
import time
from typing import Callable, Mapping, Sequence

from ..utils.result import Producer, Result, require_number
from ..utils.status import State


logger = logging.getLogger(__name__)


def with_tags(producer: Producer, tags: Sequence[str]) -> Producer:
    """
    Replace the tags of every result produced by ``producer``.

    Args:
        producer: Producer to wrap
        tags: Ordered tags; previous tags are discarded, not merged

    Returns:
        Producer: Wrapped producer
    """
    tags = tuple(tags)

    def tagged() -> Result:
        return producer().replace(tags=tags)

    return tagged


def with_attributes(producer: Producer, attributes: Mapping[str, str]) -> Producer:
    """
    Replace the attributes of every result produced by ``producer``.

    Args:
        producer: Producer to wrap
        attributes: Attribute mapping; previous attributes are discarded

    Returns:
        Producer: Wrapped producer
    """
    attributes = dict(attributes)

    def with_attrs() -> Result:
        return producer().replace(attributes=dict(attributes))

    return with_attrs


def with_ttl(producer: Producer, ttl: float) -> Producer:
    """
    Replace the TTL (seconds) of every result produced by ``producer``.

    Args:
        producer: Producer to wrap
        ttl: Time-to-live in seconds

    Returns:
        Producer: Wrapped producer
    """
    ttl = require_number("ttl", ttl)

    def with_time_to_live() -> Result:
        return producer().replace(ttl=ttl)

    return with_time_to_live


def retry(producer: Producer, times: int, sleep: float) -> Producer:
    """
    Call ``producer`` up to ``times`` times until a result is ok.

    Attempts run sequentially on the calling thread. Only ``ok`` stops the
    loop early; ``warning`` is retried exactly like ``critical``. Between two
    attempts the thread blocks for ``sleep`` seconds; there is no sleep after
    the last attempt.

    Args:
        producer: Producer to wrap
        times: Maximum number of attempts, at least 1
        sleep: Seconds to wait between attempts, at least 0

    Returns:
        Producer: Wrapped producer returning the first ok result, or the
        result of the final attempt

    Raises:
        ValueError: If ``times`` is below 1 or ``sleep`` is negative
    """
    if isinstance(times, bool) or not isinstance(times, int) or times < 1:
        raise ValueError(f"retry times must be an integer >= 1, got {times!r}")
    sleep = require_number("sleep", sleep)
    if sleep < 0:
        raise ValueError(f"retry sleep must be >= 0, got {sleep!r}")

    def retried() -> Result:
        for attempt in range(1, times + 1):
            result = producer()
            if result.state is State.OK or attempt == times:
                return result

            logger.warning(
                f"Attempt {attempt}/{times} for {result.host}/{result.service} "
                f"returned {result.state.value}. Retrying in {sleep:.2f}s..."
            )
            time.sleep(sleep)

    return retried


def critical_if_less_than(producer: Producer, threshold: float) -> Producer:
    """Escalate to critical when the metric is strictly below ``threshold``."""
    return _threshold(producer, threshold, operator.lt, State.CRITICAL)


def critical_if_greater_than(producer: Producer, threshold: float) -> Producer:
    """Escalate to critical when the metric is strictly above ``threshold``."""
    return _threshold(producer, threshold, operator.gt, State.CRITICAL)


def warning_if_less_than(producer: Producer, threshold: float) -> Producer:
    """Escalate to warning when the metric is strictly below ``threshold``."""
    return _threshold(producer, threshold, operator.lt, State.WARNING)


def warning_if_greater_than(producer: Producer, threshold: float) -> Producer:
    """Escalate to warning when the metric is strictly above ``threshold``."""
    return _threshold(producer, threshold, operator.gt, State.WARNING)


def _threshold(
    producer: Producer,
    threshold: float,
    compare: Callable[[float, float], bool],
    target: State
) -> Producer:
    """
    Build a threshold decorator.

    Args:
        producer: Producer to wrap
        threshold: Value the metric is compared against
        compare: ``operator.lt`` or ``operator.gt``, called as compare(metric, threshold)
        target: State applied when the comparison holds

    Returns:
        Producer: Wrapped producer

    Raises:
        TypeError: If ``threshold`` is not a real number
    """
    threshold = require_number("threshold", threshold)

    def classified() -> Result:
        result = producer()
        if result.state is State.CRITICAL:
            return result
        if not compare(result.metric, threshold):
            return result

        state = result.state.escalate(target)
        if state is result.state:
            return result

        logger.debug(
            f"{result.host}/{result.service}: metric {result.metric} "
            f"{compare.__name__} {threshold}, {result.state.value} -> {state.value}"
        )
        return result.replace(state=state)

    return classified
