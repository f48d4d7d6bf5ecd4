"""Generic check built from a metric function and a state classifier."""

import logging
from typing import Callable, Optional, Tuple, Union

from ..utils.result import Result
from ..utils.status import State
from .check import Check


logger = logging.getLogger(__name__)

# Obtains a metric value and an optional failure.
MetricFunction = Callable[[], Tuple[float, Optional[BaseException]]]

# Classifies (value, failure) into a state label and a description.
StateFunction = Callable[[float, Optional[BaseException]], Tuple[Union[State, str], str]]


def new_generic_check(
    host: str,
    service: str,
    metric_func: MetricFunction,
    state_func: StateFunction
) -> Check:
    """
    Build a check from "how to measure" and "how to judge".

    The metric function is called once per evaluation and its (value, error)
    pair is handed to the state function once. The value is recorded as the
    result metric even when an error is reported. A metric function that
    raises instead of returning its error is treated as returning
    ``(0.0, error)``.

    Args:
        host: Monitored entity identifier
        service: Check name
        metric_func: Returns ``(value, error_or_None)``
        state_func: Returns ``(state, description)`` for a value and error

    Returns:
        Check: Composable check
    """
    def evaluate() -> Result:
        try:
            value, error = metric_func()
        except Exception as e:
            logger.debug(f"{host}/{service}: metric function raised {e!r}")
            value, error = 0.0, e

        state, description = state_func(value, error)
        return Result(
            host=host,
            service=service,
            state=State.from_label(state),
            metric=value,
            description=description or "",
        )

    return Check(evaluate)


def critical_if_error(value: float, error: Optional[BaseException]) -> Tuple[State, str]:
    """Default classifier: critical with the error message, otherwise ok."""
    if error is not None:
        return State.CRITICAL, str(error)
    return State.OK, ""
