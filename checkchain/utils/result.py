"""Result record produced by every check evaluation."""

import dataclasses
import numbers
import types
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .status import State


def require_number(name: str, value: Any) -> float:
    # bool is a numbers.Real subclass but never a meaningful measurement
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}: {value!r}")
    return float(value)


@dataclass(frozen=True)
class Result:
    """Outcome of one check evaluation.

    Results are values: decorators derive new instances with :meth:`replace`
    and never mutate the Result returned by the producer they wrap.
    """

    host: str
    service: str
    state: State
    metric: float = 0.0
    description: str = ""
    tags: Tuple[str, ...] = ()
    attributes: Mapping[str, str] = field(default_factory=dict)
    ttl: Optional[float] = None

    def __post_init__(self):
        """Normalize state, metric, tags, attributes and TTL."""
        object.__setattr__(self, "state", State.from_label(self.state))
        object.__setattr__(self, "metric", require_number("metric", self.metric))
        object.__setattr__(self, "tags", tuple(self.tags))
        # Read-only copy, never the caller's mapping
        object.__setattr__(self, "attributes", types.MappingProxyType(dict(self.attributes)))
        if self.ttl is not None:
            object.__setattr__(self, "ttl", require_number("ttl", self.ttl))

    def __hash__(self) -> int:
        return hash((
            self.host,
            self.service,
            self.state,
            self.metric,
            self.description,
            self.tags,
            tuple(sorted(self.attributes.items())),
            self.ttl,
        ))

    def replace(self, **changes: Any) -> "Result":
        """
        Return a copy of this result with the given fields replaced.

        Args:
            **changes: Field values to override

        Returns:
            Result: New result; this instance is left untouched
        """
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """
        Render the result as a JSON-serializable dictionary.

        Returns:
            Dict[str, Any]: Result fields with the state rendered as its label
        """
        return {
            "host": self.host,
            "service": self.service,
            "state": self.state.value,
            "metric": self.metric,
            "description": self.description,
            "tags": list(self.tags),
            "attributes": dict(self.attributes),
            "ttl": self.ttl,
        }


# A zero-argument callable yielding exactly one Result; the unit of composition.
Producer = Callable[[], Result]
