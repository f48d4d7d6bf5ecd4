"""Check state enumeration with severity ordering."""

from enum import Enum
from typing import Union


class State(Enum):
    """Outcome of a single check evaluation.

    Members are totally ordered by severity: OK < WARNING < CRITICAL.
    """

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def severity(self) -> int:
        """Numeric rank used for ordering (higher is worse)."""
        return _SEVERITY[self]

    def __lt__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self.severity >= other.severity

    def escalate(self, target: "State") -> "State":
        """
        Return the more severe of this state and ``target``.

        Args:
            target: State a classifier wants to apply

        Returns:
            State: ``target`` if it is worse than this state, otherwise this state
        """
        return max(self, target)

    @classmethod
    def from_label(cls, label: Union["State", str]) -> "State":
        """
        Parse a state label such as ``"ok"`` or ``"CRITICAL"``.

        Args:
            label: State member or case-insensitive label

        Returns:
            State: Matching state

        Raises:
            ValueError: If the label is not one of ok, warning, critical
        """
        if isinstance(label, State):
            return label
        try:
            return cls(str(label).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown state label: {label!r} (expected ok, warning or critical)"
            ) from None

    def to_exit_code(self) -> int:
        """
        Convert state to a Nagios-style process exit code.

        Returns:
            int: 0 for ok, 1 for warning, 2 for critical
        """
        return _SEVERITY[self]


_SEVERITY = {
    State.OK: 0,
    State.WARNING: 1,
    State.CRITICAL: 2,
}
