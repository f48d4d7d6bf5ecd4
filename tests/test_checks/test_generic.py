"""Tests for the generic check constructor."""

import pytest

from checkchain.checks.check import Check
from checkchain.checks.generic import critical_if_error, new_generic_check
from checkchain.utils.status import State


class TestGenericCheck:
    """Test suite for new_generic_check."""

    def test_failure_with_default_classifier(self):
        """Test (0, timeout) becomes critical with the error message."""
        check = new_generic_check(
            "web1", "disk", lambda: (0, TimeoutError("timeout")), critical_if_error
        )

        result = check()

        assert result.state is State.CRITICAL
        assert result.description == "timeout"
        assert result.metric == 0.0
        assert result.host == "web1"
        assert result.service == "disk"

    def test_success_with_default_classifier(self):
        """Test (42, None) becomes ok with the metric and no description."""
        result = new_generic_check("web1", "disk", lambda: (42, None), critical_if_error)()

        assert result.state is State.OK
        assert result.metric == 42.0
        assert result.description == ""

    def test_metric_recorded_alongside_failure(self):
        """Test the last known value is kept when an error is reported."""
        result = new_generic_check(
            "mq1", "depth", lambda: (17.5, ConnectionError("broker gone")), critical_if_error
        )()

        assert result.state is State.CRITICAL
        assert result.metric == 17.5

    def test_each_function_called_once(self):
        """Test metric and state functions run exactly once per evaluation."""
        calls = {"metric": 0, "state": 0}

        def metric():
            calls["metric"] += 1
            return 3.0, None

        def state(value, error):
            calls["state"] += 1
            assert (value, error) == (3.0, None)
            return "warning", "three is a crowd"

        check = new_generic_check("web1", "users", metric, state)
        assert calls == {"metric": 0, "state": 0}

        result = check()

        assert calls == {"metric": 1, "state": 1}
        assert result.state is State.WARNING
        assert result.description == "three is a crowd"

    def test_raising_metric_function(self):
        """Test a raising metric function is treated as (0.0, error)."""
        seen = []

        def metric():
            raise OSError("disk unreadable")

        def state(value, error):
            seen.append((value, error))
            return critical_if_error(value, error)

        result = new_generic_check("web1", "disk", metric, state)()

        assert result.state is State.CRITICAL
        assert result.description == "disk unreadable"
        assert seen[0][0] == 0.0
        assert isinstance(seen[0][1], OSError)

    def test_unknown_state_label(self):
        """Test a classifier returning an unknown label is a contract violation."""
        check = new_generic_check("web1", "disk", lambda: (1, None), lambda v, e: ("meh", ""))

        with pytest.raises(ValueError):
            check()

    def test_composes_with_decorators(self):
        """Test generic checks chain like any other check."""
        check = new_generic_check("web1", "cpu", lambda: (97, None), critical_if_error)

        assert isinstance(check, Check)
        assert check.warning_if_greater_than(80).critical_if_greater_than(95)().state is State.CRITICAL


def test_critical_if_error():
    """Test the default classifier."""
    assert critical_if_error(1.0, None) == (State.OK, "")
    assert critical_if_error(1.0, RuntimeError("boom")) == (State.CRITICAL, "boom")
