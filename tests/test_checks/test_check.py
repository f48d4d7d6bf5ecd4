"""Tests for the fluent Check wrapper."""

import pytest

from checkchain.checks import decorators
from checkchain.checks.check import Check
from checkchain.utils.status import State


class TestCheck:
    """Test suite for Check."""

    def test_call_evaluates_producer(self, make_result, scripted_producer):
        """Test calling a check returns the producer's result."""
        base = make_result(State.OK, 3)
        producer = scripted_producer(base)

        assert Check(producer)() is base
        assert producer.calls == 1

    def test_requires_callable(self):
        """Test non-callables are rejected."""
        with pytest.raises(TypeError):
            Check("not a producer")

    def test_methods_return_new_checks(self, make_result, scripted_producer):
        """Test decorating leaves the original check unchanged."""
        check = Check(scripted_producer(make_result(State.OK, 3)))
        tagged = check.tags("a")

        assert isinstance(tagged, Check)
        assert tagged is not check
        assert check().tags == ()
        assert tagged().tags == ("a",)

    def test_full_chain(self, make_result, scripted_producer, monkeypatch):
        """Test a chain built with every decorator."""
        monkeypatch.setattr(decorators.time, "sleep", lambda seconds: None)
        producer = scripted_producer(
            make_result(State.OK, 120, host="db1", service="mysql-port"),
            make_result(State.OK, 40, host="db1", service="mysql-port"),
        )

        check = (
            Check(producer)
            .warning_if_greater_than(100)
            .critical_if_greater_than(1000)
            .warning_if_less_than(0)
            .critical_if_less_than(-1)
            .retry(3, 1.0)
            .ttl(60)
            .attributes({"team": "data"})
            .tags("database", "tcp")
        )
        result = check()

        assert producer.calls == 2
        assert result.state is State.OK
        assert result.metric == 40.0
        assert result.ttl == 60.0
        assert result.attributes == {"team": "data"}
        assert result.tags == ("database", "tcp")

    def test_check_accepted_as_producer(self, make_result, scripted_producer):
        """Test a Check can be passed to the plain decorator functions."""
        check = Check(scripted_producer(make_result(State.OK, 99)))

        assert decorators.critical_if_greater_than(check, 90)().state is State.CRITICAL

    def test_retry_validation_at_build_time(self, make_result, scripted_producer):
        """Test invalid retry configuration fails when chaining."""
        with pytest.raises(ValueError):
            Check(scripted_producer(make_result())).retry(0, 1)
