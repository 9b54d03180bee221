# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Unit tests for the assertion chain, scopes and continuation objects."""

from __future__ import annotations

import logging
from datetime import timedelta

import pytest

from fluent_temporal import should, should_duration
from fluent_temporal.exceptions import TemporalAssertionError
from fluent_temporal.execution import (
    AndConstraint,
    AndWhichConstraint,
    AssertionChain,
    assertion_scope,
    current_scope,
)

pytestmark = pytest.mark.unit


def test_passing_step_does_not_render_message() -> None:
    calls: list[str] = []

    def template() -> str:
        calls.append("rendered")
        return "never"

    chain = AssertionChain()
    _ = chain.because().for_condition(True).fail_with(template)
    assert calls == []
    assert chain.succeeded


def test_failing_step_raises_outside_scope() -> None:
    chain = AssertionChain(identifier="duration")
    with pytest.raises(TemporalAssertionError, match="Expected duration to be fine"):
        _ = chain.because().for_condition(False).fail_with("Expected {context} to be fine{reason}.")


def test_reason_is_rendered_with_arguments() -> None:
    chain = AssertionChain("elapsed")
    with pytest.raises(TemporalAssertionError) as excinfo:
        _ = chain.because("{0} retries ran", 3).for_condition(False).fail_with("Expected {context} to pass{reason}.")
    assert str(excinfo.value) == "Expected elapsed to pass because 3 retries ran."


def test_step_reports_at_most_one_failure() -> None:
    with pytest.raises(TemporalAssertionError) as excinfo, assertion_scope():
        chain = AssertionChain.get_or_create()
        _ = chain.because().for_condition(False).fail_with("first").for_condition(False).fail_with("second")
        assert not chain.succeeded
    assert excinfo.value.failures == ("first",)


def test_because_starts_a_new_step() -> None:
    with pytest.raises(TemporalAssertionError) as excinfo, assertion_scope():
        chain = AssertionChain.get_or_create()
        _ = chain.because().for_condition(False).fail_with("first")
        _ = chain.because().for_condition(False).fail_with("second")
        assert chain.failures == ("first", "second")
    assert excinfo.value.failures == ("first", "second")


def test_with_expectation_prefixes_failures_with_separate_arguments() -> None:
    chain = AssertionChain(identifier="duration")

    def verify(inner: AssertionChain) -> None:
        _ = inner.for_condition(False).fail_with(", but found {0}.", 2)

    with pytest.raises(TemporalAssertionError) as excinfo:
        _ = chain.because().with_expectation("Expected {context} to have {0} hours{reason}", 3, then=verify)
    assert str(excinfo.value) == "Expected duration to have 3 hours, but found 2."


def test_with_expectation_is_cleared_afterwards() -> None:
    with pytest.raises(TemporalAssertionError) as excinfo, assertion_scope():
        chain = AssertionChain.get_or_create()
        _ = chain.because().with_expectation("prefix ", then=lambda inner: None)
        _ = chain.because().for_condition(False).fail_with("plain")
    assert excinfo.value.failures == ("plain",)


def test_scope_collects_failures_until_exit() -> None:
    with pytest.raises(TemporalAssertionError) as excinfo, assertion_scope():
        _ = should(timedelta(hours=2)).have_hours(3)
        _ = should(timedelta(minutes=5)).have_minutes(6)
    assert excinfo.value.failures == (
        "Expected duration to have 3 hours, but found 2.",
        "Expected duration to have 6 minutes, but found 5.",
    )
    assert str(excinfo.value).count("\n") == 1


def test_scope_without_failures_does_not_raise() -> None:
    with assertion_scope() as scope:
        _ = should(timedelta(hours=2)).have_hours(2)
    assert not scope.has_failures
    assert current_scope() is None


def test_nested_scope_forwards_failures_to_parent() -> None:
    with pytest.raises(TemporalAssertionError) as excinfo, assertion_scope() as outer:
        with assertion_scope() as inner:
            _ = should(timedelta(hours=2)).have_hours(1)
        assert inner.failures == ("Expected duration to have 1 hours, but found 2.",)
        assert outer.failures == inner.failures
    assert len(excinfo.value.failures) == 1


def test_scope_name_becomes_subject_name() -> None:
    with pytest.raises(TemporalAssertionError) as excinfo, assertion_scope("timeout"):
        _ = should(timedelta(hours=2)).be_negative()
    assert excinfo.value.failures == ("Expected timeout to be negative, but found 2:00:00.",)


def test_wrapper_used_after_its_scope_exits_raises() -> None:
    with assertion_scope() as scope:
        duration = should(timedelta(hours=2))
    assert scope.closed
    with pytest.raises(TemporalAssertionError) as excinfo:
        _ = duration.have_hours(3)
    assert excinfo.value.failures == ("Expected duration to have 3 hours, but found 2.",)
    assert not scope.has_failures


def test_wrapper_from_closed_scope_reports_to_active_scope() -> None:
    with assertion_scope():
        duration = should(timedelta(hours=2))
    with pytest.raises(TemporalAssertionError) as excinfo, assertion_scope() as active:
        _ = duration.have_hours(3)
        _ = duration.have_minutes(1)
        assert len(active.failures) == 2
    assert len(excinfo.value.failures) == 2


def test_scope_body_exception_propagates_and_discards_failures() -> None:
    with pytest.raises(KeyError), assertion_scope():
        _ = should(timedelta(hours=2)).have_hours(1)
        raise KeyError("boom")
    assert current_scope() is None


def test_and_constraint_returns_same_wrapper() -> None:
    assertions = should(timedelta(days=1, hours=2))
    constraint = assertions.have_hours(2)
    assert isinstance(constraint, AndConstraint)
    assert constraint.and_ is assertions


def test_and_which_constraint_exposes_matched_value() -> None:
    constraint = AndWhichConstraint("parent", 42)
    assert constraint.and_ == "parent"
    assert constraint.which == 42


def test_chained_assertions_share_the_chain() -> None:
    assertions = should_duration(timedelta(hours=26), name="window")
    with pytest.raises(TemporalAssertionError, match="Expected window to have 3 hours"):
        _ = assertions.have_days(1).and_.have_hours(3)
    assert assertions.chain.failures == ("Expected window to have 3 hours, but found 2.",)


def test_failures_are_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="fluent_temporal.chain")
    with pytest.raises(TemporalAssertionError), assertion_scope():
        _ = should(timedelta(hours=2), name="elapsed").have_hours(1)
    records = [record for record in caplog.records if record.name == "fluent_temporal.chain"]
    failure = next(record for record in records if record.getMessage().startswith("Assertion failed"))
    assert getattr(failure, "component") == "chain"
    assert getattr(failure, "subject") == "elapsed"
    assert getattr(failure, "passed") is False
    assert getattr(failure, "failures") == ["Expected elapsed to have 1 hours, but found 2."]
