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

"""Unit tests for local date, time and date-time assertions."""

from __future__ import annotations

from datetime import date, datetime, time

import pytest

from fluent_temporal import IsoDayOfWeek, should, should_date, should_datetime, should_time
from fluent_temporal.exceptions import SubjectTypeError, TemporalAssertionError
from fluent_temporal.primitives import LocalDateAssertions, LocalDateTimeAssertions, LocalTimeAssertions

pytestmark = pytest.mark.unit

LEAP_DAY = date(2024, 2, 29)
AFTERNOON = time(13, 45, 30, 123_456)
LEAP_AFTERNOON = datetime.combine(LEAP_DAY, AFTERNOON)


def test_dispatch() -> None:
    assert isinstance(should(LEAP_DAY), LocalDateAssertions)
    assert isinstance(should(AFTERNOON), LocalTimeAssertions)
    assert isinstance(should(LEAP_AFTERNOON), LocalDateTimeAssertions)


def test_date_components() -> None:
    _ = (
        should(LEAP_DAY)
        .have_year(2024)
        .and_.have_month(2)
        .and_.have_day(29)
        .and_.have_day_of_week(IsoDayOfWeek.THURSDAY)
        .and_.have_day_of_week(4)
        .and_.have_day_of_year(60)
        .and_.not_have_day_of_week(IsoDayOfWeek.FRIDAY)
    )


def test_day_of_week_failure_uses_names() -> None:
    with pytest.raises(TemporalAssertionError) as excinfo:
        _ = should(LEAP_DAY).have_day_of_week(IsoDayOfWeek.MONDAY)
    assert str(excinfo.value) == "Expected date to have day of week MONDAY, but found THURSDAY."


def test_date_ordering_and_equality() -> None:
    _ = should(LEAP_DAY).be(date(2024, 2, 29)).and_.be_greater_than(date(2024, 2, 28))
    with pytest.raises(TemporalAssertionError) as excinfo:
        _ = should(LEAP_DAY).be_less_than(date(2024, 1, 1))
    assert str(excinfo.value) == "Expected date to be less than 2024-01-01, but found 2024-02-29."


def test_date_wrapper_rejects_datetimes() -> None:
    with pytest.raises(SubjectTypeError):
        _ = should_date(LEAP_AFTERNOON)


def test_time_components() -> None:
    _ = (
        should(AFTERNOON)
        .have_hour(13)
        .and_.have_clock_hour_of_half_day(1)
        .and_.have_minute(45)
        .and_.have_second(30)
        .and_.have_millisecond(123)
        .and_.have_microsecond(123_456)
        .and_.have_microsecond_of_day(((13 * 60 + 45) * 60 + 30) * 1_000_000 + 123_456)
    )


@pytest.mark.parametrize(("hour", "clock_hour"), [(0, 12), (1, 1), (11, 11), (12, 12), (23, 11)])
def test_clock_hour_of_half_day(hour: int, clock_hour: int) -> None:
    _ = should(time(hour)).have_clock_hour_of_half_day(clock_hour)


def test_time_wrapper_rejects_aware_times() -> None:
    from fluent_temporal.compat import UTC

    with pytest.raises(SubjectTypeError):
        _ = should_time(time(12, tzinfo=UTC))


def test_datetime_value_fields() -> None:
    constraint = should(LEAP_AFTERNOON).have_date(LEAP_DAY)
    assert constraint.which == LEAP_DAY
    _ = constraint.and_.have_time_of_day(AFTERNOON).and_.not_have_date(date(2024, 3, 1))
    _ = should(LEAP_AFTERNOON).have_day_of_year(60).and_.have_hour(13)


def test_datetime_value_field_failure() -> None:
    with pytest.raises(TemporalAssertionError) as excinfo:
        _ = should(LEAP_AFTERNOON, name="created_at").have_date(date(2024, 3, 1))
    assert str(excinfo.value) == "Expected created_at to have date 2024-03-01, but found 2024-02-29."


def test_absent_local_values_fail_both_polarities() -> None:
    with pytest.raises(TemporalAssertionError, match="Expected date to have day 1, but found <null>"):
        _ = should_date(None).have_day(1)
    with pytest.raises(TemporalAssertionError, match="Did not expect time to have hour 1, but found <null>"):
        _ = should_time(None).not_have_hour(1)
    with pytest.raises(TemporalAssertionError, match="Did not expect date and time to have date"):
        _ = should_datetime(None).not_have_date(LEAP_DAY)


def test_local_datetime_rejects_aware_values() -> None:
    from fluent_temporal.compat import UTC

    with pytest.raises(SubjectTypeError):
        _ = should_datetime(LEAP_AFTERNOON.replace(tzinfo=UTC))
