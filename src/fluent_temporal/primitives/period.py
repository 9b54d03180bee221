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

"""Assertions on calendar periods (``dateutil.relativedelta.relativedelta``).

Only the relative fields of a ``relativedelta`` (``years``, ``months``,
``days``...) describe a period. Absolute fields such as ``year=2024`` or
``weekday=MO`` make a delta that can never equal a fixed duration.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from dateutil.relativedelta import relativedelta

from .base import TemporalAssertions
from .fields import Field, has, lacks

if TYPE_CHECKING:
    from fluent_temporal.compat import Self
    from fluent_temporal.execution import AndConstraint

_ABSOLUTE_FIELDS: tuple[str, ...] = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)

YEARS: Field[relativedelta, int] = Field("years", "{0} years", lambda value: value.years)
MONTHS: Field[relativedelta, int] = Field("months", "{0} months", lambda value: value.months)
WEEKS: Field[relativedelta, int] = Field("weeks", "{0} weeks", lambda value: value.weeks)
DAYS: Field[relativedelta, int] = Field("days", "{0} days", lambda value: value.days)
HOURS: Field[relativedelta, int] = Field("hours", "{0} hours", lambda value: value.hours)
MINUTES: Field[relativedelta, int] = Field("minutes", "{0} minutes", lambda value: value.minutes)
SECONDS: Field[relativedelta, int] = Field("seconds", "{0} seconds", lambda value: value.seconds)
MICROSECONDS: Field[relativedelta, int] = Field(
    "microseconds",
    "{0} microseconds",
    lambda value: value.microseconds,
)


def period_to_duration(period: relativedelta) -> timedelta | None:
    """Convert a period to a fixed ``timedelta`` when it has a fixed length.

    Returns:
        The equivalent duration, or None when the period has years, months,
        leap days or absolute fields, whose length depends on a start date.
    """
    if period.years or period.months or period.leapdays:
        return None
    if any(getattr(period, name) is not None for name in _ABSOLUTE_FIELDS):
        return None
    return timedelta(
        days=period.days,
        hours=period.hours,
        minutes=period.minutes,
        seconds=period.seconds,
        microseconds=period.microseconds,
    )


def _has_date_component(period: relativedelta) -> bool:
    return bool(period.years or period.months or period.days)


def _has_time_component(period: relativedelta) -> bool:
    return bool(period.hours or period.minutes or period.seconds or period.microseconds)


class PeriodAssertions(TemporalAssertions[relativedelta]):
    """Assertions on a ``relativedelta`` subject.

    ``be`` and ``not_be`` also accept a ``timedelta``; the period then has to
    convert to exactly that duration.
    """

    identifier = "period"

    def _validate(self, subject: relativedelta) -> None:
        if not isinstance(subject, relativedelta):
            self._reject(subject, "expects a dateutil relativedelta")

    def _equals(self, expected: object) -> bool:
        if isinstance(expected, timedelta):
            if self._subject is None:
                return False
            return period_to_duration(self._subject) == expected
        return self._subject == expected

    def be_zero(self, because: str = "", *because_args: object) -> AndConstraint[Self]:
        """Assert that every field of the period is zero."""
        return self._satisfy(
            lambda value: value == relativedelta(),
            "Expected {context} to be zero",
            because,
            because_args,
        )

    def not_be_zero(self, because: str = "", *because_args: object) -> AndConstraint[Self]:
        return self._satisfy(
            lambda value: value != relativedelta(),
            "Did not expect {context} to be zero",
            because,
            because_args,
        )

    def have_date_component(self, because: str = "", *because_args: object) -> AndConstraint[Self]:
        """Assert that the period has non-zero years, months or days."""
        return self._satisfy(_has_date_component, "Expected {context} to have a date component", because, because_args)

    def not_have_date_component(self, because: str = "", *because_args: object) -> AndConstraint[Self]:
        return self._satisfy(
            lambda value: not _has_date_component(value),
            "Did not expect {context} to have a date component",
            because,
            because_args,
        )

    def have_time_component(self, because: str = "", *because_args: object) -> AndConstraint[Self]:
        """Assert that the period has non-zero hours, minutes, seconds or microseconds."""
        return self._satisfy(_has_time_component, "Expected {context} to have a time component", because, because_args)

    def not_have_time_component(self, because: str = "", *because_args: object) -> AndConstraint[Self]:
        return self._satisfy(
            lambda value: not _has_time_component(value),
            "Did not expect {context} to have a time component",
            because,
            because_args,
        )

    have_years = has(YEARS)
    not_have_years = lacks(YEARS)
    have_months = has(MONTHS)
    not_have_months = lacks(MONTHS)
    have_weeks = has(WEEKS)
    not_have_weeks = lacks(WEEKS)
    have_days = has(DAYS)
    not_have_days = lacks(DAYS)
    have_hours = has(HOURS)
    not_have_hours = lacks(HOURS)
    have_minutes = has(MINUTES)
    not_have_minutes = lacks(MINUTES)
    have_seconds = has(SECONDS)
    not_have_seconds = lacks(SECONDS)
    have_microseconds = has(MICROSECONDS)
    not_have_microseconds = lacks(MICROSECONDS)


__all__ = [
    "DAYS",
    "HOURS",
    "MICROSECONDS",
    "MINUTES",
    "MONTHS",
    "SECONDS",
    "WEEKS",
    "YEARS",
    "PeriodAssertions",
    "period_to_duration",
]
