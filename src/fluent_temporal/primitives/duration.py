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

"""Assertions on fixed durations (``datetime.timedelta``).

Components follow ``timedelta``'s own normalisation: ``days`` may be negative
while ``seconds`` and ``microseconds`` are always non-negative, so
``timedelta(hours=-1)`` has ``days == -1`` and ``hours == 23``.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Final

from fluent_temporal.core.model_types import ComparisonPolicy

from .base import ProximityAssertions
from .fields import Field, has, has_approximately, lacks, lacks_approximately

if TYPE_CHECKING:
    from fluent_temporal.compat import Self
    from fluent_temporal.execution import AndConstraint

_ZERO: Final[timedelta] = timedelta(0)
_MICROSECONDS_PER_DAY: Final[int] = 86_400 * 1_000_000

DAYS: Field[timedelta, int] = Field("days", "{0} days", lambda value: value.days)
HOURS: Field[timedelta, int] = Field("hours", "{0} hours", lambda value: value.seconds // 3600)
MINUTES: Field[timedelta, int] = Field("minutes", "{0} minutes", lambda value: (value.seconds // 60) % 60)
SECONDS: Field[timedelta, int] = Field("seconds", "{0} seconds", lambda value: value.seconds % 60)
MILLISECONDS: Field[timedelta, int] = Field(
    "milliseconds",
    "{0} milliseconds",
    lambda value: value.microseconds // 1000,
)
MICROSECONDS: Field[timedelta, int] = Field(
    "microseconds",
    "{0} microseconds",
    lambda value: value.microseconds,
)
MICROSECONDS_WITHIN_DAY: Field[timedelta, int] = Field(
    "microseconds_within_day",
    "{0} microseconds within the day",
    lambda value: value.seconds * 1_000_000 + value.microseconds,
)


def _total_microseconds(value: timedelta) -> int:
    return (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds


def _total(name: str, unit: str, microseconds_per_unit: int) -> Field[timedelta, float]:
    return Field(
        f"total_{name}",
        "{0} " + unit + " in total (+/- {1})",
        lambda value: _total_microseconds(value) / microseconds_per_unit,
        policy=ComparisonPolicy.APPROXIMATE,
    )


TOTAL_DAYS = _total("days", "days", _MICROSECONDS_PER_DAY)
TOTAL_HOURS = _total("hours", "hours", 3600 * 1_000_000)
TOTAL_MINUTES = _total("minutes", "minutes", 60 * 1_000_000)
TOTAL_SECONDS = _total("seconds", "seconds", 1_000_000)
TOTAL_MILLISECONDS = _total("milliseconds", "milliseconds", 1000)
TOTAL_MICROSECONDS = _total("microseconds", "microseconds", 1)


class DurationAssertions(ProximityAssertions[timedelta]):
    """Assertions on a ``timedelta`` subject."""

    identifier = "duration"

    def _validate(self, subject: timedelta) -> None:
        if not isinstance(subject, timedelta):
            self._reject(subject, "expects a datetime.timedelta")

    def be_positive(self, because: str = "", *because_args: object) -> AndConstraint[Self]:
        """Assert that the duration is greater than zero."""
        return self._satisfy(lambda value: value > _ZERO, "Expected {context} to be positive", because, because_args)

    def be_negative(self, because: str = "", *because_args: object) -> AndConstraint[Self]:
        """Assert that the duration is less than zero."""
        return self._satisfy(lambda value: value < _ZERO, "Expected {context} to be negative", because, because_args)

    def be_zero(self, because: str = "", *because_args: object) -> AndConstraint[Self]:
        return self._satisfy(lambda value: value == _ZERO, "Expected {context} to be zero", because, because_args)

    def not_be_zero(self, because: str = "", *because_args: object) -> AndConstraint[Self]:
        return self._satisfy(lambda value: value != _ZERO, "Did not expect {context} to be zero", because, because_args)

    have_days = has(DAYS)
    not_have_days = lacks(DAYS)
    have_hours = has(HOURS)
    not_have_hours = lacks(HOURS)
    have_minutes = has(MINUTES)
    not_have_minutes = lacks(MINUTES)
    have_seconds = has(SECONDS)
    not_have_seconds = lacks(SECONDS)
    have_milliseconds = has(MILLISECONDS)
    not_have_milliseconds = lacks(MILLISECONDS)
    have_microseconds = has(MICROSECONDS)
    not_have_microseconds = lacks(MICROSECONDS)
    have_microseconds_within_day = has(MICROSECONDS_WITHIN_DAY)
    not_have_microseconds_within_day = lacks(MICROSECONDS_WITHIN_DAY)

    have_total_days = has_approximately(TOTAL_DAYS)
    not_have_total_days = lacks_approximately(TOTAL_DAYS)
    have_total_hours = has_approximately(TOTAL_HOURS)
    not_have_total_hours = lacks_approximately(TOTAL_HOURS)
    have_total_minutes = has_approximately(TOTAL_MINUTES)
    not_have_total_minutes = lacks_approximately(TOTAL_MINUTES)
    have_total_seconds = has_approximately(TOTAL_SECONDS)
    not_have_total_seconds = lacks_approximately(TOTAL_SECONDS)
    have_total_milliseconds = has_approximately(TOTAL_MILLISECONDS)
    not_have_total_milliseconds = lacks_approximately(TOTAL_MILLISECONDS)
    have_total_microseconds = has_approximately(TOTAL_MICROSECONDS)
    not_have_total_microseconds = lacks_approximately(TOTAL_MICROSECONDS)


__all__ = [
    "DAYS",
    "HOURS",
    "MICROSECONDS",
    "MICROSECONDS_WITHIN_DAY",
    "MILLISECONDS",
    "MINUTES",
    "SECONDS",
    "TOTAL_DAYS",
    "TOTAL_HOURS",
    "TOTAL_MICROSECONDS",
    "TOTAL_MILLISECONDS",
    "TOTAL_MINUTES",
    "TOTAL_SECONDS",
    "DurationAssertions",
]
