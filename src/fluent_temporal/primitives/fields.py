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

"""Derived fields and the method factories built on them.

A `Field` names one derived property of a subject (the month of a date, the
total hours of a duration) together with the phrase used in failure messages.
Wrapper classes declare their component checks by assigning factory results in
the class body:

    class LocalDateAssertions(TemporalAssertions[date]):
        have_month = has(MONTH)
        not_have_month = lacks(MONTH)

Every generated method delegates to `TemporalAssertions.have` or
`TemporalAssertions.not_have`, so absent subjects and message rendering are
handled in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import TYPE_CHECKING, Any, Generic, TypeAlias, TypeVar

from fluent_temporal.core.model_types import ComparisonPolicy, IsoDayOfWeek
from fluent_temporal.exceptions import FluentTemporalTypeError, FluentTemporalValidationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from fluent_temporal.execution import AndConstraint

    from .base import TemporalAssertions

SubjectT = TypeVar("SubjectT")
ValueT = TypeVar("ValueT")

AssertionMethod: TypeAlias = "Callable[..., AndConstraint[Any]]"


@dataclass(frozen=True, slots=True)
class Field(Generic[SubjectT, ValueT]):
    """A named, derived property of an assertion subject.

    Attributes:
        name: Short name, used to build method names (``have_<name>``).
        phrase: Message fragment describing the expectation; ``{0}`` is the
            expected value, e.g. ``"day {0}"`` or ``"{0} hours"``. Approximate
            fields may use ``{1}`` for the tolerance.
        accessor: Reads the property from a (non-absent) subject.
        policy: Exact or approximate comparison.
        normalize: Converts the caller's expected value before comparing, e.g.
            a zone key string to the key of a ``tzinfo``.
    """

    name: str
    phrase: str
    accessor: Callable[[SubjectT], ValueT]
    policy: ComparisonPolicy = ComparisonPolicy.EXACT
    normalize: Callable[[Any], Any] | None = None

    def read(self, subject: SubjectT) -> ValueT:
        return self.accessor(subject)

    def expected(self, value: object) -> object:
        if value is None or self.normalize is None:
            return value
        return self.normalize(value)


def has(field: Field[Any, Any]) -> AssertionMethod:
    """Build a ``have_<field>`` method comparing the field exactly."""

    def method(
        self: TemporalAssertions[Any],
        expected: object,
        because: str = "",
        *because_args: object,
    ) -> AndConstraint[Any]:
        return self.have(field, expected, because, *because_args)

    return _named(method, f"have_{field.name}", f"Assert that the subject has {field.phrase.format('<expected>')}.")


def lacks(field: Field[Any, Any]) -> AssertionMethod:
    """Build a ``not_have_<field>`` method comparing the field exactly."""

    def method(
        self: TemporalAssertions[Any],
        unexpected: object,
        because: str = "",
        *because_args: object,
    ) -> AndConstraint[Any]:
        return self.not_have(field, unexpected, because, *because_args)

    return _named(
        method,
        f"not_have_{field.name}",
        f"Assert that the subject does not have {field.phrase.format('<unexpected>')}.",
    )


def has_approximately(field: Field[Any, Any]) -> AssertionMethod:
    """Build a ``have_<field>`` method with an optional ``precision`` argument."""

    def method(
        self: TemporalAssertions[Any],
        expected: float,
        precision: float | None = None,
        because: str = "",
        *because_args: object,
    ) -> AndConstraint[Any]:
        return self.have(field, expected, because, *because_args, precision=precision)

    return _named(
        method,
        f"have_{field.name}",
        f"Assert that the subject has {field.phrase.format('<expected>', '<precision>')}.",
    )


def lacks_approximately(field: Field[Any, Any]) -> AssertionMethod:
    """Build a ``not_have_<field>`` method with an optional ``precision`` argument."""

    def method(
        self: TemporalAssertions[Any],
        unexpected: float,
        precision: float | None = None,
        because: str = "",
        *because_args: object,
    ) -> AndConstraint[Any]:
        return self.not_have(field, unexpected, because, *because_args, precision=precision)

    return _named(
        method,
        f"not_have_{field.name}",
        f"Assert that the subject does not have {field.phrase.format('<unexpected>', '<precision>')}.",
    )


def _named(method: AssertionMethod, name: str, doc: str) -> AssertionMethod:
    method.__name__ = name
    method.__qualname__ = name
    method.__doc__ = doc
    return method


# Date components, shared by dates and every kind of date-time.

YEAR: Field[date, int] = Field("year", "year {0}", lambda value: value.year)
MONTH: Field[date, int] = Field("month", "month {0}", lambda value: value.month)
DAY: Field[date, int] = Field("day", "day {0}", lambda value: value.day)
DAY_OF_WEEK: Field[date, IsoDayOfWeek] = Field(
    "day_of_week",
    "day of week {0}",
    lambda value: IsoDayOfWeek(value.isoweekday()),
)
DAY_OF_YEAR: Field[date, int] = Field(
    "day_of_year",
    "day of year {0}",
    lambda value: value.timetuple().tm_yday,
)

# Time-of-day components, shared by times and every kind of date-time.

TimeLike = time | datetime


def _clock_hour(value: TimeLike) -> int:
    return (value.hour + 11) % 12 + 1


def _microsecond_of_day(value: TimeLike) -> int:
    return ((value.hour * 60 + value.minute) * 60 + value.second) * 1_000_000 + value.microsecond


HOUR: Field[TimeLike, int] = Field("hour", "hour {0}", lambda value: value.hour)
CLOCK_HOUR_OF_HALF_DAY: Field[TimeLike, int] = Field(
    "clock_hour_of_half_day",
    "clock hour of the half-day {0}",
    _clock_hour,
)
MINUTE: Field[TimeLike, int] = Field("minute", "minute {0}", lambda value: value.minute)
SECOND: Field[TimeLike, int] = Field("second", "second {0}", lambda value: value.second)
MILLISECOND: Field[TimeLike, int] = Field(
    "millisecond",
    "millisecond {0}",
    lambda value: value.microsecond // 1000,
)
MICROSECOND: Field[TimeLike, int] = Field("microsecond", "microsecond {0}", lambda value: value.microsecond)
MICROSECOND_OF_DAY: Field[TimeLike, int] = Field(
    "microsecond_of_day",
    "microsecond of day {0}",
    _microsecond_of_day,
)

# Value fields of date-times and offset times.


def _as_timezone(value: object) -> timezone:
    if isinstance(value, timezone):
        return timezone(value.utcoffset(None))
    if isinstance(value, timedelta):
        try:
            return timezone(value)
        except ValueError as exc:
            message = f"Offset {value} is outside the range of a UTC offset (strictly within 24 hours)"
            raise FluentTemporalValidationError(message) from exc
    if isinstance(value, tzinfo):
        offset = value.utcoffset(None)
        if offset is not None:
            return timezone(offset)
    message = f"Expected a timezone or timedelta offset, got {type(value).__name__}"
    raise FluentTemporalTypeError(message)


def _offset_of(value: datetime | time) -> timezone | None:
    offset = value.utcoffset()
    return None if offset is None else timezone(offset)


def zone_key(value: object) -> str:
    """Return the identifying key of a time zone (IANA key where available)."""
    if isinstance(value, str):
        return value
    key = getattr(value, "key", None)
    if isinstance(key, str):
        return key
    return str(value)


DATE: Field[datetime, date] = Field("date", "date {0}", lambda value: value.date())
TIME_OF_DAY: Field[datetime, time] = Field("time_of_day", "time of day {0}", lambda value: value.time())
LOCAL_DATE_TIME: Field[datetime, datetime] = Field(
    "local_date_time",
    "local date and time {0}",
    lambda value: value.replace(tzinfo=None),
)
OFFSET: Field[datetime | time, timezone | None] = Field("offset", "offset {0}", _offset_of, normalize=_as_timezone)
ZONE: Field[datetime, str] = Field(
    "zone",
    "zone {0}",
    lambda value: zone_key(value.tzinfo),
    normalize=zone_key,
)


class DateComponentAssertions:
    """Component checks available on every subject carrying a calendar date."""

    have_year = has(YEAR)
    not_have_year = lacks(YEAR)
    have_month = has(MONTH)
    not_have_month = lacks(MONTH)
    have_day = has(DAY)
    not_have_day = lacks(DAY)
    have_day_of_week = has(DAY_OF_WEEK)
    not_have_day_of_week = lacks(DAY_OF_WEEK)
    have_day_of_year = has(DAY_OF_YEAR)
    not_have_day_of_year = lacks(DAY_OF_YEAR)


class TimeComponentAssertions:
    """Component checks available on every subject carrying a time of day."""

    have_hour = has(HOUR)
    not_have_hour = lacks(HOUR)
    have_clock_hour_of_half_day = has(CLOCK_HOUR_OF_HALF_DAY)
    not_have_clock_hour_of_half_day = lacks(CLOCK_HOUR_OF_HALF_DAY)
    have_minute = has(MINUTE)
    not_have_minute = lacks(MINUTE)
    have_second = has(SECOND)
    not_have_second = lacks(SECOND)
    have_millisecond = has(MILLISECOND)
    not_have_millisecond = lacks(MILLISECOND)
    have_microsecond = has(MICROSECOND)
    not_have_microsecond = lacks(MICROSECOND)
    have_microsecond_of_day = has(MICROSECOND_OF_DAY)
    not_have_microsecond_of_day = lacks(MICROSECOND_OF_DAY)


__all__ = [
    "CLOCK_HOUR_OF_HALF_DAY",
    "DATE",
    "DAY",
    "DAY_OF_WEEK",
    "DAY_OF_YEAR",
    "HOUR",
    "LOCAL_DATE_TIME",
    "MICROSECOND",
    "MICROSECOND_OF_DAY",
    "MILLISECOND",
    "MINUTE",
    "MONTH",
    "OFFSET",
    "SECOND",
    "TIME_OF_DAY",
    "YEAR",
    "ZONE",
    "AssertionMethod",
    "DateComponentAssertions",
    "Field",
    "TimeComponentAssertions",
    "has",
    "has_approximately",
    "lacks",
    "lacks_approximately",
    "zone_key",
]
