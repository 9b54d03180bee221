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

"""Entry points that wrap a value in its assertion class.

`should` picks the wrapper from the subject's type. The typed ``should_*``
functions skip the dispatch and also accept ``None``, which `should` cannot
classify.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import TYPE_CHECKING, Any, TypeAlias, TypeVar, overload

from dateutil.relativedelta import relativedelta

from fluent_temporal._internal.logging_utils import structured_extra
from fluent_temporal.core.model_types import LogComponent
from fluent_temporal.exceptions import SubjectTypeError
from fluent_temporal.execution import AssertionChain
from fluent_temporal.primitives import (
    DurationAssertions,
    InstantAssertions,
    LocalDateAssertions,
    LocalDateTimeAssertions,
    LocalTimeAssertions,
    OffsetAssertions,
    OffsetDateTimeAssertions,
    OffsetTimeAssertions,
    PeriodAssertions,
    ZonedDateTimeAssertions,
)

if TYPE_CHECKING:
    from fluent_temporal.primitives import TemporalAssertions

logger: logging.Logger = logging.getLogger("fluent_temporal.api")

AssertionsT = TypeVar("AssertionsT", bound="TemporalAssertions[Any]")

AnyTemporalAssertions: TypeAlias = (
    DurationAssertions
    | PeriodAssertions
    | OffsetAssertions
    | LocalDateAssertions
    | LocalTimeAssertions
    | LocalDateTimeAssertions
    | OffsetDateTimeAssertions
    | ZonedDateTimeAssertions
    | OffsetTimeAssertions
)


def _wrap(wrapper: type[AssertionsT], subject: object, name: str | None) -> AssertionsT:
    chain = AssertionChain.get_or_create(name, identifier=wrapper.identifier)
    assertions = wrapper(subject, chain)
    logger.debug(
        "Wrapped %s in %s",
        type(subject).__name__,
        wrapper.__name__,
        extra=structured_extra(LogComponent.API, assertion=wrapper.__name__, subject=name or wrapper.identifier),
    )
    return assertions


def _wrapper_for(subject: object) -> type[AnyTemporalAssertions]:
    match subject:
        case relativedelta():
            return PeriodAssertions
        case timedelta():
            return DurationAssertions
        case timezone():
            return OffsetAssertions
        case datetime() if subject.tzinfo is None:
            return LocalDateTimeAssertions
        case datetime() if isinstance(subject.tzinfo, timezone):
            return OffsetDateTimeAssertions
        case datetime():
            return ZonedDateTimeAssertions
        case date():
            return LocalDateAssertions
        case time() if subject.tzinfo is None:
            return LocalTimeAssertions
        case time():
            return OffsetTimeAssertions
        case None:
            raise SubjectTypeError(subject, "use a typed should_* function to assert on an absent value")
        case _:
            raise SubjectTypeError(subject, "no assertions are available for this type")


@overload
def should(subject: relativedelta, *, name: str | None = None) -> PeriodAssertions: ...
@overload
def should(subject: timedelta, *, name: str | None = None) -> DurationAssertions: ...
@overload
def should(subject: timezone, *, name: str | None = None) -> OffsetAssertions: ...
@overload
def should(
    subject: datetime,
    *,
    name: str | None = None,
) -> LocalDateTimeAssertions | OffsetDateTimeAssertions | ZonedDateTimeAssertions: ...
@overload
def should(subject: date, *, name: str | None = None) -> LocalDateAssertions: ...
@overload
def should(subject: time, *, name: str | None = None) -> LocalTimeAssertions | OffsetTimeAssertions: ...
def should(subject: object, *, name: str | None = None) -> AnyTemporalAssertions:
    """Wrap a temporal value in the matching assertion class.

    Aware datetimes are treated as offset date-times when their ``tzinfo`` is a
    ``datetime.timezone`` and as zoned date-times otherwise. Use
    `should_instant` to assert on them as bare instants.

    Args:
        subject: Value under test.
        name: Display name used for the subject in failure messages.

    Returns:
        The assertion wrapper for the subject.

    Raises:
        SubjectTypeError: If the subject is None or of an unsupported type.
    """
    return _wrap(_wrapper_for(subject), subject, name)


def should_duration(subject: timedelta | None, *, name: str | None = None) -> DurationAssertions:
    return _wrap(DurationAssertions, subject, name)


def should_period(subject: relativedelta | None, *, name: str | None = None) -> PeriodAssertions:
    return _wrap(PeriodAssertions, subject, name)


def should_offset(subject: timezone | None, *, name: str | None = None) -> OffsetAssertions:
    return _wrap(OffsetAssertions, subject, name)


def should_instant(subject: datetime | None, *, name: str | None = None) -> InstantAssertions:
    """Wrap an aware datetime as an instant on the UTC timeline.

    Raises:
        SubjectTypeError: If the datetime is naive.
    """
    return _wrap(InstantAssertions, subject, name)


def should_date(subject: date | None, *, name: str | None = None) -> LocalDateAssertions:
    return _wrap(LocalDateAssertions, subject, name)


def should_time(subject: time | None, *, name: str | None = None) -> LocalTimeAssertions:
    return _wrap(LocalTimeAssertions, subject, name)


def should_datetime(subject: datetime | None, *, name: str | None = None) -> LocalDateTimeAssertions:
    return _wrap(LocalDateTimeAssertions, subject, name)


def should_offset_datetime(subject: datetime | None, *, name: str | None = None) -> OffsetDateTimeAssertions:
    return _wrap(OffsetDateTimeAssertions, subject, name)


def should_zoned_datetime(subject: datetime | None, *, name: str | None = None) -> ZonedDateTimeAssertions:
    return _wrap(ZonedDateTimeAssertions, subject, name)


def should_offset_time(subject: time | None, *, name: str | None = None) -> OffsetTimeAssertions:
    return _wrap(OffsetTimeAssertions, subject, name)


__all__ = [
    "should",
    "should_date",
    "should_datetime",
    "should_duration",
    "should_instant",
    "should_offset",
    "should_offset_datetime",
    "should_offset_time",
    "should_period",
    "should_time",
    "should_zoned_datetime",
]
