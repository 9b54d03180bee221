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

"""Assertions on values that carry a fixed UTC offset.

Two such values are equal only when both their local value and their offset
match: ``12:00+01:00`` and ``11:00+00:00`` are the same instant but not equal.
Ordering compares positions on the timeline.
"""

from __future__ import annotations

from datetime import datetime, time

from .base import ComparableAssertions
from .fields import (
    DATE,
    LOCAL_DATE_TIME,
    OFFSET,
    TIME_OF_DAY,
    DateComponentAssertions,
    TimeComponentAssertions,
    has,
    lacks,
)


def same_local_and_offset(left: datetime | time | None, right: object) -> bool:
    """Return whether two aware values agree on local value and UTC offset."""
    if left is None or right is None:
        return left is None and right is None
    if not isinstance(right, datetime | time) or type(left) is not type(right):
        return False
    if left.replace(tzinfo=None) != right.replace(tzinfo=None):
        return False
    return left.utcoffset() == right.utcoffset()


class OffsetDateTimeAssertions(DateComponentAssertions, TimeComponentAssertions, ComparableAssertions[datetime]):
    """Assertions on a ``datetime`` with a fixed ``timezone`` offset."""

    identifier = "date and time"

    def _validate(self, subject: datetime) -> None:
        if not isinstance(subject, datetime) or subject.utcoffset() is None:
            self._reject(subject, "expects a timezone-aware datetime.datetime")

    def _equals(self, expected: object) -> bool:
        return same_local_and_offset(self._subject, expected)

    have_date = has(DATE)
    not_have_date = lacks(DATE)
    have_time_of_day = has(TIME_OF_DAY)
    not_have_time_of_day = lacks(TIME_OF_DAY)
    have_local_date_time = has(LOCAL_DATE_TIME)
    not_have_local_date_time = lacks(LOCAL_DATE_TIME)
    have_offset = has(OFFSET)
    not_have_offset = lacks(OFFSET)


class OffsetTimeAssertions(TimeComponentAssertions, ComparableAssertions[time]):
    """Assertions on a ``time`` with a fixed UTC offset."""

    identifier = "time"

    def _validate(self, subject: time) -> None:
        if not isinstance(subject, time) or subject.utcoffset() is None:
            self._reject(subject, "expects a datetime.time with a fixed UTC offset")

    def _equals(self, expected: object) -> bool:
        return same_local_and_offset(self._subject, expected)

    have_offset = has(OFFSET)
    not_have_offset = lacks(OFFSET)


__all__ = ["OffsetDateTimeAssertions", "OffsetTimeAssertions", "same_local_and_offset"]
