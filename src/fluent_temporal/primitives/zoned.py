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

"""Assertions on date-times in a named time zone (typically ``zoneinfo``)."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .base import ComparableAssertions
from .fields import (
    DATE,
    LOCAL_DATE_TIME,
    OFFSET,
    TIME_OF_DAY,
    ZONE,
    DateComponentAssertions,
    TimeComponentAssertions,
    has,
    lacks,
    zone_key,
)
from .instant import as_utc
from .offset_datetime import same_local_and_offset


class ZonedDateTimeAssertions(DateComponentAssertions, TimeComponentAssertions, ComparableAssertions[datetime]):
    """Assertions on an aware ``datetime`` bound to a time zone.

    Equality requires the same local date-time, offset and zone key, so the
    two sides of a DST fold are distinct values. Ordering compares the values
    converted to UTC.
    """

    identifier = "zoned date and time"

    def _validate(self, subject: datetime) -> None:
        if not isinstance(subject, datetime) or subject.utcoffset() is None:
            self._reject(subject, "expects a datetime.datetime with a time zone")

    def _ordering_key(self, value: Any) -> Any:
        return as_utc(value)

    def _equals(self, expected: object) -> bool:
        if not same_local_and_offset(self._subject, expected):
            return False
        if self._subject is None or not isinstance(expected, datetime):
            return True
        return zone_key(self._subject.tzinfo) == zone_key(expected.tzinfo)

    have_date = has(DATE)
    not_have_date = lacks(DATE)
    have_time_of_day = has(TIME_OF_DAY)
    not_have_time_of_day = lacks(TIME_OF_DAY)
    have_local_date_time = has(LOCAL_DATE_TIME)
    not_have_local_date_time = lacks(LOCAL_DATE_TIME)
    have_offset = has(OFFSET)
    not_have_offset = lacks(OFFSET)
    have_zone = has(ZONE)
    not_have_zone = lacks(ZONE)


__all__ = ["ZonedDateTimeAssertions"]
