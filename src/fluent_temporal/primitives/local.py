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

"""Assertions on local (zone-less) dates, times and date-times."""

from __future__ import annotations

from datetime import date, datetime, time

from .base import ComparableAssertions
from .fields import DATE, TIME_OF_DAY, DateComponentAssertions, TimeComponentAssertions, has, lacks


class LocalDateAssertions(DateComponentAssertions, ComparableAssertions[date]):
    """Assertions on a calendar ``date``."""

    identifier = "date"

    def _validate(self, subject: date) -> None:
        if not isinstance(subject, date) or isinstance(subject, datetime):
            self._reject(subject, "expects a datetime.date (use the date-time assertions for datetimes)")


class LocalTimeAssertions(TimeComponentAssertions, ComparableAssertions[time]):
    """Assertions on a naive time of day."""

    identifier = "time"

    def _validate(self, subject: time) -> None:
        if not isinstance(subject, time) or subject.tzinfo is not None:
            self._reject(subject, "expects a naive datetime.time")


class LocalDateTimeAssertions(DateComponentAssertions, TimeComponentAssertions, ComparableAssertions[datetime]):
    """Assertions on a naive ``datetime``."""

    identifier = "date and time"

    def _validate(self, subject: datetime) -> None:
        if not isinstance(subject, datetime) or subject.tzinfo is not None:
            self._reject(subject, "expects a naive datetime.datetime")

    have_date = has(DATE)
    not_have_date = lacks(DATE)
    have_time_of_day = has(TIME_OF_DAY)
    not_have_time_of_day = lacks(TIME_OF_DAY)


__all__ = ["LocalDateAssertions", "LocalDateTimeAssertions", "LocalTimeAssertions"]
