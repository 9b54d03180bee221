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

"""Property-based tests: an absent subject fails every component check."""

from __future__ import annotations

from datetime import date, time, timedelta, timezone
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fluent_temporal import (
    IsoDayOfWeek,
    should_date,
    should_datetime,
    should_duration,
    should_instant,
    should_offset,
    should_offset_datetime,
    should_offset_time,
    should_period,
    should_time,
    should_zoned_datetime,
)
from fluent_temporal.exceptions import TemporalAssertionError

pytestmark = pytest.mark.property

CHECKS: list[tuple[Any, str, object]] = [
    (should_duration, "days", 1),
    (should_duration, "hours", 2),
    (should_duration, "total_hours", 26),
    (should_period, "years", 1),
    (should_period, "weeks", 0),
    (should_offset, "hours", 5),
    (should_offset, "total_seconds", 0),
    (should_instant, "unix_seconds", 0),
    (should_date, "day_of_week", IsoDayOfWeek.MONDAY),
    (should_date, "day_of_year", 1),
    (should_time, "clock_hour_of_half_day", 12),
    (should_time, "microsecond_of_day", 0),
    (should_datetime, "date", date(2024, 1, 1)),
    (should_datetime, "time_of_day", time(0)),
    (should_offset_datetime, "offset", timedelta(0)),
    (should_offset_datetime, "local_date_time", None),
    (should_zoned_datetime, "zone", "UTC"),
    (should_offset_time, "offset", timezone.utc),
]


@given(st.sampled_from(CHECKS), st.booleans())
def test_absent_subject_fails_both_polarities(check: tuple[Any, str, object], negated: bool) -> None:
    factory, field, expected = check
    method = f"not_have_{field}" if negated else f"have_{field}"
    with pytest.raises(TemporalAssertionError, match="but found <null>"):
        _ = getattr(factory(None), method)(expected)
