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

"""Unit tests for the ``should`` entry points."""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from dateutil.relativedelta import relativedelta

import fluent_temporal
from fluent_temporal import (
    DurationAssertions,
    InstantAssertions,
    LocalDateAssertions,
    LocalDateTimeAssertions,
    LocalTimeAssertions,
    OffsetAssertions,
    OffsetDateTimeAssertions,
    OffsetTimeAssertions,
    PeriodAssertions,
    SubjectTypeError,
    ZonedDateTimeAssertions,
    should,
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
from fluent_temporal.compat import UTC

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("subject", "wrapper"),
    [
        (relativedelta(months=1), PeriodAssertions),
        (timedelta(hours=1), DurationAssertions),
        (timezone(timedelta(hours=2)), OffsetAssertions),
        (datetime(2024, 1, 1), LocalDateTimeAssertions),
        (datetime(2024, 1, 1, tzinfo=UTC), OffsetDateTimeAssertions),
        (datetime(2024, 1, 1, tzinfo=ZoneInfo("Asia/Tokyo")), ZonedDateTimeAssertions),
        (date(2024, 1, 1), LocalDateAssertions),
        (time(8), LocalTimeAssertions),
        (time(8, tzinfo=UTC), OffsetTimeAssertions),
    ],
)
def test_should_dispatches_on_subject_type(subject: object, wrapper: type[object]) -> None:
    assertions = should(subject)  # type: ignore[call-overload]
    assert type(assertions) is wrapper
    assert assertions.subject is subject


@pytest.mark.parametrize("subject", [None, 3, "2024-01-01", 1.5])
def test_should_rejects_unsupported_subjects(subject: object) -> None:
    with pytest.raises(SubjectTypeError):
        _ = should(subject)  # type: ignore[call-overload]


def test_subject_type_error_is_a_type_error() -> None:
    with pytest.raises(TypeError, match="Cannot assert on NoneType value None"):
        _ = should(None)  # type: ignore[call-overload]


@pytest.mark.parametrize(
    ("factory", "wrapper"),
    [
        (should_duration, DurationAssertions),
        (should_period, PeriodAssertions),
        (should_offset, OffsetAssertions),
        (should_instant, InstantAssertions),
        (should_date, LocalDateAssertions),
        (should_time, LocalTimeAssertions),
        (should_datetime, LocalDateTimeAssertions),
        (should_offset_datetime, OffsetDateTimeAssertions),
        (should_zoned_datetime, ZonedDateTimeAssertions),
        (should_offset_time, OffsetTimeAssertions),
    ],
)
def test_typed_entry_points_accept_none(factory: object, wrapper: type[object]) -> None:
    assertions = factory(None)  # type: ignore[operator]
    assert isinstance(assertions, wrapper)
    assert assertions.subject is None


def test_name_is_used_as_subject_name() -> None:
    assertions = should(timedelta(0), name="grace period")
    assert assertions.chain.subject_name == "grace period"


def test_wrapping_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="fluent_temporal.api")
    _ = should(date(2024, 1, 1), name="due")
    record = next(record for record in caplog.records if record.name == "fluent_temporal.api")
    assert record.getMessage() == "Wrapped date in LocalDateAssertions"
    assert getattr(record, "assertion") == "LocalDateAssertions"
    assert getattr(record, "subject") == "due"


def test_package_exports_version_and_null_handler() -> None:
    assert fluent_temporal.__version__ == "0.1.0"
    handlers = logging.getLogger("fluent_temporal").handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)
