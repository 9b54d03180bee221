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

"""fluent_temporal - fluent assertions for date and time values.

Wraps ``datetime``, ``zoneinfo`` and ``dateutil`` values in assertion classes
whose failures read like sentences:

    should(timedelta(days=1, hours=2)).have_hours(2).and_.have_total_hours(26)
"""

from __future__ import annotations

import logging

from fluent_temporal.exceptions import (
    FluentTemporalError,
    FluentTemporalTypeError,
    FluentTemporalValidationError,
    NegativeToleranceError,
    SubjectTypeError,
    TemporalAssertionError,
)

from ._internal.logging_utils import configure_logging
from .api import (
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
from .approx import is_approximately_equal
from .config import Settings, get_settings, override_settings, reset_settings
from .core.model_types import IsoDayOfWeek
from .execution import AndConstraint, AndWhichConstraint, AssertionChain, assertion_scope
from .primitives import (
    DurationAssertions,
    Field,
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

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AndConstraint",
    "AndWhichConstraint",
    "AssertionChain",
    "DurationAssertions",
    "Field",
    "FluentTemporalError",
    "FluentTemporalTypeError",
    "FluentTemporalValidationError",
    "InstantAssertions",
    "IsoDayOfWeek",
    "LocalDateAssertions",
    "LocalDateTimeAssertions",
    "LocalTimeAssertions",
    "NegativeToleranceError",
    "OffsetAssertions",
    "OffsetDateTimeAssertions",
    "OffsetTimeAssertions",
    "PeriodAssertions",
    "Settings",
    "SubjectTypeError",
    "TemporalAssertionError",
    "ZonedDateTimeAssertions",
    "__version__",
    "assertion_scope",
    "configure_logging",
    "get_settings",
    "is_approximately_equal",
    "override_settings",
    "reset_settings",
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

__version__ = "0.1.0"
