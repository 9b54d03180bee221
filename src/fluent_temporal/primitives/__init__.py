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

"""Assertion wrappers, one per kind of temporal value."""

from __future__ import annotations

from .base import ComparableAssertions, ProximityAssertions, TemporalAssertions
from .duration import DurationAssertions
from .fields import Field
from .instant import InstantAssertions
from .local import LocalDateAssertions, LocalDateTimeAssertions, LocalTimeAssertions
from .offset import OffsetAssertions
from .offset_datetime import OffsetDateTimeAssertions, OffsetTimeAssertions
from .period import PeriodAssertions
from .zoned import ZonedDateTimeAssertions

__all__ = [
    "ComparableAssertions",
    "DurationAssertions",
    "Field",
    "InstantAssertions",
    "LocalDateAssertions",
    "LocalDateTimeAssertions",
    "LocalTimeAssertions",
    "OffsetAssertions",
    "OffsetDateTimeAssertions",
    "OffsetTimeAssertions",
    "PeriodAssertions",
    "ProximityAssertions",
    "TemporalAssertions",
    "ZonedDateTimeAssertions",
]
