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

"""Assertions on fixed UTC offsets (``datetime.timezone``)."""

from __future__ import annotations

from datetime import timedelta, timezone
from typing import TYPE_CHECKING, Any

from .base import ComparableAssertions
from .fields import Field, has, lacks

if TYPE_CHECKING:
    from fluent_temporal.compat import Self
    from fluent_temporal.execution import AndConstraint


def total_offset_seconds(value: timezone) -> int:
    offset = value.utcoffset(None)
    return offset // timedelta(seconds=1)


def _truncated(seconds: int, divisor: int, modulus: int | None = None) -> int:
    sign = -1 if seconds < 0 else 1
    part = abs(seconds) // divisor
    if modulus is not None:
        part %= modulus
    return sign * part


HOURS: Field[timezone, int] = Field(
    "hours",
    "{0} hours",
    lambda value: _truncated(total_offset_seconds(value), 3600),
)
MINUTES: Field[timezone, int] = Field(
    "minutes",
    "{0} minutes",
    lambda value: _truncated(total_offset_seconds(value), 60, 60),
)
SECONDS: Field[timezone, int] = Field(
    "seconds",
    "{0} seconds",
    lambda value: _truncated(total_offset_seconds(value), 1, 60),
)
TOTAL_SECONDS: Field[timezone, int] = Field("total_seconds", "{0} seconds in total", total_offset_seconds)


class OffsetAssertions(ComparableAssertions[timezone]):
    """Assertions on a ``timezone`` subject, ordered by UTC offset.

    Components keep the sign of the offset: ``UTC-05:30`` has ``-5`` hours and
    ``-30`` minutes.
    """

    identifier = "offset"

    def _validate(self, subject: timezone) -> None:
        if not isinstance(subject, timezone):
            self._reject(subject, "expects a datetime.timezone")

    def _ordering_key(self, value: Any) -> Any:
        return value.utcoffset(None)

    def be_zero(self, because: str = "", *because_args: object) -> AndConstraint[Self]:
        """Assert that the offset is UTC."""
        return self._satisfy(
            lambda value: not value.utcoffset(None),
            "Expected {context} to be zero",
            because,
            because_args,
        )

    def not_be_zero(self, because: str = "", *because_args: object) -> AndConstraint[Self]:
        return self._satisfy(
            lambda value: bool(value.utcoffset(None)),
            "Did not expect {context} to be zero",
            because,
            because_args,
        )

    have_hours = has(HOURS)
    not_have_hours = lacks(HOURS)
    have_minutes = has(MINUTES)
    not_have_minutes = lacks(MINUTES)
    have_seconds = has(SECONDS)
    not_have_seconds = lacks(SECONDS)
    have_total_seconds = has(TOTAL_SECONDS)
    not_have_total_seconds = lacks(TOTAL_SECONDS)


__all__ = ["HOURS", "MINUTES", "SECONDS", "TOTAL_SECONDS", "OffsetAssertions", "total_offset_seconds"]
