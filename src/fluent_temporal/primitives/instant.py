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

"""Assertions on instants: points on the UTC timeline as aware datetimes."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Final

from fluent_temporal.compat import UTC

from .base import ProximityAssertions
from .fields import Field, has, lacks

UNIX_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=UTC)


def as_utc(value: Any) -> Any:
    """Return aware datetimes converted to UTC, honouring ``fold``; other values unchanged."""
    if isinstance(value, datetime) and value.utcoffset() is not None:
        return value.astimezone(UTC)
    return value


UNIX_SECONDS: Field[datetime, int] = Field(
    "unix_seconds",
    "{0} seconds since the Unix epoch",
    lambda value: (value - UNIX_EPOCH) // timedelta(seconds=1),
)
UNIX_MILLISECONDS: Field[datetime, int] = Field(
    "unix_milliseconds",
    "{0} milliseconds since the Unix epoch",
    lambda value: (value - UNIX_EPOCH) // timedelta(milliseconds=1),
)


class InstantAssertions(ProximityAssertions[datetime]):
    """Assertions on an aware ``datetime`` treated as an instant.

    Equality and ordering compare positions on the timeline, so the same
    instant expressed in two offsets is equal.
    """

    identifier = "instant"

    def _validate(self, subject: datetime) -> None:
        if not isinstance(subject, datetime) or subject.utcoffset() is None:
            self._reject(subject, "expects a timezone-aware datetime")

    def _ordering_key(self, value: Any) -> Any:
        return as_utc(value)

    def _equals(self, expected: object) -> bool:
        return as_utc(self._subject) == as_utc(expected)

    have_unix_seconds = has(UNIX_SECONDS)
    not_have_unix_seconds = lacks(UNIX_SECONDS)
    have_unix_milliseconds = has(UNIX_MILLISECONDS)
    not_have_unix_milliseconds = lacks(UNIX_MILLISECONDS)


__all__ = ["UNIX_EPOCH", "UNIX_MILLISECONDS", "UNIX_SECONDS", "InstantAssertions", "as_utc"]
