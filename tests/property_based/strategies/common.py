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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from datetime import datetime, timedelta

from hypothesis import strategies as st

from fluent_temporal.compat import UTC

__all__ = [
    "aware_datetimes",
    "bounded_timedeltas",
    "non_negative_timedeltas",
    "precisions",
]

_LIMIT = timedelta(days=100_000)


def bounded_timedeltas(limit: timedelta = _LIMIT) -> st.SearchStrategy[timedelta]:
    """Return durations within ``limit`` of zero, so differences never overflow."""
    return st.timedeltas(min_value=-limit, max_value=limit)


def non_negative_timedeltas(limit: timedelta = _LIMIT) -> st.SearchStrategy[timedelta]:
    """Return durations between zero and ``limit``."""
    return st.timedeltas(min_value=timedelta(0), max_value=limit)


def aware_datetimes() -> st.SearchStrategy[datetime]:
    """Return UTC datetimes far enough from the representable range edges.

    Returns:
        Hypothesis strategy producing aware datetimes between 1900 and 2200.
    """
    return st.datetimes(
        min_value=datetime(1900, 1, 1),
        max_value=datetime(2200, 1, 1),
        timezones=st.just(UTC),
    )


def precisions(max_value: float = 1_000.0) -> st.SearchStrategy[float]:
    """Return finite, non-negative precisions for approximate checks."""
    return st.floats(min_value=0.0, max_value=max_value, allow_nan=False, allow_infinity=False)
