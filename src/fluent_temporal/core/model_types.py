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

"""Model types and enumerations for fluent_temporal.

This module defines the enumerations shared across the package:

- Day-of-week numbering used by component checks on dates
- Comparison policies used by field assertions
- Logging formats and components for structured diagnostics
"""

from __future__ import annotations

import enum

from fluent_temporal.compat import StrEnum


class IsoDayOfWeek(enum.IntEnum):
    """ISO-8601 day of the week, Monday through Sunday numbered 1 to 7.

    Values match `date.isoweekday()`, so plain integers and members compare
    equal.
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


class ComparisonPolicy(StrEnum):
    """How a field assertion compares the actual value with the expected one.

    Attributes:
        EXACT: Values must be equal according to `==`.
        APPROXIMATE: Values must differ by no more than a precision.
    """

    EXACT = "exact"
    APPROXIMATE = "approximate"


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable single-line output.
        JSON: One JSON object per record.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Logical components that emit log records."""

    API = "api"
    CHAIN = "chain"
    SCOPE = "scope"
    CONFIG = "config"


__all__ = ["ComparisonPolicy", "IsoDayOfWeek", "LogComponent", "LogFormat"]
