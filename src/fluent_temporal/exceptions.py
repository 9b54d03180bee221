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

"""Common exception hierarchy for fluent_temporal.

Two families live here. `TemporalAssertionError` reports failed expectations
and derives from `AssertionError` so test runners treat it as a test failure.
Everything under `FluentTemporalError` reports misuse of the library itself
(bad arguments, unsupported subjects, broken settings files).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

__all__ = [
    "FluentTemporalError",
    "FluentTemporalTypeError",
    "FluentTemporalValidationError",
    "InvalidSettingsFileError",
    "NegativeToleranceError",
    "SettingsReadError",
    "SettingsValidationError",
    "SubjectTypeError",
    "TemporalAssertionError",
]


class TemporalAssertionError(AssertionError):
    """Raised when one or more assertions on a temporal subject fail.

    Attributes:
        failures: Every failure message reported, in order.
    """

    def __init__(self, failures: Iterable[str]) -> None:
        """Initialise the error from the collected failure messages.

        Args:
            failures: Failure messages in the order they were reported.
        """
        self.failures: tuple[str, ...] = tuple(failures)
        super().__init__("\n".join(self.failures))


class FluentTemporalError(Exception):
    """Base error for all fluent_temporal exceptions."""


class FluentTemporalValidationError(FluentTemporalError, ValueError):
    """Raised when input data fails validation checks."""


class FluentTemporalTypeError(FluentTemporalError, TypeError):
    """Raised when input data has an unexpected type."""


class NegativeToleranceError(FluentTemporalValidationError):
    """Raised when a closeness or approximate check receives a negative tolerance."""

    def __init__(self, parameter: str, value: object) -> None:
        """Initialise the exception with the offending parameter.

        Args:
            parameter: Name of the tolerance parameter.
            value: The negative value that was supplied.
        """
        self.parameter = parameter
        self.value = value
        super().__init__(f"The value of {parameter} must be non-negative (got {value!r}).")


class SubjectTypeError(FluentTemporalTypeError):
    """Raised when a subject cannot be wrapped by the requested assertions."""

    def __init__(self, subject: object, detail: str) -> None:
        """Initialise the exception with the rejected subject.

        Args:
            subject: The value that could not be wrapped.
            detail: Explanation of why the subject was rejected.
        """
        self.subject = subject
        super().__init__(f"Cannot assert on {type(subject).__name__} value {subject!r}: {detail}")


class SettingsValidationError(FluentTemporalValidationError):
    """Raised when settings contain invalid values."""


class SettingsReadError(SettingsValidationError):
    """Raised when a settings file cannot be read or parsed."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialise the exception with the failing path and cause.

        Args:
            path: Settings file that failed to load.
            error: Underlying exception raised while reading or parsing.
        """
        self.path = path
        self.error = error
        super().__init__(f"Failed to read settings from {path}: {error}")


class InvalidSettingsFileError(SettingsValidationError):
    """Raised when a settings file parses but does not validate."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialise the exception with the invalid path and cause.

        Args:
            path: Settings file with invalid content.
            error: Validation error describing the problem.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid fluent_temporal settings in {path}: {error}")
