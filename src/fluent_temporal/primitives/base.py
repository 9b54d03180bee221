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

"""Base classes shared by every assertion wrapper.

`TemporalAssertions` owns the subject and its `AssertionChain` and implements
equality plus the generic field combinator (`have` / `not_have`).
`ComparableAssertions` adds ordering, and `ProximityAssertions` adds
``be_close_to`` for subjects whose difference is a ``timedelta``.
"""

from __future__ import annotations

import math
import operator
from datetime import timedelta
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from fluent_temporal.approx import is_approximately_equal
from fluent_temporal.compat import Self
from fluent_temporal.config import get_settings
from fluent_temporal.core.model_types import ComparisonPolicy
from fluent_temporal.exceptions import NegativeToleranceError, SubjectTypeError
from fluent_temporal.execution import AndConstraint, AndWhichConstraint, AssertionChain

if TYPE_CHECKING:
    from collections.abc import Callable

    from .fields import Field

SubjectT = TypeVar("SubjectT")

_FOUND = ", but found {0}."


def require_non_negative(parameter: str, value: float | timedelta) -> None:
    """Raise `NegativeToleranceError` when a tolerance is below zero.

    Raises:
        NegativeToleranceError: If ``value`` is negative or NaN.
    """
    if isinstance(value, timedelta):
        if value < timedelta(0):
            raise NegativeToleranceError(parameter, value)
        return
    if math.isnan(value) or value < 0:
        raise NegativeToleranceError(parameter, value)


class TemporalAssertions(Generic[SubjectT]):
    """Assertions shared by all wrapped temporal values.

    Attributes:
        identifier: Noun used for the subject in failure messages when no
            display name was given.
    """

    identifier: ClassVar[str] = "value"

    def __init__(self, subject: SubjectT | None, chain: AssertionChain | None = None) -> None:
        if subject is not None:
            self._validate(subject)
        self._subject = subject
        self._chain = chain if chain is not None else AssertionChain.get_or_create(identifier=self.identifier)

    @property
    def subject(self) -> SubjectT | None:
        """The value under test (may be None)."""
        return self._subject

    @property
    def chain(self) -> AssertionChain:
        return self._chain

    def _validate(self, subject: SubjectT) -> None:
        """Reject subjects the wrapper cannot handle.

        Raises:
            SubjectTypeError: If the subject is unsupported.
        """

    def _reject(self, subject: object, detail: str) -> None:
        raise SubjectTypeError(subject, f"{type(self).__name__} {detail}")

    def _equals(self, expected: object) -> bool:
        return self._subject == expected

    def be(self, expected: SubjectT | None, because: str = "", *because_args: object) -> AndConstraint[Self]:
        """Assert that the subject equals ``expected``.

        Args:
            expected: Expected value; None expects an absent subject.
            because: Optional reason phrase for the failure message.
            *because_args: Values for placeholders in ``because``.

        Returns:
            A constraint for chaining further assertions.
        """
        self._chain.because(because, *because_args).for_condition(self._equals(expected)).fail_with(
            "Expected {context} to be equal to {0}{reason}, but found {1}.",
            expected,
            self._subject,
        )
        return AndConstraint(self)

    def not_be(self, unexpected: SubjectT | None, because: str = "", *because_args: object) -> AndConstraint[Self]:
        """Assert that the subject does not equal ``unexpected``."""
        self._chain.because(because, *because_args).for_condition(not self._equals(unexpected)).fail_with(
            "Did not expect {context} to be equal to {0}{reason}.",
            unexpected,
        )
        return AndConstraint(self)

    def have(
        self,
        field: Field[Any, Any],
        expected: object,
        because: str = "",
        *because_args: object,
        precision: float | None = None,
    ) -> AndWhichConstraint[Self, Any]:
        """Assert that a derived field of the subject has the expected value.

        Args:
            field: Field to read from the subject.
            expected: Expected field value.
            because: Optional reason phrase for the failure message.
            *because_args: Values for placeholders in ``because``.
            precision: Maximum difference for approximate fields. Defaults to
                the configured precision.

        Returns:
            A constraint whose ``which`` is the field value read from the
            subject (None for an absent subject).

        Raises:
            NegativeToleranceError: If ``precision`` is negative.
        """
        tolerance = self._tolerance(field, precision)
        wanted = field.expected(expected)
        actual = None if self._subject is None else field.read(self._subject)

        def verify(chain: AssertionChain) -> None:
            if self._subject is None:
                chain.for_condition(False).fail_with(_FOUND, None)
                return
            chain.for_condition(self._matches(field, actual, wanted, tolerance)).fail_with(_FOUND, actual)

        self._chain.because(because, *because_args).with_expectation(
            "Expected {context} to have " + field.phrase + "{reason}",
            wanted,
            tolerance,
            then=verify,
        )
        return AndWhichConstraint(self, actual)

    def not_have(
        self,
        field: Field[Any, Any],
        unexpected: object,
        because: str = "",
        *because_args: object,
        precision: float | None = None,
    ) -> AndConstraint[Self]:
        """Assert that a derived field of the subject differs from ``unexpected``.

        An absent subject fails, since there is no field to inspect.

        Raises:
            NegativeToleranceError: If ``precision`` is negative.
        """
        tolerance = self._tolerance(field, precision)
        unwanted = field.expected(unexpected)

        def verify(chain: AssertionChain) -> None:
            if self._subject is None:
                chain.for_condition(False).fail_with(_FOUND, None)
                return
            actual = field.read(self._subject)
            chain.for_condition(not self._matches(field, actual, unwanted, tolerance)).fail_with(".")

        self._chain.because(because, *because_args).with_expectation(
            "Did not expect {context} to have " + field.phrase + "{reason}",
            unwanted,
            tolerance,
            then=verify,
        )
        return AndConstraint(self)

    def _satisfy(
        self,
        predicate: Callable[[SubjectT], bool],
        expectation: str,
        because: str,
        because_args: tuple[object, ...],
    ) -> AndConstraint[Self]:
        subject = self._subject

        def verify(chain: AssertionChain) -> None:
            if subject is None:
                chain.for_condition(False).fail_with(_FOUND, None)
                return
            chain.for_condition(predicate(subject)).fail_with(_FOUND, subject)

        self._chain.because(because, *because_args).with_expectation(expectation + "{reason}", then=verify)
        return AndConstraint(self)

    @staticmethod
    def _tolerance(field: Field[Any, Any], precision: float | None) -> float | None:
        if field.policy is ComparisonPolicy.EXACT:
            return None
        tolerance = get_settings().default_precision if precision is None else precision
        require_non_negative("precision", tolerance)
        return tolerance

    @staticmethod
    def _matches(field: Field[Any, Any], actual: object, expected: object, tolerance: float | None) -> bool:
        if field.policy is ComparisonPolicy.APPROXIMATE and tolerance is not None:
            if not isinstance(actual, int | float) or not isinstance(expected, int | float):
                return False
            return is_approximately_equal(float(actual), float(expected), tolerance)
        return actual == expected


class ComparableAssertions(TemporalAssertions[SubjectT]):
    """Adds ordering assertions for totally ordered subjects."""

    def _ordering_key(self, value: Any) -> Any:
        return value

    def _compare(
        self,
        other: SubjectT,
        relation: Callable[[Any, Any], bool],
        description: str,
        because: str,
        because_args: tuple[object, ...],
    ) -> AndConstraint[Self]:
        holds = self._subject is not None and relation(self._ordering_key(self._subject), self._ordering_key(other))
        self._chain.because(because, *because_args).for_condition(holds).fail_with(
            "Expected {context} to be " + description + " {0}{reason}, but found {1}.",
            other,
            self._subject,
        )
        return AndConstraint(self)

    def be_greater_than(self, other: SubjectT, because: str = "", *because_args: object) -> AndConstraint[Self]:
        """Assert that the subject is strictly greater than ``other``."""
        return self._compare(other, operator.gt, "greater than", because, because_args)

    def be_greater_than_or_equal_to(
        self,
        other: SubjectT,
        because: str = "",
        *because_args: object,
    ) -> AndConstraint[Self]:
        return self._compare(other, operator.ge, "greater than or equal to", because, because_args)

    def be_less_than(self, other: SubjectT, because: str = "", *because_args: object) -> AndConstraint[Self]:
        """Assert that the subject is strictly less than ``other``."""
        return self._compare(other, operator.lt, "less than", because, because_args)

    def be_less_than_or_equal_to(
        self,
        other: SubjectT,
        because: str = "",
        *because_args: object,
    ) -> AndConstraint[Self]:
        return self._compare(other, operator.le, "less than or equal to", because, because_args)


class ProximityAssertions(ComparableAssertions[SubjectT]):
    """Adds closeness checks for subjects whose difference is a ``timedelta``."""

    def _distance(self, other: SubjectT) -> timedelta | None:
        if self._subject is None:
            return None
        subject, target = self._ordering_key(self._subject), self._ordering_key(other)
        return target - subject if target > subject else subject - target

    def be_close_to(
        self,
        other: SubjectT,
        precision: timedelta,
        because: str = "",
        *because_args: object,
    ) -> AndConstraint[Self]:
        """Assert that the subject lies within ``precision`` of ``other``.

        Args:
            other: Value to compare against.
            precision: Maximum allowed distance (inclusive).
            because: Optional reason phrase for the failure message.
            *because_args: Values for placeholders in ``because``.

        Returns:
            A constraint for chaining further assertions.

        Raises:
            NegativeToleranceError: If ``precision`` is negative.
        """
        require_non_negative("precision", precision)
        distance = self._distance(other)

        def verify(chain: AssertionChain) -> None:
            if distance is None:
                chain.for_condition(False).fail_with(_FOUND, None)
                return
            chain.for_condition(distance <= precision).fail_with(", but it differed by {0}.", distance)

        self._chain.because(because, *because_args).with_expectation(
            "Expected {context} to be within {0} from {1}{reason}",
            precision,
            other,
            then=verify,
        )
        return AndConstraint(self)

    def not_be_close_to(
        self,
        other: SubjectT,
        precision: timedelta,
        because: str = "",
        *because_args: object,
    ) -> AndConstraint[Self]:
        """Assert that the subject lies further than ``precision`` from ``other``.

        Raises:
            NegativeToleranceError: If ``precision`` is negative.
        """
        require_non_negative("precision", precision)
        distance = self._distance(other)

        def verify(chain: AssertionChain) -> None:
            if distance is None:
                chain.for_condition(False).fail_with(_FOUND, None)
                return
            chain.for_condition(distance > precision).fail_with(", but it differed by only {0}.", distance)

        self._chain.because(because, *because_args).with_expectation(
            "Did not expect {context} to be within {0} from {1}{reason}",
            precision,
            other,
            then=verify,
        )
        return AndConstraint(self)


__all__ = ["ComparableAssertions", "ProximityAssertions", "TemporalAssertions", "require_non_negative"]
