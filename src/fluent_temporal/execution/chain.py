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

"""Assertion chain: the per-subject state behind every fluent check.

Each assertion method runs one *step* on the chain:

    chain.because(reason, *args).for_condition(ok).fail_with(template, *values)

``because`` starts the step and resets its state, ``for_condition`` records
whether the check passed and ``fail_with`` reports a failure when it did not.
Templates are only rendered for failing steps, and a template may also be a
zero-argument callable producing the text.

``with_expectation`` lets a step share a message prefix across several
outcomes (for example "found X" versus "found <null>").
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeAlias

from fluent_temporal._internal.logging_utils import structured_extra
from fluent_temporal.compat import Self
from fluent_temporal.config import get_settings
from fluent_temporal.core.model_types import LogComponent
from fluent_temporal.exceptions import TemporalAssertionError

from .formatting import render_reason, render_template
from .scope import AssertionScope, current_scope

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger: logging.Logger = logging.getLogger("fluent_temporal.chain")

MessageTemplate: TypeAlias = "str | Callable[[], str]"


class AssertionChain:
    """Tracks the outcome of assertion steps for a single subject.

    Failures raise `TemporalAssertionError` immediately unless an
    `assertion_scope` was active when the chain was created, in which case they
    are handed to that scope. Once that scope has exited, failures go to the
    scope active at report time or raise.
    """

    def __init__(
        self,
        subject_name: str | None = None,
        *,
        identifier: str = "value",
        scope: AssertionScope | None = None,
    ) -> None:
        self._subject_name = subject_name
        self._identifier = identifier
        self._scope = scope
        self._reason = ""
        self._reason_args: tuple[object, ...] = ()
        self._condition = True
        self._succeeded = True
        self._expectation: tuple[str, tuple[object, ...]] | None = None
        self._failures: list[str] = []

    @classmethod
    def get_or_create(cls, subject_name: str | None = None, *, identifier: str = "value") -> AssertionChain:
        """Create a chain bound to the active assertion scope, if any.

        Args:
            subject_name: Display name of the subject. Falls back to the
                scope's name.
            identifier: Generic noun used when no name is known (``duration``,
                ``date``...).

        Returns:
            A fresh chain.
        """
        scope = current_scope()
        name = subject_name if subject_name is not None else (scope.name if scope is not None else None)
        return cls(name, identifier=identifier, scope=scope)

    @property
    def subject_name(self) -> str | None:
        return self._subject_name

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def succeeded(self) -> bool:
        """Whether the current step has not reported a failure."""
        return self._succeeded

    @property
    def failures(self) -> tuple[str, ...]:
        """Every failure message this chain reported."""
        return tuple(self._failures)

    def because(self, reason: str = "", *args: object) -> Self:
        """Start a new step with an optional reason phrase.

        Args:
            reason: Phrase explaining why the assertion should hold. It may
                contain ``str.format`` placeholders filled from ``args``.
            *args: Values for the reason placeholders.

        Returns:
            The chain itself.
        """
        self._reason = reason
        self._reason_args = args
        self._condition = True
        self._succeeded = True
        self._expectation = None
        return self

    def for_condition(self, condition: bool) -> Self:
        """Record whether the check of the current step holds."""
        self._condition = bool(condition)
        return self

    def fail_with(self, template: MessageTemplate, *args: object) -> Self:
        """Report a failure when the last condition did not hold.

        Nothing is rendered when the condition holds or when the step already
        failed, so a step reports at most one message.

        Args:
            template: Message template, or a callable returning one.
            *args: Values for the ``{0}``, ``{1}``... placeholders.

        Returns:
            The chain itself.

        Raises:
            TemporalAssertionError: When the step fails outside an assertion scope.
        """
        if self._condition or not self._succeeded:
            return self
        self._succeeded = False
        text = template() if callable(template) else template
        message = self._render(text, args)
        if self._expectation is not None:
            prefix, prefix_args = self._expectation
            message = self._render(prefix, prefix_args) + message
        self._report(message)
        return self

    def with_expectation(
        self,
        template: str,
        *args: object,
        then: Callable[[AssertionChain], object],
    ) -> Self:
        """Run ``then`` with a message prefix prepended to its failures.

        Args:
            template: Prefix template, usually "Expected {context} to ...{reason}".
            *args: Values for the prefix placeholders.
            then: Callback performing ``for_condition``/``fail_with`` calls.

        Returns:
            The chain itself.
        """
        previous = self._expectation
        self._expectation = (template, args)
        try:
            then(self)
        finally:
            self._expectation = previous
        return self

    def _render(self, template: str, args: Sequence[object]) -> str:
        settings = get_settings()
        return render_template(
            template,
            args,
            subject_name=self._subject_name,
            identifier=self._identifier,
            reason=render_reason(self._reason, self._reason_args),
            null_placeholder=settings.null_placeholder,
        )

    def _report(self, message: str) -> None:
        self._failures.append(message)
        logger.debug(
            "Assertion failed: %s",
            message,
            extra=structured_extra(
                LogComponent.CHAIN,
                subject=self._subject_name or self._identifier,
                passed=False,
                failures=[message],
            ),
        )
        scope = self._scope
        if scope is not None and scope.closed:
            scope = current_scope()
        if scope is not None:
            scope.add_failure(message)
            return
        raise TemporalAssertionError([message])


__all__ = ["AssertionChain", "MessageTemplate"]
