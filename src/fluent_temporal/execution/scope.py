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

"""Assertion scopes that collect failures instead of raising at once.

Outside a scope the first failed assertion raises. Inside one, failures are
collected and raised together when the outermost scope exits:

    with assertion_scope():
        should(duration).have_hours(2)
        should(duration).have_minutes(30)

The active scope is stored in a ``ContextVar``, so threads and asyncio tasks
never observe each other's scopes.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

from fluent_temporal._internal.logging_utils import structured_extra
from fluent_temporal.core.model_types import LogComponent
from fluent_temporal.exceptions import TemporalAssertionError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger: logging.Logger = logging.getLogger("fluent_temporal.chain")

_CURRENT_SCOPE: ContextVar[AssertionScope | None] = ContextVar("fluent_temporal_scope", default=None)


class AssertionScope:
    """Collects failure messages reported while the scope is active.

    Attributes:
        name: Subject display name given to chains created inside the scope.
        parent: Enclosing scope, or None for the outermost one.
    """

    def __init__(self, name: str | None = None, parent: AssertionScope | None = None) -> None:
        self.name = name if name is not None else (parent.name if parent is not None else None)
        self.parent = parent
        self._failures: list[str] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        """Whether the block that opened the scope has exited."""
        return self._closed

    @property
    def failures(self) -> tuple[str, ...]:
        """Failure messages collected so far."""
        return tuple(self._failures)

    @property
    def has_failures(self) -> bool:
        """Whether any assertion failed inside the scope."""
        return bool(self._failures)

    def add_failure(self, message: str) -> None:
        """Record a failure message."""
        self._failures.append(message)

    def extend(self, messages: Iterable[str]) -> None:
        """Record several failure messages at once."""
        self._failures.extend(messages)

    def close(self) -> None:
        """Stop accepting failures; later reports go to the active scope instead."""
        self._closed = True

    def discharge(self) -> None:
        """Hand collected failures to the parent scope or raise them.

        Raises:
            TemporalAssertionError: If this is the outermost scope and at least
                one failure was collected.
        """
        if not self._failures:
            return
        if self.parent is not None:
            self.parent.extend(self._failures)
            return
        logger.debug(
            "Assertion scope failed with %d failure(s)",
            len(self._failures),
            extra=structured_extra(LogComponent.SCOPE, subject=self.name, passed=False, failures=self._failures),
        )
        raise TemporalAssertionError(self._failures)


def current_scope() -> AssertionScope | None:
    """Return the innermost active scope, if any."""
    return _CURRENT_SCOPE.get()


@contextmanager
def assertion_scope(name: str | None = None) -> Iterator[AssertionScope]:
    """Collect assertion failures until the block exits.

    Args:
        name: Optional subject display name used in failure messages of chains
            created inside the block.

    Yields:
        The new scope.

    Raises:
        TemporalAssertionError: On exit of the outermost scope when any
            assertion inside it failed.
    """
    scope = AssertionScope(name, _CURRENT_SCOPE.get())
    token = _CURRENT_SCOPE.set(scope)
    try:
        yield scope
    finally:
        _CURRENT_SCOPE.reset(token)
        scope.close()
    scope.discharge()


__all__ = ["AssertionScope", "assertion_scope", "current_scope"]
