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

"""Continuation objects returned by assertion methods."""

from __future__ import annotations

from typing import Generic, TypeVar

AssertionsT = TypeVar("AssertionsT")
ValueT = TypeVar("ValueT")


class AndConstraint(Generic[AssertionsT]):
    """Allows chaining further assertions on the same subject via ``and_``."""

    __slots__ = ("_parent",)

    def __init__(self, parent: AssertionsT) -> None:
        self._parent = parent

    @property
    def and_(self) -> AssertionsT:
        return self._parent


class AndWhichConstraint(AndConstraint[AssertionsT], Generic[AssertionsT, ValueT]):
    """Like `AndConstraint`, additionally exposing the matched value as ``which``."""

    __slots__ = ("_which",)

    def __init__(self, parent: AssertionsT, which: ValueT) -> None:
        super().__init__(parent)
        self._which = which

    @property
    def which(self) -> ValueT:
        return self._which


__all__ = ["AndConstraint", "AndWhichConstraint"]
