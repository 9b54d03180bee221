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

"""Approximate equality for floating-point aggregate measures."""

from __future__ import annotations


def is_approximately_equal(value: float, expected: float, precision: float) -> bool:
    """Return whether ``value`` lies within ``precision`` of ``expected``.

    Args:
        value: Measured value.
        expected: Expected value.
        precision: Maximum allowed absolute difference (inclusive).

    Returns:
        True when ``abs(value - expected) <= precision``. NaN never matches.
    """
    return abs(value - expected) <= precision


__all__ = ["is_approximately_equal"]
