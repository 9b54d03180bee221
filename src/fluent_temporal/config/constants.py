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

"""Shared settings defaults and lookup names for fluent_temporal."""

from __future__ import annotations

from typing import Final

DEFAULT_PRECISION: Final[float] = 0.01
DEFAULT_NULL_PLACEHOLDER: Final[str] = "<null>"

SETTINGS_FILENAMES: Final[tuple[str, ...]] = (
    "fluent_temporal.toml",
    ".fluent_temporal.toml",
    "pyproject.toml",
)
PYPROJECT_TOOL_KEY: Final[str] = "fluent_temporal"

PRECISION_ENV: Final[str] = "FLUENT_TEMPORAL_DEFAULT_PRECISION"
NULL_PLACEHOLDER_ENV: Final[str] = "FLUENT_TEMPORAL_NULL_PLACEHOLDER"

__all__ = [
    "DEFAULT_NULL_PLACEHOLDER",
    "DEFAULT_PRECISION",
    "NULL_PLACEHOLDER_ENV",
    "PRECISION_ENV",
    "PYPROJECT_TOOL_KEY",
    "SETTINGS_FILENAMES",
]
