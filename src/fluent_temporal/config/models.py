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

"""Settings models for fluent_temporal.

Raw TOML tables and environment values are validated by `SettingsModel`
(pydantic) and then frozen into the `Settings` dataclass that the rest of the
package reads.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from .constants import DEFAULT_NULL_PLACEHOLDER, DEFAULT_PRECISION


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolved settings used by assertions and message formatting.

    Attributes:
        default_precision: Tolerance applied by approximate total-measure
            checks when the caller omits one.
        null_placeholder: Text rendered in failure messages for absent values.
    """

    default_precision: float = DEFAULT_PRECISION
    null_placeholder: str = DEFAULT_NULL_PLACEHOLDER


class SettingsModel(BaseModel):
    """Validation model for a ``[tool.fluent_temporal]`` table."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", populate_by_name=True)

    default_precision: float = DEFAULT_PRECISION
    null_placeholder: str = DEFAULT_NULL_PLACEHOLDER

    @field_validator("default_precision")
    @classmethod
    def _validate_precision(cls, value: float) -> float:
        if math.isnan(value) or value < 0:
            message = f"default_precision must be a non-negative number (got {value})"
            raise ValueError(message)
        return value

    @field_validator("null_placeholder")
    @classmethod
    def _validate_placeholder(cls, value: str) -> str:
        if not value.strip():
            message = "null_placeholder must not be blank"
            raise ValueError(message)
        return value


def settings_from_model(model: SettingsModel) -> Settings:
    """Convert a validated model into the frozen ``Settings`` dataclass.

    Args:
        model: Validated settings model.

    Returns:
        Settings carrying the model's values.
    """
    return Settings(
        default_precision=model.default_precision,
        null_placeholder=model.null_placeholder,
    )


__all__ = ["Settings", "SettingsModel", "settings_from_model"]
