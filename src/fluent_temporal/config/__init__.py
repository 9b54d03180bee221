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

"""Settings management for fluent_temporal.

This package loads, validates and caches the few knobs the assertions expose:
the default precision of approximate checks and the placeholder rendered for
absent values.
"""

from __future__ import annotations

from .constants import DEFAULT_NULL_PLACEHOLDER, DEFAULT_PRECISION
from .loader import (
    LoadedSettings,
    get_settings,
    load_settings,
    load_settings_with_metadata,
    override_settings,
    reset_settings,
)
from .models import Settings, SettingsModel, settings_from_model

__all__ = [
    "DEFAULT_NULL_PLACEHOLDER",
    "DEFAULT_PRECISION",
    "LoadedSettings",
    "Settings",
    "SettingsModel",
    "get_settings",
    "load_settings",
    "load_settings_with_metadata",
    "override_settings",
    "reset_settings",
    "settings_from_model",
]
