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

"""Execution machinery shared by all assertion wrappers."""

from __future__ import annotations

from .chain import AssertionChain, MessageTemplate
from .constraints import AndConstraint, AndWhichConstraint
from .formatting import format_value, render_reason, render_template
from .scope import AssertionScope, assertion_scope, current_scope

__all__ = [
    "AndConstraint",
    "AndWhichConstraint",
    "AssertionChain",
    "AssertionScope",
    "MessageTemplate",
    "assertion_scope",
    "current_scope",
    "format_value",
    "render_reason",
    "render_template",
]
