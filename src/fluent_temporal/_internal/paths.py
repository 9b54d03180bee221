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

"""Project root discovery used by the settings loader."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, Literal, TypeAlias

from fluent_temporal._internal.logging_utils import structured_extra
from fluent_temporal.core.model_types import LogComponent

logger: logging.Logger = logging.getLogger("fluent_temporal.config")

RootMarker: TypeAlias = Literal["fluent_temporal.toml", ".fluent_temporal.toml", "pyproject.toml", ".git"]
ROOT_MARKERS: Final[tuple[RootMarker, ...]] = (
    "fluent_temporal.toml",
    ".fluent_temporal.toml",
    "pyproject.toml",
    ".git",
)


def resolve_project_root(start: Path | None = None) -> Path:
    """Resolve the project root by walking parent directories for markers.

    Args:
        start: Optional starting path (defaults to current working directory).

    Returns:
        The nearest ancestor holding one of ``ROOT_MARKERS``, or the starting
        directory when none does.
    """
    base = (start or Path.cwd()).resolve()
    if base.is_file():
        base = base.parent

    for candidate in (base, *base.parents):
        for marker in ROOT_MARKERS:
            if (candidate / marker).exists():
                return candidate

    logger.debug(
        "No project markers found above %s; using it as project root",
        base,
        extra=structured_extra(LogComponent.CONFIG, path=base),
    )
    return base


__all__ = ["ROOT_MARKERS", "RootMarker", "resolve_project_root"]
