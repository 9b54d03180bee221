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

"""Settings loading for fluent_temporal.

Settings come from, in increasing order of precedence:

1. Built-in defaults.
2. The first of ``fluent_temporal.toml``, ``.fluent_temporal.toml`` or
   ``pyproject.toml`` (``[tool.fluent_temporal]``) found in the project root.
3. ``FLUENT_TEMPORAL_*`` environment variables.
4. ``override_settings`` blocks active in the current context.

The resolved settings are cached per process; ``reset_settings`` clears the
cache so tests can change the working directory or environment.
"""

from __future__ import annotations

import dataclasses
import functools
import logging
import os
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, cast

from pydantic import ValidationError

from fluent_temporal._internal.logging_utils import structured_extra
from fluent_temporal._internal.paths import resolve_project_root
from fluent_temporal.compat import tomllib
from fluent_temporal.core.model_types import LogComponent
from fluent_temporal.exceptions import InvalidSettingsFileError, SettingsReadError, SettingsValidationError

from .constants import NULL_PLACEHOLDER_ENV, PRECISION_ENV, PYPROJECT_TOOL_KEY, SETTINGS_FILENAMES
from .models import Settings, SettingsModel, settings_from_model

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

logger: logging.Logger = logging.getLogger("fluent_temporal.config")

_OVERRIDE: ContextVar[Settings | None] = ContextVar("fluent_temporal_settings_override", default=None)

_ENV_FIELDS: tuple[tuple[str, str], ...] = (
    (PRECISION_ENV, "default_precision"),
    (NULL_PLACEHOLDER_ENV, "null_placeholder"),
)


@dataclass(slots=True, frozen=True)
class LoadedSettings:
    """Container for loaded settings and their source file.

    Attributes:
        settings: Resolved settings.
        path: File the settings were read from, or None when only defaults and
            environment variables applied.
    """

    settings: Settings
    path: Path | None


def load_settings(explicit_path: Path | None = None) -> Settings:
    """Load settings from disk and the environment.

    Args:
        explicit_path: Optional settings file. When given, only this file is read.

    Returns:
        The resolved settings.
    """
    return load_settings_with_metadata(explicit_path).settings


def load_settings_with_metadata(
    explicit_path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> LoadedSettings:
    """Load settings together with the path they originated from.

    Args:
        explicit_path: Optional settings file. When given, only this file is read
            and it must contain fluent_temporal settings.
        environ: Environment mapping to read overrides from (defaults to
            ``os.environ``).

    Returns:
        LoadedSettings: Resolved settings and their source path.

    Raises:
        SettingsReadError: If a candidate file cannot be read or parsed.
        InvalidSettingsFileError: If a file's settings fail validation.
        SettingsValidationError: If environment overrides fail validation.
    """
    env = os.environ if environ is None else environ
    payload: dict[str, object] = {}
    source: Path | None = None
    for candidate in _search_order(explicit_path):
        found = _read_candidate(candidate, explicit=explicit_path is not None)
        if found is not None:
            payload, source = found, candidate.resolve()
            break

    if source is not None:
        try:
            _ = SettingsModel.model_validate(payload)
        except ValidationError as exc:
            raise InvalidSettingsFileError(source, exc) from exc

    merged = {**payload, **_environment_overrides(env)}
    try:
        model = SettingsModel.model_validate(merged)
    except ValidationError as exc:
        message = f"Invalid fluent_temporal environment settings: {exc}"
        raise SettingsValidationError(message) from exc

    settings = settings_from_model(model)
    logger.debug(
        "Loaded fluent_temporal settings from %s",
        source or "defaults",
        extra=structured_extra(
            LogComponent.CONFIG,
            path=source or "",
            details=dataclasses.asdict(settings),
        ),
    )
    return LoadedSettings(settings=settings, path=source)


def get_settings() -> Settings:
    """Return the settings in effect for the current context.

    Returns:
        The innermost ``override_settings`` value, or the cached settings
        loaded from the project root.
    """
    override = _OVERRIDE.get()
    if override is not None:
        return override
    return _cached_settings().settings


def reset_settings() -> None:
    """Forget the cached settings so the next lookup reloads them."""
    _cached_settings.cache_clear()


@contextmanager
def override_settings(**values: object) -> Iterator[Settings]:
    """Temporarily replace individual settings in the current context.

    Args:
        **values: Settings fields to replace, e.g. ``default_precision=0.5``.

    Yields:
        The settings in effect inside the block.

    Raises:
        SettingsValidationError: If the replacement values fail validation.
    """
    base = dataclasses.asdict(get_settings())
    try:
        model = SettingsModel.model_validate({**base, **values})
    except ValidationError as exc:
        message = f"Invalid fluent_temporal settings override: {exc}"
        raise SettingsValidationError(message) from exc
    settings = settings_from_model(model)
    token = _OVERRIDE.set(settings)
    try:
        yield settings
    finally:
        _OVERRIDE.reset(token)


@functools.cache
def _cached_settings() -> LoadedSettings:
    return load_settings_with_metadata()


def _search_order(explicit_path: Path | None) -> list[Path]:
    if explicit_path is not None:
        return [explicit_path if explicit_path.is_absolute() else (Path.cwd() / explicit_path).resolve()]
    root = resolve_project_root(Path.cwd())
    return [root / filename for filename in SETTINGS_FILENAMES]


def _read_candidate(candidate: Path, *, explicit: bool) -> dict[str, object] | None:
    if not candidate.is_file():
        if explicit:
            raise SettingsReadError(candidate, FileNotFoundError(str(candidate)))
        return None
    try:
        raw: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise SettingsReadError(candidate, exc) from exc

    payload = _extract_payload(candidate, raw)
    if payload is None and explicit:
        message = f"{candidate.name} does not define a [tool.{PYPROJECT_TOOL_KEY}] section"
        raise InvalidSettingsFileError(candidate, ValueError(message))
    return payload


def _extract_payload(candidate: Path, raw: dict[str, object]) -> dict[str, object] | None:
    tool_section = raw.get("tool")
    section: object | None = None
    if isinstance(tool_section, dict):
        section = cast("dict[str, object]", tool_section).get(PYPROJECT_TOOL_KEY)
    if section is not None:
        if not isinstance(section, dict):
            message = f"[tool.{PYPROJECT_TOOL_KEY}] must be a TOML table"
            raise InvalidSettingsFileError(candidate, ValueError(message))
        return cast("dict[str, object]", section)
    if candidate.name == "pyproject.toml":
        return None
    # standalone settings files ignore unrelated tool tables
    return {key: value for key, value in raw.items() if key != "tool"}


def _environment_overrides(environ: Mapping[str, str]) -> dict[str, object]:
    overrides: dict[str, object] = {}
    for env_name, field_name in _ENV_FIELDS:
        value = environ.get(env_name)
        if value is not None and value.strip():
            overrides[field_name] = value.strip()
    return overrides


__all__ = [
    "LoadedSettings",
    "get_settings",
    "load_settings",
    "load_settings_with_metadata",
    "override_settings",
    "reset_settings",
]
