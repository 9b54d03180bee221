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

"""Failure message rendering.

Templates use three kinds of placeholders:

- ``{context}`` or ``{context:<default>}``: the subject's display name. The
  chain's subject name wins; otherwise ``<default>`` (or the chain identifier
  for the bare form) is used.
- ``{reason}``: the rendered "because" phrase, including its leading space.
- ``{0}``, ``{1}``, ...: positional arguments rendered with `format_value`.

Substitution happens in a single pass, so rendered values that happen to
contain braces are never interpreted as placeholders.
"""

from __future__ import annotations

import enum
import logging
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import TYPE_CHECKING, Final

from fluent_temporal.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Sequence

logger: logging.Logger = logging.getLogger("fluent_temporal.chain")

_PLACEHOLDER: Final[re.Pattern[str]] = re.compile(
    r"\{(?:(?P<context>context)(?::(?P<default>[^}]*))?|(?P<reason>reason)|(?P<index>\d+))\}",
)
_BECAUSE: Final[str] = "because"


def format_value(value: object, *, null_placeholder: str | None = None) -> str:
    """Render a value for inclusion in a failure message.

    Args:
        value: Value to render.
        null_placeholder: Text used for ``None``. Defaults to the configured
            placeholder (``<null>``).

    Returns:
        Display text for the value.
    """
    match value:
        case None:
            return null_placeholder if null_placeholder is not None else get_settings().null_placeholder
        case bool():
            return str(value)
        case enum.Enum():
            return value.name
        case str():
            return f'"{value}"'
        case datetime() | date() | time():
            return value.isoformat()
        case timedelta():
            return str(value)
        case timezone():
            return format_offset(value.utcoffset(None))
        case float():
            return repr(value)
        case _:
            return str(value)


def format_offset(offset: timedelta) -> str:
    """Render a UTC offset as ``UTC``, ``UTC+HH:MM`` or ``UTC-HH:MM:SS``."""
    if not offset:
        return "UTC"
    sign = "-" if offset < timedelta(0) else "+"
    seconds = int(abs(offset).total_seconds())
    hours, remainder = divmod(seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    text = f"UTC{sign}{hours:02d}:{minutes:02d}"
    return f"{text}:{seconds:02d}" if seconds else text


def render_reason(reason: str, args: Sequence[object] = ()) -> str:
    """Render a "because" phrase for the ``{reason}`` placeholder.

    Args:
        reason: Reason phrase, optionally with ``str.format`` placeholders.
        args: Positional arguments for the phrase.

    Returns:
        An empty string for a blank reason, otherwise the phrase prefixed with
        a space and, when missing, the word "because".
    """
    if not reason.strip():
        return ""
    text = reason
    if args:
        try:
            text = reason.format(*args)
        except (IndexError, KeyError, ValueError):
            logger.debug("Could not interpolate reason %r with %d argument(s)", reason, len(args))
    text = text.strip()
    if not text.lower().startswith(_BECAUSE):
        text = f"{_BECAUSE} {text}"
    return f" {text}"


def render_template(
    template: str,
    args: Sequence[object] = (),
    *,
    subject_name: str | None = None,
    identifier: str = "value",
    reason: str = "",
    null_placeholder: str | None = None,
) -> str:
    """Substitute every placeholder in a message template.

    Args:
        template: Message template.
        args: Positional arguments for ``{0}``, ``{1}``, ...
        subject_name: Caller-supplied display name of the subject, if any.
        identifier: Fallback display name for a bare ``{context}``.
        reason: Already rendered reason phrase.
        null_placeholder: Text used for ``None`` arguments.

    Returns:
        The rendered message. Indices without a matching argument are left
        untouched.
    """

    def _substitute(match: re.Match[str]) -> str:
        if match.group("context"):
            if subject_name:
                return subject_name
            default = match.group("default")
            return default if default else identifier
        if match.group("reason"):
            return reason
        index = int(match.group("index"))
        if index >= len(args):
            return match.group(0)
        return format_value(args[index], null_placeholder=null_placeholder)

    return _PLACEHOLDER.sub(_substitute, template)


__all__ = ["format_offset", "format_value", "render_reason", "render_template"]
