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

"""Unit tests for structured logging helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from fluent_temporal._internal.logging_utils import LOG_LEVELS, configure_logging, structured_extra
from fluent_temporal.core.model_types import LogComponent, LogFormat

if TYPE_CHECKING:
    from _pytest.capture import CaptureFixture
    from _pytest.monkeypatch import MonkeyPatch

pytestmark = pytest.mark.unit


def test_configure_logging_json_emits_structured_logs(capsys: CaptureFixture[str]) -> None:
    config = configure_logging("json")
    assert config.format is LogFormat.JSON
    logger = logging.getLogger("fluent_temporal")
    logger.info(
        "checked",
        extra=structured_extra(
            LogComponent.CHAIN,
            assertion="DurationAssertions",
            subject="elapsed",
            passed=False,
            failures=["Expected elapsed to have 3 hours, but found 2."],
        ),
    )
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.exception("broken")
    captured = capsys.readouterr()
    stream = captured.err or captured.out
    lines = [line for line in stream.strip().splitlines() if line]
    payload = json.loads(lines[-2])
    assert payload["message"] == "checked"
    assert payload["level"] == "info"
    assert payload["logger"] == "fluent_temporal"
    assert payload["component"] == "chain"
    assert payload["assertion"] == "DurationAssertions"
    assert payload["subject"] == "elapsed"
    assert payload["passed"] is False
    assert payload["failures"] == ["Expected elapsed to have 3 hours, but found 2."]

    exception_payload = json.loads(lines[-1])
    assert exception_payload["message"] == "broken"
    assert "exc_info" in exception_payload


def test_configure_logging_respects_level(capsys: CaptureFixture[str]) -> None:
    assert LOG_LEVELS == ("debug", "info", "warning", "error")
    config = configure_logging("text", log_level="warning")
    assert config.level == logging.WARNING
    logger = logging.getLogger("fluent_temporal.chain")
    logger.info("ignored")
    logger.warning("recorded")
    captured = capsys.readouterr()
    combined = captured.out + captured.err
    assert "ignored" not in combined
    assert "[WARNING] fluent_temporal.chain: recorded" in combined


def test_configure_logging_honors_env_overrides(capsys: CaptureFixture[str], monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("FLUENT_TEMPORAL_LOG_FORMAT", "json")
    monkeypatch.setenv("FLUENT_TEMPORAL_LOG_LEVEL", "error")
    _ = configure_logging()
    logger = logging.getLogger("fluent_temporal")
    logger.warning("warned")
    logger.error("failed", extra=structured_extra(LogComponent.CONFIG, path=Path("fluent_temporal.toml")))
    captured = capsys.readouterr()
    lines = [line for line in (captured.out + captured.err).splitlines() if line]
    payload = json.loads(lines[-1])
    assert payload["message"] == "failed"
    assert payload["path"] == "fluent_temporal.toml"
    assert all("warned" not in line for line in lines)


def test_configure_logging_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown log format"):
        _ = configure_logging("yaml")


def test_structured_extra_normalises_inputs(tmp_path: Path) -> None:
    extra = structured_extra(
        LogComponent.CONFIG,
        subject="settings",
        path=tmp_path / "fluent_temporal.toml",
        failures=("a", "b"),
        details={"default_precision": 0.01},
    )
    assert extra["component"] is LogComponent.CONFIG
    assert "path" in extra and extra["path"].endswith("fluent_temporal.toml")
    assert "failures" in extra and extra["failures"] == ["a", "b"]
    assert "details" in extra and extra["details"] == {"default_precision": 0.01}
    assert "passed" not in extra


def test_structured_extra_drops_empty_collections() -> None:
    extra = structured_extra(LogComponent.API, failures=[], details={})
    assert extra == {"component": LogComponent.API}
