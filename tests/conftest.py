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

"""Pytest entry point that wires shared fixtures and markers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, settings

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for entry in (SRC, ROOT):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

from fluent_temporal.config import reset_settings  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Iterator

# Autouse fixtures only reset process-wide state between examples.
settings.register_profile(
    "fluent_temporal",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("fluent_temporal")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line(
        "markers",
        "integration: Integration tests (settings files, logging, public API)",
    )
    config.addinivalue_line("markers", "property: Property-based tests")


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from default settings, whatever the host environment holds."""
    for name in (
        "FLUENT_TEMPORAL_DEFAULT_PRECISION",
        "FLUENT_TEMPORAL_NULL_PLACEHOLDER",
        "FLUENT_TEMPORAL_LOG_FORMAT",
        "FLUENT_TEMPORAL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def _restore_library_logger() -> Iterator[None]:
    """Undo ``configure_logging`` so later tests can rely on propagation."""
    yield
    root = logging.getLogger("fluent_temporal")
    root.handlers.clear()
    root.addHandler(logging.NullHandler())
    root.setLevel(logging.NOTSET)
    root.propagate = True
    for child in ("fluent_temporal.api", "fluent_temporal.chain", "fluent_temporal.config"):
        logging.getLogger(child).setLevel(logging.NOTSET)
