"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
import structlog

from smokereport.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Generator

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_runtest_setup(item):
    """Drop logging configuration left behind by earlier CLI invocations."""
    structlog.reset_defaults()


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Fresh settings, unaffected by the developer's SMOKE_* env."""
    for name in (
        "SMOKE_PROJECT_ROOT",
        "SMOKE_ARTIFACTS_DIR",
        "SMOKE_RESULTS_BASENAME",
        "SMOKE_CHECKLIST_FILE",
        "SMOKE_CHECKLIST_TITLE",
        "SMOKE_ERROR_MAX_LENGTH",
        "SMOKE_SMOKE_COMMAND",
        "SMOKE_LOG_LEVEL",
        "SMOKE_LOG_JSON_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_report_path() -> Path:
    """Path to sample Playwright (modern shape) report fixture."""
    return FIXTURES_DIR / "playwright_report.json"


@pytest.fixture
def sample_report_data(sample_report_path: Path) -> dict:
    """Load sample report as dict."""
    return json.loads(sample_report_path.read_text())


@pytest.fixture
def legacy_report_data() -> dict:
    """Report without any suites[].specs[] lists."""
    return json.loads((FIXTURES_DIR / "legacy_report.json").read_text())


@pytest.fixture
def scenarios_yaml_path() -> Path:
    """Path to a custom YAML scenario catalog."""
    return FIXTURES_DIR / "scenarios.yaml"


@pytest.fixture
def project_root(tmp_path: Path, sample_report_path: Path) -> Path:
    """Project directory with the sample report at artifacts/report.json."""
    artifacts = tmp_path / "artifacts"
    artifacts.mkdir()
    shutil.copy(sample_report_path, artifacts / "report.json")
    return tmp_path
