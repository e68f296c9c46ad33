"""smoke-report - Playwright smoke report exports and scenario checklists."""

__version__ = "0.3.0"

from smokereport.core.models import (
    NormalizedRecord,
    ResultSummary,
    Scenario,
    ScenarioOutcome,
    TestStatus,
)

__all__ = [
    "NormalizedRecord",
    "ResultSummary",
    "Scenario",
    "ScenarioOutcome",
    "TestStatus",
]
