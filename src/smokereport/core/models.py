"""Canonical data model for normalized smoke-test results.

Every report shape the normalizer understands is reduced to a flat list of
``NormalizedRecord`` objects. Scenarios are hand-authored requirement
statements that are matched against record titles.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TestStatus(Enum):
    """Canonical status of a single test attempt."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class NormalizedRecord:
    """One result attempt of one test, flattened out of the report tree."""

    suite: str
    test: str
    status: TestStatus
    duration_ms: int | float = 0
    error: str = ""
    attachments: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "suite": self.suite,
            "test": self.test,
            "status": self.status.value,
            "duration_ms": self.duration_ms,
            "error": self.error,
            "attachments": self.attachments,
        }


@dataclass(frozen=True)
class Scenario:
    """A human-facing requirement mapped onto test titles by pattern."""

    id: str
    text: str
    patterns: tuple[re.Pattern[str], ...]

    @classmethod
    def from_patterns(cls, scenario_id: str, text: str, patterns: Iterable[str]) -> Scenario:
        """Create a Scenario, compiling each pattern case-insensitively."""
        return cls(
            id=scenario_id,
            text=text,
            patterns=tuple(re.compile(p, re.IGNORECASE) for p in patterns),
        )

    def matches(self, title: str) -> bool:
        """Check if any pattern matches somewhere in the title."""
        return any(p.search(title) for p in self.patterns)


@dataclass
class ScenarioOutcome:
    """Pass/fail verdict for one scenario."""

    scenario: Scenario
    failing_reasons: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Scenario passes only when nothing is failing."""
        return not self.failing_reasons

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.scenario.id,
            "text": self.scenario.text,
            "ok": self.ok,
            "failing_reasons": self.failing_reasons,
        }


@dataclass
class ResultSummary:
    """Counts of records per canonical status."""

    passed: int = 0
    failed: int = 0
    skipped: int = 0
    unknown: int = 0

    @classmethod
    def from_records(cls, records: Iterable[NormalizedRecord]) -> ResultSummary:
        """Tally records by status."""
        summary = cls()
        for record in records:
            name = record.status.value
            setattr(summary, name, getattr(summary, name) + 1)
        return summary

    @property
    def total(self) -> int:
        """Total number of records."""
        return self.passed + self.failed + self.skipped + self.unknown

    @property
    def text(self) -> str:
        """Return human-readable summary of the counts."""
        parts = []
        if self.passed:
            parts.append(f"{self.passed} passed")
        if self.failed:
            parts.append(f"{self.failed} failed")
        if self.skipped:
            parts.append(f"{self.skipped} skipped")
        if self.unknown:
            parts.append(f"{self.unknown} unknown")
        return ", ".join(parts) if parts else "No tests run"
