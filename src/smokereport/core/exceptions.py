"""Shared exceptions for the smokereport package."""

from __future__ import annotations

from pathlib import Path


class ReportNotFound(Exception):
    """Exception raised when none of the candidate report paths exist.

    The smoke suite writes its Playwright JSON report to a fixed location;
    if it is missing the test run most likely has not happened yet.
    """

    def __init__(self, candidates: list[Path], hint: str = "npm run test:smoke") -> None:
        self.candidates = list(candidates)
        self.hint = hint
        super().__init__(f"Could not find Playwright JSON report. Run `{hint}` first.")


class ReportUnreadable(Exception):
    """Exception raised when a located report is not valid JSON."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid JSON in report file {path}: {reason}")


class ScenarioCatalogError(ValueError):
    """Exception raised when a scenario catalog file cannot be used."""
