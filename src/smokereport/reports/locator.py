"""Find and load the Playwright JSON report."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ..core.exceptions import ReportNotFound, ReportUnreadable
from ..logging import get_logger

logger = get_logger(__name__)

# Inside the artifacts directory, most preferred first
EXPORT_CANDIDATES: tuple[str, ...] = (
    "test-results.json",
    "report.json",
    "playwright-report.json",
)

REPORT_JSON = "report.json"


def export_candidates(artifacts_dir: Path) -> list[Path]:
    """Candidate report paths for the results export."""
    return [artifacts_dir / name for name in EXPORT_CANDIDATES]


def scenario_candidates(root: Path, artifacts_dir: Path) -> list[Path]:
    """Candidate report paths for the scenario checklist."""
    # playwright.config.ts writes artifacts/report.json
    return [
        artifacts_dir / REPORT_JSON,
        root / REPORT_JSON,
        artifacts_dir / "playwright-report.json",
        artifacts_dir / "test-results.json",
    ]


def locate_report(candidates: Iterable[Path], hint: str = "npm run test:smoke") -> Path:
    """
    Return the first candidate path that exists.

    Args:
        candidates: Paths in priority order, most preferred first.
        hint: Command that produces the report, quoted in the error.

    Returns:
        Path of the first existing candidate.

    Raises:
        ReportNotFound: If no candidate exists.
    """
    candidates = list(candidates)
    for path in candidates:
        if path.is_file():
            logger.info("report_located", path=str(path))
            return path

    logger.warning("report_missing", candidates=[str(p) for p in candidates])
    raise ReportNotFound(candidates, hint=hint)


def load_report(path: Path) -> Any:
    """
    Parse a report file.

    Raises:
        ReportUnreadable: If the file is not valid JSON.
    """
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ReportUnreadable(path, str(e)) from e
