"""Playwright JSON report handling.

Usage:
    from smokereport.reports import load_report, locate_report, normalize_report

    path = locate_report(export_candidates(artifacts_dir))
    records = normalize_report(load_report(path))
"""

from .fields import normalize_status
from .locator import (
    export_candidates,
    load_report,
    locate_report,
    scenario_candidates,
)
from .normalizer import normalize_report

__all__ = [
    "export_candidates",
    "load_report",
    "locate_report",
    "normalize_report",
    "normalize_status",
    "scenario_candidates",
]
