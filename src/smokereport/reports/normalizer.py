"""Normalize a Playwright JSON report into flat result records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.models import NormalizedRecord
from ..logging import get_logger
from .nodes import ROOT_SUITE, OpaqueNode, SpecNode, SuiteNode

logger = get_logger(__name__)


def normalize_report(document: Any) -> list[NormalizedRecord]:
    """
    Flatten a report document into one record per test result.

    The modern ``suites[].specs[]`` shape is read first. Only when no suite
    anywhere carries a ``specs`` list is the whole document walked for
    ``tests``-bearing nodes instead.

    Args:
        document: Parsed JSON report of unknown shape.

    Returns:
        Records in report order. Malformed input yields fewer records,
        never an exception.
    """
    records: list[NormalizedRecord] = []

    suites = document.get("suites") if isinstance(document, Mapping) else None
    found = _walk_suites(suites, "", records)

    if not found:
        _walk_opaque(document, None, records)

    logger.debug(
        "report_normalized",
        records=len(records),
        fallback=not found,
    )
    return records


def _spec_records(suite_name: str, spec: SpecNode) -> list[NormalizedRecord]:
    """Build one record per result of a spec."""
    return [
        NormalizedRecord(
            suite=suite_name,
            test=spec.title,
            status=result.status,
            duration_ms=result.duration_ms,
            error=result.error,
            attachments=result.attachments,
        )
        for result in spec.results()
    ]


def _walk_suite(suite: SuiteNode, records: list[NormalizedRecord]) -> bool:
    """Collect records from a suite and its descendants, depth first."""
    found = suite.carries_specs
    for spec in suite.specs or ():
        records.extend(_spec_records(suite.name, spec))

    for child in suite.suites:
        found = _walk_suite(child, records) or found
    return found


def _walk_suites(suites: Any, parent_name: str, records: list[NormalizedRecord]) -> bool:
    """Walk a raw ``suites`` list; True if any suite carried specs."""
    if not isinstance(suites, list):
        return False

    found = False
    for raw in suites:
        if isinstance(raw, Mapping):
            found = _walk_suite(SuiteNode.from_dict(raw, parent_name), records) or found
    return found


def _walk_opaque(node: Any, parent_title: str | None, records: list[NormalizedRecord]) -> None:
    """Brute-force walk for report shapes without ``suites[].specs[]``.

    Any mapping with a ``tests`` list is treated as a spec, named by its own
    title or the closest ancestor's. ``tests`` keys are not descended into,
    so each such node is visited exactly once.
    """
    if isinstance(node, list):
        for item in node:
            _walk_opaque(item, parent_title, records)
        return
    if not isinstance(node, Mapping):
        return

    opaque = OpaqueNode(node)
    title = opaque.title or parent_title

    if opaque.tests is not None:
        spec = SpecNode.from_tests(title, opaque.tests)
        records.extend(_spec_records(parent_title or ROOT_SUITE, spec))

    for child in opaque.children():
        _walk_opaque(child, title, records)
