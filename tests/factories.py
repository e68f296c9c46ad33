"""Test data factories for smokereport tests.

Build raw Playwright JSON fragments and normalized records without spelling
out the whole report tree in every test.

Usage:
    from tests.factories import make_report, make_spec, make_result

    report = make_report(make_suite("login.spec.ts", make_spec("logs in", make_result())))
"""

from __future__ import annotations

from typing import Any

from smokereport.core.models import NormalizedRecord, TestStatus


def make_result(status: str | None = "passed", duration: int = 100, **extra: Any) -> dict[str, Any]:
    """Create a raw result dict."""
    result: dict[str, Any] = {"duration": duration, **extra}
    if status is not None:
        result["status"] = status
    return result


def make_run(*results: dict[str, Any], project: str = "chromium", **extra: Any) -> dict[str, Any]:
    """Create a raw project run (``specs[].tests[]`` entry)."""
    return {"projectName": project, "results": list(results), **extra}


def make_spec(title: str, *results: dict[str, Any], runs: list[dict] | None = None) -> dict[str, Any]:
    """Create a raw spec with one chromium run, or the given runs."""
    if runs is None:
        runs = [make_run(*results)]
    return {"title": title, "tests": runs}


def make_suite(title: str, *specs: dict[str, Any], suites: list[dict] | None = None) -> dict[str, Any]:
    """Create a raw suite."""
    suite: dict[str, Any] = {"title": title, "file": title, "specs": list(specs)}
    if suites is not None:
        suite["suites"] = suites
    return suite


def make_report(*suites: dict[str, Any]) -> dict[str, Any]:
    """Create a raw modern-shape report."""
    return {"config": {"version": "1.55.0"}, "suites": list(suites)}


def make_record(
    test: str = "some test",
    status: TestStatus = TestStatus.PASSED,
    suite: str = "suite.spec.ts",
    **extra: Any,
) -> NormalizedRecord:
    """Create a NormalizedRecord."""
    return NormalizedRecord(suite=suite, test=test, status=status, **extra)
