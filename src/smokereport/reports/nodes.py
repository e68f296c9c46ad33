"""Typed views over the raw Playwright JSON report tree.

The modern report shape is ``suites[] -> specs[] -> tests[] -> results[]``
where each ``tests[]`` entry is one project run (one browser configuration)
and each ``results[]`` entry is one attempt. Those levels are read into the
known-shape nodes below. Anything else is wrapped in ``OpaqueNode`` and only
the fallback walker looks at it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from ..core.models import TestStatus
from .fields import (
    SPEC_TITLE,
    STATUS,
    SUITE_NAME,
    extract_attachments,
    extract_duration,
    extract_error_text,
    extract_status,
)

ROOT_SUITE = "root"
PLACEHOLDER_TITLE = "test"


@dataclass(frozen=True)
class ResultNode:
    """One attempt (original run or retry) of a test in one project."""

    status: TestStatus
    duration_ms: int | float = 0
    error: str = ""
    attachments: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ResultNode:
        """Create ResultNode from a Playwright result dict."""
        return cls(
            status=extract_status(data),
            duration_ms=extract_duration(data),
            error=extract_error_text(data),
            attachments=extract_attachments(data),
        )


@dataclass(frozen=True)
class ProjectRunNode:
    """One project lane of a spec, holding its attempts."""

    results: tuple[ResultNode, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> ProjectRunNode:
        """Create ProjectRunNode, falling back to run-level status fields."""
        if not isinstance(data, Mapping):
            return cls()

        raw_results = data.get("results")
        results: list[ResultNode] = []
        if isinstance(raw_results, list):
            results = [ResultNode.from_dict(r) for r in raw_results]

        # Some reporters only put the status on the run itself
        if not results and STATUS.extract(data) is not None:
            results = [ResultNode.from_dict(data)]

        return cls(results=tuple(results))


@dataclass(frozen=True)
class SpecNode:
    """A single named test case and its project runs."""

    title: str
    runs: tuple[ProjectRunNode, ...] = ()
    ok: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SpecNode:
        """Create SpecNode from a Playwright spec dict."""
        title = SPEC_TITLE.extract(data)
        tests = data.get("tests")
        ok = data.get("ok")
        # Older schemas expose only ok: true/false
        if not isinstance(tests, list) and isinstance(ok, bool):
            return cls(title=title or PLACEHOLDER_TITLE, ok=ok)
        return cls.from_tests(title, tests)

    @classmethod
    def from_tests(cls, title: str | None, tests: Any) -> SpecNode:
        """Create SpecNode from a title and a raw ``tests`` list."""
        runs: tuple[ProjectRunNode, ...] = ()
        if isinstance(tests, list):
            runs = tuple(ProjectRunNode.from_dict(t) for t in tests)
        return cls(title=title or PLACEHOLDER_TITLE, runs=runs)

    def results(self) -> Iterator[ResultNode]:
        """Yield every attempt across all project runs."""
        if self.ok is not None and not self.runs:
            yield ResultNode(status=TestStatus.PASSED if self.ok else TestStatus.FAILED)
            return
        for run in self.runs:
            yield from run.results


@dataclass(frozen=True)
class SuiteNode:
    """A describe block or file-level suite, possibly nested."""

    name: str
    file: str | None = None
    specs: tuple[SpecNode, ...] | None = None
    suites: tuple[SuiteNode, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], parent_name: str = "") -> SuiteNode:
        """Create SuiteNode, inheriting the parent's name when untitled."""
        name = SUITE_NAME.extract(data) or parent_name or ROOT_SUITE

        file = data.get("file")
        if not isinstance(file, str):
            file = None

        specs = None
        raw_specs = data.get("specs")
        if isinstance(raw_specs, list):
            specs = tuple(SpecNode.from_dict(s) for s in raw_specs if isinstance(s, Mapping))

        suites: tuple[SuiteNode, ...] = ()
        raw_suites = data.get("suites")
        if isinstance(raw_suites, list):
            suites = tuple(cls.from_dict(s, name) for s in raw_suites if isinstance(s, Mapping))

        return cls(name=name, file=file, specs=specs, suites=suites)

    @property
    def carries_specs(self) -> bool:
        """True when the suite has a ``specs`` list, even an empty one."""
        return self.specs is not None


@dataclass(frozen=True)
class OpaqueNode:
    """Untyped mapping of unknown shape, used by the fallback walker."""

    data: Mapping[str, Any]

    @property
    def title(self) -> str | None:
        """Own ``title`` if it is a non-empty string."""
        title = self.data.get("title")
        return title if isinstance(title, str) and title else None

    @property
    def tests(self) -> list[Any] | None:
        """Own ``tests`` list, if any."""
        tests = self.data.get("tests")
        return tests if isinstance(tests, list) else None

    def children(self) -> Iterator[Any]:
        """Yield every child value except the ``tests`` list."""
        for key, value in self.data.items():
            if key == "tests":
                continue
            yield value
