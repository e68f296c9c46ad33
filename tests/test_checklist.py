"""Tests for the Markdown scenario checklist."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from smokereport.core.models import Scenario, ScenarioOutcome
from smokereport.exporters.checklist import DEFAULT_TITLE, render_checklist, write_checklist

GENERATED_AT = datetime(2026, 10, 18, 9, 30, 0, 123000, tzinfo=UTC)


def _outcomes() -> list[ScenarioOutcome]:
    ok = Scenario.from_patterns("login-ok", "Valid user can login.", ["valid"])
    bad = Scenario.from_patterns("cart", "Cart badge updates.", ["cart"])
    return [
        ScenarioOutcome(ok),
        ScenarioOutcome(bad, ["cart adds → failed", "cart removes → unknown"]),
    ]


class TestRenderChecklist:
    """Test suite for render_checklist."""

    def test_full_document(self):
        """Title, one line per scenario, issues, provenance footer."""
        text = render_checklist(_outcomes(), Path("artifacts/report.json"), GENERATED_AT)

        assert text == (
            f"# {DEFAULT_TITLE}\n"
            "\n"
            "- [x] Valid user can login.\n"
            "- [ ] Cart badge updates.\n"
            "  - ❌ Issues: cart adds → failed | cart removes → unknown\n"
            "\n"
            "> Source: Playwright JSON report → report.json\n"
            "> Updated: 2026-10-18T09:30:00.123Z\n"
        )

    def test_custom_title(self):
        """The heading is configurable."""
        text = render_checklist([], Path("report.json"), GENERATED_AT, title="Checkout smoke")

        assert text.startswith("# Checkout smoke\n\n")

    def test_default_timestamp_is_now(self):
        """Without a timestamp the footer uses the current UTC time."""
        text = render_checklist([], Path("report.json"))

        updated = text.strip().splitlines()[-1]
        assert updated.startswith(f"> Updated: {datetime.now(UTC).year}-")
        assert updated.endswith("Z")


class TestWriteChecklist:
    """Test suite for write_checklist."""

    def test_writes_file(self, tmp_path: Path):
        """The checklist is written as UTF-8 text."""
        path = tmp_path / "docs" / "smoke_scenarios.md"

        write_checklist(_outcomes(), Path("report.json"), path)

        content = path.read_text(encoding="utf-8")
        assert "- [x] Valid user can login." in content
        assert "❌ Issues" in content
