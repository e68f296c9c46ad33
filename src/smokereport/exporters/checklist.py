"""Markdown checklist of smoke scenarios."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from smokereport.core.models import ScenarioOutcome

DEFAULT_TITLE = "Smoke Test Scenarios – Storefront (auto-generated)"


def _iso_timestamp(moment: datetime) -> str:
    """Format like JavaScript's toISOString(): millisecond precision, Z suffix."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def render_checklist(
    outcomes: Iterable[ScenarioOutcome],
    source: Path,
    generated_at: datetime | None = None,
    title: str = DEFAULT_TITLE,
) -> str:
    """
    Render scenario outcomes as a Markdown checklist.

    Args:
        outcomes: Scenario outcomes in catalog order.
        source: Report file the outcomes were computed from.
        generated_at: Timestamp for the footer (defaults to now).
        title: Heading of the document.

    Returns:
        Markdown text ending in a provenance footer.
    """
    if generated_at is None:
        generated_at = datetime.now(UTC)

    lines = [f"# {title}", ""]
    for outcome in outcomes:
        mark = "[x]" if outcome.ok else "[ ]"
        lines.append(f"- {mark} {outcome.scenario.text}")
        if not outcome.ok:
            lines.append(f"  - ❌ Issues: {' | '.join(outcome.failing_reasons)}")

    lines.extend(
        [
            "",
            f"> Source: Playwright JSON report → {source.name}",
            f"> Updated: {_iso_timestamp(generated_at)}",
        ]
    )
    return "\n".join(lines) + "\n"


def write_checklist(
    outcomes: Iterable[ScenarioOutcome],
    source: Path,
    path: Path,
    title: str = DEFAULT_TITLE,
) -> Path:
    """Write the checklist to ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_checklist(outcomes, source, title=title), encoding="utf-8")
    return path
