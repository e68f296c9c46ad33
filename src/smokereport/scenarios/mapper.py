"""Map normalized test results onto smoke scenarios."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from smokereport.core.models import NormalizedRecord, Scenario, ScenarioOutcome, TestStatus
from smokereport.scenarios.catalog import DEFAULT_SCENARIOS

NO_MATCH_REASON = "No matching tests found"


def aggregate_statuses(records: Iterable[NormalizedRecord]) -> dict[str, TestStatus]:
    """
    Reduce records to one status per distinct test title.

    A title that failed in any project or attempt is failed, even if a retry
    passed later. Otherwise any pass makes it passed, and anything else
    (skipped only, unknown only) is unknown.

    Args:
        records: Normalized records, possibly several per title.

    Returns:
        Title -> status, ordered by first appearance of each title.
    """
    seen: dict[str, set[TestStatus]] = {}
    for record in records:
        title = record.test.strip()
        if title:
            seen.setdefault(title, set()).add(record.status)

    statuses: dict[str, TestStatus] = {}
    for title, found in seen.items():
        if TestStatus.FAILED in found:
            statuses[title] = TestStatus.FAILED
        elif TestStatus.PASSED in found:
            statuses[title] = TestStatus.PASSED
        else:
            statuses[title] = TestStatus.UNKNOWN
    return statuses


def evaluate_scenario(scenario: Scenario, statuses: Mapping[str, TestStatus]) -> ScenarioOutcome:
    """Decide whether every test matching the scenario passed."""
    matching = [title for title in statuses if scenario.matches(title)]
    if not matching:
        return ScenarioOutcome(scenario, [NO_MATCH_REASON])

    failing = [
        f"{title} → {statuses[title].value}"
        for title in matching
        if statuses[title] is not TestStatus.PASSED
    ]
    return ScenarioOutcome(scenario, failing)


def map_scenarios(
    statuses: Mapping[str, TestStatus],
    scenarios: Sequence[Scenario] = DEFAULT_SCENARIOS,
) -> list[ScenarioOutcome]:
    """Evaluate each scenario, in catalog order."""
    return [evaluate_scenario(s, statuses) for s in scenarios]
