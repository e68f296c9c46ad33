"""Scenario catalog and mapping of test results onto scenarios."""

from smokereport.scenarios.catalog import DEFAULT_SCENARIOS, load_scenarios
from smokereport.scenarios.mapper import aggregate_statuses, evaluate_scenario, map_scenarios

__all__ = [
    "DEFAULT_SCENARIOS",
    "aggregate_statuses",
    "evaluate_scenario",
    "load_scenarios",
    "map_scenarios",
]
