"""Smoke scenario catalog.

Each scenario is a requirement as the business states it, tied to the smoke
test titles that prove it. The default catalog covers the storefront smoke
suite; a YAML file with the same fields can replace it.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from smokereport.core.exceptions import ScenarioCatalogError
from smokereport.core.models import Scenario

DEFAULT_SCENARIOS: tuple[Scenario, ...] = (
    Scenario.from_patterns(
        "reach",
        "Portal URL loads successfully and title renders.",
        [r"site is reachable"],
    ),
    Scenario.from_patterns(
        "login-ok",
        "Valid user can login and land on products/dashboard page.",
        [r"login with valid credentials"],
    ),
    Scenario.from_patterns(
        "login-bad",
        "Invalid credentials show an error and do not start a session.",
        [r"login with invalid credentials"],
    ),
    Scenario.from_patterns(
        "nav-about",
        "Open menu and navigate to About.",
        [r"can open menu and navigate to About"],
    ),
    Scenario.from_patterns(
        "nav-logout",
        "Logout returns user to login page.",
        [r"logout brings user back to login page"],
    ),
    Scenario.from_patterns(
        "ui-products",
        "Dashboard shows Products, at least one item, and no severe console errors.",
        [r"dashboard renders products and has no console errors"],
    ),
    Scenario.from_patterns(
        "cart-badge",
        "Add to cart updates badge; removing clears it.",
        [r"add to cart updates badge then remove clears it"],
    ),
)


def _parse_entry(index: int, entry: Any) -> Scenario:
    if not isinstance(entry, dict):
        raise ScenarioCatalogError(f"Scenario #{index} must be a mapping")

    scenario_id = entry.get("id")
    text = entry.get("text")
    patterns = entry.get("tests")

    if not isinstance(scenario_id, str) or not scenario_id:
        raise ScenarioCatalogError(f"Scenario #{index} is missing 'id'")
    if not isinstance(text, str) or not text:
        raise ScenarioCatalogError(f"Scenario '{scenario_id}' is missing 'text'")
    if isinstance(patterns, str):
        patterns = [patterns]
    if not isinstance(patterns, list) or not patterns:
        raise ScenarioCatalogError(f"Scenario '{scenario_id}' needs at least one test pattern")

    try:
        return Scenario.from_patterns(scenario_id, text, [str(p) for p in patterns])
    except re.error as e:
        raise ScenarioCatalogError(f"Scenario '{scenario_id}' has an invalid pattern: {e}") from e


def load_scenarios(path: Path) -> tuple[Scenario, ...]:
    """
    Load a scenario catalog from a YAML file.

    The file holds a list of mappings with ``id``, ``text`` and ``tests``
    (one pattern or a list of patterns, matched case-insensitively).

    Args:
        path: Path to the YAML catalog.

    Returns:
        Scenarios in file order.

    Raises:
        ScenarioCatalogError: If the file is missing or malformed.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ScenarioCatalogError(f"Scenario catalog not found: {path}") from e
    except yaml.YAMLError as e:
        raise ScenarioCatalogError(f"Invalid YAML in scenario catalog: {e}") from e

    if isinstance(data, dict):
        data = data.get("scenarios")
    if not isinstance(data, list) or not data:
        raise ScenarioCatalogError("Scenario catalog must contain a list of scenarios")

    scenarios = tuple(_parse_entry(i, entry) for i, entry in enumerate(data, start=1))

    ids = [s.id for s in scenarios]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise ScenarioCatalogError(f"Duplicate scenario ids: {', '.join(duplicates)}")
    return scenarios
