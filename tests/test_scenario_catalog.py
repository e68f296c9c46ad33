"""Tests for the scenario catalog."""

from __future__ import annotations

from pathlib import Path

import pytest

from smokereport.core.exceptions import ScenarioCatalogError
from smokereport.scenarios.catalog import DEFAULT_SCENARIOS, load_scenarios


class TestDefaultCatalog:
    """Test suite for the built-in catalog."""

    def test_is_immutable_tuple(self):
        """The default catalog is a tuple of frozen scenarios."""
        assert isinstance(DEFAULT_SCENARIOS, tuple)
        with pytest.raises(AttributeError):
            DEFAULT_SCENARIOS[0].text = "changed"  # type: ignore[misc]

    def test_ids_unique(self):
        """Scenario ids are unique."""
        ids = [s.id for s in DEFAULT_SCENARIOS]
        assert len(ids) == len(set(ids)) == 7

    @pytest.mark.parametrize(
        "scenario_id,title",
        [
            ("reach", "site is reachable"),
            ("login-ok", "login with valid credentials should land on products page"),
            ("login-bad", "login with invalid credentials should show error"),
            ("nav-about", "can open menu and navigate to About"),
            ("nav-logout", "logout brings user back to login page"),
            ("ui-products", "dashboard renders products and has no console errors"),
            ("cart-badge", "add to cart updates badge then remove clears it"),
        ],
    )
    def test_each_scenario_matches_its_smoke_test(self, scenario_id: str, title: str):
        """Every default scenario matches the smoke test written for it."""
        scenario = next(s for s in DEFAULT_SCENARIOS if s.id == scenario_id)
        assert scenario.matches(title)


class TestLoadScenarios:
    """Test suite for YAML catalogs."""

    def test_load(self, scenarios_yaml_path: Path):
        """Scenarios load in file order with their patterns."""
        scenarios = load_scenarios(scenarios_yaml_path)

        assert [s.id for s in scenarios] == ["login", "about"]
        assert len(scenarios[0].patterns) == 2
        assert scenarios[1].matches("can open menu and navigate to About")

    def test_bare_list(self, tmp_path: Path):
        """A top-level list is accepted too."""
        path = tmp_path / "scenarios.yaml"
        path.write_text("- id: a\n  text: A.\n  tests: [a]\n")

        assert [s.id for s in load_scenarios(path)] == ["a"]

    @pytest.mark.parametrize(
        "content,message",
        [
            ("scenarios: []\n", "list of scenarios"),
            ("- just a string\n", "must be a mapping"),
            ("- text: A.\n  tests: [a]\n", "missing 'id'"),
            ("- id: a\n  tests: [a]\n", "missing 'text'"),
            ("- id: a\n  text: A.\n", "at least one test pattern"),
            ("- id: a\n  text: A.\n  tests: ['(']\n", "invalid pattern"),
            ("- {id: a, text: A., tests: x}\n- {id: a, text: B., tests: y}\n", "Duplicate scenario ids: a"),
            ("scenarios: [\n", "Invalid YAML"),
        ],
    )
    def test_invalid_catalogs(self, tmp_path: Path, content: str, message: str):
        """Malformed catalogs raise ScenarioCatalogError."""
        path = tmp_path / "scenarios.yaml"
        path.write_text(content)

        with pytest.raises(ScenarioCatalogError, match=message):
            load_scenarios(path)

    def test_missing_file(self, tmp_path: Path):
        """A missing catalog file is a ScenarioCatalogError."""
        with pytest.raises(ScenarioCatalogError, match="not found"):
            load_scenarios(tmp_path / "nope.yaml")
