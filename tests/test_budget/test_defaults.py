"""Tests for the process-wide canonical categories and public operations."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from chantier.budget import defaults
from chantier.budget.defaults import (
    build_canonical_categories,
    get_ordered_category_names,
    get_step_tasks_by_category,
    reconcile,
    reconcile_detailed,
    reset_canonical_cache,
)
from chantier.catalog.steps import CONSTRUCTION_STEPS


@pytest.fixture(autouse=True)
def _fresh_cache():
    reset_canonical_cache()
    yield
    reset_canonical_cache()


class TestCanonicalCategories:
    """Tests for build_canonical_categories and friends."""

    def test_deterministic(self) -> None:
        first = build_canonical_categories()
        second = build_canonical_categories()
        assert [c.name for c in first] == [c.name for c in second]
        assert [c.description for c in first] == [c.description for c in second]

    def test_callers_get_copies(self) -> None:
        """Mutating a returned list never reaches the shared snapshot."""
        categories = build_canonical_categories()
        categories[0].budget = 123456
        categories[0].description = "modifié"
        categories.pop()

        fresh = build_canonical_categories()
        assert fresh[0].budget == 0
        assert fresh[0].description != "modifié"
        assert len(fresh) == len(get_ordered_category_names())

    def test_catalog_built_once(self) -> None:
        with patch.object(defaults, "load_step_catalog", return_value=CONSTRUCTION_STEPS) as loader:
            build_canonical_categories()
            get_ordered_category_names()
            reconcile([])
        assert loader.call_count == 1

    def test_task_index_is_a_copy(self) -> None:
        index = get_step_tasks_by_category()
        index["Plomberie"].append("Piscine")
        assert "Piscine" not in get_step_tasks_by_category()["Plomberie"]

    def test_ordered_names(self) -> None:
        names = get_ordered_category_names()
        assert names[0] == "Excavation"
        assert names[-1] == "Finitions intérieures"
        assert len(names) == len(set(names))


class TestReconcile:
    """Tests for reconcile / reconcile_detailed."""

    def test_reconcile_returns_category_list(self) -> None:
        result = reconcile([{"name": "Plomberie", "budget": 8000}, {"name": "Taxes", "budget": 800}])
        budgets = {c.name: c.budget for c in result}
        assert budgets["Plomberie"] == pytest.approx(8800)
        assert [c.name for c in result] == get_ordered_category_names()

    def test_budget_prevu_does_not_change_amounts(self) -> None:
        incoming = [{"name": "Toiture", "budget": 15000}]
        plain = reconcile(incoming)
        with_expected = reconcile(incoming, budget_prevu=12000)
        assert [c.budget for c in plain] == [c.budget for c in with_expected]

    def test_detailed_reports_comparison(self) -> None:
        result = reconcile_detailed([{"name": "Toiture", "budget": 15000}], budget_prevu=20000)
        assert result.comparison is not None
        assert result.comparison.over_budget is False
        assert result.comparison.difference == pytest.approx(-5000)

    def test_snapshot_untouched_by_reconcile(self) -> None:
        reconcile([{"name": "Toiture", "budget": 15000}])
        assert all(c.budget == 0 for c in build_canonical_categories())
