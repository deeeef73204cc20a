"""Process-wide canonical categories and the public budget operations.

The canonical catalog is built once from :func:`load_step_catalog` on first
use and cached.  It is never handed out directly: every accessor returns a
deep copy, so callers cannot corrupt the shared template.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache
from typing import Any

from chantier.budget.builder import CategoryCatalog, build_category_catalog
from chantier.budget.mapper import reconcile_categories
from chantier.budget.models import (
    BudgetCategory,
    IncomingAnalysisCategory,
    Reconciliation,
)
from chantier.catalog.loader import load_step_catalog

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _canonical_catalog() -> CategoryCatalog:
    catalog = build_category_catalog(load_step_catalog())
    logger.info("Canonical budget categories ready: %d", len(catalog.categories))
    return catalog


def reset_canonical_cache() -> None:
    """Drop the cached catalog so the next access rebuilds it."""
    _canonical_catalog.cache_clear()


def build_canonical_categories() -> list[BudgetCategory]:
    """Return a fresh copy of the canonical categories, in display order."""
    return [category.model_copy(deep=True) for category in _canonical_catalog().categories]


def get_ordered_category_names() -> list[str]:
    """Canonical category names, in display order."""
    return _canonical_catalog().names


def get_step_tasks_by_category() -> dict[str, list[str]]:
    """Category name → task titles of its steps (a copy)."""
    return {name: list(tasks) for name, tasks in _canonical_catalog().task_index.items()}


def reconcile_detailed(
    incoming: Iterable[IncomingAnalysisCategory | dict[str, Any]],
    budget_prevu: float | None = None,
) -> Reconciliation:
    """Reconcile an analysis against the canonical categories.

    Args:
        incoming: Categories returned by the analysis.
        budget_prevu: The client's expected total.  Only reported back as a
            comparison; it does not change any category amount.
    """
    return reconcile_categories(
        incoming,
        _canonical_catalog().categories,
        expected_total=budget_prevu,
    )


def reconcile(
    incoming: Iterable[IncomingAnalysisCategory | dict[str, Any]],
    budget_prevu: float | None = None,
) -> list[BudgetCategory]:
    """Reconcile an analysis and return the category list only."""
    return reconcile_detailed(incoming, budget_prevu).categories
