"""Budget-category normalization and allocation engine."""

from chantier.budget.builder import (
    CategoryCatalog,
    build_category_catalog,
    build_step_tasks_by_category,
)
from chantier.budget.defaults import (
    build_canonical_categories,
    get_ordered_category_names,
    get_step_tasks_by_category,
    reconcile,
    reconcile_detailed,
    reset_canonical_cache,
)
from chantier.budget.mapper import map_analysis_to_step_categories, reconcile_categories
from chantier.budget.models import (
    BudgetCategory,
    BudgetComparison,
    BudgetItem,
    IncomingAnalysisCategory,
    Reconciliation,
)
from chantier.budget.normalize import coerce_amount, normalize_key

__all__ = [
    "BudgetCategory",
    "BudgetComparison",
    "BudgetItem",
    "CategoryCatalog",
    "IncomingAnalysisCategory",
    "Reconciliation",
    "build_canonical_categories",
    "build_category_catalog",
    "build_step_tasks_by_category",
    "coerce_amount",
    "get_ordered_category_names",
    "get_step_tasks_by_category",
    "map_analysis_to_step_categories",
    "normalize_key",
    "reconcile",
    "reconcile_categories",
    "reconcile_detailed",
    "reset_canonical_cache",
]
