"""Canonical budget categories derived from the construction-step catalog.

Only physical-work steps become categories.  Steps listed in
:data:`~chantier.budget.tables.MERGE_MAP` collapse into a shared category
(rough-in + finishing plumbing become "Plomberie"), whose description lists
the tasks of every contributing step in visit order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from chantier.budget.models import BudgetCategory
from chantier.budget.tables import (
    CATEGORY_COLORS,
    EXCLUDED_STEP_IDS,
    MERGE_MAP,
    PHYSICAL_WORK_PHASES,
)
from chantier.catalog.models import Step

logger = logging.getLogger(__name__)


@dataclass
class CategoryCatalog:
    """Canonical categories plus the task titles behind each of them.

    Attributes:
        categories: Categories in first-encounter order, names unique.
        task_index: Category name → task titles of all contributing steps.
    """

    categories: list[BudgetCategory] = field(default_factory=list)
    task_index: dict[str, list[str]] = field(default_factory=dict)

    @property
    def names(self) -> list[str]:
        return [category.name for category in self.categories]


def physical_work_steps(steps: Iterable[Step]) -> list[Step]:
    """Return the steps that carry a construction budget, in catalog order."""
    return [
        step
        for step in steps
        if step.phase in PHYSICAL_WORK_PHASES and step.id not in EXCLUDED_STEP_IDS
    ]


def category_name_for(step: Step) -> str:
    """Effective category name of *step* (merge target or own title)."""
    return MERGE_MAP.get(step.id, step.title)


def build_step_tasks_by_category(steps: Iterable[Step]) -> dict[str, list[str]]:
    """Map each category name to the task titles of all its steps.

    Usable on its own when task detail is needed without budget context,
    e.g. to show a category's tasks when the analysis produced no items.
    """
    index: dict[str, list[str]] = {}
    for step in physical_work_steps(steps):
        index.setdefault(category_name_for(step), []).extend(step.task_titles)
    return index


def build_category_catalog(steps: Iterable[Step]) -> CategoryCatalog:
    """Build the canonical, ordered and deduplicated category list.

    Each distinct effective name yields one category with a zero budget and
    the next palette color.  The palette advances once per new category, not
    per step, so merged steps do not skip colors.
    """
    filtered = physical_work_steps(steps)

    categories: list[BudgetCategory] = []
    pending_tasks: dict[str, list[str]] = {}

    for step in filtered:
        name = category_name_for(step)
        if name not in pending_tasks:
            pending_tasks[name] = []
            color = CATEGORY_COLORS[len(categories) % len(CATEGORY_COLORS)]
            categories.append(BudgetCategory(name=name, color=color))
        pending_tasks[name].extend(step.task_titles)

    for category in categories:
        category.description = ", ".join(pending_tasks[category.name])

    logger.debug("Built %d budget categories from %d steps", len(categories), len(filtered))
    return CategoryCatalog(
        categories=categories,
        task_index=build_step_tasks_by_category(filtered),
    )
