"""Reconcile AI analysis categories with the canonical budget categories.

The analysis returns free-form categories ("Finition intérieure", "Taxes",
"Électricité"...).  Each one is resolved by normalized key through
:data:`~chantier.budget.tables.ANALYSIS_ALIASES`, falling back to an exact
category-name match.  Aliases may fan out: the amount is split evenly over
the targets while every target receives the full item list.  Taxes and
contingency are never categories; their total is spread over the non-zero
categories in proportion to their budgets.

Nothing here raises.  Amounts that cannot be placed are reported through
:attr:`Reconciliation.unallocated_amount` instead of disappearing silently.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import ValidationError

from chantier.budget.models import (
    BudgetCategory,
    BudgetComparison,
    IncomingAnalysisCategory,
    Reconciliation,
)
from chantier.budget.normalize import normalize_key
from chantier.budget.tables import ANALYSIS_ALIASES, EXTRA_KEYWORDS

logger = logging.getLogger(__name__)


def clone_template(canonical: Iterable[BudgetCategory]) -> list[BudgetCategory]:
    """Deep-copy *canonical* with budgets, spending and items reset."""
    return [
        category.model_copy(update={"budget": 0.0, "spent": 0.0, "items": []}, deep=True)
        for category in canonical
    ]


def is_extra_amount(key: str) -> bool:
    """``True`` if a normalized name denotes taxes or contingency."""
    return any(keyword in key for keyword in EXTRA_KEYWORDS)


def as_incoming(entry: Any) -> IncomingAnalysisCategory | None:
    """Validate one untrusted analysis entry, or ``None`` if it has no usable shape."""
    if isinstance(entry, IncomingAnalysisCategory):
        return entry
    if not isinstance(entry, dict):
        logger.debug("Skipping analysis entry of type %s", type(entry).__name__)
        return None
    try:
        return IncomingAnalysisCategory.model_validate(entry)
    except ValidationError:
        logger.debug("Skipping malformed analysis entry: %s", entry)
        return None


def reconcile_categories(
    incoming: Iterable[IncomingAnalysisCategory | dict[str, Any]],
    canonical: Sequence[BudgetCategory],
    expected_total: float | None = None,
) -> Reconciliation:
    """Map *incoming* analysis categories onto a fresh copy of *canonical*.

    Args:
        incoming: Analysis categories, in the order the analysis produced
            them.  Plain dicts are validated with coercion.
        canonical: Template categories.  Never mutated; its names, colors,
            descriptions and order carry over to the result.
        expected_total: Optional budget the client planned.  Only used to
            fill :attr:`Reconciliation.comparison`.

    Returns:
        A :class:`Reconciliation` whose ``categories`` follow the canonical
        order.
    """
    mapped = clone_template(canonical)
    by_name = {category.name: category for category in mapped}

    extra = 0.0
    unallocated = 0.0
    unmatched: list[str] = []

    for entry in incoming:
        cat = as_incoming(entry)
        if cat is None:
            continue

        key = normalize_key(cat.name)
        amount = cat.budget

        if is_extra_amount(key):
            extra += amount
            continue

        targets = ANALYSIS_ALIASES.get(key)
        if not targets:
            direct = by_name.get(cat.name)
            if direct is None:
                logger.debug("No category matches %r, dropping %.2f", cat.name, amount)
                unmatched.append(cat.name)
                unallocated += amount
                continue
            direct.budget += amount
            if cat.items:
                direct.items = [*direct.items, *cat.items]
            continue

        per_target = amount / len(targets)
        for target_name in targets:
            target = by_name.get(target_name)
            if target is None:
                logger.debug("Alias target %r of %r is not a category", target_name, cat.name)
                unallocated += per_target
                continue
            target.budget += per_target
            if cat.items:
                target.items = [*target.items, *cat.items]

    redistributed = _redistribute(mapped, extra)
    if not math.isclose(redistributed, extra):
        logger.debug("Could not spread %.2f of taxes/contingency", extra - redistributed)
        unallocated += extra - redistributed

    comparison = None
    if expected_total is not None and expected_total > 0:
        comparison = BudgetComparison.between(
            total=sum(category.budget for category in mapped),
            expected=expected_total,
        )

    result = Reconciliation(
        categories=mapped,
        extra_amount=extra,
        redistributed_amount=redistributed,
        unmatched=unmatched,
        unallocated_amount=unallocated,
        comparison=comparison,
    )
    logger.info(
        "Reconciled analysis: total=%.2f extra=%.2f unallocated=%.2f unmatched=%d",
        result.total_budget,
        extra,
        unallocated,
        len(unmatched),
    )
    return result


def _redistribute(categories: list[BudgetCategory], extra: float) -> float:
    """Spread *extra* over the categories with a positive budget.

    Each receives ``extra * budget / base_total``; zero-budget categories get
    nothing.  Returns the amount actually added (``0.0`` when there is no
    positive extra or no positive base to spread it over).
    """
    base_total = sum(category.budget for category in categories)
    if extra <= 0 or base_total <= 0:
        return 0.0

    added = 0.0
    for category in categories:
        if category.budget <= 0:
            continue
        share = extra * category.budget / base_total
        category.budget += share
        added += share
    return added


def map_analysis_to_step_categories(
    incoming: Iterable[IncomingAnalysisCategory | dict[str, Any]],
    canonical: Sequence[BudgetCategory],
) -> list[BudgetCategory]:
    """Return only the reconciled category list of :func:`reconcile_categories`."""
    return reconcile_categories(incoming, canonical).categories
