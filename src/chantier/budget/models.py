"""Budget value models.

- :class:`BudgetItem`: one priced line of a category (immutable).
- :class:`BudgetCategory`: a named, colored budget bucket.
- :class:`IncomingAnalysisCategory`: an untrusted category produced by the
  AI analysis; fields are coerced rather than rejected.
- :class:`BudgetComparison`: informational comparison against an expected
  total.
- :class:`Reconciliation`: the detailed outcome of mapping an analysis onto
  the canonical categories, including whatever could not be allocated.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chantier.budget.normalize import coerce_amount


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class BudgetItem(BaseModel):
    """A single priced line item (e.g. "Bardeaux", 4200 $, 30, "paquets")."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    cost: float = 0.0
    quantity: str = ""
    unit: str = ""

    @field_validator("cost", mode="before")
    @classmethod
    def coerce_cost(cls, v: Any) -> float:
        return coerce_amount(v)

    @field_validator("name", "quantity", "unit", mode="before")
    @classmethod
    def coerce_text_fields(cls, v: Any) -> str:
        return _coerce_text(v)


class BudgetCategory(BaseModel):
    """A budget category.  ``name`` is the join key within a category list."""

    name: str
    budget: float = 0.0
    spent: float = 0.0
    color: str = ""
    description: str = ""
    items: list[BudgetItem] = Field(default_factory=list)


class IncomingAnalysisCategory(BaseModel):
    """A category as returned by the AI analysis, before reconciliation.

    Names are free text (French or English, any case or accents) and are not
    unique.  Unknown keys are ignored so the model can return extra fields.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    budget: float = 0.0
    description: str = ""
    items: list[BudgetItem] | None = None

    @field_validator("name", "description", mode="before")
    @classmethod
    def coerce_text_fields(cls, v: Any) -> str:
        return _coerce_text(v)

    @field_validator("budget", mode="before")
    @classmethod
    def coerce_budget(cls, v: Any) -> float:
        return coerce_amount(v)

    @field_validator("items", mode="before")
    @classmethod
    def keep_item_like_entries(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return None
        return [item for item in v if isinstance(item, (dict, BudgetItem))]


class BudgetComparison(BaseModel):
    """Reconciled total compared with the client's expected budget."""

    model_config = ConfigDict(frozen=True)

    expected: float
    total: float
    difference: float
    difference_pct: float
    over_budget: bool

    @classmethod
    def between(cls, total: float, expected: float) -> BudgetComparison:
        """Build a comparison of *total* against a positive *expected* amount."""
        difference = total - expected
        return cls(
            expected=expected,
            total=total,
            difference=difference,
            difference_pct=difference / expected * 100,
            over_budget=difference > 0,
        )


class Reconciliation(BaseModel):
    """Outcome of mapping an analysis onto the canonical categories.

    ``unallocated_amount`` holds every amount that did not land in a
    category: unmatched incoming categories, fan-out shares aimed at missing
    categories, and taxes/contingency that had nothing to be spread over.
    """

    categories: list[BudgetCategory] = Field(default_factory=list)
    extra_amount: float = 0.0
    redistributed_amount: float = 0.0
    unmatched: list[str] = Field(default_factory=list)
    unallocated_amount: float = 0.0
    comparison: BudgetComparison | None = None

    @property
    def total_budget(self) -> float:
        """Sum of the reconciled category budgets."""
        return sum(category.budget for category in self.categories)
