"""Domain type definitions for gocost.

These NewTypes provide semantic clarity and help with type checking:
- MonthKey: Month in "<EnglishMonthName>-<YYYY>" format (e.g. "August-2024")
- GroupID, CategoryID, IncomeID: opaque identifiers generated by the UI

The entity dataclasses mirror the on-disk document one to one. Entities are
immutable; an update replaces the whole value.
"""

from dataclasses import dataclass, field
from typing import NewType

# Month keys are opaque to the store; only the UI builds and parses them
MonthKey = NewType("MonthKey", str)

GroupID = NewType("GroupID", str)
CategoryID = NewType("CategoryID", str)
IncomeID = NewType("IncomeID", str)


@dataclass(frozen=True)
class CategoryGroup:
    """Display-level grouping of categories."""

    group_id: GroupID
    group_name: str
    order: int = 0


@dataclass(frozen=True)
class ExpenseRecord:
    """Budget and actual spending attached to a category for one month."""

    budget: float = 0.0
    amount: float = 0.0
    status: str = ""
    notes: str = ""


@dataclass(frozen=True)
class Category:
    """Expense category for one month."""

    category_id: CategoryID
    group_id: GroupID
    category_name: str
    expense: dict[str, ExpenseRecord] = field(default_factory=dict)


@dataclass(frozen=True)
class IncomeRecord:
    """Source of income for one month."""

    income_id: IncomeID
    description: str
    amount: float = 0.0


@dataclass
class MonthlyRecord:
    """Incomes and categories belonging to one month."""

    incomes: list[IncomeRecord] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)


@dataclass
class DocumentRoot:
    """Root of the persisted document."""

    default_currency: str = ""
    groups: dict[str, CategoryGroup] = field(default_factory=dict)
    monthly: dict[str, MonthlyRecord] = field(default_factory=dict)
