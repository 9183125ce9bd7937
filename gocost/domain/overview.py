"""Pure functions for the monthly overview.

Functional core for the overview screen:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations

Amounts are stored as floats; totals are summed as Decimal so the
displayed figures carry no binary rounding noise.
"""

from dataclasses import dataclass
from decimal import Decimal

from gocost.domain.expenses import category_budget, category_total, to_decimal
from gocost.domain.models import Category, CategoryGroup, IncomeRecord


@dataclass(frozen=True)
class GroupSection:
    """Categories of one group, in display order.

    group is None for categories whose group no longer exists.
    """

    group: CategoryGroup | None
    categories: list[Category]
    total: Decimal


@dataclass(frozen=True)
class MonthOverview:
    """Immutable summary of one month."""

    total_income: Decimal
    total_expenses: Decimal
    total_budget: Decimal
    balance: Decimal
    group_totals: dict[str, Decimal]
    sections: list[GroupSection]


def order_groups(groups: list[CategoryGroup]) -> list[CategoryGroup]:
    """Sort groups by their display order (stable for ties)."""
    return sorted(groups, key=lambda group: group.order)


def total_income(incomes: list[IncomeRecord]) -> Decimal:
    """Sum the income amounts for a month."""
    return sum((to_decimal(income.amount) for income in incomes), Decimal(0))


def compute_month_overview(
    groups: list[CategoryGroup],
    incomes: list[IncomeRecord],
    categories: list[Category],
) -> MonthOverview:
    """Compute totals and grouped sections for a month.

    Args:
        groups: All category groups.
        incomes: Incomes of the month.
        categories: Categories of the month, in insertion order.

    Returns:
        MonthOverview with income, expense and per-group totals. Only groups
        with at least one category appear in sections.
    """
    by_group: dict[str, list[Category]] = {}
    group_totals: dict[str, Decimal] = {}
    expenses = Decimal(0)
    budget = Decimal(0)

    for category in categories:
        amount = category_total(category)
        expenses += amount
        budget += category_budget(category)
        by_group.setdefault(category.group_id, []).append(category)
        group_totals[category.group_id] = group_totals.get(category.group_id, Decimal(0)) + amount

    sections = []
    known = set()
    for group in order_groups(groups):
        known.add(group.group_id)
        if group.group_id in by_group:
            sections.append(GroupSection(group, by_group[group.group_id], group_totals[group.group_id]))

    orphans = [category for category in categories if category.group_id not in known]
    if orphans:
        sections.append(GroupSection(None, orphans, sum((category_total(c) for c in orphans), Decimal(0))))

    income = total_income(incomes)
    return MonthOverview(
        total_income=income,
        total_expenses=expenses,
        total_budget=budget,
        balance=income - expenses,
        group_totals=group_totals,
        sections=sections,
    )
