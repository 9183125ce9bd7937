"""Pure functions for the per-category expense record.

The UI keeps one ExpenseRecord per category per month, stored in the
category's expense mapping under the category's own id. The store treats
the mapping keys as opaque; only these helpers know the convention.
"""

from dataclasses import replace
from decimal import Decimal

from gocost.domain.models import Category, ExpenseRecord

STATUS_PAID = "Paid"
STATUS_NOT_PAID = "Not Paid"


def to_decimal(value: float) -> Decimal:
    """Convert a stored float to Decimal without binary noise."""
    return Decimal(str(value))


def get_expense(category: Category) -> ExpenseRecord | None:
    """Get the expense record the UI tracks for a category.

    Args:
        category: Category to read.

    Returns:
        The record, or None if nothing was recorded this month.
    """
    return category.expense.get(category.category_id)


def with_expense(category: Category, record: ExpenseRecord) -> Category:
    """Return a copy of the category carrying the given expense record.

    Records under other keys are preserved.
    """
    expense = dict(category.expense)
    expense[category.category_id] = record
    return replace(category, expense=expense)


def without_expense(category: Category) -> Category:
    """Return a copy of the category with its tracked record removed."""
    expense = {key: value for key, value in category.expense.items() if key != category.category_id}
    return replace(category, expense=expense)


def toggle_status(category: Category) -> Category:
    """Flip the paid status of the category's expense record.

    A category with no record gets an empty one marked as paid.
    """
    record = get_expense(category)
    if record is None:
        return with_expense(category, ExpenseRecord(status=STATUS_PAID))

    status = STATUS_NOT_PAID if record.status == STATUS_PAID else STATUS_PAID
    return with_expense(category, replace(record, status=status))


def category_total(category: Category) -> Decimal:
    """Sum the amounts of every expense record in a category."""
    return sum((to_decimal(record.amount) for record in category.expense.values()), Decimal(0))


def category_budget(category: Category) -> Decimal:
    """Sum the budgets of every expense record in a category."""
    return sum((to_decimal(record.budget) for record in category.expense.values()), Decimal(0))
