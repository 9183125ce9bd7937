"""Expense service.

Expenses live inside their category, so editing one means reading the
month's categories and writing back an updated category. This service
exposes only those two operations.
"""

from typing import Protocol

from gocost.domain.models import Category, MonthKey


class ExpenseRepository(Protocol):
    """Storage operations the expense service needs."""

    def get_categories_for_month(self, month_key: MonthKey) -> list[Category]: ...

    def update_category(self, month_key: MonthKey, category: Category) -> None: ...


class ExpenseService:
    """Expense editing exposed to the UI."""

    def __init__(self, repo: ExpenseRepository) -> None:
        self._repo = repo

    def get_categories_for_month(self, month_key: MonthKey) -> list[Category]:
        return self._repo.get_categories_for_month(month_key)

    def update_category(self, month_key: MonthKey, category: Category) -> None:
        self._repo.update_category(month_key, category)
