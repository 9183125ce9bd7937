"""Category service."""

from typing import Protocol

from gocost.domain.models import Category, CategoryID, MonthKey


class CategoryRepository(Protocol):
    """Storage operations the category service needs."""

    def get_categories_for_month(self, month_key: MonthKey) -> list[Category]: ...

    def add_category(self, month_key: MonthKey, category: Category) -> None: ...

    def update_category(self, month_key: MonthKey, category: Category) -> None: ...

    def delete_category(self, month_key: MonthKey, category_id: CategoryID) -> None: ...

    def copy_categories_from_month(self, from_month_key: MonthKey, to_month_key: MonthKey) -> int: ...


class CategoryService:
    """Monthly category operations exposed to the UI."""

    def __init__(self, repo: CategoryRepository) -> None:
        self._repo = repo

    def get_categories_for_month(self, month_key: MonthKey) -> list[Category]:
        return self._repo.get_categories_for_month(month_key)

    def add_category(self, month_key: MonthKey, category: Category) -> None:
        self._repo.add_category(month_key, category)

    def update_category(self, month_key: MonthKey, category: Category) -> None:
        self._repo.update_category(month_key, category)

    def delete_category(self, month_key: MonthKey, category_id: CategoryID) -> None:
        self._repo.delete_category(month_key, category_id)

    def copy_categories_from_month(self, from_month_key: MonthKey, to_month_key: MonthKey) -> int:
        """Copy categories into another month, returning how many were copied."""
        return self._repo.copy_categories_from_month(from_month_key, to_month_key)
