"""Service layer - one narrow capability set per entity.

Services forward to the repository without caching, reordering or
translating errors.
"""

from dataclasses import dataclass

from gocost.services.category import CategoryService
from gocost.services.expense import ExpenseService
from gocost.services.group import GroupService
from gocost.services.income import IncomeService
from gocost.store.repository import JsonRepository


@dataclass(frozen=True)
class Services:
    """The services the UI works with, sharing one repository."""

    groups: GroupService
    categories: CategoryService
    incomes: IncomeService
    expenses: ExpenseService


def build_services(repo: JsonRepository) -> Services:
    """Wire every service to the same repository."""
    return Services(
        groups=GroupService(repo),
        categories=CategoryService(repo),
        incomes=IncomeService(repo),
        expenses=ExpenseService(repo),
    )


__all__ = [
    "CategoryService",
    "ExpenseService",
    "GroupService",
    "IncomeService",
    "Services",
    "build_services",
]
