"""Tests for the gocost service layer."""

from dataclasses import fields
from pathlib import Path

import pytest

from gocost.domain.models import Category, CategoryGroup, CategoryID, GroupID, IncomeID, IncomeRecord, MonthKey
from gocost.errors import InUseError, NotFoundError
from gocost.services import build_services
from gocost.services.category import CategoryService
from gocost.services.expense import ExpenseService
from gocost.services.group import GroupService
from gocost.services.income import IncomeService
from gocost.store.repository import JsonRepository

MONTH = MonthKey("May-2024")


class RecordingRepo:
    """Fake repository that records calls and returns canned values."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple] = []
        self.error = error

    def __getattr__(self, name: str):
        def method(*args):
            self.calls.append((name, *args))
            if self.error is not None:
                raise self.error
            return f"{name}-result"

        return method


class TestForwarding:
    """Tests that services forward calls unchanged."""

    def test_group_service(self) -> None:
        """Should forward every group operation with its arguments."""
        repo = RecordingRepo()
        service = GroupService(repo)
        group = CategoryGroup(group_id=GroupID("g1"), group_name="Utilities", order=1)

        assert service.get_all_groups() == "get_all_groups-result"
        assert service.get_group_by_id(GroupID("g1")) == "get_group_by_id-result"
        service.add_group(group)
        service.update_group(group)
        service.delete_group(GroupID("g1"))

        assert repo.calls == [
            ("get_all_groups",),
            ("get_group_by_id", "g1"),
            ("add_group", group),
            ("update_group", group),
            ("delete_group", "g1"),
        ]

    def test_category_service(self) -> None:
        """Should forward every category operation with arguments in order."""
        repo = RecordingRepo()
        service = CategoryService(repo)
        category = Category(category_id=CategoryID("c1"), group_id=GroupID("g1"), category_name="Electricity")

        service.get_categories_for_month(MONTH)
        service.add_category(MONTH, category)
        service.update_category(MONTH, category)
        service.delete_category(MONTH, CategoryID("c1"))
        assert service.copy_categories_from_month(MonthKey("April-2024"), MONTH) == "copy_categories_from_month-result"

        assert repo.calls == [
            ("get_categories_for_month", MONTH),
            ("add_category", MONTH, category),
            ("update_category", MONTH, category),
            ("delete_category", MONTH, "c1"),
            ("copy_categories_from_month", "April-2024", MONTH),
        ]

    def test_income_service(self) -> None:
        """Should forward every income operation with its arguments."""
        repo = RecordingRepo()
        service = IncomeService(repo)
        income = IncomeRecord(income_id=IncomeID("i1"), description="Salary", amount=5000)

        service.get_incomes_for_month(MONTH)
        service.add_income(MONTH, income)
        service.update_income(MONTH, income)
        service.delete_income(MONTH, IncomeID("i1"))

        assert repo.calls == [
            ("get_incomes_for_month", MONTH),
            ("add_income", MONTH, income),
            ("update_income", MONTH, income),
            ("delete_income", MONTH, "i1"),
        ]

    def test_expense_service(self) -> None:
        """Should expose only reading categories and updating one."""
        repo = RecordingRepo()
        service = ExpenseService(repo)
        category = Category(category_id=CategoryID("c1"), group_id=GroupID("g1"), category_name="Electricity")

        service.get_categories_for_month(MONTH)
        service.update_category(MONTH, category)

        assert repo.calls == [("get_categories_for_month", MONTH), ("update_category", MONTH, category)]
        assert not hasattr(service, "delete_category")

    def test_errors_pass_through(self) -> None:
        """Should raise the repository's own exception object."""
        error = NotFoundError("db error")
        service = IncomeService(RecordingRepo(error))

        with pytest.raises(NotFoundError) as exc_info:
            service.get_incomes_for_month(MONTH)

        assert exc_info.value is error


class TestBuildServices:
    """Tests for build_services."""

    def test_share_one_repository(self, tmp_path: Path) -> None:
        """Should see each other's changes through the shared repository."""
        services = build_services(JsonRepository(tmp_path / "data.json", "EUR"))
        services.groups.add_group(CategoryGroup(group_id=GroupID("g1"), group_name="Utilities", order=1))
        services.categories.add_category(
            MONTH, Category(category_id=CategoryID("c1"), group_id=GroupID("g1"), category_name="Electricity")
        )

        assert len(services.expenses.get_categories_for_month(MONTH)) == 1
        with pytest.raises(InUseError):
            services.groups.delete_group(GroupID("g1"))

    def test_holds_only_services(self, tmp_path: Path) -> None:
        """Should carry the four services and no document state."""
        services = build_services(JsonRepository(tmp_path / "data.json", "EUR"))

        assert [f.name for f in fields(services)] == ["groups", "categories", "incomes", "expenses"]
