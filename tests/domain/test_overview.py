"""Tests for gocost.domain.overview pure functions."""

from decimal import Decimal

from gocost.domain.models import Category, CategoryGroup, CategoryID, ExpenseRecord, GroupID, IncomeID, IncomeRecord
from gocost.domain.overview import compute_month_overview, order_groups, total_income


def group(group_id: str, name: str, order: int) -> CategoryGroup:
    return CategoryGroup(group_id=GroupID(group_id), group_name=name, order=order)


def category(cat_id: str, group_id: str, amount: float | None = None, budget: float = 0.0) -> Category:
    expense = {} if amount is None else {cat_id: ExpenseRecord(budget=budget, amount=amount, status="Paid")}
    return Category(category_id=CategoryID(cat_id), group_id=GroupID(group_id), category_name=cat_id, expense=expense)


def income(amount: float) -> IncomeRecord:
    return IncomeRecord(income_id=IncomeID(f"i{amount}"), description="Income", amount=amount)


class TestOrderGroups:
    """Tests for order_groups."""

    def test_sorted_by_order(self) -> None:
        """Should sort ascending by order, keeping ties stable."""
        groups = [group("b", "B", 2), group("a", "A", 1), group("c", "C", 2)]

        assert [g.group_id for g in order_groups(groups)] == ["a", "b", "c"]


class TestTotalIncome:
    """Tests for total_income."""

    def test_sums_exactly(self) -> None:
        """Should add amounts without float noise."""
        assert total_income([income(0.1), income(0.2)]) == Decimal("0.3")

    def test_empty(self) -> None:
        """Should be zero for a month without income."""
        assert total_income([]) == Decimal(0)


class TestComputeMonthOverview:
    """Tests for compute_month_overview."""

    def test_totals_and_balance(self) -> None:
        """Should compute income, expenses, budget and balance."""
        overview = compute_month_overview(
            [group("g1", "Utilities", 1), group("g2", "Housing", 2)],
            [income(5000), income(1000)],
            [category("c1", "g1", 120.5, 150), category("c2", "g2", 2000, 2000), category("c3", "g1")],
        )

        assert overview.total_income == Decimal("6000.0")
        assert overview.total_expenses == Decimal("2120.5")
        assert overview.total_budget == Decimal("2150.0")
        assert overview.balance == Decimal("3879.5")
        assert overview.group_totals == {"g1": Decimal("120.5"), "g2": Decimal("2000.0")}

    def test_sections_follow_group_order(self) -> None:
        """Should list groups by order with categories in insertion order."""
        overview = compute_month_overview(
            [group("g2", "Housing", 2), group("g1", "Utilities", 1)],
            [],
            [category("c1", "g2", 10), category("c2", "g1", 5), category("c3", "g2", 1)],
        )

        assert [s.group.group_id for s in overview.sections] == ["g1", "g2"]
        assert [c.category_id for c in overview.sections[1].categories] == ["c1", "c3"]
        assert overview.sections[1].total == Decimal("11.0")

    def test_hides_groups_without_categories(self) -> None:
        """Should omit groups with no categories this month."""
        overview = compute_month_overview(
            [group("g1", "Utilities", 1), group("g2", "Empty", 2)],
            [],
            [category("c1", "g1")],
        )

        assert [s.group.group_name for s in overview.sections] == ["Utilities"]

    def test_orphan_categories(self) -> None:
        """Should collect categories of unknown groups in a trailing section."""
        overview = compute_month_overview([group("g1", "Utilities", 1)], [], [category("c1", "gone", 7)])

        assert len(overview.sections) == 1
        assert overview.sections[0].group is None
        assert overview.sections[0].total == Decimal("7.0")

    def test_empty_month(self) -> None:
        """Should give zero totals and no sections."""
        overview = compute_month_overview([], [], [])

        assert overview.sections == []
        assert overview.balance == Decimal(0)
