"""Income service."""

from typing import Protocol

from gocost.domain.models import IncomeID, IncomeRecord, MonthKey


class IncomeRepository(Protocol):
    """Storage operations the income service needs."""

    def get_incomes_for_month(self, month_key: MonthKey) -> list[IncomeRecord]: ...

    def add_income(self, month_key: MonthKey, income: IncomeRecord) -> None: ...

    def update_income(self, month_key: MonthKey, income: IncomeRecord) -> None: ...

    def delete_income(self, month_key: MonthKey, income_id: IncomeID) -> None: ...


class IncomeService:
    """Monthly income operations exposed to the UI."""

    def __init__(self, repo: IncomeRepository) -> None:
        self._repo = repo

    def get_incomes_for_month(self, month_key: MonthKey) -> list[IncomeRecord]:
        return self._repo.get_incomes_for_month(month_key)

    def add_income(self, month_key: MonthKey, income: IncomeRecord) -> None:
        self._repo.add_income(month_key, income)

    def update_income(self, month_key: MonthKey, income: IncomeRecord) -> None:
        self._repo.update_income(month_key, income)

    def delete_income(self, month_key: MonthKey, income_id: IncomeID) -> None:
        self._repo.delete_income(month_key, income_id)
