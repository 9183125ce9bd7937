"""File-backed repository for groups, categories, incomes and expenses.

The repository holds the whole document in memory and is the only writer of
the data file. Every successful mutation is persisted before the call
returns; if persisting fails the in-memory document is restored, so memory
and disk always agree.
"""

import copy
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from gocost.domain.models import (
    Category,
    CategoryGroup,
    CategoryID,
    DocumentRoot,
    GroupID,
    IncomeID,
    IncomeRecord,
    MonthKey,
    MonthlyRecord,
)
from gocost.errors import AlreadyExistsError, InUseError, NotFoundError
from gocost.store.codec import load_document, save_document

logger = logging.getLogger(__name__)


class JsonRepository:
    """Repository over a single JSON document.

    Not thread-safe: meant for one caller at a time.
    """

    def __init__(self, file_path: Path | str, default_currency: str) -> None:
        """Open the repository, loading the document at file_path.

        Args:
            file_path: Path to the data document. Need not exist yet.
            default_currency: Currency for a fresh document.

        Raises:
            MalformedDocumentError: If the file cannot be parsed.
            StorageError: If the file cannot be read.
        """
        self._file_path = Path(file_path)
        self._document = load_document(self._file_path, default_currency)

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def default_currency(self) -> str:
        return self._document.default_currency

    def snapshot(self) -> DocumentRoot:
        """Return a deep copy of the in-memory document."""
        return copy.deepcopy(self._document)

    def _save(self) -> None:
        save_document(self._file_path, self._document)

    @contextmanager
    def _mutation(self) -> Iterator[DocumentRoot]:
        """Apply a mutation and persist it, restoring the document on failure."""
        previous = copy.deepcopy(self._document)
        try:
            yield self._document
            self._save()
        except Exception:
            logger.warning("Persisting %s failed, rolling back in-memory changes", self._file_path)
            self._document = previous
            raise
        logger.debug("Persisted changes to %s", self._file_path)

    # --- Category groups ---

    def get_all_groups(self) -> list[CategoryGroup]:
        """Get all groups sorted by their display order."""
        return sorted(self._document.groups.values(), key=lambda group: group.order)

    def get_group_by_id(self, group_id: GroupID) -> CategoryGroup:
        """Get a group by id.

        Raises:
            NotFoundError: If no group has this id.
        """
        group = self._document.groups.get(group_id)
        if group is None:
            raise NotFoundError(f"group with ID {group_id} not found")
        return group

    def add_group(self, group: CategoryGroup) -> None:
        """Add a new group.

        Raises:
            AlreadyExistsError: If a group with the same id exists.
        """
        if group.group_id in self._document.groups:
            raise AlreadyExistsError(f"group with ID {group.group_id} already exists")

        with self._mutation() as document:
            document.groups[group.group_id] = group

    def update_group(self, group: CategoryGroup) -> None:
        """Replace an existing group.

        Raises:
            NotFoundError: If no group has this id.
        """
        if group.group_id not in self._document.groups:
            raise NotFoundError(f"group with ID {group.group_id} not found")

        with self._mutation() as document:
            document.groups[group.group_id] = group

    def delete_group(self, group_id: GroupID) -> None:
        """Delete a group that no category references.

        Raises:
            InUseError: If any category in any month references the group.
            NotFoundError: If no group has this id.
        """
        if self._group_in_use(group_id):
            group = self._document.groups.get(group_id)
            name = group.group_name if group is not None else group_id
            raise InUseError(f"cannot delete group '{name}': group is still being used by existing categories")

        if group_id not in self._document.groups:
            raise NotFoundError(f"group with ID {group_id} not found")

        with self._mutation() as document:
            del document.groups[group_id]

    def _group_in_use(self, group_id: GroupID) -> bool:
        return any(
            category.group_id == group_id
            for record in self._document.monthly.values()
            for category in record.categories
        )

    # --- Incomes ---

    def get_incomes_for_month(self, month_key: MonthKey) -> list[IncomeRecord]:
        """Get the incomes of a month in insertion order (empty if the month is absent)."""
        record = self._document.monthly.get(month_key)
        if record is None:
            return []
        return list(record.incomes)

    def add_income(self, month_key: MonthKey, income: IncomeRecord) -> None:
        """Append an income to a month, creating the month if needed.

        Raises:
            AlreadyExistsError: If the month already has an income with this id.
        """
        record = self._document.monthly.get(month_key)
        if record is not None and _find_income(record, income.income_id) is not None:
            raise AlreadyExistsError(f"income record with ID {income.income_id} already exists")

        with self._mutation() as document:
            document.monthly.setdefault(month_key, MonthlyRecord()).incomes.append(income)

    def update_income(self, month_key: MonthKey, income: IncomeRecord) -> None:
        """Replace an income in place.

        Raises:
            NotFoundError: If the month or the income does not exist.
        """
        index = _find_income(self._require_month(month_key), income.income_id)
        if index is None:
            raise NotFoundError(f"income record with ID {income.income_id} not found for update")

        with self._mutation() as document:
            document.monthly[month_key].incomes[index] = income

    def delete_income(self, month_key: MonthKey, income_id: IncomeID) -> None:
        """Remove an income from a month.

        Raises:
            NotFoundError: If the month or the income does not exist.
        """
        index = _find_income(self._require_month(month_key), income_id)
        if index is None:
            raise NotFoundError(f"income record with ID {income_id} not found for deletion")

        with self._mutation() as document:
            del document.monthly[month_key].incomes[index]

    # --- Categories ---

    def get_categories_for_month(self, month_key: MonthKey) -> list[Category]:
        """Get the categories of a month in insertion order (empty if the month is absent)."""
        record = self._document.monthly.get(month_key)
        if record is None:
            return []
        return copy.deepcopy(record.categories)

    def add_category(self, month_key: MonthKey, category: Category) -> None:
        """Append a category to a month, creating the month if needed.

        Duplicate category ids are accepted; update and delete act on the
        first match.
        """
        category = copy.deepcopy(category)
        with self._mutation() as document:
            document.monthly.setdefault(month_key, MonthlyRecord()).categories.append(category)

    def update_category(self, month_key: MonthKey, category: Category) -> None:
        """Replace the first category with a matching id.

        Raises:
            NotFoundError: If the month or the category does not exist.
        """
        index = _find_category(self._require_month(month_key), category.category_id)
        if index is None:
            raise NotFoundError(f"category with ID {category.category_id} not found for update")

        category = copy.deepcopy(category)
        with self._mutation() as document:
            document.monthly[month_key].categories[index] = category

    def delete_category(self, month_key: MonthKey, category_id: CategoryID) -> None:
        """Remove the first category with a matching id.

        Raises:
            NotFoundError: If the month or the category does not exist.
        """
        index = _find_category(self._require_month(month_key), category_id)
        if index is None:
            raise NotFoundError(f"category with ID {category_id} not found for deletion")

        with self._mutation() as document:
            del document.monthly[month_key].categories[index]

    def copy_categories_from_month(self, from_month_key: MonthKey, to_month_key: MonthKey) -> int:
        """Carry a month's categories forward without their expenses.

        The destination's categories are replaced; its incomes are kept.

        Args:
            from_month_key: Month to copy from.
            to_month_key: Month to copy into.

        Returns:
            Number of categories copied.

        Raises:
            NotFoundError: If the source month is absent or has no categories.
        """
        source = self._document.monthly.get(from_month_key)
        if source is None or not source.categories:
            raise NotFoundError(f"no categories found in {from_month_key} to copy from")

        categories = [
            Category(
                category_id=category.category_id,
                group_id=category.group_id,
                category_name=category.category_name,
                expense={},
            )
            for category in source.categories
        ]

        with self._mutation() as document:
            target = document.monthly.get(to_month_key)
            incomes = target.incomes if target is not None else []
            document.monthly[to_month_key] = MonthlyRecord(incomes=incomes, categories=categories)

        logger.debug("Copied %d categories from %s to %s", len(categories), from_month_key, to_month_key)
        return len(categories)

    def _require_month(self, month_key: MonthKey) -> MonthlyRecord:
        record = self._document.monthly.get(month_key)
        if record is None:
            raise NotFoundError(f"no data found for month {month_key}")
        return record


def _find_income(record: MonthlyRecord, income_id: IncomeID) -> int | None:
    for index, income in enumerate(record.incomes):
        if income.income_id == income_id:
            return index
    return None


def _find_category(record: MonthlyRecord, category_id: CategoryID) -> int | None:
    for index, category in enumerate(record.categories):
        if category.category_id == category_id:
            return index
    return None
