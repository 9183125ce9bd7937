"""Document codec: loads and stores the JSON data document.

The field names written here are the on-disk format and must not change.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from gocost.domain.models import (
    Category,
    CategoryGroup,
    CategoryID,
    DocumentRoot,
    ExpenseRecord,
    GroupID,
    IncomeID,
    IncomeRecord,
    MonthlyRecord,
)
from gocost.errors import MalformedDocumentError, StorageError

logger = logging.getLogger(__name__)


def new_document(default_currency: str) -> DocumentRoot:
    """Create an empty document."""
    return DocumentRoot(default_currency=default_currency, groups={}, monthly={})


def load_document(path: Path, default_currency: str) -> DocumentRoot:
    """Load the document from disk.

    Args:
        path: Path to the data document.
        default_currency: Currency for a fresh document, or for a stored
            document that has none.

    Returns:
        The parsed document, or a fresh one if the file is missing or empty.

    Raises:
        MalformedDocumentError: If the file cannot be parsed.
        StorageError: If the file exists but cannot be read.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        logger.debug("No data document at %s, starting empty", path)
        return new_document(default_currency)
    except OSError as e:
        raise StorageError(f"failed to read data from {path}: {e}") from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedDocumentError(f"failed to decode data from {path}: {e}") from e

    if not text.strip():
        logger.debug("Data document %s is empty, starting empty", path)
        return new_document(default_currency)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDocumentError(f"failed to parse data from {path}: {e}") from e

    try:
        document = document_from_dict(data)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise MalformedDocumentError(f"invalid data document {path}: {e}") from e

    if not document.default_currency:
        document.default_currency = default_currency

    logger.debug("Loaded %d groups and %d months from %s", len(document.groups), len(document.monthly), path)
    return document


def save_document(path: Path, document: DocumentRoot) -> None:
    """Atomically write the document to disk.

    The JSON is written to a temporary file next to the target and renamed
    over it, so a partially written file is never visible.

    Raises:
        StorageError: If any filesystem operation fails.
    """
    payload = json.dumps(document_to_dict(document), indent=2, ensure_ascii=False)

    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise StorageError(f"failed to save data to {path}: {e}") from e

    logger.debug("Saved data document to %s", path)


def document_to_dict(document: DocumentRoot) -> dict[str, Any]:
    """Convert a document to its JSON structure."""
    return {
        "defaultCurrency": document.default_currency,
        "CategoryGroups": {key: group_to_dict(group) for key, group in document.groups.items()},
        "monthlyData": {key: monthly_to_dict(record) for key, record in document.monthly.items()},
    }


def document_from_dict(data: dict[str, Any]) -> DocumentRoot:
    """Build a document from its JSON structure.

    Missing collections become empty; missing scalar fields take zero values.
    """
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object at top level, got {type(data).__name__}")

    groups = data.get("CategoryGroups") or {}
    monthly = data.get("monthlyData") or {}
    return DocumentRoot(
        default_currency=str(data.get("defaultCurrency") or ""),
        groups={str(key): group_from_dict(value) for key, value in groups.items()},
        monthly={str(key): monthly_from_dict(value) for key, value in monthly.items()},
    )


def group_to_dict(group: CategoryGroup) -> dict[str, Any]:
    return {"groupId": group.group_id, "order": group.order, "groupName": group.group_name}


def group_from_dict(data: dict[str, Any]) -> CategoryGroup:
    return CategoryGroup(
        group_id=GroupID(str(data.get("groupId", ""))),
        group_name=str(data.get("groupName", "")),
        order=_integer(data.get("order", 0), "order"),
    )


def _integer(value: Any, field: str) -> int:
    # bool is an int subclass; floats would be truncated
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field} must be an integer, got {value!r}")
    return value


def monthly_to_dict(record: MonthlyRecord) -> dict[str, Any]:
    return {
        "incomes": [income_to_dict(income) for income in record.incomes],
        "categories": [category_to_dict(category) for category in record.categories],
    }


def monthly_from_dict(data: dict[str, Any]) -> MonthlyRecord:
    return MonthlyRecord(
        incomes=[income_from_dict(item) for item in data.get("incomes") or []],
        categories=[category_from_dict(item) for item in data.get("categories") or []],
    )


def income_to_dict(income: IncomeRecord) -> dict[str, Any]:
    return {"incomeId": income.income_id, "description": income.description, "amount": income.amount}


def income_from_dict(data: dict[str, Any]) -> IncomeRecord:
    return IncomeRecord(
        income_id=IncomeID(str(data.get("incomeId", ""))),
        description=str(data.get("description", "")),
        amount=float(data.get("amount", 0.0)),
    )


def category_to_dict(category: Category) -> dict[str, Any]:
    return {
        "catId": category.category_id,
        "groupId": category.group_id,
        "categoryName": category.category_name,
        "expense": {key: expense_to_dict(record) for key, record in category.expense.items()},
    }


def category_from_dict(data: dict[str, Any]) -> Category:
    expense = data.get("expense") or {}
    return Category(
        category_id=CategoryID(str(data.get("catId", ""))),
        group_id=GroupID(str(data.get("groupId", ""))),
        category_name=str(data.get("categoryName", "")),
        expense={str(key): expense_from_dict(value) for key, value in expense.items()},
    )


def expense_to_dict(record: ExpenseRecord) -> dict[str, Any]:
    return {"budget": record.budget, "amount": record.amount, "status": record.status, "notes": record.notes}


def expense_from_dict(data: dict[str, Any]) -> ExpenseRecord:
    return ExpenseRecord(
        budget=float(data.get("budget", 0.0)),
        amount=float(data.get("amount", 0.0)),
        status=str(data.get("status", "")),
        notes=str(data.get("notes", "")),
    )
