"""Domain layer for gocost.

Entity dataclasses plus pure functions over them: expense records,
the monthly overview, and input validation. Nothing here touches
the filesystem or the console.
"""

from gocost.domain.models import (
    Category,
    CategoryGroup,
    CategoryID,
    DocumentRoot,
    ExpenseRecord,
    GroupID,
    IncomeID,
    IncomeRecord,
    MonthKey,
    MonthlyRecord,
)

__all__ = [
    "Category",
    "CategoryGroup",
    "CategoryID",
    "DocumentRoot",
    "ExpenseRecord",
    "GroupID",
    "IncomeID",
    "IncomeRecord",
    "MonthKey",
    "MonthlyRecord",
]
