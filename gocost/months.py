"""Month utilities for gocost.

Pure functions for month keys and month arithmetic. The store treats month
keys as opaque strings; everything that builds or parses them lives here.
"""

import uuid
from datetime import date

from gocost.domain.models import MonthKey

# Fixed English names; calendar.month_name follows the locale
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def month_key(year: int, month: int) -> MonthKey:
    """Build the key for a month.

    Args:
        year: Four-digit year.
        month: Month number (1-12).

    Returns:
        Key such as "August-2024".

    Raises:
        ValueError: If month is outside 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"invalid month number: {month}")
    return MonthKey(f"{MONTH_NAMES[month - 1]}-{year}")


def parse_month_key(key: str) -> tuple[int, int]:
    """Parse a month key back into (year, month).

    The month name is matched case-insensitively.

    Raises:
        ValueError: If the key is not "<MonthName>-<YYYY>".
    """
    name, sep, year = key.strip().rpartition("-")
    numbers = {month_name.lower(): number for number, month_name in enumerate(MONTH_NAMES, start=1)}
    if not sep or name.lower() not in numbers or not year.isdigit() or len(year) != 4:
        raise ValueError(f"invalid month '{key}', expected e.g. August-2024")
    return int(year), numbers[name.lower()]


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Get the (year, month) before the given month."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Get the (year, month) after the given month."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def current_month() -> tuple[int, int]:
    """Get today's (year, month)."""
    today = date.today()
    return today.year, today.month


def new_id() -> str:
    """Generate an opaque identifier for a new entity."""
    return str(uuid.uuid4())
