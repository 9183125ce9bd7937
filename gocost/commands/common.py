"""Helpers shared by the command modules."""

import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from decimal import Decimal
from typing import NoReturn, TypeVar

from rich.console import Console

from gocost.config import get_data_path, load_config
from gocost.domain.models import Category, CategoryGroup, IncomeRecord, MonthKey
from gocost.errors import GocostError
from gocost.months import current_month, month_key, parse_month_key
from gocost.services import Services, build_services
from gocost.store.repository import JsonRepository

console = Console()

T = TypeVar("T")

# Shortest id prefix accepted as a reference
MIN_PREFIX = 4


def fail(message: str) -> NoReturn:
    """Print an error status line and exit with status 1."""
    console.print(f"[red]✗ {message}[/red]", style="bold")
    sys.exit(1)


def success(message: str) -> None:
    """Print a success status line."""
    console.print(f"[green]✓[/green] {message}")


@contextmanager
def reporting_errors() -> Iterator[None]:
    """Turn any gocost error raised in the block into an error exit."""
    try:
        yield
    except GocostError as e:
        fail(str(e))


def open_services() -> tuple[Services, str]:
    """Load the configuration and open the repository it points at.

    Exits with status 1 if the configuration or data document is unusable.

    Returns:
        The services and the document's currency code.
    """
    with reporting_errors():
        config = load_config()
        data_path = get_data_path(config)
        try:
            data_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            fail(f"could not create data directory {data_path.parent}: {e}")
        repo = JsonRepository(data_path, config["currency"])
    return build_services(repo), repo.default_currency


def resolve_month(month: str | None) -> MonthKey:
    """Turn an optional --month value into a canonical month key."""
    if not month:
        return month_key(*current_month())
    try:
        return month_key(*parse_month_key(month))
    except ValueError as e:
        fail(str(e))


def short_id(entity_id: str) -> str:
    return entity_id[:8]


def format_amount(value: Decimal | float, currency: str) -> str:
    """Format an amount with two decimals and the currency code."""
    return f"{Decimal(str(value)):,.2f} {currency}"


def _resolve(items: list[T], ref: str, what: str, key: Callable[[T], str], label: Callable[[T], str]) -> T:
    for item in items:
        if key(item) == ref:
            return item
    for item in items:
        if label(item).lower() == ref.lower():
            return item
    if len(ref) >= MIN_PREFIX:
        matches = [item for item in items if key(item).startswith(ref)]
        if len(matches) == 1:
            return matches[0]
        if len(matches) > 1:
            fail(f"{what} reference '{ref}' is ambiguous")
    fail(f"{what} '{ref}' not found")


def find_group(groups: list[CategoryGroup], ref: str) -> CategoryGroup:
    """Find a group by id, name, or unique id prefix."""
    return _resolve(groups, ref, "group", lambda g: g.group_id, lambda g: g.group_name)


def find_category(categories: list[Category], ref: str) -> Category:
    """Find a category by id, name, or unique id prefix.

    With duplicate ids only the first category is reachable, since the
    store updates and deletes the first match.
    """
    first_by_id: dict[str, Category] = {}
    for category in categories:
        first_by_id.setdefault(category.category_id, category)
    return _resolve(list(first_by_id.values()), ref, "category", lambda c: c.category_id, lambda c: c.category_name)


def find_income(incomes: list[IncomeRecord], ref: str) -> IncomeRecord:
    """Find an income by id, description, or unique id prefix."""
    return _resolve(incomes, ref, "income", lambda i: i.income_id, lambda i: i.description)
