"""Expense commands: record spending against a category."""

from dataclasses import replace

from gocost.commands.common import (
    fail,
    find_category,
    format_amount,
    open_services,
    reporting_errors,
    resolve_month,
    success,
)
from gocost.domain.expenses import (
    STATUS_NOT_PAID,
    STATUS_PAID,
    get_expense,
    toggle_status,
    with_expense,
    without_expense,
)
from gocost.domain.models import ExpenseRecord
from gocost.domain.validation import validate_optional_amount

STATUS_CHOICES = {"paid": STATUS_PAID, "not-paid": STATUS_NOT_PAID, "not paid": STATUS_NOT_PAID}


def set_expense_command(
    ref: str,
    amount: str | None = None,
    budget: str | None = None,
    status: str | None = None,
    notes: str | None = None,
    month: str | None = None,
) -> None:
    """Set the amount, budget, status or notes of a category's expense.

    Fields not given keep their current value.
    """
    if amount is None and budget is None and status is None and notes is None:
        fail("nothing to set, pass --amount, --budget, --status or --notes")

    key = resolve_month(month)
    services, currency = open_services()
    category = find_category(services.expenses.get_categories_for_month(key), ref)
    record = get_expense(category) or ExpenseRecord(status=STATUS_NOT_PAID)

    if amount is not None:
        value, error = validate_optional_amount(amount)
        if error:
            fail(error)
        record = replace(record, amount=value)
    if budget is not None:
        value, error = validate_optional_amount(budget)
        if error:
            fail(error)
        record = replace(record, budget=value)
    if status is not None:
        normalized = STATUS_CHOICES.get(status.strip().lower())
        if normalized is None:
            fail(f"invalid status '{status}', expected 'paid' or 'not-paid'")
        record = replace(record, status=normalized)
    if notes is not None:
        record = replace(record, notes=notes.strip())

    with reporting_errors():
        services.expenses.update_category(key, with_expense(category, record))

    success(
        f"{category.category_name}: {format_amount(record.amount, currency)}"
        f" of {format_amount(record.budget, currency)} ({record.status})"
    )


def toggle_expense_command(ref: str, month: str | None = None) -> None:
    """Flip a category's expense between paid and not paid."""
    key = resolve_month(month)
    services, _ = open_services()
    category = find_category(services.expenses.get_categories_for_month(key), ref)
    updated = toggle_status(category)

    with reporting_errors():
        services.expenses.update_category(key, updated)

    record = get_expense(updated)
    success(f"{category.category_name} marked {record.status if record else STATUS_PAID}")


def clear_expense_command(ref: str, month: str | None = None) -> None:
    """Remove a category's expense record for a month."""
    key = resolve_month(month)
    services, _ = open_services()
    category = find_category(services.expenses.get_categories_for_month(key), ref)
    if get_expense(category) is None:
        fail(f"no expense recorded for {category.category_name} in {key}")

    with reporting_errors():
        services.expenses.update_category(key, without_expense(category))

    success(f"Cleared expense for {category.category_name} ({key})")
