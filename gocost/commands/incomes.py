"""Income commands."""

from dataclasses import replace

from rich.table import Table

from gocost.commands.common import (
    console,
    fail,
    find_income,
    format_amount,
    open_services,
    reporting_errors,
    resolve_month,
    short_id,
    success,
)
from gocost.domain.models import IncomeID, IncomeRecord
from gocost.domain.overview import total_income
from gocost.domain.validation import validate_amount, validate_name
from gocost.months import new_id


def list_incomes_command(month: str | None = None) -> None:
    """List the incomes of a month."""
    key = resolve_month(month)
    services, currency = open_services()
    incomes = services.incomes.get_incomes_for_month(key)

    if not incomes:
        console.print(f"[yellow]No income recorded for {key}[/yellow]")
        return

    table = Table(title=f"Income for {key}")
    table.add_column("ID", style="dim")
    table.add_column("Description", style="white")
    table.add_column("Amount", justify="right", style="green")

    for income in incomes:
        table.add_row(short_id(income.income_id), income.description, format_amount(income.amount, currency))

    table.add_section()
    table.add_row("", "[bold]Total[/bold]", f"[bold]{format_amount(total_income(incomes), currency)}[/bold]")
    console.print(table)


def add_income_command(description: str, amount: str, month: str | None = None) -> None:
    """Record a new income for a month."""
    text, error = validate_name(description, "description")
    if error:
        fail(error)
    value, error = validate_amount(amount)
    if error:
        fail(error)

    key = resolve_month(month)
    services, currency = open_services()
    income = IncomeRecord(income_id=IncomeID(new_id()), description=text, amount=value)
    with reporting_errors():
        services.incomes.add_income(key, income)

    success(f"Added income {text}: {format_amount(value, currency)} ({key})")


def update_income_command(
    ref: str, description: str | None = None, amount: str | None = None, month: str | None = None
) -> None:
    """Change the description or amount of an income."""
    if description is None and amount is None:
        fail("nothing to update, pass --description and/or --amount")

    key = resolve_month(month)
    services, currency = open_services()
    income = find_income(services.incomes.get_incomes_for_month(key), ref)

    if description is not None:
        text, error = validate_name(description, "description")
        if error:
            fail(error)
        income = replace(income, description=text)
    if amount is not None:
        value, error = validate_amount(amount)
        if error:
            fail(error)
        income = replace(income, amount=value)

    with reporting_errors():
        services.incomes.update_income(key, income)

    success(f"Updated income {income.description}: {format_amount(income.amount, currency)}")


def delete_income_command(ref: str, month: str | None = None) -> None:
    """Delete an income from a month."""
    key = resolve_month(month)
    services, _ = open_services()
    income = find_income(services.incomes.get_incomes_for_month(key), ref)

    with reporting_errors():
        services.incomes.delete_income(key, income.income_id)

    success(f"Deleted income {income.description} ({key})")
