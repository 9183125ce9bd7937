"""CLI entry point for gocost."""

import logging

import typer
from rich.logging import RichHandler

from gocost import __version__
from gocost.commands.admin import backup_command, init_command
from gocost.commands.categories import (
    add_category_command,
    copy_categories_command,
    delete_category_command,
    list_categories_command,
    move_category_command,
    rename_category_command,
)
from gocost.commands.common import console
from gocost.commands.expenses import clear_expense_command, set_expense_command, toggle_expense_command
from gocost.commands.groups import add_group_command, delete_group_command, list_groups_command, update_group_command
from gocost.commands.incomes import (
    add_income_command,
    delete_income_command,
    list_incomes_command,
    update_income_command,
)
from gocost.commands.overview import overview_command

app = typer.Typer(
    name="gocost",
    help="gocost - track your monthly income and expenses",
    add_completion=False,
)
group_app = typer.Typer(help="Manage category groups.", no_args_is_help=True)
income_app = typer.Typer(help="Manage the incomes of a month.", no_args_is_help=True)
category_app = typer.Typer(help="Manage the categories of a month.", no_args_is_help=True)
expense_app = typer.Typer(help="Record spending against a category.", no_args_is_help=True)

app.add_typer(group_app, name="group")
app.add_typer(income_app, name="income")
app.add_typer(category_app, name="category")
app.add_typer(expense_app, name="expense")

MONTH_HELP = "Month such as August-2024 (default: current month)"


def configure_logging(verbose: bool) -> None:
    """Send log records to the console through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """gocost - track your monthly income and expenses."""
    configure_logging(verbose)


@app.command()
def version() -> None:
    """Print version information."""
    console.print(f"gocost version {__version__}")


@app.command(name="init")
def init(
    currency: str = typer.Option(None, "--currency", "-c", help="Default currency code (prompted if omitted)"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Initialize the gocost configuration."""
    init_command(currency, force)


@app.command(name="backup")
def backup(
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory (default: ~/.gocost/backups)"),
) -> None:
    """Backup your data and configuration files."""
    backup_command(output_dir)


@app.command()
def overview(
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Show your income, expenses per group, and balance for a month."""
    overview_command(month)


# --- Groups ---


@group_app.command(name="list")
def group_list() -> None:
    """List category groups in display order."""
    list_groups_command()


@group_app.command(name="add")
def group_add(
    name: str,
    order: int = typer.Option(None, "--order", help="Display order (default: after the last group)"),
) -> None:
    """Add a category group."""
    add_group_command(name, order)


@group_app.command(name="update")
def group_update(
    ref: str = typer.Argument(..., help="Group id, id prefix, or name"),
    name: str = typer.Option(None, "--name", help="New group name"),
    order: int = typer.Option(None, "--order", help="New display order"),
) -> None:
    """Rename a category group or change its order."""
    update_group_command(ref, name, order)


@group_app.command(name="delete")
def group_delete(
    ref: str = typer.Argument(..., help="Group id, id prefix, or name"),
) -> None:
    """Delete a category group that no category uses."""
    delete_group_command(ref)


# --- Incomes ---


@income_app.command(name="list")
def income_list(
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """List the incomes of a month."""
    list_incomes_command(month)


@income_app.command(name="add")
def income_add(
    description: str,
    amount: str,
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Record an income."""
    add_income_command(description, amount, month)


@income_app.command(name="update")
def income_update(
    ref: str = typer.Argument(..., help="Income id, id prefix, or description"),
    description: str = typer.Option(None, "--description", help="New description"),
    amount: str = typer.Option(None, "--amount", help="New amount"),
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Change an income's description or amount."""
    update_income_command(ref, description, amount, month)


@income_app.command(name="delete")
def income_delete(
    ref: str = typer.Argument(..., help="Income id, id prefix, or description"),
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Delete an income."""
    delete_income_command(ref, month)


# --- Categories ---


@category_app.command(name="list")
def category_list(
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """List the categories of a month."""
    list_categories_command(month)


@category_app.command(name="add")
def category_add(
    name: str,
    group: str = typer.Option(..., "--group", "-g", help="Group id, id prefix, or name"),
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Add a category to a group."""
    add_category_command(name, group, month)


@category_app.command(name="rename")
def category_rename(
    ref: str = typer.Argument(..., help="Category id, id prefix, or name"),
    name: str = typer.Argument(..., help="New category name"),
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Rename a category."""
    rename_category_command(ref, name, month)


@category_app.command(name="move")
def category_move(
    ref: str = typer.Argument(..., help="Category id, id prefix, or name"),
    group: str = typer.Option(..., "--group", "-g", help="Target group id, id prefix, or name"),
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Move a category to another group."""
    move_category_command(ref, group, month)


@category_app.command(name="delete")
def category_delete(
    ref: str = typer.Argument(..., help="Category id, id prefix, or name"),
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Delete a category and its expenses."""
    delete_category_command(ref, month)


@category_app.command(name="copy")
def category_copy(
    from_month: str = typer.Option(None, "--from", help="Source month (default: the month before --month)"),
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Copy categories from another month, without their expenses."""
    copy_categories_command(from_month, month)


# --- Expenses ---


@expense_app.command(name="set")
def expense_set(
    ref: str = typer.Argument(..., help="Category id, id prefix, or name"),
    amount: str = typer.Option(None, "--amount", "-a", help="Amount spent"),
    budget: str = typer.Option(None, "--budget", "-b", help="Amount budgeted"),
    status: str = typer.Option(None, "--status", "-s", help="'paid' or 'not-paid'"),
    notes: str = typer.Option(None, "--notes", "-n", help="Free-text notes"),
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Set the expense recorded against a category."""
    set_expense_command(ref, amount, budget, status, notes, month)


@expense_app.command(name="toggle")
def expense_toggle(
    ref: str = typer.Argument(..., help="Category id, id prefix, or name"),
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Flip a category's expense between paid and not paid."""
    toggle_expense_command(ref, month)


@expense_app.command(name="clear")
def expense_clear(
    ref: str = typer.Argument(..., help="Category id, id prefix, or name"),
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Remove the expense recorded against a category."""
    clear_expense_command(ref, month)


if __name__ == "__main__":
    app()
