"""Monthly overview command."""

from rich.table import Table

from gocost.commands.common import console, format_amount, open_services, resolve_month
from gocost.domain.expenses import STATUS_PAID, get_expense
from gocost.domain.models import Category
from gocost.domain.overview import MonthOverview, compute_month_overview


def format_status(status: str) -> str:
    """Color an expense status for display."""
    if not status:
        return "[dim]-[/dim]"
    if status == STATUS_PAID:
        return f"[green]{status}[/green]"
    return f"[red]{status}[/red]"


def render_category_row(table: Table, category: Category, currency: str) -> None:
    record = get_expense(category)
    if record is None:
        table.add_row(f"  {category.category_name}", "[dim]-[/dim]", "[dim]-[/dim]", "[dim]-[/dim]", "")
        return

    amount = format_amount(record.amount, currency)
    if record.budget and record.amount > record.budget:
        amount = f"[red]{amount}[/red]"
    table.add_row(
        f"  {category.category_name}",
        amount,
        format_amount(record.budget, currency),
        format_status(record.status),
        record.notes,
    )


def render_overview(title: str, overview: MonthOverview, currency: str) -> None:
    """Render the overview as a table followed by the totals."""
    console.print(f"\n[bold]{title}[/bold]")
    console.print(f"Total Income: [green]{format_amount(overview.total_income, currency)}[/green]\n")

    if not overview.sections:
        console.print("[yellow]No categories for this month.[/yellow]")
        console.print("[dim]Use 'gocost category copy' to carry them over from the previous month[/dim]\n")
    else:
        table = Table()
        table.add_column("Category", style="white")
        table.add_column("Amount", justify="right")
        table.add_column("Budget", justify="right", style="cyan")
        table.add_column("Status", justify="center")
        table.add_column("Notes", style="dim")

        for section in overview.sections:
            name = section.group.group_name if section.group else "Ungrouped"
            total = format_amount(section.total, currency)
            table.add_row(f"[bold magenta]{name}[/bold magenta]", f"[bold]{total}[/bold]")
            for category in section.categories:
                render_category_row(table, category, currency)
            table.add_section()

        console.print(table)

    balance_style = "green" if overview.balance >= 0 else "red"
    console.print(f"Total Expenses: [red]{format_amount(overview.total_expenses, currency)}[/red]")
    console.print(f"Total Budget: [cyan]{format_amount(overview.total_budget, currency)}[/cyan]")
    console.print(f"Balance: [{balance_style}]{format_amount(overview.balance, currency)}[/{balance_style}]")


def overview_command(month: str | None = None) -> None:
    """Show income, expenses per group, and balance for a month."""
    key = resolve_month(month)
    services, currency = open_services()

    overview = compute_month_overview(
        services.groups.get_all_groups(),
        services.incomes.get_incomes_for_month(key),
        services.categories.get_categories_for_month(key),
    )
    render_overview(key.replace("-", " "), overview, currency)
