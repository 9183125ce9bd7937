"""Category commands."""

from dataclasses import replace

from rich.table import Table

from gocost.commands.common import (
    console,
    fail,
    find_category,
    find_group,
    open_services,
    reporting_errors,
    resolve_month,
    short_id,
    success,
)
from gocost.domain.models import Category, CategoryID
from gocost.domain.validation import validate_name
from gocost.months import month_key, new_id, parse_month_key, previous_month


def list_categories_command(month: str | None = None) -> None:
    """List the categories of a month with their groups."""
    key = resolve_month(month)
    services, _ = open_services()
    categories = services.categories.get_categories_for_month(key)

    if not categories:
        console.print(f"[yellow]No categories for {key}[/yellow]")
        console.print("[dim]Use 'gocost category copy' to carry them over from the previous month[/dim]")
        return

    group_names = {group.group_id: group.group_name for group in services.groups.get_all_groups()}

    table = Table(title=f"Categories for {key}")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="white")
    table.add_column("Group", style="magenta")

    for category in categories:
        group_name = group_names.get(category.group_id, "[dim]-[/dim]")
        table.add_row(short_id(category.category_id), category.category_name, group_name)

    console.print(table)


def add_category_command(name: str, group_ref: str, month: str | None = None) -> None:
    """Add a category to a group for a month."""
    category_name, error = validate_name(name, "category name")
    if error:
        fail(error)

    key = resolve_month(month)
    services, _ = open_services()
    group = find_group(services.groups.get_all_groups(), group_ref)

    category = Category(category_id=CategoryID(new_id()), group_id=group.group_id, category_name=category_name)
    with reporting_errors():
        services.categories.add_category(key, category)

    success(f"Added category {category_name} to {group.group_name} ({key})")


def rename_category_command(ref: str, name: str, month: str | None = None) -> None:
    """Rename a category for a month."""
    category_name, error = validate_name(name, "category name")
    if error:
        fail(error)

    key = resolve_month(month)
    services, _ = open_services()
    category = find_category(services.categories.get_categories_for_month(key), ref)

    with reporting_errors():
        services.categories.update_category(key, replace(category, category_name=category_name))

    success(f"Renamed category {category.category_name} to {category_name}")


def move_category_command(ref: str, group_ref: str, month: str | None = None) -> None:
    """Move a category to another group."""
    key = resolve_month(month)
    services, _ = open_services()
    category = find_category(services.categories.get_categories_for_month(key), ref)
    group = find_group(services.groups.get_all_groups(), group_ref)

    with reporting_errors():
        services.categories.update_category(key, replace(category, group_id=group.group_id))

    success(f"Moved category {category.category_name} to {group.group_name}")


def delete_category_command(ref: str, month: str | None = None) -> None:
    """Delete a category, and its expenses, from a month."""
    key = resolve_month(month)
    services, _ = open_services()
    category = find_category(services.categories.get_categories_for_month(key), ref)

    with reporting_errors():
        services.categories.delete_category(key, category.category_id)

    success(f"Deleted category {category.category_name} ({key})")


def copy_categories_command(from_month: str | None = None, month: str | None = None) -> None:
    """Copy categories from another month, previous month by default.

    Expenses are not carried over and the target month's categories are
    replaced.
    """
    key = resolve_month(month)
    if from_month:
        source = resolve_month(from_month)
    else:
        source = month_key(*previous_month(*parse_month_key(key)))

    services, _ = open_services()
    with reporting_errors():
        count = services.categories.copy_categories_from_month(source, key)

    success(f"Copied {count} categories from {source} to {key}")
