"""Category group commands."""

from dataclasses import replace

from rich.table import Table

from gocost.commands.common import console, fail, find_group, open_services, reporting_errors, short_id, success
from gocost.domain.models import CategoryGroup, GroupID
from gocost.domain.validation import validate_name
from gocost.months import new_id


def list_groups_command() -> None:
    """List category groups in display order."""
    services, _ = open_services()
    groups = services.groups.get_all_groups()

    if not groups:
        console.print("[yellow]No category groups. Add one with 'gocost group add'.[/yellow]")
        return

    table = Table(title="Category Groups")
    table.add_column("ID", style="dim")
    table.add_column("Order", justify="right", style="cyan")
    table.add_column("Name", style="magenta")

    for group in groups:
        table.add_row(short_id(group.group_id), str(group.order), group.group_name)

    console.print(table)


def add_group_command(name: str, order: int | None = None) -> None:
    """Add a category group; order defaults to after the last group."""
    group_name, error = validate_name(name, "group name")
    if error:
        fail(error)

    services, _ = open_services()
    with reporting_errors():
        if order is None:
            existing = services.groups.get_all_groups()
            order = existing[-1].order + 1 if existing else 1

        group = CategoryGroup(group_id=GroupID(new_id()), group_name=group_name, order=order)
        services.groups.add_group(group)

    success(f"Added group {group.group_name} (order {group.order})")


def update_group_command(ref: str, name: str | None = None, order: int | None = None) -> None:
    """Rename a group or change its order."""
    if name is None and order is None:
        fail("nothing to update, pass --name and/or --order")

    services, _ = open_services()
    group = find_group(services.groups.get_all_groups(), ref)

    changes: dict[str, object] = {}
    if name is not None:
        group_name, error = validate_name(name, "group name")
        if error:
            fail(error)
        changes["group_name"] = group_name
    if order is not None:
        changes["order"] = order

    with reporting_errors():
        services.groups.update_group(replace(group, **changes))

    success(f"Updated group {changes.get('group_name', group.group_name)}")


def delete_group_command(ref: str) -> None:
    """Delete a group no category uses."""
    services, _ = open_services()
    group = find_group(services.groups.get_all_groups(), ref)

    with reporting_errors():
        services.groups.delete_group(group.group_id)

    success(f"Deleted group {group.group_name}")
