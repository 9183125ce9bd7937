"""Admin commands for init and backup."""

import shutil
import sys
from datetime import datetime
from pathlib import Path

import typer

from gocost.commands.common import console, fail, reporting_errors, success
from gocost.config import (
    DEFAULT_CURRENCY,
    create_default_config,
    get_config_path,
    get_data_path,
    load_config,
)


def init_command(currency: str | None = None, force: bool = False) -> None:
    """Initialize the gocost configuration."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'gocost init --force' to overwrite[/yellow]")
        sys.exit(1)

    if currency is None:
        console.print("Welcome to gocost! Please enter a default currency.")
        console.print(f"[dim]You can change this later in the config file ({config_path})[/dim]")
        currency = typer.prompt("Currency code", default=DEFAULT_CURRENCY)

    with reporting_errors():
        config = create_default_config(config_path, currency)

    success(f"Config file created at {config_path}")
    console.print(f"[dim]Currency: {config['currency']}[/dim]")
    console.print(f"[dim]Data file: {config['dataFilename']}[/dim]")


def backup_command(output_dir: str | None = None) -> None:
    """Backup the data document and configuration."""
    config_path = get_config_path()
    if not config_path.exists():
        fail("Config not found. Run 'gocost init' first.")

    with reporting_errors():
        config = load_config(config_path)
    data_path = get_data_path(config)
    if not data_path.exists():
        fail(f"Data file not found: {data_path}")

    backup_dir = Path(output_dir).expanduser() if output_dir else config_path.parent / "backups"
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    try:
        backup_dir.mkdir(parents=True, exist_ok=True)

        data_backup = backup_dir / f"{data_path.stem}_{timestamp}{data_path.suffix}"
        shutil.copy2(data_path, data_backup)
        success(f"Data backed up to: {data_backup}")

        config_backup = backup_dir / f"config_{timestamp}.json"
        shutil.copy2(config_path, config_backup)
        success(f"Config backed up to: {config_backup}")
    except OSError as e:
        fail(f"Backup failed: {e}")

    console.print(f"[dim]Backup directory: {backup_dir}[/dim]")
