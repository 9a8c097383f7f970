"""Helpers shared by the CLI commands."""

import sys
import tomllib
from pathlib import Path

from rich.console import Console

from pockettrack.config import get_setting
from pockettrack.store.schema import database_exists, get_db_path

console = Console()


def require_db_path() -> Path:
    """Get the database path, exiting if the database has not been created."""
    try:
        db_path = get_db_path()
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file: {e}[/red]", style="bold")
        sys.exit(1)

    if not database_exists(db_path):
        console.print("[red]Database not found. Run 'pockettrack init' first.[/red]", style="bold")
        sys.exit(1)
    return db_path


def currency_symbol() -> str:
    """Get the configured currency symbol."""
    return str(get_setting("currency_symbol"))
