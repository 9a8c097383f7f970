"""CLI entry point for pockettrack."""

import typer

from pockettrack.commands.admin import backup_command, config_command, init_command
from pockettrack.commands.entries import (
    add_command,
    clear_command,
    delete_command,
    demo_command,
    edit_command,
    list_command,
    new_month_command,
)
from pockettrack.commands.export import export_command, import_command
from pockettrack.commands.report import months_command
from pockettrack.logging_config import setup_logging

app = typer.Typer(
    name="pockettrack",
    help="PocketTrack - record your remaining balance, see what you spend each month",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """PocketTrack - record your remaining balance, see what you spend each month."""
    setup_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
    migrate: bool = typer.Option(False, "--migrate", help="Only update the database schema"),
) -> None:
    """Initialize pockettrack database and configuration."""
    init_command(force, migrate)


@app.command(name="backup")
def backup(
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory (default: next to the database)"),
) -> None:
    """Backup your database and configuration files."""
    backup_command(output_dir)


@app.command(name="config")
def config(
    currency: str = typer.Option(None, "--currency", help="Currency symbol shown next to amounts"),
    export_filename: str = typer.Option(None, "--export-filename", help="Default file for 'export'"),
) -> None:
    """Show or change your settings."""
    config_command(currency, export_filename)


@app.command()
def add(
    date: str = typer.Argument(..., help="Snapshot date (YYYY-MM-DD or DD/MM/YYYY)"),
    balance: str = typer.Argument(..., help="Remaining balance"),
    note: str = typer.Option(None, "--note", "-n", help="Optional note"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Replace an entry on the same date without asking"),
) -> None:
    """Record your remaining balance on a date."""
    add_command(date, balance, note, yes)


@app.command()
def edit(
    snapshot_id: str = typer.Argument(..., help="Snapshot ID (from 'pockettrack list')"),
    date: str = typer.Option(None, "--date", help="New date"),
    balance: str = typer.Option(None, "--balance", help="New balance"),
    note: str = typer.Option(None, "--note", "-n", help="New note"),
) -> None:
    """Edit a snapshot's date, balance or note."""
    edit_command(snapshot_id, date, balance, note)


@app.command()
def delete(
    snapshot_id: str = typer.Argument(..., help="Snapshot ID (from 'pockettrack list')"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Delete a snapshot."""
    delete_command(snapshot_id, yes)


@app.command()
def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Delete all your snapshots."""
    clear_command(yes)


@app.command(name="list")
def list_snapshots() -> None:
    """List your snapshots, newest first."""
    list_command()


@app.command()
def months(
    month: str = typer.Option(None, "--month", help="Specific month (YYYY-MM)"),
) -> None:
    """Show your spending month by month."""
    months_command(month)


@app.command(name="new-month")
def new_month(
    balance: str = typer.Argument(..., help="Starting balance for next month"),
    note: str = typer.Option(None, "--note", "-n", help="Optional note"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Replace an entry on the same date without asking"),
) -> None:
    """Record next month's starting balance, dated its first day."""
    new_month_command(balance, note, yes)


@app.command()
def demo(
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Load sample snapshots across two months."""
    demo_command(yes)


@app.command()
def export(
    output: str = typer.Option(None, "--output", "-o", help="CSV file to write (default from config)"),
) -> None:
    """Export your snapshots as CSV with spend and cumulative average."""
    export_command(output)


@app.command(name="import")
def import_csv(
    csv_path: str = typer.Argument(..., help="CSV file produced by 'pockettrack export'"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Replace entries on the same date without asking"),
) -> None:
    """Import snapshots from an exported CSV file."""
    import_command(csv_path, yes)


if __name__ == "__main__":
    app()
