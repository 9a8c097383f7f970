"""Snapshot management commands (add, edit, delete, clear, demo, list)."""

import sqlite3
import sys
from datetime import date
from pathlib import Path

import typer
from rich.table import Table

from pockettrack.commands.common import console, currency_symbol, require_db_path
from pockettrack.dates import first_day_of_next_month
from pockettrack.domain.models import Money
from pockettrack.domain.money import format_money_display
from pockettrack.domain.snapshots import (
    demo_snapshots,
    normalize_date,
    parse_balance,
    plan_save,
    start_edit,
)
from pockettrack.logging_config import get_logger
from pockettrack.store.queries import (
    clear_snapshots,
    delete_snapshot,
    get_all_snapshots,
    get_snapshot,
    insert_snapshot,
    insert_snapshots,
    update_snapshot,
)

logger = get_logger(__name__)


def parse_reading(raw_date: str, raw_balance: str) -> tuple[date, Money]:
    """Validate a date and balance typed by the user, exiting on bad input."""
    try:
        return normalize_date(raw_date), parse_balance(raw_balance)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        console.print("[dim]Dates: YYYY-MM-DD, DD/MM/YYYY, ... Balance: a non-negative number[/dim]")
        sys.exit(1)


def save_reading(day: date, balance: Money, note: str | None, yes: bool, db_path: Path) -> None:
    """Insert a reading, or replace the balance of the snapshot already on that date."""
    plan = plan_save(get_all_snapshots(db_path), day, balance, note=note)
    assert plan.snapshot is not None, "insert and replace plans carry a snapshot"
    symbol = currency_symbol()

    if plan.action == "replace":
        if not yes and not typer.confirm("An entry already exists for this date. Replace it?"):
            console.print("[dim]Nothing changed[/dim]")
            return
        assert plan.replaced is not None, "replace plans carry the replaced snapshot"
        update_snapshot(plan.snapshot, db_path)
        old = plan.replaced.balance
        console.print(f"[green]✓[/green] Replaced snapshot for {day.isoformat()}:")
        console.print(
            f"  Balance: {format_money_display(old, symbol)} → {format_money_display(plan.snapshot.balance, symbol)}"
        )
    else:
        insert_snapshot(plan.snapshot, db_path)
        console.print("[green]✓[/green] Snapshot added:")
        console.print(f"  Date: {day.isoformat()}")
        console.print(f"  Balance: {format_money_display(plan.snapshot.balance, symbol)}")

    console.print(f"  [dim]ID: {plan.snapshot.id}[/dim]")
    logger.info("%s snapshot %s on %s", plan.action, plan.snapshot.id, day.isoformat())


def add_command(
    date_str: str,
    balance: str,
    note: str | None = None,
    yes: bool = False,
) -> None:
    """Add a balance snapshot.

    Args:
        date_str: Snapshot date (YYYY-MM-DD, DD/MM/YYYY, or other formats).
        balance: Remaining balance.
        note: Optional note.
        yes: Replace an existing snapshot on the same date without asking.
    """
    db_path = require_db_path()
    day, amount = parse_reading(date_str, balance)

    try:
        save_reading(day, amount, note, yes, db_path)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)


def new_month_command(balance: str, note: str | None = None, yes: bool = False) -> None:
    """Add the starting balance for next month, dated its first day."""
    db_path = require_db_path()
    day, amount = parse_reading(first_day_of_next_month(date.today()).isoformat(), balance)

    try:
        save_reading(day, amount, note, yes, db_path)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)


def edit_command(
    snapshot_id: str,
    date_str: str | None = None,
    balance: str | None = None,
    note: str | None = None,
) -> None:
    """Edit the date, balance or note of a snapshot."""
    db_path = require_db_path()

    if date_str is None and balance is None and note is None:
        console.print("[yellow]Nothing to change (use --date, --balance or --note)[/yellow]")
        return

    try:
        existing = get_all_snapshots(db_path)
        session = start_edit(existing, snapshot_id)
        if session is None:
            console.print(f"[red]Snapshot {snapshot_id} not found[/red]")
            sys.exit(1)

        original = session.original
        try:
            day = normalize_date(date_str) if date_str is not None else original.date
            amount = parse_balance(balance) if balance is not None else original.balance
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            sys.exit(1)

        plan = plan_save(existing, day, amount, session=session, note=note)
        if plan.action == "missing" or plan.snapshot is None or not update_snapshot(plan.snapshot, db_path):
            console.print(f"[red]Snapshot {snapshot_id} no longer exists[/red]")
            sys.exit(1)

        symbol = currency_symbol()
        console.print(f"[green]✓[/green] Updated snapshot {snapshot_id}:")
        console.print(f"  Date: {original.date.isoformat()} → {plan.snapshot.date.isoformat()}")
        console.print(
            f"  Balance: {format_money_display(original.balance, symbol)}"
            f" → {format_money_display(plan.snapshot.balance, symbol)}"
        )
        if note is not None:
            console.print(f"  [yellow]Note: {plan.snapshot.note}[/yellow]")

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)


def delete_command(snapshot_id: str, yes: bool = False) -> None:
    """Delete a snapshot."""
    db_path = require_db_path()

    try:
        snapshot = get_snapshot(snapshot_id, db_path)
        if snapshot is None:
            console.print(f"[red]Snapshot {snapshot_id} not found[/red]")
            sys.exit(1)

        if not yes and not typer.confirm(f"Delete the {snapshot.date.isoformat()} entry?"):
            console.print("[dim]Nothing changed[/dim]")
            return

        delete_snapshot(snapshot_id, db_path)
        console.print(f"[green]✓[/green] Deleted snapshot {snapshot_id} ({snapshot.date.isoformat()})")

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)


def clear_command(yes: bool = False) -> None:
    """Delete every snapshot."""
    db_path = require_db_path()

    if not yes and not typer.confirm("This will delete all saved snapshots. Continue?"):
        console.print("[dim]Nothing changed[/dim]")
        return

    try:
        removed = clear_snapshots(db_path)
        console.print(f"[green]✓[/green] Deleted {removed} snapshot(s)")
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)


def demo_command(yes: bool = False) -> None:
    """Append sample snapshots across two months."""
    db_path = require_db_path()

    if not yes and not typer.confirm("Load demo sample entries? This will append them to your data."):
        console.print("[dim]Nothing changed[/dim]")
        return

    try:
        inserted = insert_snapshots(demo_snapshots(), db_path)
        console.print(f"[green]✓[/green] Added {inserted} demo snapshots")
        console.print("[dim]Run 'pockettrack months' to see them[/dim]")
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)


def list_command() -> None:
    """List snapshots, newest first."""
    db_path = require_db_path()

    try:
        snapshots = get_all_snapshots(db_path)

        if not snapshots:
            console.print("[yellow]No snapshots found[/yellow]")
            return

        symbol = currency_symbol()
        table = Table(title=f"Snapshots ({len(snapshots)})")
        table.add_column("Date", style="cyan")
        table.add_column("Balance", justify="right")
        table.add_column("Note", style="white")
        table.add_column("ID", style="dim")

        for snapshot in sorted(snapshots, key=lambda s: s.date, reverse=True):
            table.add_row(
                snapshot.date.isoformat(),
                format_money_display(snapshot.balance, symbol),
                snapshot.note or "[dim]-[/dim]",
                snapshot.id,
            )

        console.print(table)

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
