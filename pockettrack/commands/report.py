"""Months command for viewing per-month balance statistics."""

import sqlite3
import sys

from rich.table import Table

from pockettrack.commands.common import console, currency_symbol, require_db_path
from pockettrack.dates import month_label, short_date
from pockettrack.domain.grouping import group_by_month
from pockettrack.domain.models import MonthKey
from pockettrack.domain.money import format_money_display, to_decimal
from pockettrack.domain.stats import DeltaRecord, MonthStatistics, compute_month_stats
from pockettrack.store.queries import get_all_snapshots


def describe_change(change: DeltaRecord | None, symbol: str) -> str:
    """Describe the change since the previous snapshot for display.

    Args:
        change: DeltaRecord, or None for the first snapshot of the month.
        symbol: Currency symbol.

    Returns:
        Rich-markup text for the "Spent since prev" column.
    """
    if change is None:
        return "[dim]first snapshot[/dim]"
    if change.spent > 0:
        spent = format_money_display(change.spent, symbol)
        return f"[red]{spent}[/red] [dim]({to_decimal(change.delta):,.2f} decrease)[/dim]"
    if change.gain > 0:
        return f"[green]+{format_money_display(change.gain, symbol)}[/green] [dim](gain)[/dim]"
    return "[dim]No change[/dim]"


def render_month(key: MonthKey, stats: MonthStatistics, symbol: str) -> None:
    """Render one month: summary line and entries, newest first."""
    console.print(f"\n[bold cyan]{month_label(key)}[/bold cyan]")
    console.print(
        f"[dim]From {short_date(stats.first_date)} to {short_date(stats.last_date)}"
        f" • {stats.days_covered} day(s) tracked[/dim]"
    )
    console.print(
        f"  Start: [bold]{format_money_display(stats.start_balance, symbol)}[/bold]"
        f"   Current: [bold]{format_money_display(stats.end_balance, symbol)}[/bold]"
        f"   Total spent: [bold red]{format_money_display(stats.total_spent, symbol)}[/bold red]"
        f"   Total gain: [bold green]{format_money_display(stats.total_gain, symbol)}[/bold green]"
        f"   Avg / day: [bold]{format_money_display(stats.avg_spent_per_day, symbol)}[/bold]"
    )

    table = Table()
    table.add_column("Date", style="cyan")
    table.add_column(f"Remaining ({symbol})", justify="right")
    table.add_column("Spent since prev")
    table.add_column("ID", style="dim")

    for entry in reversed(stats.entries):
        snapshot = entry.snapshot
        table.add_row(
            f"{short_date(snapshot.date)} [dim]{snapshot.date.isoformat()}[/dim]",
            format_money_display(snapshot.balance, symbol),
            describe_change(entry.change, symbol),
            snapshot.id,
        )

    console.print(table)


def months_command(month: str | None = None) -> None:
    """Show start, current, total spent and average per day for each month."""
    db_path = require_db_path()

    if month:
        try:
            month_label(MonthKey(month))
        except ValueError:
            console.print(f"[red]Invalid month '{month}' (expected YYYY-MM)[/red]")
            sys.exit(1)

    try:
        buckets, ordered_keys = group_by_month(get_all_snapshots(db_path))
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    if month:
        ordered_keys = [key for key in ordered_keys if key == month]

    if not ordered_keys:
        if month:
            console.print(f"[yellow]No snapshots for {month}[/yellow]")
        else:
            console.print("[dim]No entries yet. Add a date + remaining balance to start tracking.[/dim]")
            console.print("[dim]Try 'pockettrack demo' for sample data.[/dim]")
        return

    symbol = currency_symbol()
    for key in ordered_keys:
        stats = compute_month_stats(buckets[key])
        if stats is not None:
            render_month(key, stats, symbol)
