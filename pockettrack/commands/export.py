"""Export and import commands for the CSV snapshot series."""

import sqlite3
import sys
from pathlib import Path

import typer

from pockettrack.commands.common import console, require_db_path
from pockettrack.config import get_setting
from pockettrack.domain.export import NoDataError, parse_export_csv, project_export, render_export_csv
from pockettrack.domain.snapshots import normalize_date, parse_balance, plan_import
from pockettrack.logging_config import get_logger
from pockettrack.store.queries import apply_save_plans, get_all_snapshots

logger = get_logger(__name__)


def resolve_export_path(output: str | None) -> Path:
    """Resolve where the export is written (option, else configured filename)."""
    if output:
        return Path(output).expanduser()
    return Path(str(get_setting("export_filename"))).expanduser()


def export_command(output: str | None = None) -> None:
    """Export all snapshots as CSV with spend and cumulative average columns."""
    db_path = require_db_path()

    try:
        rows = project_export(get_all_snapshots(db_path))
        export_path = resolve_export_path(output)
        export_path.parent.mkdir(parents=True, exist_ok=True)
        export_path.write_text(render_export_csv(rows), encoding="utf-8")

    except NoDataError as e:
        console.print(f"[yellow]{e}[/yellow]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Export failed: {e}[/red]", style="bold")
        sys.exit(1)

    logger.info("Exported %d row(s) to %s", len(rows), export_path)
    console.print(f"[green]✓[/green] Exported {len(rows)} snapshot(s) to: {export_path}")


def import_command(csv_path: str, yes: bool = False) -> None:
    """Import snapshots from a previously exported CSV file."""
    db_path = require_db_path()
    path = Path(csv_path).expanduser()

    try:
        readings = parse_export_csv(path.read_text(encoding="utf-8"), normalize_date, parse_balance)
    except OSError as e:
        console.print(f"[red]Could not read {path}: {e}[/red]", style="bold")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]Invalid CSV: {e}[/red]", style="bold")
        sys.exit(1)

    if not readings:
        console.print(f"[yellow]No snapshots in {path}[/yellow]")
        return

    try:
        plans = plan_import(get_all_snapshots(db_path), readings)
        replacements = sum(1 for plan in plans if plan.action == "replace")

        if replacements and not yes:
            if not typer.confirm(f"{replacements} reading(s) replace existing snapshots on the same date. Continue?"):
                console.print("[dim]Nothing changed[/dim]")
                return

        apply_save_plans(plans, db_path)

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Imported {len(plans) - replacements} new snapshot(s)")
    if replacements:
        console.print(f"[green]✓[/green] Replaced {replacements} existing snapshot(s)")
