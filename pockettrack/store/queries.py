"""Database query functions."""

import sqlite3
from datetime import date
from pathlib import Path

from pockettrack.domain.models import Money, Snapshot, SnapshotId
from pockettrack.domain.snapshots import SavePlan
from pockettrack.logging_config import get_logger
from pockettrack.store.schema import get_db_path

logger = get_logger(__name__)


def _connect(db_path: Path | None = None) -> sqlite3.Connection:
    """Create a database connection with row factory.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Database connection with row_factory configured.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def _row_to_snapshot(row: sqlite3.Row) -> Snapshot:
    return Snapshot(
        id=SnapshotId(row["id"]),
        date=date.fromisoformat(row["date"]),
        balance=Money(row["balance"]),
        note=row["note"] or "",
    )


def insert_snapshot(snapshot: Snapshot, db_path: Path | None = None) -> None:
    """Insert a snapshot.

    Args:
        snapshot: Snapshot to store.
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If database operation fails (including a duplicate id).
    """
    insert_snapshots([snapshot], db_path)


def insert_snapshots(snapshots: list[Snapshot], db_path: Path | None = None) -> int:
    """Insert several snapshots in one transaction, keeping their order.

    Args:
        snapshots: Snapshots to store.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Number of snapshots inserted.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.executemany(
                "INSERT INTO snapshots (id, date, balance, note) VALUES (?, ?, ?, ?)",
                [(s.id, s.date.isoformat(), s.balance, s.note) for s in snapshots],
            )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
    logger.debug("Inserted %d snapshot(s)", len(snapshots))
    return len(snapshots)


def apply_save_plans(plans: list[SavePlan], db_path: Path | None = None) -> int:
    """Apply insert and replace plans in one transaction, in order.

    Either every plan is written or none is.

    Args:
        plans: "insert" or "replace" plans, each carrying a snapshot.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Number of plans applied.

    Raises:
        ValueError: If a plan is not an insert or replace plan.
        sqlite3.Error: If database operation fails; nothing is written.
    """
    for plan in plans:
        if plan.action not in ("insert", "replace") or plan.snapshot is None:
            raise ValueError(f"Cannot apply a '{plan.action}' plan")

    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            for plan in plans:
                s = plan.snapshot
                assert s is not None
                if plan.action == "replace":
                    cursor.execute(
                        "UPDATE snapshots SET date = ?, balance = ?, note = ? WHERE id = ?",
                        (s.date.isoformat(), s.balance, s.note, s.id),
                    )
                else:
                    cursor.execute(
                        "INSERT INTO snapshots (id, date, balance, note) VALUES (?, ?, ?, ?)",
                        (s.id, s.date.isoformat(), s.balance, s.note),
                    )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
    logger.debug("Applied %d save plan(s)", len(plans))
    return len(plans)


def update_snapshot(snapshot: Snapshot, db_path: Path | None = None) -> bool:
    """Update date, balance and note of an existing snapshot.

    Args:
        snapshot: Snapshot with the new values; matched by id.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        True if a snapshot was updated, False if the id was not found.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                "UPDATE snapshots SET date = ?, balance = ?, note = ? WHERE id = ?",
                (snapshot.date.isoformat(), snapshot.balance, snapshot.note, snapshot.id),
            )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        updated = cursor.rowcount > 0
    logger.debug("Update snapshot %s: %s", snapshot.id, "ok" if updated else "not found")
    return updated


def get_snapshot(snapshot_id: str, db_path: Path | None = None) -> Snapshot | None:
    """Get a snapshot by id.

    Args:
        snapshot_id: Snapshot id.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Snapshot, or None if not found.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT id, date, balance, note FROM snapshots WHERE id = ?", (snapshot_id,))
        row = cursor.fetchone()
        return _row_to_snapshot(row) if row else None


def get_all_snapshots(db_path: Path | None = None) -> list[Snapshot]:
    """Get all snapshots.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        List of snapshots in insertion order.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT id, date, balance, note FROM snapshots ORDER BY seq")
        rows = cursor.fetchall()
        return [_row_to_snapshot(row) for row in rows]


def count_snapshots(db_path: Path | None = None) -> int:
    """Count stored snapshots.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT COUNT(*) FROM snapshots")
        return int(cursor.fetchone()[0])


def delete_snapshot(snapshot_id: str, db_path: Path | None = None) -> bool:
    """Delete a snapshot.

    Args:
        snapshot_id: Snapshot id.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        True if a snapshot was deleted, False if the id was not found.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute("DELETE FROM snapshots WHERE id = ?", (snapshot_id,))
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        deleted = cursor.rowcount > 0
    logger.debug("Delete snapshot %s: %s", snapshot_id, "ok" if deleted else "not found")
    return deleted


def clear_snapshots(db_path: Path | None = None) -> int:
    """Delete every snapshot.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Number of snapshots deleted.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute("DELETE FROM snapshots")
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        removed = cursor.rowcount
    logger.info("Cleared %d snapshot(s)", removed)
    return removed
