"""Builders shared by the tests."""

from datetime import date

from pockettrack.domain.models import Money, Snapshot, SnapshotId


def snap(day: str, balance: float, snapshot_id: str | None = None, note: str = "") -> Snapshot:
    """Build a snapshot from an ISO date and a balance in major units."""
    return Snapshot(
        id=SnapshotId(snapshot_id or f"id-{day}"),
        date=date.fromisoformat(day),
        balance=Money(round(balance * 100)),
        note=note,
    )
