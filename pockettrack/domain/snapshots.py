"""Snapshot creation, validation and save policy.

Input is validated here, at the storage boundary, so the derivation
functions can assume well-formed snapshots. The "currently editing" state
is carried explicitly in an EditSession rather than held globally.
"""

import re
import uuid
from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Literal

import pandas as pd

from pockettrack.domain.models import Money, Snapshot, SnapshotId
from pockettrack.domain.money import to_money

SaveAction = Literal["insert", "replace", "update", "missing"]

_STRIP_CHARS = ("৳", "£", "$", "€", " ")
_THOUSANDS = re.compile(r"-?\d{1,3}(,\d{3})+(\.\d*)?")
_ISO_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}")

# Largest value an SQLite INTEGER column holds.
MAX_MONEY = Money(2**63 - 1)


@dataclass(frozen=True)
class EditSession:
    """Immutable record of which snapshot the user is editing."""

    snapshot_id: SnapshotId
    original: Snapshot


@dataclass(frozen=True)
class SavePlan:
    """Immutable outcome of deciding how to persist a reading."""

    action: SaveAction
    snapshot: Snapshot | None
    replaced: Snapshot | None = None


def parse_balance(raw: str | int | float | Decimal) -> Money:
    """Parse a balance entered by the user.

    Commas are read as thousands separators only, so they must sit between
    groups of three digits ("1,234.50"). A decimal comma such as "1,23" is
    rejected rather than read as 123.

    Args:
        raw: Amount such as "27000", "৳ 1,234.5" or 1234.5.

    Returns:
        Balance in minor units, rounded half-up to 2 decimals.

    Raises:
        ValueError: If the amount is empty, not a finite number, negative,
            or too large to store.
    """
    text = str(raw).strip()
    for char in _STRIP_CHARS:
        text = text.replace(char, "")
    if not text:
        raise ValueError("Balance is required")
    if "," in text:
        if not _THOUSANDS.fullmatch(text):
            raise ValueError(f"Invalid balance '{raw}' (use ',' only between thousands)")
        text = text.replace(",", "")

    try:
        amount = Decimal(text)
    except InvalidOperation as e:
        raise ValueError(f"Invalid balance '{raw}'") from e

    if not amount.is_finite():
        raise ValueError(f"Invalid balance '{raw}'")
    if amount < 0:
        raise ValueError("Balance must be a non-negative number")

    try:
        money = to_money(amount)
    except InvalidOperation as e:
        raise ValueError(f"Balance '{raw}' is too large") from e
    if money > MAX_MONEY:
        raise ValueError(f"Balance '{raw}' is too large")
    return money


def normalize_date(raw: str | date) -> date:
    """Normalize a user-supplied date to a calendar date.

    Input shaped like YYYY-MM-DD must be a valid ISO date or datetime
    ("2025-10-05", "2025-10-05T10:30:00"); anything else in that shape is
    rejected. Other shapes go through pandas.to_datetime with day-first
    parsing (DD/MM/YYYY etc.).

    Args:
        raw: Date string or date.

    Returns:
        Calendar date.

    Raises:
        ValueError: If the date cannot be parsed.
    """
    if isinstance(raw, date):
        return raw

    text = raw.strip()
    if _ISO_PREFIX.match(text):
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as e:
            raise ValueError(f"Invalid date '{raw}' (expected YYYY-MM-DD)") from e

    try:
        parsed = pd.to_datetime(text, dayfirst=True)
    except (ValueError, pd.errors.ParserError) as e:
        raise ValueError(f"Could not parse date '{raw}': {e}") from e

    if pd.isna(parsed):
        raise ValueError(f"Could not parse date '{raw}'")
    return parsed.date()


def new_snapshot_id() -> SnapshotId:
    """Generate a short random snapshot id."""
    return SnapshotId(uuid.uuid4().hex[:8])


def create_snapshot(day: date, balance: Money, note: str = "") -> Snapshot:
    """Create a new snapshot with a fresh id."""
    return Snapshot(id=new_snapshot_id(), date=day, balance=balance, note=note)


def start_edit(snapshots: list[Snapshot], snapshot_id: str) -> EditSession | None:
    """Open an edit session for a snapshot.

    Returns:
        EditSession, or None if no snapshot has that id.
    """
    for snapshot in snapshots:
        if snapshot.id == snapshot_id:
            return EditSession(snapshot_id=snapshot.id, original=snapshot)
    return None


def plan_save(
    existing: list[Snapshot],
    day: date,
    balance: Money,
    session: EditSession | None = None,
    note: str | None = None,
) -> SavePlan:
    """Decide how a (date, balance) reading should be persisted.

    Args:
        existing: Current snapshots in insertion order.
        day: Reading date.
        balance: Reading balance in minor units.
        session: Edit session when the user is editing a snapshot.
        note: New note; None keeps the existing note.

    Returns:
        SavePlan with one of these actions:
        - "update": the edited snapshot gets the new date and balance
        - "missing": the edited snapshot no longer exists, nothing to save
        - "replace": a snapshot already exists on that date, its balance is replaced
        - "insert": a new snapshot is created
    """
    if session is not None:
        current = next((s for s in existing if s.id == session.snapshot_id), None)
        if current is None:
            return SavePlan(action="missing", snapshot=None)
        updated = replace(current, date=day, balance=balance, note=current.note if note is None else note)
        return SavePlan(action="update", snapshot=updated, replaced=current)

    same_day = next((s for s in existing if s.date == day), None)
    if same_day is not None:
        updated = replace(same_day, balance=balance, note=same_day.note if note is None else note)
        return SavePlan(action="replace", snapshot=updated, replaced=same_day)

    return SavePlan(action="insert", snapshot=create_snapshot(day, balance, note or ""))


def plan_import(existing: list[Snapshot], readings: list[tuple[date, Money]]) -> list[SavePlan]:
    """Plan saving a batch of readings one after another.

    Each reading sees the result of the ones before it, so a date repeated
    in the batch replaces the earlier reading.

    Args:
        existing: Current snapshots in insertion order.
        readings: (date, balance) tuples in file order.

    Returns:
        One "insert" or "replace" SavePlan per reading.
    """
    working = list(existing)
    plans: list[SavePlan] = []

    for day, balance in readings:
        plan = plan_save(working, day, balance)
        plans.append(plan)
        assert plan.snapshot is not None, "insert and replace plans carry a snapshot"
        if plan.action == "replace":
            working = [plan.snapshot if s.id == plan.snapshot.id else s for s in working]
        else:
            working.append(plan.snapshot)

    return plans


DEMO_READINGS: list[tuple[str, int]] = [
    ("2025-10-01", 30000),
    ("2025-10-05", 28500),
    ("2025-10-10", 27000),
    ("2025-10-20", 24000),
    ("2025-10-28", 22000),
    ("2025-11-02", 25000),
    ("2025-11-09", 23000),
    ("2025-11-16", 21500),
]


def demo_snapshots() -> list[Snapshot]:
    """Create sample snapshots across two months."""
    return [
        create_snapshot(date.fromisoformat(day), to_money(Decimal(amount)))
        for day, amount in DEMO_READINGS
    ]
