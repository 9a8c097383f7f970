"""Pure functions for per-month balance statistics.

This module contains the functional core for month summaries:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in minor units (Money type). Averages are rounded
half-up to whole minor units as soon as they are computed.
"""

from dataclasses import dataclass
from datetime import date

from pockettrack.dates import inclusive_day_span
from pockettrack.domain.models import Money, Snapshot
from pockettrack.domain.money import divide_money


@dataclass(frozen=True)
class DeltaRecord:
    """Immutable change between a snapshot and the one before it."""

    spent: Money
    gain: Money
    delta: Money  # previous balance minus current balance


@dataclass(frozen=True)
class EntryStats:
    """Immutable snapshot with its change since the previous reading."""

    snapshot: Snapshot
    change: DeltaRecord | None  # None for the first snapshot of a sequence


@dataclass(frozen=True)
class MonthStatistics:
    """Immutable summary of one month of snapshots."""

    start_balance: Money
    end_balance: Money
    total_spent: Money
    total_gain: Money
    entries: list[EntryStats]
    days_covered: int
    avg_spent_per_day: Money
    first_date: date
    last_date: date


def classify_delta(previous: Money, current: Money) -> DeltaRecord:
    """Classify a balance change as spend or gain.

    Args:
        previous: Earlier balance in minor units.
        current: Later balance in minor units.

    Returns:
        DeltaRecord where a decrease is spent, an increase is gain, and no
        change leaves both at zero.
    """
    delta = Money(previous - current)
    spent = Money(delta) if delta > 0 else Money(0)
    gain = Money(-delta) if delta < 0 else Money(0)
    return DeltaRecord(spent=spent, gain=gain, delta=delta)


def compute_month_stats(snapshots: list[Snapshot]) -> MonthStatistics | None:
    """Compute statistics for one month of snapshots.

    Args:
        snapshots: Snapshots sorted oldest first.

    Returns:
        MonthStatistics, or None if there are no snapshots.
    """
    if not snapshots:
        return None

    entries: list[EntryStats] = [EntryStats(snapshot=snapshots[0], change=None)]
    total_spent = Money(0)
    total_gain = Money(0)

    for previous, current in zip(snapshots, snapshots[1:]):
        change = classify_delta(previous.balance, current.balance)
        total_spent = Money(total_spent + change.spent)
        total_gain = Money(total_gain + change.gain)
        entries.append(EntryStats(snapshot=current, change=change))

    first, last = snapshots[0], snapshots[-1]
    days_covered = inclusive_day_span(first.date, last.date)

    return MonthStatistics(
        start_balance=first.balance,
        end_balance=last.balance,
        total_spent=total_spent,
        total_gain=total_gain,
        entries=entries,
        days_covered=days_covered,
        avg_spent_per_day=divide_money(total_spent, days_covered),
        first_date=first.date,
        last_date=last.date,
    )
