"""Domain type definitions for pockettrack.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in minor units (e.g. paisa, cents)
- MonthKey: Month in YYYY-MM format
- SnapshotId: Opaque snapshot identifier
"""

from dataclasses import dataclass
from datetime import date
from typing import NewType

# Money amounts are stored as minor units to avoid floating point errors
Money = NewType("Money", int)

# Month is always in YYYY-MM format (e.g., "2025-10")
MonthKey = NewType("MonthKey", str)

SnapshotId = NewType("SnapshotId", str)


@dataclass(frozen=True)
class Snapshot:
    """Immutable balance reading on a date."""

    id: SnapshotId
    date: date
    balance: Money
    note: str = ""
