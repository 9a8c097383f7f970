"""Domain models and types for pockettrack.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from pockettrack.domain.models import Money, MonthKey, Snapshot, SnapshotId

__all__ = ["Money", "MonthKey", "Snapshot", "SnapshotId"]
