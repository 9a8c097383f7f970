"""Pure functions for grouping snapshots into calendar months."""

from pockettrack.dates import month_key
from pockettrack.domain.models import MonthKey, Snapshot


def sort_ascending(snapshots: list[Snapshot]) -> list[Snapshot]:
    """Sort snapshots oldest first.

    The sort is stable: snapshots sharing a date keep their input order.
    """
    return sorted(snapshots, key=lambda s: s.date)


def group_by_month(
    snapshots: list[Snapshot],
) -> tuple[dict[MonthKey, list[Snapshot]], list[MonthKey]]:
    """Partition snapshots into month buckets.

    Args:
        snapshots: Snapshots in any order (insertion order breaks date ties).

    Returns:
        Tuple of (buckets, ordered_keys) where:
        - buckets: YYYY-MM key -> snapshots of that month, oldest first
        - ordered_keys: bucket keys, newest month first
    """
    buckets: dict[MonthKey, list[Snapshot]] = {}
    for snapshot in snapshots:
        buckets.setdefault(month_key(snapshot.date), []).append(snapshot)

    sorted_buckets = {key: sort_ascending(members) for key, members in buckets.items()}

    # Zero-padded YYYY-MM keys sort chronologically as strings
    ordered_keys = sorted(sorted_buckets, reverse=True)

    return sorted_buckets, ordered_keys
