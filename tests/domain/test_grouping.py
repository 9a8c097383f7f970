"""Tests for pockettrack.domain.grouping pure functions."""

from pockettrack.domain.grouping import group_by_month, sort_ascending
from tests.helpers import snap


class TestGroupByMonth:
    """Tests for group_by_month."""

    def test_empty_input(self) -> None:
        """Should return empty buckets and keys for no snapshots."""
        buckets, keys = group_by_month([])

        assert buckets == {}
        assert keys == []

    def test_two_months_newest_first(self) -> None:
        """Should create one bucket per month, keys newest first."""
        october = snap("2025-10-01", 30000)
        november = snap("2025-11-02", 25000)

        buckets, keys = group_by_month([october, november])

        assert keys == ["2025-11", "2025-10"]
        assert buckets["2025-10"] == [october]
        assert buckets["2025-11"] == [november]

    def test_keys_descend_across_year_boundary(self) -> None:
        """Should order January after December of the previous year."""
        _, keys = group_by_month([snap("2024-12-31", 10), snap("2025-01-01", 9), snap("2024-02-10", 8)])

        assert keys == ["2025-01", "2024-12", "2024-02"]

    def test_bucket_sorted_ascending(self) -> None:
        """Should sort each bucket oldest first."""
        late = snap("2025-10-20", 100)
        early = snap("2025-10-01", 300)
        middle = snap("2025-10-10", 200)

        buckets, _ = group_by_month([late, early, middle])

        assert buckets["2025-10"] == [early, middle, late]

    def test_equal_dates_keep_input_order(self) -> None:
        """Should keep insertion order for snapshots on the same date."""
        first = snap("2025-10-05", 100, snapshot_id="a")
        other = snap("2025-10-01", 150, snapshot_id="b")
        second = snap("2025-10-05", 90, snapshot_id="c")

        buckets, _ = group_by_month([first, other, second])

        assert [s.id for s in buckets["2025-10"]] == ["b", "a", "c"]

    def test_partitions_input_exactly(self) -> None:
        """Should place every snapshot in exactly one bucket matching its month."""
        snapshots = [
            snap("2025-09-30", 5, "s1"),
            snap("2025-10-01", 4, "s2"),
            snap("2025-10-31", 3, "s3"),
            snap("2025-11-01", 2, "s4"),
            snap("2024-10-15", 1, "s5"),
        ]

        buckets, keys = group_by_month(snapshots)

        members = [s.id for key in keys for s in buckets[key]]
        assert sorted(members) == ["s1", "s2", "s3", "s4", "s5"]
        for key, bucket in buckets.items():
            assert all(f"{s.date.year:04d}-{s.date.month:02d}" == key for s in bucket)
        assert len(set(keys)) == len(keys)

    def test_does_not_mutate_input(self) -> None:
        """Should leave the input list untouched."""
        snapshots = [snap("2025-10-20", 1), snap("2025-10-01", 2)]
        original = list(snapshots)

        group_by_month(snapshots)

        assert snapshots == original


class TestSortAscending:
    """Tests for sort_ascending."""

    def test_stable_on_ties(self) -> None:
        """Should keep relative order of equal dates."""
        a = snap("2025-10-05", 1, "a")
        b = snap("2025-10-05", 2, "b")

        assert sort_ascending([a, b]) == [a, b]
        assert sort_ascending([b, a]) == [b, a]
