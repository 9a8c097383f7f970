"""Tests for pockettrack.domain.stats pure functions."""

from datetime import date

from pockettrack.domain.models import Money
from pockettrack.domain.stats import DeltaRecord, classify_delta, compute_month_stats
from tests.helpers import snap


class TestClassifyDelta:
    """Tests for classify_delta."""

    def test_decrease_is_spent(self) -> None:
        """Should report a decrease as spend."""
        assert classify_delta(Money(30000), Money(28500)) == DeltaRecord(
            spent=Money(1500), gain=Money(0), delta=Money(1500)
        )

    def test_increase_is_gain(self) -> None:
        """Should report an increase as gain, with a negative delta."""
        assert classify_delta(Money(10000), Money(15000)) == DeltaRecord(
            spent=Money(0), gain=Money(5000), delta=Money(-5000)
        )

    def test_no_change(self) -> None:
        """Should report zero spend and zero gain when unchanged."""
        assert classify_delta(Money(500), Money(500)) == DeltaRecord(spent=Money(0), gain=Money(0), delta=Money(0))


class TestComputeMonthStats:
    """Tests for compute_month_stats."""

    def test_empty_returns_none(self) -> None:
        """Should return None, not raise, for no snapshots."""
        assert compute_month_stats([]) is None

    def test_single_snapshot(self) -> None:
        """Should cover one day with nothing spent or gained."""
        stats = compute_month_stats([snap("2025-10-01", 30000)])

        assert stats is not None
        assert stats.days_covered == 1
        assert stats.total_spent == 0
        assert stats.total_gain == 0
        assert stats.avg_spent_per_day == 0
        assert stats.start_balance == stats.end_balance == 3000000
        assert stats.entries[0].change is None

    def test_three_snapshot_month(self) -> None:
        """Should compute totals and average per day for a spending month."""
        stats = compute_month_stats(
            [snap("2025-10-01", 30000), snap("2025-10-05", 28500), snap("2025-10-10", 27000)]
        )

        assert stats is not None
        assert stats.start_balance == 3000000
        assert stats.end_balance == 2700000
        assert stats.total_spent == 300000
        assert stats.total_gain == 0
        assert stats.days_covered == 10
        assert stats.avg_spent_per_day == 30000
        assert stats.first_date == date(2025, 10, 1)
        assert stats.last_date == date(2025, 10, 10)

    def test_first_entry_has_no_change(self) -> None:
        """Should mark only the first entry as not applicable."""
        stats = compute_month_stats([snap("2025-10-01", 100), snap("2025-10-02", 90), snap("2025-10-03", 90)])

        assert stats is not None
        changes = [entry.change for entry in stats.entries]
        assert changes[0] is None
        assert changes[1] == DeltaRecord(spent=Money(1000), gain=Money(0), delta=Money(1000))
        assert changes[2] == DeltaRecord(spent=Money(0), gain=Money(0), delta=Money(0))

    def test_gain_does_not_offset_spend(self) -> None:
        """Should accumulate spend and gain independently."""
        stats = compute_month_stats(
            [snap("2025-11-01", 100), snap("2025-11-02", 150), snap("2025-11-03", 120), snap("2025-11-04", 130)]
        )

        assert stats is not None
        assert stats.total_spent == 3000
        assert stats.total_gain == 6000

    def test_balance_increase_reports_gain(self) -> None:
        """Should report a rise as gain 50 and spend 0."""
        stats = compute_month_stats([snap("2025-10-01", 100), snap("2025-10-02", 150)])

        assert stats is not None
        change = stats.entries[1].change
        assert change is not None
        assert change.spent == 0
        assert change.gain == 5000

    def test_average_rounds_half_up(self) -> None:
        """Should round the daily average to whole minor units, half up."""
        # 8000.00 spent over 28 days = 285.714...
        stats = compute_month_stats(
            [
                snap("2025-10-01", 30000),
                snap("2025-10-05", 28500),
                snap("2025-10-10", 27000),
                snap("2025-10-20", 24000),
                snap("2025-10-28", 22000),
            ]
        )

        assert stats is not None
        assert stats.total_spent == 800000
        assert stats.days_covered == 28
        assert stats.avg_spent_per_day == 28571

    def test_average_half_cent_rounds_up(self) -> None:
        """Should round an exact half minor unit away from zero."""
        # 0.05 spent over 2 days = 0.025 -> 0.03
        stats = compute_month_stats([snap("2025-10-01", 1.00), snap("2025-10-02", 0.95)])

        assert stats is not None
        assert stats.avg_spent_per_day == 3

    def test_conservation(self) -> None:
        """Should satisfy spent - gain == start - end."""
        balances = [500.00, 480.25, 480.25, 512.10, 100.99, 0.00, 42.42]
        snapshots = [snap(f"2025-03-{i + 1:02d}", b) for i, b in enumerate(balances)]

        stats = compute_month_stats(snapshots)

        assert stats is not None
        assert stats.total_spent - stats.total_gain == stats.start_balance - stats.end_balance

    def test_end_balance_is_latest_reading(self) -> None:
        """Should take the end balance from the last snapshot in date order."""
        stats = compute_month_stats([snap("2025-10-01", 10), snap("2025-10-31", 7)])

        assert stats is not None
        assert stats.end_balance == 700
        assert stats.days_covered == 31
