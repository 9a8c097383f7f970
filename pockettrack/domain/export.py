"""Pure functions for the CSV export.

The export is one continuous series across the whole history, oldest first,
with the spend since the previous snapshot and a running average of those
spends. Unlike month statistics, an increase in balance counts as zero spend.
"""

import csv
import io
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from pockettrack.domain.grouping import sort_ascending
from pockettrack.domain.models import Money, Snapshot
from pockettrack.domain.money import divide_money, format_amount

EXPORT_HEADER = ["date", "balance", "spent_since_prev", "cumulative_avg_spent"]


class NoDataError(ValueError):
    """Raised when there are no snapshots to export."""

    def __init__(self, message: str = "No data to export") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class ExportRow:
    """Immutable row of the export series."""

    date: date
    balance: Money
    spent_since_prev: Money | None = None  # None on the first row
    cumulative_avg_spent: Money | None = None


def project_export(snapshots: list[Snapshot]) -> list[ExportRow]:
    """Project all snapshots into the export series.

    Args:
        snapshots: All snapshots, any order.

    Returns:
        One ExportRow per snapshot, oldest first. The first row has no spend
        or average; every later row has both, zero included.

    Raises:
        NoDataError: If there are no snapshots.
    """
    if not snapshots:
        raise NoDataError()

    ordered = sort_ascending(snapshots)
    rows = [ExportRow(date=ordered[0].date, balance=ordered[0].balance)]

    running_sum = Money(0)
    running_count = 0

    for previous, current in zip(ordered, ordered[1:]):
        spent = Money(max(previous.balance - current.balance, 0))
        running_sum = Money(running_sum + spent)
        running_count += 1
        rows.append(
            ExportRow(
                date=current.date,
                balance=current.balance,
                spent_since_prev=spent,
                cumulative_avg_spent=divide_money(running_sum, running_count),
            )
        )

    return rows


def _optional_amount(amount: Money | None) -> str:
    return "" if amount is None else format_amount(amount)


def render_export_csv(rows: list[ExportRow]) -> str:
    """Serialize export rows as CSV text.

    Every value is double-quoted, amounts have 2 decimals and missing values
    are empty strings.

    Args:
        rows: Rows from project_export.

    Returns:
        CSV text including the header line.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    for row in rows:
        writer.writerow(
            [
                row.date.isoformat(),
                format_amount(row.balance),
                _optional_amount(row.spent_since_prev),
                _optional_amount(row.cumulative_avg_spent),
            ]
        )
    return buffer.getvalue()


def parse_export_csv(
    text: str,
    parse_date: Callable[[str], date],
    parse_balance: Callable[[str], Money],
) -> list[tuple[date, Money]]:
    """Read (date, balance) pairs back from an exported CSV.

    Derived columns are ignored; they are recomputed from the balances.

    Args:
        text: CSV text with at least "date" and "balance" columns.
        parse_date: Date normalizer (raises ValueError on bad input).
        parse_balance: Balance parser (raises ValueError on bad input).

    Returns:
        List of (date, balance) tuples in file order.

    Raises:
        ValueError: If the header is missing a column or a row is invalid.
    """
    reader = csv.DictReader(io.StringIO(text))
    fieldnames = [name.strip().lower() for name in reader.fieldnames or []]
    if "date" not in fieldnames or "balance" not in fieldnames:
        raise ValueError("CSV must have 'date' and 'balance' columns")
    reader.fieldnames = fieldnames

    parsed: list[tuple[date, Money]] = []
    for row_num, row in enumerate(reader, start=2):  # row 1 is the header
        raw_date = (row.get("date") or "").strip()
        raw_balance = (row.get("balance") or "").strip()
        if not raw_date:
            raise ValueError(f"Row {row_num}: missing date")
        try:
            parsed.append((parse_date(raw_date), parse_balance(raw_balance)))
        except ValueError as e:
            raise ValueError(f"Row {row_num}: {e}") from e

    return parsed
