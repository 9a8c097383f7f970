"""Date utilities for pockettrack.

Pure functions for month keys, day spans and formatting. Dates are plain
calendar dates, treated as local midnight.
"""

from datetime import date, datetime, timedelta

from pockettrack.domain.models import MonthKey


def month_key(day: date) -> MonthKey:
    """Get the month bucket key for a date.

    Args:
        day: Calendar date.

    Returns:
        Month in YYYY-MM format (month zero-padded).
    """
    return MonthKey(f"{day.year:04d}-{day.month:02d}")


def days_between(start: date, end: date) -> int:
    """Count whole days from start to end (negative if end is earlier)."""
    return (end - start).days


def inclusive_day_span(first: date, last: date) -> int:
    """Count days covered by a range, both ends included.

    A single day covers 1 day.
    """
    return days_between(first, last) + 1


def month_label(month: MonthKey) -> str:
    """Format a month key for display.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Human-readable month (e.g., "October 2025").

    Raises:
        ValueError: If the month key is malformed.
    """
    return datetime.strptime(month, "%Y-%m").strftime("%B %Y")


def short_date(day: date) -> str:
    """Format a date as e.g. "Oct 5"."""
    return f"{day.strftime('%b')} {day.day}"


def first_day_of_next_month(today: date) -> date:
    """Get the first day of the month after the given date."""
    return (today.replace(day=28) + timedelta(days=4)).replace(day=1)
