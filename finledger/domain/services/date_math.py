"""Calendar primitives used by every ledger calculation.

Dates are plain calendar days. ISO strings are read as local calendar days
and never go through a UTC instant, so a ``YYYY-MM-DD`` value can not shift
by one day depending on the caller's timezone. Unparseable values become an
``InvalidDate`` marker; comparisons involving a marker return ``None``
instead of a default boolean so callers have to handle them explicitly.
"""

import calendar
from collections.abc import Iterator
from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from finledger.domain.models.dates import InvalidDate, MaybeDate

ISO_DATE_FORMAT = "%Y-%m-%d"


def parse_local_date(value) -> MaybeDate:
    """Parse a calendar day.

    Args:
        value: A ``date``, a ``datetime`` (its calendar day is kept) or a
            ``YYYY-MM-DD`` string.

    Returns:
        MaybeDate: The parsed date, or an InvalidDate marker.
    """
    if isinstance(value, InvalidDate):
        return value
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return InvalidDate(value)
    cleaned = value.strip()
    # Timestamps keep their local calendar day.
    if "T" in cleaned:
        cleaned = cleaned.split("T", 1)[0]
    try:
        return datetime.strptime(cleaned, ISO_DATE_FORMAT).date()
    except ValueError:
        return InvalidDate(value)


def is_valid_date(value) -> bool:
    """Return True when ``value`` is a usable calendar day."""
    return isinstance(value, date)


def format_iso_date(value: MaybeDate) -> str:
    """Format a date as ``YYYY-MM-DD``; markers render as ``Invalid Date``."""
    if isinstance(value, InvalidDate):
        return "Invalid Date"
    return value.strftime(ISO_DATE_FORMAT)


def last_day_of_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def with_day_clamped(year: int, month: int, day: int) -> date:
    """Build a date in a month, clamping ``day`` to the month's length."""
    return date(year, month, max(1, min(day, last_day_of_month(year, month))))


def advance_months(value: MaybeDate, months: int) -> MaybeDate:
    """Move a date by whole calendar months.

    The day of month is clamped to the last valid day of the target month,
    so January 31 plus one month is February 28 or 29.
    """
    if isinstance(value, InvalidDate):
        return value
    return value + relativedelta(months=months)


def advance_months_anchored(start: date, months: int, anchor_day: int) -> date:
    """Move ``start``'s month by ``months`` and place it on ``anchor_day``.

    Unlike chaining ``advance_months``, the anchor day is re-applied to each
    target month, so an anchor of 31 yields Jan 31, Feb 29, Mar 31.
    """
    target = date(start.year, start.month, 1) + relativedelta(months=months)
    return with_day_clamped(target.year, target.month, anchor_day)


def add_days(value: MaybeDate, days: int) -> MaybeDate:
    """Move a date by a number of days."""
    if isinstance(value, InvalidDate):
        return value
    return value + timedelta(days=days)


def iter_days(start: date, count: int) -> Iterator[date]:
    """Yield ``count`` consecutive days starting at ``start``."""
    for offset in range(max(0, count)):
        yield start + timedelta(days=offset)


def month_key(value: date) -> tuple[int, int]:
    """Return the (year, month) pair of a date."""
    return value.year, value.month


def previous_month_key(value: date) -> tuple[int, int]:
    """Return the (year, month) pair of the calendar month before ``value``."""
    previous = date(value.year, value.month, 1) - relativedelta(months=1)
    return previous.year, previous.month


def compare_dates(left: MaybeDate, right: MaybeDate) -> int | None:
    """Three-way compare two dates.

    Returns:
        int | None: -1, 0 or 1, or None when either side is invalid.
    """
    if isinstance(left, InvalidDate) or isinstance(right, InvalidDate):
        return None
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def is_before(left: MaybeDate, right: MaybeDate) -> bool | None:
    """Return whether ``left`` is strictly before ``right``, None if unknown."""
    result = compare_dates(left, right)
    if result is None:
        return None
    return result < 0


__all__ = [
    "ISO_DATE_FORMAT",
    "parse_local_date",
    "is_valid_date",
    "format_iso_date",
    "last_day_of_month",
    "with_day_clamped",
    "advance_months",
    "advance_months_anchored",
    "add_days",
    "iter_days",
    "month_key",
    "previous_month_key",
    "compare_dates",
    "is_before",
]
