"""
Calendar helpers shared by the uptime calculator and the grid builder.

Windows may be given as dates or datetimes, so a caller can pass "now"
straight from the clock. Uptime arithmetic keeps the time of day, with
plain dates standing for midnight. The month grid works on calendar dates.
"""

from calendar import month_abbr, month_name, monthrange
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Iterator, Optional, Union

from .errors import InvalidWindow

DateLike = Union[date, datetime]

ONE_DAY = timedelta(days=1)


def as_datetime(value: DateLike, tz: Optional[tzinfo] = None) -> datetime:
    """Promote a date to midnight (in tz); datetimes pass through."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min, tzinfo=tz)


def validate_instants(window_start: DateLike, window_end: DateLike) -> tuple[datetime, datetime]:
    """
    Promote both ends of a window to datetimes and reject start > end.

    A plain date borrows the timezone of the other end when that end is
    an aware datetime.
    """
    tz = next((v.tzinfo for v in (window_start, window_end) if isinstance(v, datetime)), None)
    start, end = as_datetime(window_start, tz), as_datetime(window_end, tz)
    if start > end:
        raise InvalidWindow(window_start, window_end)
    return start, end


def validate_window(window_start: DateLike, window_end: DateLike) -> tuple[date, date]:
    """Reject start > end, then reduce both ends to calendar dates."""
    start, end = validate_instants(window_start, window_end)
    return start.date(), end.date()


def whole_days_between(start: DateLike, end: DateLike) -> int:
    """Floor of the elapsed days from start to end, without the +1 fencepost."""
    return (end - start) // ONE_DAY


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of a 1-based calendar month."""
    return date(year, month, 1), date(year, month, monthrange(year, month)[1])


def next_month(year: int, month: int) -> tuple[int, int]:
    """Advance a 1-based (year, month) pair by one month."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def iter_months(start: date, end: date) -> Iterator[tuple[int, int]]:
    """
    Yield (year, month) pairs, 1-based month, from the month containing
    start through the month containing end.
    """
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        yield year, month
        year, month = next_month(year, month)


def month_labels(month: int) -> tuple[str, str]:
    """Short and long English label for a 1-based month."""
    return month_abbr[month], month_name[month]


def overlaps(start: date, end: date, range_start: date, range_end: date) -> bool:
    """Inclusive interval overlap of [start, end] with [range_start, range_end]."""
    return start <= range_end and end >= range_start
