"""Calendar helpers for month boundaries and inclusive day counting.

All helpers work on naive calendar dates (or datetimes kept in whatever
zone they arrive in) and never consult the local time zone.

Month bounds used by the calculator come from ``first_day_of_month`` and
``last_day_of_month``. ``next_day`` is public API only: billing counts days
with ``inclusive_day_span`` so December 9999 never steps past ``date.max``.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import TypeVar

D = TypeVar("D", date, datetime)


def first_day_of_month(d: D) -> D:
    """Return day 1 of the month containing ``d``.

    first_day_of_month(date(2019, 2, 7))  # date(2019, 2, 1)

    A ``datetime`` keeps its tzinfo and has its time-of-day zeroed.
    """
    if isinstance(d, datetime):
        return d.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    return d.replace(day=1)


def last_day_of_month(d: D) -> D:
    """Return the last day of the month containing ``d``.

    last_day_of_month(date(2019, 2, 7))  # date(2019, 2, 28)

    For a ``datetime`` this is the last second of the month, i.e.
    datetime(2019, 2, 28, 23, 59, 59).
    """
    last = calendar.monthrange(d.year, d.month)[1]
    if isinstance(d, datetime):
        return d.replace(day=last, hour=23, minute=59, second=59, microsecond=0)
    return d.replace(day=last)


def next_day(d: D) -> D:
    """Return the calendar day after ``d``, rolling over months and years."""
    return d + timedelta(days=1)


def inclusive_day_span(start: date, end: date) -> int:
    """Number of days from ``start`` to ``end``, counting both ends.

    Returns 0 when ``end`` falls before ``start``.
    """
    return max((end - start).days + 1, 0)
