from __future__ import annotations

import calendar
from datetime import date
from typing import Optional

from ..core.constants import MONTHS_PER_YEAR
from .model import ZERO, Duration


def days_in_previous_month(d: date) -> int:
    """Length of the month before ``d``'s month (December of the prior year for January)."""
    if d.month == 1:
        return calendar.monthrange(d.year - 1, 12)[1]
    return calendar.monthrange(d.year, d.month - 1)[1]


def calculate_duration(start: Optional[date], end: Optional[date]) -> Duration:
    """Calendar-field difference between two dates.

    Fields are subtracted one by one with borrows (a full prior month for days,
    twelve months for months), so the result follows the calendar rather than
    elapsed-day division. ``start > end`` is not rejected and yields a negative
    years pattern; ordering is validated by callers.
    """
    if start is None or end is None:
        return ZERO

    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day

    if days < 0:
        months -= 1
        borrowed = days_in_previous_month(end)
        days += borrowed
        if days < 0:
            # Jan 31 -> Mar 1: the start day lies past the end of the borrowed month,
            # so the span is counted from that month's last day.
            days = end.day

    if months < 0:
        years -= 1
        months += MONTHS_PER_YEAR

    return Duration(years=years, months=months, days=days)
