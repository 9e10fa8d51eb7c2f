from __future__ import annotations

from functools import reduce
from typing import Iterable

from .model import ZERO, Duration


def normalize(duration: Duration) -> Duration:
    return duration.normalized()


def sum_durations(a: Duration, b: Duration) -> Duration:
    """Add two durations, carrying whole years out of the months field.

    Days are summed as-is: there is no day-to-month carry.
    """
    return Duration(
        years=a.years + b.years,
        months=a.months + b.months,
        days=a.days + b.days,
    ).normalized()


def sum_all(durations: Iterable[Duration]) -> Duration:
    return reduce(sum_durations, durations, ZERO)
