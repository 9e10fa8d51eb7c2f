"""Attach derived duration fields to an employee record.

The composer is the outer boundary of the duration engine. Internal steps
report failures through :class:`Computation` instead of raising, and only
``compose`` turns a failed computation into zeroed fields so a listing or
profile view always renders.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from .aggregator import sum_all, sum_durations
from .calculator import calculate_duration
from .model import ZERO, DerivedFields, ExperienceInterval
from .parser import parse_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Computation:
    """Outcome of deriving fields for one record: either ``derived`` or ``error``."""

    derived: Optional[DerivedFields] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def coerce_intervals(value: Any) -> list[Mapping[str, Any]]:
    """Accept a list of intervals, a single interval mapping, or nothing."""
    if value is None:
        return []
    if isinstance(value, Mapping):
        return [value]
    if isinstance(value, (list, tuple)):
        for position, entry in enumerate(value, start=1):
            if not isinstance(entry, Mapping):
                raise TypeError(f"previousExperience entry {position} is {type(entry).__name__}, expected a mapping")
        return list(value)
    raise TypeError(f"previousExperience is {type(value).__name__}, expected a list")


def measure_interval(entry: Mapping[str, Any]) -> ExperienceInterval:
    from_date = parse_date(entry.get("fromDate"))
    to_date = parse_date(entry.get("toDate"))
    if from_date is None or to_date is None:
        return ExperienceInterval(from_date=from_date, to_date=to_date, duration=ZERO)
    return ExperienceInterval(from_date=from_date, to_date=to_date, duration=calculate_duration(from_date, to_date))


def compute(record: Mapping[str, Any], *, today: date) -> Computation:
    try:
        date_of_birth = parse_date(record.get("dateOfBirth"))
        date_of_joining = parse_date(record.get("dateOfJoining"))

        total_age = calculate_duration(date_of_birth, today)
        current_experience = calculate_duration(date_of_joining, today)

        intervals = tuple(measure_interval(entry) for entry in coerce_intervals(record.get("previousExperience")))
        total_previous = sum_all(interval.duration for interval in intervals)

        return Computation(
            derived=DerivedFields(
                total_age=total_age,
                current_experience=current_experience,
                total_previous_experience=total_previous,
                total_experience=sum_durations(current_experience, total_previous),
                previous_experience=intervals,
            )
        )
    except Exception as e:
        return Computation(error=e)


def _settle(record: Mapping[str, Any], result: Computation) -> DerivedFields:
    """Unwrap a computation, zeroing every derived field if it failed."""
    if result.ok:
        return result.derived
    logger.error("Derived fields unavailable for userId=%s", record.get("userId"), exc_info=result.error)
    return DerivedFields()


def derive(record: Mapping[str, Any], *, today: date) -> DerivedFields:
    """Typed derived fields; zeroed when the record cannot be computed."""
    return _settle(record, compute(record, today=today))


def compose(record: Mapping[str, Any], *, today: date) -> dict[str, Any]:
    """Return a copy of ``record`` with ``totalAge``, ``currentExperience``,
    ``totalPreviousExperience`` and ``totalExperience`` attached.

    ``previousExperience`` is normalized to a list of dicts carrying the
    parsed ``fromDate``/``toDate`` and that interval's own
    ``years``/``months``/``days``.

    Never raises for malformed record content: the derived fields fall back to
    zero, and ``previousExperience`` is kept only if it already was a list.
    """
    out = dict(record)
    result = compute(record, today=today)
    derived = _settle(record, result)

    if result.ok:
        out["previousExperience"] = [interval.to_dict() for interval in derived.previous_experience]
    else:
        raw = record.get("previousExperience")
        out["previousExperience"] = list(raw) if isinstance(raw, list) else []

    out["totalAge"] = derived.total_age.to_dict()
    out["currentExperience"] = derived.current_experience.to_dict()
    out["totalPreviousExperience"] = derived.total_previous_experience.to_dict()
    out["totalExperience"] = derived.total_experience.to_dict()
    return out
