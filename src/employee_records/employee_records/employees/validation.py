"""Date consistency checks for registration and update payloads."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..core.constants import DATE_FORMAT_HINT
from ..core.exceptions import ValidationError
from ..durations.composer import coerce_intervals
from ..durations.parser import parse_date
from .model import Employee, PreviousExperience


@dataclass(frozen=True)
class ParsedDates:
    date_of_birth: Optional[date]
    date_of_joining: Optional[date]
    previous_experience: tuple[PreviousExperience, ...]


def _intervals(value: Any) -> list[Mapping[str, Any]]:
    try:
        return coerce_intervals(value)
    except TypeError:
        raise ValidationError("Validation error: previousExperience must be a list of {fromDate, toDate} entries.")


def validate_dates(data: Mapping[str, Any], existing: Optional[Employee] = None) -> ParsedDates:
    """Parse and cross-check the date fields of a create/update payload.

    When ``existing`` is given, fields missing from ``data`` fall back to the
    stored values so a partial update is checked against the merged record.
    Only complete intervals (both dates present) are returned.
    """
    dob_input = data.get("dateOfBirth")
    doj_input = data.get("dateOfJoining")

    date_of_birth = parse_date(dob_input)
    date_of_joining = parse_date(doj_input)

    if dob_input and not date_of_birth:
        raise ValidationError(f"Invalid Date of Birth format. {DATE_FORMAT_HINT}")
    if doj_input and not date_of_joining:
        raise ValidationError(f"Invalid Date of Joining format. {DATE_FORMAT_HINT}")

    if existing:
        if not dob_input:
            date_of_birth = existing.date_of_birth
        if not doj_input:
            date_of_joining = existing.date_of_joining

    if existing and "previousExperience" not in data:
        entries = [{"fromDate": exp.from_date, "toDate": exp.to_date} for exp in existing.previous_experience]
    else:
        entries = _intervals(data.get("previousExperience"))

    parsed: list[PreviousExperience] = []
    for i, entry in enumerate(entries, start=1):
        from_input = entry.get("fromDate")
        to_input = entry.get("toDate")
        from_date = parse_date(from_input)
        to_date = parse_date(to_input)

        if (from_input and not from_date) or (to_input and not to_date):
            raise ValidationError(f"Invalid date format in Previous Experience entry {i}. {DATE_FORMAT_HINT}")

        if from_date and to_date:
            if from_date > to_date:
                raise ValidationError(f'Previous Experience "From Date" cannot be after "To Date" in entry {i}.')
            if date_of_joining and to_date > date_of_joining:
                raise ValidationError(f'Previous Experience "To Date" in entry {i} cannot be after Date of Joining.')
            parsed.append(PreviousExperience(from_date=from_date, to_date=to_date))
        elif from_date or to_date:
            raise ValidationError(
                f'Both "From Date" and "To Date" are required for Previous Experience entry {i}, if either is provided.'
            )

    return ParsedDates(date_of_birth, date_of_joining, tuple(parsed))
