from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..core.enums import Role


@dataclass(frozen=True)
class Qualifications:
    ug: str
    pg: str
    phd: str


@dataclass(frozen=True)
class PreviousExperience:
    """Stored prior-employment period. Its duration is derived, not stored."""

    from_date: date
    to_date: date


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee record.

    Note: Plain data object (no DB access code). Derived durations are never
    kept here; they are computed per response.
    """

    user_id: str
    full_name: str
    designation: str
    department: str
    qualifications: Qualifications
    date_of_birth: date
    date_of_joining: date
    password_hash: str
    role: Role
    previous_experience: tuple[PreviousExperience, ...] = field(default_factory=tuple)
