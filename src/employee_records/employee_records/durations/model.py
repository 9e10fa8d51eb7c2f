from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.constants import MONTHS_PER_YEAR


@dataclass(frozen=True)
class Duration:
    """Calendar-relative span in whole years, months and days.

    Months may exceed 11 until ``normalized()`` carries them into years. Days
    are never carried into months because month lengths vary.
    """

    years: int = 0
    months: int = 0
    days: int = 0

    @classmethod
    def zero(cls) -> "Duration":
        return cls(0, 0, 0)

    def normalized(self) -> "Duration":
        return Duration(
            years=self.years + self.months // MONTHS_PER_YEAR,
            months=self.months % MONTHS_PER_YEAR,
            days=self.days,
        )

    def to_dict(self) -> dict[str, int]:
        return {"years": self.years, "months": self.months, "days": self.days}


ZERO = Duration.zero()


@dataclass(frozen=True)
class ExperienceInterval:
    """One prior-employment period with its computed span."""

    from_date: Optional[date]
    to_date: Optional[date]
    duration: Duration = ZERO

    def to_dict(self) -> dict:
        return {"fromDate": self.from_date, "toDate": self.to_date, **self.duration.to_dict()}


@dataclass(frozen=True)
class DerivedFields:
    """Values computed at read time from stored dates, never persisted."""

    total_age: Duration = ZERO
    current_experience: Duration = ZERO
    total_previous_experience: Duration = ZERO
    total_experience: Duration = ZERO
    previous_experience: tuple[ExperienceInterval, ...] = field(default_factory=tuple)
