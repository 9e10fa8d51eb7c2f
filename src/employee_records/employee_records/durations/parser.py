"""Tolerant date parsing for stored and submitted date fields.

Accepts ISO input first (``YYYY-MM-DD`` or a full ISO-8601 timestamp), then
falls back to ``DD-MM-YYYY``. Anything else resolves to ``None``; the caller
decides whether a missing date is an error.
"""
from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)

_DAY_MONTH_YEAR = re.compile(r"^(\d{2})-(\d{2})-(\d{4})$")


def _parse_iso(text: str) -> Optional[date]:
    try:
        return parse_iso_date(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def parse_date(value: Any) -> Optional[date]:
    """Normalize a date-like value into a ``date``, or ``None`` if it cannot be read."""
    if value is None:
        return None

    # datetime is a date subclass, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if not isinstance(value, str):
        logger.warning("Failed to parse date value of type %s: %r", type(value).__name__, value)
        return None

    text = value.strip()
    if not text:
        return None

    parsed = _parse_iso(text)
    if parsed is not None:
        return parsed

    match = _DAY_MONTH_YEAR.match(text)
    if match:
        day, month, year = match.groups()
        parsed = _parse_iso(f"{year}-{month}-{day}")
        if parsed is not None:
            return parsed

    logger.warning('Failed to parse date string: "%s"', value)
    return None
