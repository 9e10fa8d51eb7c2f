from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role stored with every employee record."""

    EMPLOYEE = "employee"
    ADMIN = "admin"
