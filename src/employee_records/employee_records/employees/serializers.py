"""Map employees to the camelCase documents the API speaks."""
from __future__ import annotations

from datetime import date
from typing import Any

from .model import Employee


def to_document(employee: Employee) -> dict[str, Any]:
    """Stored fields as a camelCase mapping. The password hash is left out."""
    return {
        "userId": employee.user_id,
        "fullName": employee.full_name,
        "designation": employee.designation,
        "department": employee.department,
        "educationalQualifications": {
            "ug": employee.qualifications.ug,
            "pg": employee.qualifications.pg,
            "phd": employee.qualifications.phd,
        },
        "dateOfBirth": employee.date_of_birth,
        "dateOfJoining": employee.date_of_joining,
        "previousExperience": [
            {"fromDate": exp.from_date, "toDate": exp.to_date} for exp in employee.previous_experience
        ],
        "role": employee.role.value,
    }


def to_json(value: Any) -> Any:
    """Convert dates to ISO strings recursively so the result is JSON-ready."""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value
