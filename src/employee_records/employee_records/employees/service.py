from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from datetime import date
from typing import Any, Callable

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import today_local
from ..common.validators import require_mapping, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, DuplicateUserError, NotFoundError, ValidationError
from ..durations.composer import compose
from .model import Employee, Qualifications
from .repository import EmployeeRepository
from .serializers import to_document
from .validation import validate_dates

logger = logging.getLogger(__name__)

Clock = Callable[[], date]

_PROFILE_FIELDS = (
    ("fullName", "Full name"),
    ("designation", "Designation"),
    ("department", "Department"),
)


def _parse_role(value: Any) -> Role:
    try:
        return Role(value)
    except ValueError:
        raise ValidationError("Role must be either employee or admin.")


def _parse_qualifications(value: Any) -> Qualifications:
    data = require_mapping(value, "Educational qualifications")
    return Qualifications(
        ug=require_non_empty(data.get("ug"), "UG qualification"),
        pg=require_non_empty(data.get("pg"), "PG qualification"),
        phd=require_non_empty(data.get("phd"), "PhD qualification"),
    )


def _clean_user_id(user_id: Any) -> str:
    return require_non_empty(user_id, "User ID")


class EmployeeService:
    """Use case: register, read, update and delete employee records.

    Every record leaving this service carries freshly derived durations for
    the clock's current date.
    """

    def __init__(self, employees: EmployeeRepository, *, clock: Clock = today_local):
        self._employees = employees
        self._clock = clock

    def annotate(self, employee: Employee) -> dict[str, Any]:
        return compose(to_document(employee), today=self._clock())

    def _get_or_raise(self, user_id: str) -> Employee:
        employee = self._employees.get_by_user_id(user_id)
        if not employee:
            raise NotFoundError("User not found")
        return employee

    def list_all(self) -> list[dict[str, Any]]:
        employees = self._employees.list_all()
        if not employees:
            raise NotFoundError("No users found")
        return [self.annotate(e) for e in employees]

    def list_employees(self) -> list[dict[str, Any]]:
        employees = self._employees.list_all(role=Role.EMPLOYEE)
        if not employees:
            raise NotFoundError("No employees found")
        return [self.annotate(e) for e in employees]

    def get(self, user_id: str) -> dict[str, Any]:
        return self.annotate(self._get_or_raise(_clean_user_id(user_id)))

    def register(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        user_id = _clean_user_id(payload.get("userId"))
        dates = validate_dates(payload)
        role = _parse_role(payload.get("role"))

        full_name, designation, department = (
            require_non_empty(payload.get(key), label) for key, label in _PROFILE_FIELDS
        )
        qualifications = _parse_qualifications(payload.get("educationalQualifications"))
        if not dates.date_of_birth:
            raise ValidationError("Validation error: Date of Birth is required.")
        if not dates.date_of_joining:
            raise ValidationError("Validation error: Date of Joining is required.")
        password = require_min_length(payload.get("password"), "Password", MIN_PASSWORD_LENGTH)

        if self._employees.get_by_user_id(user_id):
            raise DuplicateUserError("User ID already exists. Please use a unique User ID.")

        employee = Employee(
            user_id=user_id,
            full_name=full_name,
            designation=designation,
            department=department,
            qualifications=qualifications,
            date_of_birth=dates.date_of_birth,
            date_of_joining=dates.date_of_joining,
            password_hash=generate_password_hash(password),
            role=role,
            previous_experience=dates.previous_experience,
        )
        self._employees.create(employee)
        logger.info("Registered %s %s", role.value, user_id)
        return self.annotate(employee)

    def update(self, user_id: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Merge a partial payload over the stored record and revalidate the result."""
        existing = self._get_or_raise(_clean_user_id(user_id))
        dates = validate_dates(payload, existing)

        changes: dict[str, Any] = {
            "date_of_birth": dates.date_of_birth,
            "date_of_joining": dates.date_of_joining,
            "previous_experience": dates.previous_experience,
        }
        for (key, label), attr in zip(_PROFILE_FIELDS, ("full_name", "designation", "department")):
            if key in payload:
                changes[attr] = require_non_empty(payload.get(key), label)
        if "educationalQualifications" in payload:
            changes["qualifications"] = _parse_qualifications(payload.get("educationalQualifications"))
        if "role" in payload:
            changes["role"] = _parse_role(payload.get("role"))

        password = payload.get("password")
        if password:
            changes["password_hash"] = generate_password_hash(str(password))

        updated = replace(existing, **changes)
        if not self._employees.update(updated):
            raise NotFoundError("User not found.")
        logger.info("Updated %s", updated.user_id)
        return self.annotate(updated)

    def delete(self, user_id: str) -> None:
        if not self._employees.delete_by_user_id(_clean_user_id(user_id)):
            raise NotFoundError("User not found")
        logger.info("Deleted %s", user_id)


class AuthService:
    """Use case: role-scoped login."""

    def __init__(self, employees: EmployeeRepository, *, clock: Clock = today_local):
        self._employees = employees
        self._clock = clock

    def authenticate(self, user_id: Any, password: Any, *, role: Role) -> dict[str, Any]:
        failure = f"Invalid {role.value} credentials"
        if not isinstance(user_id, str) or not isinstance(password, str):
            raise AuthenticationError(failure)

        user_id = user_id.strip()
        employee = self._employees.get_by_user_id(user_id)
        if not employee or employee.role != role:
            logger.info("%s login failed for %s: no such account", role.value, user_id)
            raise AuthenticationError(failure)

        try:
            ok = check_password_hash(employee.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hash values
            ok = False

        if not ok:
            logger.info("%s login failed for %s: wrong password", role.value, user_id)
            raise AuthenticationError(failure)

        logger.info("%s login successful for %s", role.value, user_id)
        return compose(to_document(employee), today=self._clock())
