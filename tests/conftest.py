from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.employee_records.employee_records.core.enums import Role
from src.employee_records.employee_records.core.exceptions import DuplicateUserError
from src.employee_records.employee_records.employees.model import Employee, PreviousExperience, Qualifications


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._by_id: dict[str, Employee] = {}
        for e in employees:
            self._by_id[e.user_id] = e

    def get_by_user_id(self, user_id: str) -> Optional[Employee]:
        return self._by_id.get(user_id)

    def list_all(self, *, role: Optional[Role] = None):
        return [e for e in self._by_id.values() if role is None or e.role == role]

    def create(self, employee: Employee) -> None:
        if employee.user_id in self._by_id:
            raise DuplicateUserError("User ID already exists. Please use a unique User ID.")
        self._by_id[employee.user_id] = employee

    def update(self, employee: Employee) -> bool:
        if employee.user_id not in self._by_id:
            return False
        self._by_id[employee.user_id] = employee
        return True

    def delete_by_user_id(self, user_id: str) -> bool:
        return self._by_id.pop(user_id, None) is not None


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 6, 15)


@pytest.fixture
def make_employee():
    def _make(user_id: str = "E1", *, role: Role = Role.EMPLOYEE, password: str = "secret", **changes) -> Employee:
        employee = Employee(
            user_id=user_id,
            full_name="Asha Rao",
            designation="Assistant Professor",
            department="Physics",
            qualifications=Qualifications(ug="BSc", pg="MSc", phd="PhD"),
            date_of_birth=date(1990, 6, 15),
            date_of_joining=date(2020, 1, 1),
            password_hash=generate_password_hash(password),
            role=role,
            previous_experience=(PreviousExperience(date(2018, 1, 1), date(2019, 1, 1)),),
        )
        return replace(employee, **changes)

    return _make


@pytest.fixture
def employees_repo():
    return InMemoryEmployees()


@pytest.fixture
def registration_payload() -> dict:
    return {
        "userId": "  E100 ",
        "fullName": "Ravi Kumar",
        "designation": "Lecturer",
        "department": "Mathematics",
        "educationalQualifications": {"ug": "BSc", "pg": "MSc", "phd": "NA"},
        "dateOfBirth": "15-06-1990",
        "dateOfJoining": "2020-01-01",
        "previousExperience": [
            {"fromDate": "2018-01-01", "toDate": "2019-01-01"},
            {"fromDate": "01-06-2019", "toDate": "2019-12-01"},
        ],
        "password": "s3cret",
        "role": "employee",
    }
