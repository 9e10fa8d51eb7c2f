from __future__ import annotations

from datetime import date

import pytest
from werkzeug.security import check_password_hash

from src.employee_records.employee_records.core.enums import Role
from src.employee_records.employee_records.core.exceptions import (
    AuthenticationError,
    DuplicateUserError,
    NotFoundError,
    ValidationError,
)
from src.employee_records.employee_records.employees.service import AuthService, EmployeeService


@pytest.fixture
def service(employees_repo, fixed_today):
    return EmployeeService(employees_repo, clock=lambda: fixed_today)


def test_register_stores_normalized_record(service, employees_repo, registration_payload):
    out = service.register(registration_payload)

    stored = employees_repo.get_by_user_id("E100")
    assert stored is not None
    assert stored.date_of_birth == date(1990, 6, 15)
    assert stored.role == Role.EMPLOYEE
    assert check_password_hash(stored.password_hash, "s3cret")
    assert len(stored.previous_experience) == 2

    assert out["userId"] == "E100"
    assert "password" not in out and "passwordHash" not in out
    assert out["totalAge"] == {"years": 34, "months": 0, "days": 0}
    assert out["totalPreviousExperience"] == {"years": 1, "months": 6, "days": 0}


def test_register_duplicate_user_id(service, registration_payload):
    service.register(registration_payload)

    with pytest.raises(DuplicateUserError, match="User ID already exists"):
        service.register(registration_payload)


def test_register_rejects_unknown_role(service, registration_payload):
    registration_payload["role"] = "manager"

    with pytest.raises(ValidationError, match="Role must be either employee or admin."):
        service.register(registration_payload)


@pytest.mark.parametrize("field", ["fullName", "designation", "department", "dateOfBirth", "password"])
def test_register_requires_fields(service, registration_payload, field):
    del registration_payload[field]

    with pytest.raises(ValidationError):
        service.register(registration_payload)


def test_register_requires_all_qualifications(service, registration_payload):
    registration_payload["educationalQualifications"] = {"ug": "BSc", "pg": "MSc"}

    with pytest.raises(ValidationError, match="PhD qualification"):
        service.register(registration_payload)


def test_update_merges_partial_payload(service, employees_repo, make_employee):
    employees_repo.create(make_employee("E1"))

    out = service.update("E1", {"designation": "Professor"})

    stored = employees_repo.get_by_user_id("E1")
    assert stored.designation == "Professor"
    assert stored.date_of_joining == date(2020, 1, 1)
    assert len(stored.previous_experience) == 1
    assert out["totalExperience"] == {"years": 5, "months": 5, "days": 14}


def test_update_replaces_previous_experience(service, employees_repo, make_employee):
    employees_repo.create(make_employee("E1"))

    out = service.update("E1", {"previousExperience": []})

    assert employees_repo.get_by_user_id("E1").previous_experience == ()
    assert out["totalExperience"] == out["currentExperience"]


def test_update_validates_merged_view(service, employees_repo, make_employee):
    employees_repo.create(make_employee("E1"))

    with pytest.raises(ValidationError, match="cannot be after Date of Joining"):
        service.update("E1", {"dateOfJoining": "01-06-2018"})


def test_update_password_handling(service, employees_repo, make_employee):
    employees_repo.create(make_employee("E1", password="old-pass"))

    service.update("E1", {"password": ""})
    assert check_password_hash(employees_repo.get_by_user_id("E1").password_hash, "old-pass")

    service.update("E1", {"password": "new-pass"})
    assert check_password_hash(employees_repo.get_by_user_id("E1").password_hash, "new-pass")


def test_update_missing_user(service):
    with pytest.raises(NotFoundError):
        service.update("nobody", {"designation": "x"})


def test_listing_and_delete(service, employees_repo, make_employee):
    with pytest.raises(NotFoundError, match="No users found"):
        service.list_all()

    employees_repo.create(make_employee("A1", role=Role.ADMIN))
    employees_repo.create(make_employee("E1"))

    assert [u["userId"] for u in service.list_all()] == ["A1", "E1"]
    assert [u["userId"] for u in service.list_employees()] == ["E1"]

    service.delete(" E1 ")
    with pytest.raises(NotFoundError):
        service.get("E1")
    with pytest.raises(NotFoundError, match="No employees found"):
        service.list_employees()


def test_authenticate_checks_role_and_password(employees_repo, make_employee, fixed_today):
    employees_repo.create(make_employee("A1", role=Role.ADMIN, password="adminpw"))
    auth = AuthService(employees_repo, clock=lambda: fixed_today)

    user = auth.authenticate(" A1 ", "adminpw", role=Role.ADMIN)
    assert user["userId"] == "A1"
    assert user["totalAge"] == {"years": 34, "months": 0, "days": 0}

    with pytest.raises(AuthenticationError, match="Invalid employee credentials"):
        auth.authenticate("A1", "adminpw", role=Role.EMPLOYEE)
    with pytest.raises(AuthenticationError, match="Invalid admin credentials"):
        auth.authenticate("A1", "wrong", role=Role.ADMIN)
    with pytest.raises(AuthenticationError):
        auth.authenticate(None, "adminpw", role=Role.ADMIN)
