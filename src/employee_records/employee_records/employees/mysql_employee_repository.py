from __future__ import annotations

from typing import Any, Optional, Sequence

import mysql.connector

from ..core.enums import Role
from ..core.exceptions import DuplicateUserError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import DUPLICATE_KEY_ERRNO, db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Employee, PreviousExperience, Qualifications
from .repository import EmployeeRepository

_EMPLOYEE_COLUMNS = """
    user_id, full_name, designation, department,
    qualification_ug, qualification_pg, qualification_phd,
    date_of_birth, date_of_joining, password_hash, role
"""


def _row_to_employee(row: dict[str, Any], experiences: Sequence[PreviousExperience]) -> Employee:
    return Employee(
        user_id=row["user_id"],
        full_name=row["full_name"],
        designation=row["designation"],
        department=row["department"],
        qualifications=Qualifications(
            ug=row["qualification_ug"],
            pg=row["qualification_pg"],
            phd=row["qualification_phd"],
        ),
        date_of_birth=normalize_mysql_date(row["date_of_birth"]),
        date_of_joining=normalize_mysql_date(row["date_of_joining"]),
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        previous_experience=tuple(experiences),
    )


def _employee_params(employee: Employee) -> tuple:
    return (
        employee.full_name,
        employee.designation,
        employee.department,
        employee.qualifications.ug,
        employee.qualifications.pg,
        employee.qualifications.phd,
        employee.date_of_birth,
        employee.date_of_joining,
        employee.password_hash,
        employee.role.value,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _load_experiences(self, cur, user_ids: Sequence[str]) -> dict[str, list[PreviousExperience]]:
        out: dict[str, list[PreviousExperience]] = {uid: [] for uid in user_ids}
        if not user_ids:
            return out
        placeholders = ",".join(["%s"] * len(user_ids))
        cur.execute(
            f"""
            SELECT user_id, from_date, to_date
            FROM previous_experiences
            WHERE user_id IN ({placeholders})
            ORDER BY user_id, position
            """,
            tuple(user_ids),
        )
        for r in fetchall(cur):
            out[r["user_id"]].append(
                PreviousExperience(
                    from_date=normalize_mysql_date(r["from_date"]),
                    to_date=normalize_mysql_date(r["to_date"]),
                )
            )
        return out

    def _replace_experiences(self, cur, employee: Employee) -> None:
        cur.execute("DELETE FROM previous_experiences WHERE user_id=%s", (employee.user_id,))
        if not employee.previous_experience:
            return
        cur.executemany(
            "INSERT INTO previous_experiences(user_id, position, from_date, to_date) VALUES(%s,%s,%s,%s)",
            [
                (employee.user_id, position, exp.from_date, exp.to_date)
                for position, exp in enumerate(employee.previous_experience)
            ],
        )

    def get_by_user_id(self, user_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            if not row:
                return None
            experiences = self._load_experiences(cur, [row["user_id"]])
            return _row_to_employee(row, experiences[row["user_id"]])

    def list_all(self, *, role: Optional[Role] = None) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            if role is None:
                cur.execute(f"SELECT {_EMPLOYEE_COLUMNS} FROM employees ORDER BY created_at, user_id")
            else:
                cur.execute(
                    f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE role=%s ORDER BY created_at, user_id",
                    (role.value,),
                )
            rows = fetchall(cur)
            experiences = self._load_experiences(cur, [r["user_id"] for r in rows])
            return [_row_to_employee(r, experiences[r["user_id"]]) for r in rows]

    def create(self, employee: Employee) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO employees({_EMPLOYEE_COLUMNS})
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (employee.user_id, *_employee_params(employee)),
                )
                self._replace_experiences(cur, employee)
        except mysql.connector.IntegrityError as e:
            if e.errno == DUPLICATE_KEY_ERRNO:
                raise DuplicateUserError("User ID already exists. Please use a unique User ID.") from e
            raise

    def update(self, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT user_id FROM employees WHERE user_id=%s FOR UPDATE", (employee.user_id,))
            if not fetchone(cur):
                return False
            cur.execute(
                """
                UPDATE employees
                SET full_name=%s, designation=%s, department=%s,
                    qualification_ug=%s, qualification_pg=%s, qualification_phd=%s,
                    date_of_birth=%s, date_of_joining=%s, password_hash=%s, role=%s
                WHERE user_id=%s
                """,
                (*_employee_params(employee), employee.user_id),
            )
            self._replace_experiences(cur, employee)
            return True

    def delete_by_user_id(self, user_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE user_id=%s", (user_id,))
            return cur.rowcount > 0
