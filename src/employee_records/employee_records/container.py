from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .common.datetime_utils import today_local
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import AuthService, Clock, EmployeeService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository

    employee_service: EmployeeService
    auth_service: AuthService


def build_container(*, db_config: Mapping, clock: Clock = today_local) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    employees_repo = MySQLEmployeeRepository(conn)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        employee_service=EmployeeService(employees_repo, clock=clock),
        auth_service=AuthService(employees_repo, clock=clock),
    )
