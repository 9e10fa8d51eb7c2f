from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_user_id(self, user_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self, *, role: Optional[Role] = None) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, employee: Employee) -> None:
        raise NotImplementedError

    def update(self, employee: Employee) -> bool:
        raise NotImplementedError

    def delete_by_user_id(self, user_id: str) -> bool:
        raise NotImplementedError
