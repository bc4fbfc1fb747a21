from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from ..core.enums import Role
from ..storage.collection import StateCollection
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Note: services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[Employee]:
        raise NotImplementedError

    def add(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def save(self, employee: Employee) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        raise NotImplementedError

    def get_session_user_id(self) -> Optional[str]:
        raise NotImplementedError

    def set_session_user_id(self, employee_id: Optional[str]) -> None:
        raise NotImplementedError


class StateEmployeeRepository(StateCollection[Employee]):
    attr = "employees"
    id_field = "employee_id"

    def get_by_email(self, email: str) -> Optional[Employee]:
        needle = (email or "").strip().lower()
        for e in self._items().values():
            if e.email.lower() == needle:
                return e
        return None

    def list_by_role(self, role: Role) -> List[Employee]:
        return self._filter(lambda e: e.role == role)

    def get_session_user_id(self) -> Optional[str]:
        return self._store.view().session_user_id

    def set_session_user_id(self, employee_id: Optional[str]) -> None:
        with self._store.transaction() as state:
            state.session_user_id = employee_id
