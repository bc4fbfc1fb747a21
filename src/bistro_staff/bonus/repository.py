from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from ..storage.collection import StateCollection
from .model import BonusAward


class BonusRepository(Protocol):
    def find(self, employee_id: str, year: int) -> Optional[BonusAward]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[BonusAward]:
        raise NotImplementedError

    def list_unallocated(self, employee_id: str) -> Sequence[BonusAward]:
        """Awards not yet paid through a payroll item."""

        raise NotImplementedError

    def list_for_payroll(self, payroll_id: str) -> Sequence[BonusAward]:
        raise NotImplementedError

    def add(self, award: BonusAward) -> BonusAward:
        raise NotImplementedError

    def save(self, award: BonusAward) -> bool:
        raise NotImplementedError


class StateBonusRepository(StateCollection[BonusAward]):
    attr = "bonuses"
    id_field = "award_id"

    def find(self, employee_id: str, year: int) -> Optional[BonusAward]:
        for a in self._items().values():
            if a.employee_id == str(employee_id) and a.year == int(year):
                return a
        return None

    def list_for_employee(self, employee_id: str) -> List[BonusAward]:
        return self._filter(lambda a: a.employee_id == str(employee_id))

    def list_unallocated(self, employee_id: str) -> List[BonusAward]:
        return self._filter(lambda a: a.employee_id == str(employee_id) and a.payroll_id is None)

    def list_for_payroll(self, payroll_id: str) -> List[BonusAward]:
        return self._filter(lambda a: a.payroll_id == str(payroll_id))
