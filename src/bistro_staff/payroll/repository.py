from __future__ import annotations

from datetime import date
from typing import List, Optional, Protocol, Sequence

from ..storage.collection import StateCollection
from .model import PayrollItem


class PayrollRepository(Protocol):
    def get_by_id(self, payroll_id: str) -> Optional[PayrollItem]:
        raise NotImplementedError

    def list_for_period(self, period_start: date) -> Sequence[PayrollItem]:
        raise NotImplementedError

    def add(self, item: PayrollItem) -> PayrollItem:
        raise NotImplementedError

    def save(self, item: PayrollItem) -> bool:
        raise NotImplementedError

    def delete_many(self, payroll_ids) -> int:
        raise NotImplementedError


class StatePayrollRepository(StateCollection[PayrollItem]):
    attr = "payroll"
    id_field = "payroll_id"

    def list_for_period(self, period_start: date) -> List[PayrollItem]:
        return self._filter(lambda p: p.period_start == period_start)
