from __future__ import annotations

from datetime import date
from typing import List, Optional, Protocol, Sequence

from ..storage.collection import StateCollection
from .model import Shift


class ShiftRepository(Protocol):
    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Shift]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str, *, work_date: Optional[date] = None) -> Sequence[Shift]:
        raise NotImplementedError

    def add(self, shift: Shift) -> Shift:
        raise NotImplementedError

    def save(self, shift: Shift) -> bool:
        raise NotImplementedError

    def delete(self, shift_id: str) -> bool:
        raise NotImplementedError

    def delete_for_employee_in_range(self, employee_id: str, start: date, end: date) -> Sequence[Shift]:
        """Remove the employee's shifts dated within [start, end] inclusive.

        Returns the removed shifts.
        """

        raise NotImplementedError


class StateShiftRepository(StateCollection[Shift]):
    attr = "shifts"
    id_field = "shift_id"

    def list_for_employee(self, employee_id: str, *, work_date: Optional[date] = None) -> List[Shift]:
        return self._filter(
            lambda s: s.employee_id == str(employee_id) and (work_date is None or s.date == work_date)
        )

    def delete_for_employee_in_range(self, employee_id: str, start: date, end: date) -> List[Shift]:
        with self._store.transaction() as state:
            doomed = [
                s for s in state.shifts.values()
                if s.employee_id == str(employee_id) and s.date is not None and start <= s.date <= end
            ]
            for s in doomed:
                del state.shifts[s.shift_id]
        return doomed
