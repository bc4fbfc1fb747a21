from __future__ import annotations

from datetime import date
from typing import List, Optional, Protocol, Sequence

from ..storage.collection import StateCollection
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_shift(self, shift_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_range(
        self,
        *,
        start: Optional[date],
        end: Optional[date],
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records dated within [start, end]; a missing bound is open."""

        raise NotImplementedError

    def add(self, record: AttendanceRecord) -> AttendanceRecord:
        raise NotImplementedError

    def save(self, record: AttendanceRecord) -> bool:
        raise NotImplementedError


class StateAttendanceRepository(StateCollection[AttendanceRecord]):
    attr = "attendance"
    id_field = "attendance_id"

    def get_for_shift(self, shift_id: str) -> Optional[AttendanceRecord]:
        for r in self._items().values():
            if r.shift_id == str(shift_id):
                return r
        return None

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        for r in self._items().values():
            if r.employee_id == str(employee_id) and r.work_date == work_date:
                return r
        return None

    def list_for_employee(self, employee_id: str) -> List[AttendanceRecord]:
        return sorted(self._filter(lambda r: r.employee_id == str(employee_id)), key=lambda r: r.work_date)

    def list_for_date(self, work_date: date) -> List[AttendanceRecord]:
        return self._filter(lambda r: r.work_date == work_date)

    def list_range(
        self,
        *,
        start: Optional[date],
        end: Optional[date],
        employee_id: Optional[str] = None,
    ) -> List[AttendanceRecord]:
        def keep(r: AttendanceRecord) -> bool:
            if employee_id is not None and r.employee_id != str(employee_id):
                return False
            if start is not None and r.work_date < start:
                return False
            if end is not None and r.work_date > end:
                return False
            return True

        return sorted(self._filter(keep), key=lambda r: r.work_date)
