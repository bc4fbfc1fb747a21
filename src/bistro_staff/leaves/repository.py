from __future__ import annotations

from datetime import date
from typing import List, Optional, Protocol, Sequence

from ..common.datetime_utils import ranges_overlap
from ..core.enums import LeaveStatus
from ..storage.collection import StateCollection
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def get_by_id(self, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_requests(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[LeaveStatus] = None,
    ) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def count_approved(
        self,
        employee_id: str,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> int:
        """Approved requests of the employee overlapping [start, end] (all-time when unbounded)."""

        raise NotImplementedError

    def add(self, request: LeaveRequest) -> LeaveRequest:
        raise NotImplementedError

    def save(self, request: LeaveRequest) -> bool:
        raise NotImplementedError


class StateLeaveRepository(StateCollection[LeaveRequest]):
    attr = "leave_requests"
    id_field = "request_id"

    def list_requests(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[LeaveStatus] = None,
    ) -> List[LeaveRequest]:
        return self._filter(
            lambda r: (employee_id is None or r.employee_id == str(employee_id))
            and (status is None or r.status == status)
        )

    def count_approved(
        self,
        employee_id: str,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> int:
        lo = start or date.min
        hi = end or date.max
        return len(
            self._filter(
                lambda r: r.employee_id == str(employee_id)
                and r.status == LeaveStatus.APPROVED
                and ranges_overlap(r.start_date, r.end_date, lo, hi)
            )
        )
