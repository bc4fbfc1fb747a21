from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, List, Optional

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import require_enum, require_non_empty
from ..core.enums import LeaveStatus, LeaveType, NotificationType
from ..core.results import TransitionOutcome, TransitionResult
from ..notifications.service import NotificationService
from ..shifts.repository import ShiftRepository
from ..storage.store import StateStore
from .model import LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    """Leave engine: PENDING -> APPROVED | REJECTED, both terminal.

    Approval cancels the employee's shifts inside the leave and notifies the
    employee in one transaction.
    """

    def __init__(
        self,
        store: StateStore,
        leaves: LeaveRepository,
        shifts: ShiftRepository,
        notifications: NotificationService,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._store = store
        self._leaves = leaves
        self._shifts = shifts
        self._notifications = notifications
        self._clock = clock

    def request_leave(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
        leave_type: str | LeaveType = LeaveType.OTHER,
        reason: str = "",
    ) -> TransitionResult[LeaveRequest]:
        employee_id = require_non_empty(str(employee_id or ""), "Employee")
        leave_type = require_enum(LeaveType, leave_type, "Leave type")
        if end_date < start_date:
            return TransitionResult.noop(TransitionOutcome.INVALID_DATE_RANGE)

        leave = LeaveRequest(
            request_id=new_id("leave-"),
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            leave_type=leave_type,
            reason=(reason or "").strip(),
            status=LeaveStatus.PENDING,
            request_date=self._clock(),
        )
        self._leaves.add(leave)
        logger.info("leave %s requested by %s (%s..%s)", leave.request_id, employee_id, start_date, end_date)
        return TransitionResult.ok(leave)

    def approve_leave(self, request_id: str, note: Optional[str] = None) -> TransitionResult[LeaveRequest]:
        return self._decide(request_id, LeaveStatus.APPROVED, note)

    def reject_leave(self, request_id: str, note: Optional[str] = None) -> TransitionResult[LeaveRequest]:
        return self._decide(request_id, LeaveStatus.REJECTED, note)

    def _decide(self, request_id: str, status: LeaveStatus, note: Optional[str]) -> TransitionResult[LeaveRequest]:
        note = (note or "").strip() or None

        with self._store.transaction():
            leave = self._leaves.get_by_id(request_id)
            if not leave:
                return TransitionResult.noop(TransitionOutcome.NOT_FOUND)
            if leave.is_decided:
                logger.debug("leave %s already %s", request_id, leave.status.value)
                return TransitionResult.noop(TransitionOutcome.ALREADY_DECIDED, leave)

            decided = replace(leave, status=status, response_date=self._clock(), response_note=note)
            self._leaves.save(decided)

            removed = []
            if status == LeaveStatus.APPROVED:
                removed = self._shifts.delete_for_employee_in_range(
                    decided.employee_id, decided.start_date, decided.end_date
                )

            verb = "approved" if status == LeaveStatus.APPROVED else "rejected"
            message = (
                f"Your leave request ({decided.start_date.isoformat()} to {decided.end_date.isoformat()}) was {verb}."
            )
            if note:
                message += f" Reply: {note}"
            self._notifications.notify(
                user_id=decided.employee_id,
                title=f"Leave {verb.capitalize()}",
                message=message,
                notification_type=NotificationType.MESSAGE,
            )

        logger.info("leave %s %s (%d shifts removed)", request_id, verb, len(removed))
        return TransitionResult.ok(decided)

    def get_leave_requests(
        self,
        employee_id: Optional[str] = None,
        status: Optional[str | LeaveStatus] = None,
    ) -> List[LeaveRequest]:
        status = require_enum(LeaveStatus, status, "Status") if status else None
        items = list(self._leaves.list_requests(employee_id=employee_id, status=status))
        items.sort(key=lambda r: r.request_date, reverse=True)
        return items

    def get_leave_request(self, request_id: str) -> Optional[LeaveRequest]:
        return self._leaves.get_by_id(request_id)
