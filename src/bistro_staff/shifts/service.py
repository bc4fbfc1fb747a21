from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import List, Optional

from ..common.datetime_utils import WEEKDAY_NAMES, format_hhmm, parse_hhmm, parse_iso_date
from ..common.ids import new_id
from ..common.validators import require_non_empty
from ..core.enums import NotificationType, ShiftStatus
from ..core.exceptions import ValidationError
from ..core.results import TransitionOutcome, TransitionResult
from ..notifications.service import NotificationService
from ..storage.store import StateStore
from .model import Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


def shifts_overlap(a: Shift, b: Shift) -> bool:
    wa, wb = a.window(), b.window()
    if not wa or not wb:
        return False
    return wa[0] < wb[1] and wb[0] < wa[1]


class ShiftService:
    """Shift register: scheduling CRUD plus the assignment notification."""

    def __init__(self, store: StateStore, shifts: ShiftRepository, notifications: NotificationService):
        self._store = store
        self._shifts = shifts
        self._notifications = notifications

    def get_shift(self, shift_id: str) -> Optional[Shift]:
        return self._shifts.get_by_id(shift_id)

    def get_shifts(self, date_filter: Optional[str] = None, employee_id: Optional[str] = None) -> List[Shift]:
        """Filter by exact ISO date, or by weekday name for free-text filters like "Monday"."""
        shifts = list(self._shifts.list_all())

        if date_filter:
            text = str(date_filter).strip()
            lowered = text.lower()
            day_names = [name.lower() for name in WEEKDAY_NAMES if name.lower() in lowered]
            if day_names:
                shifts = [
                    s for s in shifts
                    if (s.weekday or "").lower() in day_names or (s.date and s.date.isoformat() == text)
                ]
            else:
                wanted = parse_iso_date(text)
                shifts = [s for s in shifts if s.date == wanted]

        if employee_id:
            shifts = [s for s in shifts if s.employee_id == str(employee_id)]

        shifts.sort(key=lambda s: (s.date or date.min, s.start_time))
        return shifts

    def find_conflicts(self, candidate: Shift) -> List[Shift]:
        return [
            s for s in self._shifts.list_for_employee(candidate.employee_id)
            if s.shift_id != candidate.shift_id and shifts_overlap(s, candidate)
        ]

    def create_shift(
        self,
        *,
        employee_id: str,
        work_date: date,
        start_time: str,
        end_time: str,
        shift_type: str = "Morning",
        day: Optional[str] = None,
        shift_id: Optional[str] = None,
        allow_overlap: bool = False,
    ) -> TransitionResult[Shift]:
        if work_date is None:
            raise ValidationError("Date is required")
        shift = Shift(
            shift_id=shift_id or new_id("shift-"),
            employee_id=require_non_empty(str(employee_id or ""), "Employee"),
            date=work_date,
            start_time=parse_hhmm(start_time),
            end_time=parse_hhmm(end_time),
            shift_type=(shift_type or "").strip() or "Morning",
            day=day,
        )

        with self._store.transaction():
            if not allow_overlap:
                conflicts = self.find_conflicts(shift)
                if conflicts:
                    logger.debug("shift for %s on %s overlaps %s", employee_id, work_date, conflicts[0].shift_id)
                    return TransitionResult.noop(TransitionOutcome.CONFLICT, conflicts[0])

            self._shifts.add(shift)
            self._notifications.notify(
                user_id=shift.employee_id,
                title="Shift Assignment",
                message=(
                    f"You have been assigned a new shift on {shift.date.isoformat()} "
                    f"({format_hhmm(shift.start_time)} - {format_hhmm(shift.end_time)})."
                ),
                notification_type=NotificationType.SHIFT,
            )
        logger.info("shift %s created for employee %s", shift.shift_id, shift.employee_id)
        return TransitionResult.ok(shift)

    def update_shift(self, shift: Shift, *, allow_overlap: bool = True) -> TransitionResult[Shift]:
        with self._store.transaction():
            if not self._shifts.get_by_id(shift.shift_id):
                return TransitionResult.noop(TransitionOutcome.NOT_FOUND)
            if not allow_overlap:
                conflicts = self.find_conflicts(shift)
                if conflicts:
                    return TransitionResult.noop(TransitionOutcome.CONFLICT, conflicts[0])
            self._shifts.save(shift)
        return TransitionResult.ok(shift)

    def set_status(self, shift_id: str, status: ShiftStatus) -> TransitionResult[Shift]:
        shift = self._shifts.get_by_id(shift_id)
        if not shift:
            return TransitionResult.noop(TransitionOutcome.NOT_FOUND)
        updated = replace(shift, status=status)
        self._shifts.save(updated)
        return TransitionResult.ok(updated)

    def delete_shift(self, shift_id: str) -> TransitionResult[Shift]:
        shift = self._shifts.get_by_id(shift_id)
        if not shift:
            return TransitionResult.noop(TransitionOutcome.NOT_FOUND)
        self._shifts.delete(shift_id)
        logger.info("shift %s deleted", shift_id)
        return TransitionResult.ok(shift)
