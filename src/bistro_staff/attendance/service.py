from __future__ import annotations

import logging
import math
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Dict, List, Optional

from ..bonus import policy
from ..common.datetime_utils import format_timestamp, now_local, period_bounds
from ..common.ids import new_id
from ..common.validators import require_enum
from ..core.enums import AttendanceStatus, ReportPeriod, ShiftStatus
from ..core.results import TransitionOutcome, TransitionResult
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository
from ..shifts.model import Shift
from ..shifts.repository import ShiftRepository
from ..storage.store import StateStore
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, AttendanceReport
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_SHIFT_STATUS_FOR = {
    AttendanceStatus.PENDING: ShiftStatus.SCHEDULED,
    AttendanceStatus.STARTED: ShiftStatus.STARTED,
    AttendanceStatus.COMPLETED: ShiftStatus.COMPLETED,
    AttendanceStatus.ABSENT: ShiftStatus.MISSED,
}

_OPEN_STATES = {None, AttendanceStatus.PENDING, AttendanceStatus.ABSENT}


class AttendanceService:
    """Attendance engine: clock-in/out against scheduled shifts and the derived reports.

    Attendance records are the only place actual times are kept; a shift holds
    the schedule and mirrors the lifecycle in its ``status``.
    """

    def __init__(
        self,
        store: StateStore,
        attendance: AttendanceRepository,
        shifts: ShiftRepository,
        leaves: LeaveRepository,
        employees: EmployeeRepository,
        *,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
        grace_minutes: int = 0,
        clock: Callable[[], datetime] = now_local,
    ):
        self._store = store
        self._attendance = attendance
        self._shifts = shifts
        self._leaves = leaves
        self._employees = employees
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._grace_minutes = int(grace_minutes)
        self._clock = clock

    def _locate_shift(self, employee_id: str, work_date: date, shift_id: Optional[str]) -> Optional[Shift]:
        """The employee's shift to clock against; never someone else's.

        A running shift wins, so an end closes it and a second start reports it.
        Otherwise the first shift not yet worked is taken.
        """
        if shift_id:
            shift = self._shifts.get_by_id(shift_id)
            if shift and shift.employee_id != str(employee_id):
                logger.debug("shift %s does not belong to %s", shift_id, employee_id)
                return None
            return shift

        candidates = sorted(
            self._shifts.list_for_employee(employee_id, work_date=work_date),
            key=lambda s: s.start_time,
        )
        statuses = {}
        for shift in candidates:
            record = self._attendance.get_for_shift(shift.shift_id)
            statuses[shift.shift_id] = record.status if record else None

        for shift in candidates:
            if statuses[shift.shift_id] == AttendanceStatus.STARTED:
                return shift

        for shift in candidates:
            if statuses[shift.shift_id] in _OPEN_STATES:
                return shift
        return candidates[0] if candidates else None

    def _sync_shift(self, shift: Shift, status: AttendanceStatus) -> None:
        self._shifts.save(replace(shift, status=_SHIFT_STATUS_FOR[status]))

    def start_shift(
        self,
        employee_id: str,
        work_date: Optional[date] = None,
        notes: Optional[str] = None,
        *,
        shift_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> TransitionResult[AttendanceRecord]:
        now = now or self._clock()
        work_date = work_date or now.date()

        with self._store.transaction():
            shift = self._locate_shift(str(employee_id), work_date, shift_id)
            if not shift:
                logger.debug("start_shift: no shift for %s on %s", employee_id, work_date)
                return TransitionResult.noop(TransitionOutcome.NOT_FOUND)

            record = self._attendance.get_for_shift(shift.shift_id)
            if record and record.status == AttendanceStatus.STARTED:
                return TransitionResult.noop(TransitionOutcome.ALREADY_STARTED, record)
            if record and record.status == AttendanceStatus.COMPLETED:
                return TransitionResult.noop(TransitionOutcome.ALREADY_COMPLETED, record)

            strategy = self._factory.for_start(now=now, shift=shift, grace_minutes=self._grace_minutes)
            decision = strategy.decide_start(now=now, shift=shift, grace_minutes=self._grace_minutes)

            started = AttendanceRecord(
                attendance_id=record.attendance_id if record else new_id("att-"),
                employee_id=shift.employee_id,
                work_date=shift.date or work_date,
                status=AttendanceStatus.STARTED,
                shift_id=shift.shift_id,
                start_time=now,
                notes=notes or (record.notes if record else None),
                is_late=decision.is_late,
                late_minutes=decision.late_minutes,
            )
            if record:
                self._attendance.save(started)
            else:
                self._attendance.add(started)
            self._sync_shift(shift, AttendanceStatus.STARTED)

        logger.info(
            "shift %s started by %s (late=%s, %d min)",
            shift.shift_id, shift.employee_id, decision.is_late, decision.late_minutes,
        )
        return TransitionResult.ok(started)

    def end_shift(
        self,
        employee_id: str,
        work_date: Optional[date] = None,
        notes: Optional[str] = None,
        *,
        shift_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> TransitionResult[AttendanceRecord]:
        now = now or self._clock()
        work_date = work_date or now.date()

        with self._store.transaction():
            shift = self._locate_shift(str(employee_id), work_date, shift_id)
            if not shift:
                logger.debug("end_shift: no shift for %s on %s", employee_id, work_date)
                return TransitionResult.noop(TransitionOutcome.NOT_FOUND)

            record = self._attendance.get_for_shift(shift.shift_id)
            if record and record.status == AttendanceStatus.COMPLETED:
                return TransitionResult.noop(TransitionOutcome.ALREADY_COMPLETED, record)
            if not record or record.status != AttendanceStatus.STARTED:
                return TransitionResult.noop(TransitionOutcome.NOT_STARTED, record)

            strategy = self._factory.for_end(now=now, shift=shift)
            decision = strategy.decide_end(now=now, shift=shift)

            duration = None
            if record.start_time:
                duration = (now - record.start_time).total_seconds() / 3600

            completed = replace(
                record,
                status=AttendanceStatus.COMPLETED,
                end_time=now,
                duration=duration,
                overtime=decision.overtime_minutes,
                notes=notes or record.notes,
            )
            self._attendance.save(completed)
            self._sync_shift(shift, AttendanceStatus.COMPLETED)

        logger.info("shift %s completed by %s (overtime %d min)", shift.shift_id, shift.employee_id, completed.overtime)
        return TransitionResult.ok(completed)

    def shift_overlay(self, shift_id: str) -> Optional[Dict[str, object]]:
        """The actual-times view of one shift, as the schedule screens show it."""
        shift = self._shifts.get_by_id(shift_id)
        if not shift:
            return None
        record = self._attendance.get_for_shift(shift_id)
        data = shift.to_dict()
        data.update(
            {
                "actualStartTime": format_timestamp(record.start_time) if record else None,
                "actualEndTime": format_timestamp(record.end_time) if record else None,
                "actualStatus": record.status.value if record else None,
                "duration": record.duration if record else None,
            }
        )
        return data

    def get_attendance(self, employee_id: str, work_date: Optional[date] = None) -> Optional[AttendanceRecord]:
        work_date = work_date or self._clock().date()
        return self._attendance.get_for_employee_and_date(str(employee_id), work_date)

    def get_attendances_by_date(self, work_date: date) -> List[AttendanceRecord]:
        return list(self._attendance.list_for_date(work_date))

    def get_attendances_by_employee(self, employee_id: str) -> List[AttendanceRecord]:
        return list(self._attendance.list_for_employee(str(employee_id)))

    def get_current_shift(self, employee_id: str, work_date: Optional[date] = None) -> Optional[Shift]:
        """The employee's shift that is clocked in and not yet ended."""
        for record in self._attendance.list_for_employee(str(employee_id)):
            if record.status != AttendanceStatus.STARTED or not record.shift_id:
                continue
            if work_date is not None and record.work_date != work_date:
                continue
            shift = self._shifts.get_by_id(record.shift_id)
            if shift:
                return shift
        return None

    def mark_absent(
        self,
        employee_id: str,
        work_date: date,
        notes: Optional[str] = None,
    ) -> TransitionResult[AttendanceRecord]:
        employee_id = str(employee_id)
        with self._store.transaction():
            existing = self._attendance.get_for_employee_and_date(employee_id, work_date)
            if existing and existing.status == AttendanceStatus.COMPLETED:
                return TransitionResult.noop(TransitionOutcome.ALREADY_COMPLETED, existing)
            if existing and existing.status == AttendanceStatus.STARTED:
                return TransitionResult.noop(TransitionOutcome.ALREADY_STARTED, existing)

            shifts = self._shifts.list_for_employee(employee_id, work_date=work_date)
            for shift in shifts:
                self._sync_shift(shift, AttendanceStatus.ABSENT)

            if existing:
                record = replace(existing, status=AttendanceStatus.ABSENT, notes=notes or existing.notes)
                self._attendance.save(record)
            else:
                record = AttendanceRecord(
                    attendance_id=new_id("att-"),
                    employee_id=employee_id,
                    work_date=work_date,
                    status=AttendanceStatus.ABSENT,
                    shift_id=shifts[0].shift_id if shifts else None,
                    notes=notes,
                )
                self._attendance.add(record)

        logger.info("employee %s marked absent on %s", employee_id, work_date)
        return TransitionResult.ok(record)

    def update_attendance(self, record: AttendanceRecord) -> TransitionResult[AttendanceRecord]:
        """Admin override of a stored record; the linked shift follows its status."""
        with self._store.transaction():
            if not self._attendance.save(record):
                return TransitionResult.noop(TransitionOutcome.NOT_FOUND)
            shift = self._shifts.get_by_id(record.shift_id) if record.shift_id else None
            if shift:
                self._sync_shift(shift, record.status)
        return TransitionResult.ok(record)

    def get_attendance_report(
        self,
        employee_id: str,
        period: str = ReportPeriod.MONTH.value,
        *,
        today: Optional[date] = None,
    ) -> AttendanceReport:
        period = require_enum(ReportPeriod, period, "Period")
        today = today or self._clock().date()
        start, end = period_bounds(period.value, today)

        records = self._attendance.list_range(start=start, end=end, employee_id=str(employee_id))
        total = len(records)
        attended = sum(1 for r in records if r.status == AttendanceStatus.COMPLETED)
        missed = sum(1 for r in records if r.status == AttendanceStatus.ABSENT)
        total_hours = round(sum(r.duration or 0 for r in records), 2)
        rate = math.floor(attended * 100 / total + 0.5) if total else 0

        leaves_used = self._leaves.count_approved(str(employee_id), start=start, end=end)
        percentage = policy.bonus_percentage(leaves_used)
        employee = self._employees.get_by_id(str(employee_id))

        return AttendanceReport(
            employee_id=str(employee_id),
            period=period.value,
            total_shifts=total,
            attended_shifts=attended,
            missed_shifts=missed,
            total_hours=total_hours,
            attendance_rate=rate,
            leaves_used=leaves_used,
            total_overtime=sum(r.overtime for r in records),
            total_late=sum(1 for r in records if r.is_late),
            bonus_eligible=policy.is_eligible(leaves_used),
            bonus_amount=policy.bonus_amount(employee.hourly_rate if employee else None, percentage),
        )
