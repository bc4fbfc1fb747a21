from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, Callable, Dict, Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local, period_bounds
from ..common.validators import require_enum
from ..core.enums import AttendanceStatus, LeaveStatus, ReportPeriod, Role
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository


class ReportService:
    """Admin dashboard figures."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._employees = employees
        self._attendance = attendance
        self._leaves = leaves
        self._clock = clock

    def get_attendance_reports(self, period: str = ReportPeriod.MONTH.value, *, today: Optional[date] = None) -> Dict[str, Any]:
        period = require_enum(ReportPeriod, period, "Period")
        today = today or self._clock().date()
        start, end = period_bounds(period.value, today)

        todays = self._attendance.list_for_date(today)
        on_leave = {
            r.employee_id
            for r in self._leaves.list_requests(status=LeaveStatus.APPROVED)
            if r.covers(today)
        }

        records = self._attendance.list_range(start=start, end=end)
        completed = [r for r in records if r.status == AttendanceStatus.COMPLETED]
        rate = math.floor(len(completed) * 100 / len(records) + 0.5) if records else 0
        avg_hours = round(sum(r.duration or 0 for r in completed) / len(completed), 1) if completed else 0.0

        return {
            "period": period.value,
            "totalEmployees": len(self._employees.list_by_role(Role.EMPLOYEE)),
            "presentToday": sum(1 for r in todays if r.status in (AttendanceStatus.STARTED, AttendanceStatus.COMPLETED)),
            "absentToday": sum(1 for r in todays if r.status == AttendanceStatus.ABSENT),
            "onLeaveToday": len(on_leave),
            "attendanceRate": rate,
            "averageHoursWorked": avg_hours,
        }
