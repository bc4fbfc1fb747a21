from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from ..common.datetime_utils import format_timestamp, parse_iso_date, parse_timestamp
from ..core.enums import AttendanceStatus

# Statuses written by older data sets.
_LEGACY_STATUS = {"present": AttendanceStatus.COMPLETED}


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: actual clock-in/out against a day (and usually a shift).

    ``duration`` is in hours, ``overtime`` and ``late_minutes`` in minutes.
    """

    attendance_id: str
    employee_id: str
    work_date: date
    status: AttendanceStatus
    shift_id: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration: Optional[float] = None
    notes: Optional[str] = None
    is_late: bool = False
    late_minutes: int = 0
    overtime: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.attendance_id,
            "employeeId": self.employee_id,
            "shiftId": self.shift_id,
            "date": self.work_date.isoformat(),
            "startTime": format_timestamp(self.start_time),
            "endTime": format_timestamp(self.end_time),
            "duration": self.duration,
            "status": self.status.value,
            "notes": self.notes,
            "isLate": self.is_late,
            "lateMinutes": self.late_minutes,
            "overtime": self.overtime,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AttendanceRecord":
        work_date = parse_iso_date(data["date"])
        raw_status = data.get("status") or AttendanceStatus.PENDING.value
        status = _LEGACY_STATUS.get(raw_status) or AttendanceStatus(raw_status)

        start = _legacy_time(work_date, data.get("startTime") or data.get("checkIn"))
        end = _legacy_time(work_date, data.get("endTime") or data.get("checkOut"))
        duration = data.get("duration")
        if duration is None:
            duration = data.get("hoursWorked")

        return cls(
            attendance_id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            work_date=work_date,
            status=status,
            shift_id=data.get("shiftId"),
            start_time=start,
            end_time=end,
            duration=float(duration) if duration is not None else None,
            notes=data.get("notes"),
            is_late=bool(data.get("isLate", False)),
            late_minutes=int(data.get("lateMinutes") or 0),
            overtime=int(data.get("overtime") or 0),
        )


def _legacy_time(work_date: date, value: Optional[str]) -> Optional[datetime]:
    # Older rows only carry "HH:MM" for the work day.
    if value and len(str(value)) <= 5:
        hh, mm = str(value).split(":")
        return datetime(work_date.year, work_date.month, work_date.day, int(hh), int(mm))
    return parse_timestamp(value)


@dataclass(frozen=True)
class AttendanceReport:
    """Read-model: per-employee attendance aggregate for a period."""

    employee_id: str
    period: str
    total_shifts: int
    attended_shifts: int
    missed_shifts: int
    total_hours: float
    attendance_rate: int
    leaves_used: int
    total_overtime: int = 0
    total_late: int = 0
    bonus_eligible: bool = False
    bonus_amount: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "employeeId": self.employee_id,
            "period": self.period,
            "totalShifts": self.total_shifts,
            "attendedShifts": self.attended_shifts,
            "missedShifts": self.missed_shifts,
            "totalHours": self.total_hours,
            "attendanceRate": self.attendance_rate,
            "leavesUsed": self.leaves_used,
            "totalOvertime": self.total_overtime,
            "totalLate": self.total_late,
            "bonusEligible": self.bonus_eligible,
            "bonusAmount": self.bonus_amount,
        }
