from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Dict, Optional, Tuple

from ..common.datetime_utils import format_hhmm, parse_hhmm, parse_iso_date, shift_window, weekday_name
from ..core.enums import ShiftStatus


@dataclass(frozen=True)
class Shift:
    """Domain entity: a scheduled block of work for one employee."""

    shift_id: str
    employee_id: str
    date: Optional[date]
    start_time: time
    end_time: time
    shift_type: str = "Morning"
    day: Optional[str] = None
    status: ShiftStatus = ShiftStatus.SCHEDULED

    @property
    def weekday(self) -> Optional[str]:
        if self.day:
            return self.day
        return weekday_name(self.date) if self.date else None

    def window(self) -> Optional[Tuple[datetime, datetime]]:
        if not self.date:
            return None
        return shift_window(self.date, self.start_time, self.end_time)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.shift_id,
            "employeeId": self.employee_id,
            "day": self.weekday,
            "date": self.date.isoformat() if self.date else None,
            "startTime": format_hhmm(self.start_time),
            "endTime": format_hhmm(self.end_time),
            "type": self.shift_type,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Shift":
        return cls(
            shift_id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            date=parse_iso_date(data["date"]) if data.get("date") else None,
            start_time=parse_hhmm(data["startTime"]),
            end_time=parse_hhmm(data["endTime"]),
            shift_type=data.get("type") or "Morning",
            day=data.get("day"),
            status=ShiftStatus(data.get("status") or ShiftStatus.SCHEDULED.value),
        )
