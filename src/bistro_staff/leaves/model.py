from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from ..common.datetime_utils import format_timestamp, parse_iso_date, parse_timestamp
from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    employee_id: str
    start_date: date
    end_date: date
    leave_type: LeaveType
    reason: str
    status: LeaveStatus
    request_date: datetime
    response_date: Optional[datetime] = None
    response_note: Optional[str] = None

    @property
    def is_decided(self) -> bool:
        return self.status != LeaveStatus.PENDING

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.request_id,
            "employeeId": self.employee_id,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "type": self.leave_type.value,
            "reason": self.reason,
            "status": self.status.value,
            "requestDate": format_timestamp(self.request_date),
            "responseDate": format_timestamp(self.response_date),
            "responseNote": self.response_note,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeaveRequest":
        return cls(
            request_id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            start_date=parse_iso_date(data["startDate"]),
            end_date=parse_iso_date(data["endDate"]),
            leave_type=LeaveType(data.get("type") or LeaveType.OTHER.value),
            reason=data.get("reason") or "",
            status=LeaveStatus(data.get("status") or LeaveStatus.PENDING.value),
            request_date=parse_timestamp(data["requestDate"]),
            response_date=parse_timestamp(data.get("responseDate")),
            response_note=data.get("responseNote"),
        )
