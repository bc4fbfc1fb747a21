from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from ..common.datetime_utils import format_timestamp, parse_iso_date, parse_timestamp
from ..core.enums import PayrollStatus


@dataclass(frozen=True)
class PayrollItem:
    payroll_id: str
    employee_id: str
    period_start: date
    period_end: date
    regular_hours: float
    overtime_hours: float
    regular_pay: float
    overtime_pay: float
    bonus_pay: float
    deductions: float
    total_pay: float
    status: PayrollStatus = PayrollStatus.DRAFT
    processed_date: Optional[datetime] = None
    paid_date: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.payroll_id,
            "employeeId": self.employee_id,
            "periodStart": self.period_start.isoformat(),
            "periodEnd": self.period_end.isoformat(),
            "regularHours": self.regular_hours,
            "overtimeHours": self.overtime_hours,
            "regularPay": self.regular_pay,
            "overtimePay": self.overtime_pay,
            "bonusPay": self.bonus_pay,
            "deductions": self.deductions,
            "totalPay": self.total_pay,
            "status": self.status.value,
            "processedDate": format_timestamp(self.processed_date),
            "paidDate": format_timestamp(self.paid_date),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PayrollItem":
        return cls(
            payroll_id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            period_start=parse_iso_date(data["periodStart"]),
            period_end=parse_iso_date(data["periodEnd"]),
            regular_hours=float(data.get("regularHours") or 0),
            overtime_hours=float(data.get("overtimeHours") or 0),
            regular_pay=float(data.get("regularPay") or 0),
            overtime_pay=float(data.get("overtimePay") or 0),
            bonus_pay=float(data.get("bonusPay") or 0),
            deductions=float(data.get("deductions") or 0),
            total_pay=float(data.get("totalPay") or 0),
            status=PayrollStatus(data.get("status") or PayrollStatus.DRAFT.value),
            processed_date=parse_timestamp(data.get("processedDate")),
            paid_date=parse_timestamp(data.get("paidDate")),
        )
