from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..common.datetime_utils import format_timestamp, parse_timestamp


@dataclass(frozen=True)
class BonusEligibility:
    eligible: bool
    bonus_percentage: int
    leaves_used: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "eligible": self.eligible,
            "bonusPercentage": self.bonus_percentage,
            "leavesUsed": self.leaves_used,
        }


@dataclass(frozen=True)
class BonusAward:
    """A bonus granted for a year; rolled into the next generated payroll."""

    award_id: str
    employee_id: str
    year: int
    amount: float
    applied_date: datetime
    payroll_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.award_id,
            "employeeId": self.employee_id,
            "year": self.year,
            "amount": self.amount,
            "appliedDate": format_timestamp(self.applied_date),
            "payrollId": self.payroll_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BonusAward":
        return cls(
            award_id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            year=int(data["year"]),
            amount=float(data.get("amount") or 0),
            applied_date=parse_timestamp(data["appliedDate"]),
            payroll_id=data.get("payrollId"),
        )
