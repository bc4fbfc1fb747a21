from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...employees.model import Employee


@dataclass(frozen=True)
class PayBreakdown:
    regular_hours: float
    overtime_hours: float
    regular_pay: float
    overtime_pay: float
    bonus_pay: float
    deductions: float
    total_pay: float


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        employee: Employee,
        records: Sequence[AttendanceRecord],
        *,
        bonus_pay: float = 0.0,
    ) -> PayBreakdown:
        raise NotImplementedError
