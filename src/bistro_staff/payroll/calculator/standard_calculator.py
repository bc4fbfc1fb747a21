from __future__ import annotations

from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...core.constants import DEFAULT_DEDUCTION_RATE, DEFAULT_OVERTIME_MULTIPLIER
from ...core.enums import AttendanceStatus
from ...employees.model import Employee
from .base import PayBreakdown, PayrollCalculator


def _money(value: float) -> float:
    return round(value, 2)


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: completed hours at the hourly rate, overtime at a multiplier.

    Overtime hours are part of the worked duration, so regular hours are the
    remainder (not below 0). Deductions are a flat share of gross pay.
    """

    def __init__(
        self,
        *,
        overtime_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER,
        deduction_rate: float = DEFAULT_DEDUCTION_RATE,
    ):
        self._overtime_multiplier = float(overtime_multiplier)
        self._deduction_rate = float(deduction_rate)

    def calculate(
        self,
        employee: Employee,
        records: Sequence[AttendanceRecord],
        *,
        bonus_pay: float = 0.0,
    ) -> PayBreakdown:
        completed = [r for r in records if r.status == AttendanceStatus.COMPLETED]
        total_hours = sum(r.duration or 0 for r in completed)
        overtime_hours = sum(r.overtime for r in completed) / 60
        regular_hours = max(total_hours - overtime_hours, 0.0)

        rate = float(employee.hourly_rate or 0)
        regular_pay = regular_hours * rate
        overtime_pay = overtime_hours * rate * self._overtime_multiplier
        gross = regular_pay + overtime_pay + bonus_pay
        deductions = gross * self._deduction_rate

        return PayBreakdown(
            regular_hours=round(regular_hours, 2),
            overtime_hours=round(overtime_hours, 2),
            regular_pay=_money(regular_pay),
            overtime_pay=_money(overtime_pay),
            bonus_pay=_money(bonus_pay),
            deductions=_money(deductions),
            total_pay=_money(gross - deductions),
        )
