from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Dict, List, Optional

from ..attendance.model import AttendanceReport
from ..attendance.service import AttendanceService
from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..core.enums import NotificationType, ReportPeriod, Role
from ..core.results import TransitionOutcome, TransitionResult
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository
from ..notifications.service import NotificationService
from ..storage.store import StateStore
from . import policy
from .model import BonusAward, BonusEligibility
from .repository import BonusRepository

logger = logging.getLogger(__name__)


class BonusService:
    """Bonus eligibility and awards, all driven by :mod:`policy`."""

    def __init__(
        self,
        store: StateStore,
        bonuses: BonusRepository,
        employees: EmployeeRepository,
        leaves: LeaveRepository,
        attendance: AttendanceService,
        notifications: NotificationService,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._store = store
        self._bonuses = bonuses
        self._employees = employees
        self._leaves = leaves
        self._attendance = attendance
        self._notifications = notifications
        self._clock = clock

    def calculate_bonus_eligibility(self, employee_id: str, year: Optional[int] = None) -> BonusEligibility:
        """``year=None`` counts approved leaves of all time."""
        if year is None:
            leaves = self._leaves.count_approved(str(employee_id))
        else:
            leaves = self._leaves.count_approved(
                str(employee_id), start=date(int(year), 1, 1), end=date(int(year), 12, 31)
            )
        return BonusEligibility(
            eligible=policy.is_eligible(leaves),
            bonus_percentage=policy.bonus_percentage(leaves),
            leaves_used=leaves,
        )

    def calculate_bonus_amount(self, report: AttendanceReport) -> float:
        employee = self._employees.get_by_id(report.employee_id)
        if not employee or not employee.hourly_rate:
            return 0.0
        return policy.bonus_amount(employee.hourly_rate, policy.bonus_percentage(report.leaves_used))

    def get_bonus_eligible_employees(
        self,
        year: Optional[int] = None,
        employee_id: Optional[str] = None,
    ) -> List[Dict[str, object]]:
        if employee_id:
            employee = self._employees.get_by_id(employee_id)
            candidates = [employee] if employee else []
        else:
            candidates = list(self._employees.list_by_role(Role.EMPLOYEE))

        today = self._clock().date()
        period = ReportPeriod.ALL.value
        if year is not None:
            today = date(int(year), 1, 1)
            period = ReportPeriod.YEAR.value

        return [
            {"employeeId": e.employee_id, "report": self._attendance.get_attendance_report(e.employee_id, period, today=today)}
            for e in candidates
        ]

    def apply_bonus(self, employee_id: str, year: int, amount: float) -> TransitionResult[BonusAward]:
        with self._store.transaction():
            employee = self._employees.get_by_id(employee_id)
            if not employee:
                return TransitionResult.noop(TransitionOutcome.NOT_FOUND)
            existing = self._bonuses.find(employee.employee_id, int(year))
            if existing:
                return TransitionResult.noop(TransitionOutcome.CONFLICT, existing)

            award = BonusAward(
                award_id=new_id("bonus-"),
                employee_id=employee.employee_id,
                year=int(year),
                amount=round(float(amount), 2),
                applied_date=self._clock(),
            )
            self._bonuses.add(award)
            self._notifications.notify(
                user_id=employee.employee_id,
                title="Bonus Awarded",
                message=f"A bonus of ${award.amount:.2f} for {award.year} will be added to your next payroll.",
                notification_type=NotificationType.PAYMENT,
            )

        logger.info("bonus %s applied for %s (%s, %.2f)", award.award_id, employee_id, year, award.amount)
        return TransitionResult.ok(award)

    def list_awards(self, employee_id: str) -> List[BonusAward]:
        return sorted(self._bonuses.list_for_employee(employee_id), key=lambda a: a.year)
