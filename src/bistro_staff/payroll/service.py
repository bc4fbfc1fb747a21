from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, List, Optional

from ..attendance.repository import AttendanceRepository
from ..bonus.repository import BonusRepository
from ..common.datetime_utils import month_bounds, now_local
from ..common.ids import new_id
from ..core.enums import NotificationType, PayrollStatus, Role
from ..core.results import TransitionOutcome, TransitionResult
from ..employees.repository import EmployeeRepository
from ..notifications.service import NotificationService
from ..storage.store import StateStore
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollItem
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


class PayrollService:
    """Monthly payroll: generate drafts, then draft -> processed -> paid."""

    def __init__(
        self,
        store: StateStore,
        payroll: PayrollRepository,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        bonuses: BonusRepository,
        notifications: NotificationService,
        *,
        calculator: Optional[PayrollCalculator] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._store = store
        self._payroll = payroll
        self._employees = employees
        self._attendance = attendance
        self._bonuses = bonuses
        self._notifications = notifications
        self._calculator = calculator or StandardPayrollCalculator()
        self._clock = clock

    def get_payroll(self, month: str) -> List[PayrollItem]:
        start, _ = month_bounds(month)
        return sorted(self._payroll.list_for_period(start), key=lambda p: p.employee_id)

    def get_payroll_item(self, payroll_id: str) -> Optional[PayrollItem]:
        return self._payroll.get_by_id(payroll_id)

    def generate_payroll(self, month: str) -> List[PayrollItem]:
        """Build draft items for the month, replacing earlier drafts of the same month.

        Processed and paid items are kept and their employees skipped.
        """
        start, end = month_bounds(month)

        with self._store.transaction():
            existing = self._payroll.list_for_period(start)
            finalized = {p.employee_id for p in existing if p.status != PayrollStatus.DRAFT}

            stale = [p for p in existing if p.status == PayrollStatus.DRAFT]
            for item in stale:
                for award in self._bonuses.list_for_payroll(item.payroll_id):
                    self._bonuses.save(replace(award, payroll_id=None))
            self._payroll.delete_many(p.payroll_id for p in stale)

            for employee in self._employees.list_by_role(Role.EMPLOYEE):
                if employee.employee_id in finalized:
                    continue

                records = self._attendance.list_range(start=start, end=end, employee_id=employee.employee_id)
                awards = list(self._bonuses.list_unallocated(employee.employee_id))
                breakdown = self._calculator.calculate(
                    employee, records, bonus_pay=sum(a.amount for a in awards)
                )

                item = PayrollItem(
                    payroll_id=new_id("pay-"),
                    employee_id=employee.employee_id,
                    period_start=start,
                    period_end=end,
                    regular_hours=breakdown.regular_hours,
                    overtime_hours=breakdown.overtime_hours,
                    regular_pay=breakdown.regular_pay,
                    overtime_pay=breakdown.overtime_pay,
                    bonus_pay=breakdown.bonus_pay,
                    deductions=breakdown.deductions,
                    total_pay=breakdown.total_pay,
                )
                self._payroll.add(item)
                for award in awards:
                    self._bonuses.save(replace(award, payroll_id=item.payroll_id))

        items = self.get_payroll(month)
        logger.info("payroll generated for %s..%s (%d items)", start, end, len(items))
        return items

    def process_payroll(self, payroll_id: str) -> TransitionResult[PayrollItem]:
        return self._advance(payroll_id, PayrollStatus.DRAFT, PayrollStatus.PROCESSED)

    def pay_payroll(self, payroll_id: str) -> TransitionResult[PayrollItem]:
        return self._advance(payroll_id, PayrollStatus.PROCESSED, PayrollStatus.PAID)

    def _advance(self, payroll_id: str, expected: PayrollStatus, target: PayrollStatus) -> TransitionResult[PayrollItem]:
        with self._store.transaction():
            item = self._payroll.get_by_id(payroll_id)
            if not item:
                return TransitionResult.noop(TransitionOutcome.NOT_FOUND)
            if item.status != expected:
                logger.debug("payroll %s is %s, cannot become %s", payroll_id, item.status.value, target.value)
                return TransitionResult.noop(TransitionOutcome.INVALID_STATE, item)

            now = self._clock()
            if target == PayrollStatus.PROCESSED:
                updated = replace(item, status=target, processed_date=now)
            else:
                updated = replace(item, status=target, paid_date=now)
                self._notifications.notify(
                    user_id=item.employee_id,
                    title="Payment Sent",
                    message=(
                        f"Your pay of ${item.total_pay:.2f} for {item.period_start.isoformat()} "
                        f"to {item.period_end.isoformat()} has been paid."
                    ),
                    notification_type=NotificationType.PAYMENT,
                )
            self._payroll.save(updated)

        logger.info("payroll %s -> %s", payroll_id, target.value)
        return TransitionResult.ok(updated)
