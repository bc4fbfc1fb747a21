from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Mapping

from .attendance.repository import StateAttendanceRepository
from .attendance.service import AttendanceService
from .bonus.repository import StateBonusRepository
from .bonus.service import BonusService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_DEDUCTION_RATE, DEFAULT_LATE_GRACE_MINUTES, DEFAULT_OVERTIME_MULTIPLIER
from .core.exceptions import ValidationError
from .employees.repository import StateEmployeeRepository
from .employees.service import AuthService, EmployeeService
from .leaves.repository import StateLeaveRepository
from .leaves.service import LeaveService
from .notes.repository import StateNoteRepository
from .notes.service import NoteService
from .notifications.repository import StateNotificationRepository
from .notifications.service import NotificationService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.repository import StatePayrollRepository
from .payroll.service import PayrollService
from .reports.service import ReportService
from .shifts.repository import StateShiftRepository
from .shifts.service import ShiftService
from .storage.backends import InMemoryBackend, JsonFileBackend, StateBackend
from .storage.store import StateStore


@dataclass(frozen=True)
class Container:
    store: StateStore

    employees_repo: StateEmployeeRepository
    shifts_repo: StateShiftRepository
    attendance_repo: StateAttendanceRepository
    leaves_repo: StateLeaveRepository
    notifications_repo: StateNotificationRepository
    notes_repo: StateNoteRepository
    payroll_repo: StatePayrollRepository
    bonus_repo: StateBonusRepository

    auth_service: AuthService
    employee_service: EmployeeService
    notification_service: NotificationService
    note_service: NoteService
    shift_service: ShiftService
    attendance_service: AttendanceService
    leave_service: LeaveService
    bonus_service: BonusService
    payroll_service: PayrollService
    report_service: ReportService


def build_backend(settings: Mapping[str, Any]) -> StateBackend:
    kind = str(settings.get("STORAGE_BACKEND", "memory")).lower()
    if kind == "memory":
        return InMemoryBackend()
    if kind == "json":
        return JsonFileBackend(settings["STATE_FILE"])
    if kind == "mysql":
        from .storage.connection import DBConfig, DatabaseConnection
        from .storage.mysql_backend import MySQLStateBackend

        conn = DatabaseConnection.get_instance(DBConfig.from_dict(settings["DB_CONFIG"]))
        return MySQLStateBackend(conn)
    raise ValidationError(f"Unknown storage backend: {kind!r}")


def build_container(
    *,
    store: StateStore,
    settings: Mapping[str, Any] | None = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    settings = settings or {}

    employees_repo = StateEmployeeRepository(store)
    shifts_repo = StateShiftRepository(store)
    attendance_repo = StateAttendanceRepository(store)
    leaves_repo = StateLeaveRepository(store)
    notifications_repo = StateNotificationRepository(store)
    notes_repo = StateNoteRepository(store)
    payroll_repo = StatePayrollRepository(store)
    bonus_repo = StateBonusRepository(store)

    notification_service = NotificationService(store, notifications_repo, clock=clock)
    attendance_service = AttendanceService(
        store,
        attendance_repo,
        shifts_repo,
        leaves_repo,
        employees_repo,
        grace_minutes=int(settings.get("LATE_GRACE_MINUTES", DEFAULT_LATE_GRACE_MINUTES)),
        clock=clock,
    )
    calculator = StandardPayrollCalculator(
        overtime_multiplier=float(settings.get("OVERTIME_MULTIPLIER", DEFAULT_OVERTIME_MULTIPLIER)),
        deduction_rate=float(settings.get("DEDUCTION_RATE", DEFAULT_DEDUCTION_RATE)),
    )

    return Container(
        store=store,
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        notifications_repo=notifications_repo,
        notes_repo=notes_repo,
        payroll_repo=payroll_repo,
        bonus_repo=bonus_repo,
        auth_service=AuthService(employees_repo),
        employee_service=EmployeeService(employees_repo),
        notification_service=notification_service,
        note_service=NoteService(notes_repo, clock=clock),
        shift_service=ShiftService(store, shifts_repo, notification_service),
        attendance_service=attendance_service,
        leave_service=LeaveService(store, leaves_repo, shifts_repo, notification_service, clock=clock),
        bonus_service=BonusService(
            store, bonus_repo, employees_repo, leaves_repo, attendance_service, notification_service, clock=clock
        ),
        payroll_service=PayrollService(
            store,
            payroll_repo,
            employees_repo,
            attendance_repo,
            bonus_repo,
            notification_service,
            calculator=calculator,
            clock=clock,
        ),
        report_service=ReportService(employees_repo, attendance_repo, leaves_repo, clock=clock),
    )
