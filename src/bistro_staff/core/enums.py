from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access checks."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class ShiftStatus(str, Enum):
    """Lifecycle of a scheduled shift."""

    SCHEDULED = "scheduled"
    STARTED = "started"
    COMPLETED = "completed"
    MISSED = "missed"


class AttendanceStatus(str, Enum):
    """Clock-in/out state of an attendance record."""

    PENDING = "pending"
    STARTED = "started"
    COMPLETED = "completed"
    ABSENT = "absent"


class LeaveType(str, Enum):
    SICK = "sick"
    VACATION = "vacation"
    PERSONAL = "personal"
    OTHER = "other"


class LeaveStatus(str, Enum):
    """Leave approval flow; APPROVED and REJECTED are terminal."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class NotificationType(str, Enum):
    SHIFT = "shift"
    OVERTIME = "overtime"
    PAYMENT = "payment"
    MESSAGE = "message"
    GENERAL = "general"


class PayrollStatus(str, Enum):
    DRAFT = "draft"
    PROCESSED = "processed"
    PAID = "paid"


class ReportPeriod(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"
