from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..attendance.model import AttendanceRecord
from ..bonus.model import BonusAward
from ..employees.model import Employee
from ..leaves.model import LeaveRequest
from ..notes.model import Note
from ..notifications.model import Notification
from ..payroll.model import PayrollItem
from ..shifts.model import Shift

# attribute name, persisted key, entity type, id field
COLLECTIONS = (
    ("employees", "employees", Employee, "employee_id"),
    ("shifts", "shifts", Shift, "shift_id"),
    ("attendance", "attendance", AttendanceRecord, "attendance_id"),
    ("leave_requests", "leaveRequests", LeaveRequest, "request_id"),
    ("notifications", "notifications", Notification, "notification_id"),
    ("notes", "notes", Note, "note_id"),
    ("payroll", "payroll", PayrollItem, "payroll_id"),
    ("bonuses", "bonuses", BonusAward, "award_id"),
)
SESSION_KEY = "user"


@dataclass
class AppState:
    """Whole application state: one insertion-ordered dict per entity, keyed by id.

    Entities are frozen, so a copy only needs new dicts.
    """

    employees: Dict[str, Employee] = field(default_factory=dict)
    shifts: Dict[str, Shift] = field(default_factory=dict)
    attendance: Dict[str, AttendanceRecord] = field(default_factory=dict)
    leave_requests: Dict[str, LeaveRequest] = field(default_factory=dict)
    notifications: Dict[str, Notification] = field(default_factory=dict)
    notes: Dict[str, Note] = field(default_factory=dict)
    payroll: Dict[str, PayrollItem] = field(default_factory=dict)
    bonuses: Dict[str, BonusAward] = field(default_factory=dict)
    session_user_id: Optional[str] = None

    def copy(self) -> "AppState":
        clone = AppState(session_user_id=self.session_user_id)
        for attr, _, _, _ in COLLECTIONS:
            setattr(clone, attr, dict(getattr(self, attr)))
        return clone

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for attr, key, _, _ in COLLECTIONS:
            payload[key] = [e.to_dict() for e in getattr(self, attr).values()]

        user = self.employees.get(self.session_user_id) if self.session_user_id else None
        payload[SESSION_KEY] = user.to_public_dict() if user else None
        return payload

    @classmethod
    def from_payload(cls, payload: Optional[Dict[str, Any]]) -> "AppState":
        payload = payload or {}
        state = cls()
        for attr, key, entity_cls, id_field in COLLECTIONS:
            rows = payload.get(key) or []
            entities = (entity_cls.from_dict(r) for r in rows)
            setattr(state, attr, {getattr(e, id_field): e for e in entities})

        user = payload.get(SESSION_KEY)
        if user and str(user.get("id")) in state.employees:
            state.session_user_id = str(user["id"])
        return state
