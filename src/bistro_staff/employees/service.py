from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.ids import new_id
from ..common.validators import (
    require_email,
    require_enum,
    require_min_length,
    require_non_empty,
    require_non_negative_number,
)
from ..core.constants import (
    DEFAULT_EMPLOYEE_PASSWORD,
    DEFAULT_HOURLY_RATE,
    DEFAULT_PROFILE_IMAGE,
    MIN_PASSWORD_LENGTH,
)
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..core.results import TransitionOutcome, TransitionResult
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

EMAIL_IN_USE = "Email already in use"
INVALID_CREDENTIALS = "Invalid credentials"

# Fields an admin or the employee may change through a profile edit.
_EDITABLE_FIELDS = {
    "name": "name",
    "jobType": "job_type",
    "job_type": "job_type",
    "hourlyRate": "hourly_rate",
    "hourly_rate": "hourly_rate",
    "profileImage": "profile_image",
    "profile_image": "profile_image",
    "role": "role",
}


def _verify(password_hash: str, password: str) -> bool:
    try:
        return check_password_hash(password_hash, password)
    except (TypeError, ValueError):
        # e.g. an empty or corrupted hash
        return False


class AuthService:
    """Use case: authenticate, sign up and manage the logged-in session."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def login(self, email: str, password: str) -> Employee:
        employee = self._employees.get_by_email(email)
        if not employee or not _verify(employee.password_hash, password):
            logger.info("login failed for %s", email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        self._employees.set_session_user_id(employee.employee_id)
        logger.info("employee %s logged in", employee.employee_id)
        return employee

    def logout(self) -> None:
        self._employees.set_session_user_id(None)

    def current_user(self) -> Optional[Employee]:
        employee_id = self._employees.get_session_user_id()
        return self._employees.get_by_id(employee_id) if employee_id else None

    def signup(self, name: str, email: str, password: str, job_type: str) -> Employee:
        name = require_non_empty(name, "Name")
        email = require_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._employees.get_by_email(email):
            raise ValidationError(EMAIL_IN_USE)

        employee = Employee(
            employee_id=new_id(),
            name=name,
            email=email,
            role=Role.EMPLOYEE,
            job_type=(job_type or "").strip() or None,
            hourly_rate=DEFAULT_HOURLY_RATE,
            password_hash=generate_password_hash(password),
        )
        self._employees.add(employee)
        self._employees.set_session_user_id(employee.employee_id)
        logger.info("employee %s signed up", employee.employee_id)
        return employee

    def update_password(self, employee_id: str, old_password: str, new_password: str) -> bool:
        employee = self._require(employee_id)
        if not _verify(employee.password_hash, old_password):
            raise AuthenticationError(INVALID_CREDENTIALS)
        require_min_length(new_password, "Password", MIN_PASSWORD_LENGTH)

        return self._employees.save(replace(employee, password_hash=generate_password_hash(new_password)))

    def update_email(self, employee_id: str, new_email: str, password: str) -> Employee:
        employee = self._require(employee_id)
        new_email = require_email(new_email)

        other = self._employees.get_by_email(new_email)
        if other and other.employee_id != employee.employee_id:
            raise ValidationError(EMAIL_IN_USE)
        if not _verify(employee.password_hash, password):
            raise AuthenticationError(INVALID_CREDENTIALS)

        updated = replace(employee, email=new_email)
        self._employees.save(updated)
        return updated

    def _require(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee


class EmployeeService:
    """Use case: manage the employee directory (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get_employees(self) -> List[Employee]:
        return list(self._employees.list_all())

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get_by_id(employee_id)

    def list_staff(self) -> List[Employee]:
        return list(self._employees.list_by_role(Role.EMPLOYEE))

    def add_employee(
        self,
        *,
        name: str,
        email: str,
        role: Role = Role.EMPLOYEE,
        job_type: Optional[str] = None,
        hourly_rate: Optional[float] = None,
        profile_image: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Employee:
        name = require_non_empty(name, "Name")
        email = require_email(email)
        if self._employees.get_by_email(email):
            raise ValidationError(EMAIL_IN_USE)

        employee = Employee(
            employee_id=new_id(),
            name=name,
            email=email,
            role=require_enum(Role, role, "Role"),
            job_type=job_type,
            hourly_rate=(
                require_non_negative_number(hourly_rate, "Hourly rate") if hourly_rate is not None else DEFAULT_HOURLY_RATE
            ),
            profile_image=profile_image or DEFAULT_PROFILE_IMAGE,
            password_hash=generate_password_hash(password or DEFAULT_EMPLOYEE_PASSWORD),
        )
        self._employees.add(employee)
        logger.info("employee %s added", employee.employee_id)
        return employee

    def update_employee(self, employee_id: str, data: Dict[str, Any]) -> TransitionResult[Employee]:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            return TransitionResult.noop(TransitionOutcome.NOT_FOUND)

        changes: Dict[str, Any] = {}
        for key, value in data.items():
            field_name = _EDITABLE_FIELDS.get(key)
            if field_name is None:
                continue
            if field_name == "role":
                value = require_enum(Role, value, "Role")
            elif field_name == "hourly_rate":
                value = require_non_negative_number(value, "Hourly rate")
            changes[field_name] = value

        email = data.get("email")
        if email is not None:
            email = require_email(email)
            other = self._employees.get_by_email(email)
            if other and other.employee_id != employee.employee_id:
                raise ValidationError(EMAIL_IN_USE)
            changes["email"] = email

        updated = replace(employee, **changes)
        self._employees.save(updated)
        return TransitionResult.ok(updated)

    def update_profile(self, employee_id: str, data: Dict[str, Any]) -> TransitionResult[Employee]:
        # Employees may not change their own role or rate.
        allowed = {k: v for k, v in data.items() if _EDITABLE_FIELDS.get(k) not in {"role", "hourly_rate"}}
        return self.update_employee(employee_id, allowed)

    def update_profile_image(self, employee_id: str, image: str) -> TransitionResult[Employee]:
        return self.update_employee(employee_id, {"profileImage": image})

    def delete_employee(self, employee_id: str) -> TransitionResult[Employee]:
        """Remove the record only; shifts, leaves and attendance keep their reference."""
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            return TransitionResult.noop(TransitionOutcome.NOT_FOUND)

        self._employees.delete(employee_id)
        if self._employees.get_session_user_id() == employee.employee_id:
            self._employees.set_session_user_id(None)
        logger.info("employee %s deleted", employee_id)
        return TransitionResult.ok(employee)
