from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from werkzeug.security import generate_password_hash

from ..core.constants import DEFAULT_HOURLY_RATE, DEFAULT_PROFILE_IMAGE
from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee account.

    Note: a plain data object; persistence lives in the repository.
    """

    employee_id: str
    name: str
    email: str
    role: Role
    job_type: Optional[str] = None
    hourly_rate: float = DEFAULT_HOURLY_RATE
    profile_image: Optional[str] = DEFAULT_PROFILE_IMAGE
    password_hash: str = ""

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.employee_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "jobType": self.job_type,
            "hourlyRate": self.hourly_rate,
            "profileImage": self.profile_image,
            "passwordHash": self.password_hash,
        }

    def to_public_dict(self) -> Dict[str, Any]:
        data = self.to_dict()
        data.pop("passwordHash")
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Employee":
        password_hash = data.get("passwordHash") or ""
        if not password_hash and data.get("password"):
            # Legacy payloads stored the plaintext password.
            password_hash = generate_password_hash(str(data["password"]))
        return cls(
            employee_id=str(data["id"]),
            name=data.get("name", ""),
            email=data.get("email", ""),
            role=Role(data.get("role", Role.EMPLOYEE.value)),
            job_type=data.get("jobType"),
            hourly_rate=float(data.get("hourlyRate") or 0),
            profile_image=data.get("profileImage") or data.get("photoURL"),
            password_hash=password_hash,
        )
