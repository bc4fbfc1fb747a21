from __future__ import annotations

from datetime import date

import pytest

from bistro_staff.core.enums import Role
from bistro_staff.core.exceptions import ValidationError
from bistro_staff.core.results import TransitionOutcome


def test_directory_lists_everyone_and_staff(container):
    assert len(container.employee_service.get_employees()) == 4
    assert sorted(e.employee_id for e in container.employee_service.list_staff()) == ["2", "3", "4"]


def test_add_employee_uses_default_password(container):
    employee = container.employee_service.add_employee(name="Ana Ruiz", email="ana@bistro.com", job_type="Host")

    assert employee.hourly_rate == 15.0
    assert employee.profile_image == "/placeholder.svg"
    assert container.auth_service.login("ana@bistro.com", "employee123").employee_id == employee.employee_id


def test_add_employee_rejects_duplicate_email(container):
    with pytest.raises(ValidationError):
        container.employee_service.add_employee(name="X", email="sarah@bistro.com")


def test_update_employee_changes_rate_and_role(container):
    result = container.employee_service.update_employee("4", {"hourlyRate": "21.5", "role": "admin"})

    assert result.applied
    assert result.entity.hourly_rate == 21.5
    assert result.entity.role == Role.ADMIN


def test_update_employee_rejects_bad_values(container):
    with pytest.raises(ValidationError):
        container.employee_service.update_employee("4", {"role": "owner"})
    with pytest.raises(ValidationError):
        container.employee_service.update_employee("4", {"hourlyRate": "-3"})


def test_update_unknown_employee(container):
    assert container.employee_service.update_employee("99", {"name": "X"}).outcome == TransitionOutcome.NOT_FOUND


def test_update_profile_cannot_change_role_or_rate(container):
    result = container.employee_service.update_profile("2", {"name": "Jane S.", "role": "admin", "hourlyRate": 99})

    assert result.entity.name == "Jane S."
    assert result.entity.role == Role.EMPLOYEE
    assert result.entity.hourly_rate == 15.0


def test_update_profile_image(container):
    result = container.employee_service.update_profile_image("3", "/img/mike.png")

    assert result.entity.profile_image == "/img/mike.png"


def test_delete_employee_keeps_their_shifts(container):
    container.auth_service.login("sarah@bistro.com", "sarah123")

    result = container.employee_service.delete_employee("4")

    assert result.applied
    assert container.employee_service.get_employee("4") is None
    assert container.auth_service.current_user() is None
    assert [s.shift_id for s in container.shift_service.get_shifts(employee_id="4")] == ["shift-3"]
    assert container.attendance_service.get_attendance("4", date(2024, 3, 24)) is not None
    assert container.employee_service.delete_employee("4").outcome == TransitionOutcome.NOT_FOUND
