from __future__ import annotations

from datetime import date, time

import pytest

from bistro_staff.core.enums import NotificationType, ShiftStatus
from bistro_staff.core.exceptions import ValidationError
from bistro_staff.core.results import TransitionOutcome


def test_get_shifts_matches_exact_date(container):
    assert [s.shift_id for s in container.shift_service.get_shifts("2024-03-25")] == ["shift-1", "shift-2", "shift-3"]
    assert container.shift_service.get_shifts("2024-03-26") == []


def test_get_shifts_accepts_weekday_text(container):
    shifts = container.shift_service.get_shifts("Monday, March 25")

    assert len(shifts) == 3


def test_get_shifts_weekday_text_ignores_case(container):
    assert len(container.shift_service.get_shifts("monday")) == 3
    assert len(container.shift_service.get_shifts("MONDAY")) == 3
    assert container.shift_service.get_shifts("tuesday") == []


def test_get_shifts_filters_by_employee(container):
    shifts = container.shift_service.get_shifts(employee_id="3")

    assert [s.shift_id for s in shifts] == ["shift-2"]


def test_get_shifts_rejects_garbage_date(container):
    with pytest.raises(ValidationError):
        container.shift_service.get_shifts("25/03/2024")


def test_create_shift_notifies_employee(container):
    result = container.shift_service.create_shift(
        employee_id="3", work_date=date(2024, 3, 27), start_time="10:00", end_time="18:00", shift_type="Morning"
    )

    assert result.applied
    shift = result.entity
    assert shift.status == ShiftStatus.SCHEDULED
    assert shift.weekday == "Wednesday"

    note = container.notification_service.list_for_user("3")[0]
    assert note.notification_type == NotificationType.SHIFT
    assert note.title == "Shift Assignment"
    assert note.message == "You have been assigned a new shift on 2024-03-27 (10:00 - 18:00)."


def test_create_overlapping_shift_is_conflict(container):
    result = container.shift_service.create_shift(
        employee_id="2", work_date=date(2024, 3, 25), start_time="16:00", end_time="20:00"
    )

    assert result.outcome == TransitionOutcome.CONFLICT
    assert result.entity.shift_id == "shift-1"
    assert len(container.shift_service.get_shifts("2024-03-25", "2")) == 1
    assert container.notification_service.list_for_user("2") == []


def test_create_overlapping_shift_when_allowed(container):
    result = container.shift_service.create_shift(
        employee_id="2", work_date=date(2024, 3, 25), start_time="16:00", end_time="20:00", allow_overlap=True
    )

    assert result.applied


def test_overnight_shift_overlap_crosses_midnight(container):
    clash = container.shift_service.create_shift(
        employee_id="4", work_date=date(2024, 3, 25), start_time="23:00", end_time="02:00"
    )
    after = container.shift_service.create_shift(
        employee_id="4", work_date=date(2024, 3, 26), start_time="00:00", end_time="02:00"
    )

    assert clash.outcome == TransitionOutcome.CONFLICT
    assert after.applied


def test_back_to_back_shifts_do_not_overlap(container):
    result = container.shift_service.create_shift(
        employee_id="2", work_date=date(2024, 3, 25), start_time="17:00", end_time="21:00"
    )

    assert result.applied


def test_update_and_delete_shift(container):
    from dataclasses import replace

    shift = container.shift_service.get_shift("shift-2")

    updated = container.shift_service.update_shift(replace(shift, start_time=time(11, 0)))
    assert updated.applied
    assert container.shift_service.get_shift("shift-2").start_time == time(11, 0)

    assert container.shift_service.delete_shift("shift-2").applied
    assert container.shift_service.delete_shift("shift-2").outcome == TransitionOutcome.NOT_FOUND
    assert container.shift_service.update_shift(shift).outcome == TransitionOutcome.NOT_FOUND


def test_create_shift_rejects_bad_time(container):
    with pytest.raises(ValidationError):
        container.shift_service.create_shift(
            employee_id="2", work_date=date(2024, 3, 27), start_time="9am", end_time="17:00"
        )
