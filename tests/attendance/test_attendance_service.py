from __future__ import annotations

from datetime import date, datetime

import pytest

from bistro_staff.core.enums import AttendanceStatus, ShiftStatus
from bistro_staff.core.results import TransitionOutcome

TUESDAY = date(2024, 3, 26)


@pytest.fixture
def tuesday_shift(container):
    result = container.shift_service.create_shift(
        employee_id="2", work_date=TUESDAY, start_time="09:00", end_time="17:00"
    )
    assert result.applied
    return result.entity


def test_start_shift_on_time(container, tuesday_shift):
    result = container.attendance_service.start_shift("2", TUESDAY, now=datetime(2024, 3, 26, 8, 58))

    assert result.outcome == TransitionOutcome.APPLIED
    record = result.entity
    assert record.status == AttendanceStatus.STARTED
    assert record.shift_id == tuesday_shift.shift_id
    assert record.start_time == datetime(2024, 3, 26, 8, 58)
    assert record.is_late is False
    assert container.shift_service.get_shift(tuesday_shift.shift_id).status == ShiftStatus.STARTED


def test_start_shift_late_records_minutes(container, tuesday_shift):
    result = container.attendance_service.start_shift("2", TUESDAY, now=datetime(2024, 3, 26, 9, 10, 30))

    assert result.entity.is_late is True
    assert result.entity.late_minutes == 10


def test_start_shift_twice_keeps_first_timestamp(container, tuesday_shift):
    first = datetime(2024, 3, 26, 9, 0)
    container.attendance_service.start_shift("2", TUESDAY, now=first)

    again = container.attendance_service.start_shift("2", TUESDAY, now=datetime(2024, 3, 26, 9, 30))

    assert again.outcome == TransitionOutcome.ALREADY_STARTED
    assert not again
    stored = container.attendance_service.get_attendance("2", TUESDAY)
    assert stored.start_time == first


def test_start_shift_without_schedule_is_not_found(container):
    result = container.attendance_service.start_shift("2", TUESDAY, now=datetime(2024, 3, 26, 9, 0))

    assert result.outcome == TransitionOutcome.NOT_FOUND
    assert container.attendance_service.get_attendance("2", TUESDAY) is None


def test_end_shift_sets_duration_and_overtime(container, tuesday_shift):
    container.attendance_service.start_shift("2", TUESDAY, now=datetime(2024, 3, 26, 9, 0))

    result = container.attendance_service.end_shift("2", TUESDAY, now=datetime(2024, 3, 26, 17, 30))

    assert result.applied
    record = result.entity
    assert record.status == AttendanceStatus.COMPLETED
    assert record.end_time == datetime(2024, 3, 26, 17, 30)
    assert record.duration == pytest.approx(8.5)
    assert record.overtime == 30
    assert container.shift_service.get_shift(tuesday_shift.shift_id).status == ShiftStatus.COMPLETED


def test_end_shift_twice_is_already_completed(container, tuesday_shift):
    container.attendance_service.start_shift("2", TUESDAY, now=datetime(2024, 3, 26, 9, 0))
    container.attendance_service.end_shift("2", TUESDAY, now=datetime(2024, 3, 26, 17, 0))

    again = container.attendance_service.end_shift("2", TUESDAY, now=datetime(2024, 3, 26, 18, 0))

    assert again.outcome == TransitionOutcome.ALREADY_COMPLETED
    assert again.entity.end_time == datetime(2024, 3, 26, 17, 0)


def test_start_after_completion_is_already_completed(container, tuesday_shift):
    container.attendance_service.start_shift("2", TUESDAY, now=datetime(2024, 3, 26, 9, 0))
    container.attendance_service.end_shift("2", TUESDAY, now=datetime(2024, 3, 26, 17, 0))

    again = container.attendance_service.start_shift("2", TUESDAY, now=datetime(2024, 3, 26, 17, 5))

    assert again.outcome == TransitionOutcome.ALREADY_COMPLETED


def test_end_shift_that_never_started_changes_nothing(container, store):
    before = store.view()

    result = container.attendance_service.end_shift("4", shift_id="shift-3", now=datetime(2024, 3, 25, 23, 0))

    assert result.outcome == TransitionOutcome.NOT_STARTED
    assert container.shift_service.get_shift("shift-3").status == ShiftStatus.SCHEDULED
    assert store.view().attendance == before.attendance


def test_end_shift_unknown_shift_is_not_found(container):
    result = container.attendance_service.end_shift("2", shift_id="nope", now=datetime(2024, 3, 25, 17, 0))

    assert result.outcome == TransitionOutcome.NOT_FOUND


def test_overnight_shift_has_no_overtime_before_midnight(container):
    container.attendance_service.start_shift("4", shift_id="shift-3", now=datetime(2024, 3, 25, 16, 0))

    result = container.attendance_service.end_shift("4", shift_id="shift-3", now=datetime(2024, 3, 25, 23, 45))

    assert result.entity.overtime == 0
    assert result.entity.duration == pytest.approx(7.75)


def test_grace_period_is_configurable(store, clock):
    from bistro_staff.container import build_container

    container = build_container(store=store, settings={"LATE_GRACE_MINUTES": 10}, clock=clock)

    result = container.attendance_service.start_shift("2", shift_id="shift-1", now=datetime(2024, 3, 25, 9, 8))

    assert result.entity.is_late is False


def test_get_current_shift_returns_started_shift(container, tuesday_shift):
    assert container.attendance_service.get_current_shift("2") is None

    container.attendance_service.start_shift("2", TUESDAY, now=datetime(2024, 3, 26, 9, 0))

    assert container.attendance_service.get_current_shift("2").shift_id == tuesday_shift.shift_id
    assert container.attendance_service.get_current_shift("2", date(2024, 3, 27)) is None


def test_mark_absent_marks_shift_missed(container, tuesday_shift):
    result = container.attendance_service.mark_absent("2", TUESDAY, "no show")

    assert result.applied
    assert result.entity.status == AttendanceStatus.ABSENT
    assert result.entity.shift_id == tuesday_shift.shift_id
    assert container.shift_service.get_shift(tuesday_shift.shift_id).status == ShiftStatus.MISSED


def test_mark_absent_after_worked_day_is_refused(container, tuesday_shift):
    container.attendance_service.start_shift("2", TUESDAY, now=datetime(2024, 3, 26, 9, 0))
    container.attendance_service.end_shift("2", TUESDAY, now=datetime(2024, 3, 26, 17, 0))

    result = container.attendance_service.mark_absent("2", TUESDAY)

    assert result.outcome == TransitionOutcome.ALREADY_COMPLETED


def test_shift_overlay_shows_actual_times(container, tuesday_shift):
    container.attendance_service.start_shift("2", TUESDAY, now=datetime(2024, 3, 26, 9, 0))

    overlay = container.attendance_service.shift_overlay(tuesday_shift.shift_id)

    assert overlay["actualStartTime"] == "2024-03-26T09:00:00"
    assert overlay["actualEndTime"] is None
    assert overlay["actualStatus"] == "started"
    assert container.attendance_service.shift_overlay("missing") is None


def test_attendance_queries(container):
    assert [r.attendance_id for r in container.attendance_service.get_attendances_by_employee("2")] == ["att-1"]
    by_date = container.attendance_service.get_attendances_by_date(date(2024, 3, 24))
    assert {r.attendance_id for r in by_date} == {"att-1", "att-2", "att-3"}


def test_update_attendance_override(container):
    from dataclasses import replace

    record = container.attendance_repo.get_by_id("att-3")

    result = container.attendance_service.update_attendance(replace(record, notes="called in sick"))

    assert result.applied
    assert container.attendance_repo.get_by_id("att-3").notes == "called in sick"


def test_update_attendance_unknown_record(container):
    from dataclasses import replace

    record = container.attendance_repo.get_by_id("att-3")

    result = container.attendance_service.update_attendance(replace(record, attendance_id="att-999"))

    assert result.outcome == TransitionOutcome.NOT_FOUND


WEDNESDAY = date(2024, 3, 27)


@pytest.fixture
def split_day(container):
    morning = container.shift_service.create_shift(
        employee_id="3", work_date=WEDNESDAY, start_time="08:00", end_time="11:00"
    ).entity
    evening = container.shift_service.create_shift(
        employee_id="3", work_date=WEDNESDAY, start_time="17:00", end_time="21:00"
    ).entity
    return morning, evening


def test_end_shift_closes_the_running_shift_of_a_split_day(container, split_day):
    morning, evening = split_day
    container.attendance_service.start_shift(
        "3", shift_id=evening.shift_id, now=datetime(2024, 3, 27, 17, 0)
    )

    result = container.attendance_service.end_shift("3", WEDNESDAY, now=datetime(2024, 3, 27, 21, 0))

    assert result.outcome == TransitionOutcome.APPLIED
    assert result.entity.shift_id == evening.shift_id
    assert container.shift_service.get_shift(evening.shift_id).status == ShiftStatus.COMPLETED
    assert container.shift_service.get_shift(morning.shift_id).status == ShiftStatus.SCHEDULED


def test_start_shift_picks_next_unworked_shift_of_a_split_day(container, split_day):
    morning, evening = split_day
    container.attendance_service.start_shift("3", WEDNESDAY, now=datetime(2024, 3, 27, 8, 0))
    container.attendance_service.end_shift("3", WEDNESDAY, now=datetime(2024, 3, 27, 11, 0))

    result = container.attendance_service.start_shift("3", WEDNESDAY, now=datetime(2024, 3, 27, 17, 0))

    assert result.applied
    assert result.entity.shift_id == evening.shift_id
    assert result.entity.is_late is False


def test_start_shift_while_another_is_running_reports_it(container, split_day):
    morning, _ = split_day
    container.attendance_service.start_shift("3", WEDNESDAY, now=datetime(2024, 3, 27, 8, 0))

    again = container.attendance_service.start_shift("3", WEDNESDAY, now=datetime(2024, 3, 27, 17, 0))

    assert again.outcome == TransitionOutcome.ALREADY_STARTED
    assert again.entity.shift_id == morning.shift_id


def test_shift_of_another_employee_is_not_found(container):
    result = container.attendance_service.start_shift("2", shift_id="shift-3", now=datetime(2024, 3, 25, 16, 0))

    assert result.outcome == TransitionOutcome.NOT_FOUND
    assert container.attendance_service.get_attendance("4", date(2024, 3, 25)) is None
    assert container.shift_service.get_shift("shift-3").status == ShiftStatus.SCHEDULED
    assert container.attendance_service.end_shift("2", shift_id="shift-3").outcome == TransitionOutcome.NOT_FOUND


def test_repeated_start_does_not_write(container, backend, tuesday_shift):
    container.attendance_service.start_shift("2", TUESDAY, now=datetime(2024, 3, 26, 9, 0))
    saves = backend.save_count

    again = container.attendance_service.start_shift("2", TUESDAY, now=datetime(2024, 3, 26, 9, 5))

    assert again.outcome == TransitionOutcome.ALREADY_STARTED
    assert backend.save_count == saves
