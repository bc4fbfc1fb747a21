from __future__ import annotations

from datetime import date, datetime

import pytest

from bistro_staff.core.exceptions import ValidationError


def test_month_report_over_demo_data(container):
    report = container.report_service.get_attendance_reports("month", today=date(2024, 3, 25))

    assert report["period"] == "month"
    assert report["totalEmployees"] == 3
    assert report["attendanceRate"] == 67
    assert report["averageHoursWorked"] == round((8.17 + 8.33) / 2, 1)
    assert report["presentToday"] == 0


def test_present_and_on_leave_today(container):
    container.attendance_service.start_shift("2", shift_id="shift-1", now=datetime(2024, 3, 25, 9, 0))

    today = container.report_service.get_attendance_reports("week", today=date(2024, 3, 25))
    leave_day = container.report_service.get_attendance_reports("week", today=date(2024, 3, 29))

    assert today["presentToday"] == 1
    assert today["onLeaveToday"] == 0
    assert leave_day["onLeaveToday"] == 1


def test_absent_today(container):
    report = container.report_service.get_attendance_reports("week", today=date(2024, 3, 24))

    assert report["absentToday"] == 1
    assert report["presentToday"] == 2


def test_empty_period_has_zero_rate(container):
    report = container.report_service.get_attendance_reports("month", today=date(2025, 1, 10))

    assert report["attendanceRate"] == 0
    assert report["averageHoursWorked"] == 0


def test_unknown_period(container):
    with pytest.raises(ValidationError):
        container.report_service.get_attendance_reports("decade")
