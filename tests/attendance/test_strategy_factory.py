from datetime import date, datetime, time

from bistro_staff.attendance.factory import AttendanceStrategyFactory
from bistro_staff.attendance.strategies.late_strategy import LateStrategy
from bistro_staff.attendance.strategies.normal_strategy import NormalStrategy
from bistro_staff.attendance.strategies.overtime_strategy import OvertimeStrategy
from bistro_staff.shifts.model import Shift


def _shift(start=time(9, 0), end=time(17, 0)):
    return Shift(shift_id="s1", employee_id="2", date=date(2025, 1, 1), start_time=start, end_time=end)


def test_factory_start_on_time_within_grace():
    now = datetime(2025, 1, 1, 9, 4, 59)

    strategy = AttendanceStrategyFactory().for_start(now=now, shift=_shift(), grace_minutes=5)

    assert isinstance(strategy, NormalStrategy)


def test_factory_start_late_after_grace():
    now = datetime(2025, 1, 1, 9, 6, 0)

    strategy = AttendanceStrategyFactory().for_start(now=now, shift=_shift(), grace_minutes=5)

    assert isinstance(strategy, LateStrategy)


def test_factory_start_without_grace_is_late_one_second_after_start():
    now = datetime(2025, 1, 1, 9, 0, 1)

    strategy = AttendanceStrategyFactory().for_start(now=now, shift=_shift(), grace_minutes=0)

    assert isinstance(strategy, LateStrategy)


def test_late_minutes_count_from_scheduled_start():
    shift = _shift()
    now = datetime(2025, 1, 1, 9, 12, 30)

    decision = LateStrategy().decide_start(now=now, shift=shift, grace_minutes=5)

    assert decision.is_late is True
    assert decision.late_minutes == 12


def test_factory_end_after_scheduled_end_is_overtime():
    shift = _shift()
    now = datetime(2025, 1, 1, 17, 45, 10)

    strategy = AttendanceStrategyFactory().for_end(now=now, shift=shift)

    assert isinstance(strategy, OvertimeStrategy)
    assert strategy.decide_end(now=now, shift=shift).overtime_minutes == 45


def test_factory_end_before_scheduled_end_has_no_overtime():
    shift = _shift()
    now = datetime(2025, 1, 1, 16, 30)

    strategy = AttendanceStrategyFactory().for_end(now=now, shift=shift)

    assert isinstance(strategy, NormalStrategy)
    assert strategy.decide_end(now=now, shift=shift).overtime_minutes == 0


def test_overnight_shift_ends_next_day():
    shift = _shift(start=time(16, 0), end=time(0, 0))
    now = datetime(2025, 1, 1, 23, 30)

    strategy = AttendanceStrategyFactory().for_end(now=now, shift=shift)

    assert isinstance(strategy, NormalStrategy)
