from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...common.datetime_utils import whole_minutes_between
from ...shifts.model import Shift
from .base import AttendanceStrategy, ClockDecision


class OvertimeStrategy(AttendanceStrategy):
    """End after the scheduled end."""

    def decide_start(self, *, now: datetime, shift: Optional[Shift], grace_minutes: int) -> ClockDecision:
        return ClockDecision()

    def decide_end(self, *, now: datetime, shift: Optional[Shift]) -> ClockDecision:
        window = shift.window() if shift else None
        if not window:
            return ClockDecision()
        return ClockDecision(overtime_minutes=whole_minutes_between(window[1], now))
