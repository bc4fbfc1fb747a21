from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...common.datetime_utils import whole_minutes_between
from ...shifts.model import Shift
from .base import AttendanceStrategy, ClockDecision


class LateStrategy(AttendanceStrategy):
    """Late start: minutes are counted from the scheduled start, not from the grace limit."""

    def decide_start(self, *, now: datetime, shift: Optional[Shift], grace_minutes: int) -> ClockDecision:
        window = shift.window() if shift else None
        if not window:
            return ClockDecision()
        return ClockDecision(is_late=True, late_minutes=whole_minutes_between(window[0], now))

    def decide_end(self, *, now: datetime, shift: Optional[Shift]) -> ClockDecision:
        return ClockDecision()
