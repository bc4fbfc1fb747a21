from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...shifts.model import Shift
from .base import AttendanceStrategy, ClockDecision


class NormalStrategy(AttendanceStrategy):
    """On-time start, end within the scheduled window."""

    def decide_start(self, *, now: datetime, shift: Optional[Shift], grace_minutes: int) -> ClockDecision:
        return ClockDecision()

    def decide_end(self, *, now: datetime, shift: Optional[Shift]) -> ClockDecision:
        return ClockDecision()
