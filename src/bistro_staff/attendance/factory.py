from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..shifts.model import Shift
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy
from .strategies.overtime_strategy import OvertimeStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_start(self, *, now: datetime, shift: Optional[Shift], grace_minutes: int) -> AttendanceStrategy:
        window = shift.window() if shift else None
        if not window:
            return NormalStrategy()

        if now <= window[0] + timedelta(minutes=grace_minutes):
            return NormalStrategy()
        return LateStrategy()

    def for_end(self, *, now: datetime, shift: Optional[Shift]) -> AttendanceStrategy:
        window = shift.window() if shift else None
        if not window:
            return NormalStrategy()

        if now > window[1]:
            return OvertimeStrategy()
        return NormalStrategy()
