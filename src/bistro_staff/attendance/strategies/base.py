from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...shifts.model import Shift


@dataclass(frozen=True)
class ClockDecision:
    is_late: bool = False
    late_minutes: int = 0
    overtime_minutes: int = 0


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we judge a clock-in or clock-out."""

    @abstractmethod
    def decide_start(self, *, now: datetime, shift: Optional[Shift], grace_minutes: int) -> ClockDecision:
        raise NotImplementedError

    @abstractmethod
    def decide_end(self, *, now: datetime, shift: Optional[Shift]) -> ClockDecision:
        raise NotImplementedError
