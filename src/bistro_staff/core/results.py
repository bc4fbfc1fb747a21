from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class TransitionOutcome(str, Enum):
    """What a state-transition operation actually did."""

    APPLIED = "applied"
    NOT_FOUND = "not_found"
    ALREADY_STARTED = "already_started"
    ALREADY_COMPLETED = "already_completed"
    NOT_STARTED = "not_started"
    ALREADY_DECIDED = "already_decided"
    ALREADY_READ = "already_read"
    INVALID_DATE_RANGE = "invalid_date_range"
    CONFLICT = "conflict"
    INVALID_STATE = "invalid_state"


@dataclass(frozen=True)
class TransitionResult(Generic[T]):
    """Result of a state transition.

    ``entity`` is the entity after the call: the updated one when applied,
    the untouched one for a no-op, ``None`` when nothing was found.
    """

    outcome: TransitionOutcome
    entity: Optional[T] = None

    @property
    def applied(self) -> bool:
        return self.outcome == TransitionOutcome.APPLIED

    def __bool__(self) -> bool:
        return self.applied

    @classmethod
    def ok(cls, entity: Any) -> "TransitionResult":
        return cls(TransitionOutcome.APPLIED, entity)

    @classmethod
    def noop(cls, outcome: TransitionOutcome, entity: Any = None) -> "TransitionResult":
        return cls(outcome, entity)
