from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from ..common.datetime_utils import format_timestamp, parse_timestamp
from ..core.constants import DEFAULT_NOTE_CATEGORY


@dataclass(frozen=True)
class Note:
    """Free-text annotation about an employee."""

    note_id: str
    employee_id: str
    content: str
    date: datetime
    category: str = DEFAULT_NOTE_CATEGORY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.note_id,
            "employeeId": self.employee_id,
            "content": self.content,
            "date": format_timestamp(self.date),
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Note":
        return cls(
            note_id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            content=data.get("content", ""),
            date=parse_timestamp(data["date"]),
            category=data.get("category") or DEFAULT_NOTE_CATEGORY,
        )
