from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_NOTE_CATEGORY
from .model import Note
from .repository import NoteRepository


class NoteService:
    def __init__(self, notes: NoteRepository, *, clock: Callable[[], datetime] = now_local):
        self._notes = notes
        self._clock = clock

    def add_note(self, employee_id: str, content: str, category: Optional[str] = None) -> Note:
        note = Note(
            note_id=new_id(),
            employee_id=str(employee_id),
            content=require_non_empty(content, "Note"),
            date=self._clock(),
            category=(category or "").strip() or DEFAULT_NOTE_CATEGORY,
        )
        return self._notes.add(note)

    def get_notes_by_employee(self, employee_id: str) -> List[Note]:
        return sorted(self._notes.list_for_employee(employee_id), key=lambda n: n.date)
