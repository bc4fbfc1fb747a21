from __future__ import annotations

from typing import List, Protocol, Sequence

from ..storage.collection import StateCollection
from .model import Note


class NoteRepository(Protocol):
    def list_for_employee(self, employee_id: str) -> Sequence[Note]:
        raise NotImplementedError

    def add(self, note: Note) -> Note:
        raise NotImplementedError


class StateNoteRepository(StateCollection[Note]):
    attr = "notes"
    id_field = "note_id"

    def list_for_employee(self, employee_id: str) -> List[Note]:
        return self._filter(lambda n: n.employee_id == str(employee_id))
