from __future__ import annotations

from typing import Callable, Dict, Generic, Iterable, List, Optional, TypeVar

from .store import StateStore

T = TypeVar("T")


class StateCollection(Generic[T]):
    """Base for repositories backed by one collection of the state store.

    Subclasses set ``attr`` (AppState attribute) and ``id_field``.
    Every write runs in a store transaction, so calls made inside a service
    level transaction commit together.
    """

    attr: str = ""
    id_field: str = ""

    def __init__(self, store: StateStore):
        self._store = store

    def _items(self) -> Dict[str, T]:
        return getattr(self._store.view(), self.attr)

    def _filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [e for e in self._items().values() if predicate(e)]

    def get_by_id(self, entity_id: str) -> Optional[T]:
        return self._items().get(str(entity_id))

    def list_all(self) -> List[T]:
        return list(self._items().values())

    def add(self, entity: T) -> T:
        with self._store.transaction() as state:
            getattr(state, self.attr)[getattr(entity, self.id_field)] = entity
        return entity

    def save(self, entity: T) -> bool:
        """Replace an existing entity; False when it is not stored."""
        entity_id = getattr(entity, self.id_field)
        with self._store.transaction() as state:
            items = getattr(state, self.attr)
            if entity_id not in items:
                return False
            items[entity_id] = entity
            return True

    def delete(self, entity_id: str) -> bool:
        with self._store.transaction() as state:
            return getattr(state, self.attr).pop(str(entity_id), None) is not None

    def delete_many(self, entity_ids: Iterable[str]) -> int:
        removed = 0
        with self._store.transaction() as state:
            items = getattr(state, self.attr)
            for entity_id in list(entity_ids):
                if items.pop(str(entity_id), None) is not None:
                    removed += 1
        return removed
