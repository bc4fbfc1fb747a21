from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from ..storage.collection import StateCollection
from .model import Notification


class NotificationRepository(Protocol):
    def get_by_id(self, notification_id: str) -> Optional[Notification]:
        raise NotImplementedError

    def list_for_user(self, user_id: str) -> Sequence[Notification]:
        raise NotImplementedError

    def add(self, notification: Notification) -> Notification:
        raise NotImplementedError

    def save(self, notification: Notification) -> bool:
        raise NotImplementedError


class StateNotificationRepository(StateCollection[Notification]):
    attr = "notifications"
    id_field = "notification_id"

    def list_for_user(self, user_id: str) -> List[Notification]:
        return self._filter(lambda n: n.user_id == str(user_id))
