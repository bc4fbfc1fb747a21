from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, List

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..core.enums import NotificationType
from ..core.results import TransitionOutcome, TransitionResult
from ..storage.store import StateStore
from .model import Notification
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationService:
    """Append-only log of user-targeted messages."""

    def __init__(
        self,
        store: StateStore,
        notifications: NotificationRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._store = store
        self._notifications = notifications
        self._clock = clock

    def notify(
        self,
        *,
        user_id: str,
        title: str,
        message: str,
        notification_type: NotificationType = NotificationType.GENERAL,
    ) -> Notification:
        notification = Notification(
            notification_id=new_id(),
            user_id=str(user_id),
            title=title,
            message=message,
            notification_type=notification_type,
            date=self._clock(),
        )
        self._notifications.add(notification)
        logger.info("notification %s for user %s: %s", notification.notification_id, user_id, title)
        return notification

    def list_for_user(self, user_id: str, *, unread_only: bool = False) -> List[Notification]:
        items = [n for n in self._notifications.list_for_user(user_id) if not (unread_only and n.read)]
        # Same timestamp: later insertions first.
        items.reverse()
        items.sort(key=lambda n: n.date, reverse=True)
        return items

    def mark_notification_as_read(self, notification_id: str) -> TransitionResult[Notification]:
        notification = self._notifications.get_by_id(notification_id)
        if not notification:
            return TransitionResult.noop(TransitionOutcome.NOT_FOUND)
        if notification.read:
            return TransitionResult.noop(TransitionOutcome.ALREADY_READ, notification)

        updated = replace(notification, read=True)
        self._notifications.save(updated)
        return TransitionResult.ok(updated)

    def mark_all_as_read(self, user_id: str) -> int:
        count = 0
        with self._store.transaction():
            for n in list(self._notifications.list_for_user(user_id)):
                if not n.read:
                    self._notifications.save(replace(n, read=True))
                    count += 1
        if count:
            logger.info("marked %d notifications read for user %s", count, user_id)
        return count
