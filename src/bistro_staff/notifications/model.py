from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from ..common.datetime_utils import format_timestamp, parse_timestamp
from ..core.enums import NotificationType


@dataclass(frozen=True)
class Notification:
    notification_id: str
    user_id: str
    title: str
    message: str
    notification_type: NotificationType
    date: datetime
    read: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.notification_id,
            "userId": self.user_id,
            "title": self.title,
            "message": self.message,
            "type": self.notification_type.value,
            "date": format_timestamp(self.date),
            "read": self.read,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Notification":
        return cls(
            notification_id=str(data["id"]),
            user_id=str(data["userId"]),
            title=data.get("title", ""),
            message=data.get("message", ""),
            notification_type=NotificationType(data.get("type") or NotificationType.GENERAL.value),
            date=parse_timestamp(data["date"]),
            read=bool(data.get("read", False)),
        )
