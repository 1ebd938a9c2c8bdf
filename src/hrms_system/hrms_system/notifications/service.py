from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import newest_first, now_local
from ..common.ids import new_id
from ..common.validators import as_int, as_optional_text, as_text, coerce_fields, enum_of, require_fields
from ..core.constants import DEFAULT_NOTIFICATION_LIMIT, MAX_NOTIFICATION_LIMIT
from ..core.enums import NotificationType
from ..core.exceptions import ValidationError
from .model import Notification
from .repository import NotificationRepository

NOTIFICATION_FIELDS = {
    "user_id": as_text,
    "company_id": as_optional_text,
    "title": as_text,
    "message": as_text,
    "notification_type": enum_of(NotificationType),
    "action_url": as_optional_text,
    "related_entity_id": as_optional_text,
    "related_entity_type": as_optional_text,
}


class NotificationService:
    def __init__(self, notifications: NotificationRepository, *, clock: Callable[[], datetime] = now_local):
        self._notifications = notifications
        self._clock = clock

    def get_user_notifications(
        self,
        user_id: str,
        company_id: Optional[str] = None,
        limit: Any = DEFAULT_NOTIFICATION_LIMIT,
    ) -> list[Notification]:
        """Newest first, at most `limit` rows."""

        limit = as_int(limit, "limit")
        if not 1 <= limit <= MAX_NOTIFICATION_LIMIT:
            raise ValidationError(f"limit must be between 1 and {MAX_NOTIFICATION_LIMIT}")
        rows = self._notifications.list_for_user(user_id, company_id=company_id)
        return newest_first(rows, key=lambda n: n.created_at)[:limit]

    def get_unread_notification_count(self, user_id: str, company_id: Optional[str] = None) -> int:
        return sum(1 for n in self._notifications.list_for_user(user_id, company_id=company_id) if not n.is_read)

    def create_notification(self, data: Mapping[str, Any]) -> Notification:
        values = coerce_fields(data, NOTIFICATION_FIELDS, entity="notification")
        require_fields(values, ["user_id", "title", "message"])
        values.setdefault("notification_type", NotificationType.INFO)

        now = self._clock()
        notification = Notification(notification_id=new_id(), created_at=now, updated_at=now, **values)
        return self._notifications.add(notification)

    def mark_notification_as_read(self, notification_id: str) -> None:
        # missing or already read: nothing to do
        self._notifications.mark_read(notification_id, read_at=self._clock())

    def delete_notification(self, notification_id: str) -> None:
        self._notifications.delete(notification_id)
