from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.memory_base import InMemoryTable
from .model import Notification
from .repository import NotificationRepository


class InMemoryNotificationRepository(NotificationRepository):
    def __init__(self, lock=None):
        self._table: InMemoryTable[Notification] = InMemoryTable(lambda n: n.notification_id, lock=lock)

    def get(self, notification_id: str) -> Optional[Notification]:
        return self._table.get(notification_id)

    def list_for_user(self, user_id: str, *, company_id: Optional[str] = None) -> Sequence[Notification]:
        return self._table.select(
            lambda n: n.user_id == user_id and (company_id is None or n.company_id == company_id)
        )

    def add(self, notification: Notification) -> Notification:
        return self._table.insert(notification)

    def mark_read(self, notification_id: str, *, read_at: datetime) -> Optional[Notification]:
        return self._table.update_where(
            notification_id,
            lambda n: n.read_at is None,
            read_at=read_at,
            updated_at=read_at,
        )

    def delete(self, notification_id: str) -> bool:
        return self._table.delete(notification_id)

    def delete_by_company(self, company_id: str) -> int:
        return self._table.delete_where(lambda n: n.company_id == company_id)
