from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Notification


class NotificationRepository(Protocol):
    def get(self, notification_id: str) -> Optional[Notification]:
        raise NotImplementedError

    def list_for_user(self, user_id: str, *, company_id: Optional[str] = None) -> Sequence[Notification]:
        """Insertion order; callers sort for display."""

        raise NotImplementedError

    def add(self, notification: Notification) -> Notification:
        raise NotImplementedError

    def mark_read(self, notification_id: str, *, read_at: datetime) -> Optional[Notification]:
        """Stamp `read_at` on an unread notification; None otherwise."""

        raise NotImplementedError

    def delete(self, notification_id: str) -> bool:
        raise NotImplementedError

    def delete_by_company(self, company_id: str) -> int:
        raise NotImplementedError
