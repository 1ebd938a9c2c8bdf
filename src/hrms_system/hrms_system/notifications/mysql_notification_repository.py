from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import NotificationType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, insert_row, record_values, update_row
from .model import Notification
from .repository import NotificationRepository

_COLUMNS = """
    notification_id, user_id, company_id, title, message, notification_type, read_at,
    action_url, related_entity_id, related_entity_type, created_at, updated_at
"""


def _to_notification(r: dict) -> Notification:
    return Notification(
        notification_id=r["notification_id"],
        user_id=r["user_id"],
        title=r["title"],
        message=r["message"],
        notification_type=NotificationType(r["notification_type"]),
        created_at=r["created_at"],
        updated_at=r["updated_at"],
        company_id=r.get("company_id"),
        read_at=r.get("read_at"),
        action_url=r.get("action_url"),
        related_entity_id=r.get("related_entity_id"),
        related_entity_type=r.get("related_entity_type"),
    )


class MySQLNotificationRepository(NotificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, cur, where: str, params: tuple) -> list[Notification]:
        cur.execute(f"SELECT {_COLUMNS} FROM notifications WHERE {where} ORDER BY seq", params)
        return [_to_notification(r) for r in fetchall(cur)]

    def get(self, notification_id: str) -> Optional[Notification]:
        with db_cursor(self._conn_factory) as (_, cur):
            rows = self._select(cur, "notification_id=%s", (notification_id,))
            return rows[0] if rows else None

    def list_for_user(self, user_id: str, *, company_id: Optional[str] = None) -> Sequence[Notification]:
        with db_cursor(self._conn_factory) as (_, cur):
            if company_id is None:
                return self._select(cur, "user_id=%s", (user_id,))
            return self._select(cur, "user_id=%s AND company_id=%s", (user_id, company_id))

    def add(self, notification: Notification) -> Notification:
        with db_cursor(self._conn_factory) as (_, cur):
            insert_row(cur, "notifications", record_values(notification))
        return notification

    def mark_read(self, notification_id: str, *, read_at: datetime) -> Optional[Notification]:
        with db_cursor(self._conn_factory) as (_, cur):
            matched = update_row(
                cur,
                "notifications",
                "notification_id",
                notification_id,
                {"read_at": read_at, "updated_at": read_at},
                where="AND read_at IS NULL",
            )
            if not matched:
                return None
            return self._select(cur, "notification_id=%s", (notification_id,))[0]

    def delete(self, notification_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM notifications WHERE notification_id=%s", (notification_id,))
            return cur.rowcount > 0

    def delete_by_company(self, company_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM notifications WHERE company_id=%s", (company_id,))
            return int(cur.rowcount)
