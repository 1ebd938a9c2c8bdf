from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, email, first_name, last_name, profile_image_url, created_at, updated_at"


def _to_user(r: dict) -> User:
    return User(
        user_id=r["user_id"],
        created_at=r["created_at"],
        updated_at=r["updated_at"],
        email=r.get("email"),
        first_name=r.get("first_name"),
        last_name=r.get("last_name"),
        profile_image_url=r.get("profile_image_url"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, user_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (user_id,))
            r = fetchone(cur)
            return _to_user(r) if r else None

    def upsert(self, user: User) -> User:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(user_id, email, first_name, last_name, profile_image_url, created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    email=VALUES(email),
                    first_name=VALUES(first_name),
                    last_name=VALUES(last_name),
                    profile_image_url=VALUES(profile_image_url),
                    updated_at=VALUES(updated_at)
                """,
                (
                    user.user_id,
                    user.email,
                    user.first_name,
                    user.last_name,
                    user.profile_image_url,
                    user.created_at,
                    user.updated_at,
                ),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (user.user_id,))
            return _to_user(fetchone(cur))
