from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..database.memory_base import InMemoryTable
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self, lock=None):
        self._table: InMemoryTable[User] = InMemoryTable(lambda u: u.user_id, lock=lock)

    def get(self, user_id: str) -> Optional[User]:
        return self._table.get(user_id)

    def upsert(self, user: User) -> User:
        return self._table.upsert(user, lambda current, new: replace(new, created_at=current.created_at))
