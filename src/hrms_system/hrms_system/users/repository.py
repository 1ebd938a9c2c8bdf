from __future__ import annotations

from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    def get(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def upsert(self, user: User) -> User:
        """Insert or replace by `user_id`; the first `created_at` is kept."""

        raise NotImplementedError
