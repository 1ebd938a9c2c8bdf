from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.memory_base import InMemoryTable
from .membership_repository import MembershipRepository
from .model import CompanyUser


class InMemoryMembershipRepository(MembershipRepository):
    def __init__(self, lock=None):
        self._table: InMemoryTable[CompanyUser] = InMemoryTable(lambda m: m.membership_id, lock=lock)

    def get_for(self, user_id: str, company_id: str) -> Optional[CompanyUser]:
        rows = self._table.select(lambda m: m.user_id == user_id and m.company_id == company_id)
        return rows[0] if rows else None

    def list_by_user(self, user_id: str) -> Sequence[CompanyUser]:
        return self._table.select(lambda m: m.user_id == user_id)

    def list_by_company(self, company_id: str) -> Sequence[CompanyUser]:
        return self._table.select(lambda m: m.company_id == company_id)

    def add(self, membership: CompanyUser) -> CompanyUser:
        return self._table.insert(membership)

    def update(self, membership_id: str, **changes: Any) -> Optional[CompanyUser]:
        return self._table.update(membership_id, **changes)

    def delete(self, membership_id: str) -> bool:
        return self._table.delete(membership_id)

    def delete_by_company(self, company_id: str) -> int:
        return self._table.delete_where(lambda m: m.company_id == company_id)
