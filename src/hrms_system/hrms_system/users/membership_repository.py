from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import CompanyUser


class MembershipRepository(Protocol):
    def get_for(self, user_id: str, company_id: str) -> Optional[CompanyUser]:
        raise NotImplementedError

    def list_by_user(self, user_id: str) -> Sequence[CompanyUser]:
        raise NotImplementedError

    def list_by_company(self, company_id: str) -> Sequence[CompanyUser]:
        raise NotImplementedError

    def add(self, membership: CompanyUser) -> CompanyUser:
        raise NotImplementedError

    def update(self, membership_id: str, **changes: Any) -> Optional[CompanyUser]:
        raise NotImplementedError

    def delete(self, membership_id: str) -> bool:
        raise NotImplementedError

    def delete_by_company(self, company_id: str) -> int:
        raise NotImplementedError
