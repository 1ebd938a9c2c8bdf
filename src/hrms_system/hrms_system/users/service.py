from __future__ import annotations

from contextlib import nullcontext
from datetime import datetime
from typing import Any, Callable, ContextManager, Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import as_optional_text, as_text, as_text_tuple, coerce_fields, enum_of, require_non_empty
from ..companies.repository import CompanyRepository
from ..core.enums import CompanyRole
from ..core.exceptions import NotFoundError, ValidationError
from .membership_repository import MembershipRepository
from .model import CompanyUser, MembershipWithUser, User
from .repository import UserRepository

USER_FIELDS = {
    "user_id": as_text,
    "email": as_optional_text,
    "first_name": as_optional_text,
    "last_name": as_optional_text,
    "profile_image_url": as_optional_text,
}

_as_role = enum_of(CompanyRole)


class UserService:
    def __init__(
        self,
        users: UserRepository,
        memberships: MembershipRepository,
        companies: CompanyRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        atomic: Callable[[], ContextManager[Any]] = nullcontext,
    ):
        self._users = users
        self._memberships = memberships
        self._companies = companies
        self._clock = clock
        self._atomic = atomic

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def upsert_user(self, data: Mapping[str, Any]) -> User:
        """Insert or refresh a profile; the original `created_at` survives."""

        values = coerce_fields(data, USER_FIELDS, entity="user")
        if "user_id" not in values:
            raise ValidationError("Missing required field(s): user_id")
        now = self._clock()
        return self._users.upsert(User(created_at=now, updated_at=now, **values))

    def get_user_companies(self, user_id: str) -> Sequence[CompanyUser]:
        return self._memberships.list_by_user(user_id)

    def get_company_users(self, company_id: str) -> list[MembershipWithUser]:
        return [
            MembershipWithUser(membership=m, user=self._users.get(m.user_id))
            for m in self._memberships.list_by_company(company_id)
        ]

    def add_user_to_company(
        self,
        user_id: str,
        company_id: str,
        role: Any = CompanyRole.EMPLOYEE,
        permissions: Optional[Iterable[str]] = None,
    ) -> CompanyUser:
        user_id = require_non_empty(user_id, "user_id")
        role = _as_role(role, "role")
        perms = as_text_tuple(permissions, "permissions")

        with self._atomic():
            if not self._companies.get(company_id):
                raise NotFoundError(f"Company {company_id} not found")
            if self._memberships.get_for(user_id, company_id):
                raise ValidationError(f"User {user_id} is already a member of company {company_id}")

            now = self._clock()
            membership = CompanyUser(
                membership_id=new_id(),
                user_id=user_id,
                company_id=company_id,
                role=role,
                joined_at=now,
                updated_at=now,
                permissions=perms,
            )
            return self._memberships.add(membership)

    def update_user_role(
        self,
        user_id: str,
        company_id: str,
        role: Any,
        permissions: Optional[Iterable[str]] = None,
    ) -> CompanyUser:
        """Change the role; permissions are replaced only when given."""

        changes: dict[str, Any] = {"role": _as_role(role, "role")}
        if permissions is not None:
            changes["permissions"] = as_text_tuple(permissions, "permissions")

        current = self._memberships.get_for(user_id, company_id)
        if not current:
            raise NotFoundError(f"User {user_id} is not a member of company {company_id}")

        updated = self._memberships.update(current.membership_id, **changes, updated_at=self._clock())
        if not updated:
            raise NotFoundError(f"User {user_id} is not a member of company {company_id}")
        return updated

    def remove_user_from_company(self, user_id: str, company_id: str) -> None:
        current = self._memberships.get_for(user_id, company_id)
        if current:
            self._memberships.delete(current.membership_id)
