from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import CompanyRole


@dataclass(frozen=True)
class User:
    """Account known from the session layer; the store only keeps its profile."""

    user_id: str
    created_at: datetime
    updated_at: datetime
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


@dataclass(frozen=True)
class CompanyUser:
    """Membership of one user in one company, with a company-scoped role."""

    membership_id: str
    user_id: str
    company_id: str
    role: CompanyRole
    joined_at: datetime
    updated_at: datetime
    permissions: tuple[str, ...] = ()


@dataclass(frozen=True)
class MembershipWithUser:
    membership: CompanyUser
    user: Optional[User]
