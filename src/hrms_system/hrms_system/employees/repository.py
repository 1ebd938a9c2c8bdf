from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Storage contract for employees (no hard delete: see `archive`)."""

    def get(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_by_company(self, company_id: str, *, include_archived: bool = False) -> Sequence[Employee]:
        """Employees of one company in insertion order."""

        raise NotImplementedError

    def list_by_license(self, license_id: str) -> Sequence[Employee]:
        raise NotImplementedError

    def list_all(self, *, include_archived: bool = True) -> Sequence[Employee]:
        raise NotImplementedError

    def add(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def update(self, employee_id: str, **changes: Any) -> Optional[Employee]:
        raise NotImplementedError

    def archive(self, employee_id: str, *, archived_at: datetime, reason: str) -> Optional[Employee]:
        """Archive an active record; None when missing or already archived."""

        raise NotImplementedError

    def detach_license(self, license_id: str, *, updated_at: datetime) -> int:
        raise NotImplementedError
