from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from ..core.enums import EmployeeStatus
from ..database.memory_base import InMemoryTable
from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, lock=None):
        self._table: InMemoryTable[Employee] = InMemoryTable(lambda e: e.employee_id, lock=lock)

    def get(self, employee_id: str) -> Optional[Employee]:
        return self._table.get(employee_id)

    def list_by_company(self, company_id: str, *, include_archived: bool = False) -> Sequence[Employee]:
        return self._table.select(
            lambda e: e.company_id == company_id and (include_archived or not e.is_archived)
        )

    def list_by_license(self, license_id: str) -> Sequence[Employee]:
        return self._table.select(lambda e: e.license_id == license_id)

    def list_all(self, *, include_archived: bool = True) -> Sequence[Employee]:
        return self._table.select(lambda e: include_archived or not e.is_archived)

    def add(self, employee: Employee) -> Employee:
        return self._table.insert(employee)

    def update(self, employee_id: str, **changes: Any) -> Optional[Employee]:
        return self._table.update(employee_id, **changes)

    def archive(self, employee_id: str, *, archived_at: datetime, reason: str) -> Optional[Employee]:
        return self._table.update_where(
            employee_id,
            lambda e: not e.is_archived,
            status=EmployeeStatus.ARCHIVED,
            archived_at=archived_at,
            archive_reason=reason,
            updated_at=archived_at,
        )

    def detach_license(self, license_id: str, *, updated_at: datetime) -> int:
        return self._table.update_many(lambda e: e.license_id == license_id, license_id=None, updated_at=updated_at)
