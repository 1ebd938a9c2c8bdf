from __future__ import annotations

from typing import Any, Collection, Optional, Sequence

from ..database.memory_base import InMemoryTable
from .model import EmployeeViolation
from .repository import ViolationRepository


class InMemoryViolationRepository(ViolationRepository):
    def __init__(self, lock=None):
        self._table: InMemoryTable[EmployeeViolation] = InMemoryTable(lambda v: v.violation_id, lock=lock)

    def get(self, violation_id: str) -> Optional[EmployeeViolation]:
        return self._table.get(violation_id)

    def list_by_employee(self, employee_id: str) -> Sequence[EmployeeViolation]:
        return self._table.select(lambda v: v.employee_id == employee_id)

    def list_by_employees(self, employee_ids: Collection[str]) -> Sequence[EmployeeViolation]:
        ids = set(employee_ids)
        return self._table.select(lambda v: v.employee_id in ids)

    def add(self, violation: EmployeeViolation) -> EmployeeViolation:
        return self._table.insert(violation)

    def update(self, violation_id: str, **changes: Any) -> Optional[EmployeeViolation]:
        return self._table.update(violation_id, **changes)

    def delete(self, violation_id: str) -> bool:
        return self._table.delete(violation_id)
