from __future__ import annotations

from typing import Any, Collection, Optional, Sequence

from ..database.memory_base import InMemoryTable
from .model import EmployeeDeduction
from .repository import DeductionRepository


class InMemoryDeductionRepository(DeductionRepository):
    def __init__(self, lock=None):
        self._table: InMemoryTable[EmployeeDeduction] = InMemoryTable(lambda d: d.deduction_id, lock=lock)

    def get(self, deduction_id: str) -> Optional[EmployeeDeduction]:
        return self._table.get(deduction_id)

    def list_by_employee(self, employee_id: str) -> Sequence[EmployeeDeduction]:
        return self._table.select(lambda d: d.employee_id == employee_id)

    def list_by_employees(self, employee_ids: Collection[str]) -> Sequence[EmployeeDeduction]:
        ids = set(employee_ids)
        return self._table.select(lambda d: d.employee_id in ids)

    def add(self, deduction: EmployeeDeduction) -> EmployeeDeduction:
        return self._table.insert(deduction)

    def update(self, deduction_id: str, **changes: Any) -> Optional[EmployeeDeduction]:
        return self._table.update(deduction_id, **changes)

    def delete(self, deduction_id: str) -> bool:
        return self._table.delete(deduction_id)
