from __future__ import annotations

from typing import Any, Collection, Optional, Protocol, Sequence

from .model import EmployeeDeduction


class DeductionRepository(Protocol):
    def get(self, deduction_id: str) -> Optional[EmployeeDeduction]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[EmployeeDeduction]:
        raise NotImplementedError

    def list_by_employees(self, employee_ids: Collection[str]) -> Sequence[EmployeeDeduction]:
        raise NotImplementedError

    def add(self, deduction: EmployeeDeduction) -> EmployeeDeduction:
        raise NotImplementedError

    def update(self, deduction_id: str, **changes: Any) -> Optional[EmployeeDeduction]:
        raise NotImplementedError

    def delete(self, deduction_id: str) -> bool:
        raise NotImplementedError
