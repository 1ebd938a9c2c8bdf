from __future__ import annotations

from typing import Any, Collection, Optional, Protocol, Sequence

from .model import EmployeeViolation


class ViolationRepository(Protocol):
    def get(self, violation_id: str) -> Optional[EmployeeViolation]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[EmployeeViolation]:
        raise NotImplementedError

    def list_by_employees(self, employee_ids: Collection[str]) -> Sequence[EmployeeViolation]:
        raise NotImplementedError

    def add(self, violation: EmployeeViolation) -> EmployeeViolation:
        raise NotImplementedError

    def update(self, violation_id: str, **changes: Any) -> Optional[EmployeeViolation]:
        raise NotImplementedError

    def delete(self, violation_id: str) -> bool:
        raise NotImplementedError
