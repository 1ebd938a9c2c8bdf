from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Mapping, Sequence

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import as_date, as_optional_text, as_text, coerce_fields, require_fields, require_non_empty
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .model import EmployeeViolation, ViolationWithEmployee
from .repository import ViolationRepository

VIOLATION_FIELDS = {
    "employee_id": as_text,
    "violation_type": as_text,
    "violation_date": as_date,
    "action_taken": as_optional_text,
    "notes": as_optional_text,
}

UPDATABLE_VIOLATION_FIELDS = {k: v for k, v in VIOLATION_FIELDS.items() if k != "employee_id"}


class ViolationService:
    def __init__(
        self,
        violations: ViolationRepository,
        employees: EmployeeRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._violations = violations
        self._employees = employees
        self._clock = clock

    def get_employee_violations(self, employee_id: str) -> Sequence[EmployeeViolation]:
        return self._violations.list_by_employee(employee_id)

    def get_company_violations(self, company_id: str) -> list[ViolationWithEmployee]:
        employees = {
            e.employee_id: e for e in self._employees.list_by_company(company_id, include_archived=True)
        }
        if not employees:
            return []
        return [
            ViolationWithEmployee(violation=v, employee=employees[v.employee_id])
            for v in self._violations.list_by_employees(list(employees))
        ]

    def create_violation(self, data: Mapping[str, Any], reported_by: str) -> EmployeeViolation:
        reported_by = require_non_empty(reported_by, "reported_by")
        values = coerce_fields(data, VIOLATION_FIELDS, entity="violation")
        require_fields(values, ["employee_id", "violation_type"])
        if not self._employees.get(values["employee_id"]):
            raise NotFoundError(f"Employee {values['employee_id']} not found")

        now = self._clock()
        values.setdefault("violation_date", now.date())
        violation = EmployeeViolation(
            violation_id=new_id(),
            reported_by=reported_by,
            created_at=now,
            updated_at=now,
            **values,
        )
        return self._violations.add(violation)

    def update_violation(self, violation_id: str, changes: Mapping[str, Any]) -> EmployeeViolation:
        values = coerce_fields(changes, UPDATABLE_VIOLATION_FIELDS, entity="violation")
        updated = self._violations.update(violation_id, **values, updated_at=self._clock())
        if not updated:
            raise NotFoundError(f"Violation {violation_id} not found")
        return updated

    def delete_violation(self, violation_id: str) -> None:
        self._violations.delete(violation_id)
