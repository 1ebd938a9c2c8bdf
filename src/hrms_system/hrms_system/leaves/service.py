from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Sequence

from ..common.datetime_utils import inclusive_days, now_local
from ..common.ids import new_id
from ..common.validators import (
    as_date,
    as_optional_int,
    as_optional_text,
    as_text,
    coerce_fields,
    enum_of,
    require_date_order,
    require_fields,
    require_non_empty,
)
from ..core.enums import LeaveStatus, LeaveType
from ..core.exceptions import InvalidTransitionError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import EmployeeLeave, LeaveWithEmployee
from .repository import LeaveRepository

LEAVE_FIELDS = {
    "employee_id": as_text,
    "leave_type": enum_of(LeaveType),
    "start_date": as_date,
    "end_date": as_date,
    "days": as_optional_int,
    "reason": as_optional_text,
}


class LeaveService:
    def __init__(
        self,
        leaves: LeaveRepository,
        employees: EmployeeRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._leaves = leaves
        self._employees = employees
        self._clock = clock

    def get_employee_leaves(self, employee_id: str) -> Sequence[EmployeeLeave]:
        return self._leaves.list_by_employee(employee_id)

    def get_company_leaves(
        self,
        company_id: str,
        status: Optional[LeaveStatus] = None,
    ) -> list[LeaveWithEmployee]:
        employees = {
            e.employee_id: e for e in self._employees.list_by_company(company_id, include_archived=True)
        }
        if not employees:
            return []
        return [
            LeaveWithEmployee(leave=lv, employee=employees[lv.employee_id])
            for lv in self._leaves.list_by_employees(list(employees), status=status)
        ]

    def get_leave(self, leave_id: str) -> Optional[EmployeeLeave]:
        return self._leaves.get(leave_id)

    def create_leave(self, data: Mapping[str, Any]) -> EmployeeLeave:
        """New leave requests always start pending; `days` defaults to the inclusive span."""

        if "status" in data:
            raise ValidationError("A new leave always starts as pending")
        values = coerce_fields(data, LEAVE_FIELDS, entity="leave")
        require_fields(values, ["employee_id", "start_date", "end_date"])
        require_date_order(values["start_date"], values["end_date"])

        employee_id = values.pop("employee_id")
        if not self._employees.get(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")

        if values.get("days") is None:
            values["days"] = inclusive_days(values["start_date"], values["end_date"])
        if values["days"] <= 0:
            raise ValidationError("days must be greater than zero")
        values.setdefault("leave_type", LeaveType.ANNUAL)

        now = self._clock()
        leave = EmployeeLeave(
            leave_id=new_id(),
            employee_id=employee_id,
            status=LeaveStatus.PENDING,
            created_at=now,
            updated_at=now,
            **values,
        )
        return self._leaves.add(leave)

    def approve_leave(self, leave_id: str, approver_id: str) -> EmployeeLeave:
        approver_id = require_non_empty(approver_id, "approver_id")
        return self._decide(leave_id, status=LeaveStatus.APPROVED, approver_id=approver_id)

    def reject_leave(self, leave_id: str, approver_id: str, reason: Optional[str] = None) -> EmployeeLeave:
        approver_id = require_non_empty(approver_id, "approver_id")
        reason = as_optional_text(reason, "reason")
        return self._decide(leave_id, status=LeaveStatus.REJECTED, approver_id=approver_id, rejection_reason=reason)

    def _decide(self, leave_id: str, **decision) -> EmployeeLeave:
        decided = self._leaves.decide(leave_id, decided_at=self._clock(), **decision)
        if decided:
            return decided

        current = self._leaves.get(leave_id)
        if not current:
            raise NotFoundError(f"Leave {leave_id} not found")
        raise InvalidTransitionError(f"Leave {leave_id} is already {current.status.value}")
