from __future__ import annotations

from datetime import datetime
from typing import Collection, Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import EmployeeLeave


class LeaveRepository(Protocol):
    def get(self, leave_id: str) -> Optional[EmployeeLeave]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[EmployeeLeave]:
        raise NotImplementedError

    def list_by_employees(
        self,
        employee_ids: Collection[str],
        *,
        status: Optional[LeaveStatus] = None,
    ) -> Sequence[EmployeeLeave]:
        raise NotImplementedError

    def add(self, leave: EmployeeLeave) -> EmployeeLeave:
        raise NotImplementedError

    def decide(
        self,
        leave_id: str,
        *,
        status: LeaveStatus,
        approver_id: str,
        decided_at: datetime,
        rejection_reason: Optional[str] = None,
    ) -> Optional[EmployeeLeave]:
        """Move a PENDING leave to `status`; None when missing or not pending."""

        raise NotImplementedError
