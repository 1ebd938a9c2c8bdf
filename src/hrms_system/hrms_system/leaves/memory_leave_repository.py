from __future__ import annotations

from datetime import datetime
from typing import Collection, Optional, Sequence

from ..core.enums import LeaveStatus
from ..database.memory_base import InMemoryTable
from .model import EmployeeLeave
from .repository import LeaveRepository


class InMemoryLeaveRepository(LeaveRepository):
    def __init__(self, lock=None):
        self._table: InMemoryTable[EmployeeLeave] = InMemoryTable(lambda lv: lv.leave_id, lock=lock)

    def get(self, leave_id: str) -> Optional[EmployeeLeave]:
        return self._table.get(leave_id)

    def list_by_employee(self, employee_id: str) -> Sequence[EmployeeLeave]:
        return self._table.select(lambda lv: lv.employee_id == employee_id)

    def list_by_employees(
        self,
        employee_ids: Collection[str],
        *,
        status: Optional[LeaveStatus] = None,
    ) -> Sequence[EmployeeLeave]:
        ids = set(employee_ids)
        return self._table.select(lambda lv: lv.employee_id in ids and (status is None or lv.status == status))

    def add(self, leave: EmployeeLeave) -> EmployeeLeave:
        return self._table.insert(leave)

    def decide(
        self,
        leave_id: str,
        *,
        status: LeaveStatus,
        approver_id: str,
        decided_at: datetime,
        rejection_reason: Optional[str] = None,
    ) -> Optional[EmployeeLeave]:
        return self._table.update_where(
            leave_id,
            lambda lv: lv.status == LeaveStatus.PENDING,
            status=status,
            approver_id=approver_id,
            decided_at=decided_at,
            rejection_reason=rejection_reason,
            updated_at=decided_at,
        )
