from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType
from ..employees.model import Employee


@dataclass(frozen=True)
class EmployeeLeave:
    leave_id: str
    employee_id: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    days: int
    status: LeaveStatus
    created_at: datetime
    updated_at: datetime
    reason: Optional[str] = None
    approver_id: Optional[str] = None
    decided_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None


@dataclass(frozen=True)
class LeaveWithEmployee:
    leave: EmployeeLeave
    employee: Employee
