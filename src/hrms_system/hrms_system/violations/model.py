from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..employees.model import Employee


@dataclass(frozen=True)
class EmployeeViolation:
    violation_id: str
    employee_id: str
    violation_type: str
    violation_date: date
    reported_by: str
    created_at: datetime
    updated_at: datetime
    action_taken: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class ViolationWithEmployee:
    violation: EmployeeViolation
    employee: Employee
