from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import EmployeeStatus, EmployeeType


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    `archived_at` / `archive_reason` are only ever set by the archive operation;
    archived employees stay stored (soft delete).
    """

    employee_id: str
    company_id: str
    full_name: str
    status: EmployeeStatus
    created_at: datetime
    updated_at: datetime
    license_id: Optional[str] = None
    civil_id: Optional[str] = None
    nationality: Optional[str] = None
    employee_type: Optional[EmployeeType] = None
    job_title: Optional[str] = None
    hire_date: Optional[date] = None
    monthly_salary: Optional[Decimal] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    archived_at: Optional[datetime] = None
    archive_reason: Optional[str] = None

    @property
    def is_archived(self) -> bool:
        return self.status == EmployeeStatus.ARCHIVED
