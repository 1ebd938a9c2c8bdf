from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, ContextManager, Mapping, Optional, Sequence

from ..common.datetime_utils import newest_first, now_local
from ..common.ids import new_id
from ..common.validators import (
    as_optional_date,
    as_optional_decimal,
    as_optional_text,
    as_text,
    coerce_fields,
    enum_of,
    require_fields,
    require_non_empty,
)
from ..companies.model import Company
from ..companies.repository import CompanyRepository
from ..core.constants import RECENT_LEAVES_LIMIT
from ..core.enums import EmployeeStatus, EmployeeType
from ..core.exceptions import InvalidTransitionError, NotFoundError, ValidationError
from ..leaves.model import EmployeeLeave
from ..leaves.repository import LeaveRepository
from ..licenses.model import License
from ..licenses.repository import LicenseRepository
from ..payroll.repository import DeductionRepository
from ..violations.repository import ViolationRepository
from .model import Employee
from .repository import EmployeeRepository

EMPLOYEE_FIELDS = {
    "full_name": as_text,
    "status": enum_of(EmployeeStatus),
    "license_id": as_optional_text,
    "civil_id": as_optional_text,
    "nationality": as_optional_text,
    "employee_type": enum_of(EmployeeType),
    "job_title": as_optional_text,
    "hire_date": as_optional_date,
    "monthly_salary": as_optional_decimal,
    "phone": as_optional_text,
    "email": as_optional_text,
    "address": as_optional_text,
    "notes": as_optional_text,
}


@dataclass(frozen=True)
class EmployeeDetails:
    """Read-model for the employee profile page."""

    employee: Employee
    company: Optional[Company]
    license: Optional[License]
    recent_leaves: list[EmployeeLeave]
    total_deductions: int
    total_violations: int


class EmployeeService:
    def __init__(
        self,
        employees: EmployeeRepository,
        companies: CompanyRepository,
        licenses: LicenseRepository,
        leaves: LeaveRepository,
        deductions: DeductionRepository,
        violations: ViolationRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        atomic: Callable[[], ContextManager[Any]] = nullcontext,
    ):
        self._employees = employees
        self._companies = companies
        self._licenses = licenses
        self._leaves = leaves
        self._deductions = deductions
        self._violations = violations
        self._clock = clock
        self._atomic = atomic

    def get_company_employees(self, company_id: str, include_archived: bool = False) -> Sequence[Employee]:
        return self._employees.list_by_company(company_id, include_archived=include_archived)

    def get_employees_by_license(self, license_id: str) -> Sequence[Employee]:
        return self._employees.list_by_license(license_id)

    def get_employee(self, employee_id: str) -> Optional[EmployeeDetails]:
        employee = self._employees.get(employee_id)
        if not employee:
            return None

        license = self._licenses.get(employee.license_id) if employee.license_id else None
        leaves = newest_first(self._leaves.list_by_employee(employee_id), key=lambda lv: lv.created_at)
        return EmployeeDetails(
            employee=employee,
            company=self._companies.get(employee.company_id),
            license=license,
            recent_leaves=leaves[:RECENT_LEAVES_LIMIT],
            total_deductions=len(self._deductions.list_by_employee(employee_id)),
            total_violations=len(self._violations.list_by_employee(employee_id)),
        )

    def create_employee(self, company_id: str, data: Mapping[str, Any]) -> Employee:
        values = coerce_fields(data, EMPLOYEE_FIELDS, entity="employee")
        require_fields(values, ["full_name"])
        status = values.setdefault("status", EmployeeStatus.ACTIVE)
        if status == EmployeeStatus.ARCHIVED:
            raise ValidationError("Use the archive operation to archive an employee")

        with self._atomic():
            if not self._companies.get(company_id):
                raise NotFoundError(f"Company {company_id} not found")
            self._check_license(company_id, values.get("license_id"))

            now = self._clock()
            employee = Employee(employee_id=new_id(), company_id=company_id, created_at=now, updated_at=now, **values)
            return self._employees.add(employee)

    def update_employee(self, employee_id: str, changes: Mapping[str, Any]) -> Employee:
        """Merge field changes. Archived employees keep their status."""

        values = coerce_fields(changes, EMPLOYEE_FIELDS, entity="employee")
        if values.get("status") == EmployeeStatus.ARCHIVED:
            raise ValidationError("Use the archive operation to archive an employee")

        with self._atomic():
            current = self._employees.get(employee_id)
            if not current:
                raise NotFoundError(f"Employee {employee_id} not found")
            if "status" in values and current.is_archived:
                raise InvalidTransitionError(f"Employee {employee_id} is archived")
            if values.get("license_id"):
                self._check_license(current.company_id, values["license_id"])

            updated = self._employees.update(employee_id, **values, updated_at=self._clock())
            if not updated:
                raise NotFoundError(f"Employee {employee_id} not found")
            return updated

    def archive_employee(self, employee_id: str, reason: str, *, now: Optional[datetime] = None) -> Employee:
        """Soft delete. Archiving twice keeps the first archive time and reason."""

        reason = require_non_empty(reason, "reason")
        archived = self._employees.archive(employee_id, archived_at=now or self._clock(), reason=reason)
        if archived:
            return archived

        current = self._employees.get(employee_id)
        if not current:
            raise NotFoundError(f"Employee {employee_id} not found")
        return current

    def _check_license(self, company_id: str, license_id: Optional[str]) -> None:
        if not license_id:
            return
        license = self._licenses.get(license_id)
        if not license:
            raise ValidationError(f"License {license_id} does not exist")
        if license.company_id != company_id:
            raise ValidationError("License belongs to a different company")
