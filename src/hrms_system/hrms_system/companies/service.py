from __future__ import annotations

from contextlib import nullcontext
from datetime import datetime
from typing import Any, Callable, ContextManager, Mapping, Optional, Sequence

from ..common.datetime_utils import days_ahead, now_local
from ..common.ids import new_id
from ..common.validators import (
    as_optional_date,
    as_optional_text,
    as_text,
    coerce_fields,
    enum_of,
    require_fields,
)
from ..core.constants import EXPIRING_LICENSE_DAYS
from ..core.enums import CompanyStatus, EmployeeStatus, LeaveStatus
from ..core.exceptions import ConflictError, NotFoundError
from ..documents.model import CompanyAttachment
from ..documents.repository import DocumentRepository
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository
from ..licenses.repository import LicenseRepository
from ..notifications.repository import NotificationRepository
from ..users.membership_repository import MembershipRepository
from .model import Company, CompanyStats, CompanyWithStats, SystemStats
from .repository import CompanyRepository

COMPANY_FIELDS = {
    "name": as_text,
    "status": enum_of(CompanyStatus),
    "industry": as_optional_text,
    "description": as_optional_text,
    "address": as_optional_text,
    "phone": as_optional_text,
    "email": as_optional_text,
    "website": as_optional_text,
    "commercial_registration_number": as_optional_text,
    "tax_number": as_optional_text,
    "established_date": as_optional_date,
}


class CompanyService:
    """Use cases around the tenant root: CRUD plus derived statistics."""

    def __init__(
        self,
        companies: CompanyRepository,
        employees: EmployeeRepository,
        licenses: LicenseRepository,
        leaves: LeaveRepository,
        memberships: MembershipRepository,
        documents: DocumentRepository,
        notifications: NotificationRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        atomic: Callable[[], ContextManager[Any]] = nullcontext,
    ):
        self._companies = companies
        self._employees = employees
        self._licenses = licenses
        self._leaves = leaves
        self._memberships = memberships
        self._documents = documents
        self._notifications = notifications
        self._clock = clock
        self._atomic = atomic

    def get_all_companies(self) -> Sequence[Company]:
        return self._companies.list_all()

    def get_company(self, company_id: str) -> Optional[Company]:
        return self._companies.get(company_id)

    def list_companies_with_stats(self) -> list[CompanyWithStats]:
        out: list[CompanyWithStats] = []
        for company in self._companies.list_all():
            employees = self._employees.list_by_company(company.company_id)
            out.append(
                CompanyWithStats(
                    company=company,
                    employee_count=len(employees),
                    active_employees=sum(1 for e in employees if e.status == EmployeeStatus.ACTIVE),
                    license_count=len(self._licenses.list_by_company(company.company_id)),
                )
            )
        return out

    def create_company(self, data: Mapping[str, Any]) -> Company:
        values = coerce_fields(data, COMPANY_FIELDS, entity="company")
        require_fields(values, ["name"])
        values.setdefault("status", CompanyStatus.ACTIVE)

        now = self._clock()
        company = Company(company_id=new_id(), created_at=now, updated_at=now, **values)
        return self._companies.add(company)

    def update_company(self, company_id: str, changes: Mapping[str, Any]) -> Company:
        values = coerce_fields(changes, COMPANY_FIELDS, entity="company")
        updated = self._companies.update(company_id, **values, updated_at=self._clock())
        if not updated:
            raise NotFoundError(f"Company {company_id} not found")
        return updated

    def delete_company(self, company_id: str) -> None:
        """Remove a company that no longer owns employees or licenses.

        Memberships, company documents and company-scoped notifications go
        with it. Unknown ids are a no-op.
        """

        with self._atomic():
            if not self._companies.get(company_id):
                return
            if self._employees.list_by_company(company_id, include_archived=True):
                raise ConflictError("Company still has employees (archived included)")
            if self._licenses.list_by_company(company_id):
                raise ConflictError("Company still has licenses")

            self._memberships.delete_by_company(company_id)
            self._documents.delete_by_attachment(CompanyAttachment(company_id))
            self._notifications.delete_by_company(company_id)
            self._companies.delete(company_id)

    def get_company_stats(self, company_id: str, *, now: Optional[datetime] = None) -> CompanyStats:
        now = now or self._clock()
        cutoff = days_ahead(now, EXPIRING_LICENSE_DAYS)

        employees = self._employees.list_by_company(company_id, include_archived=True)
        employee_ids = [e.employee_id for e in employees]
        pending = self._leaves.list_by_employees(employee_ids, status=LeaveStatus.PENDING) if employee_ids else []
        licenses = self._licenses.list_by_company(company_id)

        return CompanyStats(
            total_employees=len(employees),
            active_employees=sum(1 for e in employees if e.status == EmployeeStatus.ACTIVE),
            pending_leaves=len(pending),
            expiring_licenses=sum(1 for lic in licenses if lic.is_expiring(cutoff)),
        )

    def get_system_stats(self, *, now: Optional[datetime] = None) -> SystemStats:
        now = now or self._clock()
        cutoff = days_ahead(now, EXPIRING_LICENSE_DAYS)
        licenses = self._licenses.list_all()
        return SystemStats(
            total_companies=len(self._companies.list_all()),
            total_employees=len(self._employees.list_all(include_archived=False)),
            total_licenses=len(licenses),
            expiring_licenses=sum(1 for lic in licenses if lic.is_expiring(cutoff)),
        )
