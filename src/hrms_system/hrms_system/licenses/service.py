from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, ContextManager, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import (
    as_optional_date,
    as_optional_text,
    as_text,
    coerce_fields,
    enum_of,
    require_fields,
)
from ..companies.model import Company
from ..companies.repository import CompanyRepository
from ..core.enums import LicenseStatus, LicenseType
from ..core.exceptions import NotFoundError, ValidationError
from ..documents.model import Document, LicenseAttachment
from ..documents.repository import DocumentRepository
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import License
from .repository import LicenseRepository

LICENSE_FIELDS = {
    "name": as_text,
    "license_number": as_optional_text,
    "license_type": enum_of(LicenseType),
    "status": enum_of(LicenseStatus),
    "issuing_authority": as_optional_text,
    "issue_date": as_optional_date,
    "expiry_date": as_optional_date,
    "address": as_optional_text,
    "description": as_optional_text,
}


@dataclass(frozen=True)
class LicenseDetails:
    license: License
    company: Optional[Company]
    employee_count: int
    employees: list[Employee]
    documents: list[Document]


class LicenseService:
    def __init__(
        self,
        licenses: LicenseRepository,
        companies: CompanyRepository,
        employees: EmployeeRepository,
        documents: DocumentRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        atomic: Callable[[], ContextManager[Any]] = nullcontext,
    ):
        self._licenses = licenses
        self._companies = companies
        self._employees = employees
        self._documents = documents
        self._clock = clock
        self._atomic = atomic

    def get_company_licenses(self, company_id: str) -> Sequence[License]:
        return self._licenses.list_by_company(company_id)

    def get_license(self, license_id: str) -> Optional[LicenseDetails]:
        """License joined with its company and holders; None when absent."""

        license = self._licenses.get(license_id)
        if not license:
            return None

        employees = list(self._employees.list_by_license(license_id))
        return LicenseDetails(
            license=license,
            company=self._companies.get(license.company_id),
            employee_count=len(employees),
            employees=employees,
            documents=list(self._documents.list_by_attachment(LicenseAttachment(license_id))),
        )

    def create_license(self, company_id: str, data: Mapping[str, Any]) -> License:
        values = coerce_fields(data, LICENSE_FIELDS, entity="license")
        require_fields(values, ["name"])
        self._check_dates(values.get("issue_date"), values.get("expiry_date"))
        values.setdefault("license_type", LicenseType.MAIN)
        values.setdefault("status", LicenseStatus.ACTIVE)

        with self._atomic():
            if not self._companies.get(company_id):
                raise NotFoundError(f"Company {company_id} not found")
            now = self._clock()
            license = License(license_id=new_id(), company_id=company_id, created_at=now, updated_at=now, **values)
            return self._licenses.add(license)

    def update_license(self, license_id: str, changes: Mapping[str, Any]) -> License:
        values = coerce_fields(changes, LICENSE_FIELDS, entity="license")
        current = self._licenses.get(license_id)
        if not current:
            raise NotFoundError(f"License {license_id} not found")
        self._check_dates(
            values.get("issue_date", current.issue_date),
            values.get("expiry_date", current.expiry_date),
        )

        updated = self._licenses.update(license_id, **values, updated_at=self._clock())
        if not updated:
            raise NotFoundError(f"License {license_id} not found")
        return updated

    def delete_license(self, license_id: str) -> None:
        """Idempotent. Holders are detached and license documents removed."""

        with self._atomic():
            if not self._licenses.get(license_id):
                return
            self._employees.detach_license(license_id, updated_at=self._clock())
            self._documents.delete_by_attachment(LicenseAttachment(license_id))
            self._licenses.delete(license_id)

    @staticmethod
    def _check_dates(issue_date, expiry_date) -> None:
        if issue_date and expiry_date and expiry_date < issue_date:
            raise ValidationError("expiry_date must be on or after issue_date")
