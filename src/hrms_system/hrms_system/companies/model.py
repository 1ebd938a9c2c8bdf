from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import CompanyStatus


@dataclass(frozen=True)
class Company:
    """Tenant root: owns employees and licenses through `company_id`."""

    company_id: str
    name: str
    status: CompanyStatus
    created_at: datetime
    updated_at: datetime
    industry: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    commercial_registration_number: Optional[str] = None
    tax_number: Optional[str] = None
    established_date: Optional[date] = None


@dataclass(frozen=True)
class CompanyStats:
    """Derived counters, computed on read from the current snapshot."""

    total_employees: int
    active_employees: int
    pending_leaves: int
    expiring_licenses: int


@dataclass(frozen=True)
class CompanyWithStats:
    company: Company
    employee_count: int
    active_employees: int
    license_count: int


@dataclass(frozen=True)
class SystemStats:
    total_companies: int
    total_employees: int
    total_licenses: int
    expiring_licenses: int
