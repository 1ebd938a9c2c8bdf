from __future__ import annotations

from enum import Enum


class CompanyStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class CompanyRole(str, Enum):
    """Role of a user inside one company (membership scoped)."""

    SUPER_ADMIN = "super_admin"
    COMPANY_MANAGER = "company_manager"
    SUPERVISOR = "supervisor"
    EMPLOYEE = "employee"
    WORKER = "worker"


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ON_LEAVE = "on_leave"
    TERMINATED = "terminated"
    ARCHIVED = "archived"


class EmployeeType(str, Enum):
    CITIZEN = "citizen"
    EXPATRIATE = "expatriate"


class LicenseStatus(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    PENDING = "pending"


class LicenseType(str, Enum):
    MAIN = "main"
    BRANCH = "branch"


class LeaveStatus(str, Enum):
    """Leave approval flow: PENDING moves once to APPROVED or REJECTED."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class LeaveType(str, Enum):
    ANNUAL = "annual"
    SICK = "sick"
    MATERNITY = "maternity"
    EMERGENCY = "emergency"
    UNPAID = "unpaid"


class DocumentType(str, Enum):
    PASSPORT = "passport"
    RESIDENCE = "residence"
    LICENSE = "license"
    CONTRACT = "contract"
    CERTIFICATE = "certificate"
    OTHER = "other"


class EntityType(str, Enum):
    """Kinds of records a document can be attached to."""

    EMPLOYEE = "employee"
    COMPANY = "company"
    LICENSE = "license"


class NotificationType(str, Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    ERROR = "error"
