from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, ContextManager, Optional

from .common.datetime_utils import now_local
from .companies.memory_company_repository import InMemoryCompanyRepository
from .companies.mysql_company_repository import MySQLCompanyRepository
from .companies.repository import CompanyRepository
from .companies.service import CompanyService
from .database.connection import DBConfig, DatabaseConnection
from .database.memory_base import MemoryStore
from .documents.memory_document_repository import InMemoryDocumentRepository
from .documents.mysql_document_repository import MySQLDocumentRepository
from .documents.repository import DocumentRepository
from .documents.service import DocumentService
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .leaves.memory_leave_repository import InMemoryLeaveRepository
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .licenses.memory_license_repository import InMemoryLicenseRepository
from .licenses.mysql_license_repository import MySQLLicenseRepository
from .licenses.repository import LicenseRepository
from .licenses.service import LicenseService
from .notifications.memory_notification_repository import InMemoryNotificationRepository
from .notifications.mysql_notification_repository import MySQLNotificationRepository
from .notifications.repository import NotificationRepository
from .notifications.service import NotificationService
from .payroll.memory_deduction_repository import InMemoryDeductionRepository
from .payroll.mysql_deduction_repository import MySQLDeductionRepository
from .payroll.repository import DeductionRepository
from .payroll.service import PayrollService
from .users.membership_repository import MembershipRepository
from .users.memory_membership_repository import InMemoryMembershipRepository
from .users.memory_user_repository import InMemoryUserRepository
from .users.mysql_membership_repository import MySQLMembershipRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import UserService
from .violations.memory_violation_repository import InMemoryViolationRepository
from .violations.mysql_violation_repository import MySQLViolationRepository
from .violations.repository import ViolationRepository
from .violations.service import ViolationService

STORAGE_BACKENDS = ("memory", "mysql")


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    companies_repo: CompanyRepository
    users_repo: UserRepository
    memberships_repo: MembershipRepository
    employees_repo: EmployeeRepository
    licenses_repo: LicenseRepository
    leaves_repo: LeaveRepository
    deductions_repo: DeductionRepository
    violations_repo: ViolationRepository
    documents_repo: DocumentRepository
    notifications_repo: NotificationRepository

    company_service: CompanyService
    user_service: UserService
    employee_service: EmployeeService
    license_service: LicenseService
    leave_service: LeaveService
    payroll_service: PayrollService
    violation_service: ViolationService
    document_service: DocumentService
    notification_service: NotificationService


def build_container(
    *,
    storage_backend: str = "memory",
    db_config: Optional[dict] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    """Wire repositories for the chosen backend and the services on top of them.

    Every call returns a fresh, independent store.
    """

    backend = (storage_backend or "memory").strip().lower()
    if backend not in STORAGE_BACKENDS:
        raise ValueError(f"Unknown storage backend: {storage_backend!r}")

    conn: Optional[DatabaseConnection] = None
    atomic: Callable[[], ContextManager[Any]] = nullcontext
    if backend == "mysql":
        if db_config is None:
            raise ValueError("db_config is required for the mysql backend")
        conn = DatabaseConnection(DBConfig.from_dict(db_config))
        companies_repo = MySQLCompanyRepository(conn)
        users_repo = MySQLUserRepository(conn)
        memberships_repo = MySQLMembershipRepository(conn)
        employees_repo = MySQLEmployeeRepository(conn)
        licenses_repo = MySQLLicenseRepository(conn)
        leaves_repo = MySQLLeaveRepository(conn)
        deductions_repo = MySQLDeductionRepository(conn)
        violations_repo = MySQLViolationRepository(conn)
        documents_repo = MySQLDocumentRepository(conn)
        notifications_repo = MySQLNotificationRepository(conn)
    else:
        store = MemoryStore()
        atomic = store.atomic
        companies_repo = InMemoryCompanyRepository(store.lock)
        users_repo = InMemoryUserRepository(store.lock)
        memberships_repo = InMemoryMembershipRepository(store.lock)
        employees_repo = InMemoryEmployeeRepository(store.lock)
        licenses_repo = InMemoryLicenseRepository(store.lock)
        leaves_repo = InMemoryLeaveRepository(store.lock)
        deductions_repo = InMemoryDeductionRepository(store.lock)
        violations_repo = InMemoryViolationRepository(store.lock)
        documents_repo = InMemoryDocumentRepository(store.lock)
        notifications_repo = InMemoryNotificationRepository(store.lock)

    company_service = CompanyService(
        companies_repo,
        employees_repo,
        licenses_repo,
        leaves_repo,
        memberships_repo,
        documents_repo,
        notifications_repo,
        clock=clock,
        atomic=atomic,
    )
    user_service = UserService(users_repo, memberships_repo, companies_repo, clock=clock, atomic=atomic)
    employee_service = EmployeeService(
        employees_repo,
        companies_repo,
        licenses_repo,
        leaves_repo,
        deductions_repo,
        violations_repo,
        clock=clock,
        atomic=atomic,
    )
    license_service = LicenseService(
        licenses_repo, companies_repo, employees_repo, documents_repo, clock=clock, atomic=atomic
    )
    leave_service = LeaveService(leaves_repo, employees_repo, clock=clock)
    payroll_service = PayrollService(deductions_repo, employees_repo, clock=clock)
    violation_service = ViolationService(violations_repo, employees_repo, clock=clock)
    document_service = DocumentService(
        documents_repo, employees_repo, companies_repo, licenses_repo, clock=clock, atomic=atomic
    )
    notification_service = NotificationService(notifications_repo, clock=clock)

    return Container(
        conn=conn,
        companies_repo=companies_repo,
        users_repo=users_repo,
        memberships_repo=memberships_repo,
        employees_repo=employees_repo,
        licenses_repo=licenses_repo,
        leaves_repo=leaves_repo,
        deductions_repo=deductions_repo,
        violations_repo=violations_repo,
        documents_repo=documents_repo,
        notifications_repo=notifications_repo,
        company_service=company_service,
        user_service=user_service,
        employee_service=employee_service,
        license_service=license_service,
        leave_service=leave_service,
        payroll_service=payroll_service,
        violation_service=violation_service,
        document_service=document_service,
        notification_service=notification_service,
    )
