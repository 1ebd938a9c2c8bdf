from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..core.enums import EmployeeStatus, EmployeeType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, insert_row, record_values, update_row
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, company_id, license_id, full_name, status, civil_id, nationality,
    employee_type, job_title, hire_date, monthly_salary, phone, email, address, notes,
    archived_at, archive_reason, created_at, updated_at
"""


def _to_employee(r: dict) -> Employee:
    salary = r.get("monthly_salary")
    return Employee(
        employee_id=r["employee_id"],
        company_id=r["company_id"],
        full_name=r["full_name"],
        status=EmployeeStatus(r["status"]),
        created_at=r["created_at"],
        updated_at=r["updated_at"],
        license_id=r.get("license_id"),
        civil_id=r.get("civil_id"),
        nationality=r.get("nationality"),
        employee_type=EmployeeType(r["employee_type"]) if r.get("employee_type") else None,
        job_title=r.get("job_title"),
        hire_date=r.get("hire_date"),
        monthly_salary=Decimal(str(salary)) if salary is not None else None,
        phone=r.get("phone"),
        email=r.get("email"),
        address=r.get("address"),
        notes=r.get("notes"),
        archived_at=r.get("archived_at"),
        archive_reason=r.get("archive_reason"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, cur, where: str, params: tuple) -> list[Employee]:
        cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE {where} ORDER BY seq", params)
        return [_to_employee(r) for r in fetchall(cur)]

    def get(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            rows = self._select(cur, "employee_id=%s", (employee_id,))
            return rows[0] if rows else None

    def list_by_company(self, company_id: str, *, include_archived: bool = False) -> Sequence[Employee]:
        where = "company_id=%s"
        params: tuple = (company_id,)
        if not include_archived:
            where += " AND status<>%s"
            params += (EmployeeStatus.ARCHIVED.value,)
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select(cur, where, params)

    def list_by_license(self, license_id: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select(cur, "license_id=%s", (license_id,))

    def list_all(self, *, include_archived: bool = True) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            if include_archived:
                return self._select(cur, "1=1", ())
            return self._select(cur, "status<>%s", (EmployeeStatus.ARCHIVED.value,))

    def add(self, employee: Employee) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            insert_row(cur, "employees", record_values(employee))
        return employee

    def update(self, employee_id: str, **changes: Any) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            if not update_row(cur, "employees", "employee_id", employee_id, changes):
                return None
            return self._select(cur, "employee_id=%s", (employee_id,))[0]

    def archive(self, employee_id: str, *, archived_at: datetime, reason: str) -> Optional[Employee]:
        changes = {
            "status": EmployeeStatus.ARCHIVED,
            "archived_at": archived_at,
            "archive_reason": reason,
            "updated_at": archived_at,
        }
        with db_cursor(self._conn_factory) as (_, cur):
            matched = update_row(
                cur,
                "employees",
                "employee_id",
                employee_id,
                changes,
                where="AND status<>%s",
                params=(EmployeeStatus.ARCHIVED.value,),
            )
            if not matched:
                return None
            return self._select(cur, "employee_id=%s", (employee_id,))[0]

    def detach_license(self, license_id: str, *, updated_at: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET license_id=NULL, updated_at=%s WHERE license_id=%s",
                (updated_at, license_id),
            )
            return int(cur.rowcount)
