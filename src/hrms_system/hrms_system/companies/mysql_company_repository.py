from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import CompanyStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, insert_row, record_values, update_row
from .model import Company
from .repository import CompanyRepository

_COLUMNS = """
    company_id, name, status, industry, description, address, phone, email, website,
    commercial_registration_number, tax_number, established_date, created_at, updated_at
"""


def _to_company(r: dict) -> Company:
    return Company(
        company_id=r["company_id"],
        name=r["name"],
        status=CompanyStatus(r["status"]),
        created_at=r["created_at"],
        updated_at=r["updated_at"],
        industry=r.get("industry"),
        description=r.get("description"),
        address=r.get("address"),
        phone=r.get("phone"),
        email=r.get("email"),
        website=r.get("website"),
        commercial_registration_number=r.get("commercial_registration_number"),
        tax_number=r.get("tax_number"),
        established_date=r.get("established_date"),
    )


class MySQLCompanyRepository(CompanyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, company_id: str) -> Optional[Company]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM companies WHERE company_id=%s", (company_id,))
            r = fetchone(cur)
            return _to_company(r) if r else None

    def list_all(self) -> Sequence[Company]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM companies ORDER BY seq")
            return [_to_company(r) for r in fetchall(cur)]

    def add(self, company: Company) -> Company:
        with db_cursor(self._conn_factory) as (_, cur):
            insert_row(cur, "companies", record_values(company))
        return company

    def update(self, company_id: str, **changes: Any) -> Optional[Company]:
        with db_cursor(self._conn_factory) as (_, cur):
            if not update_row(cur, "companies", "company_id", company_id, changes):
                return None
            cur.execute(f"SELECT {_COLUMNS} FROM companies WHERE company_id=%s", (company_id,))
            return _to_company(fetchone(cur))

    def delete(self, company_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM companies WHERE company_id=%s", (company_id,))
            return cur.rowcount > 0
