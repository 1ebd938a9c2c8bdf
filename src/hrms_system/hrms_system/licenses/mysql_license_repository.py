from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import LicenseStatus, LicenseType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, insert_row, record_values, update_row
from .model import License
from .repository import LicenseRepository

_COLUMNS = """
    license_id, company_id, name, license_number, license_type, status, issuing_authority,
    issue_date, expiry_date, address, description, created_at, updated_at
"""


def _to_license(r: dict) -> License:
    return License(
        license_id=r["license_id"],
        company_id=r["company_id"],
        name=r["name"],
        license_type=LicenseType(r["license_type"]),
        status=LicenseStatus(r["status"]),
        created_at=r["created_at"],
        updated_at=r["updated_at"],
        license_number=r.get("license_number"),
        issuing_authority=r.get("issuing_authority"),
        issue_date=r.get("issue_date"),
        expiry_date=r.get("expiry_date"),
        address=r.get("address"),
        description=r.get("description"),
    )


class MySQLLicenseRepository(LicenseRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, cur, where: str, params: tuple) -> list[License]:
        cur.execute(f"SELECT {_COLUMNS} FROM licenses WHERE {where} ORDER BY seq", params)
        return [_to_license(r) for r in fetchall(cur)]

    def get(self, license_id: str) -> Optional[License]:
        with db_cursor(self._conn_factory) as (_, cur):
            rows = self._select(cur, "license_id=%s", (license_id,))
            return rows[0] if rows else None

    def list_by_company(self, company_id: str) -> Sequence[License]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select(cur, "company_id=%s", (company_id,))

    def list_all(self) -> Sequence[License]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select(cur, "1=1", ())

    def add(self, license: License) -> License:
        with db_cursor(self._conn_factory) as (_, cur):
            insert_row(cur, "licenses", record_values(license))
        return license

    def update(self, license_id: str, **changes: Any) -> Optional[License]:
        with db_cursor(self._conn_factory) as (_, cur):
            if not update_row(cur, "licenses", "license_id", license_id, changes):
                return None
            return self._select(cur, "license_id=%s", (license_id,))[0]

    def delete(self, license_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM licenses WHERE license_id=%s", (license_id,))
            return cur.rowcount > 0
