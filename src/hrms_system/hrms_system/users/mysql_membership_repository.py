from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import CompanyRole
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, insert_row, load_json_list, record_values, update_row
from .membership_repository import MembershipRepository
from .model import CompanyUser

_COLUMNS = "membership_id, user_id, company_id, role, permissions, joined_at, updated_at"


def _to_membership(r: dict) -> CompanyUser:
    return CompanyUser(
        membership_id=r["membership_id"],
        user_id=r["user_id"],
        company_id=r["company_id"],
        role=CompanyRole(r["role"]),
        joined_at=r["joined_at"],
        updated_at=r["updated_at"],
        permissions=load_json_list(r.get("permissions")),
    )


class MySQLMembershipRepository(MembershipRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, cur, where: str, params: tuple) -> list[CompanyUser]:
        cur.execute(f"SELECT {_COLUMNS} FROM company_users WHERE {where} ORDER BY seq", params)
        return [_to_membership(r) for r in fetchall(cur)]

    def get_for(self, user_id: str, company_id: str) -> Optional[CompanyUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            rows = self._select(cur, "user_id=%s AND company_id=%s", (user_id, company_id))
            return rows[0] if rows else None

    def list_by_user(self, user_id: str) -> Sequence[CompanyUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select(cur, "user_id=%s", (user_id,))

    def list_by_company(self, company_id: str) -> Sequence[CompanyUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select(cur, "company_id=%s", (company_id,))

    def add(self, membership: CompanyUser) -> CompanyUser:
        with db_cursor(self._conn_factory) as (_, cur):
            insert_row(cur, "company_users", record_values(membership))
        return membership

    def update(self, membership_id: str, **changes: Any) -> Optional[CompanyUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            if not update_row(cur, "company_users", "membership_id", membership_id, changes):
                return None
            return self._select(cur, "membership_id=%s", (membership_id,))[0]

    def delete(self, membership_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM company_users WHERE membership_id=%s", (membership_id,))
            return cur.rowcount > 0

    def delete_by_company(self, company_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM company_users WHERE company_id=%s", (company_id,))
            return int(cur.rowcount)
