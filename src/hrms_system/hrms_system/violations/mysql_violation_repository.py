from __future__ import annotations

from typing import Any, Collection, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause, insert_row, record_values, update_row
from .model import EmployeeViolation
from .repository import ViolationRepository

_COLUMNS = """
    violation_id, employee_id, violation_type, violation_date, action_taken, notes,
    reported_by, created_at, updated_at
"""


def _to_violation(r: dict) -> EmployeeViolation:
    return EmployeeViolation(
        violation_id=r["violation_id"],
        employee_id=r["employee_id"],
        violation_type=r["violation_type"],
        violation_date=r["violation_date"],
        reported_by=r["reported_by"],
        created_at=r["created_at"],
        updated_at=r["updated_at"],
        action_taken=r.get("action_taken"),
        notes=r.get("notes"),
    )


class MySQLViolationRepository(ViolationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, cur, where: str, params: tuple) -> list[EmployeeViolation]:
        cur.execute(f"SELECT {_COLUMNS} FROM employee_violations WHERE {where} ORDER BY seq", params)
        return [_to_violation(r) for r in fetchall(cur)]

    def get(self, violation_id: str) -> Optional[EmployeeViolation]:
        with db_cursor(self._conn_factory) as (_, cur):
            rows = self._select(cur, "violation_id=%s", (violation_id,))
            return rows[0] if rows else None

    def list_by_employee(self, employee_id: str) -> Sequence[EmployeeViolation]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select(cur, "employee_id=%s", (employee_id,))

    def list_by_employees(self, employee_ids: Collection[str]) -> Sequence[EmployeeViolation]:
        ids = list(employee_ids)
        if not ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select(cur, f"employee_id IN ({in_clause(ids)})", tuple(ids))

    def add(self, violation: EmployeeViolation) -> EmployeeViolation:
        with db_cursor(self._conn_factory) as (_, cur):
            insert_row(cur, "employee_violations", record_values(violation))
        return violation

    def update(self, violation_id: str, **changes: Any) -> Optional[EmployeeViolation]:
        with db_cursor(self._conn_factory) as (_, cur):
            if not update_row(cur, "employee_violations", "violation_id", violation_id, changes):
                return None
            return self._select(cur, "violation_id=%s", (violation_id,))[0]

    def delete(self, violation_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employee_violations WHERE violation_id=%s", (violation_id,))
            return cur.rowcount > 0
