from __future__ import annotations

from decimal import Decimal
from typing import Any, Collection, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause, insert_row, record_values, update_row
from .model import EmployeeDeduction
from .repository import DeductionRepository

_COLUMNS = """
    deduction_id, employee_id, amount, reason, deduction_date, processed_by, notes,
    created_at, updated_at
"""


def _to_deduction(r: dict) -> EmployeeDeduction:
    return EmployeeDeduction(
        deduction_id=r["deduction_id"],
        employee_id=r["employee_id"],
        amount=Decimal(str(r["amount"])),
        reason=r["reason"],
        deduction_date=r["deduction_date"],
        processed_by=r["processed_by"],
        created_at=r["created_at"],
        updated_at=r["updated_at"],
        notes=r.get("notes"),
    )


class MySQLDeductionRepository(DeductionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, cur, where: str, params: tuple) -> list[EmployeeDeduction]:
        cur.execute(f"SELECT {_COLUMNS} FROM employee_deductions WHERE {where} ORDER BY seq", params)
        return [_to_deduction(r) for r in fetchall(cur)]

    def get(self, deduction_id: str) -> Optional[EmployeeDeduction]:
        with db_cursor(self._conn_factory) as (_, cur):
            rows = self._select(cur, "deduction_id=%s", (deduction_id,))
            return rows[0] if rows else None

    def list_by_employee(self, employee_id: str) -> Sequence[EmployeeDeduction]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select(cur, "employee_id=%s", (employee_id,))

    def list_by_employees(self, employee_ids: Collection[str]) -> Sequence[EmployeeDeduction]:
        ids = list(employee_ids)
        if not ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select(cur, f"employee_id IN ({in_clause(ids)})", tuple(ids))

    def add(self, deduction: EmployeeDeduction) -> EmployeeDeduction:
        with db_cursor(self._conn_factory) as (_, cur):
            insert_row(cur, "employee_deductions", record_values(deduction))
        return deduction

    def update(self, deduction_id: str, **changes: Any) -> Optional[EmployeeDeduction]:
        with db_cursor(self._conn_factory) as (_, cur):
            if not update_row(cur, "employee_deductions", "deduction_id", deduction_id, changes):
                return None
            return self._select(cur, "deduction_id=%s", (deduction_id,))[0]

    def delete(self, deduction_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employee_deductions WHERE deduction_id=%s", (deduction_id,))
            return cur.rowcount > 0
