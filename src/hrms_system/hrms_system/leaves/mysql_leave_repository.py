from __future__ import annotations

from datetime import datetime
from typing import Collection, Optional, Sequence

from ..core.enums import LeaveStatus, LeaveType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause, insert_row, record_values, update_row
from .model import EmployeeLeave
from .repository import LeaveRepository

_COLUMNS = """
    leave_id, employee_id, leave_type, start_date, end_date, days, status, reason,
    approver_id, decided_at, rejection_reason, created_at, updated_at
"""


def _to_leave(r: dict) -> EmployeeLeave:
    return EmployeeLeave(
        leave_id=r["leave_id"],
        employee_id=r["employee_id"],
        leave_type=LeaveType(r["leave_type"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        days=int(r["days"]),
        status=LeaveStatus(r["status"]),
        created_at=r["created_at"],
        updated_at=r["updated_at"],
        reason=r.get("reason"),
        approver_id=r.get("approver_id"),
        decided_at=r.get("decided_at"),
        rejection_reason=r.get("rejection_reason"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, cur, where: str, params: tuple) -> list[EmployeeLeave]:
        cur.execute(f"SELECT {_COLUMNS} FROM employee_leaves WHERE {where} ORDER BY seq", params)
        return [_to_leave(r) for r in fetchall(cur)]

    def get(self, leave_id: str) -> Optional[EmployeeLeave]:
        with db_cursor(self._conn_factory) as (_, cur):
            rows = self._select(cur, "leave_id=%s", (leave_id,))
            return rows[0] if rows else None

    def list_by_employee(self, employee_id: str) -> Sequence[EmployeeLeave]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select(cur, "employee_id=%s", (employee_id,))

    def list_by_employees(
        self,
        employee_ids: Collection[str],
        *,
        status: Optional[LeaveStatus] = None,
    ) -> Sequence[EmployeeLeave]:
        ids = list(employee_ids)
        if not ids:
            return []
        where = f"employee_id IN ({in_clause(ids)})"
        params: tuple = tuple(ids)
        if status is not None:
            where += " AND status=%s"
            params += (status.value,)
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select(cur, where, params)

    def add(self, leave: EmployeeLeave) -> EmployeeLeave:
        with db_cursor(self._conn_factory) as (_, cur):
            insert_row(cur, "employee_leaves", record_values(leave))
        return leave

    def decide(
        self,
        leave_id: str,
        *,
        status: LeaveStatus,
        approver_id: str,
        decided_at: datetime,
        rejection_reason: Optional[str] = None,
    ) -> Optional[EmployeeLeave]:
        changes = {
            "status": status,
            "approver_id": approver_id,
            "decided_at": decided_at,
            "rejection_reason": rejection_reason,
            "updated_at": decided_at,
        }
        with db_cursor(self._conn_factory) as (_, cur):
            matched = update_row(
                cur,
                "employee_leaves",
                "leave_id",
                leave_id,
                changes,
                where="AND status=%s",
                params=(LeaveStatus.PENDING.value,),
            )
            if not matched:
                return None
            return self._select(cur, "leave_id=%s", (leave_id,))[0]
