from __future__ import annotations

import json
from contextlib import contextmanager
from dataclasses import fields
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def to_db_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return json.dumps(list(value))
    return value


def insert_row(cur, table: str, values: Mapping[str, Any]) -> None:
    columns = list(values)
    placeholders = ",".join(["%s"] * len(columns))
    cur.execute(
        f"INSERT INTO {table} ({','.join(columns)}) VALUES ({placeholders})",
        tuple(to_db_value(values[c]) for c in columns),
    )


def update_row(cur, table: str, key_column: str, key: str, changes: Mapping[str, Any], *, where: str = "", params: Sequence[Any] = ()) -> int:
    """UPDATE one row by key; `where` adds a guard such as a status check."""
    if not changes:
        cur.execute(f"SELECT 1 FROM {table} WHERE {key_column}=%s {where}", (key, *params))
        return len(fetchall(cur))
    assignments = ",".join(f"{c}=%s" for c in changes)
    cur.execute(
        f"UPDATE {table} SET {assignments} WHERE {key_column}=%s {where}",
        (*(to_db_value(v) for v in changes.values()), key, *params),
    )
    return int(cur.rowcount)


def in_clause(values: Sequence[Any]) -> str:
    return ",".join(["%s"] * len(values))


def load_json_list(value: Any) -> tuple[str, ...]:
    if value is None or value == "":
        return ()
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        value = json.loads(value)
    return tuple(str(v) for v in value)


def record_values(record: Any) -> Dict[str, Any]:
    """Column -> value map for a flat dataclass record."""
    return {f.name: getattr(record, f.name) for f in fields(record)}
