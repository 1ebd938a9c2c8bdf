from __future__ import annotations

from pathlib import Path

from src.hrms_system.hrms_system.database.bootstrap import iter_sql_statements, prepare_schema_sql

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_schema_file_splits_into_create_table_statements():
    statements = prepare_schema_sql(SCHEMA_PATH.read_text(encoding="utf-8"))

    assert len(statements) == 10
    assert all(s.upper().startswith("CREATE TABLE IF NOT EXISTS") for s in statements)


def test_splitter_ignores_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b');\nINSERT INTO t VALUES (\"c;d\");\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_prepare_strips_database_lines_and_comments():
    sql = "-- header\nCREATE DATABASE IF NOT EXISTS x;\nUSE x;\nCREATE TABLE a (id INT);\n"

    assert prepare_schema_sql(sql) == ["CREATE TABLE a (id INT)"]
