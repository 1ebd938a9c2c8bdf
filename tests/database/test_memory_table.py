from __future__ import annotations

from dataclasses import dataclass

from src.hrms_system.hrms_system.database.memory_base import InMemoryTable, MemoryStore


@dataclass(frozen=True)
class Row:
    row_id: str
    group: str
    state: str = "new"


def _table(*rows: Row) -> InMemoryTable[Row]:
    table: InMemoryTable[Row] = InMemoryTable(key=lambda r: r.row_id)
    for r in rows:
        table.insert(r)
    return table


def test_select_keeps_insertion_order():
    table = _table(Row("b", "x"), Row("a", "y"), Row("c", "x"))

    assert [r.row_id for r in table.select()] == ["b", "a", "c"]
    assert [r.row_id for r in table.select(lambda r: r.group == "x")] == ["b", "c"]
    assert len(table) == 3


def test_update_where_only_applies_when_condition_holds():
    table = _table(Row("a", "x"))

    assert table.update_where("a", lambda r: r.state == "done", state="again") is None
    assert table.update_where("a", lambda r: r.state == "new", state="done").state == "done"
    assert table.update_where("missing", lambda r: True, state="x") is None
    assert table.get("a").state == "done"


def test_update_many_and_delete_where_report_counts():
    table = _table(Row("a", "x"), Row("b", "x"), Row("c", "y"))

    assert table.update_many(lambda r: r.group == "x", state="seen") == 2
    assert [r.state for r in table.select()] == ["seen", "seen", "new"]

    assert table.delete_where(lambda r: r.group == "x") == 2
    assert [r.row_id for r in table.select()] == ["c"]
    assert table.delete("c") is True
    assert table.delete("c") is False


def test_upsert_merges_with_existing_row():
    table = _table(Row("a", "x"))

    merged = table.upsert(Row("a", "z", state="fresh"), lambda old, new: Row(old.row_id, old.group, new.state))

    assert merged == Row("a", "x", "fresh")
    assert table.upsert(Row("b", "y"), lambda old, new: old) == Row("b", "y")


def test_tables_of_one_store_share_a_reentrant_lock():
    store = MemoryStore()
    first: InMemoryTable[Row] = InMemoryTable(key=lambda r: r.row_id, lock=store.lock)
    second: InMemoryTable[Row] = InMemoryTable(key=lambda r: r.row_id, lock=store.lock)

    with store.atomic():
        first.insert(Row("a", "x"))
        second.insert(Row("b", "x"))
        assert first.get("a") is not None

    assert [len(first), len(second)] == [1, 1]
