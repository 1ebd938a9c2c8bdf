from __future__ import annotations

import threading
from dataclasses import replace
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class InMemoryTable(Generic[T]):
    """One collection of frozen records keyed by id.

    Every read-modify-write runs under the table lock so concurrent request
    threads cannot lose updates. Readers get list snapshots in insertion order.
    """

    def __init__(self, key: Callable[[T], str], lock=None):
        self._key = key
        self._rows: Dict[str, T] = {}
        self._lock = lock if lock is not None else threading.RLock()

    def get(self, row_id: str) -> Optional[T]:
        with self._lock:
            return self._rows.get(row_id)

    def insert(self, row: T) -> T:
        with self._lock:
            self._rows[self._key(row)] = row
            return row

    def upsert(self, row: T, merge: Callable[[T, T], T]) -> T:
        """Insert `row`, or store `merge(current, row)` when the id exists."""
        with self._lock:
            current = self._rows.get(self._key(row))
            if current is not None:
                row = merge(current, row)
            self._rows[self._key(row)] = row
            return row

    def select(self, predicate: Optional[Callable[[T], bool]] = None) -> List[T]:
        with self._lock:
            rows = list(self._rows.values())
        if predicate is None:
            return rows
        return [r for r in rows if predicate(r)]

    def update(self, row_id: str, **changes: Any) -> Optional[T]:
        return self.update_where(row_id, lambda _: True, **changes)

    def update_where(self, row_id: str, condition: Callable[[T], bool], **changes: Any) -> Optional[T]:
        """Apply `changes` only while `condition` holds for the stored row."""
        with self._lock:
            current = self._rows.get(row_id)
            if current is None or not condition(current):
                return None
            updated = replace(current, **changes)
            self._rows[row_id] = updated
            return updated

    def update_many(self, predicate: Callable[[T], bool], **changes: Any) -> int:
        with self._lock:
            keys = [k for k, r in self._rows.items() if predicate(r)]
            for k in keys:
                self._rows[k] = replace(self._rows[k], **changes)
            return len(keys)

    def delete(self, row_id: str) -> bool:
        with self._lock:
            return self._rows.pop(row_id, None) is not None

    def delete_where(self, predicate: Callable[[T], bool]) -> int:
        with self._lock:
            doomed = [k for k, r in self._rows.items() if predicate(r)]
            for k in doomed:
                del self._rows[k]
            return len(doomed)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)


class MemoryStore:
    """One lock shared by every table of an in-memory store.

    Holding `atomic()` across a parent lookup and the dependent write keeps a
    concurrent delete of the parent out until the write is done.
    """

    def __init__(self):
        self.lock = threading.RLock()

    def atomic(self):
        return self.lock
