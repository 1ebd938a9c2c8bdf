from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.memory_base import InMemoryTable
from .model import Company
from .repository import CompanyRepository


class InMemoryCompanyRepository(CompanyRepository):
    def __init__(self, lock=None):
        self._table: InMemoryTable[Company] = InMemoryTable(lambda c: c.company_id, lock=lock)

    def get(self, company_id: str) -> Optional[Company]:
        return self._table.get(company_id)

    def list_all(self) -> Sequence[Company]:
        return self._table.select()

    def add(self, company: Company) -> Company:
        return self._table.insert(company)

    def update(self, company_id: str, **changes: Any) -> Optional[Company]:
        return self._table.update(company_id, **changes)

    def delete(self, company_id: str) -> bool:
        return self._table.delete(company_id)
