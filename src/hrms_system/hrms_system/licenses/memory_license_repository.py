from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.memory_base import InMemoryTable
from .model import License
from .repository import LicenseRepository


class InMemoryLicenseRepository(LicenseRepository):
    def __init__(self, lock=None):
        self._table: InMemoryTable[License] = InMemoryTable(lambda lic: lic.license_id, lock=lock)

    def get(self, license_id: str) -> Optional[License]:
        return self._table.get(license_id)

    def list_by_company(self, company_id: str) -> Sequence[License]:
        return self._table.select(lambda lic: lic.company_id == company_id)

    def list_all(self) -> Sequence[License]:
        return self._table.select()

    def add(self, license: License) -> License:
        return self._table.insert(license)

    def update(self, license_id: str, **changes: Any) -> Optional[License]:
        return self._table.update(license_id, **changes)

    def delete(self, license_id: str) -> bool:
        return self._table.delete(license_id)
