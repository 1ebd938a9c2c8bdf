from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import License


class LicenseRepository(Protocol):
    def get(self, license_id: str) -> Optional[License]:
        raise NotImplementedError

    def list_by_company(self, company_id: str) -> Sequence[License]:
        raise NotImplementedError

    def list_all(self) -> Sequence[License]:
        raise NotImplementedError

    def add(self, license: License) -> License:
        raise NotImplementedError

    def update(self, license_id: str, **changes: Any) -> Optional[License]:
        raise NotImplementedError

    def delete(self, license_id: str) -> bool:
        raise NotImplementedError
