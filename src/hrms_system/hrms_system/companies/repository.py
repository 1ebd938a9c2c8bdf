from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Company


class CompanyRepository(Protocol):
    """Storage contract for companies.

    Note (DIP): services depend on this interface, never on a concrete backend.
    """

    def get(self, company_id: str) -> Optional[Company]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Company]:
        raise NotImplementedError

    def add(self, company: Company) -> Company:
        raise NotImplementedError

    def update(self, company_id: str, **changes: Any) -> Optional[Company]:
        """Merge `changes` into the stored row; None when the id is unknown."""

        raise NotImplementedError

    def delete(self, company_id: str) -> bool:
        raise NotImplementedError
