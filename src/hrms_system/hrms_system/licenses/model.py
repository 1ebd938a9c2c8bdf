from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LicenseStatus, LicenseType


@dataclass(frozen=True)
class License:
    license_id: str
    company_id: str
    name: str
    license_type: LicenseType
    status: LicenseStatus
    created_at: datetime
    updated_at: datetime
    license_number: Optional[str] = None
    issuing_authority: Optional[str] = None
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    address: Optional[str] = None
    description: Optional[str] = None

    def is_expiring(self, cutoff: date) -> bool:
        """Expired and soon-to-expire licenses share one bucket."""
        return self.expiry_date is not None and self.expiry_date <= cutoff
