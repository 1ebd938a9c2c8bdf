from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import NotificationType


@dataclass(frozen=True)
class Notification:
    notification_id: str
    user_id: str
    title: str
    message: str
    notification_type: NotificationType
    created_at: datetime
    updated_at: datetime
    company_id: Optional[str] = None
    read_at: Optional[datetime] = None
    action_url: Optional[str] = None
    related_entity_id: Optional[str] = None
    related_entity_type: Optional[str] = None

    @property
    def is_read(self) -> bool:
        return self.read_at is not None
