from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Union

from ..core.enums import DocumentType, EntityType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class EmployeeAttachment:
    entity_id: str
    entity_type: EntityType = field(default=EntityType.EMPLOYEE, init=False)


@dataclass(frozen=True)
class CompanyAttachment:
    entity_id: str
    entity_type: EntityType = field(default=EntityType.COMPANY, init=False)


@dataclass(frozen=True)
class LicenseAttachment:
    entity_id: str
    entity_type: EntityType = field(default=EntityType.LICENSE, init=False)


Attachment = Union[EmployeeAttachment, CompanyAttachment, LicenseAttachment]

_ATTACHMENT_TYPES = {
    EntityType.EMPLOYEE: EmployeeAttachment,
    EntityType.COMPANY: CompanyAttachment,
    EntityType.LICENSE: LicenseAttachment,
}

# URL segments may use the plural collection name.
_ENTITY_ALIASES = {
    "employee": EntityType.EMPLOYEE,
    "employees": EntityType.EMPLOYEE,
    "company": EntityType.COMPANY,
    "companies": EntityType.COMPANY,
    "license": EntityType.LICENSE,
    "licenses": EntityType.LICENSE,
}


def attachment_for(entity_type: Union[str, EntityType], entity_id: str) -> Attachment:
    """Build the attachment variant for a (type, id) pair coming from the outside."""

    if isinstance(entity_type, EntityType):
        kind = entity_type
    else:
        kind = _ENTITY_ALIASES.get(str(entity_type).strip().lower())
        if kind is None:
            raise ValidationError("entity_type must be one of: employee, company, license")
    if not isinstance(entity_id, str) or not entity_id.strip():
        raise ValidationError("entity_id must not be empty")
    return _ATTACHMENT_TYPES[kind](entity_id.strip())


@dataclass(frozen=True)
class Document:
    document_id: str
    name: str
    document_type: DocumentType
    file_url: str
    attachment: Attachment
    uploaded_by: str
    created_at: datetime
    updated_at: datetime
    file_size: Optional[int] = None
    mime_type: Optional[str] = None
    expiry_date: Optional[date] = None
    description: Optional[str] = None
