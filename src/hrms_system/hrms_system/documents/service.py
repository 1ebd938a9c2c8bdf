from __future__ import annotations

from contextlib import nullcontext
from datetime import datetime
from typing import Any, Callable, ContextManager, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import (
    as_optional_date,
    as_optional_int,
    as_optional_text,
    as_text,
    coerce_fields,
    enum_of,
    require_fields,
    require_non_empty,
)
from ..companies.repository import CompanyRepository
from ..core.enums import DocumentType, EntityType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..licenses.repository import LicenseRepository
from .model import Attachment, Document, attachment_for
from .repository import DocumentRepository

DOCUMENT_FIELDS = {
    "name": as_text,
    "document_type": enum_of(DocumentType),
    "file_url": as_text,
    "file_size": as_optional_int,
    "mime_type": as_optional_text,
    "expiry_date": as_optional_date,
    "description": as_optional_text,
}


class DocumentService:
    def __init__(
        self,
        documents: DocumentRepository,
        employees: EmployeeRepository,
        companies: CompanyRepository,
        licenses: LicenseRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        atomic: Callable[[], ContextManager[Any]] = nullcontext,
    ):
        self._documents = documents
        self._clock = clock
        self._atomic = atomic
        self._lookups = {
            EntityType.EMPLOYEE: employees.get,
            EntityType.COMPANY: companies.get,
            EntityType.LICENSE: licenses.get,
        }

    def get_entity_documents(self, attachment: Attachment) -> Sequence[Document]:
        return self._documents.list_by_attachment(attachment)

    def get_document(self, document_id: str) -> Optional[Document]:
        return self._documents.get(document_id)

    def create_document(self, data: Mapping[str, Any], uploaded_by: str) -> Document:
        """Attach a document to exactly one employee, company or license.

        `data` carries `entity_type` and `entity_id` next to the document fields.
        """

        uploaded_by = require_non_empty(uploaded_by, "uploaded_by")
        payload = dict(data)
        if "entity_type" not in payload or "entity_id" not in payload:
            raise ValidationError("A document must name entity_type and entity_id")
        attachment = attachment_for(payload.pop("entity_type"), payload.pop("entity_id"))

        values = coerce_fields(payload, DOCUMENT_FIELDS, entity="document")
        require_fields(values, ["name", "document_type", "file_url"])
        if values.get("file_size") is not None and values["file_size"] < 0:
            raise ValidationError("file_size must not be negative")
        with self._atomic():
            if not self._lookups[attachment.entity_type](attachment.entity_id):
                raise NotFoundError(f"{attachment.entity_type.value.capitalize()} {attachment.entity_id} not found")

            now = self._clock()
            document = Document(
                document_id=new_id(),
                attachment=attachment,
                uploaded_by=uploaded_by,
                created_at=now,
                updated_at=now,
                **values,
            )
            return self._documents.add(document)

    def update_document(self, document_id: str, changes: Mapping[str, Any]) -> Document:
        values = coerce_fields(changes, DOCUMENT_FIELDS, entity="document")
        if values.get("file_size") is not None and values["file_size"] < 0:
            raise ValidationError("file_size must not be negative")

        updated = self._documents.update(document_id, **values, updated_at=self._clock())
        if not updated:
            raise NotFoundError(f"Document {document_id} not found")
        return updated

    def delete_document(self, document_id: str) -> None:
        self._documents.delete(document_id)
