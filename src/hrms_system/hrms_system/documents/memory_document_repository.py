from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.memory_base import InMemoryTable
from .model import Attachment, Document
from .repository import DocumentRepository


class InMemoryDocumentRepository(DocumentRepository):
    def __init__(self, lock=None):
        self._table: InMemoryTable[Document] = InMemoryTable(lambda d: d.document_id, lock=lock)

    def get(self, document_id: str) -> Optional[Document]:
        return self._table.get(document_id)

    def list_by_attachment(self, attachment: Attachment) -> Sequence[Document]:
        # Attachments are frozen dataclasses: equality covers both kind and id.
        return self._table.select(lambda d: d.attachment == attachment)

    def add(self, document: Document) -> Document:
        return self._table.insert(document)

    def update(self, document_id: str, **changes: Any) -> Optional[Document]:
        return self._table.update(document_id, **changes)

    def delete(self, document_id: str) -> bool:
        return self._table.delete(document_id)

    def delete_by_attachment(self, attachment: Attachment) -> int:
        return self._table.delete_where(lambda d: d.attachment == attachment)
