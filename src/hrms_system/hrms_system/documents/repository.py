from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Attachment, Document


class DocumentRepository(Protocol):
    def get(self, document_id: str) -> Optional[Document]:
        raise NotImplementedError

    def list_by_attachment(self, attachment: Attachment) -> Sequence[Document]:
        raise NotImplementedError

    def add(self, document: Document) -> Document:
        raise NotImplementedError

    def update(self, document_id: str, **changes: Any) -> Optional[Document]:
        raise NotImplementedError

    def delete(self, document_id: str) -> bool:
        raise NotImplementedError

    def delete_by_attachment(self, attachment: Attachment) -> int:
        raise NotImplementedError
