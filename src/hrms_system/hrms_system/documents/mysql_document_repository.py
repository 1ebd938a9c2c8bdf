from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import DocumentType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, insert_row, update_row
from .model import Attachment, Document, attachment_for
from .repository import DocumentRepository

_COLUMNS = """
    document_id, name, document_type, file_url, file_size, mime_type, expiry_date,
    entity_type, entity_id, uploaded_by, description, created_at, updated_at
"""


def _to_document(r: dict) -> Document:
    return Document(
        document_id=r["document_id"],
        name=r["name"],
        document_type=DocumentType(r["document_type"]),
        file_url=r["file_url"],
        attachment=attachment_for(r["entity_type"], r["entity_id"]),
        uploaded_by=r["uploaded_by"],
        created_at=r["created_at"],
        updated_at=r["updated_at"],
        file_size=int(r["file_size"]) if r.get("file_size") is not None else None,
        mime_type=r.get("mime_type"),
        expiry_date=r.get("expiry_date"),
        description=r.get("description"),
    )


class MySQLDocumentRepository(DocumentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, cur, where: str, params: tuple) -> list[Document]:
        cur.execute(f"SELECT {_COLUMNS} FROM documents WHERE {where} ORDER BY seq", params)
        return [_to_document(r) for r in fetchall(cur)]

    def get(self, document_id: str) -> Optional[Document]:
        with db_cursor(self._conn_factory) as (_, cur):
            rows = self._select(cur, "document_id=%s", (document_id,))
            return rows[0] if rows else None

    def list_by_attachment(self, attachment: Attachment) -> Sequence[Document]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select(
                cur,
                "entity_type=%s AND entity_id=%s",
                (attachment.entity_type.value, attachment.entity_id),
            )

    def add(self, document: Document) -> Document:
        values = {
            "document_id": document.document_id,
            "name": document.name,
            "document_type": document.document_type,
            "file_url": document.file_url,
            "file_size": document.file_size,
            "mime_type": document.mime_type,
            "expiry_date": document.expiry_date,
            "entity_type": document.attachment.entity_type,
            "entity_id": document.attachment.entity_id,
            "uploaded_by": document.uploaded_by,
            "description": document.description,
            "created_at": document.created_at,
            "updated_at": document.updated_at,
        }
        with db_cursor(self._conn_factory) as (_, cur):
            insert_row(cur, "documents", values)
        return document

    def update(self, document_id: str, **changes: Any) -> Optional[Document]:
        attachment = changes.pop("attachment", None)
        if attachment is not None:
            changes["entity_type"] = attachment.entity_type
            changes["entity_id"] = attachment.entity_id
        with db_cursor(self._conn_factory) as (_, cur):
            if not update_row(cur, "documents", "document_id", document_id, changes):
                return None
            return self._select(cur, "document_id=%s", (document_id,))[0]

    def delete(self, document_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM documents WHERE document_id=%s", (document_id,))
            return cur.rowcount > 0

    def delete_by_attachment(self, attachment: Attachment) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM documents WHERE entity_type=%s AND entity_id=%s",
                (attachment.entity_type.value, attachment.entity_id),
            )
            return int(cur.rowcount)
