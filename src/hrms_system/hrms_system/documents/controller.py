from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_user_id, json_body
from ..common.serialization import to_json
from ..container import Container
from ..core.exceptions import NotFoundError
from .model import attachment_for


def register(app: Flask, container: Container) -> None:
    service = container.document_service

    @app.route("/api/<entity_type>/<entity_id>/documents", methods=["GET"], endpoint="entity_documents")
    def entity_documents(entity_type: str, entity_id: str):
        attachment = attachment_for(entity_type, entity_id)
        return jsonify(to_json(service.get_entity_documents(attachment)))

    @app.route("/api/<entity_type>/<entity_id>/documents", methods=["POST"], endpoint="attach_document")
    def attach_document(entity_type: str, entity_id: str):
        uploaded_by = current_user_id()
        data = dict(json_body(), entity_type=entity_type, entity_id=entity_id)
        return jsonify(to_json(service.create_document(data, uploaded_by))), 201

    @app.route("/api/documents/<document_id>", methods=["GET"], endpoint="get_document")
    def get_document(document_id: str):
        document = service.get_document(document_id)
        if not document:
            raise NotFoundError(f"Document {document_id} not found")
        return jsonify(to_json(document))

    @app.route("/api/documents/<document_id>", methods=["PUT"], endpoint="update_document")
    def update_document(document_id: str):
        return jsonify(to_json(service.update_document(document_id, json_body())))

    @app.route("/api/documents/<document_id>", methods=["DELETE"], endpoint="delete_document")
    def delete_document(document_id: str):
        service.delete_document(document_id)
        return jsonify({"success": True})
