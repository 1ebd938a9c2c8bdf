from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import current_user_id, json_body, query_text
from ..common.serialization import to_json
from ..container import Container
from ..core.constants import DEFAULT_NOTIFICATION_LIMIT


def register(app: Flask, container: Container) -> None:
    service = container.notification_service

    @app.route("/api/notifications", methods=["GET"], endpoint="list_notifications")
    def list_notifications():
        notifications = service.get_user_notifications(
            current_user_id(),
            company_id=query_text("company_id"),
            limit=request.args.get("limit", DEFAULT_NOTIFICATION_LIMIT),
        )
        return jsonify(to_json(notifications))

    @app.route("/api/notifications/unread-count", methods=["GET"], endpoint="unread_notifications")
    def unread_notifications():
        count = service.get_unread_notification_count(current_user_id(), company_id=query_text("company_id"))
        return jsonify({"count": count})

    @app.route("/api/notifications", methods=["POST"], endpoint="create_notification")
    def create_notification():
        return jsonify(to_json(service.create_notification(json_body()))), 201

    @app.route("/api/notifications/<notification_id>/read", methods=["POST", "PUT"], endpoint="read_notification")
    def read_notification(notification_id: str):
        service.mark_notification_as_read(notification_id)
        return jsonify({"success": True})

    @app.route("/api/notifications/<notification_id>", methods=["DELETE"], endpoint="delete_notification")
    def delete_notification(notification_id: str):
        service.delete_notification(notification_id)
        return jsonify({"success": True})
