from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import current_user_id, json_body, query_text
from ..common.serialization import to_json
from ..common.validators import enum_of
from ..container import Container
from ..core.enums import LeaveStatus

_as_status = enum_of(LeaveStatus)


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    @app.route("/api/companies/<company_id>/leaves", methods=["GET"], endpoint="company_leaves")
    def company_leaves(company_id: str):
        status = query_text("status")
        leaves = service.get_company_leaves(company_id, _as_status(status, "status") if status else None)
        return jsonify(to_json(leaves))

    @app.route("/api/employees/<employee_id>/leaves", methods=["GET"], endpoint="employee_leaves")
    def employee_leaves(employee_id: str):
        return jsonify(to_json(service.get_employee_leaves(employee_id)))

    @app.route("/api/employees/<employee_id>/leaves", methods=["POST"], endpoint="create_employee_leave")
    def create_employee_leave(employee_id: str):
        data = dict(json_body(), employee_id=employee_id)
        return jsonify(to_json(service.create_leave(data))), 201

    @app.route("/api/leave-requests", methods=["POST"], endpoint="create_leave_request")
    def create_leave_request():
        return jsonify(to_json(service.create_leave(json_body()))), 201

    @app.route("/api/leaves/<leave_id>/approve", methods=["PUT", "POST"], endpoint="approve_leave")
    def approve_leave(leave_id: str):
        return jsonify(to_json(service.approve_leave(leave_id, current_user_id())))

    @app.route("/api/leaves/<leave_id>/reject", methods=["PUT", "POST"], endpoint="reject_leave")
    def reject_leave(leave_id: str):
        approver_id = current_user_id()
        body = request.get_json(silent=True) or {}
        reason = body.get("reason") if isinstance(body, dict) else None
        return jsonify(to_json(service.reject_leave(leave_id, approver_id, reason)))
