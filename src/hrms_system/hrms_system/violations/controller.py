from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_user_id, json_body
from ..common.serialization import to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.violation_service

    @app.route("/api/employees/<employee_id>/violations", methods=["GET"], endpoint="employee_violations")
    def employee_violations(employee_id: str):
        return jsonify(to_json(service.get_employee_violations(employee_id)))

    @app.route("/api/employees/<employee_id>/violations", methods=["POST"], endpoint="create_violation")
    def create_violation(employee_id: str):
        reported_by = current_user_id()
        data = dict(json_body(), employee_id=employee_id)
        return jsonify(to_json(service.create_violation(data, reported_by))), 201

    @app.route("/api/companies/<company_id>/violations", methods=["GET"], endpoint="company_violations")
    def company_violations(company_id: str):
        return jsonify(to_json(service.get_company_violations(company_id)))

    @app.route("/api/violations/<violation_id>", methods=["PUT"], endpoint="update_violation")
    def update_violation(violation_id: str):
        return jsonify(to_json(service.update_violation(violation_id, json_body())))

    @app.route("/api/violations/<violation_id>", methods=["DELETE"], endpoint="delete_violation")
    def delete_violation(violation_id: str):
        service.delete_violation(violation_id)
        return jsonify({"success": True})
