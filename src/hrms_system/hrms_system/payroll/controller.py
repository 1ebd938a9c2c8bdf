from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import current_user_id, json_body
from ..common.serialization import to_json
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.route("/api/employees/<employee_id>/deductions", methods=["GET"], endpoint="employee_deductions")
    def employee_deductions(employee_id: str):
        return jsonify(to_json(service.get_employee_deductions(employee_id)))

    @app.route("/api/employees/<employee_id>/deductions", methods=["POST"], endpoint="create_deduction")
    def create_deduction(employee_id: str):
        processed_by = current_user_id()
        data = dict(json_body(), employee_id=employee_id)
        return jsonify(to_json(service.create_deduction(data, processed_by))), 201

    @app.route("/api/companies/<company_id>/deductions", methods=["GET"], endpoint="company_deductions")
    def company_deductions(company_id: str):
        return jsonify(to_json(service.get_company_deductions(company_id)))

    @app.route("/api/companies/<company_id>/payroll", methods=["GET"], endpoint="company_payroll")
    def company_payroll(company_id: str):
        year = request.args.get("year")
        month = request.args.get("month")
        if not year or not month:
            raise ValidationError("year and month query parameters are required")
        return jsonify(to_json(service.build_monthly_summary(company_id, year, month)))

    @app.route("/api/deductions/<deduction_id>", methods=["PUT"], endpoint="update_deduction")
    def update_deduction(deduction_id: str):
        return jsonify(to_json(service.update_deduction(deduction_id, json_body())))

    @app.route("/api/deductions/<deduction_id>", methods=["DELETE"], endpoint="delete_deduction")
    def delete_deduction(deduction_id: str):
        service.delete_deduction(deduction_id)
        return jsonify({"success": True})
