from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, query_flag
from ..common.serialization import to_json
from ..container import Container
from ..core.exceptions import NotFoundError


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/companies/<company_id>/employees", methods=["GET"], endpoint="list_employees")
    def list_employees(company_id: str):
        employees = service.get_company_employees(company_id, include_archived=query_flag("archived"))
        return jsonify(to_json(employees))

    @app.route("/api/companies/<company_id>/employees", methods=["POST"], endpoint="create_employee")
    def create_employee(company_id: str):
        employee = service.create_employee(company_id, json_body())
        return jsonify(to_json(employee)), 201

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        details = service.get_employee(employee_id)
        if not details:
            raise NotFoundError(f"Employee {employee_id} not found")
        return jsonify(to_json(details))

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: str):
        return jsonify(to_json(service.update_employee(employee_id, json_body())))

    @app.route("/api/employees/<employee_id>/archive", methods=["POST"], endpoint="archive_employee")
    def archive_employee(employee_id: str):
        body = json_body()
        return jsonify(to_json(service.archive_employee(employee_id, body.get("reason"))))

    @app.route("/api/licenses/<license_id>/employees", methods=["GET"], endpoint="license_employees")
    def license_employees(license_id: str):
        return jsonify(to_json(service.get_employees_by_license(license_id)))
