from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..common.serialization import to_json
from ..container import Container
from ..core.exceptions import NotFoundError


def register(app: Flask, container: Container) -> None:
    service = container.company_service

    @app.route("/api/companies", methods=["GET"], endpoint="list_companies")
    def list_companies():
        return jsonify(to_json(service.list_companies_with_stats()))

    @app.route("/api/companies", methods=["POST"], endpoint="create_company")
    def create_company():
        company = service.create_company(json_body())
        return jsonify(to_json(company)), 201

    @app.route("/api/companies/<company_id>", methods=["GET"], endpoint="get_company")
    def get_company(company_id: str):
        company = service.get_company(company_id)
        if not company:
            raise NotFoundError(f"Company {company_id} not found")
        return jsonify(to_json(company))

    @app.route("/api/companies/<company_id>", methods=["PUT"], endpoint="update_company")
    def update_company(company_id: str):
        return jsonify(to_json(service.update_company(company_id, json_body())))

    @app.route("/api/companies/<company_id>", methods=["DELETE"], endpoint="delete_company")
    def delete_company(company_id: str):
        service.delete_company(company_id)
        return jsonify({"success": True})

    @app.route("/api/companies/<company_id>/stats", methods=["GET"], endpoint="company_stats")
    def company_stats(company_id: str):
        return jsonify(to_json(service.get_company_stats(company_id)))

    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    def dashboard_stats():
        return jsonify(to_json(service.get_system_stats()))
