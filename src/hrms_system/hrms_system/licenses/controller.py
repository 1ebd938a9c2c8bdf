from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..common.serialization import to_json
from ..container import Container
from ..core.exceptions import NotFoundError


def register(app: Flask, container: Container) -> None:
    service = container.license_service

    @app.route("/api/companies/<company_id>/licenses", methods=["GET"], endpoint="list_licenses")
    def list_licenses(company_id: str):
        return jsonify(to_json(service.get_company_licenses(company_id)))

    @app.route("/api/companies/<company_id>/licenses", methods=["POST"], endpoint="create_license")
    def create_license(company_id: str):
        return jsonify(to_json(service.create_license(company_id, json_body()))), 201

    @app.route("/api/licenses/<license_id>", methods=["GET"], endpoint="get_license")
    def get_license(license_id: str):
        details = service.get_license(license_id)
        if not details:
            raise NotFoundError(f"License {license_id} not found")
        return jsonify(to_json(details))

    @app.route("/api/licenses/<license_id>", methods=["PUT"], endpoint="update_license")
    def update_license(license_id: str):
        return jsonify(to_json(service.update_license(license_id, json_body())))

    @app.route("/api/licenses/<license_id>", methods=["DELETE"], endpoint="delete_license")
    def delete_license(license_id: str):
        service.delete_license(license_id)
        return jsonify({"success": True})
