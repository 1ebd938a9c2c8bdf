from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..common.serialization import to_json
from ..container import Container
from ..core.enums import CompanyRole
from ..core.exceptions import NotFoundError, ValidationError


def register(app: Flask, container: Container) -> None:
    service = container.user_service

    @app.route("/api/users/<user_id>", methods=["GET"], endpoint="get_user")
    def get_user(user_id: str):
        user = service.get_user(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return jsonify(to_json(user))

    @app.route("/api/users/<user_id>", methods=["PUT"], endpoint="upsert_user")
    def upsert_user(user_id: str):
        data = dict(json_body(), user_id=user_id)
        return jsonify(to_json(service.upsert_user(data)))

    @app.route("/api/users/<user_id>/companies", methods=["GET"], endpoint="user_companies")
    def user_companies(user_id: str):
        return jsonify(to_json(service.get_user_companies(user_id)))

    @app.route("/api/companies/<company_id>/users", methods=["GET"], endpoint="company_users")
    def company_users(company_id: str):
        return jsonify(to_json(service.get_company_users(company_id)))

    @app.route("/api/companies/<company_id>/users", methods=["POST"], endpoint="add_company_user")
    def add_company_user(company_id: str):
        body = json_body()
        membership = service.add_user_to_company(
            body.get("user_id"),
            company_id,
            role=body.get("role", CompanyRole.EMPLOYEE),
            permissions=body.get("permissions"),
        )
        return jsonify(to_json(membership)), 201

    @app.route("/api/companies/<company_id>/users/<user_id>", methods=["PUT"], endpoint="update_company_user")
    def update_company_user(company_id: str, user_id: str):
        body = json_body()
        if "role" not in body:
            raise ValidationError("Missing required field(s): role")
        membership = service.update_user_role(user_id, company_id, body["role"], permissions=body.get("permissions"))
        return jsonify(to_json(membership))

    @app.route("/api/companies/<company_id>/users/<user_id>", methods=["DELETE"], endpoint="remove_company_user")
    def remove_company_user(company_id: str, user_id: str):
        service.remove_user_from_company(user_id, company_id)
        return jsonify({"success": True})
