from __future__ import annotations

from typing import Any, Optional

from flask import request
from werkzeug.exceptions import BadRequest, Unauthorized

from ..core.constants import USER_ID_HEADER


def json_body() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise BadRequest("Request body must be a JSON object")
    return payload


def current_user_id() -> str:
    """Acting user id supplied by the session layer in front of the API."""
    user_id = (request.headers.get(USER_ID_HEADER) or "").strip()
    if not user_id:
        raise Unauthorized(f"Missing {USER_ID_HEADER} header")
    return user_id


def query_flag(name: str) -> bool:
    return (request.args.get(name) or "").strip().lower() in {"1", "true", "yes"}


def query_text(name: str) -> Optional[str]:
    value = (request.args.get(name) or "").strip()
    return value or None
