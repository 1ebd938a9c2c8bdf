from __future__ import annotations

import structlog
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import ConflictError, DomainError, InvalidTransitionError, NotFoundError, ValidationError

log = structlog.get_logger(__name__)

STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
    (InvalidTransitionError, 409),
)


def status_for(error: DomainError) -> int:
    for cls, status in STATUS_BY_ERROR:
        if isinstance(error, cls):
            return status
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        status = status_for(e)
        log.warning("domain_error", error=type(e).__name__, message=str(e), status=status)
        return jsonify({"success": False, "message": str(e)}), status

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return jsonify({"success": False, "message": e.description}), e.code

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        log.exception("unhandled_error")
        return jsonify({"success": False, "message": "Internal server error"}), 500
