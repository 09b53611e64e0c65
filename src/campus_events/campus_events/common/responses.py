from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import ConflictError, DomainError, NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = {
    ValidationError: 400,
    NotFoundError: 404,
    ConflictError: 409,
    StoreError: 500,
}


def error_response(code: str, message: Any, status: int):
    return jsonify({"success": False, "error": code, "message": message}), status


def json_body() -> Any:
    """Request JSON, or ``None`` when the body is missing or not JSON (validators report it)."""
    return request.get_json(silent=True)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        status = _STATUS_BY_ERROR.get(type(exc), 400)
        if status >= 500:
            logger.error("%s %s failed: %s", request.method, request.path, exc)
            return error_response(exc.code, "Database failure", status)
        return error_response(exc.code, str(exc), status)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return error_response("http_error", exc.description, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error_response("server_error", "Internal server error", 500)
