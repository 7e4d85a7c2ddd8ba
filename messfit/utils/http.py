import logging
from typing import Any, Dict, Optional, Tuple

from flask import request, jsonify
from marshmallow import EXCLUDE, ValidationError

logger = logging.getLogger(__name__)


class ServiceError(ValueError):
    """Error raised by services, rendered as the standard JSON error envelope."""

    def __init__(self, code: str, message: str, status: int = 400):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message
        self.status = status


def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status


def json_body() -> Dict[str, Any]:
    # Try parsing as JSON first (force=True allows missing Content-Type header)
    data = request.get_json(force=True, silent=True)
    if data is not None:
        return data
    # Fallback to form data (converted to dict) if JSON parsing fails
    return request.form.to_dict() if request.form else {}


def validate_schema(schema_cls, data: Dict[str, Any], partial: bool = False) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    try:
        return schema_cls(unknown=EXCLUDE).load(data or {}, partial=partial), None
    except ValidationError as e:
        return None, e.messages


def arg_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = request.args.get(name)
    if val is None:
        return default
    return val


def arg_int(name: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    try:
        v = int(request.args.get(name, default))
    except (TypeError, ValueError):
        v = default
    if min_value is not None:
        v = max(min_value, v)
    if max_value is not None:
        v = min(max_value, v)
    return v


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(e: ServiceError):
        logger.info("%s %s: %s", request.path, e.code, e.message)
        return error(e.code, e.message, e.status)

    @app.errorhandler(404)
    def handle_not_found(e):
        return error("NOT_FOUND", "Resource not found", 404)

    @app.errorhandler(405)
    def handle_method_not_allowed(e):
        return error("METHOD_NOT_ALLOWED", "Method not allowed", 405)

    @app.errorhandler(500)
    def handle_internal_error(e):
        logger.error("Unhandled error on %s: %s", request.path, e)
        return error("UNKNOWN_ERROR", "Internal server error", 500)
