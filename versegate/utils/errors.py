# versegate/utils/errors.py
"""
Standardized API error responses.

All errors follow the format: {"error": "error_code", "detail": "optional message"}

Error codes should be:
- snake_case
- descriptive but concise
- machine-parseable (no spaces or special chars)
"""

from typing import Optional

from flask import jsonify


def error_response(
    code: str,
    status: int = 400,
    detail: Optional[str] = None,
    **extra
):
    """
    Create a standardized error response.

    Args:
        code: Machine-readable error code (snake_case)
        status: HTTP status code
        detail: Human-readable explanation (optional)
        **extra: Additional fields to include in response

    Returns:
        Tuple of (jsonify response, status code)
    """
    payload = {"error": code}
    if detail:
        payload["detail"] = detail
    payload.update(extra)
    return jsonify(payload), status


def missing_field(field: str):
    """Required query parameter is missing."""
    return error_response(f"{field}_required", 400, f"Missing required parameter: {field}")


def not_found(resource: str = "resource", detail: str = None):
    """Requested resource does not exist."""
    return error_response("not_found", 404, detail or f"{resource} not found")


def upstream_error(code: str = "upstream_error", detail: str = None):
    """A verse source failed."""
    return error_response(code, 502, detail)
