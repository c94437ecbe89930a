"""Shared JSON response shapes for the API"""

import json
import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from club_intake.config import config
from club_intake.errors import IntakeError, ValidationFailed

logger = logging.getLogger(__name__)


def success_response(
    data: Any,
    status_code: int = 200,
    pagination: Optional[Dict[str, Any]] = None,
    message: Optional[str] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {"success": True, "data": data}
    if pagination is not None:
        content["pagination"] = pagination
    if message:
        content["message"] = message
    return JSONResponse(status_code=status_code, content=content)


def error_response(error: IntakeError) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "error": error.message}
    if isinstance(error, ValidationFailed):
        content["validationErrors"] = error.validation_errors
    return JSONResponse(status_code=error.status_code, content=content)


def public_error_message(error: Exception, fallback: str) -> str:
    """Raw error text for internal deployments, a generic one in production"""
    if config.get("environment") == "production":
        return fallback
    return str(error) or fallback


async def read_json_body(request: Request) -> Any:
    """Parse the request body as JSON, reporting bad input as a 400"""
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationFailed(
            {"body": "Request body must be valid JSON"}, "Invalid request body"
        ) from None


async def intake_error_handler(request: Request, exc: IntakeError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return error_response(exc)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed query parameters in the shared error shape"""
    validation_errors = {}
    for error in exc.errors():
        # loc is e.g. ("query", "page")
        path = ".".join(str(part) for part in error["loc"][1:]) or "request"
        validation_errors.setdefault(path, error["msg"])
    return error_response(ValidationFailed(validation_errors))
