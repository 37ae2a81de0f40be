"""Error handlers: the single place failure responses are built.

Invariants:
    - Every failure body is ``{"message": str}``
    - ApiError -> its kind's status and its message verbatim
    - RequestValidationError -> 400 with one message per offending field
    - Anything unclassified -> 500 with a generic message, never the exception text
"""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from around.errors import INTERNAL_ERROR_MESSAGE, ApiError
from around.schemas.fields import RULE_ERROR_TYPES

logger = logging.getLogger(__name__)

RESOURCE_NOT_FOUND = "Requested resource not found"

# Messages for pydantic's built-in error types; custom field rules carry their own text
_VALIDATION_MESSAGES = {
    "missing": "The {field} field is required",
    "extra_forbidden": "The {field} field is not allowed",
    "string_type": "The {field} field must be a string",
}
_BODY_MESSAGES = {
    "missing": "Request body is required",
    "json_invalid": "Request body is not valid JSON",
    "model_attributes_type": "Request body must be a JSON object",
    "dict_type": "Request body must be a JSON object",
}


def error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build a failure response. Server errors never expose their message."""
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        message = INTERNAL_ERROR_MESSAGE
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def _field_name(loc: Sequence[Any]) -> str | None:
    """Last named element of an error location, ignoring the request part."""
    names = [str(part) for part in loc[1:] if isinstance(part, str)]
    return names[-1] if names else None


def format_validation_errors(errors: Sequence[dict[str, Any]]) -> str:
    """Join validation errors into one message, keeping the first error per field."""
    messages: dict[str, str] = {}
    for error in errors:
        error_type = error.get("type", "")
        field = _field_name(error.get("loc", ()))
        if field is None:
            key = "__body__"
            message = _BODY_MESSAGES.get(error_type, "Request body is invalid")
        else:
            key = field
            template = _VALIDATION_MESSAGES.get(error_type)
            if template is not None:
                message = template.format(field=field)
            elif error_type in RULE_ERROR_TYPES:
                message = error["msg"]
            else:
                message = f"The {field} field is invalid"
        messages.setdefault(key, message)
    return " | ".join(messages.values())


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        """Handle classified application errors."""
        logger.info(f"{exc.kind.value} on {request.method} {request.url.path}: {exc.message}")
        return error_response(exc.status_code, exc.message, exc.headers)


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle request schema violations."""
        message = format_validation_errors(exc.errors())
        logger.info(f"Validation error on {request.url.path}: {message}")
        return error_response(status.HTTP_400_BAD_REQUEST, message)


def _register_http_error_handler(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Handle framework errors such as unmatched routes."""
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = RESOURCE_NOT_FOUND
        else:
            message = exc.detail if isinstance(exc.detail, str) else INTERNAL_ERROR_MESSAGE
        return error_response(exc.status_code, message, getattr(exc, "headers", None))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!r}",
        exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def _register_generic_error_handler(app: FastAPI) -> None:
    app.add_exception_handler(Exception, unhandled_error_handler)
