"""
Translation of domain errors into structured JSON responses.

Every error response has the shape ``{"error": <code>, "message": <text>}``.
Unexpected exceptions are logged in full server-side; the client only gets
a generic message with a short correlation ID (plus the exception text when
DEBUG is enabled).
"""

# Standard library imports
import logging
import uuid
from typing import Dict, Optional, Tuple, Type

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ...core.config import get_settings
from ...domain.exceptions import (
    BlogAppError,
    DuplicateEmailError,
    DuplicateUsernameError,
    ForbiddenError,
    InternalError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: Dict[Type[BlogAppError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    InvalidTokenError: status.HTTP_401_UNAUTHORIZED,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateUsernameError: status.HTTP_409_CONFLICT,
    DuplicateEmailError: status.HTTP_409_CONFLICT,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

GENERIC_ERROR_MESSAGE = "Something went wrong on the server!"

# Routing failures raised by the framework itself
HTTP_ERROR_CODES: Dict[int, Tuple[str, str]] = {
    status.HTTP_404_NOT_FOUND: ("not_found", "Route not found"),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("method_not_allowed", "Method not allowed"),
}


def status_for(error: BlogAppError) -> int:
    for error_class in type(error).__mro__:
        if error_class in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_class]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(
    status_code: int,
    code: str,
    message: str,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": code, "message": message},
        headers=headers,
    )


def _internal_error_response(error: Exception, context: str) -> JSONResponse:
    error_id = str(uuid.uuid4())[:8]
    logger.error(
        f"{context} failed [{error_id}]: {type(error).__name__}: {str(error)}",
        exc_info=error,
    )

    message = f"{GENERIC_ERROR_MESSAGE} (Error ID: {error_id})"
    if get_settings().debug:
        message = f"{message}: {str(error)}"
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        InternalError.code,
        message,
    )


async def handle_blog_app_error(request: Request, exception: BlogAppError) -> JSONResponse:
    status_code = status_for(exception)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        return _internal_error_response(exception, f"{request.method} {request.url.path}")

    headers = None
    if isinstance(exception, (UnauthenticatedError, InvalidTokenError)):
        headers = {"WWW-Authenticate": "Bearer"}
    return error_response(status_code, exception.code, exception.message, headers)


async def handle_request_validation_error(request: Request, exception: RequestValidationError) -> JSONResponse:
    problems = []
    for error in exception.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    message = "; ".join(problems) or ValidationError.default_message
    return error_response(status.HTTP_400_BAD_REQUEST, ValidationError.code, message)


async def handle_http_exception(request: Request, exception: StarletteHTTPException) -> JSONResponse:
    code, message = HTTP_ERROR_CODES.get(exception.status_code, ("http_error", str(exception.detail)))
    return error_response(exception.status_code, code, message, getattr(exception, "headers", None))


async def handle_unexpected_error(request: Request, exception: Exception) -> JSONResponse:
    return _internal_error_response(exception, f"{request.method} {request.url.path}")


def register_exception_handlers(application: FastAPI) -> None:
    """Attach the error translation handlers to the application"""
    application.add_exception_handler(BlogAppError, handle_blog_app_error)
    application.add_exception_handler(StarletteHTTPException, handle_http_exception)
    application.add_exception_handler(RequestValidationError, handle_request_validation_error)
    application.add_exception_handler(Exception, handle_unexpected_error)
