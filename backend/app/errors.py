"""
Exception handlers mapping the error taxonomy to HTTP responses.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import MethodNotAllowedError, UserDirectoryError

logger = logging.getLogger(__name__)


def error_response(exc: UserDirectoryError, headers: dict | None = None) -> Response:
    """Build the HTTP response for a user directory error."""
    if isinstance(exc, MethodNotAllowedError):
        return PlainTextResponse(exc.message, status_code=exc.status_code, headers=headers)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=headers)


async def user_directory_error_handler(request: Request, exc: UserDirectoryError) -> Response:
    """Handle errors raised by the service layer."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 instead of FastAPI's 422."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.info("Rejected %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"Invalid request: {details}"},
    )


async def starlette_http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Render routing 405s as plain text; defer everything else to FastAPI."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return error_response(MethodNotAllowedError(), headers=exc.headers)
    return await http_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the application."""
    app.add_exception_handler(UserDirectoryError, user_directory_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, starlette_http_error_handler)
