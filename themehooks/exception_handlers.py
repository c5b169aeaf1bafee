"""
Exception handlers for Theme Hooks

Every error leaves the application in one envelope:

{
    "error": {
        "status_code": 404,
        "error_code": "RESOURCE_ROUTE_NOT_FOUND",
        "message": "Route 'unknown_route' not found",
        "type": "Not Found",
        "details": {"resource_type": "Route", "resource_id": "unknown_route"},
        "path": "/api/v1/routes/unknown_route/render"
    }
}

Three sources reach it: CMSException raised by the kernel and renderer,
HTTP errors from routing (unknown path, wrong method, missing help), and
anything unexpected, which is reported as a bare 500.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from themehooks.exceptions import CMSException, ErrorCode

logger = logging.getLogger(__name__)

_ERROR_TYPES = {
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method Not Allowed",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
}

_HTTP_ERROR_CODES = {
    status.HTTP_404_NOT_FOUND: ErrorCode.RESOURCE_NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorCode.METHOD_NOT_ALLOWED,
}


def get_error_type(status_code: int) -> str:
    """Human-readable label for status_code; "Error" for anything unlisted."""
    return _ERROR_TYPES.get(status_code, "Error")


def create_error_response(
    status_code: int,
    message: str,
    error_code: ErrorCode | None = None,
    details: dict[str, Any] | None = None,
    path: str | None = None,
) -> JSONResponse:
    """Build the error envelope, leaving out fields that are empty."""
    error: dict[str, Any] = {
        "status_code": status_code,
        "message": message,
        "type": get_error_type(status_code),
    }
    if error_code:
        error["error_code"] = error_code.value
    if details:
        error["details"] = details
    if path:
        error["path"] = path
    return JSONResponse(status_code=status_code, content={"error": error})


async def cms_exception_handler(request: Request, exc: CMSException) -> JSONResponse:
    """
    Handle Theme Hooks exceptions.

    Not-found errors are logged as warnings; anything else is a
    programming error and is logged as an error.
    """
    logger.log(
        logging.WARNING if exc.status_code < 500 else logging.ERROR,
        "%s: %s",
        type(exc).__name__,
        exc.message,
        extra={"status_code": exc.status_code, "error_code": exc.error_code.value, "path": request.url.path},
    )
    return create_error_response(
        status_code=exc.status_code,
        message=exc.message,
        error_code=exc.error_code,
        details=exc.details,
        path=request.url.path,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning(
        "HTTP %d on %s: %s",
        exc.status_code,
        request.url.path,
        exc.detail,
        extra={"status_code": exc.status_code, "path": request.url.path},
    )
    return create_error_response(
        status_code=exc.status_code,
        message=str(exc.detail),
        error_code=_HTTP_ERROR_CODES.get(exc.status_code, ErrorCode.UNKNOWN_ERROR),
        path=request.url.path,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report an unexpected failure without exposing its details."""
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="An unexpected error occurred. Please try again later.",
        error_code=ErrorCode.INTERNAL_ERROR,
        path=request.url.path,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(CMSException, cms_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
