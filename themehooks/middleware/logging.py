"""
Structured Logging

Every request gets a request id (taken from X-Request-ID or generated),
which is echoed on the response and attached to every log record emitted
while the request is handled. The access log line names the matched route,
so a page request logs its route id, e.g. `class_hooks.page`.
"""

import json
import logging
import time
import uuid
from collections.abc import Callable
from contextvars import ContextVar
from datetime import datetime, timezone

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

ACCESS_LOGGER = "themehooks.access"
_QUIET_PATHS = frozenset({"/health"})
_EXTRA_KEYS = ("method", "path", "route", "status_code", "duration_ms", "error_code")


class RequestIdFilter(logging.Filter):
    """Copy the current request id onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("")
        return True


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", ""),
        }
        entry.update({key: getattr(record, key) for key in _EXTRA_KEYS if hasattr(record, key)})
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Access log keyed by request id and matched route name."""

    def __init__(self, app: ASGIApp, logger_name: str = ACCESS_LOGGER):
        super().__init__(app)
        self.logger = logging.getLogger(logger_name)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_id_var.set(request_id)
        started = time.perf_counter()

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        if request.url.path not in _QUIET_PATHS:
            duration_ms = round((time.perf_counter() - started) * 1000, 2)
            # Routing runs inside call_next; the matched route is left on the scope.
            route = getattr(request.scope.get("route"), "name", None)
            self.logger.log(
                _level_for(response.status_code),
                "%s %s -> %s %d (%.2fms)",
                request.method,
                request.url.path,
                route or "-",
                response.status_code,
                duration_ms,
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "route": route,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
        return response


def setup_structured_logging(log_level: str = "INFO", json_format: bool = True) -> None:
    """
    Configure the root handler and the application loggers.

    Args:
        log_level: Level for the themehooks loggers (DEBUG, INFO, WARNING, ERROR)
        json_format: Emit StructuredFormatter JSON instead of plain text
    """
    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"))
    handler.addFilter(RequestIdFilter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())

    for name in ("themehooks", ACCESS_LOGGER):
        logging.getLogger(name).setLevel(log_level.upper())
    for name in ("uvicorn", "uvicorn.access"):
        logging.getLogger(name).setLevel(logging.WARNING)


def get_request_id() -> str:
    """Return the request id of the request being handled, or ""."""
    return request_id_var.get("")
