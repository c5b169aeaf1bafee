from .logging import StructuredLoggingMiddleware, get_request_id, setup_structured_logging

__all__ = ["StructuredLoggingMiddleware", "get_request_id", "setup_structured_logging"]
