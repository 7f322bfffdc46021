"""Middleware for request processing."""

from .error_handler import error_handler_middleware
from .request_context import REQUEST_ID_HEADER, RequestContextMiddleware
from .logging import LoggingMiddleware

__all__ = [
    "error_handler_middleware",
    "REQUEST_ID_HEADER",
    "RequestContextMiddleware",
    "LoggingMiddleware",
]
