"""Error handling middleware and exception handlers."""

from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from transaction_service.domain.exceptions import (
    DomainException,
    DuplicateTransactionException,
    InvalidTransactionRequestException,
    TransactionNotFoundException,
)

logger = structlog.get_logger(__name__)

# Request locations that are not part of a field name
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _error_body(request: Request, status: HTTPStatus, message: str) -> Dict[str, Any]:
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status.value,
        "error": status.phrase,
        "message": message,
        "path": request.url.path,
    }


def _error_response(request: Request, status: HTTPStatus, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.value,
        content=_error_body(request, status, message),
    )


def format_validation_errors(errors: list) -> str:
    """
    Render pydantic validation errors as a single message.

    Each offending field is listed once, e.g.
    ``Validation failed: amount: Input should be greater than 0``.
    """
    parts = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES]
        field = ".".join(location) or "request"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")

    return "Validation failed: " + "; ".join(parts)


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(TransactionNotFoundException)
    async def transaction_not_found_handler(
        request: Request,
        exc: TransactionNotFoundException,
    ) -> JSONResponse:
        """Handle transaction not found errors."""
        logger.warning(
            "transaction_not_found",
            path=request.url.path,
            transaction_id=exc.transaction_id,
        )
        return _error_response(request, HTTPStatus.NOT_FOUND, exc.message)

    @app.exception_handler(DuplicateTransactionException)
    async def duplicate_transaction_handler(
        request: Request,
        exc: DuplicateTransactionException,
    ) -> JSONResponse:
        """Handle duplicate transaction errors."""
        logger.warning(
            "duplicate_transaction",
            path=request.url.path,
            window_seconds=exc.window_seconds,
        )
        return _error_response(request, HTTPStatus.CONFLICT, exc.message)

    @app.exception_handler(InvalidTransactionRequestException)
    async def invalid_request_handler(
        request: Request,
        exc: InvalidTransactionRequestException,
    ) -> JSONResponse:
        """Handle invalid request errors raised by the service."""
        logger.warning(
            "invalid_transaction_request",
            path=request.url.path,
            message=exc.message,
        )
        return _error_response(request, HTTPStatus.BAD_REQUEST, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle malformed bodies, query parameters and path parameters."""
        message = format_validation_errors(exc.errors())
        logger.warning(
            "request_validation_failed",
            path=request.url.path,
            message=message,
        )
        return _error_response(request, HTTPStatus.BAD_REQUEST, message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            path=request.url.path,
            code=exc.code,
            message=exc.message,
        )
        return _error_response(request, HTTPStatus.BAD_REQUEST, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=getattr(request.state, "request_id", None),
        )
        return _error_response(
            request,
            HTTPStatus.INTERNAL_SERVER_ERROR,
            "An unexpected error occurred.",
        )
