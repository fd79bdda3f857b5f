"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses share the ``{"success": false, "error": ...}`` shape.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.domain.shared.errors import (
    DomainError,
    InsufficientFundsError,
    InternalError,
    InvalidStateError,
    NotFoundError,
    OutOfRangeError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_404 = 404
HTTP_500 = 500

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, object] = {"success": False, "error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _describe_validation(exc: RequestValidationError) -> str:
    """Summarize request validation failures without echoing input values."""
    errors = exc.errors()
    if any(err.get("type") == "missing" for err in errors):
        return "Missing required fields"
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"Invalid value for {location}: {first.get('msg', 'invalid input')}"


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed or incomplete request payloads."""
        message = _describe_validation(exc)
        logger.warning("Request validation failed: %s", message)
        return _error_response(HTTP_400, message)

    @app.exception_handler(ValidationError)
    async def handle_validation(_request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning("Validation error: %s", exc.message)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
        logger.warning("Not found: %s", exc.message)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(InvalidStateError)
    async def handle_invalid_state(
        _request: Request, exc: InvalidStateError
    ) -> JSONResponse:
        logger.warning("Invalid state: %s", exc.message)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(OutOfRangeError)
    async def handle_out_of_range(
        _request: Request, exc: OutOfRangeError
    ) -> JSONResponse:
        logger.warning("Out of range: %s", exc.message)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(InsufficientFundsError)
    async def handle_insufficient_funds(
        _request: Request, exc: InsufficientFundsError
    ) -> JSONResponse:
        """Handle insufficient funds errors."""
        logger.warning("Insufficient funds")
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(
        _request: Request, exc: UnauthorizedError
    ) -> JSONResponse:
        logger.warning("Unauthorized trigger attempt")
        return _error_response(HTTP_401, exc.message)

    @app.exception_handler(InternalError)
    async def handle_internal(_request: Request, exc: InternalError) -> JSONResponse:
        logger.error("Internal error: %s", exc.message)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(DomainError)
    async def handle_domain(_request: Request, exc: DomainError) -> JSONResponse:
        """Catch-all for unhandled domain errors."""
        logger.error("Unhandled domain error: %s", exc.message)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(SQLAlchemyError)
    async def handle_database(_request: Request, exc: SQLAlchemyError) -> JSONResponse:
        """Store failures surface as a generic internal error."""
        logger.exception("Database error: %s", type(exc).__name__)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)
