"""
Error handling middleware.
"""

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from account_service.config.logging import get_logger
from account_service.domain.exceptions.invariant_error import (
    ConcurrentModificationError,
    InvariantViolationError,
)
from account_service.domain.exceptions.not_found_error import NotFoundError
from account_service.domain.exceptions.validation_error import (
    DuplicateAccountError,
    ValidationError,
)

logger = get_logger(__name__)


def _error_response(status_code: int, error: str, message: str, error_type: str):
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "type": error_type},
    )


class ErrorHandlerMiddleware:
    """Error handling middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_error_handlers()

    def add_error_handlers(self) -> None:
        """Add custom error handlers to FastAPI app."""
        add_error_handlers(self.app)


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation error", error=str(exc), path=request.url.path)
        return _error_response(400, "Validation Error", str(exc), "validation_error")

    @app.exception_handler(DuplicateAccountError)
    async def duplicate_account_handler(request: Request, exc: DuplicateAccountError):
        logger.warning("Duplicate account", error=str(exc), path=request.url.path)
        return _error_response(409, "Conflict", str(exc), "duplicate_account")

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(request: Request, exc: NotFoundError):
        logger.warning("Resource not found", error=str(exc), path=request.url.path)
        return _error_response(404, "Not Found", str(exc), "not_found")

    @app.exception_handler(InvariantViolationError)
    async def invariant_error_handler(request: Request, exc: InvariantViolationError):
        logger.error("Invariant violation", error=str(exc), path=request.url.path)
        return _error_response(
            409, "Invariant Violation", str(exc), "invariant_violation"
        )

    @app.exception_handler(ConcurrentModificationError)
    async def concurrency_error_handler(
        request: Request, exc: ConcurrentModificationError
    ):
        logger.warning("Concurrent modification", error=str(exc), path=request.url.path)
        return _error_response(
            409, "Concurrent Modification", str(exc), "concurrent_modification"
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error", error=str(exc), path=request.url.path)
        return _error_response(
            500, "Database Error", "A database error occurred", "database_error"
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return _error_response(exc.status_code, "HTTP Error", exc.detail, "http_error")

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            exc_info=exc,
        )
        return _error_response(
            500,
            "Internal Server Error",
            "An unexpected error occurred",
            "internal_error",
        )
