"""Error handlers for mapping domain errors to HTTP responses.

This module contains exception handlers that translate domain-specific
exceptions into appropriate HTTP responses with consistent error formatting.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from library_inventory.domain import (
    BookNotAvailableError,
    BookNotFoundError,
    DomainError,
    InvalidArgumentError,
    IsbnConflictError,
)
from library_inventory.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _create_error_response(
    status_code: int,
    error_code: str,
    message: str,
    field: str | None = None,
    context: dict | None = None,
) -> JSONResponse:
    """Helper to create consistent error responses.

    Args:
        status_code: HTTP status code
        error_code: Error code string
        message: Error message
        field: Field name if error is field-specific
        context: Additional error context

    Returns:
        JSONResponse with consistent error format
    """
    error_response = ErrorResponse(
        error={
            "code": error_code,
            "message": message,
            "field": field,
            "context": context,
        }
    )
    return JSONResponse(status_code=status_code, content=error_response.model_dump())


def _create_domain_error_response(
    status_code: int,
    exc: DomainError,
    field: str | None = None,
    context: dict | None = None,
) -> JSONResponse:
    """Helper to build an error response carrying the domain error's own code."""
    error_response = ErrorResponse.from_domain_error(exc, field=field, context=context)
    return JSONResponse(status_code=status_code, content=error_response.model_dump())


def _create_validation_response(message: str, field: str | None = None) -> JSONResponse:
    """Helper to create 422 validation error responses."""
    return _create_error_response(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        error_code="VALIDATION_ERROR",
        message=message,
        field=field,
    )


async def invalid_argument_handler(
    request: Request, exc: InvalidArgumentError
) -> JSONResponse:
    """Handle InvalidArgumentError exceptions."""
    return _create_validation_response(exc.message, exc.field)


async def isbn_conflict_handler(
    request: Request, exc: IsbnConflictError
) -> JSONResponse:
    """Handle IsbnConflictError exceptions."""
    return _create_domain_error_response(
        status.HTTP_409_CONFLICT, exc, context={"isbn": exc.isbn}
    )


async def book_not_found_handler(
    request: Request, exc: BookNotFoundError
) -> JSONResponse:
    """Handle BookNotFoundError exceptions."""
    return _create_domain_error_response(
        status.HTTP_404_NOT_FOUND, exc, context={"isbn": exc.isbn}
    )


async def book_not_available_handler(
    request: Request, exc: BookNotAvailableError
) -> JSONResponse:
    """Handle BookNotAvailableError exceptions."""
    return _create_domain_error_response(
        status.HTTP_409_CONFLICT, exc, context={"isbn": exc.isbn}
    )


async def pydantic_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors."""
    # Extract the first error for simplicity
    first_error = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(loc) for loc in first_error.get("loc", []))
    message = first_error.get("msg", "Validation error")

    return _create_validation_response(message, field if field else None)


async def generic_domain_error_handler(
    request: Request, exc: DomainError
) -> JSONResponse:
    """Handle generic domain errors."""
    return _create_domain_error_response(status.HTTP_400_BAD_REQUEST, exc)


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Handle ValueError exceptions (often from domain validation)."""
    return _create_validation_response(str(exc))


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code="INTERNAL_ERROR",
        message="An unexpected error occurred",
    )


# Error handler registry for easy registration
ERROR_HANDLERS = {
    InvalidArgumentError: invalid_argument_handler,
    IsbnConflictError: isbn_conflict_handler,
    BookNotFoundError: book_not_found_handler,
    BookNotAvailableError: book_not_available_handler,
    RequestValidationError: pydantic_validation_error_handler,
    DomainError: generic_domain_error_handler,
    ValueError: value_error_handler,
    Exception: generic_exception_handler,
}
