"""Standardized error handling for the scheduling API.

This module provides:
1. Custom exception classes for request-level errors
2. Exception handlers for FastAPI, including the engine's input errors
3. Standard error response models

Usage:
    from peerreview.errors import BadRequestError

    if len(reviewers) > limit:
        raise BadRequestError(detail="Too many reviewers", max_team_size=limit)

    # Register handlers in main.py:
    from peerreview.errors import register_exception_handlers
    register_exception_handlers(app)
"""

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from peerreview.availability import InvalidDateRangeError, ReadOnlyAvailabilityError, RecurrenceParseError

logger = logging.getLogger("peerreview.errors")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
    detail: str | None = None
    error_code: str | None = None
    context: dict[str, Any] | None = None


class APIError(Exception):
    """Base class for API errors."""

    status_code: int = 500
    error: str = "internal_error"
    detail: str = "An unexpected error occurred"

    def __init__(
        self,
        detail: str | None = None,
        error_code: str | None = None,
        **context: Any,
    ) -> None:
        self.detail = detail or self.__class__.detail
        self.error_code = error_code
        self.context = context if context else None
        super().__init__(self.detail)

    def to_response(self) -> ErrorResponse:
        """Convert exception to error response model."""
        return ErrorResponse(
            error=self.error,
            detail=self.detail,
            error_code=self.error_code,
            context=self.context,
        )


class BadRequestError(APIError):
    """Bad request error (400)."""

    status_code = 400
    error = "bad_request"
    detail = "Invalid request"


class ForbiddenError(APIError):
    """Forbidden error (403)."""

    status_code = 403
    error = "forbidden"
    detail = "Access denied"


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle custom API errors."""
    logger.warning(
        "API error: %s (status=%d, path=%s)",
        exc.detail,
        exc.status_code,
        request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(exclude_none=True),
    )


async def engine_input_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Report engine input contract violations as 400 responses."""
    error_code = "INVALID_RECURRENCE" if isinstance(exc, RecurrenceParseError) else "INVALID_DATE_RANGE"
    return await api_error_handler(request, BadRequestError(detail=str(exc), error_code=error_code))


async def read_only_error_handler(request: Request, exc: ReadOnlyAvailabilityError) -> JSONResponse:
    return await api_error_handler(
        request,
        ForbiddenError(
            detail=str(exc),
            error_code="SYSTEM_MANAGED_TYPE",
            availability_type=str(exc.availability_type),
        ),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle FastAPI HTTPExceptions with standard format."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=_status_to_error_type(exc.status_code),
            detail=str(exc.detail),
        ).model_dump(exclude_none=True),
    )


def _status_to_error_type(status_code: int) -> str:
    """Map HTTP status code to error type string."""
    mapping = {
        400: "bad_request",
        403: "forbidden",
        404: "not_found",
        405: "method_not_allowed",
        422: "validation_error",
        500: "internal_error",
    }
    return mapping.get(status_code, "error")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(InvalidDateRangeError, engine_input_error_handler)
    app.add_exception_handler(RecurrenceParseError, engine_input_error_handler)
    app.add_exception_handler(ReadOnlyAvailabilityError, read_only_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
