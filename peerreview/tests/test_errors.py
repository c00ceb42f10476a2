"""Tests for standardized error handling."""

from datetime import date

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from peerreview.availability import (
    AvailabilityType,
    DateRange,
    ReadOnlyAvailabilityError,
    parse_recurrence_rule,
)
from peerreview.errors import (
    BadRequestError,
    ErrorResponse,
    ForbiddenError,
    _status_to_error_type,
    register_exception_handlers,
)


class TestAPIErrors:
    """Test custom API error classes."""

    def test_bad_request_defaults(self):
        """Test BadRequestError has correct defaults."""
        error = BadRequestError()
        assert error.status_code == 400
        assert error.error == "bad_request"
        assert error.detail == "Invalid request"
        assert error.context is None

    def test_bad_request_with_context(self):
        """Test BadRequestError with error code and context."""
        error = BadRequestError(detail="Too many reviewers", error_code="TEAM_TOO_LARGE", reviewers=30)
        assert error.detail == "Too many reviewers"
        assert error.error_code == "TEAM_TOO_LARGE"
        assert error.context == {"reviewers": 30}

    def test_forbidden_error(self):
        """Test ForbiddenError."""
        error = ForbiddenError(detail="Read only")
        assert error.status_code == 403
        assert error.error == "forbidden"


class TestErrorResponse:
    """Test error response model."""

    def test_error_response_model(self):
        """Test ErrorResponse model serialization."""
        response = ErrorResponse(
            error="bad_request",
            detail="Period too long",
            error_code="PERIOD_TOO_LONG",
            context={"days": 400},
        )
        data = response.model_dump()
        assert data["error"] == "bad_request"
        assert data["error_code"] == "PERIOD_TOO_LONG"
        assert data["context"] == {"days": 400}

    def test_error_response_minimal(self):
        """Test ErrorResponse with minimal fields."""
        data = ErrorResponse(error="internal_error").model_dump(exclude_none=True)
        assert data == {"error": "internal_error"}

    def test_api_error_to_response(self):
        """Test converting APIError to ErrorResponse."""
        response = BadRequestError(detail="Nope", field="min_days").to_response()
        assert response.error == "bad_request"
        assert response.detail == "Nope"
        assert response.context == {"field": "min_days"}


@pytest.fixture
def error_client():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/bad-request")
    async def bad_request():
        raise BadRequestError(detail="Broken input", error_code="BROKEN")

    @app.get("/bad-range")
    async def bad_range():
        DateRange(date(2025, 2, 1), date(2025, 1, 1))

    @app.get("/bad-rule")
    async def bad_rule():
        parse_recurrence_rule("FREQ=SECONDLY")

    @app.get("/read-only")
    async def read_only():
        raise ReadOnlyAvailabilityError(AvailabilityType.ON_ASSIGNMENT)

    @app.get("/http")
    async def http():
        raise HTTPException(status_code=404, detail="missing")

    return TestClient(app, raise_server_exceptions=False)


class TestExceptionHandlers:
    """Test exception handlers integration."""

    def test_api_error_handler(self, error_client):
        """Test that APIError is handled correctly."""
        response = error_client.get("/bad-request")
        assert response.status_code == 400
        assert response.json() == {"error": "bad_request", "detail": "Broken input", "error_code": "BROKEN"}

    def test_invalid_date_range(self, error_client):
        """Test that a reversed date range becomes a 400."""
        response = error_client.get("/bad-range")
        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "INVALID_DATE_RANGE"
        assert body["detail"].startswith("End date must be on or after start date")

    def test_invalid_recurrence(self, error_client):
        """Test that an unparseable recurrence rule becomes a 400."""
        response = error_client.get("/bad-rule")
        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_RECURRENCE"

    def test_read_only_type(self, error_client):
        """Test that editing a system-managed type becomes a 403."""
        response = error_client.get("/read-only")
        assert response.status_code == 403
        body = response.json()
        assert body["error_code"] == "SYSTEM_MANAGED_TYPE"
        assert body["context"] == {"availability_type": "ON_ASSIGNMENT"}

    def test_http_exception(self, error_client):
        """Test HTTPException handling with the standard body."""
        response = error_client.get("/http")
        assert response.status_code == 404
        assert response.json() == {"error": "not_found", "detail": "missing"}


class TestStatusToErrorType:
    """Test status code to error type mapping."""

    def test_common_status_codes(self):
        """Test mapping of common status codes."""
        assert _status_to_error_type(400) == "bad_request"
        assert _status_to_error_type(403) == "forbidden"
        assert _status_to_error_type(404) == "not_found"
        assert _status_to_error_type(422) == "validation_error"
        assert _status_to_error_type(500) == "internal_error"

    def test_unknown_status_code(self):
        """Test that unknown status codes return generic error."""
        assert _status_to_error_type(418) == "error"
