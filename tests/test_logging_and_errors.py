"""Tests for logging and error handling."""

import pytest
from httpx import AsyncClient

from zerobudget.core.errors import (
    AppError,
    ConflictError,
    DatabaseError,
    ErrorDetail,
    NotFoundError,
    SeedingError,
    UnauthorizedError,
    ValidationError,
)
from zerobudget.core.logging import get_request_id, set_request_id
from zerobudget.core.sentry import filter_sensitive_data


class TestErrorClasses:
    """Test custom exception classes."""

    def test_validation_error_creates_correct_response(self):
        exc = ValidationError("Invalid color", details={"field": "color"})

        assert exc.code == "VALIDATION_ERROR"
        assert exc.status_code == 422

        response = exc.to_response()
        assert isinstance(response, ErrorDetail)
        assert response.error == "Invalid color"
        assert response.details == {"field": "color"}

    def test_not_found_error_includes_resource_context(self):
        exc = NotFoundError(resource="Category", resource_id="123")

        assert exc.status_code == 404
        assert exc.message == "Category with ID 123 not found"
        assert exc.details == {"resource": "Category", "resource_id": "123"}

    def test_unauthorized_defaults(self):
        exc = UnauthorizedError()

        assert exc.status_code == 401
        assert exc.to_response().model_dump(exclude_none=True) == {
            "code": "UNAUTHORIZED",
            "error": "Unauthorized - Please log in",
        }

    def test_seeding_error_carries_details_string(self):
        exc = SeedingError(details="duplicate key value")

        assert exc.status_code == 500
        assert exc.to_response().details == "duplicate key value"

    @pytest.mark.parametrize(
        ("exc", "status"),
        [
            (ConflictError("exists"), 409),
            (DatabaseError("down"), 500),
            (AppError("CUSTOM", "custom"), 500),
        ],
    )
    def test_status_codes(self, exc, status):
        assert exc.status_code == status


class TestRequestIDContext:
    """Test request ID injection."""

    def test_set_and_get_request_id(self):
        set_request_id("test-request-123")
        assert get_request_id() == "test-request-123"
        set_request_id("no-request-id")

    @pytest.mark.asyncio
    async def test_request_id_header_is_echoed(self, client: AsyncClient):
        response = await client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["x-request-id"] == "abc-123"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, client: AsyncClient):
        response = await client.get("/health")

        assert len(response.headers["x-request-id"]) == 36


class TestErrorHandling:
    """Global handlers render a consistent JSON shape."""

    @pytest.mark.asyncio
    async def test_unknown_route_uses_error_shape(self, client: AsyncClient):
        response = await client.get("/does-not-exist")

        assert response.status_code == 404
        assert response.json()["error"] == "Not Found"

    @pytest.mark.asyncio
    async def test_app_error_is_rendered(self, client: AsyncClient):
        response = await client.get("/api/categories/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404
        data = response.json()
        assert data["code"] == "NOT_FOUND"
        assert data["details"]["resource"] == "Category"


class TestSentryFilter:
    def test_sql_is_removed_from_extra_and_breadcrumbs(self):
        event = {
            "extra": {"sql_statement": "SELECT 1", "user": "42"},
            "breadcrumbs": {"values": [{"message": "INSERT ... sql"}, {"message": "request"}]},
        }

        filtered = filter_sensitive_data(event, {})

        assert filtered["extra"] == {"user": "42"}
        assert filtered["breadcrumbs"]["values"] == [{"message": "request"}]
