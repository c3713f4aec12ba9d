"""Tests for health check endpoints."""

import uuid

import pytest
from fastapi import status

from library_inventory.core.config import settings
from library_inventory.core.constants import HEALTH_MESSAGE, HEALTH_STATUS


class TestHealthEndpoint:
    """Test cases for health check endpoint."""

    def test_health_endpoint_success(self, client):
        """Test health check endpoint returns correct response."""
        response = client.get("/api/v1/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "status": HEALTH_STATUS,
            "message": HEALTH_MESSAGE,
            "version": settings.api_version,
        }

    def test_health_endpoint_has_request_id_header(self, client):
        """Test that health check includes request ID in response headers."""
        response = client.get("/api/v1/health")

        assert response.status_code == status.HTTP_200_OK
        assert "x-request-id" in response.headers
        assert uuid.UUID(response.headers["x-request-id"])

    def test_health_endpoint_with_custom_request_id(self, client):
        """Test health check with custom request ID in headers."""
        custom_request_id = "custom-test-id-123"
        response = client.get(
            "/api/v1/health", headers={"x-request-id": custom_request_id}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["x-request-id"] == custom_request_id

    @pytest.mark.parametrize("method", ["post", "put", "patch", "delete"])
    def test_health_methods_not_allowed(self, client, method):
        """Test that non-GET methods return 405 Method Not Allowed."""
        response = getattr(client, method)("/api/v1/health")
        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
