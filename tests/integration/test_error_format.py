"""Integration tests for standardized error responses."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from django.db import OperationalError

from catalog.products.services import ProductService

pytestmark = pytest.mark.integration

ERROR_KEYS = {"success", "data", "message"}


class TestStandardizedErrors:
    def test_malformed_json_returns_validation_failed(self, api_client):
        response = api_client.post(
            "/api/v1/products", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "data": None,
            "message": "Validation failed",
        }

    def test_non_json_body_is_rejected(self, api_client):
        response = api_client.post(
            "/api/v1/products", data="name=Laptop", content_type="text/plain"
        )
        assert response.status_code == 415
        assert set(response.json()) == ERROR_KEYS
        assert response.json()["success"] is False

    def test_unknown_route_returns_envelope(self, api_client):
        response = api_client.get("/api/v1/nothing-here")
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "data": None,
            "message": "Resource not found",
        }

    def test_infrastructure_failure_is_sanitised(self, api_client):
        with patch.object(
            ProductService,
            "get_all_products",
            side_effect=OperationalError("connection to 10.0.0.5:5432 refused"),
        ):
            response = api_client.get("/api/v1/products")

        assert response.status_code == 500
        body = response.json()
        assert body == {
            "success": False,
            "data": None,
            "message": "Internal server error. Please try again later.",
        }
        assert "10.0.0.5" not in response.content.decode()
