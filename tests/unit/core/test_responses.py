"""Unit tests for the response envelope and the plain Django fallback views."""

from __future__ import annotations

import json

import pytest
from django.test import RequestFactory

from catalog.core.responses import (
    INTERNAL_ERROR,
    RESOURCE_NOT_FOUND,
    ApiResponse,
    error,
    ok,
)
from catalog.core.views import not_found, server_error

pytestmark = pytest.mark.unit


class TestApiResponse:
    def test_success_envelope(self):
        assert ApiResponse.success([1], "Done") == {
            "success": True,
            "data": [1],
            "message": "Done",
        }

    def test_error_envelope_has_no_data(self):
        assert ApiResponse.error("Nope") == {
            "success": False,
            "data": None,
            "message": "Nope",
        }

    def test_ok_defaults_to_200(self):
        response = ok({"id": 1}, "Found")
        assert response.status_code == 200
        assert response.data["data"] == {"id": 1}

    def test_error_carries_status(self):
        response = error("Gone", 404)
        assert response.status_code == 404
        assert response.data["success"] is False


class TestFallbackViews:
    def test_not_found_uses_envelope(self):
        request = RequestFactory().get("/nowhere")
        response = not_found(request, Exception("no route"))
        assert response.status_code == 404
        assert json.loads(response.content)["message"] == RESOURCE_NOT_FOUND

    def test_server_error_is_sanitized(self):
        request = RequestFactory().get("/boom")
        response = server_error(request)
        assert response.status_code == 500
        assert json.loads(response.content) == {
            "success": False,
            "data": None,
            "message": INTERNAL_ERROR,
        }
