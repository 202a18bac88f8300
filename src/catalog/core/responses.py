"""Uniform response envelope: ``{"success", "data", "message"}``."""

from __future__ import annotations

from typing import Any, Dict

from rest_framework import status as http_status
from rest_framework.response import Response

VALIDATION_FAILED = "Validation failed"
INVALID_PARAMETERS = "Invalid request parameters"
RESOURCE_NOT_FOUND = "Resource not found"
INTERNAL_ERROR = "Internal server error. Please try again later."


class ApiResponse:
    """Builders for the success and error envelopes."""

    @staticmethod
    def success(data: Any, message: str) -> Dict[str, Any]:
        return {"success": True, "data": data, "message": message}

    @staticmethod
    def error(message: str) -> Dict[str, Any]:
        return {"success": False, "data": None, "message": message}


def ok(data: Any, message: str, status: int = http_status.HTTP_200_OK) -> Response:
    return Response(ApiResponse.success(data, message), status=status)


def error(message: str, status: int) -> Response:
    return Response(ApiResponse.error(message), status=status)
