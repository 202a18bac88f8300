"""Unit tests for the DRF exception handler (error mapper)."""

from __future__ import annotations

import pytest
from django.db import OperationalError
from pydantic import BaseModel, ValidationError as PydanticValidationError
from rest_framework import exceptions

from catalog.core.exception_handler import api_exception_handler
from catalog.core.exceptions import ConstraintViolation
from catalog.core.responses import INTERNAL_ERROR, INVALID_PARAMETERS, VALIDATION_FAILED
from catalog.products.exceptions import ProductAlreadyExists, ProductNotFound

pytestmark = pytest.mark.unit


class _Shape(BaseModel):
    count: int


def _pydantic_error() -> PydanticValidationError:
    try:
        _Shape(count="many")
    except PydanticValidationError as exc:
        return exc
    raise AssertionError("expected a validation error")


def _handle(exc: Exception):
    return api_exception_handler(exc, {})


class TestDomainErrors:
    def test_not_found(self):
        response = _handle(ProductNotFound(3))
        assert response.status_code == 404
        assert response.data == {
            "success": False,
            "data": None,
            "message": "Product not found with id: 3",
        }

    def test_name_conflict(self):
        response = _handle(ProductAlreadyExists("Laptop"))
        assert response.status_code == 409
        assert response.data["message"] == "Product with name 'Laptop' already exists"


class TestValidationErrors:
    @pytest.mark.parametrize(
        "exc",
        [
            exceptions.ValidationError({"price": ["too low"]}),
            exceptions.ParseError("JSON parse error - Expecting value"),
        ],
    )
    def test_request_validation_is_generic(self, exc):
        response = _handle(exc)
        assert response.status_code == 400
        assert response.data["message"] == VALIDATION_FAILED
        assert response.data["data"] is None

    def test_pydantic_validation(self):
        response = _handle(_pydantic_error())
        assert response.status_code == 400
        assert response.data["message"] == VALIDATION_FAILED

    def test_constraint_violation(self):
        response = _handle(
            ConstraintViolation("price", "min_price must not exceed max_price")
        )
        assert response.status_code == 400
        assert response.data["message"] == INVALID_PARAMETERS


class TestFrameworkErrors:
    def test_method_not_allowed_is_sanitised(self):
        response = _handle(exceptions.MethodNotAllowed("PATCH"))
        assert response.status_code == 405
        assert response.data["message"] == "Method not allowed"

    def test_unsupported_media_type_is_sanitised(self):
        response = _handle(exceptions.UnsupportedMediaType("text/plain"))
        assert response.status_code == 415
        assert "text/plain" not in response.data["message"]


class TestInternalErrors:
    def test_unexpected_exception_maps_to_500(self):
        try:
            raise OperationalError("could not connect to server at 10.0.0.5")
        except OperationalError as exc:
            response = _handle(exc)

        assert response.status_code == 500
        assert response.data == {
            "success": False,
            "data": None,
            "message": INTERNAL_ERROR,
        }
