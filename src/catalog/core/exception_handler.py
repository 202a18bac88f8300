"""Centralised translation of failures into HTTP error envelopes.

Registered as DRF's ``EXCEPTION_HANDLER``.  Domain exceptions raised by the
service layer propagate untouched through the views and are mapped here,
once, at the boundary:

==========================  ======  ================================================
Failure                     Status  Message
==========================  ======  ================================================
``ProductNotFound``         404     the exception message
``ProductAlreadyExists``    409     the exception message
request validation          400     ``Validation failed``
``ConstraintViolation``     400     ``Invalid request parameters``
other ``APIException``      as-is   fixed message per status
anything else               500     ``Internal server error. Please try again later.``
==========================  ======  ================================================

Per-field validation detail and stack traces are logged, never returned.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions, status
from rest_framework.response import Response

from catalog.core.exceptions import ConstraintViolation
from catalog.core.responses import (
    INTERNAL_ERROR,
    INVALID_PARAMETERS,
    RESOURCE_NOT_FOUND,
    VALIDATION_FAILED,
    error,
)
from catalog.products.exceptions import ProductAlreadyExists, ProductNotFound

logger = structlog.get_logger(__name__)

_API_EXCEPTION_MESSAGES = {
    status.HTTP_404_NOT_FOUND: RESOURCE_NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
    status.HTTP_406_NOT_ACCEPTABLE: "Not acceptable",
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: "Unsupported media type",
    status.HTTP_429_TOO_MANY_REQUESTS: "Too many requests",
}


def _request_info(context: Dict[str, Any]) -> Dict[str, Any]:
    request = context.get("request")
    if request is None:
        return {}
    return {"method": request.method, "path": request.get_full_path()}


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """Map ``exc`` to an error envelope response."""
    info = _request_info(context)

    if isinstance(exc, ProductNotFound):
        logger.warning("api.not_found", error=str(exc), **info)
        return error(str(exc), status.HTTP_404_NOT_FOUND)

    if isinstance(exc, ProductAlreadyExists):
        logger.warning("api.conflict", error=str(exc), **info)
        return error(str(exc), status.HTTP_409_CONFLICT)

    if isinstance(exc, ConstraintViolation):
        logger.warning(
            "api.constraint_violation",
            parameter=exc.parameter,
            detail=exc.detail,
            **info,
        )
        return error(INVALID_PARAMETERS, status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, (exceptions.ValidationError, exceptions.ParseError)):
        logger.warning("api.validation_failed", errors=exc.detail, **info)
        return error(VALIDATION_FAILED, status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, PydanticValidationError):
        logger.warning("api.validation_failed", errors=exc.errors(), **info)
        return error(VALIDATION_FAILED, status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, DjangoValidationError):
        logger.warning("api.validation_failed", errors=exc.messages, **info)
        return error(VALIDATION_FAILED, status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, Http404):
        return error(RESOURCE_NOT_FOUND, status.HTTP_404_NOT_FOUND)

    if isinstance(exc, exceptions.APIException):
        code = exc.status_code
        logger.warning("api.request_rejected", status_code=code, error=str(exc), **info)
        return error(_API_EXCEPTION_MESSAGES.get(code, "Request failed"), code)

    logger.exception("api.internal_error", error_type=type(exc).__name__, **info)
    return error(INTERNAL_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)
