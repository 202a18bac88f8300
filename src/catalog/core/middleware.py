import re
import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"

_INCOMING_ID_META_KEYS = ("HTTP_X_REQUEST_ID", "HTTP_X_CORRELATION_ID")
_VALID_ID = re.compile(r"[A-Za-z0-9._:-]{1,128}")


def _incoming_id(request: HttpRequest) -> str:
    for key in _INCOMING_ID_META_KEYS:
        value = request.META.get(key)
        if value and _VALID_ID.fullmatch(value):
            return value
    return str(uuid.uuid4())


def _envelope_outcome(response: HttpResponse):
    data = getattr(response, "data", None)
    if isinstance(data, dict):
        return data.get("success")
    return None


class CorrelationIdMiddleware:
    """Tags every request with a correlation ID and logs one line per request.

    The ID comes from ``X-Request-ID`` (or ``X-Correlation-ID``) when the
    caller sends a well-formed one, otherwise a UUID4 is generated.  It is
    bound into structlog's context vars for the lifetime of the request and
    echoed back in ``X-Request-ID``.

    The completion line carries the status, the envelope's ``success`` flag
    and the elapsed time; it is logged at WARNING for 4xx and ERROR for 5xx.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = _incoming_id(request)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)
        started = time.monotonic()

        try:
            response = self.get_response(request)

            status_code = response.status_code
            if status_code >= 500:
                log = logger.error
            elif status_code >= 400:
                log = logger.warning
            else:
                log = logger.info
            log(
                "request_completed",
                method=request.method,
                path=request.get_full_path(),
                status_code=status_code,
                success=_envelope_outcome(response),
                duration_ms=round((time.monotonic() - started) * 1000, 2),
            )

            response[REQUEST_ID_HEADER] = cid
            return response
        finally:
            structlog.contextvars.clear_contextvars()
