import logging
import uuid

import pytest

pytestmark = pytest.mark.integration

BASE = "/api/v1/products"


def _completed(caplog):
    return [r for r in caplog.records if "request_completed" in r.getMessage()]


class TestCorrelationIdMiddleware:
    def test_echoes_request_id(self, api_client):
        response = api_client.get(BASE, HTTP_X_REQUEST_ID="catalog-req-1")
        assert response["X-Request-ID"] == "catalog-req-1"

    def test_accepts_correlation_id_header(self, api_client):
        response = api_client.get(BASE, HTTP_X_CORRELATION_ID="upstream.trace:42")
        assert response["X-Request-ID"] == "upstream.trace:42"

    def test_generates_uuid_when_absent(self, api_client):
        request_id = api_client.get(BASE)["X-Request-ID"]
        assert str(uuid.UUID(request_id, version=4)) == request_id

    @pytest.mark.parametrize("bad_id", ["has spaces", "x" * 129, "trailing\n"])
    def test_malformed_id_is_replaced(self, api_client, bad_id):
        request_id = api_client.get(BASE, HTTP_X_REQUEST_ID=bad_id)["X-Request-ID"]
        assert request_id != bad_id
        uuid.UUID(request_id, version=4)

    def test_correlation_id_in_service_logs(self, api_client_with_correlation, caplog):
        api_client, custom_id = api_client_with_correlation
        with caplog.at_level(logging.DEBUG):
            api_client.get(BASE)
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, [r.getMessage() for r in caplog.records]


class TestRequestCompletedLine:
    def test_single_line_per_request(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.get(BASE)
        messages = [r.getMessage() for r in caplog.records]
        assert len(_completed(caplog)) == 1, messages
        assert not any("request_started" in m for m in messages)

    def test_success_logged_at_info(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.get(BASE)
        (record,) = _completed(caplog)
        assert record.levelno == logging.INFO
        assert "'success': True" in record.getMessage()
        assert "'status_code': 200" in record.getMessage()

    def test_not_found_logged_at_warning(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.get(f"{BASE}/424242")
        (record,) = _completed(caplog)
        assert record.levelno == logging.WARNING
        assert "'success': False" in record.getMessage()
