"""
Tests for request-id correlation.

Covers id generation, propagation to response headers and bodies,
and the access log line written for every request.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from app.shared.middleware import access_log_level
from app.shared.request_context import (
    REQUEST_ID_HEADER,
    ensure_request_id,
    get_request_context,
    get_request_id,
    request_scope,
)


class TestEnsureRequestId:
    """Tests for ensure_request_id."""

    def test_caller_value_used_verbatim(self) -> None:
        """A caller supplied id is returned unchanged."""
        assert ensure_request_id("abc-123") == "abc-123"

    def test_any_non_empty_value_is_trusted(self) -> None:
        """Any non-empty value is accepted, even if it is not a UUID."""
        assert ensure_request_id("  not a uuid  ") == "  not a uuid  "

    @pytest.mark.parametrize("incoming", [None, ""])
    def test_missing_value_generates_fresh_id(self, incoming: str | None) -> None:
        """A missing or empty header yields a new id every time."""
        first = ensure_request_id(incoming)
        second = ensure_request_id(incoming)
        assert first and second
        assert first != second


class TestRequestScope:
    """Tests for the request-scoped context variable."""

    def test_no_context_outside_request(self) -> None:
        """Outside a request there is no context and the id is empty."""
        assert get_request_context() is None
        assert get_request_id() == ""

    def test_scope_binds_and_restores(self) -> None:
        """Nested scopes bind their own id and restore the outer one."""
        with request_scope("outer"):
            assert get_request_id() == "outer"
            with request_scope("inner"):
                assert get_request_id() == "inner"
            assert get_request_id() == "outer"
        assert get_request_id() == ""


class TestRequestIdHeader:
    """Tests for the X-Request-Id round trip over HTTP."""

    def test_echoes_caller_request_id(self, client: TestClient) -> None:
        """The caller id is echoed in the header and the body."""
        response = client.get("/api/health", headers={REQUEST_ID_HEADER: "abc-123"})
        assert response.headers[REQUEST_ID_HEADER] == "abc-123"
        assert response.json()["requestId"] == "abc-123"

    def test_generates_request_id_when_absent(self, client: TestClient) -> None:
        """Without a header the generated id appears in header and body."""
        response = client.get("/api/health")
        request_id = response.headers[REQUEST_ID_HEADER]
        assert request_id
        assert response.json()["requestId"] == request_id

    def test_each_request_gets_its_own_id(self, client: TestClient) -> None:
        """Generated ids differ between requests."""
        first = client.get("/api/health").headers[REQUEST_ID_HEADER]
        second = client.get("/api/health").headers[REQUEST_ID_HEADER]
        assert first != second

    def test_error_responses_carry_request_id(self, client: TestClient) -> None:
        """Failure envelopes carry the request id too."""
        response = client.get("/api/demo/999", headers={REQUEST_ID_HEADER: "err-1"})
        assert response.status_code == 400
        assert response.headers[REQUEST_ID_HEADER] == "err-1"
        assert response.json()["requestId"] == "err-1"


class TestAccessLog:
    """Tests for the per-request access log line."""

    @pytest.mark.parametrize(
        ("status", "level"),
        [
            (200, logging.INFO),
            (302, logging.INFO),
            (400, logging.WARNING),
            (404, logging.WARNING),
            (500, logging.ERROR),
            (503, logging.ERROR),
        ],
    )
    def test_level_follows_status(self, status: int, level: int) -> None:
        """5xx logs at ERROR, 4xx at WARNING, the rest at INFO."""
        assert access_log_level(status) == level

    def test_logged_request_id_matches_header(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        """The access line names the request, its status and its id."""
        caplog.set_level(logging.INFO, logger="app.access")
        response = client.get("/api/health?check=1")

        records = [r for r in caplog.records if r.name == "app.access"]
        assert len(records) == 1
        message = records[0].getMessage()
        assert response.headers[REQUEST_ID_HEADER] in message
        assert "GET /api/health?check=1" in message
        assert "status=200" in message
        assert records[0].levelno == logging.INFO

    def test_business_error_logged_as_warning(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A 400 business failure is logged at WARNING."""
        caplog.set_level(logging.INFO, logger="app.access")
        client.get("/api/demo/999")

        records = [r for r in caplog.records if r.name == "app.access"]
        assert records[-1].levelno == logging.WARNING
