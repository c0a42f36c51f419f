"""Tests for request logging and correlation middleware."""

import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from bible_portal.observability import get_correlation_id
from bible_portal.observability.middleware import (
    CORRELATION_HEADER,
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)


def _app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    @app.get("/echo")
    async def echo() -> dict:
        return {"correlation_id": get_correlation_id()}

    return app


def test_correlation_id_is_bound_and_echoed() -> None:
    """Incoming header is visible to handlers and returned on the response."""
    client = TestClient(_app())

    response = client.get("/echo", headers={CORRELATION_HEADER: "trace-1"})

    assert response.json() == {"correlation_id": "trace-1"}
    assert response.headers[CORRELATION_HEADER] == "trace-1"


def test_correlation_id_is_generated_when_absent() -> None:
    client = TestClient(_app())

    response = client.get("/echo")

    generated = response.headers[CORRELATION_HEADER]
    assert generated
    assert response.json()["correlation_id"] == generated


def test_request_logging_records_status(caplog) -> None:
    """Request and response lines are logged with method, path and status."""
    client = TestClient(_app())

    with caplog.at_level(logging.INFO, logger="bible_portal.observability.middleware"):
        client.get("/echo")

    messages = [record.getMessage() for record in caplog.records]
    assert "GET /echo" in messages
    assert "GET /echo - 200" in messages
    completed = next(r for r in caplog.records if r.getMessage() == "GET /echo - 200")
    assert completed.status_code == 200
