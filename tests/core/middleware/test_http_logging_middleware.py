"""Unit tests for the request logging middleware.

Structured fields are asserted via `caplog` records, not message strings.
"""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.middleware.http_logging import HttpLoggingMiddleware


def _make_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(HttpLoggingMiddleware)

    @app.get("/questions/{question_id}")
    async def question(question_id: str) -> dict[str, str]:
        return {"questionId": question_id}

    @app.post("/compare")
    async def boom() -> None:
        raise RuntimeError("boom")

    return app


def _http_records(caplog: pytest.LogCaptureFixture, level: int) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.name == "app.http" and r.levelno == level]


def test_logs_route_template_and_generates_request_id(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="app.http")

    with TestClient(_make_app()) as client:
        res = client.get("/questions/231767?tag=python")

    assert res.status_code == 200
    request_id = res.headers["x-request-id"]
    assert request_id

    records = _http_records(caplog, logging.INFO)
    assert len(records) == 1
    record = records[0]
    assert record.__dict__["request_id"] == request_id
    assert record.__dict__["http_method"] == "GET"
    # Template, not the raw path or query string.
    assert record.__dict__["request_path"] == "/questions/{question_id}"
    assert record.__dict__["status_code"] == 200
    assert record.__dict__["duration_ms"] >= 0


@pytest.mark.parametrize(
    ("sent", "propagated"),
    [("req_abc-123", True), ("bad id with spaces", False), ("x" * 200, False)],
)
def test_request_id_is_propagated_only_when_well_formed(sent: str, propagated: bool) -> None:
    with TestClient(_make_app()) as client:
        res = client.get("/questions/1", headers={"X-Request-ID": sent})

    assert (res.headers["x-request-id"] == sent) is propagated


def test_unhandled_exception_logs_error_with_stack_trace(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO, logger="app.http")

    with TestClient(_make_app(), raise_server_exceptions=False) as client:
        res = client.post("/compare", headers={"X-Request-ID": "req_err_001"})

    assert res.status_code == 500

    records = _http_records(caplog, logging.ERROR)
    assert len(records) == 1
    record = records[0]
    assert record.__dict__["request_id"] == "req_err_001"
    assert record.__dict__["http_method"] == "POST"
    assert record.__dict__["request_path"] == "/compare"
    assert record.__dict__["status_code"] == 500
    assert record.exc_info
