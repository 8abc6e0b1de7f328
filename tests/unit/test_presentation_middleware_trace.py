"""Unit tests for TraceMiddleware.

Tests cover:
- Trace ID generated when the client sends none
- Client-supplied trace ID echoed back
- get_trace_id() visible inside the request and cleared afterwards
"""

from uuid import UUID

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.presentation.api.middleware.trace_middleware import (
    TRACE_HEADER,
    TraceMiddleware,
    get_trace_id,
)


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    app.add_middleware(TraceMiddleware)

    @app.get("/trace")
    async def trace():
        return {"trace_id": get_trace_id()}

    return TestClient(app)


@pytest.mark.unit
class TestTraceMiddleware:
    def test_generates_trace_id(self, client):
        response = client.get("/trace")

        trace_id = response.headers[TRACE_HEADER]
        assert UUID(trace_id)
        assert response.json() == {"trace_id": trace_id}

    def test_echoes_client_trace_id(self, client):
        response = client.get("/trace", headers={TRACE_HEADER: "trace-123"})

        assert response.headers[TRACE_HEADER] == "trace-123"
        assert response.json() == {"trace_id": "trace-123"}

    def test_each_request_gets_its_own_id(self, client):
        first = client.get("/trace").headers[TRACE_HEADER]
        second = client.get("/trace").headers[TRACE_HEADER]

        assert first != second

    def test_no_trace_id_outside_request(self, client):
        client.get("/trace")

        assert get_trace_id() is None
