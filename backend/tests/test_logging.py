import logging

import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient

from dashboard.core.logging import RequestContextMiddleware, configure_logging


def _context_app():
    app = FastAPI()
    app.add_middleware(RequestContextMiddleware)

    @app.get("/ctx")
    def ctx():
        return structlog.contextvars.get_contextvars()
    return app

def test_request_context_is_bound():
    client = TestClient(_context_app())
    body = client.get("/ctx", headers={"X-Request-ID": "req-42"}).json()
    assert body == {"request_id": "req-42", "method": "GET", "path": "/ctx"}

def test_request_id_is_generated():
    body = TestClient(_context_app()).get("/ctx").json()
    assert len(body["request_id"]) == 32

def test_level_comes_from_settings(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    configure_logging("dev", level="warning")
    assert calls["level"] == logging.WARNING
