"""Tests for the stateless application factory."""

import logging
from typing import List

from fastapi import Request, Response
from fastapi.testclient import TestClient

from lamport_balance import BaseProcessor, ServiceConfig, StatelessAction, create_app, error_response


class EchoProcessor(BaseProcessor):
    """Test processor exercising each kind of handler return value."""

    @property
    def name(self) -> str:
        return "test-echo"

    def get_stateless_actions(self) -> List[StatelessAction]:
        return [
            StatelessAction(
                name="echo_sync",
                path="/echo/sync",
                handler=self.handle_sync,
                methods=("GET",),
            ),
            StatelessAction(
                name="echo_async",
                path="/echo/async",
                handler=self.handle_async,
                methods=("POST",),
            ),
            StatelessAction(
                name="echo_bytes",
                path="/echo/bytes",
                handler=self.handle_bytes,
                methods=("GET",),
                media_type="application/octet-stream",
            ),
            StatelessAction(
                name="echo_response",
                path="/echo/response",
                handler=self.handle_response,
                methods=("GET",),
            ),
        ]

    def handle_sync(self, request: Request):
        """Return the query parameters as a dict."""
        return dict(request.query_params)

    async def handle_async(self, request: Request):
        """Return the JSON body unchanged."""
        return await request.json()

    def handle_bytes(self, request: Request):
        return b"\x00\x01"

    def handle_response(self, request: Request):
        return Response(content="raw", media_type="text/plain", status_code=202)


class EmptyProcessor(BaseProcessor):
    @property
    def name(self) -> str:
        return "test-empty"


def test_sync_handler_result_is_serialized():
    client = TestClient(create_app(EchoProcessor()))

    response = client.get("/echo/sync", params={"value": "42"})

    assert response.status_code == 200
    assert response.json() == {"value": "42"}


def test_async_handler_is_awaited():
    client = TestClient(create_app(EchoProcessor()))

    response = client.post("/echo/async", json={"value": 42})

    assert response.status_code == 200
    assert response.json() == {"value": 42}


def test_bytes_result_uses_action_media_type():
    client = TestClient(create_app(EchoProcessor()))

    response = client.get("/echo/bytes")

    assert response.headers["content-type"] == "application/octet-stream"
    assert response.content == b"\x00\x01"


def test_response_result_is_passed_through():
    client = TestClient(create_app(EchoProcessor()))

    response = client.get("/echo/response")

    assert response.status_code == 202
    assert response.text == "raw"


def test_wrong_method_is_plain_text_405():
    client = TestClient(create_app(EchoProcessor()))

    response = client.get("/echo/async")

    assert response.status_code == 405
    assert response.text == "Method Not Allowed"
    assert response.headers["allow"] == "POST"


def test_unknown_path_keeps_default_404():
    client = TestClient(create_app(EchoProcessor()))

    response = client.get("/missing")

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}


def test_health_reports_configured_version():
    app = create_app(EchoProcessor(), ServiceConfig(name="echo", version="2.3.4"))
    client = TestClient(app)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": "2.3.4"}
    assert app.title == "Echo Stateless API"


def test_processor_without_actions_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="lamport_balance.api"):
        app = create_app(EmptyProcessor())

    assert "get_stateless_actions() returned nothing" in caplog.text
    assert TestClient(app).get("/health").json()["version"] == "1.0.0"


def test_error_response_body_is_only_the_message():
    response = error_response("Missing address", 400)

    assert response.status_code == 400
    assert response.media_type == "application/json"
    assert response.body == b'{"error":"Missing address"}'
