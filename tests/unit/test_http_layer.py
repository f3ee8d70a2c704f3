# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import httpx
import pytest

from compatprobe.config import ProbeSettings
from compatprobe.errors import ErrorCategory, TransportError
from compatprobe.http import StubHttpClient, create_default_http_client
from compatprobe.http.httpx_client import HttpxClient
from compatprobe.http.models import HttpRequest, HttpResponse


def _client(handler, **settings_kwargs) -> HttpxClient:
    settings = ProbeSettings(**settings_kwargs)
    return HttpxClient(settings, client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_httpx_client_returns_completed_exchange():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["headers"] = request.headers
        seen["body"] = request.content
        return httpx.Response(200, json={"data": []})

    client = _client(handler, user_agent="UA/1.0")
    resp = client.request(
        HttpRequest(
            url="http://api.test/v1/embeddings",
            method="POST",
            headers={"Content-Type": "application/json"},
            body='{"model": "m"}',
        )
    )
    assert resp.status_code == 200
    assert resp.is_success is True
    assert json.loads(resp.text) == {"data": []}
    assert resp.url == "http://api.test/v1/embeddings"
    assert seen["method"] == "POST"
    assert seen["headers"]["user-agent"] == "UA/1.0"
    assert seen["body"] == b'{"model": "m"}'
    client.close()


def test_httpx_client_does_not_raise_for_error_status():
    client = _client(lambda request: httpx.Response(401, text="unauthorized"))
    resp = client.request(HttpRequest(url="http://api.test/v1/models"))
    assert resp.status_code == 401
    assert resp.is_success is False
    assert resp.text == "unauthorized"


def test_httpx_client_truncates_large_bodies():
    client = _client(lambda request: httpx.Response(200, content=b"0123456789"), max_body_bytes=4)
    resp = client.request(HttpRequest(url="http://api.test/v1/models"))
    assert resp.content == b"0123"
    assert resp.meta["body_truncated"] is True
    assert resp.meta["body_bytes_limit"] == 4


def test_httpx_client_timeout_raises_typed_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = _client(handler, timeout=30.0)
    with pytest.raises(TransportError) as excinfo:
        client.request(HttpRequest(url="http://api.test/v1/chat/completions", method="POST"))
    assert excinfo.value.category == ErrorCategory.TIMEOUT
    assert "timeout" in excinfo.value.message.lower()
    assert "30s" in excinfo.value.message


def test_httpx_client_connection_error_raises_typed_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    client = _client(handler)
    with pytest.raises(TransportError) as excinfo:
        client.request(HttpRequest(url="http://api.test/v1/models"))
    assert excinfo.value.category == ErrorCategory.CONNECTION_ERROR
    assert excinfo.value.message == "Connection refused"


def test_httpx_client_uses_request_timeout():
    captured = {}

    class FakeStream:
        def __enter__(self):
            raise httpx.ConnectTimeout("slow")

        def __exit__(self, exc_type, exc, tb):  # noqa: ARG002
            return None

    class FakeHttpxClient:
        def stream(self, method, url, headers=None, content=None, timeout=None):  # noqa: ARG002
            captured["timeout"] = timeout
            return FakeStream()

        def close(self):
            captured["closed"] = True

    client = HttpxClient(ProbeSettings(timeout=30.0), client=FakeHttpxClient())
    with pytest.raises(TransportError) as excinfo:
        client.request(HttpRequest(url="http://api.test/v1/models", timeout=1.5))
    assert captured["timeout"] == 1.5
    assert excinfo.value.message.startswith("Request timeout after 1.5s")
    client.close()
    assert captured["closed"] is True


def test_create_default_http_client_builds_httpx_client():
    client = create_default_http_client(ProbeSettings(timeout=3.0, verify_ssl=False))
    assert isinstance(client, HttpxClient)
    assert client.settings.timeout == 3.0
    client.close()


def test_stub_http_client_records_and_raises():
    ok = HttpResponse(status_code=200, text="{}")
    stub = StubHttpClient({("GET", "http://api.test/v1/models"): ok})
    stub.add("post", "http://api.test/v1/embeddings", TransportError("Request timeout", ErrorCategory.TIMEOUT))

    assert stub.request(HttpRequest(url="http://api.test/v1/models")) is ok
    with pytest.raises(TransportError):
        stub.request(HttpRequest(url="http://api.test/v1/embeddings", method="POST"))
    with pytest.raises(TransportError) as excinfo:
        stub.request(HttpRequest(url="http://api.test/v1/unknown"))
    assert "No stubbed response" in excinfo.value.message
    assert len(stub.requests) == 3
    stub.close()
    assert stub.closed is True


def test_stub_http_client_normalizes_constructor_methods():
    ok = HttpResponse(status_code=200, text="{}")
    stub = StubHttpClient({("get", "http://api.test/v1/models"): ok})

    assert stub.request(HttpRequest(url="http://api.test/v1/models", method="GET")) is ok
    assert stub.request(HttpRequest(url="http://api.test/v1/models", method="get")) is ok
