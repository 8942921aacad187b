"""Tests for the httpx-backed transport, using httpx.MockTransport."""

import json

import httpx
import pytest

from signkit.client.base import ApiClient
from signkit.errors.exceptions import TransportError
from signkit.models.envelope import Envelope
from signkit.transport.httpx_transport import HttpxTransport


def mock_transport(handler) -> HttpxTransport:
    return HttpxTransport(timeout=5.0, client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestHttpxTransport:
    def test_sends_json_payload_and_headers(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"data": {"id": "1"}})

        transport = mock_transport(handler)
        response = transport.request(
            "POST",
            "https://api.test/v3/envelopes",
            {"data": {"type": "envelopes"}},
            {"Authorization": "token"},
        )
        assert seen == {
            "method": "POST",
            "url": "https://api.test/v3/envelopes",
            "auth": "token",
            "body": {"data": {"type": "envelopes"}},
        }
        assert response.status_code == 201
        assert response.is_success
        assert json.loads(response.body) == {"data": {"id": "1"}}

    def test_no_payload_sends_empty_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.content == b""
            return httpx.Response(204)

        response = mock_transport(handler).request("DELETE", "https://api.test/x", None, {})
        assert response.status_code == 204
        assert response.body == ""

    def test_error_status_is_returned(self):
        transport = mock_transport(lambda request: httpx.Response(500, text="boom"))
        response = transport.request("GET", "https://api.test/x", None, {})
        assert not response.is_success
        assert response.body == "boom"

    def test_connection_failure_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError) as exc_info:
            mock_transport(handler).request("GET", "https://api.test/x", None, {})
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_context_manager_closes_client(self):
        client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        with HttpxTransport(client=client):
            pass
        assert client.is_closed


class TestClientOverHttpx:
    def test_round_trip(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            return httpx.Response(
                201, json={"data": {"id": "env-1", "attributes": body["data"]["attributes"]}}
            )

        client = ApiClient(settings, transport=mock_transport(handler))
        reply = client.envelopes.create(Envelope(name="Lease", locale="pt-BR"))
        assert reply == {"data": {"id": "env-1", "attributes": {"name": "Lease", "locale": "pt-BR"}}}

    def test_not_found(self, settings):
        client = ApiClient(settings, transport=mock_transport(lambda r: httpx.Response(404, text="")))
        with pytest.raises(TransportError) as exc_info:
            client.envelopes.get("missing")
        assert exc_info.value.status_code == 404

    def test_default_transport_uses_settings_timeout(self, settings):
        client = ApiClient(settings.model_copy(update={"timeout": 7.5}))
        assert isinstance(client.transport, HttpxTransport)
        assert client.transport.timeout == 7.5
        client.close()
