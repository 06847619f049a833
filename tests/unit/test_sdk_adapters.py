"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Tests for SDK Transport Adapters.
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from logicboxes.codec.multimap import WireMultiMap
from logicboxes.exceptions import ConnectionError, RemoteOperationError
from logicboxes.sdk.adapters.base import SDKRequest, SDKResponse
from logicboxes.sdk.adapters.http import HttpAdapter
from logicboxes.sdk.adapters.mock import MockAdapter
from logicboxes.sdk.api import check_response


class TestMockAdapter:
    def test_is_connected(self):
        adapter = MockAdapter()
        assert adapter.is_connected is True

    @pytest.mark.asyncio
    async def test_send_returns_matched_response(self):
        expected = SDKResponse(status_code=200, body={"ok": True}, elapsed_ms=0.5)
        adapter = MockAdapter(responses={("GET", "/domains/locks.json"): expected})

        req = SDKRequest(method="GET", path="/domains/locks.json")
        result = await adapter.send(req)
        assert result.status_code == 200
        assert result.body == {"ok": True}

    @pytest.mark.asyncio
    async def test_send_returns_404_for_unmocked(self):
        adapter = MockAdapter()
        result = await adapter.send(SDKRequest(method="GET", path="/unknown.json"))
        assert result.status_code == 404
        assert result.body["status"] == "ERROR"

    @pytest.mark.asyncio
    async def test_tracks_sent_requests(self):
        adapter = MockAdapter()
        params = WireMultiMap([("order-id", "42")])
        await adapter.send(SDKRequest(method="POST", path="/domains/modify-ns.json", params=params))
        assert len(adapter.sent_requests) == 1
        assert adapter.sent_requests[0].params.get("order-id") == "42"

    @pytest.mark.asyncio
    async def test_route_matches_on_query_values(self):
        adapter = MockAdapter()
        adapter.add_response("GET", "/domains/locks.json", SDKResponse(status_code=200, body={"lock": "a"}),
                             params={"order-id": "1"})
        adapter.add_response("GET", "/domains/locks.json", SDKResponse(status_code=200, body={"lock": "b"}),
                             params={"order-id": "2"})

        first = await adapter.send(SDKRequest(
            method="GET", path="/domains/locks.json", params=WireMultiMap([("order-id", "1")])
        ))
        second = await adapter.send(SDKRequest(
            method="GET", path="/domains/locks.json", params=WireMultiMap([("order-id", "2")])
        ))
        other = await adapter.send(SDKRequest(
            method="GET", path="/domains/locks.json", params=WireMultiMap([("order-id", "3")])
        ))

        assert first.body == {"lock": "a"}
        assert second.body == {"lock": "b"}
        assert other.status_code == 404

    @pytest.mark.asyncio
    async def test_latest_route_wins(self):
        adapter = MockAdapter({("GET", "/x.json"): SDKResponse(status_code=200, body=1)})
        adapter.add_response("get", "/x.json", SDKResponse(status_code=200, body=2))
        result = await adapter.send(SDKRequest(method="GET", path="/x.json"))
        assert result.body == 2

    @pytest.mark.asyncio
    async def test_query_route_needs_params(self):
        adapter = MockAdapter()
        adapter.add_response("GET", "/x.json", SDKResponse(status_code=200), params={"a": "1"})
        result = await adapter.send(SDKRequest(method="GET", path="/x.json"))
        assert result.status_code == 404

    @pytest.mark.asyncio
    async def test_aclose_clears_state(self):
        adapter = MockAdapter()
        await adapter.send(SDKRequest(method="GET", path="/x.json"))
        await adapter.aclose()
        assert adapter.sent_requests == []


class TestHttpAdapter:
    def test_initialization_strips_trailing_slash(self):
        adapter = HttpAdapter(base_url="https://test.httpapi.com/api///")
        assert adapter.base_url == "https://test.httpapi.com/api"
        assert adapter.is_connected is False

    @pytest.mark.asyncio
    async def test_send_preserves_repeated_keys(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = request.url
            return httpx.Response(200, json={"status": "Success"})

        adapter = HttpAdapter(base_url="https://test.httpapi.com/api")
        adapter._client = httpx.AsyncClient(
            base_url=adapter.base_url, transport=httpx.MockTransport(handler)
        )
        adapter._connected = True

        params = WireMultiMap([("ns", "ns1.example.com"), ("ns", "ns2.example.com")])
        response = await adapter.send(
            SDKRequest(method="POST", path="/domains/modify-ns.json", params=params)
        )

        assert response.status_code == 200
        assert response.body == {"status": "Success"}
        assert captured["url"].path == "/api/domains/modify-ns.json"
        assert captured["url"].params.get_list("ns") == ["ns1.example.com", "ns2.example.com"]
        await adapter.aclose()
        assert adapter.is_connected is False

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        adapter = HttpAdapter(base_url="https://test.httpapi.com/api")
        adapter._client = httpx.AsyncClient(
            base_url=adapter.base_url,
            transport=httpx.MockTransport(lambda request: httpx.Response(500, text="<html>oops</html>")),
        )
        response = await adapter.send(SDKRequest(method="GET", path="/x.json"))
        assert response.status_code == 500
        assert response.body is None
        assert response.content == b"<html>oops</html>"
        await adapter.aclose()

    @pytest.mark.asyncio
    async def test_undecodable_error_body(self):
        adapter = HttpAdapter(base_url="https://test.httpapi.com/api")
        adapter._client = httpx.AsyncClient(
            base_url=adapter.base_url,
            transport=httpx.MockTransport(
                lambda request: httpx.Response(500, content=b"\xff\xfe Server \xe9rror")
            ),
        )
        response = await adapter.send(SDKRequest(method="GET", path="/x.json"))
        assert response.status_code == 500
        assert response.body is None
        assert response.content == b"\xff\xfe Server \xe9rror"

        with pytest.raises(RemoteOperationError, match="server"):
            check_response(response)
        await adapter.aclose()

    @pytest.mark.asyncio
    async def test_transport_error_becomes_connection_error(self):
        adapter = HttpAdapter(base_url="https://test.httpapi.com/api")
        client = adapter._ensure_client()
        with patch.object(client, "request", AsyncMock(side_effect=httpx.ConnectError("refused"))):
            with pytest.raises(ConnectionError, match="refused"):
                await adapter.send(SDKRequest(method="GET", path="/x.json"))
        await adapter.aclose()

    @pytest.mark.asyncio
    async def test_timeout_becomes_connection_error(self):
        adapter = HttpAdapter(base_url="https://test.httpapi.com/api")
        client = adapter._ensure_client()
        with patch.object(client, "request", AsyncMock(side_effect=httpx.ReadTimeout("slow"))):
            with pytest.raises(ConnectionError, match="timeout"):
                await adapter.send(SDKRequest(method="GET", path="/x.json"))
        await adapter.aclose()

    def test_close(self):
        adapter = HttpAdapter(base_url="https://test.httpapi.com/api")
        adapter._ensure_client()
        assert adapter.is_connected is True
        adapter.close()
        assert adapter.is_connected is False
