"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

HTTP transport adapter (default).
"""

from __future__ import annotations

import time
from typing import Optional

import httpx

from logicboxes.exceptions import ConnectionError
from logicboxes.logging_config import get_logger
from logicboxes.sdk.adapters.base import BaseAdapter, SDKRequest, SDKResponse

logger = get_logger(__name__)


class HttpAdapter(BaseAdapter):
    """Default HTTP transport using ``httpx.AsyncClient``.

    Query parameters are sent as a list of pairs so repeated keys
    (``status=Active&status=Suspended``) survive.

    Args:
        base_url: Root URL of the reseller API (e.g. ``https://test.httpapi.com/api``).
        timeout: Request timeout in seconds.
    """

    def __init__(self, base_url: str, timeout: int = 30) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None
        self._connected = False

    @property
    def base_url(self) -> str:
        return self._base_url

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Accept": "application/json"},
            )
            self._connected = True
        return self._client

    async def send(self, request: SDKRequest) -> SDKResponse:
        client = self._ensure_client()
        params = request.params.items() if request.params is not None else None
        start = time.monotonic()

        try:
            resp = await client.request(
                method=request.method,
                url=request.path,
                headers=request.headers,
                params=params,
            )
        except httpx.TimeoutException as e:
            logger.error(f"Request timeout: {request.method} {request.path}", exc_info=True)
            raise ConnectionError(f"Request timeout: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"Request failed: {request.method} {request.path}", exc_info=True)
            raise ConnectionError(f"Request failed: {e}") from e

        elapsed = (time.monotonic() - start) * 1000

        body = None
        if resp.content:
            try:
                body = resp.json()
            except ValueError:
                # Not JSON, or not decodable text; raw bytes stay in content
                logger.debug("non_json_response", path=request.path, status_code=resp.status_code)

        return SDKResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            body=body,
            content=resp.content,
            elapsed_ms=round(elapsed, 2),
        )

    def close(self) -> None:
        if self._client:
            # AsyncClient.aclose() is async; sync teardown drops the reference.
            self._client = None
            self._connected = False

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
            self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected
