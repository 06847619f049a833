"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Mock transport adapter for local testing.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Tuple

from logicboxes.sdk.adapters.base import BaseAdapter, SDKRequest, SDKResponse

# (method, path, required query values, response)
Route = Tuple[str, str, Dict[str, str], SDKResponse]


class MockAdapter(BaseAdapter):
    """In-memory reseller API for unit tests.

    Canned responses are looked up by method and endpoint path, and
    optionally by query values, so one endpoint can answer differently per
    order ID or username. The most recently added matching route wins.
    Unmatched requests get the API's own error envelope with status 404.

    Args:
        responses: Mapping from ``(method, path)`` tuples to
            ``SDKResponse`` instances.

    Example::

        adapter = MockAdapter()
        adapter.add_response("GET", "/domains/locks.json", SDKResponse(status_code=200, body={}),
                             params={"order-id": "9"})
    """

    def __init__(
        self,
        responses: Optional[Dict[Tuple[str, str], SDKResponse]] = None,
    ) -> None:
        self._routes: List[Route] = []
        self._sent: List[SDKRequest] = []
        for (method, path), response in (responses or {}).items():
            self.add_response(method, path, response)

    def add_response(
        self,
        method: str,
        path: str,
        response: SDKResponse,
        params: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Answer ``method path`` with ``response``, if every value in ``params`` is sent."""
        self._routes.append((method.upper(), path, dict(params or {}), response))

    def _match(self, request: SDKRequest) -> Optional[SDKResponse]:
        method = request.method.upper()
        for route_method, path, required, response in reversed(self._routes):
            if route_method != method or path != request.path:
                continue
            sent = request.params
            if all(sent is not None and value in sent.getall(key) for key, value in required.items()):
                return response
        return None

    async def send(self, request: SDKRequest) -> SDKResponse:
        self._sent.append(request)
        response = self._match(request)
        if response is not None:
            return response
        return SDKResponse(
            status_code=404,
            body={"status": "ERROR", "message": f"No mock for {request.method} {request.path}"},
        )

    def close(self) -> None:
        self._routes.clear()
        self._sent.clear()

    @property
    def is_connected(self) -> bool:
        return True

    @property
    def sent_requests(self) -> List[SDKRequest]:
        """All requests that have been sent through this adapter."""
        return list(self._sent)
