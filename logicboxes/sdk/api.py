"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Shared dispatcher for reseller API calls.

Every endpoint lives at ``<host>/<namespace>/<api-name>.json`` and is
authenticated with ``auth-userid`` and ``api-key`` query parameters, which
``ApiCore.call_api`` adds to each request.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel

from logicboxes.codec.multimap import WireMultiMap
from logicboxes.config.settings import ResellerConfig
from logicboxes.core.records import StatusResponse
from logicboxes.exceptions import (
    RemoteOperationError,
    SDKConfigurationError,
    UnsupportedMethodError,
)
from logicboxes.logging_config import get_logger, log_api_call, redact_params
from logicboxes.sdk.adapters.base import BaseAdapter, SDKRequest, SDKResponse
from logicboxes.sdk.adapters.http import HttpAdapter

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

HOSTS: Dict[bool, str] = {
    True: "https://httpapi.com/api",
    False: "https://test.httpapi.com/api",
}

METHOD_GET = "GET"
METHOD_POST = "POST"
SUPPORTED_METHODS = (METHOD_GET, METHOD_POST)

Params = Union[WireMultiMap, Mapping, Iterable[Tuple[str, str]], None]


def to_multimap(params: Params) -> WireMultiMap:
    """Mutable WireMultiMap built from a multimap, a mapping or pairs."""
    if params is None:
        return WireMultiMap()
    if isinstance(params, WireMultiMap):
        return params.copy()
    if isinstance(params, Mapping):
        result = WireMultiMap()
        for key, value in params.items():
            if isinstance(value, (list, tuple)):
                for item in value:
                    result.add(key, str(item))
            else:
                result.add(key, str(value))
        return result
    return WireMultiMap(params)


def check_response(response: SDKResponse) -> Any:
    """
    Return the response body, or raise if the call did not succeed.

    Raises:
        RemoteOperationError: For any non-200 status, carrying the
            lower-cased message of the API's status envelope
    """
    if response.status_code == 200:
        return response.body

    if isinstance(response.body, dict):
        envelope = StatusResponse.model_validate(response.body)
        message = envelope.message or envelope.status
    else:
        message = response.content.decode("utf-8", errors="replace").strip()

    if not message:
        message = f"request failed with status {response.status_code}"

    raise RemoteOperationError(message.lower(), status_code=response.status_code)


class ApiCore:
    """
    Authenticated dispatcher shared by all operation groups.

    Args:
        config: Reseller credentials and host selection
        adapter: Transport; defaults to ``HttpAdapter`` against the
            production or test host
    """

    def __init__(self, config: ResellerConfig, adapter: Optional[BaseAdapter] = None) -> None:
        if not config.reseller_id:
            raise SDKConfigurationError("reseller_id is required")
        if not config.api_key:
            raise SDKConfigurationError("api_key is required")

        self._config = config
        self._adapter = adapter or HttpAdapter(
            base_url=HOSTS[config.is_production],
            timeout=config.timeout,
        )

    @property
    def is_production(self) -> bool:
        return self._config.is_production

    @property
    def adapter(self) -> BaseAdapter:
        return self._adapter

    async def call_api(
        self,
        method: str,
        namespace: str,
        api_name: str,
        params: Params = None,
    ) -> SDKResponse:
        """
        Send one authenticated API request.

        Args:
            method: "GET" or "POST"
            namespace: API namespace, e.g. "domains"
            api_name: Endpoint within the namespace, e.g. "search"
            params: Query parameters; the caller's object is not modified

        Returns:
            Raw SDKResponse (status is not checked here)

        Raises:
            UnsupportedMethodError: If ``method`` is not GET or POST
            ConnectionError: If the transport fails
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise UnsupportedMethodError(f"unsupported http method: {method}")

        query = to_multimap(params)
        query.add("auth-userid", self._config.reseller_id)
        query.add("api-key", self._config.api_key)
        logger.debug(
            "api_request",
            namespace=namespace,
            api_name=api_name,
            params=redact_params(query.to_dict()),
        )

        request = SDKRequest(
            method=method,
            path=f"/{namespace}/{api_name}.json",
            params=query.freeze(),
        )

        start = time.monotonic()
        try:
            response = await self._adapter.send(request)
        except Exception:
            duration = (time.monotonic() - start) * 1000
            log_api_call(logger, method, namespace, api_name, None, round(duration, 2))
            raise

        duration = (time.monotonic() - start) * 1000
        log_api_call(logger, method, namespace, api_name, response.status_code, round(duration, 2))
        return response

    async def fetch(
        self,
        method: str,
        namespace: str,
        api_name: str,
        params: Params = None,
    ) -> Any:
        """``call_api`` followed by ``check_response``; returns the JSON body."""
        response = await self.call_api(method, namespace, api_name, params)
        return check_response(response)

    async def fetch_model(
        self,
        model: Type[M],
        method: str,
        namespace: str,
        api_name: str,
        params: Params = None,
    ) -> M:
        """Fetch and decode the body into a pydantic model."""
        body = await self.fetch(method, namespace, api_name, params)
        return model.model_validate(body)

    async def aclose(self) -> None:
        await self._adapter.aclose()
