"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

SDK Pricing Operations.
"""

from __future__ import annotations

from typing import Any, Dict

from logicboxes.codec.multimap import WireMultiMap
from logicboxes.sdk.api import METHOD_GET, ApiCore

NAMESPACE = "products"


class PricingOperations:
    """Product price lists. Bodies are returned as decoded JSON."""

    def __init__(self, core: ApiCore) -> None:
        self._core = core

    async def get_customer_pricing(self, customer_id: str) -> Dict[str, Any]:
        """Prices a specific customer pays."""
        params = WireMultiMap([("customer-id", customer_id)])
        return await self._core.fetch(METHOD_GET, NAMESPACE, "customer-price", params)

    async def get_reseller_pricing(self, reseller_id: str) -> Dict[str, Any]:
        """Selling prices of a (sub-)reseller."""
        params = WireMultiMap([("reseller-id", reseller_id)])
        return await self._core.fetch(METHOD_GET, NAMESPACE, "reseller-price", params)

    async def get_reseller_cost_pricing(self, reseller_id: str) -> Dict[str, Any]:
        """Cost prices charged to a (sub-)reseller."""
        params = WireMultiMap([("reseller-id", reseller_id)])
        return await self._core.fetch(METHOD_GET, NAMESPACE, "reseller-cost-price", params)

    async def get_promo_prices(self) -> Dict[str, Any]:
        """Currently running promotions."""
        return await self._core.fetch(METHOD_GET, NAMESPACE, "promo-details")
