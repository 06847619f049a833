"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

SDK Domain Operations.

Order search, name suggestions and per-order management of registered
domain names.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

from logicboxes.codec import query_field, wire_record
from logicboxes.codec.encoder import format_bool
from logicboxes.codec.multimap import WireMultiMap
from logicboxes.core.records import Criteria, EntityStatus, SearchResult
from logicboxes.logging_config import get_logger
from logicboxes.sdk.api import METHOD_GET, METHOD_POST, ApiCore

logger = get_logger(__name__)

NAMESPACE = "domains"


class SortBy(str, Enum):
    """Sortable columns of the order search endpoint."""

    ORDER_ID = "orderid"
    END_TIME = "endtime"
    TIMESTAMP = "timestamp"
    LOCKED = "locked"
    CUSTOMER_ID = "customerid"
    DOMAIN_NAME = "domainname"
    CREATION_DT = "creationdt"
    CREATION_TIME = "creationtime"


# Column -> descending flag; {SortBy.END_TIME: True} encodes as "endtime desc"
SortOrder = Dict[str, bool]


class PrivacyState(str, Enum):
    """Privacy protection filter."""

    ENABLED = "true"
    DISABLED = "false"
    NOT_APPLICABLE = "na"


@wire_record
class OrderCriteria(Criteria):
    """
    Domain order search filters.

    Both expiry bounds are sent under ``expiry-date-start``, matching the
    query contract the SDK was built against.
    """

    statuses: Tuple[EntityStatus, ...] = query_field("status", omit_empty=True, validate="omitempty", default=())
    sort_order_by: Tuple[SortOrder, ...] = query_field("order-by", omit_empty=True, validate="omitempty", default=())
    order_ids: Tuple[str, ...] = query_field("order-id", omit_empty=True, validate="omitempty", default=())
    domain_keys: Tuple[str, ...] = query_field("product-key", omit_empty=True, validate="omitempty", default=())
    domain_name: str = query_field("domain-name", omit_empty=True, validate="omitempty", default="")
    privacy_status: Optional[PrivacyState] = query_field(
        "privacy-enabled", omit_empty=True, validate="omitempty", default=None
    )
    show_child_orders: bool = query_field("show-child-orders", omit_empty=True, validate="omitempty", default=False)
    time_expiry_start: Optional[datetime] = query_field(
        "expiry-date-start", omit_empty=True, validate="omitempty", default=None
    )
    # TODO: confirm with the API owner whether this should be expiry-date-end
    time_expiry_end: Optional[datetime] = query_field(
        "expiry-date-start", omit_empty=True, validate="omitempty", default=None
    )


class DomainOperations:
    """Domain order endpoints."""

    def __init__(self, core: ApiCore) -> None:
        self._core = core

    async def search_orders(
        self,
        criteria: Optional[OrderCriteria] = None,
        records: int = 10,
        page: int = 1,
    ) -> SearchResult:
        """Search domain orders matching ``criteria``."""
        params = (criteria or OrderCriteria()).url_values().copy()
        params.add("no-of-records", str(records))
        params.add("page-no", str(page))
        body = await self._core.fetch(METHOD_GET, NAMESPACE, "search", params)
        return SearchResult.from_body(body)

    async def suggest_names(
        self,
        keyword: str,
        tld: str = "",
        exact_match: bool = False,
        adult: bool = False,
    ) -> Dict[str, Any]:
        """Domain name suggestions for a keyword."""
        params = WireMultiMap([("keyword", keyword)])
        if tld:
            params.add("tld-only", tld)
        params.add("exact-match", format_bool(exact_match))
        params.add("adult", format_bool(adult))
        return await self._core.fetch(METHOD_GET, NAMESPACE, "v5/suggest-names", params)

    async def get_order_id(self, domain_name: str) -> str:
        """Order ID of a registered domain name."""
        params = WireMultiMap([("domain-name", domain_name)])
        body = await self._core.fetch(METHOD_GET, NAMESPACE, "orderid", params)
        return str(body).strip('"')

    async def get_registration_order_details(
        self, order_id: str, options: Sequence[str] = ("All",)
    ) -> Dict[str, Any]:
        """Details of a registration order; ``options`` selects the sections returned."""
        params = WireMultiMap([("order-id", order_id)])
        params.extend(("options", option) for option in options)
        return await self._core.fetch(METHOD_GET, NAMESPACE, "details", params)

    async def modify_name_servers(self, order_id: str, name_servers: Sequence[str]) -> Dict[str, Any]:
        """Replace the name servers of an order."""
        params = WireMultiMap([("order-id", order_id)])
        params.extend(("ns", ns) for ns in name_servers)
        return await self._core.fetch(METHOD_POST, NAMESPACE, "modify-ns", params)

    async def add_child_name_server(
        self, order_id: str, cns: str, ips: Sequence[str]
    ) -> Dict[str, Any]:
        """Register a child name server under the order's domain."""
        params = WireMultiMap([("order-id", order_id), ("cns", cns)])
        params.extend(("ip", ip) for ip in ips)
        return await self._core.fetch(METHOD_POST, NAMESPACE, "add-cns", params)

    async def modify_privacy_protection_status(
        self, order_id: str, protect_privacy: bool, reason: str
    ) -> Dict[str, Any]:
        params = WireMultiMap([
            ("order-id", order_id),
            ("protect-privacy", format_bool(protect_privacy)),
            ("reason", reason),
        ])
        return await self._core.fetch(METHOD_POST, NAMESPACE, "modify-privacy-protection", params)

    async def modify_auth_code(self, order_id: str, auth_code: str) -> Dict[str, Any]:
        params = WireMultiMap([("order-id", order_id), ("auth-code", auth_code)])
        return await self._core.fetch(METHOD_POST, NAMESPACE, "modify-auth-code", params)

    async def apply_theft_protection_lock(self, order_id: str) -> Dict[str, Any]:
        params = WireMultiMap([("order-id", order_id)])
        return await self._core.fetch(METHOD_POST, NAMESPACE, "enable-theft-protection", params)

    async def get_locks(self, order_id: str) -> Dict[str, Any]:
        """Locks currently applied on the order's domain name."""
        params = WireMultiMap([("order-id", order_id)])
        return await self._core.fetch(METHOD_GET, NAMESPACE, "locks", params)
