"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

LogicBoxes SDK public API.

Quick start::

    from logicboxes.sdk import LogicBoxesClient
    client = LogicBoxesClient(reseller_id="123456", api_key="...")
"""

from logicboxes.sdk.adapters import BaseAdapter, HttpAdapter, MockAdapter, SDKRequest, SDKResponse
from logicboxes.sdk.api import HOSTS, ApiCore, check_response
from logicboxes.sdk.client import LogicBoxesClient
from logicboxes.sdk.customers import CustomerCriteria, CustomerDetail, CustomerOperations, SignUpForm
from logicboxes.sdk.domains import DomainOperations, OrderCriteria, PrivacyState, SortBy, SortOrder
from logicboxes.sdk.pricing import PricingOperations

__all__ = [
    # client
    "LogicBoxesClient",
    "ApiCore",
    "HOSTS",
    "check_response",
    # operations
    "CustomerOperations",
    "DomainOperations",
    "PricingOperations",
    # records
    "CustomerCriteria",
    "CustomerDetail",
    "OrderCriteria",
    "PrivacyState",
    "SignUpForm",
    "SortBy",
    "SortOrder",
    # transport
    "BaseAdapter",
    "HttpAdapter",
    "MockAdapter",
    "SDKRequest",
    "SDKResponse",
]
