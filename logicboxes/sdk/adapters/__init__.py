"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Transport adapters.
"""

from logicboxes.sdk.adapters.base import BaseAdapter, SDKRequest, SDKResponse
from logicboxes.sdk.adapters.http import HttpAdapter
from logicboxes.sdk.adapters.mock import MockAdapter

__all__ = [
    "BaseAdapter",
    "HttpAdapter",
    "MockAdapter",
    "SDKRequest",
    "SDKResponse",
]
