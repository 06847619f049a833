"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Shared domain records.
"""

from logicboxes.core.records import (
    AuthType,
    Criteria,
    EntityStatus,
    SearchResult,
    StatusResponse,
)

__all__ = [
    "AuthType",
    "Criteria",
    "EntityStatus",
    "SearchResult",
    "StatusResponse",
]
