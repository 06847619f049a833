"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Records shared by every API namespace: the base search criteria, entity
statuses and the response envelopes.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from logicboxes.codec import QueryRecord, query_field, wire_record
from logicboxes.codec.scalars import decode_float


class EntityStatus(str, Enum):
    """Lifecycle status of customers, contacts and orders."""

    ACTIVE = "Active"
    INACTIVE = "InActive"
    DELETED = "Deleted"
    ARCHIVED = "Archived"
    SUSPENDED = "Suspended"
    VERIFICATION_PENDING = "Pending Verification"
    VERIFICATION_FAILED = "Failed Verification"
    RESTORABLE = "Pending Delete Restorable"
    NOT_APPLICABLE = "Not Applicable"
    NOT_AVAILABLE = "NA"


class AuthType(str, Enum):
    """Two-factor authentication channel."""

    SMS = "sms"
    GOOGLE = "gauth"
    GOOGLE_BACKUP = "gauthbackup"


@wire_record
class Criteria(QueryRecord):
    """Filters common to every search endpoint."""

    reseller_ids: Tuple[str, ...] = query_field(
        "reseller-id", omit_empty=True, validate="omitempty", default=()
    )
    customer_ids: Tuple[str, ...] = query_field(
        "customer-id", omit_empty=True, validate="omitempty", default=()
    )
    time_creation_start: Optional[datetime] = query_field(
        "creation-date-start", omit_empty=True, validate="omitempty", default=None
    )
    time_creation_end: Optional[datetime] = query_field(
        "creation-date-end", omit_empty=True, validate="omitempty", default=None
    )


class StatusResponse(BaseModel):
    """``{"status": ..., "message": ...}`` envelope returned on errors."""

    model_config = ConfigDict(extra="allow")

    status: str = ""
    message: str = ""

    @field_validator("status", "message", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        # null becomes empty text, other scalars their string form
        return "" if value is None else str(value)


class SearchResult(BaseModel):
    """
    One page of a search endpoint.

    The API returns the page as an object keyed by row number
    (``{"recsonpage": "2", "recsindb": "14", "1": {...}, "2": {...}}``);
    rows are returned here in row-number order.
    """

    records_on_page: int = 0
    records_in_db: int = 0
    records: List[Dict[str, Any]] = []

    @classmethod
    def from_body(cls, body: Any) -> "SearchResult":
        if not isinstance(body, dict):
            return cls()

        rows = []
        for key, value in body.items():
            if key.isdigit() and isinstance(value, dict):
                rows.append((int(key), value))
        rows.sort(key=lambda row: row[0])

        return cls(
            records_on_page=int(decode_float(body.get("recsonpage", 0))),
            records_in_db=int(decode_float(body.get("recsindb", 0))),
            records=[row for _, row in rows],
        )
