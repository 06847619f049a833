"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Type-directed encoding of a single field into wire pairs.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

from logicboxes.codec.fields import FieldDescriptor, FieldKind, is_zero
from logicboxes.logging_config import get_logger

logger = get_logger(__name__)

Pair = Tuple[str, str]

DESC_SUFFIX = " desc"


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def format_string(value: Any) -> str:
    value = _plain(value)
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    return value


def format_bool(value: Any) -> str:
    if not isinstance(value, bool):
        raise TypeError(f"expected bool, got {type(value).__name__}")
    return "true" if value else "false"


def format_float(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected float, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"cannot send non-finite float {value!r}")
    return "%.2f" % value


def format_uint(value: Any) -> str:
    value = _plain(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"expected an unsigned integer, got {value}")
    return "%d" % value


def to_unix(value: datetime) -> int:
    """Seconds since the Unix epoch; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return math.floor(value.timestamp())


def format_timestamp(value: Any) -> str:
    if not isinstance(value, datetime):
        raise TypeError(f"expected datetime, got {type(value).__name__}")
    return str(to_unix(value))


def format_sort_order(order: Any) -> List[str]:
    """``{"name": True, "price": False}`` -> ``["name desc", "price"]``."""
    if not isinstance(order, Mapping):
        raise TypeError(f"expected a sort order mapping, got {type(order).__name__}")
    tokens = []
    for key, descending in order.items():
        token = format_string(key)
        if not isinstance(descending, bool):
            raise TypeError(f"sort flag for '{token}' must be bool")
        tokens.append(token + DESC_SUFFIX if descending else token)
    return tokens


_SCALAR_FORMATTERS: Dict[FieldKind, Callable[[Any], str]] = {
    FieldKind.STRING: format_string,
    FieldKind.BOOLEAN: format_bool,
    FieldKind.FLOAT: format_float,
    FieldKind.UINT: format_uint,
    FieldKind.TIMESTAMP: format_timestamp,
}


def encode_element(descriptor: FieldDescriptor, element: Any) -> List[Pair]:
    """Encode one element of a sequence-kind field."""
    key = descriptor.wire_key
    if descriptor.kind == FieldKind.STRING_SEQUENCE:
        return [(key, format_string(element))]
    if descriptor.kind == FieldKind.ORDERING_SEQUENCE:
        return [(key, token) for token in format_sort_order(element)]
    return []


def encode_field(descriptor: FieldDescriptor, value: Any) -> List[Pair]:
    """
    Encode one field value into zero or more ``(wire_key, text)`` pairs.

    Raises:
        TypeError: If the value does not match the descriptor's kind
        ValueError: If the value is out of range for its kind
    """
    if descriptor.omit_empty and is_zero(descriptor.kind, value):
        return []
    if value is None:
        return []

    formatter = _SCALAR_FORMATTERS.get(descriptor.kind)
    if formatter is not None:
        return [(descriptor.wire_key, formatter(value))]

    if descriptor.kind in (FieldKind.STRING_SEQUENCE, FieldKind.ORDERING_SEQUENCE):
        if isinstance(value, (str, bytes)) or isinstance(value, Mapping):
            raise TypeError(f"{descriptor.name}: expected a sequence, got {type(value).__name__}")
        pairs: List[Pair] = []
        for element in value:
            pairs.extend(encode_element(descriptor, element))
        return pairs

    # Unsupported kinds contribute nothing
    return []
