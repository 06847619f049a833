"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Record-to-query encoding.

``encode()`` is the single entry point used by every criteria and form
record: it runs the validation gate, splits the record into units of work
(one per field, one per element for sequence fields), encodes each unit
and merges the pairs into a ``WireMultiMap``.

Units run sequentially in descriptor order by default. Passing
``max_workers`` spreads them over a bounded thread pool; results are still
merged in descriptor order, so the output does not depend on scheduling.
A unit whose value does not fit its kind is logged and contributes no
pairs; it never aborts its siblings.
"""

from __future__ import annotations

import concurrent.futures
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from logicboxes.codec.encoder import Pair, encode_element, encode_field
from logicboxes.codec.fields import FieldDescriptor, FieldKind, describe, is_zero
from logicboxes.codec.multimap import WireMultiMap
from logicboxes.codec.validation import Validator, default_validator
from logicboxes.logging_config import get_logger

logger = get_logger(__name__)

_SEQUENCE_KINDS = (FieldKind.STRING_SEQUENCE, FieldKind.ORDERING_SEQUENCE)

# (descriptor, value, is_element)
Unit = Tuple[FieldDescriptor, Any, bool]


def _is_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes, Mapping)):
        return False
    return isinstance(value, (list, tuple, set, frozenset))


def plan_units(record: Any) -> List[Unit]:
    """Split a record into encoding units, in descriptor order."""
    units: List[Unit] = []
    for descriptor in describe(type(record)):
        value = getattr(record, descriptor.name)
        if descriptor.kind in _SEQUENCE_KINDS and _is_sequence(value):
            if descriptor.omit_empty and is_zero(descriptor.kind, value):
                continue
            units.extend((descriptor, element, True) for element in value)
        else:
            units.append((descriptor, value, False))
    return units


def encode_unit(unit: Unit) -> List[Pair]:
    """Encode one unit; a malformed unit yields no pairs."""
    descriptor, value, is_element = unit
    try:
        if is_element:
            return encode_element(descriptor, value)
        return encode_field(descriptor, value)
    except (TypeError, ValueError) as e:
        logger.warning(
            "field_encoding_skipped",
            field=descriptor.name,
            wire_key=descriptor.wire_key,
            kind=descriptor.kind.value,
            error=str(e),
        )
        return []


def encode(
    record: Any,
    *,
    validator: Optional[Validator] = None,
    max_workers: Optional[int] = None,
) -> WireMultiMap:
    """
    Validate and encode a criteria or form record into query parameters.

    Args:
        record: Instance of a ``@wire_record`` class
        validator: Validator to use (default: the process-wide one)
        max_workers: Encode units on a thread pool of this size

    Returns:
        Frozen WireMultiMap

    Raises:
        ValidationError: If the record violates a field rule; nothing is encoded
        TypeError: If the record type is not a registered wire record
    """
    (validator or default_validator).validate(record)

    units = plan_units(record)
    result = WireMultiMap()

    if max_workers is not None and max_workers > 1 and len(units) > 1:
        with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
            encoded = list(executor.map(encode_unit, units))
    else:
        encoded = [encode_unit(unit) for unit in units]

    for pairs in encoded:
        result.extend(pairs)

    logger.debug(
        "record_encoded",
        record=type(record).__name__,
        units=len(units),
        keys=len(result),
    )
    return result.freeze()


class QueryRecord:
    """Mixin giving wire records a ``url_values()`` method."""

    def url_values(self, **kwargs: Any) -> WireMultiMap:
        """Encode this record; see ``encode()`` for keyword arguments."""
        return encode(self, **kwargs)
