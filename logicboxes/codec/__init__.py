"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Codec between typed records and the reseller API's string wire format.

Outbound: ``@wire_record`` records are validated and encoded into a
``WireMultiMap`` of query parameters. Inbound: ``JSONBool``, ``JSONFloat``
and ``JSONTime`` decode quoted response scalars.
"""

from logicboxes.codec.aggregator import QueryRecord, encode
from logicboxes.codec.encoder import encode_field
from logicboxes.codec.fields import (
    FieldDescriptor,
    FieldKind,
    describe,
    query_field,
    register,
    wire_record,
)
from logicboxes.codec.multimap import WireMultiMap
from logicboxes.codec.scalars import (
    JSONBool,
    JSONFloat,
    JSONTime,
    decode_bool,
    decode_float,
    decode_timestamp,
)
from logicboxes.codec.validation import (
    RuleRegistry,
    Validator,
    default_registry,
    match_password,
    validate,
)

__all__ = [
    "FieldDescriptor",
    "FieldKind",
    "JSONBool",
    "JSONFloat",
    "JSONTime",
    "QueryRecord",
    "RuleRegistry",
    "Validator",
    "WireMultiMap",
    "decode_bool",
    "decode_float",
    "decode_timestamp",
    "default_registry",
    "describe",
    "encode",
    "encode_field",
    "match_password",
    "query_field",
    "register",
    "validate",
    "wire_record",
]
