"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Field metadata for criteria and form records.

A record is a frozen dataclass whose fields are declared with
``query_field()``. The ``@wire_record`` decorator builds the record's
descriptor table once, when the class is created, and registers it so
that ``describe()`` is a plain lookup afterwards.

Example::

    @wire_record
    class CityFilter(QueryRecord):
        city: str = query_field("city", omit_empty=True)
        statuses: Tuple[str, ...] = query_field("status", omit_empty=True, default=())
"""

from __future__ import annotations

import dataclasses
import threading
import typing
from collections.abc import Mapping as AbcMapping, Sequence as AbcSequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

from logicboxes.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# Keys used inside dataclasses.field(metadata=...)
WIRE_KEY = "wire_key"
OMIT_EMPTY = "omit_empty"
VALIDATE = "validate"
KIND = "kind"


class FieldKind(str, Enum):
    """Wire-level kind of a record field."""

    STRING = "string"
    BOOLEAN = "boolean"
    FLOAT = "float"
    UINT = "uint"
    TIMESTAMP = "timestamp"
    STRING_SEQUENCE = "string_sequence"
    ORDERING_SEQUENCE = "ordering_sequence"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class FieldDescriptor:
    """Immutable description of one encodable field."""

    name: str
    wire_key: str
    omit_empty: bool
    kind: FieldKind
    validate: str = ""


_MISSING: Any = dataclasses.MISSING

_registry: Dict[type, Tuple[FieldDescriptor, ...]] = {}
_registry_lock = threading.Lock()


def query_field(
    wire_key: Optional[str] = None,
    *,
    omit_empty: bool = False,
    validate: str = "",
    kind: Optional[FieldKind] = None,
    default: Any = _MISSING,
    default_factory: Any = _MISSING,
) -> Any:
    """
    Declare a record field together with its wire metadata.

    Args:
        wire_key: Query parameter name. Fields without one are never
            encoded and never validated.
        omit_empty: Skip the field when it holds its kind's zero value.
        validate: Comma-separated rule tags, e.g. ``"required,email"``.
        kind: Explicit wire kind; derived from the annotation when omitted.
        default: Default value.
        default_factory: Default factory (mutually exclusive with default).

    Returns:
        A ``dataclasses.field`` carrying the metadata.
    """
    metadata = {
        WIRE_KEY: wire_key,
        OMIT_EMPTY: omit_empty,
        VALIDATE: validate,
        KIND: kind,
    }
    if default is _MISSING and default_factory is _MISSING:
        return dataclasses.field(metadata=metadata)
    if default_factory is not _MISSING:
        return dataclasses.field(default_factory=default_factory, metadata=metadata)
    return dataclasses.field(default=default, metadata=metadata)


def _unwrap_optional(annotation: Any) -> Any:
    if typing.get_origin(annotation) is typing.Union:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_sort_order(annotation: Any) -> bool:
    origin = typing.get_origin(annotation) or annotation
    return isinstance(origin, type) and issubclass(origin, (dict, AbcMapping))


def _is_string_type(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, str)


def kind_of(annotation: Any) -> FieldKind:
    """Derive the wire kind from a (resolved) type annotation."""
    annotation = _unwrap_optional(annotation)

    if annotation is bool:
        return FieldKind.BOOLEAN
    if _is_string_type(annotation):
        return FieldKind.STRING
    if annotation is float:
        return FieldKind.FLOAT
    if annotation is int:
        return FieldKind.UINT
    if isinstance(annotation, type) and issubclass(annotation, datetime):
        return FieldKind.TIMESTAMP

    origin = typing.get_origin(annotation)
    if isinstance(origin, type) and issubclass(origin, (list, tuple, AbcSequence)):
        args = [arg for arg in typing.get_args(annotation) if arg is not Ellipsis]
        if len(args) == 1:
            element = _unwrap_optional(args[0])
            if _is_string_type(element):
                return FieldKind.STRING_SEQUENCE
            if _is_sort_order(element):
                return FieldKind.ORDERING_SEQUENCE

    return FieldKind.UNSUPPORTED


def _build_descriptors(cls: type) -> Tuple[FieldDescriptor, ...]:
    hints = typing.get_type_hints(cls)
    descriptors = []
    seen: Dict[str, str] = {}

    # dataclasses.fields() lists inherited (base record) fields first
    for f in dataclasses.fields(cls):
        wire_key = f.metadata.get(WIRE_KEY)
        if not wire_key:
            continue

        kind = f.metadata.get(KIND) or kind_of(hints.get(f.name, Any))
        descriptor = FieldDescriptor(
            name=f.name,
            wire_key=wire_key,
            omit_empty=bool(f.metadata.get(OMIT_EMPTY, False)),
            kind=FieldKind(kind),
            validate=f.metadata.get(VALIDATE, "") or "",
        )

        if wire_key in seen:
            logger.warning(
                "duplicate_wire_key",
                record=cls.__name__,
                wire_key=wire_key,
                fields=[seen[wire_key], f.name],
            )
        else:
            seen[wire_key] = f.name

        descriptors.append(descriptor)

    return tuple(descriptors)


def register(cls: Type[T]) -> Type[T]:
    """Build and register the descriptor table of a dataclass record."""
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls.__name__} is not a dataclass")

    descriptors = _build_descriptors(cls)
    with _registry_lock:
        _registry[cls] = descriptors

    logger.debug("registered_record", record=cls.__name__, fields=len(descriptors))
    return cls


def wire_record(cls: Type[T]) -> Type[T]:
    """Class decorator: make ``cls`` a frozen dataclass and register it."""
    return register(dataclasses.dataclass(frozen=True)(cls))


def describe(cls: type) -> Tuple[FieldDescriptor, ...]:
    """
    Return the ordered descriptor table of a registered record type.

    Raises:
        TypeError: If ``cls`` was never registered
    """
    try:
        return _registry[cls]
    except KeyError:
        raise TypeError(
            f"{cls.__name__} is not a registered wire record; decorate it with @wire_record"
        ) from None


def is_zero(kind: FieldKind, value: Any) -> bool:
    """Whether ``value`` is the zero value of ``kind``."""
    if value is None:
        return True
    if kind in (FieldKind.STRING_SEQUENCE, FieldKind.ORDERING_SEQUENCE):
        return len(value) == 0
    if isinstance(value, Enum):
        value = value.value
    if kind == FieldKind.TIMESTAMP:
        return False
    return not value
