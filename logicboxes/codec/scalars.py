"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Tolerant decoding of response scalars.

The reseller API quotes most scalars in its JSON responses, including
booleans (``"true"``), amounts (``"12.50"``) and Unix timestamps
(``"1700000000"``). The decoders here strip the quotes and parse the
remaining text; the ``JSONBool``/``JSONFloat``/``JSONTime`` annotated types
apply them to pydantic model fields::

    class Detail(BaseModel):
        total: JSONFloat
        created: JSONTime
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Annotated, Any, Union

from pydantic import BeforeValidator

from logicboxes.exceptions import FormatError

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_RGX_INT = re.compile(r"[+-]?[0-9]+")
_RGX_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

Raw = Union[bytes, bytearray, str, bool, int, float]


def strip_quotes(raw: Raw) -> str:
    """Wire text of a JSON scalar with surrounding double quotes removed."""
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"scalar is not valid UTF-8: {e}") from e
    elif isinstance(raw, bool):
        raw = "true" if raw else "false"
    elif isinstance(raw, (int, float)):
        raw = repr(raw)
    elif not isinstance(raw, str):
        raise FormatError(f"cannot decode {type(raw).__name__} as a scalar")
    return raw.strip('"')


def decode_bool(raw: Raw) -> bool:
    """
    Decode a (possibly quoted) boolean literal.

    Raises:
        FormatError: If the text is not a boolean literal
    """
    text = strip_quotes(raw)
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise FormatError(f"invalid boolean literal: {text!r}")


def decode_float(raw: Raw) -> float:
    """
    Decode a (possibly quoted) floating-point literal.

    Raises:
        FormatError: If the text is not a number
    """
    text = strip_quotes(raw)
    if not _RGX_FLOAT.fullmatch(text):
        raise FormatError(f"invalid float literal: {text!r}")
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        raise FormatError(f"float literal out of range: {text!r}")
    return value


def decode_timestamp(raw: Raw) -> datetime:
    """
    Decode a (possibly quoted) Unix timestamp in seconds into an aware UTC datetime.

    Raises:
        FormatError: If the text is not a base-10 integer or is out of range
    """
    text = strip_quotes(raw)
    if not _RGX_INT.fullmatch(text):
        raise FormatError(f"invalid unix timestamp: {text!r}")
    try:
        return datetime.fromtimestamp(int(text), tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise FormatError(f"unix timestamp out of range: {text!r}") from e


def _passthrough(decoder: Any, native: type) -> Any:
    def validate(value: Any) -> Any:
        if isinstance(value, native) and not (native is float and isinstance(value, bool)):
            return value
        return decoder(value)
    return validate


JSONBool = Annotated[bool, BeforeValidator(_passthrough(decode_bool, bool))]
JSONFloat = Annotated[float, BeforeValidator(_passthrough(decode_float, float))]
JSONTime = Annotated[datetime, BeforeValidator(_passthrough(decode_timestamp, datetime))]
