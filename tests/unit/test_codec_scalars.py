"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Unit tests for tolerant response scalar decoding.
"""

import math
from datetime import datetime, timezone
from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError as PydanticValidationError

from logicboxes.codec.scalars import (
    JSONBool,
    JSONFloat,
    JSONTime,
    decode_bool,
    decode_float,
    decode_timestamp,
)
from logicboxes.exceptions import FormatError


class Sample(BaseModel):
    flag: Optional[JSONBool] = None
    amount: Optional[JSONFloat] = None
    created: Optional[JSONTime] = None


class TestDecodeBool:
    @pytest.mark.parametrize("raw", [b'"true"', '"true"', "true", "True", "TRUE", "t", "1", True])
    def test_true_literals(self, raw):
        assert decode_bool(raw) is True

    @pytest.mark.parametrize("raw", [b'"false"', '"false"', "F", "0", False])
    def test_false_literals(self, raw):
        assert decode_bool(raw) is False

    @pytest.mark.parametrize("raw", [b'"notabool"', '"yes"', '""', "tRuE"])
    def test_invalid_literals(self, raw):
        with pytest.raises(FormatError):
            decode_bool(raw)


class TestDecodeFloat:
    @pytest.mark.parametrize(
        "raw,expected",
        [(b'"12.50"', 12.5), ('"0"', 0.0), ("-3.25", -3.25), ('"1e3"', 1000.0), (7, 7.0)],
    )
    def test_valid(self, raw, expected):
        assert decode_float(raw) == expected

    def test_infinity_literal(self):
        assert math.isinf(decode_float('"Inf"'))

    @pytest.mark.parametrize("raw", ['"abc"', '""', '"1,5"', '"1_000"', '"1e999"', '" 1"', '"1.5\n"', "2\n"])
    def test_invalid(self, raw):
        with pytest.raises(FormatError):
            decode_float(raw)


class TestDecodeTimestamp:
    def test_valid(self):
        assert decode_timestamp(b'"1704067200"') == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_result_is_utc_aware(self):
        assert decode_timestamp("0").tzinfo == timezone.utc

    @pytest.mark.parametrize(
        "raw", ['"12.5"', '"abc"', '""', '"1_000"', '"99999999999999999999"', '"1704067200\n"']
    )
    def test_invalid(self, raw):
        with pytest.raises(FormatError):
            decode_timestamp(raw)


class TestPydanticIntegration:
    """Test the annotated types on a response model."""

    def test_quoted_scalars(self):
        sample = Sample.model_validate(
            {"flag": "true", "amount": "99.90", "created": "1704067200"}
        )
        assert sample.flag is True
        assert sample.amount == 99.9
        assert sample.created == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_native_scalars_pass_through(self):
        sample = Sample.model_validate({"flag": False, "amount": 1.5, "created": 0})
        assert sample.flag is False
        assert sample.amount == 1.5
        assert sample.created == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_missing_fields_are_none(self):
        assert Sample.model_validate({}).flag is None

    def test_failure_is_scoped_to_the_field(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            Sample.model_validate({"flag": "notabool", "amount": "1.00"})
        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["loc"] == ("flag",)
