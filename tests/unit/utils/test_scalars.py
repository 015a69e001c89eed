#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for scalar re-typing of text fields."""

import sys

import pytest

from dataconv.tree import BooleanValue, NumberValue, StringValue
from dataconv.utils.scalars import infer_scalar


@pytest.mark.unit
class TestInferScalar:
    """Tests for infer_scalar."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("30", NumberValue(30)),
            ("-7", NumberValue(-7)),
            ("+4", NumberValue(4)),
            ("007", NumberValue(7)),
            ("12345678901234567890", NumberValue(12345678901234567890)),
        ],
    )
    def test_integers(self, text, expected):
        result = infer_scalar(text)

        assert result == expected
        assert type(result.value) is int

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("2.5", 2.5),
            ("-0.25", -0.25),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("6.02E23", 6.02e23),
        ],
    )
    def test_decimals(self, text, expected):
        result = infer_scalar(text)

        assert isinstance(result, NumberValue)
        assert result.value == expected
        assert type(result.value) is float

    @pytest.mark.parametrize("text, expected", [("true", True), ("false", False)])
    def test_exact_booleans(self, text, expected):
        assert infer_scalar(text) == BooleanValue(expected)

    @pytest.mark.parametrize(
        "text",
        ["True", "FALSE", "yes", "", " 1", "1 ", "1,000", "0x1F", "inf", "NaN", "1e999", "١٢", "--1", "1.2.3"],
    )
    def test_everything_else_stays_text(self, text):
        assert infer_scalar(text) == StringValue(text)

    @pytest.mark.skipif(
        not getattr(sys, "get_int_max_str_digits", lambda: 0)(), reason="no int string conversion limit"
    )
    def test_integer_past_conversion_limit_stays_text(self):
        text = "9" * (sys.get_int_max_str_digits() + 1)

        assert infer_scalar(text) == StringValue(text)
