#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for JSON/markup input detection."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dataconv.detection import detect_input_type


@pytest.mark.unit
class TestDetectInputType:
    """Tests for detect_input_type."""

    @pytest.mark.parametrize(
        "content, expected",
        [
            ("", "markup"),
            ("   \n\t", "markup"),
            ("{}", "json"),
            ("<a/>", "markup"),
            ('<?xml version="1.0"?><a/>', "markup"),
            ("  [1, 2]  ", "json"),
            ("{not json", "json"),
            ("42", "json"),
            ('"hello"', "json"),
            ("true", "json"),
            ("null", "json"),
            ("hello world", "markup"),
            ("NaN", "markup"),
        ],
    )
    def test_detection(self, content, expected):
        assert detect_input_type(content) == expected

    def test_leading_angle_bracket_wins_over_json(self):
        assert detect_input_type('<{"a": 1}>') == "markup"


@pytest.mark.unit
@pytest.mark.fuzzing
class TestDetectInputTypeProperties:
    """Property tests: detection is total and deterministic."""

    @given(st.text())
    def test_never_raises_and_is_deterministic(self, content):
        first = detect_input_type(content)

        assert first in ("json", "markup")
        assert detect_input_type(content) == first
