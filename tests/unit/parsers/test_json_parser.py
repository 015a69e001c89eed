#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the JSON parser."""

import json

import pytest

from dataconv.exceptions import InvalidOptionsError, ParsingError
from dataconv.options import JsonParserOptions, MarkupParserOptions
from dataconv.parsers.json import JsonParser, load_json
from dataconv.tree import BooleanValue, MappingValue, NullValue, NumberValue, SequenceValue, StringValue, to_python


@pytest.mark.unit
class TestJsonParser:
    """Tests for JsonParser.parse."""

    def test_parse_object(self):
        value = JsonParser().parse('{"name": "John", "age": 30, "tags": [true, null, 1.5]}')

        assert value == MappingValue(
            {
                "name": StringValue("John"),
                "age": NumberValue(30),
                "tags": SequenceValue([BooleanValue(True), NullValue(), NumberValue(1.5)]),
            }
        )

    def test_integers_stay_integers(self):
        value = JsonParser().parse("[1, 1.0]")

        assert [type(item.value) for item in value] == [int, float]

    def test_key_order_is_preserved(self):
        value = JsonParser().parse('{"z": 1, "a": 2, "m": 3}')

        assert value.keys() == ["z", "a", "m"]

    def test_repeated_key_keeps_last_value(self):
        assert to_python(JsonParser().parse('{"a": 1, "a": 2}')) == {"a": 2}

    def test_scalar_document(self):
        assert JsonParser().parse('"hi"') == StringValue("hi")

    def test_blank_input_fails_with_decoder_message(self):
        with pytest.raises(ParsingError) as exc_info:
            JsonParser().parse("")

        assert exc_info.value.message == "Expecting value: line 1 column 1 (char 0)"
        assert exc_info.value.parsing_stage == "json"
        assert isinstance(exc_info.value.original_error, json.JSONDecodeError)

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity", "[1, NaN]"])
    def test_non_standard_constants_rejected(self, literal):
        with pytest.raises(ParsingError, match="Invalid JSON literal"):
            JsonParser().parse(literal)

    def test_deep_nesting_is_a_parsing_error(self):
        with pytest.raises(ParsingError, match="nested too deeply"):
            JsonParser().parse("[" * 100000 + "]" * 100000)


@pytest.mark.unit
class TestJsonParserOptions:
    """Tests for option handling in JsonParser."""

    def test_unwrap_string_decodes_stringified_json(self):
        parser = JsonParser(JsonParserOptions(unwrap_string=True))

        assert to_python(parser.parse(json.dumps('{"a": [1]}'))) == {"a": [1]}

    def test_unwrap_string_off_keeps_string(self):
        assert JsonParser().parse(json.dumps('{"a": 1}')) == StringValue('{"a": 1}')

    def test_wrong_options_type_rejected(self):
        with pytest.raises(InvalidOptionsError):
            JsonParser(MarkupParserOptions())  # type: ignore[arg-type]


@pytest.mark.unit
class TestLoadJson:
    """Tests for the strict load_json helper."""

    def test_returns_plain_python(self):
        assert load_json('{"a": [1, "b"]}') == {"a": [1, "b"]}

    def test_trailing_garbage_rejected(self):
        with pytest.raises(ParsingError, match="Extra data"):
            load_json("{} {}")
