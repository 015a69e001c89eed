#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for parser and renderer option dataclasses."""

import dataclasses

import pytest

from dataconv.options import (
    JsonParserOptions,
    JsonRendererOptions,
    MarkupParserOptions,
    MarkupRendererOptions,
    TabularParserOptions,
    TabularRendererOptions,
)


@pytest.mark.unit
class TestOptionDefaults:
    """Tests for default option values."""

    def test_json_defaults(self):
        assert JsonParserOptions().unwrap_string is False
        renderer = JsonRendererOptions()
        assert (renderer.indent, renderer.ensure_ascii, renderer.sort_keys) == (2, False, False)

    def test_markup_defaults(self):
        parser = MarkupParserOptions()
        renderer = MarkupRendererOptions()

        assert (parser.text_key, parser.parse_values, parser.trim_values) == ("_text", True, True)
        assert renderer.root_name == "root"
        assert renderer.item_name == "item"
        assert renderer.indent == "  "
        assert renderer.attribute_prefix == "@_"
        assert renderer.text_key == "_text"
        assert renderer.xml_declaration is False

    def test_tabular_defaults(self):
        parser = TabularParserOptions()
        renderer = TabularRendererOptions()

        assert (parser.delimiter, parser.quote_char, parser.parse_values, parser.skip_empty_rows) == (
            ",",
            '"',
            True,
            True,
        )
        assert (renderer.delimiter, renderer.quote_char, renderer.line_terminator) == (",", '"', "\n")


@pytest.mark.unit
class TestOptionValidation:
    """Tests for __post_init__ validation."""

    @pytest.mark.parametrize(
        "factory, message",
        [
            (lambda: JsonRendererOptions(indent=-1), "indent must be non-negative"),
            (lambda: MarkupParserOptions(text_key=""), "text_key must not be empty"),
            (lambda: MarkupRendererOptions(root_name=""), "root_name must not be empty"),
            (lambda: MarkupRendererOptions(item_name=""), "item_name must not be empty"),
            (lambda: MarkupRendererOptions(indent="->"), "indent must contain only whitespace"),
            (lambda: TabularParserOptions(delimiter=";;"), "delimiter must be a single character"),
            (lambda: TabularParserOptions(quote_char=""), "quote_char must be a single character"),
            (lambda: TabularParserOptions(delimiter='"'), "delimiter and quote_char must differ"),
            (lambda: TabularRendererOptions(line_terminator="\r"), "line_terminator must be"),
            (lambda: TabularRendererOptions(delimiter="'", quote_char="'"), "must differ"),
        ],
    )
    def test_invalid_values_raise(self, factory, message):
        with pytest.raises(ValueError, match=message):
            factory()

    def test_compact_json_indent_allowed(self):
        assert JsonRendererOptions(indent=None).indent is None

    def test_tab_delimiter_allowed(self):
        assert TabularParserOptions(delimiter="\t").delimiter == "\t"


@pytest.mark.unit
class TestCloneFrozenMixin:
    """Tests for create_updated, field_names and from_mapping."""

    def test_options_are_frozen(self):
        options = MarkupRendererOptions()

        with pytest.raises(dataclasses.FrozenInstanceError):
            options.root_name = "data"  # type: ignore[misc]

    def test_create_updated_returns_new_instance(self):
        original = MarkupRendererOptions()
        updated = original.create_updated(root_name="data", xml_declaration=True)

        assert original.root_name == "root"
        assert updated.root_name == "data"
        assert updated.xml_declaration is True
        assert updated.indent == original.indent

    def test_create_updated_validates(self):
        with pytest.raises(ValueError):
            TabularRendererOptions().create_updated(delimiter="")

    def test_field_names_in_declaration_order(self):
        assert TabularParserOptions.field_names() == ["delimiter", "quote_char", "parse_values", "skip_empty_rows"]

    def test_from_mapping(self):
        options = TabularParserOptions.from_mapping({"delimiter": ";", "parse_values": False})

        assert options == TabularParserOptions(delimiter=";", parse_values=False)

    def test_from_mapping_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="Unknown option\\(s\\) for JsonRendererOptions: colour"):
            JsonRendererOptions.from_mapping({"colour": "red", "indent": 4})
