#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_markup_renderer.py
"""Unit tests for the markup (XML) renderer.

Tests cover:
- Document element selection and the wrapper element
- Arrays, nulls, empty strings and empty containers
- Attributes, element text and escaping
- Rendering options

"""

import pytest

from dataconv.constants import MARKUP_DECLARATION
from dataconv.exceptions import InvalidOptionsError, RenderingError
from dataconv.options import JsonRendererOptions, MarkupParserOptions, MarkupRendererOptions
from dataconv.parsers.markup import MarkupParser
from dataconv.renderers.markup import MarkupRenderer
from dataconv.tree import from_python, to_python


def render(obj, **options):
    return MarkupRenderer(MarkupRendererOptions(**options)).render_to_string(from_python(obj))


@pytest.mark.unit
class TestDocumentElement:
    """Tests for choosing the document element."""

    def test_multiple_keys_are_wrapped_in_root(self):
        assert render({"name": "John", "age": 30}) == "<root>\n  <name>John</name>\n  <age>30</age>\n</root>"

    def test_single_key_becomes_document_element(self):
        assert render({"user": {"name": "Ann"}}) == "<user>\n  <name>Ann</name>\n</user>"

    def test_single_key_holding_array_is_wrapped(self):
        assert render({"users": [{"n": 1}, {"n": 2}]}) == (
            "<root>\n"
            "  <users>\n    <n>1</n>\n  </users>\n"
            "  <users>\n    <n>2</n>\n  </users>\n"
            "</root>"
        )

    def test_top_level_array_uses_item_elements(self):
        assert render([1, "two"]) == "<root>\n  <item>1</item>\n  <item>two</item>\n</root>"

    @pytest.mark.parametrize(
        "obj, expected",
        [
            ("hi", "<root>hi</root>"),
            (42, "<root>42</root>"),
            (False, "<root>false</root>"),
            (None, "<root/>"),
        ],
    )
    def test_scalar_documents(self, obj, expected):
        assert render(obj) == expected

    def test_single_attribute_key_is_not_an_element_name(self):
        assert render({"@_id": "1"}) == '<root id="1"/>'

    @pytest.mark.parametrize("obj", [{}, [], {"a": {}}, {"a": [], "b": {}}])
    def test_nothing_to_write_gives_empty_root(self, obj):
        assert render(obj) == "<root/>"


@pytest.mark.unit
class TestElementContent:
    """Tests for how values become element content."""

    def test_null_and_empty_string_self_close(self):
        assert render({"a": None, "b": "", "c": True}) == "<root>\n  <a/>\n  <b/>\n  <c>true</c>\n</root>"

    def test_empty_containers_are_left_out(self):
        assert render({"a": {}, "b": [], "c": 1}) == "<root>\n  <c>1</c>\n</root>"

    def test_nested_arrays_are_flattened(self):
        assert render({"r": {"v": [[1, 2], [3]]}}) == "<r>\n  <v>1</v>\n  <v>2</v>\n  <v>3</v>\n</r>"

    def test_numbers_use_json_spelling(self):
        assert render({"r": {"f": 2.5, "big": 1e21}}) == "<r>\n  <f>2.5</f>\n  <big>1e+21</big>\n</r>"

    def test_attributes_and_text(self):
        assert render({"price": {"@_currency": "EUR", "_text": 9.99}}) == '<price currency="EUR">9.99</price>'

    def test_text_alongside_children(self):
        assert render({"p": {"_text": "Hello", "b": "big"}}) == "<p>\n  Hello\n  <b>big</b>\n</p>"

    def test_special_characters_are_escaped(self):
        result = render({"a": "x < y & z", "@_q": 'say "hi"\n'})

        assert result == '<root q="say &quot;hi&quot;&#10;">\n  <a>x &lt; y &amp; z</a>\n</root>'


@pytest.mark.unit
class TestWellFormedness:
    """Tests for values that cannot be written as well-formed markup."""

    @pytest.mark.parametrize(
        "obj, message",
        [
            ({"a b": 1}, "Key 'a b' is not a valid element name"),
            ({"r": {"1st": 1}}, "Key '1st' is not a valid element name"),
            ({"r": {"": 1}}, "Key '' is not a valid element name"),
            ({"ns:tag": 1}, "Key 'ns:tag' is not a valid element name"),
            ({"r": {"@_a b": 1}}, "Key 'a b' is not a valid attribute name"),
        ],
    )
    def test_invalid_names(self, obj, message):
        with pytest.raises(RenderingError) as exc_info:
            render(obj)

        assert exc_info.value.message == message

    @pytest.mark.parametrize(
        "obj, message",
        [
            ({"a": "\u0001"}, "Value of 'a' contains character U+0001, which markup cannot hold"),
            ({"r": {"@_id": "x\u0000"}}, "Value of '@_id' contains character U+0000, which markup cannot hold"),
            ({"a": "\uFFFE"}, "Value of 'a' contains character U+FFFE, which markup cannot hold"),
        ],
    )
    def test_illegal_characters(self, obj, message):
        with pytest.raises(RenderingError) as exc_info:
            render(obj)

        assert exc_info.value.message == message

    def test_non_ascii_names_are_allowed(self):
        assert render({"r": {"café": 1, "_x-1.y": 2}}) == (
            "<r>\n  <café>1</café>\n  <_x-1.y>2</_x-1.y>\n</r>"
        )

    def test_empty_containers_skip_name_check(self):
        assert render({"a b": {}, "c": 1}) == "<root>\n  <c>1</c>\n</root>"

    def test_too_deep_value_is_rendering_error(self, deep_mapping):
        with pytest.raises(RenderingError, match="nested too deeply"):
            MarkupRenderer().render_to_string(deep_mapping(5000))


@pytest.mark.unit
class TestMarkupRendererOptions:
    """Tests for rendering options."""

    def test_xml_declaration(self):
        assert render({"a": 1}, xml_declaration=True) == f"{MARKUP_DECLARATION}\n<a>1</a>"

    def test_custom_names_and_indent(self):
        result = render([{"x": 1}], root_name="rows", item_name="row", indent="\t")

        assert result == "<rows>\n\t<row>\n\t\t<x>1</x>\n\t</row>\n</rows>"

    def test_custom_attribute_prefix_and_text_key(self):
        result = render({"n": {"$id": 3, "#text": "v"}}, attribute_prefix="$", text_key="#text")

        assert result == '<n id="3">v</n>'

    def test_wrong_options_type_rejected(self):
        with pytest.raises(InvalidOptionsError):
            MarkupRenderer(JsonRendererOptions())  # type: ignore[arg-type]


@pytest.mark.unit
class TestMarkupRoundTrip:
    """Rendered markup reads back into the same value."""

    def test_attributes_and_text_read_back(self):
        original = {"price": {"@_currency": "EUR", "_text": 9.99}}
        text = MarkupRenderer().render_to_string(from_python(original))

        assert to_python(MarkupParser(MarkupParserOptions()).parse(text)) == {
            "price": {"currency": "EUR", "_text": 9.99}
        }

    def test_document_element_round_trip(self):
        original = {"user": {"name": "Ann", "age": 41, "tags": ["a", "b"]}}
        text = MarkupRenderer().render_to_string(from_python(original))

        assert to_python(MarkupParser().parse(text)) == original

    def test_carriage_returns_read_back(self):
        original = {"r": {"@_note": "a\rb", "_text": "x\ry"}}
        text = MarkupRenderer().render_to_string(from_python(original))

        assert text == '<r note="a&#13;b">x&#13;y</r>'
        assert to_python(MarkupParser().parse(text)) == {"r": {"note": "a\rb", "_text": "x\ry"}}
