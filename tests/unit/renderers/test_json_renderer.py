#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for JSON renderer."""

import json

import pytest

from dataconv.exceptions import InvalidOptionsError, RenderingError
from dataconv.options import JsonRendererOptions, MarkupRendererOptions
from dataconv.renderers.json import JsonRenderer
from dataconv.tree import MappingValue, NumberValue, SequenceValue, StringValue, from_python


@pytest.mark.unit
class TestJsonRendererBasic:
    """Test basic JSON rendering functionality."""

    def test_default_indent(self):
        value = from_python({"name": "John", "tags": [1, None]})

        assert JsonRenderer().render_to_string(value) == (
            '{\n  "name": "John",\n  "tags": [\n    1,\n    null\n  ]\n}'
        )

    def test_integers_are_not_written_as_floats(self):
        value = SequenceValue([NumberValue(30), NumberValue(30.0)])

        assert JsonRenderer(JsonRendererOptions(indent=None)).render_to_string(value) == "[30, 30.0]"

    def test_key_order_is_kept(self):
        value = MappingValue({"z": NumberValue(1), "a": NumberValue(2)})

        assert list(json.loads(JsonRenderer().render_to_string(value))) == ["z", "a"]

    def test_non_ascii_written_verbatim(self):
        assert JsonRenderer().render_to_string(StringValue("café")) == '"café"'


@pytest.mark.unit
class TestJsonRendererOptions:
    """Test rendering options."""

    def test_sort_keys(self):
        value = from_python({"b": 1, "a": 2})

        assert JsonRenderer(JsonRendererOptions(indent=None, sort_keys=True)).render_to_string(value) == (
            '{"a": 2, "b": 1}'
        )

    def test_ensure_ascii(self):
        options = JsonRendererOptions(ensure_ascii=True)

        assert JsonRenderer(options).render_to_string(StringValue("café")) == '"caf\\u00e9"'

    def test_wrong_options_type_rejected(self):
        with pytest.raises(InvalidOptionsError):
            JsonRenderer(MarkupRendererOptions())  # type: ignore[arg-type]

    def test_too_deep_value_is_rendering_error(self, deep_mapping):
        with pytest.raises(RenderingError, match="nested too deeply"):
            JsonRenderer().render_to_string(deep_mapping(5000))
