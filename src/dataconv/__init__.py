"""dataconv - convert structured data between JSON, markup (XML) and CSV.

Every conversion parses the source text into a small canonical value tree
(objects, arrays and scalars) and renders that tree in the target format,
so all six directions share the same parsers and renderers. Conversions
never raise for bad input: they return a :class:`ConversionResult` holding
either the output text or an error message that points at the problem.

Key Features
------------
- JSON to markup with attribute (``@_``) and text (``_text``) conventions
- Markup to JSON with typed numbers and booleans
- JSON arrays of objects to CSV and back, with strict CSV reading
- Markup/CSV conversions by way of JSON
- JSON/markup detection and pretty-printing helpers
- Frozen dataclass options for every parser and renderer

Examples
--------
Converting between formats:

    >>> from dataconv import convert, json_to_markup
    >>> print(json_to_markup('{"name": "John", "age": 30}').data)
    <root>
      <name>John</name>
      <age>30</age>
    </root>
    >>> convert("id,name\\n1,John", "csv", "json").success
    True

Handling failures:

    >>> result = convert("[]", "json", "tabular")
    >>> result.success, result.error
    (False, 'Empty collection cannot be converted to tabular form')

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from dataconv.api import (
    convert,
    is_valid_json,
    is_valid_markup,
    is_valid_tabular,
    json_to_markup,
    json_to_tabular,
    markup_to_json,
    markup_to_tabular,
    tabular_to_json,
    tabular_to_markup,
)
from dataconv.detection import detect_input_type
from dataconv.exceptions import (
    DataconvError,
    FormatError,
    InvalidOptionsError,
    ParsingError,
    RenderingError,
    ShapeError,
    ValidationError,
)
from dataconv.formatting import format_json, format_markup, format_markup_manual, parse_json, stringify_json
from dataconv.options import (
    JsonParserOptions,
    JsonRendererOptions,
    MarkupParserOptions,
    MarkupRendererOptions,
    TabularParserOptions,
    TabularRendererOptions,
)
from dataconv.result import ConversionResult

__all__ = [
    "__version__",
    # Conversions
    "convert",
    "json_to_markup",
    "markup_to_json",
    "json_to_tabular",
    "tabular_to_json",
    "markup_to_tabular",
    "tabular_to_markup",
    "is_valid_json",
    "is_valid_markup",
    "is_valid_tabular",
    "ConversionResult",
    # Detection and formatting
    "detect_input_type",
    "format_markup",
    "format_markup_manual",
    "format_json",
    "parse_json",
    "stringify_json",
    # Options
    "JsonParserOptions",
    "JsonRendererOptions",
    "MarkupParserOptions",
    "MarkupRendererOptions",
    "TabularParserOptions",
    "TabularRendererOptions",
    # Exceptions
    "DataconvError",
    "ValidationError",
    "InvalidOptionsError",
    "FormatError",
    "ParsingError",
    "RenderingError",
    "ShapeError",
]
