"""The major exported API functions for data conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/dataconv/api.py
import logging
from typing import Callable, Dict, Optional, Tuple

from dataconv.converter_registry import registry
from dataconv.exceptions import ParsingError
from dataconv.options.base import BaseParserOptions, BaseRendererOptions
from dataconv.parsers.tabular import TabularParser
from dataconv.result import ConversionResult
from dataconv.utils.decorators import returns_conversion_result

logger = logging.getLogger(__name__)

ConversionFunction = Callable[..., ConversionResult]


def _convert_via_tree(
    source: str,
    source_format: str,
    target_format: str,
    parser_options: Optional[BaseParserOptions] = None,
    renderer_options: Optional[BaseRendererOptions] = None,
) -> str:
    """Parse ``source`` into a canonical value and render it in the target format.

    Raises
    ------
    DataconvError
        Whatever the parser or renderer raises
    """
    parser = registry.get_parser(source_format)(parser_options)
    renderer = registry.get_renderer(target_format)(renderer_options)
    logger.debug(f"Converting {source_format} to {target_format} ({len(source)} characters)")
    return renderer.render_to_string(parser.parse(source))


@returns_conversion_result("json_to_markup")
def json_to_markup(
    json_text: str,
    parser_options: Optional[BaseParserOptions] = None,
    renderer_options: Optional[BaseRendererOptions] = None,
) -> ConversionResult:
    """Convert a JSON document to markup.

    A top-level object with exactly one key (whose value is not an array)
    names the document element; any other value is wrapped in ``<root>``.
    Object keys become child elements, arrays become repeated siblings,
    ``@_``-prefixed keys become attributes and ``_text`` becomes element text.

    Parameters
    ----------
    json_text : str
        JSON document
    parser_options : JsonParserOptions, optional
        JSON reading options
    renderer_options : MarkupRendererOptions, optional
        Markup writing options (root name, indentation, declaration, ...)

    Returns
    -------
    ConversionResult
        Markup text, or the JSON decoder's error message

    Examples
    --------
        >>> print(json_to_markup('{"name": "John", "age": 30}').data)
        <root>
          <name>John</name>
          <age>30</age>
        </root>

    """
    return ConversionResult.ok(_convert_via_tree(json_text, "json", "markup", parser_options, renderer_options))


@returns_conversion_result("markup_to_json")
def markup_to_json(
    markup_text: str,
    parser_options: Optional[BaseParserOptions] = None,
    renderer_options: Optional[BaseRendererOptions] = None,
) -> ConversionResult:
    """Convert a markup document to JSON.

    The result is an object keyed by the document element's name. Elements
    with neither attributes nor children become typed scalars, other
    elements become objects (attributes first, then children, then
    ``_text``); repeated child names collapse into arrays.

    Parameters
    ----------
    markup_text : str
        Markup document
    parser_options : MarkupParserOptions, optional
        Markup reading options
    renderer_options : JsonRendererOptions, optional
        JSON writing options

    Returns
    -------
    ConversionResult
        JSON text with two-space indentation, or the XML reader's error message

    """
    return ConversionResult.ok(_convert_via_tree(markup_text, "markup", "json", parser_options, renderer_options))


@returns_conversion_result("json_to_tabular")
def json_to_tabular(
    json_text: str,
    parser_options: Optional[BaseParserOptions] = None,
    renderer_options: Optional[BaseRendererOptions] = None,
) -> ConversionResult:
    """Convert a JSON object or array of objects to CSV.

    Parameters
    ----------
    json_text : str
        JSON document holding an object or a non-empty array of objects
    parser_options : JsonParserOptions, optional
        JSON reading options
    renderer_options : TabularRendererOptions, optional
        Delimiter, quoting and line terminator

    Returns
    -------
    ConversionResult
        CSV text without a trailing line break, or an error for JSON that
        does not parse or has no table form

    """
    return ConversionResult.ok(_convert_via_tree(json_text, "json", "tabular", parser_options, renderer_options))


@returns_conversion_result("tabular_to_json")
def tabular_to_json(
    tabular_text: str,
    parser_options: Optional[BaseParserOptions] = None,
    renderer_options: Optional[BaseRendererOptions] = None,
) -> ConversionResult:
    """Convert CSV with a header row to a JSON array of objects.

    Parameters
    ----------
    tabular_text : str
        Delimited text whose first record is the header
    parser_options : TabularParserOptions, optional
        Delimiter, quoting and typing options
    renderer_options : JsonRendererOptions, optional
        JSON writing options

    Returns
    -------
    ConversionResult
        JSON text, or an error naming the first malformed line

    Examples
    --------
        >>> print(tabular_to_json("id,name\\n1,John").data)
        [
          {
            "id": 1,
            "name": "John"
          }
        ]

    """
    return ConversionResult.ok(_convert_via_tree(tabular_text, "tabular", "json", parser_options, renderer_options))


def markup_to_tabular(
    markup_text: str,
    parser_options: Optional[BaseParserOptions] = None,
    renderer_options: Optional[BaseRendererOptions] = None,
) -> ConversionResult:
    """Convert markup to CSV by way of JSON.

    Failures of either step are returned unchanged.

    Parameters
    ----------
    markup_text : str
        Markup document
    parser_options : MarkupParserOptions, optional
        Markup reading options
    renderer_options : TabularRendererOptions, optional
        CSV writing options

    Returns
    -------
    ConversionResult
        CSV text or the first step's error

    """
    intermediate = markup_to_json(markup_text, parser_options=parser_options)
    if not intermediate.success:
        return intermediate
    return json_to_tabular(intermediate.unwrap(), renderer_options=renderer_options)


def tabular_to_markup(
    tabular_text: str,
    parser_options: Optional[BaseParserOptions] = None,
    renderer_options: Optional[BaseRendererOptions] = None,
) -> ConversionResult:
    """Convert CSV to markup by way of JSON.

    The rows become repeated ``<item>`` elements inside ``<root>``.

    Parameters
    ----------
    tabular_text : str
        Delimited text whose first record is the header
    parser_options : TabularParserOptions, optional
        CSV reading options
    renderer_options : MarkupRendererOptions, optional
        Markup writing options

    Returns
    -------
    ConversionResult
        Markup text or the first step's error

    """
    intermediate = tabular_to_json(tabular_text, parser_options=parser_options)
    if not intermediate.success:
        return intermediate
    return json_to_markup(intermediate.unwrap(), renderer_options=renderer_options)


_CONVERSIONS: Dict[Tuple[str, str], ConversionFunction] = {
    ("json", "markup"): json_to_markup,
    ("markup", "json"): markup_to_json,
    ("json", "tabular"): json_to_tabular,
    ("tabular", "json"): tabular_to_json,
    ("markup", "tabular"): markup_to_tabular,
    ("tabular", "markup"): tabular_to_markup,
}


@returns_conversion_result("convert")
def convert(
    source: str,
    source_format: str,
    target_format: str,
    *,
    parser_options: Optional[BaseParserOptions] = None,
    renderer_options: Optional[BaseRendererOptions] = None,
) -> ConversionResult:
    """Convert text between any two supported formats.

    Format names are ``"json"``, ``"markup"`` and ``"tabular"``; ``"xml"``
    and ``"csv"`` are accepted as aliases, as are the names of formats added
    with ``registry.register``. Converting a format to itself
    returns the input unchanged.

    Parameters
    ----------
    source : str
        Input text
    source_format : str
        Format of ``source``
    target_format : str
        Format to produce
    parser_options : BaseParserOptions, optional
        Options for the source format's parser
    renderer_options : BaseRendererOptions, optional
        Options for the target format's renderer

    Returns
    -------
    ConversionResult
        Converted text, or an error message (including for unknown format
        names and options of the wrong type)

    Examples
    --------
        >>> convert("a,b\\n1,2", "csv", "json").success
        True
        >>> convert("{}", "json", "yaml").error
        "Unsupported format: 'yaml'. Supported formats: json, markup, tabular"

    """
    source_key = registry.resolve_format(source_format)
    target_key = registry.resolve_format(target_format)
    if source_key == target_key:
        logger.debug(f"Source and target format are both '{source_key}'; returning input unchanged")
        return ConversionResult.ok(source)
    conversion = _CONVERSIONS.get((source_key, target_key))
    if conversion is None:
        # Formats registered at runtime go straight through the value tree
        return ConversionResult.ok(
            _convert_via_tree(source, source_key, target_key, parser_options, renderer_options)
        )
    return conversion(source, parser_options=parser_options, renderer_options=renderer_options)


def _parses(format_name: str, text: str, parser_options: Optional[BaseParserOptions]) -> bool:
    try:
        registry.get_parser(format_name)(parser_options).parse(text)
    except ParsingError:
        return False
    return True


def is_valid_json(text: str, parser_options: Optional[BaseParserOptions] = None) -> bool:
    """Return True if ``text`` is a strict JSON document."""
    return _parses("json", text, parser_options)


def is_valid_markup(text: str, parser_options: Optional[BaseParserOptions] = None) -> bool:
    """Return True if ``text`` is a well-formed markup document."""
    return _parses("markup", text, parser_options)


def is_valid_tabular(text: str, parser_options: Optional[BaseParserOptions] = None) -> bool:
    """Return True if ``text`` is well-formed delimited text with at least one data row.

    Header-only and empty input are not valid tables.
    """
    parser = TabularParser(parser_options)
    try:
        return len(parser.parse(text)) > 0
    except ParsingError:
        return False
