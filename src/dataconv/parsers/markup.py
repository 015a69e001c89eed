#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/parsers/markup.py
"""Markup (XML) text to canonical value parser.

The document is read with ``defusedxml`` so entity expansion and external
references are refused. The element tree is then folded into a canonical
mapping:

- the result is ``{document_element_name: element_value}``
- an element with no attributes and no child elements becomes its text,
  re-typed as a number or boolean where it looks like one
- any other element becomes a mapping of its attributes, then its child
  elements in document order (repeated names collapse into a sequence), then
  its text under the text key (``_text`` by default)

Examples
--------
    >>> from dataconv.tree import to_python
    >>> to_python(MarkupParser().parse('<user id="7"><name>Ann</name><tag>a</tag><tag>b</tag></user>'))
    {'user': {'id': 7, 'name': 'Ann', 'tag': ['a', 'b']}}

"""

from __future__ import annotations

import logging
from xml.etree.ElementTree import Element, ParseError

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from dataconv.exceptions import ParsingError
from dataconv.options.markup import MarkupParserOptions
from dataconv.parsers.base import BaseParser
from dataconv.tree import MappingValue, SequenceValue, StringValue, Value
from dataconv.utils.decorators import debug_timer
from dataconv.utils.scalars import infer_scalar

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    """Strip a ``{namespace-uri}`` qualifier from a tag or attribute name."""
    if tag.startswith("{") and "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def load_markup(text: str) -> Element:
    """Parse markup text into an element tree.

    Parameters
    ----------
    text : str
        Markup document

    Returns
    -------
    Element
        The document element

    Raises
    ------
    ParsingError
        With the reader's own message, e.g.
        ``not well-formed (invalid token): line 1, column 1``

    """
    try:
        return ET.fromstring(text)
    except ParseError as e:
        raise ParsingError(str(e), parsing_stage="markup", original_error=e) from e
    except DefusedXmlException as e:
        raise ParsingError(f"Forbidden markup construct: {e}", parsing_stage="markup", original_error=e) from e


class MarkupParser(BaseParser):
    """Parse markup text into a canonical value.

    Parameters
    ----------
    options : MarkupParserOptions or None
        Parser options

    """

    format_name = "markup"

    def __init__(self, options: MarkupParserOptions | None = None):
        """Initialize the markup parser with options."""
        BaseParser._validate_options_type(options, MarkupParserOptions, "markup")
        options = options or MarkupParserOptions()
        super().__init__(options)
        self.options: MarkupParserOptions = options

    def parse(self, text: str) -> Value:
        """Parse markup text.

        Parameters
        ----------
        text : str
            Markup document with a single document element

        Returns
        -------
        Value
            Mapping with one key, the document element's name

        Raises
        ------
        ParsingError
            If the text is not well-formed markup

        """
        with debug_timer(logger, "Parsing (markup)"):
            root = load_markup(text)
            try:
                value = self._element_value(root)
            except RecursionError as e:
                raise ParsingError(
                    "Markup document is nested too deeply", parsing_stage="markup", original_error=e
                ) from e
            return MappingValue({_local_name(root.tag): value})

    def _element_value(self, element: Element) -> Value:
        children = list(element)
        text = self._element_text(element)

        if not element.attrib and not children:
            return self._scalar(text)

        mapping = MappingValue()
        for name, raw in element.attrib.items():
            mapping.set(_local_name(name), self._scalar(raw))

        child_names: set[str] = set()
        for child in children:
            name = _local_name(child.tag)
            value = self._element_value(child)
            if name in child_names:
                existing = mapping.get(name)
                if isinstance(existing, SequenceValue):
                    existing.append(value)
                else:
                    mapping.set(name, SequenceValue([existing, value]))  # type: ignore[list-item]
            else:
                child_names.add(name)
                mapping.set(name, value)

        if text.strip():
            mapping.set(self.options.text_key, self._scalar(text))

        return mapping

    def _element_text(self, element: Element) -> str:
        """Collect the element's own text, including text between child elements."""
        pieces = [element.text or ""]
        pieces.extend(child.tail or "" for child in element)
        if self.options.trim_values:
            return " ".join(piece.strip() for piece in pieces if piece.strip())
        return "".join(pieces)

    def _scalar(self, raw: str) -> Value:
        if self.options.trim_values:
            raw = raw.strip()
        if self.options.parse_values:
            return infer_scalar(raw)
        return StringValue(raw)
