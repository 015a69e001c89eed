#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/renderers/markup.py
"""Canonical value to markup (XML) renderer.

Document building rules:

- a mapping with exactly one key (whose value is not an array) is used as
  the document element; anything else is wrapped in ``<root>``
- mapping keys become child elements; keys starting with ``@_`` become
  attributes and the ``_text`` key becomes element text
- arrays become repeated sibling elements named after their key; a
  top-level array is written as ``<item>`` elements inside the wrapper
- scalars become element text (``true``/``false``, JSON number spelling)
- ``null`` and ``""`` become a self-closing element
- empty objects and arrays are left out entirely
- keys that are not XML names, and characters XML 1.0 cannot hold, raise
  :class:`~dataconv.exceptions.RenderingError`

Examples
--------
    >>> from dataconv.tree import from_python
    >>> print(MarkupRenderer().render_to_string(from_python({"name": "John", "age": 30})))
    <root>
      <name>John</name>
      <age>30</age>
    </root>

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterator, Optional
from xml.sax.saxutils import escape

from dataconv.constants import MARKUP_DECLARATION
from dataconv.exceptions import RenderingError
from dataconv.options.markup import MarkupRendererOptions
from dataconv.renderers.base import BaseRenderer
from dataconv.tree import (
    BooleanValue,
    MappingValue,
    NullValue,
    NumberValue,
    SequenceValue,
    StringValue,
    Value,
    ValueVisitor,
    scalar_to_text,
)
from dataconv.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

_ATTRIBUTE_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}
_TEXT_ENTITIES = {"\r": "&#13;"}

# XML 1.0 Name production without ":", which would be read as a namespace prefix
_NAME_START_CHARS = (
    "A-Z_a-z\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u02FF\u0370-\u037D\u037F-\u1FFF\u200C-\u200D"
    "\u2070-\u218F\u2C00-\u2FEF\u3001-\uD7FF\uF900-\uFDCF\uFDF0-\uFFFD\U00010000-\U000EFFFF"
)
_NAME_RE = re.compile(f"[{_NAME_START_CHARS}][{_NAME_START_CHARS}\\-.0-9\u00B7\u0300-\u036F\u203F-\u2040]*")
_ILLEGAL_CHAR_RE = re.compile("[^\t\n\r\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def _quote_attribute(text: str) -> str:
    """Escape an attribute value and wrap it in double quotes."""
    return '"' + escape(text, _ATTRIBUTE_ENTITIES) + '"'


def _check_name(name: str, what: str) -> None:
    if not _NAME_RE.fullmatch(name):
        raise RenderingError(f"Key {name!r} is not a valid {what} name", rendering_stage="markup")


def _check_text(text: str, key: str) -> None:
    illegal = _ILLEGAL_CHAR_RE.search(text)
    if illegal:
        raise RenderingError(
            f"Value of {key!r} contains character U+{ord(illegal.group()):04X}, which markup cannot hold",
            rendering_stage="markup",
        )


@dataclass
class _ElementContent:
    """What goes inside one element: attributes, text and child elements."""

    attributes: list[tuple[str, str]] = field(default_factory=list)
    text: Optional[str] = None
    children: list[tuple[str, Value]] = field(default_factory=list)


class MarkupRenderer(BaseRenderer, ValueVisitor):
    """Render a canonical value as an indented markup document.

    The visit methods describe the content of the element a value is
    written into; element names come from the enclosing mapping keys.

    Parameters
    ----------
    options : MarkupRendererOptions or None, default = None
        Markup rendering options

    """

    format_name = "markup"

    def __init__(self, options: MarkupRendererOptions | None = None):
        """Initialize the markup renderer with options."""
        BaseRenderer._validate_options_type(options, MarkupRendererOptions, "markup")
        options = options or MarkupRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkupRendererOptions = options

    def render_to_string(self, value: Value) -> str:
        """Render a canonical value to markup text.

        Parameters
        ----------
        value : Value
            Canonical value tree

        Returns
        -------
        str
            Markup document with a single document element

        Raises
        ------
        RenderingError
            If a key is not a valid element or attribute name, a value holds
            a character markup cannot represent, or the value is nested too
            deeply

        """
        with debug_timer(logger, "Rendering (markup)"):
            name, content = self._document_element(value)
            try:
                lines = list(self._element_lines(name, content, 0))
            except RecursionError as e:
                raise RenderingError(
                    "Value is nested too deeply to render as markup", rendering_stage="markup", original_error=e
                ) from e
            if not lines:
                # Document element was suppressed
                lines = [f"<{self.options.root_name}/>"]
            if self.options.xml_declaration:
                lines.insert(0, MARKUP_DECLARATION)
            return "\n".join(lines)

    def _document_element(self, value: Value) -> tuple[str, Value]:
        """Pick the document element name and the value written into it."""
        if isinstance(value, MappingValue) and len(value) == 1:
            name, inner = next(value.items())
            if not isinstance(inner, SequenceValue) and not self._is_special_key(name):
                return name, inner
        if isinstance(value, SequenceValue):
            logger.debug("Wrapping top-level array in <%s>", self.options.root_name)
            return self.options.root_name, MappingValue({self.options.item_name: value})
        return self.options.root_name, value

    def _is_special_key(self, key: str) -> bool:
        return key == self.options.text_key or self._attribute_name(key) is not None

    def _attribute_name(self, key: str) -> Optional[str]:
        prefix = self.options.attribute_prefix
        if prefix and key.startswith(prefix) and len(key) > len(prefix):
            return key[len(prefix) :]
        return None

    def _element_lines(self, name: str, value: Value, depth: int) -> Iterator[str]:
        """Yield the lines of the element(s) ``name`` holding ``value``.

        An array yields one element per entry; nested arrays are flattened.
        An empty container yields nothing.
        """
        if isinstance(value, SequenceValue):
            for item in value:
                yield from self._element_lines(name, item, depth)
            return

        content: _ElementContent = value.accept(self)
        child_lines: list[str] = []
        for child_name, child_value in content.children:
            child_lines.extend(self._element_lines(child_name, child_value, depth + 1))

        if isinstance(value, MappingValue) and not (content.attributes or content.text or child_lines):
            return

        _check_name(name, "element")
        for attr, attr_text in content.attributes:
            _check_name(attr, "attribute")
            _check_text(attr_text, self.options.attribute_prefix + attr)
        if content.text:
            _check_text(content.text, name)

        pad = self.options.indent * depth
        attrs = "".join(f' {attr}={_quote_attribute(text)}' for attr, text in content.attributes)
        text = escape(content.text, _TEXT_ENTITIES) if content.text else ""

        if not child_lines:
            if text:
                yield f"{pad}<{name}{attrs}>{text}</{name}>"
            else:
                yield f"{pad}<{name}{attrs}/>"
            return

        yield f"{pad}<{name}{attrs}>"
        if text:
            yield f"{pad}{self.options.indent}{text}"
        yield from child_lines
        yield f"{pad}</{name}>"

    # Each visit method returns the content of the element holding the node.

    def visit_null(self, node: NullValue) -> _ElementContent:
        return _ElementContent()

    def visit_boolean(self, node: BooleanValue) -> _ElementContent:
        return _ElementContent(text=scalar_to_text(node))

    def visit_number(self, node: NumberValue) -> _ElementContent:
        return _ElementContent(text=scalar_to_text(node))

    def visit_string(self, node: StringValue) -> _ElementContent:
        return _ElementContent(text=node.value or None)

    def visit_mapping(self, node: MappingValue) -> _ElementContent:
        content = _ElementContent()
        for key, value in node.items():
            attribute = self._attribute_name(key)
            if attribute is not None:
                content.attributes.append((attribute, scalar_to_text(value)))
            elif key == self.options.text_key:
                content.text = scalar_to_text(value) or None
            else:
                content.children.append((key, value))
        return content

    def visit_sequence(self, node: SequenceValue) -> _ElementContent:
        # _element_lines expands arrays into siblings before dispatching
        raise RenderingError("An array has no element of its own", rendering_stage="markup")
