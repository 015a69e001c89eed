#  Copyright (c) 2025 Tom Villani, Ph.D.

# dataconv/options/markup.py
"""Configuration options for markup (XML) parsing and rendering.

The defaults make the two directions agree with each other: text content
read from markup lands under ``_text`` and a ``_text`` key is written back as
element text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dataconv.constants import (
    DEFAULT_MARKUP_ATTRIBUTE_PREFIX,
    DEFAULT_MARKUP_INDENT,
    DEFAULT_MARKUP_ITEM_NAME,
    DEFAULT_MARKUP_PARSE_VALUES,
    DEFAULT_MARKUP_ROOT_NAME,
    DEFAULT_MARKUP_TEXT_KEY,
    DEFAULT_MARKUP_TRIM_VALUES,
    DEFAULT_MARKUP_XML_DECLARATION,
)
from dataconv.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class MarkupParserOptions(BaseParserOptions):
    """Configuration options for reading markup into a canonical value.

    Parameters
    ----------
    text_key : str, default "_text"
        Key holding an element's text when the element also has attributes
        or child elements.
    parse_values : bool, default True
        Re-type text and attribute values that look like numbers or
        ``true``/``false``.
    trim_values : bool, default True
        Strip surrounding whitespace from text and attribute values.

    """

    text_key: str = field(
        default=DEFAULT_MARKUP_TEXT_KEY,
        metadata={"help": "Key for element text when the element also has attributes or children"},
    )
    parse_values: bool = field(
        default=DEFAULT_MARKUP_PARSE_VALUES,
        metadata={"help": "Convert numeric and true/false values to typed JSON values"},
    )
    trim_values: bool = field(
        default=DEFAULT_MARKUP_TRIM_VALUES,
        metadata={"help": "Strip whitespace around text and attribute values"},
    )

    def __post_init__(self) -> None:
        """Validate the text key.

        Raises
        ------
        ValueError
            If text_key is empty

        """
        super().__post_init__()
        if not self.text_key:
            raise ValueError("text_key must not be empty")


@dataclass(frozen=True)
class MarkupRendererOptions(BaseRendererOptions):
    """Configuration options for writing a canonical value as markup.

    Parameters
    ----------
    root_name : str, default "root"
        Name of the wrapper element added when the value is not a mapping
        with exactly one key.
    item_name : str, default "item"
        Name of the elements holding the entries of a top-level array, which
        are written inside the wrapper element.
    indent : str, default "  "
        Indentation unit for nested elements.
    attribute_prefix : str, default "@_"
        Mapping keys starting with this prefix become attributes of the
        enclosing element. An empty prefix disables attribute output.
    text_key : str, default "_text"
        Mapping key whose value becomes the enclosing element's text.
    xml_declaration : bool, default False
        Start the output with an XML declaration.

    """

    root_name: str = field(
        default=DEFAULT_MARKUP_ROOT_NAME,
        metadata={"help": "Name of the wrapper element for unwrapped values"},
    )
    item_name: str = field(
        default=DEFAULT_MARKUP_ITEM_NAME,
        metadata={"help": "Element name for the entries of a top-level array"},
    )
    indent: str = field(
        default=DEFAULT_MARKUP_INDENT,
        metadata={"help": "Indentation unit for nested elements"},
    )
    attribute_prefix: str = field(
        default=DEFAULT_MARKUP_ATTRIBUTE_PREFIX,
        metadata={"help": "Key prefix marking attributes (empty disables attributes)"},
    )
    text_key: str = field(
        default=DEFAULT_MARKUP_TEXT_KEY,
        metadata={"help": "Key whose value becomes element text"},
    )
    xml_declaration: bool = field(
        default=DEFAULT_MARKUP_XML_DECLARATION,
        metadata={"help": "Emit an XML declaration before the document element"},
    )

    def __post_init__(self) -> None:
        """Validate element naming and indentation.

        Raises
        ------
        ValueError
            If root_name or item_name is empty, or indent contains non-whitespace characters

        """
        super().__post_init__()
        if not self.root_name:
            raise ValueError("root_name must not be empty")
        if not self.item_name:
            raise ValueError("item_name must not be empty")
        if self.indent.strip():
            raise ValueError(f"indent must contain only whitespace, got {self.indent!r}")
