"""Converter registry mapping format names to parsers and renderers.

Each data format registers one parser, one renderer and their options
classes. Conversions look formats up here by name or alias, so adding a
format means writing a parser and a renderer and registering them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from dataconv.constants import FORMAT_ALIASES
from dataconv.exceptions import FormatError
from dataconv.options import (
    JsonParserOptions,
    JsonRendererOptions,
    MarkupParserOptions,
    MarkupRendererOptions,
    TabularParserOptions,
    TabularRendererOptions,
)
from dataconv.parsers import JsonParser, MarkupParser, TabularParser
from dataconv.renderers import JsonRenderer, MarkupRenderer, TabularRenderer

logger = logging.getLogger(__name__)


def _sanitize_for_log(value: str) -> str:
    """Escape line breaks so user-supplied names cannot forge log lines."""
    return value.replace("\n", "\\n").replace("\r", "\\r")


@dataclass
class FormatMetadata:
    """Everything needed to read and write one data format.

    Parameters
    ----------
    format_name : str
        Canonical format name (e.g. "tabular")
    parser_class : type
        Parser class (subclass of BaseParser)
    renderer_class : type
        Renderer class (subclass of BaseRenderer)
    parser_options_class : type
        Options dataclass accepted by the parser
    renderer_options_class : type
        Options dataclass accepted by the renderer
    aliases : list[str]
        Other names accepted for this format (e.g. ["csv"])
    description : str
        Human-readable description

    """

    format_name: str
    parser_class: type
    renderer_class: type
    parser_options_class: type
    renderer_options_class: type
    aliases: List[str] = field(default_factory=list)
    description: str = ""


class ConverterRegistry:
    """Registry of the data formats dataconv can convert between.

    Attributes
    ----------
    _formats : dict
        Registered formats by canonical name
    _aliases : dict
        Lower-case name or alias to canonical name

    """

    def __init__(self) -> None:
        """Create an empty registry."""
        self._formats: Dict[str, FormatMetadata] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, metadata: FormatMetadata) -> None:
        """Register a format, replacing any previous registration of the same name.

        Parameters
        ----------
        metadata : FormatMetadata
            Format description to register

        """
        if metadata.format_name in self._formats:
            logger.debug(f"Replacing converter for '{metadata.format_name}'")
        else:
            logger.debug(f"Registered converter: {metadata.format_name}")
        self._formats[metadata.format_name] = metadata
        for name in [metadata.format_name, *metadata.aliases]:
            self._aliases[name.lower()] = metadata.format_name

    def unregister(self, format_name: str) -> bool:
        """Unregister a format and its aliases.

        Returns
        -------
        bool
            True if unregistered, False if not found

        """
        if format_name not in self._formats:
            return False
        del self._formats[format_name]
        self._aliases = {alias: name for alias, name in self._aliases.items() if name != format_name}
        logger.debug(f"Unregistered converter: {format_name}")
        return True

    def resolve_format(self, name: str) -> str:
        """Return the canonical name for a format name or alias.

        Matching ignores case and surrounding whitespace.

        Parameters
        ----------
        name : str
            Format name or alias (e.g. "CSV")

        Returns
        -------
        str
            Canonical format name (e.g. "tabular")

        Raises
        ------
        FormatError
            If no registered format has that name

        """
        canonical = self._aliases.get(name.strip().lower())
        if canonical is None:
            logger.debug(f"Unknown format requested: '{_sanitize_for_log(name)}'")
            raise FormatError(format_type=name, supported_formats=self.list_formats())
        return canonical

    def get_format_info(self, name: str) -> FormatMetadata:
        """Return the metadata of a format.

        Raises
        ------
        FormatError
            If the format is not registered

        """
        return self._formats[self.resolve_format(name)]

    def get_parser(self, name: str) -> type:
        """Return the parser class for a format name or alias."""
        return self.get_format_info(name).parser_class

    def get_renderer(self, name: str) -> type:
        """Return the renderer class for a format name or alias."""
        return self.get_format_info(name).renderer_class

    def get_parser_options_class(self, name: str) -> type:
        """Return the parser options class for a format name or alias."""
        return self.get_format_info(name).parser_options_class

    def get_renderer_options_class(self, name: str) -> type:
        """Return the renderer options class for a format name or alias."""
        return self.get_format_info(name).renderer_options_class

    def list_formats(self) -> List[str]:
        """List canonical names of the registered formats in registration order."""
        return list(self._formats)


def _aliases_for(format_name: str) -> List[str]:
    return [alias for alias, name in FORMAT_ALIASES.items() if name == format_name and alias != format_name]


registry = ConverterRegistry()

registry.register(
    FormatMetadata(
        format_name="json",
        parser_class=JsonParser,
        renderer_class=JsonRenderer,
        parser_options_class=JsonParserOptions,
        renderer_options_class=JsonRendererOptions,
        aliases=_aliases_for("json"),
        description="JSON documents",
    )
)
registry.register(
    FormatMetadata(
        format_name="markup",
        parser_class=MarkupParser,
        renderer_class=MarkupRenderer,
        parser_options_class=MarkupParserOptions,
        renderer_options_class=MarkupRendererOptions,
        aliases=_aliases_for("markup"),
        description="XML-style markup documents",
    )
)
registry.register(
    FormatMetadata(
        format_name="tabular",
        parser_class=TabularParser,
        renderer_class=TabularRenderer,
        parser_options_class=TabularParserOptions,
        renderer_options_class=TabularRendererOptions,
        aliases=_aliases_for("tabular"),
        description="Delimited text with a header row (CSV)",
    )
)
