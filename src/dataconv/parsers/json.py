#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/parsers/json.py
"""JSON text to canonical value parser."""

from __future__ import annotations

import json
import logging
from typing import Any

from dataconv.exceptions import ParsingError
from dataconv.options.json import JsonParserOptions
from dataconv.parsers.base import BaseParser
from dataconv.tree import Value, from_python
from dataconv.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    """Refuse the non-standard ``NaN`` and ``Infinity`` literals Python accepts by default."""
    raise ValueError(f"Invalid JSON literal: {name}")


def load_json(text: str) -> Any:
    """Decode strict JSON text into Python objects.

    Parameters
    ----------
    text : str
        JSON document

    Returns
    -------
    Any
        Decoded objects (dict, list, str, int, float, bool or None)

    Raises
    ------
    ParsingError
        With the decoder's own message, e.g.
        ``Expecting value: line 1 column 1 (char 0)``

    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise ParsingError(str(e), parsing_stage="json", original_error=e) from e
    except RecursionError as e:
        raise ParsingError("JSON document is nested too deeply", parsing_stage="json", original_error=e) from e


class JsonParser(BaseParser):
    """Parse JSON text into a canonical value.

    Object key order is kept; a repeated key keeps its last value.

    Parameters
    ----------
    options : JsonParserOptions or None
        Parser options

    Examples
    --------
        >>> JsonParser().parse('{"a": [1, true]}')
        MappingValue(entries={'a': SequenceValue(items=[NumberValue(value=1), BooleanValue(value=True)])})

    """

    format_name = "json"

    def __init__(self, options: JsonParserOptions | None = None):
        """Initialize the JSON parser with options."""
        BaseParser._validate_options_type(options, JsonParserOptions, "json")
        options = options or JsonParserOptions()
        super().__init__(options)
        self.options: JsonParserOptions = options

    def parse(self, text: str) -> Value:
        """Parse JSON text.

        Parameters
        ----------
        text : str
            JSON document

        Returns
        -------
        Value
            Canonical value tree

        Raises
        ------
        ParsingError
            If the text is not strict JSON

        """
        with debug_timer(logger, "Parsing (json)"):
            data = load_json(text)
            if self.options.unwrap_string and isinstance(data, str):
                logger.debug("Unwrapping stringified JSON document")
                data = load_json(data)
            try:
                return from_python(data)
            except RecursionError as e:
                raise ParsingError(
                    "JSON document is nested too deeply", parsing_stage="json", original_error=e
                ) from e
