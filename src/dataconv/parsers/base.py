#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/parsers/base.py
"""Base classes for format parsers.

This module defines the abstract base class that every parser inherits from.
A parser turns source text into a canonical :class:`~dataconv.tree.Value`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from dataconv.exceptions import InvalidOptionsError
from dataconv.options.base import BaseParserOptions
from dataconv.tree import Value


class BaseParser(ABC):
    """Abstract base class for all format parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> from dataconv.parsers.base import BaseParser
        >>> from dataconv.tree import StringValue
        >>>
        >>> class UpperParser(BaseParser):
        ...     format_name = "upper"
        ...     def parse(self, text):
        ...         return StringValue(text.upper())

    """

    format_name: str = ""

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, text: str) -> Value:
        """Parse source text into a canonical value.

        Parameters
        ----------
        text : str
            The complete source document

        Returns
        -------
        Value
            Canonical value tree for the document

        Raises
        ------
        ParsingError
            If the text is not valid in this format (blank text included)

        """
        raise NotImplementedError
