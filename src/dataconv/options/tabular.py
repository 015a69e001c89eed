#  Copyright (c) 2025 Tom Villani, Ph.D.

# dataconv/options/tabular.py
"""Configuration options for tabular (CSV) parsing and rendering.

Only the header row plus delimiter/quote settings are configurable; no
dialect sniffing is performed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dataconv.constants import (
    DEFAULT_TABULAR_DELIMITER,
    DEFAULT_TABULAR_LINE_TERMINATOR,
    DEFAULT_TABULAR_PARSE_VALUES,
    DEFAULT_TABULAR_QUOTE_CHAR,
    DEFAULT_TABULAR_SKIP_EMPTY_ROWS,
)
from dataconv.options.base import BaseParserOptions, BaseRendererOptions


def _validate_single_char(name: str, value: str) -> None:
    if len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")


@dataclass(frozen=True)
class TabularParserOptions(BaseParserOptions):
    r"""Configuration options for reading delimited text.

    Parameters
    ----------
    delimiter : str, default ","
        Field delimiter (e.g., ',', '\\t', ';', '|').
    quote_char : str, default '"'
        Quote character. Doubled quotes inside a quoted field are literal.
    parse_values : bool, default True
        Re-type cells that look like numbers or ``true``/``false``.
    skip_empty_rows : bool, default True
        Ignore blank lines between records.

    """

    delimiter: str = field(
        default=DEFAULT_TABULAR_DELIMITER,
        metadata={"help": "Field delimiter (e.g., ',', '\\t', ';', '|')"},
    )
    quote_char: str = field(
        default=DEFAULT_TABULAR_QUOTE_CHAR,
        metadata={"help": "Quote character"},
    )
    parse_values: bool = field(
        default=DEFAULT_TABULAR_PARSE_VALUES,
        metadata={"help": "Convert numeric and true/false cells to typed JSON values"},
    )
    skip_empty_rows: bool = field(
        default=DEFAULT_TABULAR_SKIP_EMPTY_ROWS,
        metadata={"help": "Skip blank lines"},
    )

    def __post_init__(self) -> None:
        """Validate delimiter settings.

        Raises
        ------
        ValueError
            If delimiter or quote_char is not a single character, or they are equal

        """
        super().__post_init__()
        _validate_single_char("delimiter", self.delimiter)
        _validate_single_char("quote_char", self.quote_char)
        if self.delimiter == self.quote_char:
            raise ValueError("delimiter and quote_char must differ")


@dataclass(frozen=True)
class TabularRendererOptions(BaseRendererOptions):
    r"""Configuration options for writing delimited text.

    Parameters
    ----------
    delimiter : str, default ","
        Field delimiter.
    quote_char : str, default '"'
        Quote character used for fields containing the delimiter, the quote
        character or a line break.
    line_terminator : str, default "\\n"
        Record separator. No separator is written after the last record.

    """

    delimiter: str = field(
        default=DEFAULT_TABULAR_DELIMITER,
        metadata={"help": "Field delimiter"},
    )
    quote_char: str = field(
        default=DEFAULT_TABULAR_QUOTE_CHAR,
        metadata={"help": "Quote character"},
    )
    line_terminator: str = field(
        default=DEFAULT_TABULAR_LINE_TERMINATOR,
        metadata={"help": "Record separator ('\\n' or '\\r\\n')"},
    )

    def __post_init__(self) -> None:
        """Validate delimiter settings.

        Raises
        ------
        ValueError
            If delimiter or quote_char is invalid, or line_terminator is not a line break

        """
        super().__post_init__()
        _validate_single_char("delimiter", self.delimiter)
        _validate_single_char("quote_char", self.quote_char)
        if self.delimiter == self.quote_char:
            raise ValueError("delimiter and quote_char must differ")
        if self.line_terminator not in ("\n", "\r\n"):
            raise ValueError(f"line_terminator must be '\\n' or '\\r\\n', got {self.line_terminator!r}")
