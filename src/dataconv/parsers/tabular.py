#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/parsers/tabular.py
"""Delimited text (CSV) to canonical value parser.

The first record is the header. Every following record becomes a mapping
from header to cell, and the document becomes a sequence of those mappings.
Reading is strict: an unbalanced quote or a record with the wrong number of
fields stops parsing with an error naming the line where it happened.

"""

from __future__ import annotations

import csv
import io
import logging
from typing import Any

from dataconv.constants import NO_HEADER_ROW_MESSAGE
from dataconv.exceptions import ParsingError
from dataconv.options.tabular import TabularParserOptions
from dataconv.parsers.base import BaseParser
from dataconv.tree import MappingValue, SequenceValue, StringValue, Value
from dataconv.utils.decorators import debug_timer
from dataconv.utils.scalars import infer_scalar

logger = logging.getLogger(__name__)


def _make_csv_dialect(delimiter: str, quotechar: str) -> type[csv.Dialect]:
    """Create a strict dialect class based on ``csv.excel``.

    Parameters
    ----------
    delimiter : str
        The delimiter character
    quotechar : str
        The quote character

    Returns
    -------
    type[csv.Dialect]
        Dialect that raises ``csv.Error`` on malformed quoting

    """
    attrs: dict[str, Any] = {
        "delimiter": delimiter,
        "quotechar": quotechar,
        "doublequote": True,
        "strict": True,
    }
    return type("StrictDialect", (csv.excel,), attrs)


def read_records(text: str, options: TabularParserOptions) -> tuple[list[str], list[list[str]]]:
    """Split delimited text into a header and data records.

    Parameters
    ----------
    text : str
        Delimited text
    options : TabularParserOptions
        Delimiter, quote and blank-line settings

    Returns
    -------
    tuple
        ``(header, records)``; every record has as many fields as the header

    Raises
    ------
    ParsingError
        If quoting is malformed, a record's field count differs from the
        header's, or there is no header record

    """
    dialect = _make_csv_dialect(options.delimiter, options.quote_char)
    reader = csv.reader(io.StringIO(text, newline=""), dialect=dialect)
    header: list[str] | None = None
    records: list[list[str]] = []

    try:
        for row in reader:
            if not row:
                if options.skip_empty_rows or header is None:
                    continue
                row = [""]
            if header is None:
                header = row
                continue
            if len(row) != len(header):
                raise ParsingError(
                    f"Line {reader.line_num}: expected {len(header)} fields but parsed {len(row)}",
                    parsing_stage="tabular",
                )
            records.append(row)
    except csv.Error as e:
        raise ParsingError(f"Line {reader.line_num}: {e}", parsing_stage="tabular", original_error=e) from e

    if header is None:
        raise ParsingError(NO_HEADER_ROW_MESSAGE, parsing_stage="tabular")

    return header, records


class TabularParser(BaseParser):
    """Parse delimited text into a sequence of mappings.

    Parameters
    ----------
    options : TabularParserOptions or None
        Parser options

    Examples
    --------
        >>> from dataconv.tree import to_python
        >>> to_python(TabularParser().parse("id,name\\n1,John\\n2,Jane"))
        [{'id': 1, 'name': 'John'}, {'id': 2, 'name': 'Jane'}]

    """

    format_name = "tabular"

    def __init__(self, options: TabularParserOptions | None = None):
        """Initialize the tabular parser with options."""
        BaseParser._validate_options_type(options, TabularParserOptions, "tabular")
        options = options or TabularParserOptions()
        super().__init__(options)
        self.options: TabularParserOptions = options

    def parse(self, text: str) -> Value:
        """Parse delimited text.

        Parameters
        ----------
        text : str
            Delimited text with a header record

        Returns
        -------
        Value
            ``SequenceValue`` of ``MappingValue`` rows (empty when only a
            header is present)

        Raises
        ------
        ParsingError
            If the text is empty, has malformed quoting, or a ragged record

        """
        with debug_timer(logger, "Parsing (tabular)"):
            header, records = read_records(text, self.options)
            logger.debug("Read %d column(s) and %d row(s)", len(header), len(records))

            rows = SequenceValue()
            for record in records:
                row = MappingValue()
                for name, cell in zip(header, record):
                    row.set(name, infer_scalar(cell) if self.options.parse_values else StringValue(cell))
                rows.append(row)
            return rows
