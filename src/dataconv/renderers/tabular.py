#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/renderers/tabular.py
"""Canonical value to tabular (CSV) renderer.

Only two shapes have a table form: a mapping (one row) and a non-empty
array of mappings (one row each, header taken from the first mapping).
Everything else raises :class:`~dataconv.exceptions.ShapeError`.

"""

from __future__ import annotations

import csv
import io
import logging

from dataconv.constants import EMPTY_COLLECTION_MESSAGE, INVALID_TABLE_SHAPE_MESSAGE
from dataconv.exceptions import RenderingError, ShapeError
from dataconv.options.tabular import TabularRendererOptions
from dataconv.renderers.base import BaseRenderer
from dataconv.tree import MappingValue, SequenceValue, Value, scalar_to_text
from dataconv.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

_QUOTING_TERMINATOR = "\r\n"


def table_rows(value: Value) -> list[MappingValue]:
    """Return the mappings that make up the rows of a table.

    Parameters
    ----------
    value : Value
        Canonical value to tabulate

    Returns
    -------
    list of MappingValue
        One mapping per row

    Raises
    ------
    ShapeError
        If value is an empty array, or neither a mapping nor an array of mappings

    """
    if isinstance(value, MappingValue):
        return [value]
    if isinstance(value, SequenceValue):
        if len(value) == 0:
            raise ShapeError(EMPTY_COLLECTION_MESSAGE, rendering_stage="tabular", value_kind=value.kind)
        rows = list(value)
        for row in rows:
            if not isinstance(row, MappingValue):
                raise ShapeError(INVALID_TABLE_SHAPE_MESSAGE, rendering_stage="tabular", value_kind=row.kind)
        return rows
    raise ShapeError(INVALID_TABLE_SHAPE_MESSAGE, rendering_stage="tabular", value_kind=value.kind)


class TabularRenderer(BaseRenderer):
    """Render a canonical value as delimited text.

    Parameters
    ----------
    options : TabularRendererOptions or None, default = None
        Tabular rendering options

    Examples
    --------
        >>> from dataconv.tree import from_python
        >>> TabularRenderer().render_to_string(from_python([{"a": 1, "b": None}, {"a": "x,y"}]))
        'a,b\\n1,\\n"x,y",'

    """

    format_name = "tabular"

    def __init__(self, options: TabularRendererOptions | None = None):
        """Initialize the tabular renderer with options."""
        BaseRenderer._validate_options_type(options, TabularRendererOptions, "tabular")
        options = options or TabularRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: TabularRendererOptions = options

    def render_to_string(self, value: Value) -> str:
        """Render a canonical value to delimited text.

        Parameters
        ----------
        value : Value
            A mapping or a non-empty array of mappings

        Returns
        -------
        str
            Header line followed by one line per row, without a trailing
            line terminator

        Raises
        ------
        ShapeError
            If the value has no table form
        RenderingError
            If a nested cell value is too deep to serialize

        """
        with debug_timer(logger, "Rendering (tabular)"):
            rows = table_rows(value)
            header = list(rows[0].keys())
            if not header:
                logger.debug("First row has no keys; writing an empty header line")
                return ""

            try:
                records = [header] + [[self._cell(row.get(name)) for name in header] for row in rows]
            except RecursionError as e:
                raise RenderingError(
                    "Cell value is nested too deeply to render", rendering_stage="tabular", original_error=e
                ) from e

            extra = {key for row in rows[1:] for key in row.keys()} - set(header)
            if extra:
                logger.debug("Ignoring keys missing from the header row: %s", sorted(extra))

            return self.options.line_terminator.join(self._format_record(record) for record in records)

    def _format_record(self, record: list[str]) -> str:
        """Return one record as delimited text without its line terminator.

        The writer's terminator is always ``\\r\\n`` so that a field holding
        either line break character is quoted, whatever separator is used
        between records.
        """
        buffer = io.StringIO()
        writer = csv.writer(
            buffer,
            delimiter=self.options.delimiter,
            quotechar=self.options.quote_char,
            lineterminator=_QUOTING_TERMINATOR,
            quoting=csv.QUOTE_MINIMAL,
        )
        writer.writerow(record)
        return buffer.getvalue()[: -len(_QUOTING_TERMINATOR)]

    @staticmethod
    def _cell(value: Value | None) -> str:
        if value is None:
            return ""
        return scalar_to_text(value)
