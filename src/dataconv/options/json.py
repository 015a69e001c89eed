#  Copyright (c) 2025 Tom Villani, Ph.D.

# dataconv/options/json.py
"""Configuration options for JSON parsing and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from dataconv.constants import (
    DEFAULT_JSON_ENSURE_ASCII,
    DEFAULT_JSON_INDENT,
    DEFAULT_JSON_SORT_KEYS,
    DEFAULT_JSON_UNWRAP_STRING,
)
from dataconv.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class JsonParserOptions(BaseParserOptions):
    """Configuration options for reading JSON text.

    Parameters
    ----------
    unwrap_string : bool, default False
        When the document is a single JSON string that itself contains JSON
        (a "stringified" payload), parse the inner document instead.

    """

    unwrap_string: bool = field(
        default=DEFAULT_JSON_UNWRAP_STRING,
        metadata={"help": "Parse a JSON string's content again when it holds stringified JSON"},
    )


@dataclass(frozen=True)
class JsonRendererOptions(BaseRendererOptions):
    """Configuration options for writing JSON text.

    Parameters
    ----------
    indent : int or None, default 2
        Spaces per indentation level. None writes compact single-line JSON.
    ensure_ascii : bool, default False
        Escape all non-ASCII characters.
    sort_keys : bool, default False
        Sort mapping keys instead of keeping insertion order.

    """

    indent: int | None = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "Spaces per indentation level (None for compact output)", "type": int},
    )
    ensure_ascii: bool = field(
        default=DEFAULT_JSON_ENSURE_ASCII,
        metadata={"help": "Escape non-ASCII characters"},
    )
    sort_keys: bool = field(
        default=DEFAULT_JSON_SORT_KEYS,
        metadata={"help": "Sort object keys instead of preserving their order"},
    )

    def __post_init__(self) -> None:
        """Validate the indentation width.

        Raises
        ------
        ValueError
            If indent is negative

        """
        super().__post_init__()
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
