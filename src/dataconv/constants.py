#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for dataconv.

This module centralizes the format names, default option values and other
fixed strings used across the package.

Constants are organized by category:
1. Type Definitions - Literal types for format names
2. Format Names and Aliases
3. Format-Specific Constants - JSON, markup and tabular defaults
4. Shared Messages - Error strings that callers may match on
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

DataFormat = Literal["json", "markup", "tabular"]
DetectedFormat = Literal["json", "markup"]

# =============================================================================
# Format Names and Aliases
# =============================================================================

SUPPORTED_FORMATS: tuple[DataFormat, ...] = ("json", "markup", "tabular")

# Alternative names accepted wherever a format name is expected
FORMAT_ALIASES: dict[str, DataFormat] = {
    "json": "json",
    "markup": "markup",
    "xml": "markup",
    "tabular": "tabular",
    "csv": "tabular",
}

# =============================================================================
# Format-Specific Constants - JSON
# =============================================================================

DEFAULT_JSON_INDENT = 2
DEFAULT_JSON_ENSURE_ASCII = False
DEFAULT_JSON_SORT_KEYS = False
DEFAULT_JSON_UNWRAP_STRING = False

# =============================================================================
# Format-Specific Constants - Markup
# =============================================================================

DEFAULT_MARKUP_ROOT_NAME = "root"
DEFAULT_MARKUP_ITEM_NAME = "item"
DEFAULT_MARKUP_INDENT = "  "
DEFAULT_MARKUP_ATTRIBUTE_PREFIX = "@_"
DEFAULT_MARKUP_TEXT_KEY = "_text"
DEFAULT_MARKUP_PARSE_VALUES = True
DEFAULT_MARKUP_TRIM_VALUES = True
DEFAULT_MARKUP_XML_DECLARATION = False
MARKUP_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Manual formatter indentation unit
MANUAL_INDENT_STRING = "  "

# =============================================================================
# Format-Specific Constants - Tabular
# =============================================================================

DEFAULT_TABULAR_DELIMITER = ","
DEFAULT_TABULAR_QUOTE_CHAR = '"'
DEFAULT_TABULAR_LINE_TERMINATOR = "\n"
DEFAULT_TABULAR_PARSE_VALUES = True
DEFAULT_TABULAR_SKIP_EMPTY_ROWS = True

# =============================================================================
# Shared Messages
# =============================================================================

EMPTY_COLLECTION_MESSAGE = "Empty collection cannot be converted to tabular form"
INVALID_TABLE_SHAPE_MESSAGE = "Value must be an object or an array of objects for tabular conversion"
NO_HEADER_ROW_MESSAGE = "No header row found in tabular input"
