#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/parsers/__init__.py
"""Parsers turning JSON, markup and tabular text into canonical values."""

from dataconv.parsers.base import BaseParser
from dataconv.parsers.json import JsonParser
from dataconv.parsers.markup import MarkupParser
from dataconv.parsers.tabular import TabularParser

__all__ = [
    "BaseParser",
    "JsonParser",
    "MarkupParser",
    "TabularParser",
]
