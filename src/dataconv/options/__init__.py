#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for every parser and renderer."""

from dataconv.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from dataconv.options.json import JsonParserOptions, JsonRendererOptions
from dataconv.options.markup import MarkupParserOptions, MarkupRendererOptions
from dataconv.options.tabular import TabularParserOptions, TabularRendererOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "JsonParserOptions",
    "JsonRendererOptions",
    "MarkupParserOptions",
    "MarkupRendererOptions",
    "TabularParserOptions",
    "TabularRendererOptions",
]
