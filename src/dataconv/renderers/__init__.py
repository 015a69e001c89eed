#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/renderers/__init__.py
"""Renderers turning canonical values into JSON, markup and tabular text."""

from dataconv.renderers.base import BaseRenderer
from dataconv.renderers.json import JsonRenderer
from dataconv.renderers.markup import MarkupRenderer
from dataconv.renderers.tabular import TabularRenderer

__all__ = [
    "BaseRenderer",
    "JsonRenderer",
    "MarkupRenderer",
    "TabularRenderer",
]
