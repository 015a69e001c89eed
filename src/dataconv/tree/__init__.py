#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/tree/__init__.py
"""Canonical value tree shared by all parsers and renderers."""

from dataconv.tree.builder import from_python, scalar_to_text, to_python
from dataconv.tree.nodes import (
    BooleanValue,
    MappingValue,
    NullValue,
    NumberValue,
    SequenceValue,
    StringValue,
    Value,
)
from dataconv.tree.visitors import ValueVisitor

__all__ = [
    "Value",
    "NullValue",
    "BooleanValue",
    "NumberValue",
    "StringValue",
    "MappingValue",
    "SequenceValue",
    "ValueVisitor",
    "from_python",
    "to_python",
    "scalar_to_text",
]
