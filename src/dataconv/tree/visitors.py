#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/tree/visitors.py
"""Visitor base class for canonical value trees.

Renderers subclass :class:`ValueVisitor`. Because every visit method is
abstract, a renderer that forgets a node kind cannot be instantiated, which
keeps the handling of the six value kinds exhaustive at every format
boundary.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from dataconv.tree.nodes import (
    BooleanValue,
    MappingValue,
    NullValue,
    NumberValue,
    SequenceValue,
    StringValue,
    Value,
)


class ValueVisitor(ABC):
    """Abstract base class for canonical value visitors.

    Examples
    --------
    Counting the leaves of a tree:

        >>> class LeafCounter(ValueVisitor):
        ...     def visit_null(self, node): return 1
        ...     def visit_boolean(self, node): return 1
        ...     def visit_number(self, node): return 1
        ...     def visit_string(self, node): return 1
        ...     def visit_mapping(self, node):
        ...         return sum(v.accept(self) for _, v in node.items())
        ...     def visit_sequence(self, node):
        ...         return sum(v.accept(self) for v in node)
        >>> from_python({"a": [1, 2], "b": None}).accept(LeafCounter())
        3

    """

    def visit(self, node: Value) -> Any:
        """Dispatch ``node`` to its visit method."""
        return node.accept(self)

    @abstractmethod
    def visit_null(self, node: NullValue) -> Any:
        """Visit a NullValue node."""

    @abstractmethod
    def visit_boolean(self, node: BooleanValue) -> Any:
        """Visit a BooleanValue node."""

    @abstractmethod
    def visit_number(self, node: NumberValue) -> Any:
        """Visit a NumberValue node."""

    @abstractmethod
    def visit_string(self, node: StringValue) -> Any:
        """Visit a StringValue node."""

    @abstractmethod
    def visit_mapping(self, node: MappingValue) -> Any:
        """Visit a MappingValue node."""

    @abstractmethod
    def visit_sequence(self, node: SequenceValue) -> Any:
        """Visit a SequenceValue node."""
