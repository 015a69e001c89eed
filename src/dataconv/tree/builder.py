#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/tree/builder.py
"""Conversion between plain Python objects and canonical value trees."""

from __future__ import annotations

import json
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
from dataconv.tree.visitors import ValueVisitor


def from_python(obj: Any) -> Value:
    """Build a canonical value from a JSON-like Python object.

    Parameters
    ----------
    obj : Any
        ``None``, ``bool``, ``int``, ``float``, ``str``, a mapping with string
        keys, or a list/tuple of such objects

    Returns
    -------
    Value
        The equivalent canonical tree

    Raises
    ------
    TypeError
        If ``obj`` (or something nested in it) has no canonical equivalent

    """
    if obj is None:
        return NullValue()
    if isinstance(obj, bool):
        return BooleanValue(obj)
    if isinstance(obj, (int, float)):
        return NumberValue(obj)
    if isinstance(obj, str):
        return StringValue(obj)
    if isinstance(obj, dict):
        mapping = MappingValue()
        for key, item in obj.items():
            mapping.set(str(key), from_python(item))
        return mapping
    if isinstance(obj, (list, tuple)):
        return SequenceValue([from_python(item) for item in obj])
    raise TypeError(f"Cannot convert {type(obj).__name__} to a canonical value")


class _PythonBuilder(ValueVisitor):
    """Visitor producing plain Python objects."""

    def visit_null(self, node: NullValue) -> Any:
        return None

    def visit_boolean(self, node: BooleanValue) -> Any:
        return node.value

    def visit_number(self, node: NumberValue) -> Any:
        return node.value

    def visit_string(self, node: StringValue) -> Any:
        return node.value

    def visit_mapping(self, node: MappingValue) -> Any:
        return {key: value.accept(self) for key, value in node.items()}

    def visit_sequence(self, node: SequenceValue) -> Any:
        return [item.accept(self) for item in node]


def to_python(value: Value) -> Any:
    """Convert a canonical value back into plain Python objects.

    Mappings become ``dict`` (insertion ordered) and sequences become ``list``.
    """
    return value.accept(_PythonBuilder())


def scalar_to_text(value: Value) -> str:
    """Return the literal text of a scalar as it appears in JSON.

    ``null`` becomes the empty string, booleans become ``true``/``false`` and
    numbers use their JSON spelling (``30``, ``2.5``, ``1e+21``). Containers
    are rendered as compact JSON.
    """
    if isinstance(value, NullValue):
        return ""
    if isinstance(value, StringValue):
        return value.value
    if isinstance(value, BooleanValue):
        return "true" if value.value else "false"
    if isinstance(value, NumberValue):
        return json.dumps(value.value)
    return json.dumps(to_python(value), ensure_ascii=False, separators=(",", ":"))
