#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/tree/nodes.py
"""Canonical value nodes.

Every conversion passes through this small tree. A parser turns source text
into a :class:`Value`, a renderer turns a :class:`Value` into target text, so a
new format only needs one of each.

Node Hierarchy
--------------
All nodes inherit from :class:`Value` and support the visitor pattern:

    - Scalars: NullValue, BooleanValue, NumberValue, StringValue
    - Containers: MappingValue (ordered, string keys), SequenceValue

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterator, Union


class Value(ABC):
    """Base class for all canonical value nodes."""

    kind: str = "value"

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result of the matching visit_* method

        """
        raise NotImplementedError


@dataclass
class NullValue(Value):
    """The JSON ``null`` value."""

    kind = "null"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_null(self)


@dataclass
class BooleanValue(Value):
    """A boolean value.

    Parameters
    ----------
    value : bool
        The boolean

    """

    value: bool
    kind = "boolean"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_boolean(self)


@dataclass
class NumberValue(Value):
    """An integer or floating point number.

    Integers stay ``int`` so that ``30`` renders as ``30`` and not ``30.0``.

    Parameters
    ----------
    value : int or float
        The number

    """

    value: Union[int, float]
    kind = "number"

    def __post_init__(self) -> None:
        # bool is an int subclass; booleans have their own node
        if isinstance(self.value, bool):
            raise TypeError("NumberValue cannot hold a bool, use BooleanValue")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_number(self)


@dataclass
class StringValue(Value):
    """A string value.

    Parameters
    ----------
    value : str
        The text

    """

    value: str
    kind = "string"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_string(self)


@dataclass
class MappingValue(Value):
    """An ordered mapping from string keys to values.

    Key order is insertion order and is preserved through every conversion.
    Setting an existing key replaces its value in place (last write wins).

    Parameters
    ----------
    entries : dict[str, Value], default = empty dict
        The key/value pairs

    """

    entries: dict[str, Value] = field(default_factory=dict)
    kind = "mapping"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_mapping(self)

    def set(self, key: str, value: Value) -> None:
        """Insert or replace ``key``."""
        self.entries[key] = value

    def get(self, key: str) -> Value | None:
        """Return the value for ``key`` or None."""
        return self.entries.get(key)

    def keys(self) -> list[str]:
        """Return the keys in insertion order."""
        return list(self.entries)

    def items(self) -> Iterator[tuple[str, Value]]:
        """Iterate over ``(key, value)`` pairs in insertion order."""
        return iter(self.entries.items())

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class SequenceValue(Value):
    """An ordered sequence of values.

    Parameters
    ----------
    items : list[Value], default = empty list
        The elements

    """

    items: list[Value] = field(default_factory=list)
    kind = "sequence"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_sequence(self)

    def append(self, value: Value) -> None:
        """Append an element."""
        self.items.append(value)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
