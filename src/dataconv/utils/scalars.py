#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/utils/scalars.py
"""Lexical re-typing of text fields.

Markup text and tabular cells are strings on the wire. When value parsing is
enabled they are turned back into numbers and booleans if, and only if, they
are spelled exactly the way JSON spells those values, so that the JSON →
tabular → JSON and JSON → markup → JSON round trips give back the original
types.
"""

from __future__ import annotations

import re

from dataconv.tree.nodes import BooleanValue, NumberValue, StringValue, Value

_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def infer_scalar(text: str) -> Value:
    """Turn a text field into the most specific scalar value.

    Parameters
    ----------
    text : str
        The raw field text (not stripped here)

    Returns
    -------
    Value
        ``NumberValue`` (int) for integer forms, ``NumberValue`` (float) for
        decimal or exponent forms, ``BooleanValue`` for exactly ``true`` or
        ``false``, otherwise ``StringValue`` holding ``text`` unchanged

    Examples
    --------
        >>> infer_scalar("30")
        NumberValue(value=30)
        >>> infer_scalar("2.50")
        NumberValue(value=2.5)
        >>> infer_scalar("True")
        StringValue(value='True')

    """
    if _INTEGER_RE.fullmatch(text):
        try:
            return NumberValue(int(text))
        except ValueError:
            # Longer than the interpreter's int conversion limit
            return StringValue(text)
    if _DECIMAL_RE.fullmatch(text):
        number = float(text)
        # Overflowing exponents stay text rather than becoming inf
        if number not in (float("inf"), float("-inf")):
            return NumberValue(number)
    if text == "true":
        return BooleanValue(True)
    if text == "false":
        return BooleanValue(False)
    return StringValue(text)
