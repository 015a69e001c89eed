#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/utils/__init__.py
"""Utility modules for the dataconv package."""

from dataconv.utils.decorators import debug_timer, returns_conversion_result
from dataconv.utils.scalars import infer_scalar

__all__ = [
    "debug_timer",
    "infer_scalar",
    "returns_conversion_result",
]
