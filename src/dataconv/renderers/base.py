#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/renderers/base.py
"""Base classes for format renderers.

This module defines the abstract base class that every renderer inherits
from. A renderer turns a canonical :class:`~dataconv.tree.Value` into text in
its target format.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from dataconv.exceptions import InvalidOptionsError
from dataconv.options.base import BaseRendererOptions
from dataconv.tree import Value


class BaseRenderer(ABC):
    """Abstract base class for all format renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from dataconv.renderers.base import BaseRenderer
        >>> from dataconv.tree import to_python
        >>>
        >>> class ReprRenderer(BaseRenderer):
        ...     format_name = "repr"
        ...     def render_to_string(self, value):
        ...         return repr(to_python(value))

    """

    format_name: str = ""

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, value: Value) -> str:
        """Render a canonical value to text.

        Parameters
        ----------
        value : Value
            Canonical value tree

        Returns
        -------
        str
            Complete document in the target format

        Raises
        ------
        ShapeError
            If the value's shape cannot be represented in the target format

        """
        raise NotImplementedError

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
