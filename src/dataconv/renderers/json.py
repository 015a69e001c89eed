#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/renderers/json.py
"""Canonical value to JSON text renderer."""

from __future__ import annotations

import json
import logging

from dataconv.exceptions import RenderingError
from dataconv.options.json import JsonRendererOptions
from dataconv.renderers.base import BaseRenderer
from dataconv.tree import Value, to_python
from dataconv.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class JsonRenderer(BaseRenderer):
    """Render a canonical value as JSON text.

    Every canonical value is representable, so this renderer never raises a
    shape error. Integers stay integers and mapping order is preserved unless
    ``sort_keys`` is set.

    Parameters
    ----------
    options : JsonRendererOptions or None, default = None
        JSON rendering options

    Examples
    --------
        >>> from dataconv.tree import from_python
        >>> print(JsonRenderer().render_to_string(from_python({"age": 30})))
        {
          "age": 30
        }

    """

    format_name = "json"

    def __init__(self, options: JsonRendererOptions | None = None):
        """Initialize the JSON renderer with options."""
        BaseRenderer._validate_options_type(options, JsonRendererOptions, "json")
        options = options or JsonRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: JsonRendererOptions = options

    def render_to_string(self, value: Value) -> str:
        """Render a canonical value to JSON text.

        Parameters
        ----------
        value : Value
            Canonical value tree

        Returns
        -------
        str
            JSON document

        Raises
        ------
        RenderingError
            If the value is nested too deeply to serialize

        """
        with debug_timer(logger, "Rendering (json)"):
            try:
                return json.dumps(
                    to_python(value),
                    indent=self.options.indent,
                    ensure_ascii=self.options.ensure_ascii,
                    sort_keys=self.options.sort_keys,
                )
            except RecursionError as e:
                raise RenderingError(
                    "Value is nested too deeply to render as JSON", rendering_stage="json", original_error=e
                ) from e
