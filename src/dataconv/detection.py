#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/detection.py
"""Guess whether a piece of text is JSON or markup."""

from __future__ import annotations

import logging

from dataconv.constants import DetectedFormat
from dataconv.exceptions import ParsingError
from dataconv.parsers.json import load_json

logger = logging.getLogger(__name__)


def detect_input_type(content: str) -> DetectedFormat:
    """Classify text as ``"json"`` or ``"markup"``.

    Leading and trailing whitespace is ignored. Text starting with ``<`` is
    markup, text starting with ``{`` or ``[`` is JSON, any other text is JSON
    when it decodes as a JSON document (e.g. ``42`` or ``"hi"``) and markup
    otherwise. Empty input is reported as markup.

    Parameters
    ----------
    content : str
        Text to classify

    Returns
    -------
    {"json", "markup"}
        The detected format. This function never raises.

    Examples
    --------
        >>> detect_input_type('  {"a": 1}')
        'json'
        >>> detect_input_type("<a/>")
        'markup'
        >>> detect_input_type("")
        'markup'

    """
    trimmed = content.strip()

    if trimmed.startswith("<"):
        return "markup"
    if trimmed.startswith(("{", "[")):
        return "json"

    try:
        load_json(trimmed)
    except ParsingError:
        logger.debug("Input is not JSON, treating it as markup")
        return "markup"
    return "json"
