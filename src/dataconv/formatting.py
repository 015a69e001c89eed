#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/formatting.py
"""Pretty-printing helpers for markup and JSON text.

Markup is formatted with the ``defusedxml.minidom`` pretty printer when the
input is well-formed and with a small tag-by-tag indenter otherwise, so
:func:`format_markup` always returns something readable. The JSON helpers
mirror the usual developer tools: pretty-print, unwrap stringified JSON, and
minify.
"""

from __future__ import annotations

import json
import logging
import re
from xml.parsers.expat import ExpatError

import defusedxml.minidom
from defusedxml import DefusedXmlException

from dataconv.constants import DEFAULT_JSON_INDENT, MANUAL_INDENT_STRING
from dataconv.exceptions import ParsingError
from dataconv.parsers.json import load_json

logger = logging.getLogger(__name__)

_INTER_TAG_WHITESPACE = re.compile(r">\s+<")


def format_markup_manual(content: str) -> str:
    """Indent markup one tag or text run per line without parsing it.

    Whitespace between tags is dropped. Every tag goes on its own line,
    indented two spaces per open element; text runs are stripped and
    indented one level less than the current depth. Unbalanced closing tags
    never push the depth below zero, and an unterminated ``<`` ends the
    output.

    Parameters
    ----------
    content : str
        Any text, usually markup

    Returns
    -------
    str
        Indented markup with no leading or trailing whitespace. Formatting
        its own output again gives the same text.

    Examples
    --------
        >>> print(format_markup_manual("<a><b>x</b><c/></a>"))
        <a>
          <b>
          x
          </b>
          <c/>
        </a>

    """
    content = _INTER_TAG_WHITESPACE.sub("><", content)
    lines: list[str] = []
    depth = 0
    i = 0
    length = len(content)

    while i < length:
        if content[i] == "<":
            close = content.find(">", i)
            if close == -1:
                break
            tag = content[i : close + 1]
            if tag.startswith("</"):
                depth = max(0, depth - 1)
                lines.append(MANUAL_INDENT_STRING * depth + tag)
            elif tag.endswith("/>") or tag.startswith("<?"):
                lines.append(MANUAL_INDENT_STRING * depth + tag)
            else:
                lines.append(MANUAL_INDENT_STRING * depth + tag)
                depth += 1
            i = close + 1
        else:
            next_tag = content.find("<", i)
            end = length if next_tag == -1 else next_tag
            text = content[i:end].strip()
            if text:
                lines.append(MANUAL_INDENT_STRING * max(0, depth - 1) + text)
            i = end

    return "\n".join(lines).strip()


def format_markup(content: str) -> str:
    """Pretty-print markup.

    Well-formed documents go through the ``minidom`` pretty printer (leaf
    elements stay on one line, an XML declaration in the input is kept).
    Anything the XML reader rejects is formatted by
    :func:`format_markup_manual` instead.

    Parameters
    ----------
    content : str
        Markup text

    Returns
    -------
    str
        Indented markup

    """
    stripped = content.strip()
    try:
        document = defusedxml.minidom.parseString(_INTER_TAG_WHITESPACE.sub("><", stripped))
    except (ExpatError, DefusedXmlException) as e:
        logger.debug(f"Falling back to manual markup formatting: {e}")
        return format_markup_manual(content)

    pretty = document.toprettyxml(indent=MANUAL_INDENT_STRING)
    document.unlink()

    lines = [line for line in pretty.splitlines() if line.strip()]
    # toprettyxml always writes its own declaration first
    if lines and lines[0].startswith("<?xml"):
        lines.pop(0)
    if stripped.startswith("<?xml"):
        declaration_end = stripped.find("?>")
        lines.insert(0, stripped[: declaration_end + 2])
    return "\n".join(lines)


def format_json(content: str) -> str:
    """Pretty-print JSON with two-space indentation.

    Invalid input is logged and returned unchanged.

    Parameters
    ----------
    content : str
        JSON text

    Returns
    -------
    str
        Indented JSON, or ``content`` itself when it does not parse

    """
    try:
        data = load_json(content)
    except ParsingError as e:
        logger.warning(f"JSON formatting failed: {e.message}")
        return content
    return json.dumps(data, indent=DEFAULT_JSON_INDENT, ensure_ascii=False)


def parse_json(content: str) -> str:
    """Parse JSON and return it pretty-printed.

    A document that is itself a JSON string holding JSON (``"{\\"a\\": 1}"``)
    is decoded a second time.

    Parameters
    ----------
    content : str
        JSON text, possibly stringified

    Returns
    -------
    str
        Indented JSON

    Raises
    ------
    ParsingError
        ``Invalid JSON: <decoder message>`` if either decoding step fails

    """
    try:
        data = load_json(content)
        if isinstance(data, str):
            data = load_json(data)
    except ParsingError as e:
        raise ParsingError(f"Invalid JSON: {e.message}", parsing_stage="json", original_error=e) from e
    return json.dumps(data, indent=DEFAULT_JSON_INDENT, ensure_ascii=False)


def stringify_json(content: str) -> str:
    """Minify JSON onto a single line.

    Raises
    ------
    ParsingError
        ``Invalid JSON: <decoder message>`` if the text does not parse

    """
    try:
        data = load_json(content)
    except ParsingError as e:
        raise ParsingError(f"Invalid JSON: {e.message}", parsing_stage="json", original_error=e) from e
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
