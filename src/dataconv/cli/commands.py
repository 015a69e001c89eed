#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/dataconv/cli/commands.py
"""Subcommand handlers for the dataconv CLI.

Each handler receives the parsed arguments and the loaded configuration and
returns a process exit code. Library failures arrive as failed
:class:`~dataconv.result.ConversionResult` envelopes and are reported on
stderr.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from dataconv.api import convert
from dataconv.cli.builder import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from dataconv.cli.config import parser_options_from_config, renderer_options_from_config
from dataconv.cli.output import print_error, print_output
from dataconv.constants import EMPTY_COLLECTION_MESSAGE, INVALID_TABLE_SHAPE_MESSAGE
from dataconv.converter_registry import registry
from dataconv.detection import detect_input_type
from dataconv.exceptions import ParsingError
from dataconv.formatting import format_json, format_markup, format_markup_manual

logger = logging.getLogger(__name__)


def read_input(path: str) -> str:
    """Read the whole input as text; ``-`` reads standard input.

    Raises
    ------
    OSError
        If the file cannot be read

    """
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def write_output(text: str, args: argparse.Namespace, syntax: Optional[str] = None) -> None:
    """Write command output to ``--out`` or to stdout."""
    out_path = getattr(args, "out", None)
    if out_path:
        Path(out_path).write_text(text + "\n", encoding="utf-8")
        logger.info(f"Wrote {out_path}")
    else:
        print_output(text, args, syntax=syntax)


def _exit_code_for_failure(error: str, target_format: str) -> int:
    """Pick an exit code for a failed conversion.

    Shape problems are reported by the renderer; everything else means the
    input did not parse.
    """
    if target_format == "tabular" and error in (EMPTY_COLLECTION_MESSAGE, INVALID_TABLE_SHAPE_MESSAGE):
        return EXIT_RENDERING_ERROR
    return EXIT_PARSING_ERROR


def run_convert(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Handle ``dataconv convert``."""
    try:
        text = read_input(args.input)
    except OSError as e:
        print_error(f"Cannot read {args.input}: {e}", args)
        return EXIT_FILE_ERROR

    source_format = args.source_format
    if source_format == "auto":
        source_format = detect_input_type(text)
        logger.info(f"Detected input format: {source_format}")

    source_key = registry.resolve_format(source_format)
    target_key = registry.resolve_format(args.target_format)
    try:
        parser_options = parser_options_from_config(config, source_key)
        renderer_options = renderer_options_from_config(config, target_key)
    except argparse.ArgumentTypeError as e:
        print_error(str(e), args)
        return EXIT_VALIDATION_ERROR

    result = convert(
        text,
        source_key,
        target_key,
        parser_options=parser_options,
        renderer_options=renderer_options,
    )
    if not result.success:
        print_error(result.error or "Conversion failed", args)
        return _exit_code_for_failure(result.error or "", target_key)

    try:
        write_output(result.unwrap(), args, syntax=target_key)
    except OSError as e:
        print_error(f"Cannot write {args.out}: {e}", args)
        return EXIT_FILE_ERROR
    return EXIT_SUCCESS


def run_format(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Handle ``dataconv format``: pretty-print JSON or markup."""
    try:
        text = read_input(args.input)
    except OSError as e:
        print_error(f"Cannot read {args.input}: {e}", args)
        return EXIT_FILE_ERROR

    detected = detect_input_type(text)
    if detected == "json":
        formatted = format_json(text)
    elif args.manual:
        formatted = format_markup_manual(text)
    else:
        formatted = format_markup(text)

    try:
        write_output(formatted, args, syntax=detected)
    except OSError as e:
        print_error(f"Cannot write {args.out}: {e}", args)
        return EXIT_FILE_ERROR
    return EXIT_SUCCESS


def run_detect(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Handle ``dataconv detect``."""
    try:
        text = read_input(args.input)
    except OSError as e:
        print_error(f"Cannot read {args.input}: {e}", args)
        return EXIT_FILE_ERROR

    print(detect_input_type(text))
    return EXIT_SUCCESS


def run_validate(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Handle ``dataconv validate``.

    Prints ``valid`` and exits 0, or prints the parser's message and exits
    with the validation error code.
    """
    try:
        text = read_input(args.input)
    except OSError as e:
        print_error(f"Cannot read {args.input}: {e}", args)
        return EXIT_FILE_ERROR

    format_name = registry.resolve_format(args.format)
    try:
        parser_options = parser_options_from_config(config, format_name)
    except argparse.ArgumentTypeError as e:
        print_error(str(e), args)
        return EXIT_VALIDATION_ERROR

    parser = registry.get_parser(format_name)(parser_options)
    try:
        value = parser.parse(text)
    except ParsingError as e:
        print_error(f"Invalid {format_name}: {e.message}", args)
        return EXIT_VALIDATION_ERROR

    if format_name == "tabular" and len(value) == 0:
        print_error("Invalid tabular: no data rows", args)
        return EXIT_VALIDATION_ERROR

    print("valid")
    return EXIT_SUCCESS


COMMANDS = {
    "convert": run_convert,
    "format": run_format,
    "detect": run_detect,
    "validate": run_validate,
}


def dispatch_command(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Run the handler for ``args.command``."""
    handler = COMMANDS.get(args.command)
    if handler is None:
        print_error(f"Unknown command: {args.command}", args)
        return EXIT_ERROR
    return handler(args, config)
