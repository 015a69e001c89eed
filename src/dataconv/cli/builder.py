#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/dataconv/cli/builder.py
"""Argument parser construction and exit codes for the dataconv CLI."""

import argparse
from typing import Any

from dataconv import __version__
from dataconv.exceptions import FormatError, ParsingError, RenderingError, ValidationError

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

FORMAT_CHOICES = ["json", "markup", "xml", "tabular", "csv"]
LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR"]


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, OSError):
        return EXIT_FILE_ERROR

    if isinstance(exception, FormatError):
        return EXIT_FORMAT_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def _add_global_arguments(parser: argparse.ArgumentParser, **defaults: Any) -> None:
    """Add options accepted both before and after the subcommand name.

    Subcommand parsers pass ``argparse.SUPPRESS`` defaults so an option given
    before the subcommand is not reset by the subcommand's own default.
    """

    def default(name: str, value: Any) -> Any:
        return defaults.get(name, value)

    group = parser.add_argument_group("global options")
    group.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        type=str.upper,
        default=default("log_level", "WARNING"),
        help="Logging level (default: WARNING)",
    )
    group.add_argument("--log-file", metavar="PATH", default=default("log_file", None), help="Also write logs to PATH")
    group.add_argument(
        "--trace",
        action="store_true",
        default=default("trace", False),
        help="Debug logging with timestamps and logger names",
    )
    group.add_argument(
        "--config",
        metavar="PATH",
        default=default("config", None),
        help="Configuration file (default: $DATACONV_CONFIG, then .dataconv.* discovery)",
    )
    group.add_argument(
        "--rich",
        action="store_true",
        default=default("rich", False),
        help="Use rich terminal output with syntax highlighting",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its four subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Parser for ``dataconv {convert,format,detect,validate}``

    Examples
    --------
        >>> args = create_parser().parse_args(["convert", "data.csv", "--to", "json"])
        >>> args.command, args.source_format, args.target_format
        ('convert', 'auto', 'json')

    """
    parser = argparse.ArgumentParser(
        prog="dataconv",
        description="Convert structured data between JSON, markup (XML) and tabular (CSV) text.",
        epilog="Use '-' as INPUT to read from standard input.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_global_arguments(parser)

    suppressed = {name: argparse.SUPPRESS for name in ("log_level", "log_file", "trace", "config", "rich")}
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    convert_parser = subparsers.add_parser("convert", help="Convert INPUT to another format")
    convert_parser.add_argument("input", metavar="INPUT", help="Input file path or '-' for stdin")
    convert_parser.add_argument(
        "--from",
        dest="source_format",
        choices=["auto", *FORMAT_CHOICES],
        type=str.lower,
        default="auto",
        help="Input format; 'auto' tells JSON from markup by content (default: auto)",
    )
    convert_parser.add_argument(
        "--to",
        dest="target_format",
        choices=FORMAT_CHOICES,
        type=str.lower,
        required=True,
        help="Output format",
    )
    convert_parser.add_argument("--out", "-o", metavar="PATH", help="Write output to PATH instead of stdout")
    _add_global_arguments(convert_parser, **suppressed)

    format_parser = subparsers.add_parser("format", help="Pretty-print JSON or markup")
    format_parser.add_argument("input", metavar="INPUT", help="Input file path or '-' for stdin")
    format_parser.add_argument(
        "--manual",
        action="store_true",
        help="Use the tag-by-tag markup indenter even for well-formed markup",
    )
    format_parser.add_argument("--out", "-o", metavar="PATH", help="Write output to PATH instead of stdout")
    _add_global_arguments(format_parser, **suppressed)

    detect_parser = subparsers.add_parser("detect", help="Print whether INPUT is json or markup")
    detect_parser.add_argument("input", metavar="INPUT", help="Input file path or '-' for stdin")
    _add_global_arguments(detect_parser, **suppressed)

    validate_parser = subparsers.add_parser("validate", help="Check that INPUT is valid in a format")
    validate_parser.add_argument("input", metavar="INPUT", help="Input file path or '-' for stdin")
    validate_parser.add_argument(
        "--format",
        dest="format",
        choices=FORMAT_CHOICES,
        type=str.lower,
        required=True,
        help="Format to validate against",
    )
    _add_global_arguments(validate_parser, **suppressed)

    return parser
