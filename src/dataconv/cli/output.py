"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/dataconv/cli/output.py
import argparse
import sys
from typing import Optional, TextIO

# Pygments lexer names for the syntax-highlighted output of each format
_LEXERS = {"json": "json", "markup": "xml", "tabular": "text"}


def should_use_rich_output(args: argparse.Namespace, stream: Optional[TextIO] = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Rich output is used when the --rich flag is set and the target stream is
    a terminal, so redirected output always stays plain text.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : TextIO, optional
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    """
    if not getattr(args, "rich", False):
        return False

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def print_output(text: str, args: argparse.Namespace, syntax: Optional[str] = None) -> None:
    """Print command output, syntax-highlighted when rich output is on."""
    if not should_use_rich_output(args):
        print(text)
        return

    from rich.console import Console
    from rich.syntax import Syntax

    console = Console()
    console.print(Syntax(text, _LEXERS.get(syntax or "", "text"), word_wrap=True))


def print_error(message: str, args: argparse.Namespace) -> None:
    """Print an error message to stderr, in red when rich output is on."""
    if not should_use_rich_output(args, stream=sys.stderr):
        print(f"Error: {message}", file=sys.stderr)
        return

    from rich.console import Console
    from rich.markup import escape

    Console(stderr=True).print(f"[bold red]Error:[/bold red] {escape(message)}")
