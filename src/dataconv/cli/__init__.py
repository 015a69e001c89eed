"""Command-line interface for the dataconv data conversion library.

Examples
--------
Convert CSV to JSON::

    $ dataconv convert people.csv --from csv --to json

Convert JSON read from stdin to markup, detecting the input format::

    $ echo '{"name": "John"}' | dataconv convert - --to xml

Pretty-print a document::

    $ dataconv format response.xml --rich

Check a file and use the exit status::

    $ dataconv validate data.csv --format csv && echo ok

Configuration
-------------
Default parser and renderer options are read from the file named by
``--config``, else ``$DATACONV_CONFIG``, else the first ``.dataconv.toml``,
``.dataconv.yaml``, ``.dataconv.yml``, ``.dataconv.json`` or
``pyproject.toml`` with a ``[tool.dataconv]`` table found in the working
directory, its parents, or the home directory.

"""

import argparse
import logging
import os
import sys

from dataconv.cli.builder import EXIT_VALIDATION_ERROR, create_parser, get_exit_code_for_exception
from dataconv.cli.commands import dispatch_command
from dataconv.cli.config import CONFIG_ENV_VAR, load_config_with_priority, validate_config
from dataconv.cli.output import print_error
from dataconv.exceptions import DataconvError
from dataconv.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes precedence over --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def main(args: list[str] | None = None) -> int:
    """Execute the dataconv CLI and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
        validate_config(config)
    except argparse.ArgumentTypeError as e:
        print_error(str(e), parsed_args)
        return EXIT_VALIDATION_ERROR

    try:
        return dispatch_command(parsed_args, config)
    except (DataconvError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print_error(str(e), parsed_args)
        return get_exit_code_for_exception(e)


if __name__ == "__main__":
    sys.exit(main())
