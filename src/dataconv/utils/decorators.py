#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/utils/decorators.py
"""Utility decorators for dataconv operations.

This module provides the decorator that turns library exceptions into
:class:`~dataconv.result.ConversionResult` failures at the public API
boundary, and a DEBUG-level timer used by parsers and renderers.

"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Callable, Generator, TypeVar

from dataconv.exceptions import DataconvError
from dataconv.result import ConversionResult

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., ConversionResult])


def returns_conversion_result(operation: str) -> Callable[[F], F]:
    """Catch library errors raised by a conversion and return them as a failed result.

    The wrapped function returns a :class:`ConversionResult` on success. Any
    :class:`~dataconv.exceptions.DataconvError` raised while it runs is logged
    at DEBUG level and converted into ``ConversionResult.fail(error.message)``,
    so the caller always receives an envelope. Other exceptions are
    programming errors and propagate unchanged.

    Parameters
    ----------
    operation : str
        Name of the operation, used in log messages (e.g. "json_to_markup")

    Returns
    -------
    Callable
        Decorator applying the conversion boundary

    Examples
    --------
        >>> @returns_conversion_result("shout")
        ... def shout(text):
        ...     if not text:
        ...         raise ParsingError("nothing to shout")
        ...     return ConversionResult.ok(text.upper())
        >>> shout("").error
        'nothing to shout'

    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args, **kwargs):  # type: ignore[no-untyped-def]
            try:
                return func(*args, **kwargs)
            except DataconvError as e:
                logger.debug("%s failed: %s", operation, e.message)
                return ConversionResult.fail(e.message)

        return wrapper  # type: ignore[return-value]

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block and log the elapsed time when DEBUG logging is enabled.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Parsing (tabular)")

    Examples
    --------
        >>> with debug_timer(logger, "Parsing (json)"):
        ...     value = parser.parse(text)
        ... # Logs: "Parsing (json) completed in 0.00s" at DEBUG level

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
