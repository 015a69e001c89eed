#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the dataconv library.

This module defines the exception classes raised while parsing and
rendering data formats. Public conversion functions never let these escape:
they are converted into failed :class:`~dataconv.result.ConversionResult`
values at the operation boundary. Parsers and renderers used directly do
raise them.

Exception Hierarchy
-------------------
- DataconvError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - FormatError (unsupported/unknown format name)

  - ParsingError (malformed JSON, markup or tabular input)

  - RenderingError (output generation failures)
    - ShapeError (valid input whose shape cannot be mapped to the target)

"""

from __future__ import annotations

from typing import Any


class DataconvError(Exception):
    """Base exception class for all dataconv-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(DataconvError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when the wrong options class is given to a parser or renderer.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class FormatError(DataconvError):
    """Exception raised when a format name is not supported.

    Parameters
    ----------
    message : str, optional
        Custom error message
    format_type : str, optional
        The unsupported format name
    supported_formats : list[str], optional
        List of supported formats for reference

    """

    def __init__(
        self,
        message: str | None = None,
        format_type: str | None = None,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        if message is None:
            if format_type is not None:
                message = f"Unsupported format: '{format_type}'"
                if supported_formats:
                    message += f". Supported formats: {', '.join(supported_formats)}"
            else:
                message = "Format is not supported for conversion"

        super().__init__(message, original_error=original_error)
        self.format_type = format_type
        self.supported_formats = supported_formats


class ParsingError(DataconvError):
    """Exception raised when input text cannot be parsed.

    The message is the underlying reader's own message whenever one exists,
    so that it points at the offending position.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The format being parsed ("json", "markup" or "tabular")
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    parsing_stage : str or None
        Which parser raised the error

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(DataconvError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The format being rendered
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class ShapeError(RenderingError):
    """Exception raised when a parsed value cannot be mapped onto the target format.

    For example an empty array, or a bare scalar, cannot become a table.

    Parameters
    ----------
    message : str
        Description of the shape problem
    rendering_stage : str, optional
        The format being rendered
    value_kind : str, optional
        Kind of canonical value that was rejected (e.g. "sequence", "string")

    """

    def __init__(self, message: str, rendering_stage: str | None = None, value_kind: str | None = None):
        """Initialize the shape error."""
        super().__init__(message, rendering_stage=rendering_stage)
        self.value_kind = value_kind
