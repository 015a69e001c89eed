"""Unit tests for utils/decorators.py."""

from __future__ import annotations

import logging

import pytest

from dataconv.exceptions import ParsingError, ShapeError
from dataconv.result import ConversionResult
from dataconv.utils.decorators import debug_timer, returns_conversion_result


@pytest.mark.unit
class TestReturnsConversionResult:
    """Test the returns_conversion_result decorator."""

    def test_success_passes_through(self) -> None:
        @returns_conversion_result("upper")
        def upper(text: str) -> ConversionResult:
            return ConversionResult.ok(text.upper())

        assert upper("abc") == ConversionResult.ok("ABC")

    def test_library_error_becomes_failure(self) -> None:
        @returns_conversion_result("broken")
        def broken(text: str) -> ConversionResult:
            raise ParsingError("Line 3: unexpected end of data", parsing_stage="tabular")

        result = broken("x")

        assert result.success is False
        assert result.error == "Line 3: unexpected end of data"

    def test_subclass_errors_are_caught(self) -> None:
        @returns_conversion_result("shape")
        def shape(text: str) -> ConversionResult:
            raise ShapeError("Empty collection cannot be converted to tabular form")

        assert shape("[]").error == "Empty collection cannot be converted to tabular form"

    def test_programming_errors_propagate(self) -> None:
        @returns_conversion_result("buggy")
        def buggy(text: str) -> ConversionResult:
            raise KeyError("oops")

        with pytest.raises(KeyError):
            buggy("x")

    def test_failure_is_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        @returns_conversion_result("json_to_markup")
        def failing(text: str) -> ConversionResult:
            raise ParsingError("Expecting value: line 1 column 1 (char 0)")

        with caplog.at_level(logging.DEBUG, logger="dataconv.utils.decorators"):
            failing("")

        assert "json_to_markup failed: Expecting value" in caplog.text

    def test_preserves_function_metadata(self) -> None:
        @returns_conversion_result("documented")
        def documented(text: str) -> ConversionResult:
            """Docstring survives."""
            return ConversionResult.ok(text)

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring survives."


@pytest.mark.unit
class TestDebugTimer:
    """Test the debug_timer context manager."""

    def test_logs_elapsed_time_when_debug_enabled(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("dataconv.tests.timer")

        with caplog.at_level(logging.DEBUG, logger="dataconv.tests.timer"):
            with debug_timer(logger, "Parsing (json)"):
                pass

        assert "Parsing (json) completed in" in caplog.text

    def test_silent_when_debug_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("dataconv.tests.timer_quiet")

        with caplog.at_level(logging.WARNING, logger="dataconv.tests.timer_quiet"):
            with debug_timer(logger, "Rendering (markup)"):
                pass

        assert "Rendering (markup)" not in caplog.text

    def test_exceptions_propagate(self) -> None:
        logger = logging.getLogger("dataconv.tests.timer_error")

        with pytest.raises(ParsingError):
            with debug_timer(logger, "Parsing (markup)"):
                raise ParsingError("bad")
