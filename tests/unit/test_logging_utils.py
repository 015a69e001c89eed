"""Unit tests for logging_utils."""

import logging

import pytest

from dataconv.logging_utils import PLAIN_FORMAT, TRACE_FORMAT, configure_logging, resolve_log_level

pytestmark = pytest.mark.usefixtures("restore_root_logging")


@pytest.mark.unit
class TestResolveLogLevel:
    """Tests for resolve_log_level."""

    @pytest.mark.parametrize(
        "value, expected",
        [(logging.INFO, logging.INFO), ("debug", logging.DEBUG), ("ERROR", logging.ERROR), ("loud", logging.WARNING)],
    )
    def test_levels(self, value, expected):
        assert resolve_log_level(value) == expected


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_single_console_handler(self):
        root = configure_logging("INFO")
        configure_logging("INFO")

        assert root is logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert root.handlers[0].formatter._fmt == PLAIN_FORMAT

    def test_trace_format(self):
        root = configure_logging(logging.DEBUG, trace_mode=True)

        assert root.handlers[0].formatter._fmt == TRACE_FORMAT

    def test_log_file_receives_records(self, tmp_path):
        log_file = tmp_path / "dataconv.log"
        root = configure_logging("DEBUG", log_file=str(log_file))

        logging.getLogger("dataconv.tests").debug("hello from the test")
        for handler in root.handlers:
            handler.flush()

        assert len(root.handlers) == 2
        assert "hello from the test" in log_file.read_text(encoding="utf-8")
        for handler in root.handlers:
            if isinstance(handler, logging.FileHandler):
                handler.close()

    def test_unopenable_log_file_is_skipped(self, tmp_path):
        root = configure_logging("WARNING", log_file=str(tmp_path / "missing" / "dir" / "x.log"))

        assert len(root.handlers) == 1
