"""Tests for logging_config.py.

Tests logging setup, color formatting, file and syslog handlers.
"""

import logging
import logging.handlers
import sys
import typing
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from logging_config import SYSLOG_IDENT, ColoredFormatter, get_logger, setup_logging


def get_stream_handler(root_logger: logging.Logger) -> logging.StreamHandler[typing.Any] | None:
    """Helper to find our StreamHandler among pytest's handlers."""
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not handler.__class__.__name__.startswith("LogCapture"):
            return handler
    return None


def make_record(level: int, msg: str = "message", args: tuple = ()) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )


class TestColoredFormatter:
    """Tests for ColoredFormatter class."""

    @pytest.mark.parametrize(
        "level, code",
        [
            (logging.DEBUG, "\033[96m"),
            (logging.INFO, "\033[92m"),
            (logging.WARNING, "\033[93m"),
            (logging.ERROR, "\033[91m"),
            (logging.CRITICAL, "\033[95m"),
        ],
    )
    def test_level_colors(self, level: int, code: str) -> None:
        """Test each standard level gets its color."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s")

        result = formatter.format(make_record(level))

        assert code in result
        assert logging.getLevelName(level) in result
        assert "\033[0m" in result

    def test_formats_unknown_level_without_color(self) -> None:
        """Test non-standard levels are formatted without color."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s")
        record = make_record(25, "custom message")
        record.levelname = "CUSTOM"

        result = formatter.format(record)

        assert result == "CUSTOM: custom message"

    def test_record_levelname_restored(self) -> None:
        """Test other handlers see the plain level name afterwards."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s")
        record = make_record(logging.ERROR)

        formatter.format(record)

        assert record.levelname == "ERROR"

    def test_preserves_message_content(self) -> None:
        """Test message arguments are interpolated."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s")

        result = formatter.format(make_record(logging.INFO, "width %d, style %s", (40, "error")))

        assert "width 40, style error" in result


class TestSetupLogging:
    """Tests for setup_logging function."""

    def setup_method(self) -> None:
        """Start from pytest's own handlers only."""
        root = logging.getLogger()
        root.handlers = [
            h
            for h in root.handlers
            if h.__class__.__name__.startswith("LogCapture")
            or not isinstance(h, (logging.StreamHandler, logging.handlers.SysLogHandler))
        ]
        self.handlers = list(root.handlers)

    def teardown_method(self) -> None:
        """Remove every handler setup_logging() added, mocks included."""
        root = logging.getLogger()
        for handler in list(root.handlers):
            if handler not in self.handlers:
                root.removeHandler(handler)
        root.setLevel(logging.WARNING)

    def test_verbose_sets_debug_level(self) -> None:
        """Test verbose=True enables DEBUG level."""
        setup_logging(verbose=True)

        assert logging.getLogger().level == logging.DEBUG

    def test_non_verbose_sets_warning_level(self) -> None:
        """Test verbose=False sets WARNING level."""
        setup_logging(verbose=False)

        assert logging.getLogger().level == logging.WARNING

    @pytest.mark.parametrize("verbose", [True, False])
    def test_console_uses_stderr(self, verbose: bool) -> None:
        """Test log output never mixes with rendered output on stdout."""
        setup_logging(verbose=verbose)

        handler = get_stream_handler(logging.getLogger())

        assert handler is not None
        assert handler.stream == sys.stderr

    @pytest.mark.parametrize("verbose, level", [(True, logging.DEBUG), (False, logging.WARNING)])
    def test_console_handler_level(self, verbose: bool, level: int) -> None:
        """Test the console handler level follows verbose."""
        setup_logging(verbose=verbose)

        handler = get_stream_handler(logging.getLogger())

        assert handler is not None
        assert handler.level == level

    @patch("logging.FileHandler")
    def test_file_handler(self, mock_handler: MagicMock) -> None:
        """Test file handler at DEBUG with a detailed format."""
        mock_instance = MagicMock(level=logging.DEBUG)
        mock_handler.return_value = mock_instance
        log_file = Path("/tmp/termlayout.log")

        try:
            setup_logging(log_file=log_file)

            mock_handler.assert_called_once_with(log_file)
            mock_instance.setLevel.assert_called_once_with(logging.DEBUG)
            formatter = mock_instance.setFormatter.call_args[0][0]
            assert "%(asctime)s" in formatter._fmt
            assert "%(name)s" in formatter._fmt

            logging.getLogger("termlayout").warning("Width 10 too small")
            mock_instance.handle.assert_called_once()
        finally:
            logging.getLogger().removeHandler(mock_instance)

    def test_handlers_removed_between_tests(self) -> None:
        """Test no handler from an earlier test is left on the root logger."""
        root = logging.getLogger()

        assert not any(isinstance(h, MagicMock) for h in root.handlers)
        assert all(isinstance(h.level, int) for h in root.handlers)

    def test_no_file_handler_when_log_file_none(self) -> None:
        """Test only the console handler is added by default."""
        setup_logging(log_file=None)

        root = logging.getLogger()
        stream_handlers = [
            h
            for h in root.handlers
            if isinstance(h, logging.StreamHandler) and not h.__class__.__name__.startswith("LogCapture")
        ]

        assert len(stream_handlers) == 1

    @pytest.mark.parametrize("use_colors", [True, False])
    def test_console_formatter(self, use_colors: bool) -> None:
        """Test ColoredFormatter is used only with colors enabled."""
        setup_logging(use_colors=use_colors)

        handler = get_stream_handler(logging.getLogger())

        assert handler is not None
        assert isinstance(handler.formatter, ColoredFormatter) is use_colors
        assert "%(levelname)s: %(message)s" in handler.formatter._fmt

    @patch("logging.handlers.SysLogHandler")
    def test_syslog_handler(self, mock_handler: MagicMock) -> None:
        """Test syslog delivery of INFO+ records."""
        mock_instance = MagicMock(level=logging.INFO)
        mock_handler.return_value = mock_instance

        try:
            setup_logging(syslog=True)

            mock_handler.assert_called_once_with(address="/dev/log")
            mock_instance.setLevel.assert_called_once_with(logging.INFO)
            assert mock_instance.ident == SYSLOG_IDENT
            assert mock_instance in logging.getLogger().handlers
        finally:
            logging.getLogger().removeHandler(mock_instance)

    @patch("logging.handlers.SysLogHandler", side_effect=OSError("no /dev/log"))
    def test_syslog_unavailable(self, mock_handler: MagicMock, caplog: pytest.LogCaptureFixture) -> None:
        """Test a missing syslog socket is reported, not raised."""
        setup_logging(syslog=True)

        assert "Syslog unavailable" in caplog.text


class TestGetLogger:
    """Tests for get_logger function."""

    def test_logger_has_correct_name(self) -> None:
        """Test logger has the name passed to get_logger."""
        logger = get_logger("layout.table")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "layout.table"

    def test_returns_same_logger_for_same_name(self) -> None:
        """Test get_logger returns same instance for same name."""
        assert get_logger("test_module") is get_logger("test_module")
