"""Unit tests for ProcessTerminator and the default terminator."""

import pytest
import structlog
from structlog.testing import capture_logs

import runtimex.logging as runtimex_logging

from runtimex import (
    FATAL_EXIT_CODE,
    ProcessTerminator,
    TerminatorProtocol,
    get_default_terminator,
    log_fatal_on_error,
    log_fatal_on_error1,
)
from runtimex.terminator import format_fatal_message


class TestProcessTerminator:
    """Tests for the real process terminator."""

    def test_satisfies_protocol(self, mock_logger):
        assert isinstance(ProcessTerminator(logger=mock_logger), TerminatorProtocol)

    def test_terminate_raises_system_exit(self, mock_logger):
        terminator = ProcessTerminator(logger=mock_logger)

        with pytest.raises(SystemExit) as exc_info:
            terminator.terminate(3)

        assert exc_info.value.code == 3
        mock_logger.critical.assert_not_called()

    def test_fatal_log_logs_then_exits(self, mock_logger):
        terminator = ProcessTerminator(logger=mock_logger)

        with pytest.raises(SystemExit) as exc_info:
            terminator.fatal_log("loading config:", "bad value")

        assert exc_info.value.code == FATAL_EXIT_CODE
        mock_logger.critical.assert_called_once_with(
            "fatal_error",
            message="loading config: bad value",
            exit_code=1,
        )

    def test_injected_logger_leaves_logging_unconfigured(self, mock_logger, monkeypatch):
        monkeypatch.setattr(runtimex_logging, "_CONFIGURED", False)
        structlog.reset_defaults()
        terminator = ProcessTerminator(logger=mock_logger)

        with pytest.raises(SystemExit):
            terminator.fatal_log("boom")

        assert runtimex_logging._CONFIGURED is False
        assert not structlog.is_configured()

    def test_default_terminator_is_shared(self):
        first = get_default_terminator()
        assert isinstance(first, ProcessTerminator)
        assert get_default_terminator() is first


class TestFormatFatalMessage:
    """Tests for rendering fatal-log arguments."""

    def test_joins_with_spaces(self):
        assert format_fatal_message("fatal:", "cannot open", "x") == "fatal: cannot open x"

    def test_stringifies_errors(self):
        assert format_fatal_message(ValueError("bad")) == "bad"

    def test_no_arguments(self):
        assert format_fatal_message() == ""


class TestFatalEndToEnd:
    """Fatal helpers wired to a real ProcessTerminator and structlog."""

    def test_log_fatal_on_error_reports_and_exits(self):
        with capture_logs() as logs:
            terminator = ProcessTerminator()
            with pytest.raises(SystemExit) as exc_info:
                log_fatal_on_error(
                    OSError("permission denied"),
                    "fatal:",
                    "cannot open",
                    "config file",
                    terminator=terminator,
                )

        assert exc_info.value.code == 1
        assert len(logs) == 1
        assert logs[0]["event"] == "fatal_error"
        assert logs[0]["log_level"] == "critical"
        assert logs[0]["component"] == "terminator"
        assert logs[0]["message"] == "fatal: cannot open config file: permission denied"

    def test_log_fatal_on_error1_success_logs_nothing(self):
        with capture_logs() as logs:
            terminator = ProcessTerminator()
            assert log_fatal_on_error1("value", None, terminator=terminator) == "value"

        assert logs == []
