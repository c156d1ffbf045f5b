"""Process termination backed by the interpreter and structlog."""

import sys
from typing import Any, Optional

from runtimex.errors import FATAL_EXIT_CODE
from runtimex.logging import configure_logging, create_logger, is_logging_configured
from runtimex.protocols import LoggerProtocol


def format_fatal_message(*args: Any) -> str:
    """Render fatal-log arguments as one line, space separated."""
    return " ".join(str(arg) for arg in args)


class ProcessTerminator:
    """TerminatorProtocol implementation that really ends the process.

    terminate() raises SystemExit, so ``finally`` blocks and atexit
    handlers still run on the way out.

    Without an injected logger, fatal reports always reach stderr: if no
    logging setup has run by the time fatal_log() is called, it runs
    configure_logging() with the current settings first.
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        self._owns_logger = logger is None
        self._logger = logger or create_logger("terminator")

    def terminate(self, code: int) -> None:
        sys.exit(code)

    def fatal_log(self, *args: Any) -> None:
        """Report the arguments at critical level, then exit with status 1."""
        if self._owns_logger and not is_logging_configured():
            configure_logging()
        self._logger.critical(
            "fatal_error",
            message=format_fatal_message(*args),
            exit_code=FATAL_EXIT_CODE,
        )
        self.terminate(FATAL_EXIT_CODE)


_default_terminator: Optional[ProcessTerminator] = None


def get_default_terminator() -> ProcessTerminator:
    """Get the process-wide terminator used when none is injected.

    Created lazily on first use and never replaced. Tests should pass their
    own terminator to the fatal helpers instead of swapping this one.
    """
    global _default_terminator
    if _default_terminator is None:
        _default_terminator = ProcessTerminator()
    return _default_terminator


__all__ = [
    "ProcessTerminator",
    "format_fatal_message",
    "get_default_terminator",
]
