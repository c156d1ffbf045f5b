"""Protocol definitions - interfaces for dependency injection.

These are typing.Protocol classes for static type checking. The fatal
helpers accept any object satisfying TerminatorProtocol, which lets tests
observe termination without ending the test process.
"""

from typing import Any, Protocol, runtime_checkable


# =============================================================================
# LOGGING
# =============================================================================

@runtime_checkable
class LoggerProtocol(Protocol):
    """Structured logging interface."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def critical(self, message: str, **kwargs: Any) -> None: ...
    def bind(self, **kwargs: Any) -> "LoggerProtocol": ...


# =============================================================================
# PROCESS TERMINATION
# =============================================================================

@runtime_checkable
class TerminatorProtocol(Protocol):
    """Process termination capability.

    terminate: end the process with the given status code.
    fatal_log: report the given arguments to the operator, then terminate
        with status 1.

    Production implementations never return from either method.
    """

    def terminate(self, code: int) -> None: ...
    def fatal_log(self, *args: Any) -> None: ...


__all__ = [
    "LoggerProtocol",
    "TerminatorProtocol",
]
