"""Helpers for code paths that are not expected to fail.

Failure on these paths means a programmer error or an unrecoverable
condition, so every helper either passes its inputs through or stops.

When to use what:
- assert_true: enforce invariants in library code. Document the invariant
  and its justification in a comment above the assertion.
- assert_not_error / unwrap0..3: unwrap ``(value, ..., error)`` results
  where the error cannot occur in correct usage.
- log_fatal_on_error / log_fatal_on_error0..3 / exit_on_error: in main()
  when you want to report and exit.

Exports:
- Assertions: assert_true, assert_not_error, unwrap0..unwrap3
- Fatal exits: exit_on_error, log_fatal_on_error, log_fatal_on_error0..3, fatal_log_args
- Errors: Panic, AssertionFailedError, ASSERTION_FAILED_MESSAGE, FATAL_EXIT_CODE
- Termination: TerminatorProtocol, ProcessTerminator, get_default_terminator
- Logging: Logger, LoggerProtocol, configure_logging, create_logger, is_logging_configured
- Settings: RuntimexSettings, get_settings, reset_settings
"""

from runtimex.assertions import (
    assert_true,
    assert_not_error,
    unwrap0,
    unwrap1,
    unwrap2,
    unwrap3,
)
from runtimex.errors import (
    ASSERTION_FAILED_MESSAGE,
    FATAL_EXIT_CODE,
    AssertionFailedError,
    Panic,
)
from runtimex.fatal import (
    exit_on_error,
    fatal_log_args,
    log_fatal_on_error,
    log_fatal_on_error0,
    log_fatal_on_error1,
    log_fatal_on_error2,
    log_fatal_on_error3,
)
from runtimex.logging import (
    Logger,
    configure_logging,
    create_logger,
    is_logging_configured,
)
from runtimex.protocols import (
    LoggerProtocol,
    TerminatorProtocol,
)
from runtimex.settings import (
    RuntimexSettings,
    get_settings,
    reset_settings,
)
from runtimex.terminator import (
    ProcessTerminator,
    get_default_terminator,
)

__all__ = [
    # Assertions
    "assert_true",
    "assert_not_error",
    "unwrap0",
    "unwrap1",
    "unwrap2",
    "unwrap3",
    # Fatal exits
    "exit_on_error",
    "fatal_log_args",
    "log_fatal_on_error",
    "log_fatal_on_error0",
    "log_fatal_on_error1",
    "log_fatal_on_error2",
    "log_fatal_on_error3",
    # Errors
    "ASSERTION_FAILED_MESSAGE",
    "FATAL_EXIT_CODE",
    "AssertionFailedError",
    "Panic",
    # Termination
    "TerminatorProtocol",
    "ProcessTerminator",
    "get_default_terminator",
    # Logging
    "Logger",
    "LoggerProtocol",
    "configure_logging",
    "create_logger",
    "is_logging_configured",
    # Settings
    "RuntimexSettings",
    "get_settings",
    "reset_settings",
]
