"""Exit helpers for top-level entry points.

Use these in main()-style code where the only sensible reaction to an error
is to stop the process:

    def main() -> None:
        configure_logging()
        config = log_fatal_on_error1(*load_config(path))
        log_fatal_on_error(serve(config), "serving", "http")

exit_on_error() exits silently with status 1; the log_fatal_on_error*
family reports the error first. Every helper takes an optional
``terminator`` which defaults to the real process terminator.
"""

from typing import Any, List, Optional, Tuple, TypeVar

from runtimex.errors import FATAL_EXIT_CODE
from runtimex.protocols import TerminatorProtocol
from runtimex.terminator import get_default_terminator

T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")


def _resolve(terminator: Optional[TerminatorProtocol]) -> TerminatorProtocol:
    if terminator is None:
        return get_default_terminator()
    return terminator


def exit_on_error(
    err: Optional[Any],
    *,
    terminator: Optional[TerminatorProtocol] = None,
) -> None:
    """Terminate with status 1 if err is not None. Prints nothing."""
    if err is not None:
        _resolve(terminator).terminate(FATAL_EXIT_CODE)


def fatal_log_args(err: Any, *msgs: str) -> List[str]:
    """Build the argument list reported by log_fatal_on_error.

    A colon is appended to the last message only, then str(err) is added
    as the final argument:

        fatal_log_args(err, "fatal:", "cannot open", "config file")
        # ["fatal:", "cannot open", "config file:", str(err)]

    Args:
        err: The error being reported
        *msgs: Qualifying strings, in order

    Returns:
        New list of strings; msgs is not modified
    """
    args = list(msgs)
    if args:
        args[-1] = f"{args[-1]}:"
    args.append(str(err))
    return args


def log_fatal_on_error(
    err: Optional[Any],
    *msgs: str,
    terminator: Optional[TerminatorProtocol] = None,
) -> None:
    """Log err qualified by msgs and terminate if err is not None.

    Args:
        err: Error result of the operation, or None on success
        *msgs: Optional context strings printed before the error
        terminator: Termination capability (default: the real process)
    """
    if err is None:
        return
    _resolve(terminator).fatal_log(*fatal_log_args(err, *msgs))


def log_fatal_on_error0(
    err: Optional[Any],
    *,
    terminator: Optional[TerminatorProtocol] = None,
) -> None:
    """Log err and terminate if err is not None.

    Equivalent to:

        if err is not None:
            terminator.fatal_log(err)
    """
    if err is not None:
        _resolve(terminator).fatal_log(err)


def log_fatal_on_error1(
    v1: T1,
    err: Optional[Any],
    *,
    terminator: Optional[TerminatorProtocol] = None,
) -> T1:
    """Log err and terminate if err is not None. Otherwise return v1."""
    log_fatal_on_error0(err, terminator=terminator)
    return v1


def log_fatal_on_error2(
    v1: T1,
    v2: T2,
    err: Optional[Any],
    *,
    terminator: Optional[TerminatorProtocol] = None,
) -> Tuple[T1, T2]:
    """Log err and terminate if err is not None. Otherwise return (v1, v2)."""
    log_fatal_on_error0(err, terminator=terminator)
    return v1, v2


def log_fatal_on_error3(
    v1: T1,
    v2: T2,
    v3: T3,
    err: Optional[Any],
    *,
    terminator: Optional[TerminatorProtocol] = None,
) -> Tuple[T1, T2, T3]:
    """Log err and terminate if err is not None. Otherwise return (v1, v2, v3)."""
    log_fatal_on_error0(err, terminator=terminator)
    return v1, v2, v3


__all__ = [
    "exit_on_error",
    "fatal_log_args",
    "log_fatal_on_error",
    "log_fatal_on_error0",
    "log_fatal_on_error1",
    "log_fatal_on_error2",
    "log_fatal_on_error3",
]
