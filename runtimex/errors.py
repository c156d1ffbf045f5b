"""Abort types raised by the invariant helpers.

A ``Panic`` is the Python rendition of an unrecoverable fault: it unwinds the
stack carrying a payload (the violated assertion or the "impossible" error)
and is never caught inside runtimex.
"""

from typing import Any

ASSERTION_FAILED_MESSAGE = "assertion failed"

# Exit status used for every fatal termination path.
FATAL_EXIT_CODE = 1


class AssertionFailedError(Exception):
    """Payload carried by a Panic raised from ``assert_true``."""

    def __init__(self, message: str = ASSERTION_FAILED_MESSAGE):
        super().__init__(message)


class Panic(BaseException):
    """Unrecoverable fault carrying an arbitrary payload.

    Derives from BaseException so that generic ``except Exception`` handlers
    in caller code let it through, like SystemExit and KeyboardInterrupt.

    Attributes:
        value: The payload exactly as it was given (never stringified).
    """

    def __init__(self, value: Any):
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Panic({self.value!r})"


__all__ = [
    "ASSERTION_FAILED_MESSAGE",
    "FATAL_EXIT_CODE",
    "AssertionFailedError",
    "Panic",
]
