"""Assertion and unwrap helpers.

Use these for code paths that cannot fail when the program is correct.
Document the invariant above each call:

    # Invariant: the encoder only ever sees dicts built by to_dict(),
    # which contain JSON-safe values.
    payload = unwrap1(*encode(record))
"""

from typing import Any, Optional, Tuple, TypeVar

from runtimex.errors import AssertionFailedError, Panic

T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")


def assert_true(condition: Any) -> None:
    """Raise Panic if condition is falsy.

    The payload is always an AssertionFailedError with the same message,
    whatever the call site.
    """
    if not condition:
        raise Panic(AssertionFailedError())


def assert_not_error(err: Optional[Any]) -> None:
    """Raise Panic carrying err if err is not None.

    The Panic payload is err itself. Exceptions are also set as the
    Panic's cause so the original traceback is kept.
    """
    if err is None:
        return
    if isinstance(err, BaseException):
        raise Panic(err) from err
    raise Panic(err)


def unwrap0(err: Optional[Any]) -> None:
    """Equivalent to assert_not_error, named for symmetry with unwrap1..3."""
    assert_not_error(err)


def unwrap1(v1: T1, err: Optional[Any]) -> T1:
    """Return v1, or raise Panic carrying err if err is not None.

    Shorthand for:

        v1, err = fx()
        if err is not None:
            raise Panic(err)
    """
    assert_not_error(err)
    return v1


def unwrap2(v1: T1, v2: T2, err: Optional[Any]) -> Tuple[T1, T2]:
    """Return (v1, v2), or raise Panic carrying err if err is not None."""
    assert_not_error(err)
    return v1, v2


def unwrap3(v1: T1, v2: T2, v3: T3, err: Optional[Any]) -> Tuple[T1, T2, T3]:
    """Return (v1, v2, v3), or raise Panic carrying err if err is not None."""
    assert_not_error(err)
    return v1, v2, v3


__all__ = [
    "assert_true",
    "assert_not_error",
    "unwrap0",
    "unwrap1",
    "unwrap2",
    "unwrap3",
]
