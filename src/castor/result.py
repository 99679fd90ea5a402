"""Result type: success (``Ok``) or failure (``Err``) of a computation.

A Result is for operations where failure is an ordinary outcome rather than
a surprise: an HTTP call that may return a 404, a parse of user input, a
division whose divisor may be zero. Returning ``Err(...)`` instead of
raising keeps the failure in the data flow, where the type checker can see
that it must be handled::

    def divide(x: float, y: float) -> Result[float, str]:
        if y == 0:
            return err("Cannot divide by zero")
        return ok(x / y)

    divide(10, 2).map(str).unwrap_or("n/a")     # "5.0"

The success and error types are independent. Combinators only ever touch
the side they are named for; the other variant passes through untouched
and the function argument is not called.
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
from typing import Final, Literal, NoReturn, TypeIs

from castor._failure import raise_mismatch, raise_unwrap
from castor.option import NONE, Nothing, Some

__all__ = [
    "Err",
    "Ok",
    "Result",
    "assert_err",
    "assert_ok",
    "err",
    "is_err",
    "is_ok",
    "ok",
]

_OK: Final = "Ok"
_ERR: Final = "Err"


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful Result, holding the computed value."""

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or[T2](self, default: T2) -> T:  # noqa: ARG002
        return self.value

    def map[T2](self, fn: Callable[[T], T2]) -> Ok[T2]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[..., object]) -> Ok[T]:  # noqa: ARG002
        return self

    def map_both[T2](
        self,
        ok_fn: Callable[[T], T2],
        err_fn: Callable[..., object],  # noqa: ARG002
    ) -> Ok[T2]:
        """Apply *ok_fn*; *err_fn* is ignored on the success path."""
        return Ok(ok_fn(self.value))

    def and_then[T2, E2](self, fn: Callable[[T], Result[T2, E2]]) -> Result[T2, E2]:
        """Chain a fallible step onto this success."""
        return fn(self.value)

    def to_option(self) -> Some[T]:
        return Some(self.value)

    def match[R](self, *, ok: Callable[[T], R], err: Callable[..., R]) -> R:  # noqa: ARG002
        return ok(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed Result, holding the error value.

    The error can be any type, not only an exception; strings and small
    dataclasses are common. ``unwrap()`` raises ``UnwrapError``, chained
    from the held error when that error is itself an exception.
    """

    error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        raise_unwrap(_ERR, self.error)

    def unwrap_or[T2](self, default: T2) -> T2:
        return default

    def map(self, fn: Callable[..., object]) -> Err[E]:  # noqa: ARG002
        return self

    def map_err[E2](self, fn: Callable[[E], E2]) -> Err[E2]:
        return Err(fn(self.error))

    def map_both[E2](
        self,
        ok_fn: Callable[..., object],  # noqa: ARG002
        err_fn: Callable[[E], E2],
    ) -> Err[E2]:
        """Apply *err_fn*; *ok_fn* is ignored on the failure path."""
        return Err(err_fn(self.error))

    def and_then(self, fn: Callable[..., object]) -> Err[E]:  # noqa: ARG002
        """Return this failure unchanged; *fn* is not called."""
        return self

    def to_option(self) -> Nothing:
        """Discard the error and return ``NONE``."""
        return NONE

    def match[R](self, *, ok: Callable[..., R], err: Callable[[E], R]) -> R:  # noqa: ARG002
        return err(self.error)

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


# --- Construction ---


def ok[T](value: T) -> Ok[T]:
    """Wrap *value* in a successful Result."""
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """Wrap *error* in a failed Result."""
    return Err(error)


# --- Narrowing ---


def is_ok[T, E](result: Result[T, E]) -> TypeIs[Ok[T]]:
    """Return True if *result* is an ``Ok``.

    This proves the variant to the type checker rather than telling it (as
    ``cast(Ok[T], result)`` would), so ``result.value`` is safe in the true
    branch and ``result.error`` in the false branch.
    """
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeIs[Err[E]]:
    """Return True if *result* is an ``Err``."""
    return isinstance(result, Err)


def assert_ok[T, E](result: Result[T, E]) -> Ok[T]:
    """Return *result* narrowed to ``Ok``, or raise if it holds an error.

    Unlike ``is_ok``, a mismatch is a hard failure, so the caller can bind
    the return value and use ``.value`` without a branch::

        def report(result: Result[int, str]) -> None:
            print(assert_ok(result).value)

    Raises:
        AssertionMismatchError: ``"Expected an Ok, but got an Err"``.
    """
    match result:
        case Ok():
            return result
        case Err(error):
            raise_mismatch(_OK, _ERR, error)
        case _:
            raise TypeError(f"Expected a Result, got {type(result).__name__}")


def assert_err[T, E](result: Result[T, E]) -> Err[E]:
    """The opposite of ``assert_ok``: narrow to ``Err`` or raise.

    Raises:
        AssertionMismatchError: ``"Expected an Err, but got an Ok"``.
    """
    match result:
        case Err():
            return result
        case Ok(value):
            raise_mismatch(_ERR, _OK, value)
        case _:
            raise TypeError(f"Expected a Result, got {type(result).__name__}")
