"""Option type: presence (``Some``) or absence (``Nothing``) of a value.

Use an Option where a lookup or computation may legitimately produce no
value and that is not an error, e.g. fetching a record by id that may not
exist. It is a typed alternative to returning ``None``: the absent case
has to be handled before the value can be used.

An Option differs from a ``Result`` in that absence carries no reason. If
the caller needs to know *why* nothing came back, return a ``Result``.

Handle both variants with a ``match`` statement::

    match find_user(user_id):
        case Some(user):
            greet(user)
        case Nothing():
            log.info("no such user")

or chain combinators and choose a fallback at the end::

    name = find_user(user_id).map(lambda u: u.name).unwrap_or("guest")
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
from typing import TYPE_CHECKING, Final, Literal, NoReturn, TypeIs

from castor._failure import raise_mismatch, raise_unwrap

if TYPE_CHECKING:
    from castor.result import Err, Ok

__all__ = [
    "NONE",
    "Nothing",
    "Option",
    "Some",
    "assert_none",
    "assert_some",
    "is_none",
    "is_some",
    "none",
    "some",
]


@dataclasses.dataclass(frozen=True, slots=True)
class Some[T]:
    """An Option holding a value."""

    value: T

    def is_some(self) -> Literal[True]:
        return True

    def is_none(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        """Return the held value."""
        return self.value

    def unwrap_or[T2](self, default: T2) -> T:  # noqa: ARG002
        return self.value

    def map[T2](self, fn: Callable[[T], T2]) -> Some[T2]:
        """Apply *fn* to the held value and wrap the outcome in ``Some``."""
        return Some(fn(self.value))

    def and_then[T2](self, fn: Callable[[T], Option[T2]]) -> Option[T2]:
        """Apply an Option-returning *fn*, without nesting containers."""
        return fn(self.value)

    def to_result[E](self, error: E) -> Ok[T]:  # noqa: ARG002
        from castor.result import Ok

        return Ok(self.value)

    def match[R](self, *, some: Callable[[T], R], none: Callable[[], R]) -> R:  # noqa: ARG002
        """Fold both variants into one value; only ``some`` is called here."""
        return some(self.value)

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclasses.dataclass(frozen=True, slots=True)
class Nothing:
    """An Option holding no value.

    ``Nothing`` is not generic: absence looks the same whatever type was
    expected. Instances compare equal to each other; ``none()`` hands out
    the shared ``NONE`` instance but nothing relies on identity.
    """

    def is_some(self) -> Literal[False]:
        return False

    def is_none(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        """Raise ``UnwrapError``: there is no value to return."""
        raise_unwrap("None")

    def unwrap_or[T2](self, default: T2) -> T2:
        return default

    def map(self, fn: Callable[..., object]) -> Nothing:  # noqa: ARG002
        return self

    def and_then(self, fn: Callable[..., object]) -> Nothing:  # noqa: ARG002
        return self

    def to_result[E](self, error: E) -> Err[E]:
        """Convert absence into a failure carrying *error*."""
        from castor.result import Err

        return Err(error)

    def match[R](self, *, some: Callable[..., R], none: Callable[[], R]) -> R:  # noqa: ARG002
        return none()

    def __repr__(self) -> str:
        return "Nothing"


type Option[T] = Some[T] | Nothing

NONE: Final[Nothing] = Nothing()


# --- Construction ---


def some[T](value: T) -> Some[T]:
    """Wrap *value* in a present Option."""
    return Some(value)


def none() -> Nothing:
    """Return the absent Option."""
    return NONE


# --- Narrowing ---


def is_some[T](option: Option[T]) -> TypeIs[Some[T]]:
    """Return True if *option* holds a value.

    Type checkers narrow *option* to ``Some`` in the true branch and to
    ``Nothing`` in the false branch, so ``option.value`` is safe after a
    positive check.
    """
    return isinstance(option, Some)


def is_none[T](option: Option[T]) -> TypeIs[Nothing]:
    """Return True if *option* is ``Nothing``."""
    return isinstance(option, Nothing)


def assert_some[T](option: Option[T]) -> Some[T]:
    """Return *option* narrowed to ``Some``, or raise if it is absent.

    Prefer ``match`` or ``is_some`` where absence is an expected outcome;
    this is for places where absence would be a programming error.

    Raises:
        AssertionMismatchError: ``"Expected a Some, but got a None"``.
    """
    match option:
        case Some():
            return option
        case Nothing():
            raise_mismatch("Some", "None")
        case _:
            raise TypeError(f"Expected an Option, got {type(option).__name__}")


def assert_none[T](option: Option[T]) -> Nothing:
    """Return *option* narrowed to ``Nothing``, or raise if it holds a value.

    Raises:
        AssertionMismatchError: ``"Expected a None, but got a Some"``.
    """
    match option:
        case Nothing():
            return option
        case Some(value):
            raise_mismatch("None", "Some", value)
        case _:
            raise TypeError(f"Expected an Option, got {type(option).__name__}")
