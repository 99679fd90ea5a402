"""Exception hierarchy for Castor."""

from __future__ import annotations

from typing import Any


class CastorError(Exception):
    """Base exception for all Castor errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(CastorError):
    """Settings validation or resolution failed."""


class UnwrapError(CastorError):
    """``unwrap()`` was called on a ``Nothing`` or an ``Err``.

    The container's variant name and held payload are attached so callers
    at an error boundary can report what was actually there. For ``Nothing``
    the payload is always ``None``.
    """

    def __init__(
        self,
        message: str,
        *,
        variant: str,
        payload: Any = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.variant = variant
        self.payload = payload


class AssertionMismatchError(CastorError, TypeError):
    """A variant assertion (``assert_ok``, ``assert_some``, ...) failed."""

    def __init__(
        self,
        message: str,
        *,
        expected: str,
        actual: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.expected = expected
        self.actual = actual
