"""Failure signals shared by Option and Result.

These are the only abrupt-termination paths in the package. Each helper
builds the error, optionally logs it, and raises; nothing here catches the
signal itself. Settings only shape the hint and logging, never which
exception is raised.
"""

from __future__ import annotations

import logging
import reprlib
from typing import Any, NoReturn

from castor.config import Settings, current_settings
from castor.errors import AssertionMismatchError, ConfigurationError, UnwrapError

__all__ = ["raise_mismatch", "raise_unwrap"]

log = logging.getLogger(__name__)

_ARTICLES = {"Some": "a", "None": "a", "Ok": "an", "Err": "an"}

_UNWRAP_HINTS = {
    "None": "Use unwrap_or() for a fallback, or check is_some() first.",
    "Err": "Use unwrap_or() for a fallback, or handle both variants with match().",
}


def _reporting_settings() -> Settings:
    try:
        return current_settings()
    except ConfigurationError as exc:
        log.debug("Invalid castor settings, reporting with defaults: %s", exc)
        return Settings()


def _clip(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    if limit <= 3:
        return text[:limit]
    return text[: limit - 3] + "..."


def _preview(payload: Any, limit: int) -> str:
    """Return a bounded ``repr`` of *payload*, at most *limit* characters."""
    shortener = reprlib.Repr()
    shortener.maxstring = shortener.maxother = shortener.maxlong = max(limit, 4)
    try:
        text = shortener.repr(payload)
    except Exception:
        text = object.__repr__(payload)
    return _clip(text, limit)


def raise_unwrap(variant: str, payload: Any = None) -> NoReturn:
    """Raise ``UnwrapError`` for an ``unwrap()`` on *variant*.

    When *payload* is an exception it becomes the ``__cause__`` so the
    original traceback survives.
    """
    settings = _reporting_settings()
    hint = _UNWRAP_HINTS[variant]
    if variant == "Err" and settings.payload_preview_chars:
        preview = _preview(payload, settings.payload_preview_chars)
        hint = f"Err payload: {preview}. {hint}"

    if settings.log_failures:
        log.debug("unwrap on %s: payload=%s", variant, _preview(payload, 200))

    exc = UnwrapError(
        f"Cannot unwrap {variant}", variant=variant, payload=payload, hint=hint
    )
    if isinstance(payload, BaseException):
        raise exc from payload
    raise exc


def raise_mismatch(expected: str, actual: str, payload: Any = None) -> NoReturn:
    """Raise ``AssertionMismatchError`` for a failed ``assert_*`` narrowing."""
    settings = _reporting_settings()
    hint = f"Check with is_{expected.lower()}() or match() before narrowing."
    if actual in ("Ok", "Err", "Some") and settings.payload_preview_chars:
        preview = _preview(payload, settings.payload_preview_chars)
        hint = f"{actual} payload: {preview}. {hint}"

    if settings.log_failures:
        log.debug("variant assertion failed: expected %s, got %s", expected, actual)

    raise AssertionMismatchError(
        f"Expected {_ARTICLES[expected]} {expected}, "
        f"but got {_ARTICLES[actual]} {actual}",
        expected=expected,
        actual=actual,
        hint=hint,
    )
