"""Settings schema and resolution for Castor.

Castor has very little to configure: the containers themselves are pure
values. What can be tuned is how the failure signals (``unwrap()`` on an
absent/failed container, a failed ``assert_*``) report themselves.

Resolution follows the same resolve-once, freeze-then-flow shape used for
larger configuration surfaces:

- ``Settings`` is the single schema wall (Pydantic) for fields and defaults.
- Values come from defaults < ``CASTOR_*`` entries of a ``.env`` file <
  ``CASTOR_*`` environment variables < explicit overrides. The ``.env``
  file is only read, never exported into ``os.environ``.
- ``settings_scope`` sets ambient settings for a block, task- and
  thread-locally, via ``contextvars``.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, Field, ValidationError

from castor.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

__all__ = [
    "ENV_PREFIX",
    "Settings",
    "current_settings",
    "load_dotenv_file",
    "load_env",
    "reset_settings_cache",
    "resolve_settings",
    "settings_scope",
]

log = logging.getLogger(__name__)

ENV_PREFIX = "CASTOR_"

# --- Schema (Pydantic wall) ---


class Settings(BaseModel):
    """Validated, immutable settings for failure reporting."""

    #: Log failure signals on the ``castor`` logger at DEBUG before raising.
    log_failures: bool = Field(default=False)
    #: Max characters of a payload ``repr`` placed in error hints; 0 omits it.
    payload_preview_chars: int = Field(default=80, ge=0)

    model_config = {"extra": "forbid", "frozen": True}


# --- Loading ---


def load_dotenv_file() -> dict[str, str]:
    """Read ``CASTOR_*`` entries from the nearest ``.env`` file.

    The file is parsed, never exported: other keys in it stay out of
    ``os.environ``.
    """
    path = find_dotenv(usecwd=True)
    if not path:
        return {}
    return {
        key: value
        for key, value in dotenv_values(path).items()
        if key.startswith(ENV_PREFIX) and value is not None
    }


def load_env() -> dict[str, str]:
    """Collect ``CASTOR_*`` variables as raw strings.

    ``.env`` entries sit below the real environment. Keys are lowercased
    with the prefix stripped; type coercion is left to ``Settings`` so that
    ``"1"``, ``"true"`` and ``"on"`` all validate as booleans. Variables
    that do not name a ``Settings`` field are skipped, so another tool's
    ``CASTOR_*`` variables cannot break resolution.
    """
    raw = {**load_dotenv_file(), **os.environ}
    config: dict[str, str] = {}
    for key, value in raw.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        if field_name not in Settings.model_fields:
            log.debug("Ignoring unknown environment variable %s", key)
            continue
        config[field_name] = value
    return config


# --- Public resolution API ---


def resolve_settings(
    overrides: Mapping[str, Any] | None = None, **kwargs: Any
) -> Settings:
    """Resolve settings from defaults, the environment and overrides.

    Args:
        overrides: Programmatic overrides (highest precedence).
        **kwargs: Additional overrides, merged over ``overrides``.

    Returns:
        A frozen ``Settings`` instance.

    Raises:
        ConfigurationError: If any value fails validation, including unknown
            override keys.
    """
    merged: dict[str, Any] = {**load_env(), **(overrides or {}), **kwargs}

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        raise ConfigurationError(
            f"Configuration validation failed: {field}: {err.get('msg')}",
            hint=(
                f"Check {ENV_PREFIX}{field.upper()} in the environment or the "
                "overrides passed to resolve_settings()."
            ),
        ) from e

    log.debug("Resolved castor settings: %s", settings)
    return settings


@cache
def _env_settings() -> Settings:
    return resolve_settings()


def reset_settings_cache() -> None:
    """Forget the cached environment resolution (e.g. after env changes)."""
    _env_settings.cache_clear()


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "castor_settings", default=None
)


def current_settings() -> Settings:
    """Return the settings in effect for the current context."""
    ambient = _AMBIENT.get()
    if ambient is not None:
        return ambient
    return _env_settings()


@contextmanager
def settings_scope(
    settings_or_overrides: Settings | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Generator[Settings]:
    """Run a block with specific settings without touching global state.

    Args:
        settings_or_overrides: A ``Settings`` instance to use as-is, or a
            mapping of overrides to resolve.
        **overrides: Additional overrides, merged over a mapping argument.

    Yields:
        The ``Settings`` active inside the block.

    Example:
        with settings_scope(log_failures=True):
            result.unwrap()  # logged at DEBUG before UnwrapError propagates
    """
    if isinstance(settings_or_overrides, Settings):
        settings = settings_or_overrides
        if overrides:
            settings = resolve_settings(settings.model_dump(), **overrides)
    else:
        settings = resolve_settings(settings_or_overrides, **overrides)

    token = _AMBIENT.set(settings)
    try:
        yield settings
    finally:
        _AMBIENT.reset(token)
