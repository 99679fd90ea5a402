"""Castor: Result and Option containers for Python.

Public API:
    - Option: ``Some`` / ``Nothing`` with ``some()``, ``none()`` and ``NONE``
    - Result: ``Ok`` / ``Err`` with ``ok()`` and ``err()``
    - Narrowing: ``is_some``, ``is_none``, ``is_ok``, ``is_err`` and the
      raising ``assert_*`` counterparts
    - Settings: ``resolve_settings``, ``settings_scope`` for failure reporting

The ``option`` and ``result`` submodules double as namespaces, which reads
well at call sites::

    from castor import option, result

    result.ok(5).map(lambda x: x * x).to_option()   # Some(25)
    option.none().to_result("missing")             # Err('missing')
"""

from __future__ import annotations

import logging

from castor import option, result
from castor.config import Settings, current_settings, resolve_settings, settings_scope
from castor.errors import (
    AssertionMismatchError,
    CastorError,
    ConfigurationError,
    UnwrapError,
)
from castor.option import (
    NONE,
    Nothing,
    Option,
    Some,
    assert_none,
    assert_some,
    is_none,
    is_some,
    none,
    some,
)
from castor.result import (
    Err,
    Ok,
    Result,
    assert_err,
    assert_ok,
    err,
    is_err,
    is_ok,
    ok,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("castor")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("castor").addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "AssertionMismatchError",
    "CastorError",
    "ConfigurationError",
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Settings",
    "Some",
    "UnwrapError",
    "assert_err",
    "assert_none",
    "assert_ok",
    "assert_some",
    "current_settings",
    "err",
    "is_err",
    "is_none",
    "is_ok",
    "is_some",
    "none",
    "ok",
    "option",
    "resolve_settings",
    "result",
    "settings_scope",
    "some",
]
