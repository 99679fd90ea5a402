"""Public surface tests: exports and namespace modules."""

from __future__ import annotations

import pytest

import castor

pytestmark = pytest.mark.unit


def test_all_exports_resolve() -> None:
    for name in castor.__all__:
        assert hasattr(castor, name), name


def test_namespace_modules_match_top_level() -> None:
    assert castor.result.ok is castor.ok
    assert castor.result.err is castor.err
    assert castor.option.some is castor.some
    assert castor.option.none is castor.none
    assert castor.option.NONE is castor.NONE


def test_version_is_a_string() -> None:
    assert isinstance(castor.__version__, str)
    assert castor.__version__
