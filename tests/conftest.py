"""Pytest configuration and fixtures.

Provides environment isolation, settings cache resets and marker
registration. All fixtures here are autouse unless noted.
"""

from __future__ import annotations

import logging
import os

import pytest

from castor.config import ENV_PREFIX, reset_settings_cache

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from reading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr(
        "castor.config.load_dotenv_file", lambda *_args, **_kwargs: {}
    )


@pytest.fixture(autouse=True)
def isolate_castor_env(request, monkeypatch):
    """Clear CASTOR_* variables and the cached env resolution per test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith(ENV_PREFIX):
                monkeypatch.delenv(key, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def castor_debug_logs(caplog):
    """Capture DEBUG records from the ``castor`` logger (not autouse)."""
    caplog.set_level(logging.DEBUG, logger="castor")
    return caplog


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "integration: Cross-module behavior through the public API",
        "allow_dotenv: Let python-dotenv read .env files",
        "allow_env_pollution: Keep CASTOR_* variables from the outer environment",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
