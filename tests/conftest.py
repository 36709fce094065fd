"""Pytest configuration and fixtures.

Provides environment isolation, config isolation and logging configuration.
All fixtures here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from twofold import reset_config

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_twofold_env(request, monkeypatch):
    """Clear TWOFOLD_* env vars so the active config starts from defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("TWOFOLD_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def isolate_active_config():
    """Drop any config installed by a test, before and after it runs."""
    reset_config()
    yield
    reset_config()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def debug_library_logging():
    """Let caplog see the library's DEBUG records."""
    logging.getLogger("twofold").setLevel(logging.DEBUG)


# =============================================================================
# Test Doubles
# =============================================================================


class Recorder:
    """Callback double that records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[object, ...]] = []

    def __call__(self, value: object) -> None:
        self.calls.append((value,))


@pytest.fixture
def recorder() -> Recorder:
    """Return a fresh callback recorder."""
    return Recorder()
