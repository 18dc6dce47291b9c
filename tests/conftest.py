"""Shared pytest fixtures for stylecraft tests."""

import pytest

import stylecraft
from stylecraft import CompilerSession


@pytest.fixture(autouse=True)
def _reset_default_session():
    """Isolate tests that use the package-level API."""
    stylecraft.reset()
    stylecraft.clear_css_cache()
    yield
    stylecraft.reset()
    stylecraft.clear_css_cache()


@pytest.fixture
def session() -> CompilerSession:
    """Return a fresh compiler session."""
    return CompilerSession()
