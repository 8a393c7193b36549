"""Shared fixtures for flagparse tests."""

import pytest

from flagparse.core.context import FlagContext, get_default_context


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep terminal styling and configuration at their defaults."""
    for var in (
        "FORCE_COLOR",
        "TTY_COMPATIBLE",
        "NO_COLOR",
        "FLAGPARSE_CAPACITY",
        "FLAGPARSE_LOG_LEVEL",
        "FLAGPARSE_LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _fresh_default_context():
    """Each test starts with an empty process-wide context."""
    get_default_context.cache_clear()
    yield
    get_default_context.cache_clear()


@pytest.fixture
def context():
    """An isolated flag context."""
    return FlagContext()


@pytest.fixture
def demo_flags(context):
    """A context with one flag of each type, declared in mixed order."""
    handles = {
        "verbose": context.flag_bool("verbose", False, "Chatty output"),
        "count": context.flag_uint64("count", 1, "How many times"),
        "name": context.flag_str("name", "world", "Who to greet"),
        "dry": context.flag_bool("dry", False, "Do nothing"),
    }
    return context, handles
