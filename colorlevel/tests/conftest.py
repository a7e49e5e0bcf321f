"""Pytest fixtures for colorlevel tests."""

import pytest

from colorlevel import CapabilityResolver, Level, ProcessSnapshot, set_default_resolver
from colorlevel.environment import COLOR_ENV_VARS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove every color signal from the environment for the test.

    Setting before deleting makes monkeypatch restore the original state,
    including variables a test (or load_dotenv) adds later.
    """
    for name in COLOR_ENV_VARS + ("COLORLEVEL_STREAM", "COLORLEVEL_VERBOSE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield
    set_default_resolver(None)


class FakeQuery:
    """Terminal query returning a fixed answer."""

    def __init__(self, level=Level.NONE, applicable=False):
        self.level = level
        self.applicable = applicable
        self.calls = 0

    def query(self):
        self.calls += 1
        return self.level, self.applicable


@pytest.fixture
def make_resolver():
    """Build a resolver with a fake TTY probe and terminal query."""

    def _make(tty=True, query=None):
        return CapabilityResolver(
            tty_probe=lambda stream: tty,
            terminal_query=query or FakeQuery(),
        )

    return _make


@pytest.fixture
def resolve(make_resolver):
    """Resolve a level from argv/env in one call."""

    def _resolve(args=(), env=None, tty=True, query=None):
        snapshot = ProcessSnapshot.of(["cli", *args], env or {})
        return make_resolver(tty=tty, query=query).support_level(object(), snapshot)

    return _resolve
