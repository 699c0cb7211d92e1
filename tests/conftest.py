"""
Shared fixtures for the functional test suite.

Keeps library settings isolated per test: FUNCTIONAL_* variables set by one
test never leak into the next, and the cached settings are re-read.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from functional.config import reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip FUNCTIONAL_* from the environment and drop cached settings around each test."""
    for name in list(os.environ):
        if name.startswith("FUNCTIONAL_"):
            monkeypatch.delenv(name)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture()
def event_log() -> list[str]:
    """An ordered log that callbacks append to."""
    return []
