"""Shared pytest fixtures for arith tests."""

import pytest

from arith.core.config import LOG_LEVEL_ENV


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ARITH_LOG_LEVEL out of the tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
