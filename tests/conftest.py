"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from resultkit.config import ResultSettings, reset_settings, set_settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test with default settings, isolated from RESULTKIT__ env vars."""
    for key in list(os.environ):
        if key.startswith("RESULTKIT__"):
            monkeypatch.delenv(key)
    set_settings(ResultSettings())
    yield
    reset_settings()
