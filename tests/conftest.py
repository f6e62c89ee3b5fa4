"""Shared fixtures for middlestack tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def run_log() -> list[object]:
    """Shared list that recording middlewares append to when they run."""
    return []
