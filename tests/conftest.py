from __future__ import annotations

import os

import pytest

os.environ.setdefault("WED_OFFLINE", "1")

from app.deps import get_app_state  # noqa: E402


@pytest.fixture(autouse=True)
def app_state():
    """Fresh in-memory key-value store and sessions for every test."""
    get_app_state.cache_clear()
    state = get_app_state()
    yield state
    get_app_state.cache_clear()
