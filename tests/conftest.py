"""
tests.conftest

Shared pytest fixtures.

Responsibilities:
- Keep the cached settings instance from leaking env overrides between tests.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from state_reducers.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
