"""
Shared fixtures for the neoprelude test-suite.

Provides awaitable helpers for the async interpreters, so tests can control
when each computation resolves.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import pytest


@pytest.fixture
def delayed() -> Callable[[Any, float], Awaitable[Any]]:
    """Return a coroutine factory resolving to ``value`` after ``delay`` seconds."""

    async def make(value: Any, delay: float = 0.0) -> Any:
        await asyncio.sleep(delay)
        return value

    return make


@pytest.fixture
def events() -> list[str]:
    """A shared log for recording the order in which things happen."""

    return []
