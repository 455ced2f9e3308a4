"""
Utility functions for the neoprelude library.
"""

import inspect
import os
from typing import Any

# Environment variable to control per-step interpreter tracing
DEBUG_STEPS = os.environ.get("NEOPRELUDE_DEBUG", "").lower() in ("1", "true", "yes")


def is_awaitable(value: Any) -> bool:
    """Return ``True`` for coroutines, futures, tasks and other awaitables."""

    return inspect.isawaitable(value)


def describe(value: Any, limit: int = 80) -> str:
    """Short ``repr`` for log records."""

    text = repr(value)
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text
