"""Small function helpers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


def identity(x: T) -> T:
    return x


def constant(x: T) -> Callable[..., T]:
    """Return a function that ignores its arguments and returns ``x``."""

    def constant_fn(*args: Any, **kwargs: Any) -> T:
        return x

    return constant_fn


def negate_pred(f: Callable[..., bool]) -> Callable[..., bool]:
    """Return a predicate that negates ``f``."""

    def negated(*args: Any, **kwargs: Any) -> bool:
        return not f(*args, **kwargs)

    return negated


def wrap_ctor(ctor: Callable[..., T]) -> Callable[..., T]:
    """Adapt a class into a plain callable, e.g. for ``map``."""

    def construct(*args: Any, **kwargs: Any) -> T:
        return ctor(*args, **kwargs)

    return construct


__all__ = ["constant", "identity", "negate_pred", "wrap_ctor"]
