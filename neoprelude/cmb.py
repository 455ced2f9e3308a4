"""
The Semigroup interface and associated operations.

A semigroup is a type with an associative operation that combines two of its
values::

    cmb(x, cmb(y, z)) == cmb(cmb(x, y), z)

User types take part by implementing a ``cmb(self, other)`` method. Builtin
types that have an obvious associative combination are registered here:
strings, lists and tuples concatenate, sets union, and mappings merge with the
right-hand side winning on key collisions.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce, singledispatch
from typing import Any, Protocol, TypeVar, runtime_checkable

from frozendict import frozendict

from neoprelude.errors import NotASemigroupError

T = TypeVar("T")

Combine = Callable[[Any, Any], Any]


@runtime_checkable
class Semigroup(Protocol):
    """Evidence that two values of a type have an associative combination."""

    def cmb(self, other: Any) -> Any: ...


@singledispatch
def cmb(lhs: Any, rhs: Any) -> Any:
    """Combine two values of the same semigroup."""

    method = getattr(lhs, "cmb", None)
    if method is None or not callable(method):
        raise NotASemigroupError(lhs, rhs)
    return method(rhs)


@cmb.register(str)
@cmb.register(list)
@cmb.register(tuple)
def _cmb_concat(lhs: Any, rhs: Any) -> Any:
    return lhs + rhs


@cmb.register(set)
@cmb.register(frozenset)
def _cmb_union(lhs: Any, rhs: Any) -> Any:
    return lhs | rhs


@cmb.register(dict)
def _cmb_dict(lhs: dict, rhs: dict) -> dict:
    return {**lhs, **rhs}


@cmb.register(frozendict)
def _cmb_frozendict(lhs: frozendict, rhs: Any) -> frozendict:
    return frozendict({**lhs, **rhs})


def cmb_all(first: T, *rest: T) -> T:
    """Combine a non-empty series of semigroup values from left to right."""

    return reduce(cmb, rest, first)


def keep_first(lhs: T, rhs: Any) -> T:
    """Combination that keeps the left-hand value."""

    return lhs


def keep_last(lhs: Any, rhs: T) -> T:
    """Combination that keeps the right-hand value."""

    return rhs


__all__ = ["Combine", "Semigroup", "cmb", "cmb_all", "keep_first", "keep_last"]
