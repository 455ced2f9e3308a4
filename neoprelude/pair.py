"""
Pair: an ordered couple of values.

Pairs compare lexicographically, ``fst`` first, and combine component-wise,
so a ``Pair`` of semigroups is itself a semigroup::

    Pair(1, "a") < Pair(1, "b")              # True
    Pair([1], "a").cmb(Pair([2], "b"))       # Pair(fst=[1, 2], snd='ab')
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from neoprelude.cmb import cmb
from neoprelude.cmp import Ordering, OrdMixin, cmp

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


@dataclass(frozen=True)
class Pair(OrdMixin, Generic[A, B]):
    """Two values held side by side."""

    fst: A
    snd: B

    @staticmethod
    def from_tuple(pair: tuple[A, B]) -> Pair[A, B]:
        return Pair(pair[0], pair[1])

    @property
    def val(self) -> tuple[A, B]:
        return (self.fst, self.snd)

    def unwrap(self, f: Callable[[A, B], C]) -> C:
        """Apply ``f`` to both components."""

        return f(self.fst, self.snd)

    def map_fst(self, f: Callable[[A], C]) -> Pair[C, B]:
        return Pair(f(self.fst), self.snd)

    def map_snd(self, f: Callable[[B], D]) -> Pair[A, D]:
        return Pair(self.fst, f(self.snd))

    lmap = map_fst
    map = map_snd

    def cmp(self, other: Pair[Any, Any]) -> Ordering:
        return cmp(self.fst, other.fst).cmb(cmp(self.snd, other.snd))

    def cmb(self, other: Pair[Any, Any]) -> Pair[Any, Any]:
        return Pair(cmb(self.fst, other.fst), cmb(self.snd, other.snd))


__all__ = ["Pair"]
