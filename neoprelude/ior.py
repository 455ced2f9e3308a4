"""
Ior: an inclusive-or of a left value, a right value, or both.

``Left`` halts a comprehension, ``Right`` continues it, and ``Both`` continues
while contributing its left-hand value to an accumulated result. Left-hand
values are combined with :func:`neoprelude.cmb.cmb`, so they must form a
semigroup (lists, strings, tuples and so on)::

    @Ior.wrap_go
    def parse(raw: str):
        header = yield Ior.both(["header is deprecated"], raw[:4])
        body = yield Ior.right(raw[4:])
        return header + body

    parse("HEADbody")  # Both(fst=["header is deprecated"], snd="HEADbody")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar

from neoprelude._comprehension import Comprehensible
from neoprelude.cmb import cmb
from neoprelude.cmp import Ordering, OrdMixin, cmp
from neoprelude.errors import UnwrapError
from neoprelude.step import AuxOnly, Completed, CompletedWithAux, FinalOnly, Halted, Outcome, Step
from neoprelude.step import Both as BothStep

if TYPE_CHECKING:
    from neoprelude.either import Either
    from neoprelude.validation import Validation

A = TypeVar("A")
B = TypeVar("B")
A_co = TypeVar("A_co", covariant=True)
B_co = TypeVar("B_co", covariant=True)
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")


class Ior(Comprehensible, OrdMixin, Generic[A_co, B_co], ord_root=True):
    """Sum type of ``Left``, ``Right`` and ``Both``."""

    __slots__ = ()

    @staticmethod
    def left(val: A) -> Ior[A, NoReturn]:
        return Left(val)

    @staticmethod
    def right(val: B) -> Ior[NoReturn, B]:
        return Right(val)

    @staticmethod
    def both(fst: A, snd: B) -> Ior[A, B]:
        return Both(fst, snd)

    @staticmethod
    def from_either(either: Either[A, B]) -> Ior[A, B]:
        return either.match(Left, Right)

    @staticmethod
    def from_validation(vdn: Validation[A, B]) -> Ior[A, B]:
        return vdn.match(Left, Right)

    @staticmethod
    def from_tuple(pair: tuple[A, B]) -> Ior[A, B]:
        return Both(pair[0], pair[1])

    @classmethod
    def _from_outcome(cls, outcome: Outcome) -> Ior[Any, Any]:
        if isinstance(outcome, Halted):
            return Left(outcome.aux)
        if isinstance(outcome, CompletedWithAux):
            return Both(outcome.aux, outcome.value)
        if isinstance(outcome, Completed):
            return Right(outcome.value)
        raise AssertionError(f"unknown outcome: {outcome!r}")  # pragma: no cover

    @classmethod
    def _pure(cls, value: B) -> Ior[NoReturn, B]:
        return Right(value)

    def to_step(self) -> Step:
        if isinstance(self, Right):
            return FinalOnly(self.val)
        if isinstance(self, Both):
            return BothStep(self.fst, self.snd)
        return AuxOnly(self.val)

    def is_left(self) -> bool:
        return isinstance(self, Left)

    def is_right(self) -> bool:
        return isinstance(self, Right)

    def is_both(self) -> bool:
        return isinstance(self, Both)

    def match(
        self,
        on_left: Callable[[Any], C],
        on_right: Callable[[Any], D],
        on_both: Callable[[Any, Any], E],
    ) -> C | D | E:
        if isinstance(self, Left):
            return on_left(self.val)
        if isinstance(self, Right):
            return on_right(self.val)
        return on_both(self.fst, self.snd)

    def unwrap(self) -> B_co:
        """Return the right-hand value of ``Right`` or ``Both``."""

        if isinstance(self, Right):
            return self.val
        if isinstance(self, Both):
            return self.snd
        raise UnwrapError(self, "Right or Both")

    def and_then(self, f: Callable[[B_co], Ior[C, D]]) -> Ior[A_co | C, D]:
        """Chain ``f``, combining left-hand values when both sides carry one."""

        if isinstance(self, Left):
            return self
        if isinstance(self, Right):
            return f(self.val)
        that = f(self.snd)
        if isinstance(that, Left):
            return Left(cmb(self.fst, that.val))
        if isinstance(that, Right):
            return Both(self.fst, that.val)
        return Both(cmb(self.fst, that.fst), that.snd)

    def and_then_go(self, f: Callable[[B_co], Any]) -> Ior[Any, Any]:
        return self.and_then(lambda val: Ior.go(f(val)))

    def and_(self, that: Ior[C, D]) -> Ior[A_co | C, D]:
        return self.and_then(lambda _: that)

    def zip_with(self, that: Ior[C, D], f: Callable[[B_co, D], Any]) -> Ior[A_co | C, Any]:
        return self.and_then(lambda lhs: that.map(lambda rhs: f(lhs, rhs)))

    def lmap(self, f: Callable[[A_co], C]) -> Ior[C, B_co]:
        if isinstance(self, Left):
            return Left(f(self.val))
        if isinstance(self, Right):
            return self
        return Both(f(self.fst), self.snd)

    def map(self, f: Callable[[B_co], D]) -> Ior[A_co, D]:
        if isinstance(self, Left):
            return self
        if isinstance(self, Right):
            return Right(f(self.val))
        return Both(self.fst, f(self.snd))

    def cmp(self, other: Ior[Any, Any]) -> Ordering:
        """``Left < Right < Both``; ``Both`` compares lexicographically."""

        if isinstance(self, Left):
            return cmp(self.val, other.val) if isinstance(other, Left) else Ordering.LESS
        if isinstance(self, Right):
            if isinstance(other, Right):
                return cmp(self.val, other.val)
            return Ordering.GREATER if isinstance(other, Left) else Ordering.LESS
        if isinstance(other, Both):
            return cmp(self.fst, other.fst).cmb(cmp(self.snd, other.snd))
        return Ordering.GREATER

    def cmb(self, other: Ior[Any, Any]) -> Ior[Any, Any]:
        """Combine both sides independently."""

        if isinstance(self, Left):
            if isinstance(other, Left):
                return Left(cmb(self.val, other.val))
            if isinstance(other, Right):
                return Both(self.val, other.val)
            return Both(cmb(self.val, other.fst), other.snd)
        if isinstance(self, Right):
            if isinstance(other, Left):
                return Both(other.val, self.val)
            if isinstance(other, Right):
                return Right(cmb(self.val, other.val))
            return Both(other.fst, cmb(self.val, other.snd))
        if isinstance(other, Left):
            return Both(cmb(self.fst, other.val), self.snd)
        if isinstance(other, Right):
            return Both(self.fst, cmb(self.snd, other.val))
        return Both(cmb(self.fst, other.fst), cmb(self.snd, other.snd))


@dataclass(frozen=True)
class Left(Ior[A, NoReturn], Generic[A]):
    val: A


@dataclass(frozen=True)
class Right(Ior[NoReturn, B], Generic[B]):
    val: B


@dataclass(frozen=True)
class Both(Ior[A, B], Generic[A, B]):
    fst: A
    snd: B

    @property
    def val(self) -> tuple[A, B]:
        return (self.fst, self.snd)


left = Ior.left
right = Ior.right
both = Ior.both
go = Ior.go
wrap_go = Ior.wrap_go
reduce = Ior.reduce
traverse_into = Ior.traverse_into
traverse = Ior.traverse
for_each = Ior.for_each
collect_into = Ior.collect_into
all = Ior.all
all_props = Ior.all_props
lift = Ior.lift
go_async = Ior.go_async
wrap_go_async = Ior.wrap_go_async
traverse_into_par = Ior.traverse_into_par
traverse_par = Ior.traverse_par
for_each_par = Ior.for_each_par
collect_into_par = Ior.collect_into_par
all_par = Ior.all_par
all_props_par = Ior.all_props_par
lift_par = Ior.lift_par

__all__ = ["Both", "Ior", "Left", "Right", "both", "go", "go_async", "left", "right"]
