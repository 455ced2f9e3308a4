"""
Either: a value of one of two possible types.

``Left`` conventionally carries a failure and ``Right`` a success. In a
comprehension, yielding a ``Left`` halts the generator and the ``Left`` becomes
the result::

    @Either.wrap_go
    def parse_pair(a: str, b: str):
        x = yield parse_int(a)
        y = yield parse_int(b)
        return (x, y)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar

from neoprelude._comprehension import Comprehensible
from neoprelude.cmb import cmb, keep_first, keep_last
from neoprelude.cmp import Ordering, OrdMixin, cmp
from neoprelude.errors import UnwrapError
from neoprelude.step import AuxOnly, Completed, CompletedWithAux, FinalOnly, Halted, Outcome, Step

if TYPE_CHECKING:
    from neoprelude.validation import Validation

A = TypeVar("A")
B = TypeVar("B")
A_co = TypeVar("A_co", covariant=True)
B_co = TypeVar("B_co", covariant=True)
C = TypeVar("C")
D = TypeVar("D")


class Either(Comprehensible, OrdMixin, Generic[A_co, B_co], ord_root=True):
    """Sum type of ``Left`` and ``Right``."""

    __slots__ = ()

    @staticmethod
    def left(val: A) -> Either[A, NoReturn]:
        return Left(val)

    @staticmethod
    def right(val: B) -> Either[NoReturn, B]:
        return Right(val)

    @staticmethod
    def from_validation(vdn: Validation[A, B]) -> Either[A, B]:
        """Convert ``Err`` to ``Left`` and ``Ok`` to ``Right``."""

        return vdn.match(Left, Right)

    @classmethod
    def _combine(cls, lhs: Any, rhs: Any) -> Any:
        # Either carries no accumulation; the latest halt wins
        return keep_last(lhs, rhs)

    @classmethod
    def _combine_par(cls, lhs: Any, rhs: Any) -> Any:
        # the first Left to resolve wins a fan-out
        return keep_first(lhs, rhs)

    @classmethod
    def _from_outcome(cls, outcome: Outcome) -> Either[Any, Any]:
        if isinstance(outcome, Halted):
            return Left(outcome.aux)
        if isinstance(outcome, (Completed, CompletedWithAux)):
            return Right(outcome.value)
        raise AssertionError(f"unknown outcome: {outcome!r}")  # pragma: no cover

    @classmethod
    def _pure(cls, value: B) -> Either[NoReturn, B]:
        return Right(value)

    def to_step(self) -> Step:
        if isinstance(self, Right):
            return FinalOnly(self.val)
        return AuxOnly(self.val)

    def is_left(self) -> bool:
        return isinstance(self, Left)

    def is_right(self) -> bool:
        return isinstance(self, Right)

    def match(self, on_left: Callable[[Any], C], on_right: Callable[[Any], D]) -> C | D:
        """Case analysis: apply ``on_left`` or ``on_right`` to the contained value."""

        if isinstance(self, Left):
            return on_left(self.val)
        return on_right(self.val)

    def unwrap(self) -> B_co:
        """Return the ``Right`` value or raise :class:`UnwrapError`."""

        if isinstance(self, Right):
            return self.val
        raise UnwrapError(self, "Right")

    def unwrap_left(self) -> A_co:
        if isinstance(self, Left):
            return self.val
        raise UnwrapError(self, "Left")

    def or_else(self, f: Callable[[A_co], Either[C, D]]) -> Either[C, B_co | D]:
        """Recover from a ``Left`` with ``f``."""

        if isinstance(self, Left):
            return f(self.val)
        return self

    def or_(self, that: Either[C, D]) -> Either[C, B_co | D]:
        return self.or_else(lambda _: that)

    def and_then(self, f: Callable[[B_co], Either[C, D]]) -> Either[A_co | C, D]:
        if isinstance(self, Right):
            return f(self.val)
        return self

    def and_then_go(self, f: Callable[[B_co], Any]) -> Either[Any, Any]:
        """Like :meth:`and_then` with a generator function."""

        return self.and_then(lambda val: Either.go(f(val)))

    def and_(self, that: Either[C, D]) -> Either[A_co | C, D]:
        return self.and_then(lambda _: that)

    def zip_with(
        self, that: Either[C, D], f: Callable[[B_co, D], Any]
    ) -> Either[A_co | C, Any]:
        return self.and_then(lambda lhs: that.map(lambda rhs: f(lhs, rhs)))

    def lmap(self, f: Callable[[A_co], C]) -> Either[C, B_co]:
        if isinstance(self, Left):
            return Left(f(self.val))
        return self

    def map(self, f: Callable[[B_co], D]) -> Either[A_co, D]:
        if isinstance(self, Right):
            return Right(f(self.val))
        return self

    def cmp(self, other: Either[Any, Any]) -> Ordering:
        """``Left`` sorts before ``Right``; equal variants compare their values."""

        if isinstance(self, Left):
            return cmp(self.val, other.val) if isinstance(other, Left) else Ordering.LESS
        return cmp(self.val, other.val) if isinstance(other, Right) else Ordering.GREATER

    def cmb(self, other: Either[Any, Any]) -> Either[Any, Any]:
        """Combine two ``Right`` values; the first ``Left`` short-circuits."""

        return self.zip_with(other, cmb)


@dataclass(frozen=True)
class Left(Either[A, NoReturn], Generic[A]):
    """The left (failure) variant."""

    val: A


@dataclass(frozen=True)
class Right(Either[NoReturn, B], Generic[B]):
    """The right (success) variant."""

    val: B


left = Either.left
right = Either.right
go = Either.go
wrap_go = Either.wrap_go
reduce = Either.reduce
traverse_into = Either.traverse_into
traverse = Either.traverse
for_each = Either.for_each
collect_into = Either.collect_into
all = Either.all
all_props = Either.all_props
lift = Either.lift
go_async = Either.go_async
wrap_go_async = Either.wrap_go_async
traverse_into_par = Either.traverse_into_par
traverse_par = Either.traverse_par
for_each_par = Either.for_each_par
collect_into_par = Either.collect_into_par
all_par = Either.all_par
all_props_par = Either.all_props_par
lift_par = Either.lift_par

__all__ = ["Either", "Left", "Right", "go", "go_async", "left", "right"]
