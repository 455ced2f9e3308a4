"""
Validation: a success, or an accumulation of failures.

Unlike :class:`~neoprelude.either.Either`, collecting several validations does
not stop at the first failure. Every element is checked and the errors are
combined with :func:`neoprelude.cmb.cmb`::

    Validation.all([Ok(1), Err(["too short"]), Err(["no digits"])])
    # Err(val=["too short", "no digits"])

``go`` still short-circuits, since a generator cannot continue without the
value of the failed step.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar

from neoprelude._comprehension import Comprehensible
from neoprelude.builder import Builder
from neoprelude.cmb import cmb
from neoprelude.cmp import Ordering, OrdMixin, cmp
from neoprelude.errors import UnwrapError
from neoprelude.interpreter import interpret_all
from neoprelude.step import AuxOnly, Completed, CompletedWithAux, FinalOnly, Halted, Outcome, Step

if TYPE_CHECKING:
    from neoprelude.either import Either

E = TypeVar("E")
T = TypeVar("T")
E_co = TypeVar("E_co", covariant=True)
T_co = TypeVar("T_co", covariant=True)
U = TypeVar("U")
V = TypeVar("V")


class Validation(Comprehensible, OrdMixin, Generic[E_co, T_co], ord_root=True):
    """Sum type of ``Err`` and ``Ok`` with error accumulation."""

    __slots__ = ()

    @staticmethod
    def err(val: E) -> Validation[E, NoReturn]:
        return Err(val)

    @staticmethod
    def ok(val: T) -> Validation[NoReturn, T]:
        return Ok(val)

    @staticmethod
    def from_either(either: Either[E, T]) -> Validation[E, T]:
        """Convert ``Left`` to ``Err`` and ``Right`` to ``Ok``."""

        return either.match(Err, Ok)

    @classmethod
    def _from_outcome(cls, outcome: Outcome) -> Validation[Any, Any]:
        if isinstance(outcome, Halted):
            return Err(outcome.aux)
        if isinstance(outcome, (Completed, CompletedWithAux)):
            return Ok(outcome.value)
        raise AssertionError(f"unknown outcome: {outcome!r}")  # pragma: no cover

    @classmethod
    def _pure(cls, value: T) -> Validation[NoReturn, T]:
        return Ok(value)

    @classmethod
    def traverse_into(
        cls, elems: Iterable[U], f: Callable[[U], Any], builder: Builder[Any, Any]
    ) -> Validation[Any, Any]:
        """Validate every element, accumulating all failures.

        If any validation fails, the state of ``builder`` is unspecified.
        """

        return cls._from_outcome(
            interpret_all((f(elem) for elem in elems), cls._combine, builder)
        )

    def to_step(self) -> Step:
        if isinstance(self, Ok):
            return FinalOnly(self.val)
        return AuxOnly(self.val)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def match(self, on_err: Callable[[Any], U], on_ok: Callable[[Any], V]) -> U | V:
        if isinstance(self, Err):
            return on_err(self.val)
        return on_ok(self.val)

    def unwrap(self) -> T_co:
        if isinstance(self, Ok):
            return self.val
        raise UnwrapError(self, "Ok")

    def unwrap_err(self) -> E_co:
        if isinstance(self, Err):
            return self.val
        raise UnwrapError(self, "Err")

    def zip_with(
        self, that: Validation[Any, U], f: Callable[[T_co, U], V]
    ) -> Validation[Any, V]:
        """Combine two validations, accumulating both failures if both fail."""

        if isinstance(self, Err):
            return Err(cmb(self.val, that.val)) if isinstance(that, Err) else self
        if isinstance(that, Err):
            return that
        return Ok(f(self.val, that.val))

    def and_(self, that: Validation[Any, U]) -> Validation[Any, U]:
        return self.zip_with(that, lambda _, rhs: rhs)

    def lmap(self, f: Callable[[E_co], U]) -> Validation[U, T_co]:
        if isinstance(self, Err):
            return Err(f(self.val))
        return self

    def map(self, f: Callable[[T_co], U]) -> Validation[E_co, U]:
        if isinstance(self, Ok):
            return Ok(f(self.val))
        return self

    def cmp(self, other: Validation[Any, Any]) -> Ordering:
        """``Err`` sorts before ``Ok``; equal variants compare their values."""

        if isinstance(self, Err):
            return cmp(self.val, other.val) if isinstance(other, Err) else Ordering.LESS
        return cmp(self.val, other.val) if isinstance(other, Ok) else Ordering.GREATER

    def cmb(self, other: Validation[Any, Any]) -> Validation[Any, Any]:
        return self.zip_with(other, cmb)


@dataclass(frozen=True)
class Err(Validation[E, NoReturn], Generic[E]):
    """Accumulated failure."""

    val: E


@dataclass(frozen=True)
class Ok(Validation[NoReturn, T], Generic[T]):
    """Success."""

    val: T


err = Validation.err
ok = Validation.ok
go = Validation.go
wrap_go = Validation.wrap_go
traverse_into = Validation.traverse_into
traverse = Validation.traverse
for_each = Validation.for_each
collect_into = Validation.collect_into
all = Validation.all
all_props = Validation.all_props
lift = Validation.lift
traverse_into_par = Validation.traverse_into_par
traverse_par = Validation.traverse_par
for_each_par = Validation.for_each_par
collect_into_par = Validation.collect_into_par
all_par = Validation.all_par
all_props_par = Validation.all_props_par
lift_par = Validation.lift_par

__all__ = ["Err", "Ok", "Validation", "err", "ok"]
