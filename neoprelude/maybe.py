"""
Maybe: an optional value.

``Just`` wraps a present value and ``Nothing`` marks its absence. Yielding
``Nothing`` in a comprehension halts the generator and the result is
``Nothing``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final, Generic, NoReturn, TypeVar

from neoprelude._comprehension import Comprehensible
from neoprelude.cmb import cmb, keep_first
from neoprelude.cmp import Ordering, OrdMixin, cmp
from neoprelude.errors import UnwrapError
from neoprelude.step import AuxOnly, Completed, CompletedWithAux, FinalOnly, Halted, Outcome, Step

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
U = TypeVar("U")


class Maybe(Comprehensible, OrdMixin, Generic[T_co], ord_root=True):
    """Sum type of ``Just`` and ``Nothing``."""

    __slots__ = ()

    @staticmethod
    def just(val: T) -> Maybe[T]:
        return Just(val)

    @staticmethod
    def nothing() -> Maybe[NoReturn]:
        return NOTHING

    @staticmethod
    def from_optional(val: T | None) -> Maybe[T]:
        """``None`` becomes ``Nothing``; anything else is wrapped in ``Just``."""

        return NOTHING if val is None else Just(val)

    @staticmethod
    def wrap_fn(f: Callable[..., T | None]) -> Callable[..., Maybe[T]]:
        """Adapt a function returning an optional value to return ``Maybe``."""

        def wrapped(*args: Any, **kwargs: Any) -> Maybe[T]:
            return Maybe.from_optional(f(*args, **kwargs))

        return wrapped

    @staticmethod
    def wrap_pred(pred: Callable[[T], bool]) -> Callable[[T], Maybe[T]]:
        """Adapt a predicate to keep values that satisfy it."""

        def wrapped(val: T) -> Maybe[T]:
            return Just(val) if pred(val) else NOTHING

        return wrapped

    @classmethod
    def _combine(cls, lhs: Any, rhs: Any) -> Any:
        return keep_first(lhs, rhs)

    @classmethod
    def _from_outcome(cls, outcome: Outcome) -> Maybe[Any]:
        if isinstance(outcome, Halted):
            return NOTHING
        if isinstance(outcome, (Completed, CompletedWithAux)):
            return Just(outcome.value)
        raise AssertionError(f"unknown outcome: {outcome!r}")  # pragma: no cover

    @classmethod
    def _pure(cls, value: T) -> Maybe[T]:
        return Just(value)

    def to_step(self) -> Step:
        if isinstance(self, Just):
            return FinalOnly(self.val)
        return AuxOnly(None)

    def is_just(self) -> bool:
        return isinstance(self, Just)

    def is_nothing(self) -> bool:
        return isinstance(self, Nothing)

    def match(self, on_nothing: Callable[[], U], on_just: Callable[[Any], T]) -> U | T:
        if isinstance(self, Just):
            return on_just(self.val)
        return on_nothing()

    def unwrap(self) -> T_co:
        """Return the contained value or raise :class:`UnwrapError`."""

        if isinstance(self, Just):
            return self.val
        raise UnwrapError(self, "Just")

    def get_or(self, fallback: U) -> T_co | U:
        if isinstance(self, Just):
            return self.val
        return fallback

    def get_or_else(self, f: Callable[[], U]) -> T_co | U:
        if isinstance(self, Just):
            return self.val
        return f()

    def to_optional(self) -> T_co | None:
        if isinstance(self, Just):
            return self.val
        return None

    def or_else(self, f: Callable[[], Maybe[U]]) -> Maybe[T_co | U]:
        if isinstance(self, Just):
            return self
        return f()

    def or_(self, that: Maybe[U]) -> Maybe[T_co | U]:
        return self.or_else(lambda: that)

    def and_then(self, f: Callable[[T_co], Maybe[U]]) -> Maybe[U]:
        if isinstance(self, Just):
            return f(self.val)
        return NOTHING

    def and_then_go(self, f: Callable[[T_co], Any]) -> Maybe[Any]:
        return self.and_then(lambda val: Maybe.go(f(val)))

    def and_(self, that: Maybe[U]) -> Maybe[U]:
        return self.and_then(lambda _: that)

    def filter(self, pred: Callable[[T_co], bool]) -> Maybe[T_co]:
        return self.and_then(lambda val: Just(val) if pred(val) else NOTHING)

    def map(self, f: Callable[[T_co], U]) -> Maybe[U]:
        if isinstance(self, Just):
            return Just(f(self.val))
        return NOTHING

    def map_optional(self, f: Callable[[T_co], U | None]) -> Maybe[U]:
        """Map with ``f``, treating a ``None`` result as ``Nothing``."""

        return self.and_then(lambda val: Maybe.from_optional(f(val)))

    def zip_with(self, that: Maybe[U], f: Callable[[T_co, U], Any]) -> Maybe[Any]:
        return self.and_then(lambda lhs: that.map(lambda rhs: f(lhs, rhs)))

    def cmp(self, other: Maybe[Any]) -> Ordering:
        """``Nothing`` sorts before every ``Just``."""

        if isinstance(self, Nothing):
            return Ordering.EQUAL if isinstance(other, Nothing) else Ordering.LESS
        if isinstance(other, Nothing):
            return Ordering.GREATER
        return cmp(self.val, other.val)

    def cmb(self, other: Maybe[Any]) -> Maybe[Any]:
        """Combine contained values; ``Nothing`` is the identity."""

        if isinstance(self, Just):
            return Just(cmb(self.val, other.val)) if isinstance(other, Just) else self
        return other


@dataclass(frozen=True)
class Just(Maybe[T], Generic[T]):
    """Presence of a value."""

    val: T


class Nothing(Maybe[NoReturn]):
    """Singleton representing the absence of a value."""

    __slots__ = ()
    _instance: Nothing | None = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing()"


NOTHING: Final[Maybe[NoReturn]] = Nothing()

just = Maybe.just
nothing = Maybe.nothing
from_optional = Maybe.from_optional
go = Maybe.go
wrap_go = Maybe.wrap_go
reduce = Maybe.reduce
traverse_into = Maybe.traverse_into
traverse = Maybe.traverse
for_each = Maybe.for_each
collect_into = Maybe.collect_into
all = Maybe.all
all_props = Maybe.all_props
lift = Maybe.lift
go_async = Maybe.go_async
wrap_go_async = Maybe.wrap_go_async
traverse_into_par = Maybe.traverse_into_par
traverse_par = Maybe.traverse_par
for_each_par = Maybe.for_each_par
collect_into_par = Maybe.collect_into_par
all_par = Maybe.all_par
all_props_par = Maybe.all_props_par
lift_par = Maybe.lift_par

__all__ = ["NOTHING", "Just", "Maybe", "Nothing", "go", "go_async", "just", "nothing"]
