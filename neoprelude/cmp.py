"""
Equality and ordering interfaces.

Python's own ``==`` is the equality interface: the sum types in this package
are frozen dataclasses and compare structurally. Ordering is expressed as a
three-way comparison returning :class:`Ordering`. Types opt in by implementing
``cmp(self, other) -> Ordering``; any other value falls back to the builtin
``<`` operator, so ``cmp(1, 2)`` and ``cmp("a", "b")`` work out of the box.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from neoprelude.cmb import cmb as _cmb

T = TypeVar("T")


@runtime_checkable
class Eq(Protocol):
    """A type with an equivalence relation, expressed through ``==``."""

    def __eq__(self, other: object) -> bool: ...


@runtime_checkable
class Ord(Protocol):
    """A type with a total order expressed as a three-way comparison."""

    def cmp(self, other: Any) -> "Ordering": ...


class Ordering(Enum):
    """The result of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_number(cls, n: float) -> "Ordering":
        """Map a negative, zero or positive number to an ordering."""

        if n < 0:
            return cls.LESS
        if n > 0:
            return cls.GREATER
        return cls.EQUAL

    def to_number(self) -> int:
        return self.value

    def is_eq(self) -> bool:
        return self is Ordering.EQUAL

    def is_ne(self) -> bool:
        return self is not Ordering.EQUAL

    def is_lt(self) -> bool:
        return self is Ordering.LESS

    def is_gt(self) -> bool:
        return self is Ordering.GREATER

    def is_le(self) -> bool:
        return self is not Ordering.GREATER

    def is_ge(self) -> bool:
        return self is not Ordering.LESS

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)

    def cmp(self, other: "Ordering") -> "Ordering":
        return Ordering.from_number(self.value - other.value)

    def cmb(self, other: "Ordering") -> "Ordering":
        """Lexicographic combination: the first non-equal ordering wins."""

        return other if self is Ordering.EQUAL else self


def eq(x: Any, y: Any) -> bool:
    return x == y


def ne(x: Any, y: Any) -> bool:
    return not x == y


def ieq(xs: Iterable[Any], ys: Iterable[Any]) -> bool:
    """Test two iterables for element-wise equality, including length."""

    sentinel = object()
    its = iter(xs), iter(ys)
    while True:
        x = next(its[0], sentinel)
        y = next(its[1], sentinel)
        if x is sentinel or y is sentinel:
            return x is y
        if ne(x, y):
            return False


def cmp(x: Any, y: Any) -> Ordering:
    """Compare two values of the same type."""

    method = getattr(x, "cmp", None)
    if method is not None and callable(method):
        return method(y)
    if x < y:
        return Ordering.LESS
    if y < x:
        return Ordering.GREATER
    return Ordering.EQUAL


def icmp(xs: Iterable[Any], ys: Iterable[Any]) -> Ordering:
    """Compare two iterables lexicographically."""

    sentinel = object()
    its = iter(xs), iter(ys)
    while True:
        x = next(its[0], sentinel)
        y = next(its[1], sentinel)
        if x is sentinel:
            return Ordering.EQUAL if y is sentinel else Ordering.LESS
        if y is sentinel:
            return Ordering.GREATER
        ordering = cmp(x, y)
        if ordering.is_ne():
            return ordering


def lt(x: Any, y: Any) -> bool:
    return cmp(x, y).is_lt()


def gt(x: Any, y: Any) -> bool:
    return cmp(x, y).is_gt()


def le(x: Any, y: Any) -> bool:
    return cmp(x, y).is_le()


def ge(x: Any, y: Any) -> bool:
    return cmp(x, y).is_ge()


def min(x: T, y: T) -> T:
    """Return the lesser of two values, or ``x`` when they are equal."""

    return x if le(x, y) else y


def max(x: T, y: T) -> T:
    """Return the greater of two values, or ``x`` when they are equal."""

    return x if ge(x, y) else y


def clamp(x: T, lo: T, hi: T) -> T:
    """Restrict ``x`` to the inclusive interval ``[lo, hi]``."""

    return min(max(x, lo), hi)


class OrdMixin:
    """Derive Python's rich comparison operators from ``cmp``.

    Subclasses implement ``cmp``. A base class declared with
    ``ord_root=True`` makes all of its subclasses mutually comparable; other
    operands return ``NotImplemented`` so Python raises its usual
    ``TypeError``.
    """

    __slots__ = ()

    _ord_family: type | None = None

    def __init_subclass__(cls, ord_root: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if ord_root:
            cls._ord_family = cls

    def _comparable(self, other: Any) -> bool:
        family = self._ord_family or type(self)
        return isinstance(other, family)

    def cmp(self, other: Any) -> Ordering:  # pragma: no cover - abstract
        raise NotImplementedError

    def __lt__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.cmp(other).is_lt()

    def __le__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.cmp(other).is_le()

    def __gt__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.cmp(other).is_gt()

    def __ge__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.cmp(other).is_ge()


class Reverse(OrdMixin, Generic[T]):
    """Wrapper that inverts the ordering of the wrapped value."""

    __slots__ = ("val",)

    def __init__(self, val: T) -> None:
        self.val = val

    def __repr__(self) -> str:
        return f"Reverse({self.val!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return eq(self.val, other.val)

    def __hash__(self) -> int:
        return hash(("Reverse", self.val))

    def cmp(self, other: "Reverse[T]") -> Ordering:
        return cmp(self.val, other.val).reverse()

    def cmb(self, other: "Reverse[T]") -> "Reverse[T]":
        return Reverse(_cmb(self.val, other.val))


__all__ = [
    "Eq",
    "Ord",
    "OrdMixin",
    "Ordering",
    "Reverse",
    "clamp",
    "cmp",
    "eq",
    "ge",
    "gt",
    "icmp",
    "ieq",
    "le",
    "lt",
    "max",
    "min",
    "ne",
]
