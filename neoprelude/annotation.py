"""
Annotation: a value with an optional accumulated log.

``Value`` carries only a value; ``Note`` also carries a log. A comprehension
over annotations never halts. Logs are combined with
:func:`neoprelude.cmb.cmb` in the order they were written::

    @Annotation.wrap_go
    def double(x: int):
        yield Annotation.write([f"doubling {x}"])
        return x * 2
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from neoprelude._comprehension import Comprehensible
from neoprelude.cmb import cmb
from neoprelude.cmp import Ordering, OrdMixin, cmp
from neoprelude.fn import identity
from neoprelude.step import Both, Completed, CompletedWithAux, FinalOnly, Halted, Outcome, Step

T = TypeVar("T")
W = TypeVar("W")
T_co = TypeVar("T_co", covariant=True)
W_co = TypeVar("W_co", covariant=True)
U = TypeVar("U")
V = TypeVar("V")


class Annotation(Comprehensible, OrdMixin, Generic[T_co, W_co], ord_root=True):
    """Sum type of ``Value`` and ``Note``."""

    __slots__ = ()

    @staticmethod
    def value(val: T) -> Annotation[T, NoReturn]:
        return Value(val)

    @staticmethod
    def unit() -> Annotation[None, NoReturn]:
        return Value(None)

    @staticmethod
    def note(val: T, log: W) -> Annotation[T, W]:
        return Note(val, log)

    @staticmethod
    def write(log: W) -> Annotation[None, W]:
        """Write ``log`` without producing a meaningful value."""

        return Note(None, log)

    @classmethod
    def _from_outcome(cls, outcome: Outcome) -> Annotation[Any, Any]:
        if isinstance(outcome, CompletedWithAux):
            return Note(outcome.value, outcome.aux)
        if isinstance(outcome, Completed):
            return Value(outcome.value)
        if isinstance(outcome, Halted):
            raise AssertionError(f"annotations cannot halt: {outcome!r}")
        raise AssertionError(f"unknown outcome: {outcome!r}")  # pragma: no cover

    @classmethod
    def _pure(cls, value: T) -> Annotation[T, NoReturn]:
        return Value(value)

    def to_step(self) -> Step:
        if isinstance(self, Note):
            return Both(self.log, self.val)
        return FinalOnly(self.val)

    def is_value(self) -> bool:
        return isinstance(self, Value)

    def is_note(self) -> bool:
        return isinstance(self, Note)

    def match(
        self, on_value: Callable[[Any], U], on_note: Callable[[Any, Any], V]
    ) -> U | V:
        if isinstance(self, Note):
            return on_note(self.val, self.log)
        return on_value(self.val)

    def and_then(self, f: Callable[[T_co], Annotation[U, Any]]) -> Annotation[U, Any]:
        if isinstance(self, Value):
            return f(self.val)
        that = f(self.val)
        if isinstance(that, Value):
            return Note(that.val, self.log)
        return Note(that.val, cmb(self.log, that.log))

    def and_then_go(self, f: Callable[[T_co], Any]) -> Annotation[Any, Any]:
        return self.and_then(lambda val: Annotation.go(f(val)))

    def flatten(self) -> Annotation[Any, Any]:
        return self.and_then(identity)

    def and_(self, that: Annotation[U, Any]) -> Annotation[U, Any]:
        return self.and_then(lambda _: that)

    def zip_with(
        self, that: Annotation[U, Any], f: Callable[[T_co, U], V]
    ) -> Annotation[V, Any]:
        return self.and_then(lambda lhs: that.map(lambda rhs: f(lhs, rhs)))

    def map(self, f: Callable[[T_co], U]) -> Annotation[U, W_co]:
        if isinstance(self, Note):
            return Note(f(self.val), self.log)
        return Value(f(self.val))

    def map_log(self, f: Callable[[W_co], U]) -> Annotation[T_co, U]:
        if isinstance(self, Note):
            return Note(self.val, f(self.log))
        return self

    def notate_with(self, f: Callable[[T_co], Any]) -> Annotation[T_co, Any]:
        """Append a log computed from the value."""

        return self.and_then(lambda val: Note(val, f(val)))

    def notate(self, log: Any) -> Annotation[T_co, Any]:
        return self.notate_with(lambda _: log)

    def erase_log(self) -> Annotation[T_co, NoReturn]:
        if isinstance(self, Note):
            return Value(self.val)
        return self

    def cmp(self, other: Annotation[Any, Any]) -> Ordering:
        """``Value`` sorts before ``Note``; notes compare ``(val, log)``."""

        if isinstance(self, Value):
            return cmp(self.val, other.val) if isinstance(other, Value) else Ordering.LESS
        if isinstance(other, Note):
            return cmp(self.val, other.val).cmb(cmp(self.log, other.log))
        return Ordering.GREATER

    def cmb(self, other: Annotation[Any, Any]) -> Annotation[Any, Any]:
        return self.zip_with(other, cmb)


@dataclass(frozen=True)
class Value(Annotation[T, NoReturn], Generic[T]):
    val: T


@dataclass(frozen=True)
class Note(Annotation[T, W], Generic[T, W]):
    val: T
    log: W


value = Annotation.value
unit = Annotation.unit
note = Annotation.note
write = Annotation.write
go = Annotation.go
wrap_go = Annotation.wrap_go
reduce = Annotation.reduce
traverse_into = Annotation.traverse_into
traverse = Annotation.traverse
for_each = Annotation.for_each
collect_into = Annotation.collect_into
all = Annotation.all
all_props = Annotation.all_props
lift = Annotation.lift

__all__ = ["Annotation", "Note", "Value", "go", "note", "unit", "value", "write"]
