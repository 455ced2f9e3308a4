"""
Deferred, stack-safe evaluation.

An :class:`Eval` describes a computation without running it. ``run()``
evaluates it with an explicit continuation stack instead of Python recursion,
so chains of any depth evaluate in constant Python stack space::

    def count_down(n: int) -> Eval[int]:
        if n == 0:
            return Eval.now(0)
        return Eval.defer(lambda: count_down(n - 1)).map(lambda x: x + 1)

    count_down(100_000).run()  # 100000

Generator comprehensions are supported through :meth:`Eval.go`::

    @Eval.go
    def total():
        x = yield Eval.now(1)
        y = yield Eval.always(lambda: 2)
        return x + y
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Iterable, Mapping, Sequence
from typing import Any, Generic, TypeVar

from neoprelude.cmb import cmb
from neoprelude.fn import identity
from neoprelude.utils import DEBUG_STEPS

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
K = TypeVar("K")

logger = logging.getLogger(__name__)


class _Now:
    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value


class _Once:
    """Memoised thunk. ``done`` flips to ``True`` once and never back."""

    __slots__ = ("thunk", "done", "value")

    def __init__(self, thunk: Callable[[], Any]) -> None:
        self.thunk: Callable[[], Any] | None = thunk
        self.done = False
        self.value: Any = None

    def force(self) -> Any:
        if not self.done:
            assert self.thunk is not None
            self.value = self.thunk()
            self.thunk = None
            self.done = True
        return self.value


class _Always:
    __slots__ = ("thunk",)

    def __init__(self, thunk: Callable[[], Any]) -> None:
        self.thunk = thunk


class _FlatMap:
    __slots__ = ("inner", "continuation")

    def __init__(self, inner: Eval[Any], continuation: Callable[[Any], Eval[Any]]) -> None:
        self.inner = inner
        self.continuation = continuation


def _step(gen: Generator[Eval[Any], Any, T], value: Any) -> Eval[T]:
    try:
        ev = gen.send(value)
    except StopIteration as stop:
        return Eval.now(stop.value)
    if not isinstance(ev, Eval):
        raise TypeError(f"Eval.go generators must yield Eval instances, got {ev!r}")
    return ev.flat_map(lambda x: _step(gen, x))


class Eval(Generic[T]):
    """A lazily evaluated computation producing a ``T``."""

    __slots__ = ("_instr",)

    def __init__(self, instr: _Now | _Once | _Always | _FlatMap) -> None:
        self._instr = instr

    def __repr__(self) -> str:
        return f"Eval({type(self._instr).__name__.lstrip('_')})"

    @staticmethod
    def now(value: T) -> Eval[T]:
        """An already-computed value."""

        return Eval(_Now(value))

    @staticmethod
    def once(thunk: Callable[[], T]) -> Eval[T]:
        """A value computed on first evaluation and cached afterwards."""

        return Eval(_Once(thunk))

    @staticmethod
    def always(thunk: Callable[[], T]) -> Eval[T]:
        """A value recomputed on every evaluation."""

        return Eval(_Always(thunk))

    @staticmethod
    def defer(thunk: Callable[[], Eval[T]]) -> Eval[T]:
        """Delay the construction of an ``Eval`` until it is evaluated."""

        return Eval.now(None).flat_map(lambda _: thunk())

    @staticmethod
    def go(genfunc: Callable[[], Generator[Eval[Any], Any, T]]) -> Eval[T]:
        """Build an ``Eval`` from a generator function yielding ``Eval`` values.

        The generator is created afresh on every evaluation.
        """

        return Eval.defer(lambda: _step(genfunc(), None))

    @staticmethod
    def reduce(
        elems: Iterable[U], accum: Callable[[T, U], Eval[T]], initial: T
    ) -> Eval[T]:
        def reducer() -> Generator[Eval[Any], Any, T]:
            acc = initial
            for elem in elems:
                acc = yield accum(acc, elem)
            return acc

        return Eval.go(reducer)

    @staticmethod
    def collect(evals: Sequence[Eval[Any]]) -> Eval[list[Any]]:
        """Evaluate a sequence of ``Eval`` from left to right into a list."""

        def collector() -> Generator[Eval[Any], Any, list[Any]]:
            results = []
            for ev in evals:
                results.append((yield ev))
            return results

        return Eval.go(collector)

    @staticmethod
    def gather(evals: Mapping[K, Eval[Any]]) -> Eval[dict[K, Any]]:
        """Evaluate a mapping of ``Eval`` in key order into a dict."""

        def gatherer() -> Generator[Eval[Any], Any, dict[K, Any]]:
            results = {}
            for key, ev in evals.items():
                results[key] = yield ev
            return results

        return Eval.go(gatherer)

    def flat_map(self, f: Callable[[T], Eval[U]]) -> Eval[U]:
        return Eval(_FlatMap(self, f))

    def flatten(self: Eval[Eval[U]]) -> Eval[U]:
        return self.flat_map(identity)

    def map(self, f: Callable[[T], U]) -> Eval[U]:
        return self.flat_map(lambda x: Eval.now(f(x)))

    def zip_with(self, that: Eval[U], f: Callable[[T, U], V]) -> Eval[V]:
        return self.flat_map(lambda x: that.map(lambda y: f(x, y)))

    def zip_fst(self, that: Eval[Any]) -> Eval[T]:
        return self.zip_with(that, lambda x, _: x)

    def zip_snd(self, that: Eval[U]) -> Eval[U]:
        return self.flat_map(lambda _: that)

    def cmb(self, that: Eval[T]) -> Eval[T]:
        """Lift the semigroup of the results."""

        return self.zip_with(that, cmb)

    def run(self) -> T:
        """Evaluate the computation.

        Exceptions raised by thunks or continuations propagate immediately;
        there is no partial result.
        """

        stack: list[Callable[[Any], Eval[Any]]] = []
        current: Eval[Any] = self
        while True:
            instr = current._instr
            if isinstance(instr, _FlatMap):
                stack.append(instr.continuation)
                current = instr.inner
                continue
            if isinstance(instr, _Now):
                value = instr.value
            elif isinstance(instr, _Once):
                value = instr.force()
            else:
                value = instr.thunk()
            if not stack:
                return value
            current = stack.pop()(value)
            if not isinstance(current, Eval):
                raise TypeError(f"Eval continuations must return Eval, got {current!r}")
            if DEBUG_STEPS:
                logger.debug(f"eval: {current!r} (pending {len(stack)})")


__all__ = ["Eval"]
