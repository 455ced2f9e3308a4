"""
Shared comprehension API for the sum types.

Every sum type in the package is steppable and knows how to turn an interpreter
:data:`~neoprelude.step.Outcome` back into one of its own variants. Given those
two hooks, this mixin derives the whole family of comprehension helpers:
``go``, ``reduce``, the ``traverse``/``all`` collectors and their async and
concurrent counterparts.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator, Iterable, Mapping
from functools import wraps
from typing import Any, TypeVar

from neoprelude.builder import (
    Builder,
    DictEntryBuilder,
    ListIndexBuilder,
    ListPushBuilder,
    NoOpBuilder,
)
from neoprelude.cmb import cmb
from neoprelude.fn import identity
from neoprelude.interpreter import (
    interpret,
    interpret_async,
    interpret_concurrent,
)
from neoprelude.step import Outcome
from neoprelude.utils import is_awaitable

T = TypeVar("T")
U = TypeVar("U")
F = TypeVar("F", bound=Callable[..., Any])


class Comprehensible:
    """Mixin deriving comprehension helpers from ``_from_outcome``."""

    __slots__ = ()

    @classmethod
    def _combine(cls, lhs: Any, rhs: Any) -> Any:
        """Merge two auxiliary values encountered during one run."""

        return cmb(lhs, rhs)

    @classmethod
    def _combine_par(cls, lhs: Any, rhs: Any) -> Any:
        """Merge two auxiliary values in resolution order during a fan-out."""

        return cls._combine(lhs, rhs)

    @classmethod
    def _from_outcome(cls, outcome: Outcome) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError

    @classmethod
    def _pure(cls, value: Any) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError

    # -----------------------------------------------------------------
    # Synchronous
    # -----------------------------------------------------------------
    @classmethod
    def go(cls, gen: Generator[Any, Any, Any]) -> Any:
        """Interpret a generator that yields values of this type."""

        return cls._from_outcome(interpret(gen, cls._combine))

    @classmethod
    def wrap_go(cls, func: F) -> Callable[..., Any]:
        """Decorate a generator function so calling it runs :meth:`go`."""

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return cls.go(func(*args, **kwargs))

        wrapper.__annotations__ = {**getattr(func, "__annotations__", {}), "return": cls}
        return wrapper

    @classmethod
    def reduce(
        cls, elems: Iterable[T], accum: Callable[[U, T], Any], initial: U
    ) -> Any:
        """Fold ``elems`` with an accumulator returning values of this type."""

        def reducer() -> Generator[Any, Any, U]:
            acc = initial
            for elem in elems:
                acc = yield accum(acc, elem)
            return acc

        return cls.go(reducer())

    @classmethod
    def traverse_into(
        cls, elems: Iterable[T], f: Callable[[T], Any], builder: Builder[Any, Any]
    ) -> Any:
        """Map ``elems`` with ``f`` and feed the successes into ``builder``.

        ``f`` receives each element alone; traverse ``enumerate(elems)`` when
        the index is needed.
        """

        def traverser() -> Generator[Any, Any, Any]:
            for elem in elems:
                builder.add((yield f(elem)))
            return builder.finish()

        return cls.go(traverser())

    @classmethod
    def traverse(cls, elems: Iterable[T], f: Callable[[T], Any]) -> Any:
        return cls.traverse_into(elems, f, ListPushBuilder())

    @classmethod
    def for_each(cls, elems: Iterable[T], f: Callable[[T], Any]) -> Any:
        return cls.traverse_into(elems, f, NoOpBuilder())

    @classmethod
    def collect_into(cls, values: Iterable[Any], builder: Builder[Any, Any]) -> Any:
        return cls.traverse_into(values, identity, builder)

    @classmethod
    def all(cls, values: Iterable[Any]) -> Any:
        """Collect the successes of ``values`` into a list."""

        return cls.collect_into(values, ListPushBuilder())

    @classmethod
    def all_props(cls, values: Mapping[Any, Any]) -> Any:
        """Collect the successes of a mapping's values into a dict."""

        return cls.traverse_into(
            values.items(),
            lambda entry: entry[1].map(lambda val, key=entry[0]: (key, val)),
            DictEntryBuilder(),
        )

    @classmethod
    def lift(cls, f: Callable[..., T]) -> Callable[..., Any]:
        """Adapt ``f`` to take and return values of this type."""

        def lifted(*values: Any) -> Any:
            return cls.all(values).map(lambda args: f(*args))

        return lifted

    # -----------------------------------------------------------------
    # Asynchronous
    # -----------------------------------------------------------------
    @classmethod
    async def go_async(cls, gen: Generator[Any, Any, Any]) -> Any:
        """Interpret a generator that yields values of this type, or
        awaitables resolving to them, one at a time."""

        return cls._from_outcome(await interpret_async(gen, cls._combine))

    @classmethod
    def wrap_go_async(cls, func: F) -> Callable[..., Awaitable[Any]]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            return await cls.go_async(func(*args, **kwargs))

        wrapper.__annotations__ = {**getattr(func, "__annotations__", {}), "return": cls}
        return wrapper

    @classmethod
    async def traverse_into_par(
        cls, elems: Iterable[T], f: Callable[[T], Any], builder: Builder[Any, Any]
    ) -> Any:
        """Start ``f`` on every element at once and feed the successes into
        ``builder`` in resolution order.

        As with :meth:`traverse_into`, ``f`` receives each element alone.
        """

        computations = [f(elem) for elem in elems]
        return cls._from_outcome(
            await interpret_concurrent(computations, cls._combine_par, builder)
        )

    @classmethod
    async def traverse_par(cls, elems: Iterable[T], f: Callable[[T], Any]) -> Any:
        """Like :meth:`traverse_into_par`, collecting a list in input order."""

        computations = [f(elem) for elem in elems]
        return cls._from_outcome(
            await interpret_concurrent(
                computations,
                cls._combine_par,
                ListIndexBuilder(),
                keys=range(len(computations)),
            )
        )

    @classmethod
    async def for_each_par(cls, elems: Iterable[T], f: Callable[[T], Any]) -> Any:
        return await cls.traverse_into_par(elems, f, NoOpBuilder())

    @classmethod
    async def collect_into_par(
        cls, values: Iterable[Any], builder: Builder[Any, Any]
    ) -> Any:
        return await cls.traverse_into_par(values, identity, builder)

    @classmethod
    async def all_par(cls, values: Iterable[Any]) -> Any:
        return await cls.traverse_par(values, identity)

    @classmethod
    async def all_props_par(cls, values: Mapping[Any, Any]) -> Any:
        keys = list(values)
        return cls._from_outcome(
            await interpret_concurrent(
                [values[key] for key in keys],
                cls._combine_par,
                DictEntryBuilder(),
                keys=keys,
            )
        )

    @classmethod
    def lift_par(cls, f: Callable[..., Any]) -> Callable[..., Awaitable[Any]]:
        """Adapt ``f`` (sync or async) to take values of this type, or
        awaitables of them, evaluated concurrently."""

        async def resolve(awaitable: Awaitable[Any]) -> Any:
            return cls._pure(await awaitable)

        async def lifted(*values: Any) -> Any:
            def procedure() -> Generator[Any, Any, Any]:
                args = yield cls.all_par(values)
                result = f(*args)
                if is_awaitable(result):
                    result = yield resolve(result)
                return result

            return await cls.go_async(procedure())

        return lifted


__all__ = ["Comprehensible"]
