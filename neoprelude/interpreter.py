"""
Comprehension interpreters for the neoprelude sum types.

A *procedure* is an ordinary generator. Each ``yield`` hands the interpreter a
value convertible to a :data:`~neoprelude.step.Step`; the interpreter either
sends the step's value back into the generator or halts it. Auxiliary data
carried by the steps is merged with a ``combine`` function, which defaults to
:func:`neoprelude.cmb.cmb`.

Halting forces the procedure to terminate by throwing ``GeneratorExit`` into
it. ``finally`` blocks therefore run, and anything they yield is driven through
the same loop before the run finishes::

    def procedure():
        try:
            x = yield Ior.right(1)
            yield Ior.left(["boom"])
            return x
        finally:
            yield Ior.both(["cleanup"], None)

    interpret(procedure())  # Halted(aux=["boom", "cleanup"])

Exceptions raised by the procedure, by the values it yields, or by ``combine``
are never caught here; they propagate to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Generator, Hashable, Iterable, Sequence
from typing import Any, TypeVar

from neoprelude.builder import Builder, ListIndexBuilder, ListPushBuilder
from neoprelude.cmb import Combine, cmb
from neoprelude.step import (
    AuxOnly,
    Both,
    Completed,
    CompletedWithAux,
    FinalOnly,
    Halted,
    Outcome,
    Step,
    to_step,
)
from neoprelude.utils import DEBUG_STEPS, describe, is_awaitable

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Distinguishes "nothing accumulated" from an accumulated ``None``
_ABSENT: Any = object()

Procedure = Generator[Any, Any, T]


class _Accumulator:
    """Optional auxiliary value, merged but never replaced."""

    __slots__ = ("_combine", "value")

    def __init__(self, combine: Combine) -> None:
        self._combine = combine
        self.value = _ABSENT

    @property
    def present(self) -> bool:
        return self.value is not _ABSENT

    def merge(self, aux: Any) -> None:
        if self.value is _ABSENT:
            self.value = aux
        else:
            self.value = self._combine(self.value, aux)

    def outcome(self, halted: bool, value: Any) -> Outcome:
        if halted:
            return Halted(self.value)
        if self.value is _ABSENT:
            return Completed(value)
        return CompletedWithAux(value, self.value)


class _Driver:
    """State machine shared by the sync and the sequential async loop.

    ``resume`` consumes one step and returns the procedure's next yielded
    item. ``StopIteration`` and, after a halt, ``GeneratorExit`` escape from it
    to signal that the procedure has finished.
    """

    __slots__ = ("_procedure", "acc", "halted")

    def __init__(self, procedure: Generator[Any, Any, Any], combine: Combine) -> None:
        self._procedure = procedure
        self.acc = _Accumulator(combine)
        self.halted = False

    def start(self) -> Any:
        return next(self._procedure)

    def resume(self, step: Step) -> Any:
        if DEBUG_STEPS:
            logger.debug(f"step: {describe(step)}")
        if isinstance(step, FinalOnly):
            return self._procedure.send(step.value)
        if isinstance(step, Both):
            self.acc.merge(step.aux)
            return self._procedure.send(step.value)
        if isinstance(step, AuxOnly):
            self.acc.merge(step.aux)
            if not self.halted:
                logger.debug(f"halt: {describe(step.aux)}")
            self.halted = True
            if DEBUG_STEPS:
                logger.debug("forcing procedure termination")
            return self._procedure.throw(GeneratorExit())
        raise AssertionError(f"unknown step: {step!r}")  # pragma: no cover

    def fail(self, exc: BaseException) -> Any:
        if DEBUG_STEPS:
            logger.debug(f"raising into procedure: {exc!r}")
        return self._procedure.throw(exc)

    def finish(self, value: Any) -> Outcome:
        return self.acc.outcome(self.halted, value)


def interpret(procedure: Procedure[T], combine: Combine = cmb) -> Outcome:
    """Drive ``procedure`` to completion and summarise the run.

    Returns:
        ``Halted(aux)`` if any step halted, ``Completed(value)`` if the
        procedure returned without auxiliary data, otherwise
        ``CompletedWithAux(value, aux)``.
    """

    driver = _Driver(procedure, combine)
    try:
        current = driver.start()
        while True:
            current = driver.resume(to_step(current))
    except StopIteration as stop:
        return driver.finish(stop.value)
    except GeneratorExit:
        if not driver.halted:
            raise
        return driver.finish(None)


async def interpret_async(procedure: Procedure[T], combine: Combine = cmb) -> Outcome:
    """Like :func:`interpret`, but awaits every awaitable the procedure yields.

    The procedure stays suspended while a yielded awaitable resolves, so each
    computation is only created after the previous one has been consumed. An
    exception raised by an awaitable is thrown back into the procedure at the
    ``yield`` that produced it, so its ``try`` and ``finally`` blocks see it;
    if the procedure does not handle it, it propagates to the caller.
    """

    driver = _Driver(procedure, combine)
    try:
        current = driver.start()
        while True:
            if is_awaitable(current):
                try:
                    current = await current
                except BaseException as exc:
                    current = driver.fail(exc)
                    continue
            current = driver.resume(to_step(current))
    except StopIteration as stop:
        return driver.finish(stop.value)
    except GeneratorExit:
        if not driver.halted:
            raise
        return driver.finish(None)


def interpret_all(
    items: Iterable[Any],
    combine: Combine = cmb,
    builder: Builder[Any, Any] | None = None,
) -> Outcome:
    """Inspect every item, accumulating auxiliary data even after a halt.

    Values are added to ``builder`` (a list by default) until the first
    halting step; later values are dropped but their auxiliary data is still
    merged in order.
    """

    sink = ListPushBuilder() if builder is None else builder
    acc = _Accumulator(combine)
    halted = False
    for item in items:
        step = to_step(item)
        if isinstance(step, AuxOnly):
            acc.merge(step.aux)
            halted = True
            continue
        if isinstance(step, Both):
            acc.merge(step.aux)
        if not halted:
            sink.add(step.value)
    return acc.outcome(halted, None if halted else sink.finish())


async def _settle(computation: Any) -> Any:
    if is_awaitable(computation):
        return await computation
    return computation


class _FanOut:
    """Resolution handler for :func:`interpret_concurrent`.

    Callbacks run one at a time on the event loop, so the accumulator and the
    builder are only ever touched by one handler at a time.
    """

    def __init__(
        self,
        result: asyncio.Future[Outcome],
        combine: Combine,
        builder: Builder[Any, Any],
        remaining: int,
        keys: Sequence[Hashable] | None,
    ) -> None:
        self.result = result
        self._acc = _Accumulator(combine)
        self._builder = builder
        self._remaining = remaining
        self._keys = keys
        self._halted = False

    def on_done(self, idx: int, task: asyncio.Future[Any]) -> None:
        self._remaining -= 1
        if task.cancelled():
            if not self.result.done():
                self.result.cancel()
            return
        exc = task.exception()
        if exc is not None:
            self._fail(exc)
            return
        if self.result.done():
            return
        try:
            self._record(idx, to_step(task.result()))
        except Exception as exc:  # forwarded to the awaiting caller
            self._fail(exc)
            return
        if self._remaining == 0:
            self.result.set_result(self._acc.outcome(self._halted, self._finish()))

    def _record(self, idx: int, step: Step) -> None:
        if DEBUG_STEPS:
            logger.debug(f"resolved [{idx}]: {describe(step)}")
        if isinstance(step, AuxOnly):
            self._acc.merge(step.aux)
            if not self._halted:
                logger.debug(f"halt at [{idx}]: {describe(step.aux)}")
            self._halted = True
            return
        if isinstance(step, Both):
            self._acc.merge(step.aux)
        if not self._halted:
            item = step.value if self._keys is None else (self._keys[idx], step.value)
            self._builder.add(item)

    def _finish(self) -> Any:
        return None if self._halted else self._builder.finish()

    def _fail(self, exc: BaseException) -> None:
        if self.result.done():
            logger.debug(f"dropping late failure: {exc!r}")
            return
        self.result.set_exception(exc)


async def interpret_concurrent(
    computations: Iterable[Awaitable[Any] | Any],
    combine: Combine = cmb,
    builder: Builder[Any, Any] | None = None,
    *,
    keys: Sequence[Hashable] | None = None,
) -> Outcome:
    """Start every computation at once and join their outcomes.

    Each computation is an awaitable resolving to a steppable value, or an
    already-resolved steppable value. All of them are scheduled before any is
    inspected. Outcomes are handled in resolution order:

    - successes are added to ``builder`` (as ``(keys[i], value)`` pairs when
      ``keys`` is given, so an index- or key-aware builder can restore input
      order). Without a ``builder`` the values are collected into a list in
      input order;
    - auxiliary data is merged in resolution order;
    - after the first halt, values are discarded, but every remaining
      computation is still awaited and its auxiliary data merged.

    Nothing is ever cancelled. The first exception raised by a computation is
    re-raised to the caller; the other computations keep running.
    """

    pending = list(computations)
    if keys is not None and len(keys) != len(pending):
        raise ValueError(f"expected {len(pending)} keys, got {len(keys)}")
    if builder is None:
        sink: Builder[Any, Any] = ListIndexBuilder()
        if keys is None:
            keys = range(len(pending))
    else:
        sink = builder
    tasks = [asyncio.ensure_future(_settle(computation)) for computation in pending]
    if not tasks:
        return Completed(sink.finish())

    loop = asyncio.get_running_loop()
    fan_out = _FanOut(loop.create_future(), combine, sink, len(tasks), keys)
    if DEBUG_STEPS:
        logger.debug(f"fan-out started: {len(tasks)} computations")
    for idx, task in enumerate(tasks):
        task.add_done_callback(lambda done, idx=idx: fan_out.on_done(idx, done))
    return await fan_out.result


__all__ = [
    "Procedure",
    "interpret",
    "interpret_all",
    "interpret_async",
    "interpret_concurrent",
]
