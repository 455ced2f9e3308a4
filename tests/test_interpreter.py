"""Tests for the synchronous comprehension interpreter."""

import pytest

from neoprelude import (
    AuxOnly,
    Both,
    Completed,
    CompletedWithAux,
    FinalOnly,
    Halted,
    NotSteppableError,
    interpret,
    interpret_all,
    keep_last,
)
from neoprelude.builder import ListIndexBuilder, NoOpBuilder


def test_completed_with_terminal_value() -> None:
    def procedure():
        x = yield FinalOnly(1)
        y = yield FinalOnly(2)
        return x + y

    assert interpret(procedure()) == Completed(3)


def test_procedure_without_steps() -> None:
    def procedure():
        return "done"
        yield  # pragma: no cover

    assert interpret(procedure()) == Completed("done")


def test_both_steps_merge_aux_in_order() -> None:
    def procedure():
        yield Both("a", 1)
        yield Both("b", 2)
        return 3

    assert interpret(procedure()) == CompletedWithAux(3, "ab")


def test_both_resumes_with_value() -> None:
    def procedure():
        x = yield Both(["first"], 10)
        y = yield FinalOnly(x + 1)
        return y

    assert interpret(procedure()) == CompletedWithAux(11, ["first"])


def test_aux_only_halts_before_next_step(events: list[str]) -> None:
    def procedure():
        yield AuxOnly("x")
        events.append("unreachable")
        yield FinalOnly(2)
        return 3

    assert interpret(procedure()) == Halted("x")
    assert events == []


def test_halt_merges_with_earlier_aux() -> None:
    def procedure():
        yield Both(["a"], 1)
        yield AuxOnly(["b"])
        return 2

    assert interpret(procedure()) == Halted(["a", "b"])


def test_cleanup_steps_are_merged_after_halt() -> None:
    def procedure():
        try:
            yield AuxOnly(["a1"])
        finally:
            yield Both(["a2"], None)
            yield Both(["a3"], None)

    assert interpret(procedure()) == Halted(["a1", "a2", "a3"])


def test_cleanup_receives_resumption_values(events: list[str]) -> None:
    def procedure():
        try:
            yield AuxOnly(["halt"])
        finally:
            value = yield FinalOnly("resumed")
            events.append(value)

    assert interpret(procedure()) == Halted(["halt"])
    assert events == ["resumed"]


def test_halting_cleanup_forces_termination_again(events: list[str]) -> None:
    def procedure():
        try:
            try:
                yield AuxOnly(["first"])
            finally:
                yield AuxOnly(["inner"])
                events.append("after inner halt")
        finally:
            yield Both(["outer"], None)

    assert interpret(procedure()) == Halted(["first", "inner", "outer"])
    assert events == []


def test_procedure_returning_after_generator_exit_is_still_halted() -> None:
    def procedure():
        try:
            yield AuxOnly("x")
        except GeneratorExit:
            return "ignored"

    assert interpret(procedure()) == Halted("x")


def test_exceptions_propagate_unchanged() -> None:
    def procedure():
        yield FinalOnly(1)
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        interpret(procedure())


def test_exceptions_from_cleanup_propagate() -> None:
    def procedure():
        try:
            yield AuxOnly("x")
        finally:
            raise RuntimeError("cleanup failed")

    with pytest.raises(RuntimeError, match="cleanup failed"):
        interpret(procedure())


def test_unsteppable_values_are_rejected() -> None:
    def procedure():
        yield 42

    with pytest.raises(NotSteppableError) as exc_info:
        interpret(procedure())

    assert isinstance(exc_info.value, TypeError)
    assert exc_info.value.value == 42


def test_custom_combine() -> None:
    def procedure():
        yield Both(1, None)
        yield Both(2, None)
        yield Both(3, None)
        return "sum"

    assert interpret(procedure(), combine=lambda a, b: a + b) == CompletedWithAux("sum", 6)


def test_accumulated_none_counts_as_present() -> None:
    def procedure():
        yield Both(None, 1)
        return 2

    assert interpret(procedure(), combine=keep_last) == CompletedWithAux(2, None)


def test_steppable_objects_are_converted() -> None:
    class Token:
        def __init__(self, step):
            self._step = step

        def to_step(self):
            return self._step

    def procedure():
        x = yield Token(FinalOnly(20))
        yield Token(Both(["note"], None))
        return x + 1

    assert interpret(procedure()) == CompletedWithAux(21, ["note"])


class TestInterpretAll:
    def test_collects_values(self) -> None:
        outcome = interpret_all([FinalOnly(1), Both("a", 2), Both("b", 3)])

        assert outcome == CompletedWithAux([1, 2, 3], "ab")

    def test_accumulates_every_halt(self, events: list[str]) -> None:
        def items():
            yield FinalOnly(1)
            yield AuxOnly(["e1"])
            events.append("kept going")
            yield Both(["w"], 3)
            yield AuxOnly(["e2"])

        assert interpret_all(items()) == Halted(["e1", "w", "e2"])
        assert events == ["kept going"]

    def test_uses_builder(self) -> None:
        outcome = interpret_all(
            [FinalOnly((1, "b")), FinalOnly((0, "a"))], builder=ListIndexBuilder()
        )

        assert outcome == Completed(["a", "b"])

    def test_empty(self) -> None:
        assert interpret_all([]) == Completed([])
        assert interpret_all([], builder=NoOpBuilder()) == Completed(None)
