"""Tests for Eval: laziness, memoisation and stack safety."""

import pytest

from neoprelude import Eval


def count_down(n: int) -> Eval[int]:
    if n == 0:
        return Eval.now(0)
    return Eval.defer(lambda: count_down(n - 1)).map(lambda x: x + 1)


class Counter:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> int:
        self.calls += 1
        return self.calls


def test_now_evaluates_to_its_value() -> None:
    assert Eval.now(42).run() == 42


def test_map_and_flat_map() -> None:
    ev = Eval.now(2).map(lambda x: x * 3).flat_map(lambda x: Eval.now(x + 1))
    assert ev.run() == 7


def test_construction_runs_nothing() -> None:
    counter = Counter()
    ev = Eval.always(counter).map(lambda x: x + 1)
    assert counter.calls == 0
    assert ev.run() == 2


def test_once_is_memoised() -> None:
    counter = Counter()
    ev = Eval.once(counter)
    assert ev.run() == 1
    assert ev.run() == 1
    assert counter.calls == 1


def test_once_shared_by_several_chains() -> None:
    counter = Counter()
    shared = Eval.once(counter)
    assert shared.zip_with(shared, lambda x, y: x + y).run() == 2
    assert counter.calls == 1


def test_always_recomputes() -> None:
    counter = Counter()
    ev = Eval.always(counter)
    assert ev.run() == 1
    assert ev.run() == 2


def test_once_retries_after_a_failed_thunk() -> None:
    attempts = []

    def flaky() -> str:
        attempts.append(None)
        if len(attempts) == 1:
            raise RuntimeError("first attempt")
        return "ok"

    ev = Eval.once(flaky)
    with pytest.raises(RuntimeError, match="first attempt"):
        ev.run()
    assert ev.run() == "ok"
    assert ev.run() == "ok"
    assert len(attempts) == 2


def test_deep_flat_map_chain_is_stack_safe() -> None:
    ev = Eval.now(0)
    for _ in range(100_000):
        ev = ev.flat_map(lambda x: Eval.now(x + 1))
    assert ev.run() == 100_000


def test_deep_recursive_defer_is_stack_safe() -> None:
    assert count_down(100_000).run() == 100_000


def test_go_drives_a_generator() -> None:
    def total():
        x = yield Eval.now(1)
        y = yield Eval.always(lambda: 2)
        return x + y

    assert Eval.go(total).run() == 3


def test_go_restarts_the_generator_on_each_run() -> None:
    counter = Counter()

    def procedure():
        value = yield Eval.always(counter)
        return value * 10

    ev = Eval.go(procedure)
    assert ev.run() == 10
    assert ev.run() == 20


def test_go_rejects_non_eval_yields() -> None:
    def procedure():
        yield 1

    with pytest.raises(TypeError, match="must yield Eval"):
        Eval.go(procedure).run()


def test_go_with_many_steps_is_stack_safe() -> None:
    def procedure():
        total = 0
        for i in range(20_000):
            total += yield Eval.now(i)
        return total

    assert Eval.go(procedure).run() == sum(range(20_000))


def test_reduce() -> None:
    ev = Eval.reduce([1, 2, 3, 4], lambda acc, x: Eval.now(acc + x), 0)
    assert ev.run() == 10


def test_collect_preserves_order() -> None:
    ev = Eval.collect([Eval.now("a"), Eval.always(lambda: "b"), Eval.once(lambda: "c")])
    assert ev.run() == ["a", "b", "c"]


def test_gather_builds_a_dict() -> None:
    ev = Eval.gather({"x": Eval.now(1), "y": Eval.now(2)})
    assert ev.run() == {"x": 1, "y": 2}


def test_zip_helpers() -> None:
    assert Eval.now(1).zip_fst(Eval.now(2)).run() == 1
    assert Eval.now(1).zip_snd(Eval.now(2)).run() == 2


def test_flatten() -> None:
    assert Eval.now(Eval.now("inner")).flatten().run() == "inner"


def test_cmb_lifts_the_result_semigroup() -> None:
    assert Eval.now([1]).cmb(Eval.now([2])).run() == [1, 2]


def test_continuation_must_return_eval() -> None:
    with pytest.raises(TypeError, match="must return Eval"):
        Eval.now(1).flat_map(lambda x: x + 1).run()


def test_exceptions_propagate_from_continuations() -> None:
    def boom(_: int) -> Eval[int]:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        Eval.now(1).flat_map(boom).run()
