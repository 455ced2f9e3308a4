"""Tests for Annotation: values with an accumulated log."""

from neoprelude import Annotation
from neoprelude.annotation import Note, Value


def test_constructors() -> None:
    assert Annotation.value(1) == Value(1)
    assert Annotation.unit() == Value(None)
    assert Annotation.note(1, ["log"]) == Note(1, ["log"])
    assert Annotation.write(["log"]) == Note(None, ["log"])


def test_go_collects_the_log_in_order() -> None:
    @Annotation.wrap_go
    def double(x: int):
        yield Annotation.write([f"doubling {x}"])
        doubled = yield Annotation.note(x * 2, ["done"])
        return doubled

    assert double(2) == Note(4, ["doubling 2", "done"])


def test_go_without_logs_is_a_value() -> None:
    def procedure():
        x = yield Value(1)
        return x + 1

    assert Annotation.go(procedure()) == Value(2)


def test_and_then_combines_logs() -> None:
    assert Note(1, "a").and_then(lambda x: Note(x + 1, "b")) == Note(2, "ab")
    assert Note(1, "a").and_then(lambda x: Value(x + 1)) == Note(2, "a")
    assert Value(1).and_then(lambda x: Note(x, "b")) == Note(1, "b")
    assert Note(Note(1, "b"), "a").flatten() == Note(1, "ab")


def test_log_helpers() -> None:
    assert Value(1).notate("a") == Note(1, "a")
    assert Note(1, "a").notate_with(str) == Note(1, "a1")
    assert Note(1, "a").map_log(str.upper) == Note(1, "A")
    assert Note(1, "a").erase_log() == Value(1)
    assert Note(1, "a").map(str) == Note("1", "a")


def test_match() -> None:
    assert Value(1).match(lambda v: ("v", v), lambda v, w: ("n", v, w)) == ("v", 1)
    assert Note(1, "a").match(lambda v: ("v", v), lambda v, w: ("n", v, w)) == ("n", 1, "a")


def test_ordering_and_cmb() -> None:
    assert Value(9) < Note(0, "")
    assert Note(1, "a") < Note(1, "b")
    assert Value([1]).cmb(Note([2], "w")) == Note([1, 2], "w")


def test_traverse_collects_logs() -> None:
    result = Annotation.traverse([1, 2], lambda x: Note(x, [f"saw {x}"]))
    assert result == Note([1, 2], ["saw 1", "saw 2"])
