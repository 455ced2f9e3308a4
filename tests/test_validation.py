"""Tests for Validation: collectors accumulate every failure."""

import pytest

from neoprelude import Either, UnwrapError, Validation
from neoprelude.validation import Err, Ok


def check_length(password: str) -> Validation[list[str], str]:
    return Ok(password) if len(password) >= 8 else Err(["too short"])


def check_digits(password: str) -> Validation[list[str], str]:
    return Ok(password) if any(c.isdigit() for c in password) else Err(["no digits"])


def test_constructors_and_conversion() -> None:
    assert Validation.err("e") == Err("e")
    assert Validation.ok(1) == Ok(1)
    assert Validation.from_either(Either.left("e")) == Err("e")
    assert Validation.from_either(Either.right(1)) == Ok(1)


def test_all_accumulates_every_failure() -> None:
    result = Validation.all([Ok(1), Err(["too short"]), Err(["no digits"])])
    assert result == Err(["too short", "no digits"])


def test_traverse_checks_every_element() -> None:
    seen = []

    def check(x: int) -> Validation[list[str], int]:
        seen.append(x)
        return Ok(x) if x > 0 else Err([f"bad {x}"])

    assert Validation.traverse([1, -1, 2, -2], check) == Err(["bad -1", "bad -2"])
    assert seen == [1, -1, 2, -2]
    assert Validation.traverse([1, 2], check) == Ok([1, 2])


def test_all_props() -> None:
    result = Validation.all_props({"a": Err(["x"]), "b": Ok(1), "c": Err(["y"])})
    assert result == Err(["x", "y"])
    assert Validation.all_props({"a": Ok(1)}) == Ok({"a": 1})


def test_go_short_circuits() -> None:
    def procedure():
        yield Err(["first"])
        yield Err(["second"])

    assert Validation.go(procedure()) == Err(["first"])


def test_zip_with_accumulates() -> None:
    password = "short"
    combined = check_length(password).zip_with(check_digits(password), lambda a, _: a)
    assert combined == Err(["too short", "no digits"])
    assert Ok(1).zip_with(Ok(2), lambda x, y: x + y) == Ok(3)
    assert Ok(1).and_(Err(["e"])) == Err(["e"])


def test_unwrap_and_match() -> None:
    assert Ok(1).unwrap() == 1
    assert Err("e").unwrap_err() == "e"
    with pytest.raises(UnwrapError):
        Err("e").unwrap()
    assert Err("e").match(lambda e: f"err {e}", str) == "err e"


def test_maps_ordering_and_cmb() -> None:
    assert Ok(1).map(str) == Ok("1")
    assert Err(1).lmap(str) == Err("1")
    assert Err(9) < Ok(0)
    assert Ok([1]).cmb(Ok([2])) == Ok([1, 2])
    assert Err(["a"]).cmb(Err(["b"])) == Err(["a", "b"])


def test_lift_reports_every_failure() -> None:
    pair = Validation.lift(lambda x, y: (x, y))
    assert pair(Err(["x"]), Err(["y"])) == Err(["x", "y"])
    assert pair(Ok(1), Ok(2)) == Ok((1, 2))


@pytest.mark.asyncio
async def test_all_par_accumulates_in_resolution_order(delayed) -> None:
    result = await Validation.all_par([delayed(Err(["slow"]), 0.02), delayed(Err(["fast"]))])
    assert result == Err(["fast", "slow"])
