"""Tests for Pair."""

from neoprelude import Ordering, Pair, cmb, cmp


def test_components_and_conversions() -> None:
    pair = Pair.from_tuple((1, "a"))
    assert pair == Pair(1, "a")
    assert pair.fst == 1
    assert pair.snd == "a"
    assert pair.val == (1, "a")


def test_unwrap_applies_both_components() -> None:
    assert Pair(2, 3).unwrap(lambda x, y: x * y) == 6


def test_maps_touch_one_side() -> None:
    assert Pair(1, 2).map_fst(str) == Pair("1", 2)
    assert Pair(1, 2).map_snd(str) == Pair(1, "2")
    assert Pair(1, 2).lmap(str) == Pair("1", 2)
    assert Pair(1, 2).map(str) == Pair(1, "2")


def test_ordering_is_lexicographic() -> None:
    assert cmp(Pair(1, "b"), Pair(2, "a")) is Ordering.LESS
    assert cmp(Pair(1, "b"), Pair(1, "a")) is Ordering.GREATER
    assert cmp(Pair(1, "a"), Pair(1, "a")) is Ordering.EQUAL
    assert sorted([Pair(2, 0), Pair(1, 5), Pair(1, 2)]) == [Pair(1, 2), Pair(1, 5), Pair(2, 0)]


def test_cmb_is_component_wise() -> None:
    assert cmb(Pair([1], "a"), Pair([2], "b")) == Pair([1, 2], "ab")


def test_pairs_are_hashable() -> None:
    assert len({Pair(1, 2), Pair(1, 2), Pair(2, 1)}) == 2
