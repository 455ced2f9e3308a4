"""Tests for equality and ordering."""

from neoprelude import Eq, Ordering, Reverse, clamp, cmp, eq, ge, gt, icmp, ieq, le, lt, ne
from neoprelude.cmp import max, min


def test_ordering_conversions() -> None:
    assert Ordering.from_number(-5) is Ordering.LESS
    assert Ordering.from_number(0) is Ordering.EQUAL
    assert Ordering.from_number(0.5) is Ordering.GREATER
    assert Ordering.GREATER.to_number() == 1
    assert Ordering.LESS.reverse() is Ordering.GREATER


def test_ordering_predicates() -> None:
    assert Ordering.LESS.is_lt() and Ordering.LESS.is_le() and Ordering.LESS.is_ne()
    assert Ordering.EQUAL.is_eq() and Ordering.EQUAL.is_ge()
    assert not Ordering.GREATER.is_le()


def test_ordering_cmb_is_lexicographic() -> None:
    assert Ordering.EQUAL.cmb(Ordering.LESS) is Ordering.LESS
    assert Ordering.GREATER.cmb(Ordering.LESS) is Ordering.GREATER
    assert Ordering.LESS.cmp(Ordering.GREATER) is Ordering.LESS


def test_cmp_falls_back_to_builtin_ordering() -> None:
    assert cmp(1, 2) is Ordering.LESS
    assert cmp("b", "a") is Ordering.GREATER
    assert cmp(3, 3) is Ordering.EQUAL


def test_derived_comparisons() -> None:
    assert lt(1, 2) and le(2, 2) and gt(3, 2) and ge(3, 3)
    assert eq([1], [1]) and ne(1, 2)


def test_min_max_prefer_the_first_on_ties() -> None:
    a, b = Reverse(1), Reverse(1)
    assert min(a, b) is a
    assert max(a, b) is a
    assert min(1, 2) == 1
    assert max(1, 2) == 2


def test_clamp() -> None:
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_iterable_comparisons() -> None:
    assert ieq([1, 2], (1, 2))
    assert not ieq([1, 2], [1, 2, 3])
    assert icmp([1, 2], [1, 3]) is Ordering.LESS
    assert icmp([1, 2], [1]) is Ordering.GREATER
    assert icmp([], []) is Ordering.EQUAL


def test_reverse_inverts_ordering() -> None:
    assert Reverse(1) > Reverse(2)
    assert sorted([Reverse(1), Reverse(3), Reverse(2)]) == [Reverse(3), Reverse(2), Reverse(1)]
    assert Reverse([1]).cmb(Reverse([2])) == Reverse([1, 2])


def test_eq_protocol_is_structural() -> None:
    assert isinstance(1, Eq)
    assert isinstance(Reverse(1), Eq)
