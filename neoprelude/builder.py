"""
Builders: mutable output sinks used by the traversal helpers.

A builder receives elements one at a time through ``add`` and produces its
result with ``finish``. Traversals that can halt leave their builder in an
unspecified state when they do.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from frozendict import frozendict

from neoprelude.cmb import cmb

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)
R_co = TypeVar("R_co", covariant=True)
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@runtime_checkable
class Builder(Protocol[T_contra, R_co]):
    """An accumulator of elements that produces a final result."""

    def add(self, elem: T_contra) -> None: ...

    def finish(self) -> R_co: ...


class StringBuilder(ABC):
    def __init__(self, initial: str = "") -> None:
        self._val = initial

    @abstractmethod
    def add(self, elem: str) -> None: ...

    def finish(self) -> str:
        return self._val


class StringAppendBuilder(StringBuilder):
    def add(self, elem: str) -> None:
        self._val += elem


class StringPrependBuilder(StringBuilder):
    def add(self, elem: str) -> None:
        self._val = elem + self._val


class ListBuilder(ABC, Generic[T]):
    def __init__(self, initial: list[T] | None = None) -> None:
        self._elems: list[T] = [] if initial is None else initial

    @abstractmethod
    def add(self, elem: Any) -> None: ...

    def finish(self) -> list[T]:
        return self._elems


class ListPushBuilder(ListBuilder[T]):
    def add(self, elem: T) -> None:
        self._elems.append(elem)


class ListUnshiftBuilder(ListBuilder[T]):
    def add(self, elem: T) -> None:
        self._elems.insert(0, elem)


class ListConcatBuilder(ListBuilder[T]):
    def add(self, elem: list[T]) -> None:
        self._elems.extend(elem)


class ListIndexBuilder(Generic[T]):
    """Place ``(index, value)`` pairs at their index, whatever the arrival order.

    ``finish`` returns the values ordered by index. The concurrent traversals
    use this to keep results in input order.
    """

    def __init__(self) -> None:
        self._slots: dict[int, T] = {}

    def add(self, elem: tuple[int, T]) -> None:
        idx, val = elem
        self._slots[idx] = val

    def finish(self) -> list[T]:
        return [self._slots[idx] for idx in sorted(self._slots)]


class DictEntryBuilder(Generic[K, V]):
    """Collect ``(key, value)`` pairs into a ``dict``."""

    def __init__(self, initial: dict[K, V] | None = None) -> None:
        self._elems: dict[K, V] = {} if initial is None else initial

    def add(self, elem: tuple[K, V]) -> None:
        key, val = elem
        self._elems[key] = val

    def finish(self) -> dict[K, V]:
        return self._elems


class DictMergeBuilder(Generic[K, V]):
    """Merge mappings; later keys win."""

    def __init__(self, initial: dict[K, V] | None = None) -> None:
        self._elems: dict[K, V] = {} if initial is None else initial

    def add(self, elem: Mapping[K, V]) -> None:
        self._elems.update(elem)

    def finish(self) -> dict[K, V]:
        return self._elems


class FrozenDictEntryBuilder(Generic[K, V]):
    """Collect ``(key, value)`` pairs into an immutable ``frozendict``."""

    def __init__(self) -> None:
        self._entries: dict[K, V] = {}

    def add(self, elem: tuple[K, V]) -> None:
        key, val = elem
        self._entries[key] = val

    def finish(self) -> frozendict:
        return frozendict(self._entries)


class SetValueBuilder(Generic[T]):
    def __init__(self, initial: set[T] | None = None) -> None:
        self._elems: set[T] = set() if initial is None else initial

    def add(self, elem: T) -> None:
        self._elems.add(elem)

    def finish(self) -> set[T]:
        return self._elems


class SetUnionBuilder(Generic[T]):
    def __init__(self, initial: set[T] | None = None) -> None:
        self._elems: set[T] = set() if initial is None else initial

    def add(self, elem: set[T]) -> None:
        self._elems |= elem

    def finish(self) -> set[T]:
        return self._elems


class SemigroupBuilder(Generic[T]):
    """Fold every added element into ``initial`` with :func:`cmb`."""

    def __init__(self, initial: T) -> None:
        self._val = initial

    def add(self, elem: T) -> None:
        self._val = cmb(self._val, elem)

    def finish(self) -> T:
        return self._val


class NoOpBuilder:
    """Discard every element and finish with ``None``."""

    def add(self, elem: Any) -> None:
        return None

    def finish(self) -> None:
        return None


__all__ = [
    "Builder",
    "DictEntryBuilder",
    "DictMergeBuilder",
    "FrozenDictEntryBuilder",
    "ListBuilder",
    "ListConcatBuilder",
    "ListIndexBuilder",
    "ListPushBuilder",
    "ListUnshiftBuilder",
    "NoOpBuilder",
    "SemigroupBuilder",
    "SetUnionBuilder",
    "SetValueBuilder",
    "StringAppendBuilder",
    "StringBuilder",
    "StringPrependBuilder",
]
