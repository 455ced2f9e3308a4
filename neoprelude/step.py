"""
The step protocol between generator procedures and the interpreters.

A procedure yields values; the interpreter converts each one to a :data:`Step`
and decides whether to resume the procedure or halt it:

- ``FinalOnly(value)``: resume with ``value``.
- ``Both(aux, value)``: merge ``aux`` into the accumulated state, resume with
  ``value``.
- ``AuxOnly(aux)``: merge ``aux`` and halt.

A finished run is summarised as an :data:`Outcome`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeAlias, TypeVar, Union, runtime_checkable

from neoprelude.errors import NotSteppableError

A = TypeVar("A")
T = TypeVar("T")


@dataclass(frozen=True)
class FinalOnly(Generic[T]):
    """A plain success: resume with ``value``."""

    value: T


@dataclass(frozen=True)
class AuxOnly(Generic[A]):
    """A halt carrying only auxiliary data."""

    aux: A


@dataclass(frozen=True)
class Both(Generic[A, T]):
    """A success that also carries auxiliary data to merge."""

    aux: A
    value: T


Step: TypeAlias = Union[FinalOnly[Any], AuxOnly[Any], Both[Any, Any]]

_STEP_TYPES = (FinalOnly, AuxOnly, Both)


@runtime_checkable
class Steppable(Protocol):
    """Anything the interpreters can drive."""

    def to_step(self) -> Step: ...


def to_step(value: Any) -> Step:
    """Convert a yielded value to a :data:`Step`.

    Raises:
        NotSteppableError: if ``value`` is neither a step nor steppable.
    """

    if isinstance(value, _STEP_TYPES):
        return value
    method = getattr(value, "to_step", None)
    if method is None or not callable(method):
        raise NotSteppableError(value)
    step = method()
    if not isinstance(step, _STEP_TYPES):
        raise NotSteppableError(value)
    return step


@dataclass(frozen=True)
class Halted(Generic[A]):
    """The run stopped early; ``aux`` is everything accumulated up to and
    including cleanup."""

    aux: A


@dataclass(frozen=True)
class Completed(Generic[T]):
    """The run finished without any auxiliary data."""

    value: T


@dataclass(frozen=True)
class CompletedWithAux(Generic[T, A]):
    """The run finished and accumulated auxiliary data along the way."""

    value: T
    aux: A


Outcome: TypeAlias = Union[Halted[Any], Completed[Any], CompletedWithAux[Any, Any]]


__all__ = [
    "AuxOnly",
    "Both",
    "Completed",
    "CompletedWithAux",
    "FinalOnly",
    "Halted",
    "Outcome",
    "Step",
    "Steppable",
    "to_step",
]
